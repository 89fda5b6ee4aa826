"""Unit tests for boundary schemas"""

import pytest
from datetime import date
from decimal import Decimal
from pydantic import ValidationError
from payment_scheduler.domain.models import CategoryType, PaymentType, PriorityLevel
from payment_scheduler.domain.overdue import plan_overdue_reschedule
from payment_scheduler.domain.scheduler import generate_smart_schedule
from payment_scheduler.schemas import (
    ObligationSchema,
    RescheduleProposalSchema,
    RescheduleRequest,
    ScheduleRequest,
    ScheduleResultSchema,
)


def test_obligation_schema_reads_camel_case():
    schema = ObligationSchema.model_validate(
        {
            "id": 7,
            "itemName": "房租",
            "totalAmount": "18000",
            "paidAmount": 3000,
            "remainingAmount": "15000",
            "isOverdue": True,
            "overdueDays": 4,
            "hasLateFee": True,
            "categoryType": "rent",
            "paymentType": "monthly",
            "dueDate": "2026-10-13",
            "projectName": "浯島文旅",
        }
    )

    obligation = schema.to_domain()

    assert obligation.id == 7
    assert obligation.remaining_amount == Decimal("15000")
    assert obligation.category_type == CategoryType.RENT
    assert obligation.payment_type == PaymentType.MONTHLY
    assert obligation.due_date == "2026-10-13"
    assert obligation.project_name == "浯島文旅"


def test_unknown_tags_become_untagged():
    schema = ObligationSchema.model_validate(
        {"id": 1, "itemName": "x", "totalAmount": 1, "categoryType": "utility-ish", "paymentType": "weekly"}
    )

    assert schema.category_type is None
    assert schema.payment_type is None


def test_remaining_amount_derived_when_omitted():
    schema = ObligationSchema.model_validate({"id": 1, "itemName": "x", "totalAmount": "500.50", "paidAmount": "100.25"})

    assert schema.to_domain().remaining_amount == Decimal("400.25")


@pytest.mark.parametrize("amount", ["NaN", "Infinity", float("nan")])
def test_non_finite_amounts_are_rejected(amount):
    with pytest.raises(ValidationError):
        ObligationSchema.model_validate({"id": 1, "itemName": "x", "totalAmount": amount})


def test_schedule_request_requires_budget():
    with pytest.raises(ValidationError):
        ScheduleRequest.model_validate({"items": []})


def test_schedule_result_dumps_camel_case_numbers(make_obligation, as_of):
    result = generate_smart_schedule(
        [make_obligation(id=1, remaining_amount=6000, is_overdue=True, overdue_days=2, due_date=date(2026, 10, 15))],
        10000,
        as_of,
    )

    data = ScheduleResultSchema.from_domain(result).model_dump(by_alias=True, mode="json")

    assert data["budget"] == 10000.0
    assert data["totalNeeded"] == 6000.0
    assert data["remainingBudget"] == 4000.0
    assert data["isOverBudget"] is False
    item = data["scheduledItems"][0]
    assert item["priority"] == 100
    assert item["priorityLevel"] == PriorityLevel.CRITICAL.value
    assert item["reason"] == "逾期2天"
    assert item["dueDate"] == "2026-10-15"
    assert data["criticalItems"][0]["id"] == 1


@pytest.mark.parametrize("month", [0, 13])
def test_reschedule_request_bounds_month(month):
    with pytest.raises(ValidationError):
        RescheduleRequest.model_validate({"targetYear": 2026, "targetMonth": month})


def test_reschedule_proposal_dump(make_obligation, as_of):
    proposals = plan_overdue_reschedule(
        [make_obligation(id=5, is_overdue=True, overdue_days=1, due_date="2026-10-16")], 2026, 11, as_of
    )

    data = RescheduleProposalSchema.from_domain(proposals[0]).model_dump(by_alias=True, mode="json")

    assert data["item"]["id"] == 5
    assert data["originalDate"] == "2026-10-16"
    assert data["newDate"] == "2026-11-01"
    assert data["note"].startswith("自動重排")
