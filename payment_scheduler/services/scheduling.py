"""Scheduling service - wires storage records, the priority engine, and observability"""

import logging
import time
from datetime import date
from decimal import Decimal
from typing import Any, Dict, Iterable, List, Mapping

from payment_scheduler.domain.exceptions import DomainException
from payment_scheduler.domain.models import RescheduleProposal, ScheduleResult, ScoredObligation
from payment_scheduler.domain.overdue import plan_overdue_reschedule, select_overdue_for_reschedule
from payment_scheduler.domain.scheduler import generate_smart_schedule
from payment_scheduler.infrastructure.observability.logging import (
    log_overdue_view,
    log_reschedule,
    log_schedule,
)
from payment_scheduler.infrastructure.observability.metrics import (
    operation_duration_histogram,
    overdue_items_counter,
    record_schedule,
    reschedule_proposal_counter,
)
from payment_scheduler.infrastructure.payment_items import build_obligations
from payment_scheduler.schemas import ScheduleRequest, ScheduleResultSchema

logger = logging.getLogger(__name__)


def _observe(operation: str, start_time: float) -> float:
    duration = time.time() - start_time
    operation_duration_histogram.labels(operation=operation).observe(duration)
    return duration * 1000


def _record_and_log_schedule(result: ScheduleResult, start_time: float) -> None:
    duration_ms = _observe("schedule", start_time)
    record_schedule(result)
    log_schedule(
        budget=float(result.budget),
        total_needed=float(result.total_needed),
        scheduled_count=len(result.scheduled_items),
        deferred_count=len(result.deferred_items),
        critical_count=len(result.critical_items),
        duration_ms=duration_ms,
    )


def suggest_schedule(
    records: Iterable[Mapping[str, Any]],
    budget: Decimal | int | float,
    today: date | None = None,
) -> ScheduleResult:
    """
    Build a smart schedule straight from stored payment-item records.

    Flow:
    1. Drop deleted/completed/fully paid items and derive overdue state
    2. Score and allocate the budget by priority
    3. Record metrics and log the outcome

    Raises:
        InvalidObligationDataError: A record could not be converted
    """
    start_time = time.time()

    try:
        obligations = build_obligations(records, today)
    except DomainException as e:
        logger.warning(f"Cannot build schedule: {e}")
        raise

    result = generate_smart_schedule(obligations, budget, as_of=today)
    _record_and_log_schedule(result, start_time)
    return result


def schedule_from_payload(payload: Mapping[str, Any], today: date | None = None) -> Dict[str, Any]:
    """
    Validate a camelCase schedule request and return the camelCase response.

    Raises:
        pydantic.ValidationError: Payload is malformed (e.g. NaN amounts)
    """
    start_time = time.time()

    request = ScheduleRequest.model_validate(payload)
    obligations = [item.to_domain() for item in request.items]

    result = generate_smart_schedule(obligations, request.budget, as_of=today)
    _record_and_log_schedule(result, start_time)

    return ScheduleResultSchema.from_domain(result).model_dump(by_alias=True, mode="json")


def overdue_view(records: Iterable[Mapping[str, Any]], today: date | None = None) -> List[ScoredObligation]:
    """Rank the overdue items among stored records, most urgent first"""
    start_time = time.time()

    obligations = build_obligations(records, today)
    overdue = select_overdue_for_reschedule(obligations, as_of=today)

    overdue_items_counter.inc(len(overdue))
    log_overdue_view(len(overdue), _observe("overdue_view", start_time))
    return overdue


def auto_reschedule(
    records: Iterable[Mapping[str, Any]],
    target_year: int,
    target_month: int,
    today: date | None = None,
) -> List[RescheduleProposal]:
    """
    Propose moving every overdue item into the target month.

    Raises:
        InvalidRescheduleTargetError: Target month does not exist
    """
    start_time = time.time()

    obligations = build_obligations(records, today)
    try:
        proposals = plan_overdue_reschedule(obligations, target_year, target_month, as_of=today)
    except DomainException as e:
        logger.warning(f"Reschedule rejected: {e}")
        raise

    reschedule_proposal_counter.inc(len(proposals))
    target_date = proposals[0].new_date.isoformat() if proposals else None
    log_reschedule(target_date, len(proposals), _observe("reschedule", start_time))
    return proposals
