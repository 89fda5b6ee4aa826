"""Payment priority engine - scores how urgently each obligation should be paid"""

from dataclasses import fields
from datetime import date
from typing import List, Optional

from payment_scheduler.config import settings
from payment_scheduler.domain.models import (
    GENERAL_REASON,
    CategoryType,
    PaymentObligation,
    PaymentType,
    PriorityLevel,
    ScoredObligation,
)
from payment_scheduler.utils.date_utils import days_until, local_today, parse_iso_date

# Points per rule. The presentation layer shows these tiers verbatim, so the
# values and reason fragments are part of the contract.
OVERDUE_POINTS = 100
LATE_FEE_POINTS = 80
RENT_POINTS = 60
INSURANCE_POINTS = 60
INSTALLMENT_POINTS = 30
MONTHLY_POINTS = 15
DUE_WITHIN_3_DAYS_POINTS = 40
DUE_WITHIN_7_DAYS_POINTS = 20

REASON_SEPARATOR = "、"


def determine_priority_level(priority: int) -> PriorityLevel:
    """
    Map a priority score to its tier.

    Tiers:
    - 100+:    critical (anything overdue lands here)
    - 50 - 99: high (late-fee risk, rent, insurance)
    - 15 - 49: medium (contractual installments, monthly items, due soon)
    - 0 - 14:  low
    """
    if priority >= 100:
        return PriorityLevel.CRITICAL
    elif priority >= 50:
        return PriorityLevel.HIGH
    elif priority >= 15:
        return PriorityLevel.MEDIUM
    else:
        return PriorityLevel.LOW


def _due_date_points(due_date, as_of: date) -> tuple[int, Optional[str]]:
    """Deadline pressure: 40 points within 3 days, 20 within 7, else nothing"""
    due = parse_iso_date(due_date)
    if due is None:
        return 0, None

    remaining_days = days_until(due, as_of)
    if 0 <= remaining_days <= 3:
        return DUE_WITHIN_3_DAYS_POINTS, "3天內到期"
    elif 4 <= remaining_days <= 7:
        return DUE_WITHIN_7_DAYS_POINTS, "7天內到期"
    return 0, None


def score_obligation(obligation: PaymentObligation, as_of: date | None = None) -> ScoredObligation:
    """
    Score a single payment obligation.

    Every matching rule adds its points; rules never cancel each other.
    Reason fragments are listed in rule order, not by weight:

        overdue (100) -> late fee (80) -> rent (60) -> insurance (60)
        -> installment (30) -> monthly (15) -> due in 0-3 days (40)
        -> due in 4-7 days (20)

    Args:
        obligation: Item to score; it is not modified
        as_of: Reference date for due-date proximity (default: today in the
            configured timezone)

    Returns:
        A ScoredObligation carrying every input field plus priority,
        priority_level and reason

    Example:
        overdue 3 days + late fee + rent -> 240, critical,
        "逾期3天、罰款風險、租金合約"
    """
    if as_of is None:
        as_of = local_today(settings.timezone)

    priority = 0
    reasons: List[str] = []

    if obligation.is_overdue:
        priority += OVERDUE_POINTS
        reasons.append(f"逾期{max(obligation.overdue_days or 0, 0)}天")

    if obligation.has_late_fee:
        priority += LATE_FEE_POINTS
        reasons.append("罰款風險")

    category = CategoryType.parse(obligation.category_type)
    if category is CategoryType.RENT:
        priority += RENT_POINTS
        reasons.append("租金合約")
    elif category is CategoryType.INSURANCE:
        priority += INSURANCE_POINTS
        reasons.append("勞健保費")

    payment_type = PaymentType.parse(obligation.payment_type)
    if payment_type is PaymentType.INSTALLMENT:
        priority += INSTALLMENT_POINTS
        reasons.append("分期合約")
    elif payment_type is PaymentType.MONTHLY:
        priority += MONTHLY_POINTS
        reasons.append("月付項目")

    due_points, due_reason = _due_date_points(obligation.due_date, as_of)
    if due_points:
        priority += due_points
        reasons.append(due_reason)

    # Copy field by field so the caller's object stays untouched
    base = {f.name: getattr(obligation, f.name) for f in fields(PaymentObligation)}

    return ScoredObligation(
        **base,
        priority=priority,
        priority_level=determine_priority_level(priority),
        reason=REASON_SEPARATOR.join(reasons) or GENERAL_REASON,
    )


def sort_by_priority(scored: List[ScoredObligation]) -> List[ScoredObligation]:
    """Descending priority; ties keep their input order (sorted() is stable)"""
    return sorted(scored, key=lambda item: item.priority, reverse=True)
