"""Adapter turning stored payment-item records into schedulable obligations"""

from datetime import date
from decimal import InvalidOperation
from typing import Any, Iterable, List, Mapping, Optional

from payment_scheduler.config import settings
from payment_scheduler.domain.exceptions import InvalidObligationDataError
from payment_scheduler.domain.models import CategoryType, PaymentObligation, PaymentType
from payment_scheduler.utils.date_utils import local_today, parse_iso_date
from payment_scheduler.utils.money import safe_decimal

# Keyword -> category, checked in order against the item name
CATEGORY_KEYWORDS = (
    (CategoryType.RENT, ("租金", "房租")),
    (CategoryType.INSURANCE, ("勞保", "健保", "勞健保")),
    (CategoryType.UTILITY, ("水電", "電費", "水費")),
)

LATE_FEE_CATEGORIES = (CategoryType.RENT, CategoryType.INSURANCE)


def categorize_item_name(item_name: str | None) -> CategoryType:
    """Infer a category from keywords in the item name"""
    name = (item_name or "").lower()
    for category, keywords in CATEGORY_KEYWORDS:
        if any(keyword in name for keyword in keywords):
            return category
    return CategoryType.GENERAL


def build_obligation(record: Mapping[str, Any], today: date) -> Optional[PaymentObligation]:
    """
    Convert one payment-item record into an obligation.

    Returns None for records with nothing left to pay: deleted, completed,
    or already paid in full.

    Raises:
        InvalidObligationDataError: Not a mapping, missing id, or unparseable
            or non-finite amounts
    """
    if not isinstance(record, Mapping):
        raise InvalidObligationDataError(f"Payment item must be a mapping, got {type(record).__name__}")

    if record.get("isDeleted") or record.get("status") == "completed":
        return None

    try:
        item_id = int(record["id"])
        total = safe_decimal(record.get("totalAmount"))
        paid = safe_decimal(record.get("paidAmount"))
    except (KeyError, TypeError, ValueError, InvalidOperation) as e:
        raise InvalidObligationDataError(f"Invalid payment item data: {e!r}") from e

    # NaN/Infinity parse fine but cannot be compared or allocated
    if not total.is_finite() or not paid.is_finite():
        raise InvalidObligationDataError(
            f"Non-finite amount on payment item {item_id}: total={total}, paid={paid}"
        )

    if paid >= total:
        return None

    item_name = record.get("itemName") or ""
    due_date = parse_iso_date(record.get("endDate")) or parse_iso_date(record.get("startDate"))
    is_overdue = due_date is not None and due_date < today
    overdue_days = max(0, (today - due_date).days) if due_date else 0

    category = categorize_item_name(item_name)

    return PaymentObligation(
        id=item_id,
        item_name=item_name,
        total_amount=total,
        paid_amount=paid,
        remaining_amount=total - paid,
        is_overdue=is_overdue,
        overdue_days=overdue_days,
        has_late_fee=category in LATE_FEE_CATEGORIES,
        category_type=category,
        payment_type=PaymentType.parse(record.get("paymentType") or PaymentType.SINGLE.value),
        due_date=due_date,
        project_name=record.get("projectName"),
    )


def build_obligations(records: Iterable[Mapping[str, Any]], today: date | None = None) -> List[PaymentObligation]:
    """Convert records in order, dropping the ones with nothing left to pay"""
    if today is None:
        today = local_today(settings.timezone)

    obligations = []
    for record in records:
        obligation = build_obligation(record, today)
        if obligation is not None:
            obligations.append(obligation)
    return obligations
