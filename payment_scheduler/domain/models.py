"""Domain models - pure Python dataclasses representing payment obligations and schedules"""

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from enum import Enum
from typing import List, Optional

GENERAL_REASON = "一般項目"


class CategoryType(str, Enum):
    """Category tag of a payment item; only rent and insurance carry priority"""

    RENT = "rent"
    INSURANCE = "insurance"  # Taiwan labor/health insurance
    UTILITY = "utility"
    GENERAL = "general"

    @classmethod
    def parse(cls, value: object) -> Optional["CategoryType"]:
        """Map a raw tag to a member, or None for anything unrecognized"""
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            return None


class PaymentType(str, Enum):
    """Payment structure of an item"""

    SINGLE = "single"
    MONTHLY = "monthly"
    INSTALLMENT = "installment"

    @classmethod
    def parse(cls, value: object) -> Optional["PaymentType"]:
        """Map a raw tag to a member, or None for anything unrecognized"""
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            return None


class PriorityLevel(str, Enum):
    """Coarse urgency tier derived from the numeric priority"""

    CRITICAL = "critical"
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


@dataclass
class PaymentObligation:
    """One outstanding payment item, as supplied by the storage layer"""

    id: int
    item_name: str
    total_amount: Decimal
    paid_amount: Decimal
    remaining_amount: Decimal
    is_overdue: bool = False
    overdue_days: int = 0
    has_late_fee: bool = False
    category_type: Optional[CategoryType] = None
    payment_type: Optional[PaymentType] = None
    due_date: date | str | None = None  # Malformed strings are tolerated
    project_name: Optional[str] = None


@dataclass
class ScoredObligation(PaymentObligation):
    """Obligation plus its urgency score, tier and explanation"""

    priority: int = 0
    priority_level: PriorityLevel = PriorityLevel.LOW
    reason: str = GENERAL_REASON


@dataclass
class ScheduleResult:
    """Output of the smart scheduler for one budget"""

    budget: Decimal
    total_needed: Decimal
    is_over_budget: bool
    scheduled_total: Decimal
    remaining_budget: Decimal
    scheduled_items: List[ScoredObligation] = field(default_factory=list)
    deferred_items: List[ScoredObligation] = field(default_factory=list)
    critical_items: List[ScoredObligation] = field(default_factory=list)


@dataclass
class RescheduleProposal:
    """Suggested new date for one overdue obligation"""

    obligation: ScoredObligation
    original_date: Optional[date]
    new_date: date
    note: str
