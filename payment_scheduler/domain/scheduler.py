"""Smart scheduler - fits prioritized obligations into a monthly budget"""

from datetime import date
from decimal import Decimal
from typing import List, Sequence

from payment_scheduler.domain.models import (
    PaymentObligation,
    PriorityLevel,
    ScheduleResult,
    ScoredObligation,
)
from payment_scheduler.domain.scoring import score_obligation, sort_by_priority
from payment_scheduler.utils.money import to_decimal

MUST_PAY_LEVELS = (PriorityLevel.CRITICAL, PriorityLevel.HIGH)


def generate_smart_schedule(
    obligations: Sequence[PaymentObligation],
    budget: Decimal | int | float,
    as_of: date | None = None,
) -> ScheduleResult:
    """
    Allocate a budget to obligations in priority order.

    Greedy by priority, not optimal packing: walking the sorted list, an
    item is scheduled if it still fits in what is left of the budget and
    deferred otherwise. A cheaper low-priority item is never pulled forward
    to fill a gap left by an expensive high-priority one, but the walk does
    continue after a deferral, so later items that fit are still scheduled.

    Budgets of zero or below schedule nothing.

    Example:
        budget 6000, [rent 5000, general 3000, general 4000]
        -> scheduled [rent 5000], deferred [3000, 4000], remaining 1000
    """
    budget = to_decimal(budget)

    prioritized = sort_by_priority([score_obligation(item, as_of) for item in obligations])

    total_needed = sum((to_decimal(item.remaining_amount) for item in obligations), Decimal("0"))

    scheduled: List[ScoredObligation] = []
    deferred: List[ScoredObligation] = []
    running_total = Decimal("0")

    for item in prioritized:
        amount = to_decimal(item.remaining_amount)
        if budget > 0 and running_total + amount <= budget:
            scheduled.append(item)
            running_total += amount
        else:
            deferred.append(item)

    critical = [item for item in prioritized if item.priority_level in MUST_PAY_LEVELS]

    return ScheduleResult(
        budget=budget,
        total_needed=total_needed,
        is_over_budget=total_needed > budget,
        scheduled_total=running_total,
        remaining_budget=max(budget - running_total, Decimal("0")),
        scheduled_items=scheduled,
        deferred_items=deferred,
        critical_items=critical,
    )
