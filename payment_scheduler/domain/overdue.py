"""Overdue reschedule selection and planning"""

from datetime import date
from typing import List, Sequence

from payment_scheduler.config import settings
from payment_scheduler.domain.exceptions import InvalidRescheduleTargetError
from payment_scheduler.domain.models import PaymentObligation, RescheduleProposal, ScoredObligation
from payment_scheduler.domain.scoring import score_obligation, sort_by_priority
from payment_scheduler.utils.date_utils import date_in_month, parse_iso_date


def select_overdue_for_reschedule(
    obligations: Sequence[PaymentObligation],
    as_of: date | None = None,
) -> List[ScoredObligation]:
    """Overdue obligations only, most urgent first. Ignores budget entirely."""
    overdue = [score_obligation(item, as_of) for item in obligations if item.is_overdue]
    return sort_by_priority(overdue)


def plan_overdue_reschedule(
    obligations: Sequence[PaymentObligation],
    target_year: int,
    target_month: int,
    as_of: date | None = None,
    target_day: int | None = None,
) -> List[RescheduleProposal]:
    """
    Propose moving every overdue obligation into a target month.

    Proposals follow select_overdue_for_reschedule order and all land on the
    same day (settings.reschedule_day unless target_day is given). Nothing is
    persisted; the caller applies the proposals.

    Raises:
        InvalidRescheduleTargetError: If year/month/day is not a real date
    """
    day = target_day if target_day is not None else settings.reschedule_day
    try:
        new_date = date_in_month(target_year, target_month, day)
    except (TypeError, ValueError) as e:
        raise InvalidRescheduleTargetError(
            f"Invalid reschedule target {target_year}-{target_month}-{day}: {e}"
        ) from e

    proposals = []
    for item in select_overdue_for_reschedule(obligations, as_of):
        original_date = parse_iso_date(item.due_date)
        original_label = original_date.isoformat() if original_date else "未排期"
        proposals.append(
            RescheduleProposal(
                obligation=item,
                original_date=original_date,
                new_date=new_date,
                note=f"自動重排：原排期 {original_label}，逾期移至 {new_date.isoformat()}",
            )
        )

    return proposals
