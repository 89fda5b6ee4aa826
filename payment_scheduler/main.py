"""
Command-line entry point for the payment scheduler.

Usage:
    payment-scheduler schedule --input request.json
    payment-scheduler overdue --input payment_items.json
    payment-scheduler reschedule --input payment_items.json --year 2026 --month 11

`schedule` takes a camelCase request ({"budget": ..., "items": [...]});
`overdue` and `reschedule` take a list of stored payment-item records.
Pass --as-of YYYY-MM-DD to pin "today".
"""

import argparse
import json
import logging
import sys
from datetime import date
from pathlib import Path
from typing import List, Optional

from pydantic import ValidationError

from payment_scheduler.config import settings
from payment_scheduler.domain.exceptions import DomainException, InvalidObligationDataError
from payment_scheduler.infrastructure.observability.logging import setup_logging
from payment_scheduler.schemas import RescheduleProposalSchema, RescheduleRequest, ScoredObligationSchema
from payment_scheduler.services.scheduling import auto_reschedule, overdue_view, schedule_from_payload

logger = logging.getLogger(__name__)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="payment-scheduler", description="Payment priority and budget scheduling")
    parser.add_argument("--as-of", type=date.fromisoformat, default=None, help="Reference date (YYYY-MM-DD)")

    subparsers = parser.add_subparsers(dest="command", required=True)

    schedule = subparsers.add_parser("schedule", help="Allocate a budget across obligations")
    schedule.add_argument("--input", type=Path, required=True)

    overdue = subparsers.add_parser("overdue", help="Rank overdue payment items")
    overdue.add_argument("--input", type=Path, required=True)

    reschedule = subparsers.add_parser("reschedule", help="Move overdue items into a target month")
    reschedule.add_argument("--input", type=Path, required=True)
    reschedule.add_argument("--year", type=int, required=True)
    reschedule.add_argument("--month", type=int, required=True)

    return parser.parse_args(argv)


def run(args: argparse.Namespace) -> object:
    """Execute one command and return a JSON-serializable result"""
    payload = json.loads(args.input.read_text(encoding="utf-8"))

    if args.command == "schedule":
        return schedule_from_payload(payload, today=args.as_of)

    if not isinstance(payload, list):
        raise InvalidObligationDataError(
            f"Expected a list of payment item records, got {type(payload).__name__}"
        )

    if args.command == "overdue":
        ranked = overdue_view(payload, today=args.as_of)
        return [ScoredObligationSchema.from_domain(i).model_dump(by_alias=True, mode="json") for i in ranked]

    request = RescheduleRequest(target_year=args.year, target_month=args.month)
    proposals = auto_reschedule(payload, request.target_year, request.target_month, today=args.as_of)
    return [RescheduleProposalSchema.from_domain(p).model_dump(by_alias=True, mode="json") for p in proposals]


def main(argv: Optional[List[str]] = None) -> int:
    setup_logging(settings.log_level, stream=sys.stderr)
    args = parse_args(argv)

    try:
        output = run(args)
    except (ValidationError, DomainException) as e:
        logger.error(f"Invalid input: {e}")
        return 2
    except (OSError, json.JSONDecodeError) as e:
        logger.error(f"Cannot read input: {e}")
        return 1

    json.dump(output, sys.stdout, ensure_ascii=False, indent=2)
    sys.stdout.write("\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
