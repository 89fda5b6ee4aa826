"""Structured JSON logging for scheduling runs"""

import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict, TextIO
from pythonjsonlogger import jsonlogger

from payment_scheduler.config import settings


class CustomJsonFormatter(jsonlogger.JsonFormatter):
    """Custom JSON formatter with timestamp and service metadata"""

    def add_fields(self, log_record: Dict[str, Any], record: logging.LogRecord, message_dict: Dict[str, Any]) -> None:
        super().add_fields(log_record, record, message_dict)
        log_record["timestamp"] = datetime.now(timezone.utc).isoformat()
        log_record["level"] = record.levelname
        log_record["service"] = settings.service_name


def setup_logging(level: str = "INFO", stream: TextIO = sys.stdout) -> None:
    """Configure structured JSON logging"""
    logger = logging.getLogger()
    logger.setLevel(level)

    # Remove existing handlers
    logger.handlers.clear()

    # JSON handler, stdout unless a stream is given
    handler = logging.StreamHandler(stream)
    formatter = CustomJsonFormatter(
        "%(timestamp)s %(level)s %(name)s %(message)s"
    )
    handler.setFormatter(formatter)
    logger.addHandler(handler)


logger = logging.getLogger("payment_scheduler")


def log_schedule(
    budget: float,
    total_needed: float,
    scheduled_count: int,
    deferred_count: int,
    critical_count: int,
    duration_ms: float,
) -> None:
    """Log structured schedule outcome for analysis"""
    logger.info(
        "Schedule generated",
        extra={
            "step": "schedule_complete",
            "budget": budget,
            "total_needed": total_needed,
            "budget_outcome": "over_budget" if total_needed > budget else "within_budget",
            "scheduled_count": scheduled_count,
            "deferred_count": deferred_count,
            "critical_count": critical_count,
            "duration_ms": duration_ms,
        },
    )


def log_overdue_view(overdue_count: int, duration_ms: float) -> None:
    """Log how many overdue items were surfaced"""
    logger.info(
        "Overdue items ranked",
        extra={
            "step": "overdue_view",
            "overdue_count": overdue_count,
            "duration_ms": duration_ms,
        },
    )


def log_reschedule(target_date: str | None, proposal_count: int, duration_ms: float) -> None:
    """Log an overdue reschedule plan"""
    logger.info(
        "Overdue reschedule planned",
        extra={
            "step": "reschedule_planned",
            "target_date": target_date,
            "proposal_count": proposal_count,
            "duration_ms": duration_ms,
        },
    )
