"""Prometheus metrics for budget outcomes, priority mix, and overdue backlog"""

from prometheus_client import Counter, Histogram

from payment_scheduler.domain.models import ScheduleResult

# Schedule metrics
schedule_counter = Counter(
    "payment_schedule_total",
    "Total smart schedules generated",
    ["outcome"],  # within_budget | over_budget
)

schedule_item_counter = Counter(
    "payment_schedule_items",
    "Obligations placed by the scheduler",
    ["bucket"],  # scheduled | deferred
)

priority_level_counter = Counter(
    "payment_priority_level",
    "Scored obligations by priority tier",
    ["level"],  # critical | high | medium | low
)

# Overdue metrics
overdue_items_counter = Counter(
    "payment_overdue_items_total",
    "Overdue obligations surfaced for rescheduling",
)

reschedule_proposal_counter = Counter(
    "payment_reschedule_proposals_total",
    "Reschedule proposals produced for overdue obligations",
)

# Latency
operation_duration_histogram = Histogram(
    "payment_scheduler_operation_seconds",
    "Scheduling operation latency",
    ["operation"],  # schedule | overdue_view | reschedule
    buckets=[0.001, 0.005, 0.01, 0.05, 0.1, 0.5, 1.0],
)


def record_schedule(result: ScheduleResult) -> None:
    """Record budget outcome and the priority mix of one schedule"""
    outcome = "over_budget" if result.is_over_budget else "within_budget"
    schedule_counter.labels(outcome=outcome).inc()

    schedule_item_counter.labels(bucket="scheduled").inc(len(result.scheduled_items))
    schedule_item_counter.labels(bucket="deferred").inc(len(result.deferred_items))

    for item in result.scheduled_items + result.deferred_items:
        priority_level_counter.labels(level=item.priority_level.value).inc()
