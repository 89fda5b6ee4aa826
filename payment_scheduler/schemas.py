"""Pydantic schemas for validating obligation payloads and serializing results"""

from datetime import date
from decimal import Decimal
from typing import Annotated, List, Optional

from pydantic import BaseModel, ConfigDict, Field, PlainSerializer, field_validator
from pydantic.alias_generators import to_camel

from payment_scheduler.domain.models import (
    CategoryType,
    PaymentObligation,
    PaymentType,
    PriorityLevel,
    RescheduleProposal,
    ScheduleResult,
    ScoredObligation,
)

# Decimal internally, plain JSON number on the wire
Money = Annotated[Decimal, PlainSerializer(float, return_type=float, when_used="json")]


class CamelModel(BaseModel):
    """Base model speaking the camelCase field names used by the web client"""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ObligationSchema(CamelModel):
    """One payment obligation as received from the storage layer"""

    id: int
    item_name: str
    total_amount: Money
    paid_amount: Money = Decimal("0")
    remaining_amount: Optional[Money] = None  # Derived from total - paid when omitted
    is_overdue: bool = False
    overdue_days: int = 0
    has_late_fee: bool = False
    category_type: Optional[CategoryType] = None
    payment_type: Optional[PaymentType] = None
    due_date: Optional[str] = None
    project_name: Optional[str] = None

    @field_validator("category_type", mode="before")
    @classmethod
    def _unknown_category_is_untagged(cls, value):
        return CategoryType.parse(value)

    @field_validator("payment_type", mode="before")
    @classmethod
    def _unknown_payment_type_is_untagged(cls, value):
        return PaymentType.parse(value)

    @field_validator("due_date", mode="before")
    @classmethod
    def _dates_as_iso_strings(cls, value):
        if isinstance(value, date):
            return value.isoformat()
        if value is not None and not isinstance(value, str):
            return str(value)  # Kept as-is; the scorer ignores what it cannot parse
        return value

    def to_domain(self) -> PaymentObligation:
        remaining = self.remaining_amount
        if remaining is None:
            remaining = self.total_amount - self.paid_amount
        return PaymentObligation(
            id=self.id,
            item_name=self.item_name,
            total_amount=self.total_amount,
            paid_amount=self.paid_amount,
            remaining_amount=remaining,
            is_overdue=self.is_overdue,
            overdue_days=self.overdue_days,
            has_late_fee=self.has_late_fee,
            category_type=self.category_type,
            payment_type=self.payment_type,
            due_date=self.due_date,
            project_name=self.project_name,
        )


class ScheduleRequest(CamelModel):
    """Budget plus the obligations competing for it"""

    budget: Money = Field(..., description="Amount available this cycle; zero or negative defers everything")
    items: List[ObligationSchema] = Field(default_factory=list)


class ScoredObligationSchema(ObligationSchema):
    """Obligation with the score fields the UI renders as badges and tooltips"""

    priority: int
    priority_level: PriorityLevel
    reason: str

    @classmethod
    def from_domain(cls, item: ScoredObligation) -> "ScoredObligationSchema":
        return cls(
            id=item.id,
            item_name=item.item_name,
            total_amount=item.total_amount,
            paid_amount=item.paid_amount,
            remaining_amount=item.remaining_amount,
            is_overdue=item.is_overdue,
            overdue_days=item.overdue_days,
            has_late_fee=item.has_late_fee,
            category_type=item.category_type,
            payment_type=item.payment_type,
            due_date=item.due_date,
            project_name=item.project_name,
            priority=item.priority,
            priority_level=item.priority_level,
            reason=item.reason,
        )


class ScheduleResultSchema(CamelModel):
    """Smart schedule response"""

    budget: Money
    total_needed: Money
    is_over_budget: bool
    critical_items: List[ScoredObligationSchema]
    scheduled_items: List[ScoredObligationSchema]
    deferred_items: List[ScoredObligationSchema]
    scheduled_total: Money
    remaining_budget: Money

    @classmethod
    def from_domain(cls, result: ScheduleResult) -> "ScheduleResultSchema":
        return cls(
            budget=result.budget,
            total_needed=result.total_needed,
            is_over_budget=result.is_over_budget,
            critical_items=[ScoredObligationSchema.from_domain(i) for i in result.critical_items],
            scheduled_items=[ScoredObligationSchema.from_domain(i) for i in result.scheduled_items],
            deferred_items=[ScoredObligationSchema.from_domain(i) for i in result.deferred_items],
            scheduled_total=result.scheduled_total,
            remaining_budget=result.remaining_budget,
        )


class RescheduleRequest(CamelModel):
    """Target month for moving overdue items"""

    target_year: int = Field(..., ge=1, le=9999)
    target_month: int = Field(..., ge=1, le=12)


class RescheduleProposalSchema(CamelModel):
    """Single overdue item and where it should move"""

    item: ScoredObligationSchema
    original_date: Optional[date] = None
    new_date: date
    note: str

    @classmethod
    def from_domain(cls, proposal: RescheduleProposal) -> "RescheduleProposalSchema":
        return cls(
            item=ScoredObligationSchema.from_domain(proposal.obligation),
            original_date=proposal.original_date,
            new_date=proposal.new_date,
            note=proposal.note,
        )
