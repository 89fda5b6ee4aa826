"""Pytest fixtures for testing"""

import pytest
from datetime import date, timedelta
from decimal import Decimal
from typing import Callable
from payment_scheduler.domain.models import PaymentObligation


# Pinned "today" so due-date proximity never depends on the wall clock
AS_OF = date(2026, 10, 17)


@pytest.fixture
def as_of() -> date:
    return AS_OF


@pytest.fixture
def make_obligation() -> Callable[..., PaymentObligation]:
    """Factory for a plain 10,000 obligation with no priority signals"""

    def _make(**overrides) -> PaymentObligation:
        remaining = Decimal(str(overrides.pop("remaining_amount", 10000)))
        fields = {
            "id": 1,
            "item_name": "測試項目",
            "total_amount": remaining,
            "paid_amount": Decimal("0"),
            "remaining_amount": remaining,
            "is_overdue": False,
            "overdue_days": 0,
            "has_late_fee": False,
        }
        fields.update(overrides)
        return PaymentObligation(**fields)

    return _make


@pytest.fixture
def payment_item_records() -> list[dict]:
    """Stored payment-item records as the storage layer returns them"""
    return [
        {
            "id": 1,
            "itemName": "十月房租",
            "totalAmount": "18000.00",
            "paidAmount": "0.00",
            "paymentType": "monthly",
            "startDate": (AS_OF - timedelta(days=12)).isoformat(),
            "endDate": None,
            "status": "pending",
            "isDeleted": False,
            "projectName": "浯島文旅",
        },
        {
            "id": 2,
            "itemName": "勞健保費",
            "totalAmount": "6500.00",
            "paidAmount": "1500.00",
            "paymentType": "monthly",
            "startDate": (AS_OF - timedelta(days=40)).isoformat(),
            "endDate": (AS_OF + timedelta(days=2)).isoformat(),
            "status": "partial",
            "isDeleted": False,
        },
        {
            "id": 3,
            "itemName": "冷氣分期",
            "totalAmount": "12000.00",
            "paidAmount": "4000.00",
            "paymentType": "installment",
            "startDate": (AS_OF - timedelta(days=3)).isoformat(),
            "endDate": None,
            "status": "partial",
            "isDeleted": False,
        },
        {
            "id": 4,
            "itemName": "網路費",
            "totalAmount": "999.00",
            "paidAmount": "0.00",
            "paymentType": "single",
            "startDate": (AS_OF + timedelta(days=20)).isoformat(),
            "endDate": None,
            "status": "pending",
            "isDeleted": False,
        },
        {
            "id": 5,
            "itemName": "已刪除項目",
            "totalAmount": "5000.00",
            "paidAmount": "0.00",
            "paymentType": "single",
            "startDate": (AS_OF - timedelta(days=30)).isoformat(),
            "status": "pending",
            "isDeleted": True,
        },
        {
            "id": 6,
            "itemName": "九月水電",
            "totalAmount": "2400.00",
            "paidAmount": "2400.00",
            "paymentType": "single",
            "startDate": (AS_OF - timedelta(days=20)).isoformat(),
            "status": "completed",
            "isDeleted": False,
        },
    ]
