"""Monetary amount helpers"""

from decimal import Decimal


def to_decimal(value: Decimal | int | float | str) -> Decimal:
    """
    Coerce an amount to Decimal without binary float drift.

    Floats go through str() so 0.1 becomes Decimal("0.1"), not
    Decimal("0.1000000000000000055511151231257827...").
    """
    if isinstance(value, Decimal):
        return value
    if isinstance(value, float):
        return Decimal(str(value))
    return Decimal(value)


def safe_decimal(value: Decimal | int | float | str | None) -> Decimal:
    """Like to_decimal, but None and blank strings parse as zero"""
    if value is None or (isinstance(value, str) and not value.strip()):
        return Decimal("0")
    return to_decimal(value)
