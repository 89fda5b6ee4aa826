"""Date manipulation utilities"""

from datetime import date, datetime
from zoneinfo import ZoneInfo


def parse_iso_date(value: date | str | None) -> date | None:
    """Parse a YYYY-MM-DD value, returning None when absent or malformed"""
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        return None

    # Accept full ISO timestamps by keeping only the date part
    try:
        return date.fromisoformat(value.strip()[:10])
    except ValueError:
        return None


def local_today(timezone: str) -> date:
    """Today's date in the given IANA timezone"""
    return datetime.now(ZoneInfo(timezone)).date()


def days_until(target: date, as_of: date) -> int:
    """Whole calendar days from as_of to target (negative if target has passed)"""
    return (target - as_of).days


def date_in_month(year: int, month: int, day: int = 1) -> date:
    """Build a date in the given month (raises ValueError for impossible dates)"""
    return date(year, month, day)
