from __future__ import annotations

import calendar
from datetime import date, datetime
from typing import Union

from ..core.exceptions import ValidationError

DateLike = Union[date, str]


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    try:
        return datetime.strptime(value, "%Y-%m-%d").date()
    except (TypeError, ValueError):
        raise ValidationError(f"Invalid date (expected YYYY-MM-DD): {value!r}")


def as_date(value: DateLike) -> date:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return parse_iso_date(value)


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()


def is_sunday(value: DateLike) -> bool:
    return as_date(value).isoweekday() == 7


def require_month(month: int) -> int:
    """Months are 0-indexed (0 = January) everywhere in this package."""
    if not isinstance(month, int) or isinstance(month, bool) or not 0 <= month <= 11:
        raise ValidationError(f"Month must be in 0..11, got {month!r}")
    return month


def require_year(year: int) -> int:
    if not isinstance(year, int) or isinstance(year, bool) or not 1 <= year <= 9999:
        raise ValidationError(f"Invalid year: {year!r}")
    return year


def days_in_month(year: int, month: int) -> int:
    require_year(year)
    require_month(month)
    return calendar.monthrange(year, month + 1)[1]


def in_period(value: date, year: int, month: int) -> bool:
    return value.year == year and value.month == month + 1


def previous_period(month: int, year: int) -> tuple[int, int]:
    """(month, year) of the month before, wrapping January into last December."""
    require_month(month)
    if month == 0:
        return 11, year - 1
    return month - 1, year


def week_of_month(value: date) -> int:
    """1-based week number inside the month, weeks starting on Monday."""
    first_weekday = value.replace(day=1).weekday()
    return (value.day - 1 + first_weekday) // 7 + 1
