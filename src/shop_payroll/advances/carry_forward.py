from __future__ import annotations

from typing import Iterable, Optional

from ..common.datetime_utils import previous_period
from .model import AdvanceDeduction


def find_advance(
    staff_id: str,
    advances: Iterable[AdvanceDeduction],
    month: int,
    year: int,
) -> Optional[AdvanceDeduction]:
    for adv in advances:
        if adv.staff_id == staff_id and adv.month == month and adv.year == year:
            return adv
    return None


def previous_month_advance(
    staff_id: str,
    advances: Iterable[AdvanceDeduction],
    month: int,
    year: int,
) -> int:
    """Closing balance of the month before (month, year), or 0 without a record."""
    prev_month, prev_year = previous_period(month, year)
    previous = find_advance(staff_id, advances, prev_month, prev_year)
    return previous.new_advance if previous else 0
