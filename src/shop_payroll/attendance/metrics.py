from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable

from ..common.datetime_utils import days_in_month, in_period
from ..core.enums import AttendanceStatus
from .model import AttendanceRecord, FullTimeAttendance


@dataclass(frozen=True)
class AttendanceMetrics:
    """Monthly attendance totals for one full-time staff member.

    ``half_days`` is a count of half-day entries, not their value.
    ``total_present_days`` keeps its fraction; pro-ration depends on it.
    """

    staff_id: str
    year: int
    month: int
    present_days: int
    half_days: int
    total_present_days: float
    leave_days: int
    sunday_absents: int
    days_in_month: int


def calculate_attendance_metrics(
    staff_id: str,
    attendance: Iterable[AttendanceRecord],
    year: int,
    month: int,
) -> AttendanceMetrics:
    month_days = days_in_month(year, month)

    present_value = 0.0
    half_value = 0.0
    sunday_absents = 0
    for record in attendance:
        if not isinstance(record, FullTimeAttendance):
            continue
        if record.staff_id != staff_id or not in_period(record.work_date, year, month):
            continue

        if record.status == AttendanceStatus.PRESENT:
            present_value += record.attendance_value or 1
        elif record.status == AttendanceStatus.HALF_DAY:
            half_value += record.attendance_value or 0.5
        elif record.status == AttendanceStatus.ABSENT and record.is_sunday:
            sunday_absents += 1

    total_present = present_value + half_value
    return AttendanceMetrics(
        staff_id=staff_id,
        year=year,
        month=month,
        present_days=math.floor(present_value),
        half_days=math.floor(half_value * 2),
        total_present_days=total_present,
        leave_days=month_days - math.floor(total_present),
        sunday_absents=sunday_absents,
        days_in_month=month_days,
    )
