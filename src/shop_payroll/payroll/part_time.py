from __future__ import annotations

from itertools import groupby
from typing import Iterable, Optional

from ..attendance.model import AttendanceRecord, PartTimeAttendance
from ..common.datetime_utils import in_period, require_month, require_year, week_of_month
from ..common.money import round_to_nearest_10
from ..core.enums import AttendanceStatus, Location, Shift
from .model import DailySalary, PartTimeSalaryDetail, WeeklySalary
from .rates import RateTable


def _part_time_for_month(attendance: Iterable[AttendanceRecord], year: int, month: int):
    for record in attendance:
        if isinstance(record, PartTimeAttendance) and in_period(record.work_date, year, month):
            yield record


def part_time_staff_for_month(
    attendance: Iterable[AttendanceRecord], year: int, month: int
) -> dict[str, Location]:
    """Part-timers seen in the month, in order of first entry, with their latest location."""
    staff: dict[str, Location] = {}
    for record in _part_time_for_month(attendance, year, month):
        staff[record.staff_name] = record.location
    return staff


def _daily_salary(record: PartTimeAttendance, rates: RateTable) -> DailySalary:
    if record.salary_override and record.salary is not None:
        salary = int(record.salary)
    else:
        salary = rates.entry_salary(record.shift)
    return DailySalary(
        work_date=record.work_date,
        day_of_week=record.work_date.strftime("%A"),
        is_present=record.status == AttendanceStatus.PRESENT,
        is_sunday=record.is_sunday,
        salary=salary,
        is_override=record.salary_override,
        shift=record.shift,
    )


def weekly_breakdown(records: Iterable[PartTimeAttendance], rates: RateTable) -> tuple[WeeklySalary, ...]:
    """Group entries into Monday-start weeks of the month, each with its subtotal.

    Week totals are plain sums of the day figures; only the monthly total is
    rounded, so the weeks always add up to it before rounding.
    """
    ordered = sorted(records, key=lambda r: r.work_date)
    weeks = []
    for week, group in groupby(ordered, key=lambda r: week_of_month(r.work_date)):
        days = tuple(_daily_salary(r, rates) for r in group)
        weeks.append(WeeklySalary(week=week, days=days, week_total=sum(d.salary for d in days)))
    return tuple(weeks)


def calculate_part_time_salary(
    staff_name: str,
    location: Location,
    attendance: Iterable[AttendanceRecord],
    year: int,
    month: int,
    rates: Optional[RateTable] = None,
) -> PartTimeSalaryDetail:
    """Monthly earnings for one part-timer.

    Without overrides the total is ``days * rate_per_day + shifts *
    rate_per_shift``; an overridden entry replaces its own share of that.
    """
    require_month(month)
    require_year(year)
    rates = rates or RateTable()
    present = [
        r
        for r in _part_time_for_month(attendance, year, month)
        if r.staff_name == staff_name and r.status == AttendanceStatus.PRESENT
    ]

    total_days = 0
    total_shifts = 0
    for record in present:
        if record.shift == Shift.BOTH:
            total_days += 1
            total_shifts += 2
        elif record.shift in (Shift.MORNING, Shift.EVENING):
            total_shifts += 1

    weeks = weekly_breakdown(present, rates)
    return PartTimeSalaryDetail(
        staff_name=staff_name,
        location=Location(location).value,
        total_days=total_days,
        total_shifts=total_shifts,
        rate_per_day=rates.rate_per_day,
        rate_per_shift=rates.rate_per_shift,
        total_earnings=round_to_nearest_10(sum(w.week_total for w in weeks)),
        month=month,
        year=year,
        weekly_breakdown=weeks,
    )
