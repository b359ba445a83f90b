from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from typing import Iterable, Optional, Sequence

from ..core.enums import AttendanceStatus, Location
from ..staff.model import StaffMember
from .model import AttendanceRecord, PartTimeAttendance

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class LocationAttendanceSummary:
    """Read-model for the dashboard: one location on one day."""

    location: Location
    work_date: date
    total: int
    present: int
    half_day: int
    absent: int
    total_present_value: float
    present_names: tuple[str, ...]
    half_day_names: tuple[str, ...]
    absent_names: tuple[str, ...]

    def to_dict(self) -> dict:
        return {
            "location": self.location.value,
            "date": self.work_date.isoformat(),
            "total": self.total,
            "present": self.present,
            "halfDay": self.half_day,
            "absent": self.absent,
            "totalPresentValue": self.total_present_value,
            "presentNames": list(self.present_names),
            "halfDayNames": list(self.half_day_names),
            "absentNames": list(self.absent_names),
        }


def _display_name(record: AttendanceRecord, staff_by_id: dict[str, StaffMember]) -> Optional[str]:
    if isinstance(record, PartTimeAttendance):
        return f"{record.staff_name} ({record.shift.value})"
    member = staff_by_id.get(record.staff_id)
    return member.name if member else None


def summarize_location_attendance(
    staff: Sequence[StaffMember],
    attendance: Iterable[AttendanceRecord],
    on_date: date,
    location: Location,
) -> LocationAttendanceSummary:
    """Count present / half-day / absent entries for ``location`` on ``on_date``.

    Full-time records are placed by their staff member's location, part-time
    records by their own. A full-time record whose staff id is unknown is
    logged and left out instead of failing the whole rollup.
    """
    location = Location(location)
    staff_by_id = {s.staff_id: s for s in staff}

    buckets: dict[AttendanceStatus, list[AttendanceRecord]] = {s: [] for s in AttendanceStatus}
    for record in attendance:
        if record.work_date != on_date:
            continue
        if isinstance(record, PartTimeAttendance):
            if record.location != location:
                continue
        else:
            member = staff_by_id.get(record.staff_id)
            if member is None:
                log.warning(
                    "[summary] skipped attendance %s: unknown staff id %r", record.attendance_id, record.staff_id
                )
                continue
            if member.location != location:
                continue
        buckets[record.status].append(record)

    def names(status: AttendanceStatus) -> tuple[str, ...]:
        found = (_display_name(r, staff_by_id) for r in buckets[status])
        return tuple(n for n in found if n)

    present = len(buckets[AttendanceStatus.PRESENT])
    half_day = len(buckets[AttendanceStatus.HALF_DAY])
    return LocationAttendanceSummary(
        location=location,
        work_date=on_date,
        total=sum(1 for s in staff if s.location == location and s.is_active),
        present=present,
        half_day=half_day,
        absent=len(buckets[AttendanceStatus.ABSENT]),
        total_present_value=round(present + half_day * 0.5, 1),
        present_names=names(AttendanceStatus.PRESENT),
        half_day_names=names(AttendanceStatus.HALF_DAY),
        absent_names=names(AttendanceStatus.ABSENT),
    )
