from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import ClassVar, Optional, Union

from ..common.datetime_utils import is_sunday
from ..common.validators import require_enum, require_non_empty
from ..core.enums import AttendanceStatus, Location, Shift


@dataclass(frozen=True)
class FullTimeAttendance:
    """Domain entity: one day's attendance for a rostered staff member.

    Unique per (staff_id, work_date). ``attendance_value`` and ``is_sunday``
    are derived from status and date unless given explicitly.
    """

    is_part_time: ClassVar[bool] = False

    staff_id: str
    work_date: date
    status: AttendanceStatus
    attendance_id: Optional[str] = None
    attendance_value: Optional[float] = None
    is_sunday: bool = field(default=False)

    def __post_init__(self):
        _normalize(self)


@dataclass(frozen=True)
class PartTimeAttendance:
    """Domain entity: an ad-hoc part-time entry.

    Part-timers are not on the roster, so the name is their identity within a
    month and each entry has its own generated id.
    """

    is_part_time: ClassVar[bool] = True

    staff_name: str
    work_date: date
    status: AttendanceStatus
    shift: Shift
    location: Location
    attendance_id: Optional[str] = None
    salary: Optional[int] = None
    salary_override: bool = False
    attendance_value: Optional[float] = None
    is_sunday: bool = field(default=False)

    def __post_init__(self):
        object.__setattr__(self, "staff_name", require_non_empty(self.staff_name, "Staff name"))
        object.__setattr__(self, "shift", require_enum(Shift, self.shift, "Shift"))
        object.__setattr__(self, "location", require_enum(Location, self.location, "Location"))
        _normalize(self)


AttendanceRecord = Union[FullTimeAttendance, PartTimeAttendance]


def _normalize(record) -> None:
    status = require_enum(AttendanceStatus, record.status, "Status")
    object.__setattr__(record, "status", status)
    if record.attendance_value is None:
        object.__setattr__(record, "attendance_value", status.day_value)
    object.__setattr__(record, "is_sunday", is_sunday(record.work_date))
