from __future__ import annotations

from dataclasses import replace
from typing import Callable, Optional
from uuid import uuid4

from ..common.datetime_utils import as_date
from ..common.validators import require_enum, require_non_negative
from ..core.constants import PART_TIME_ID_PREFIX
from ..core.enums import AttendanceStatus, Location, Shift
from ..core.exceptions import MissingReferenceError
from ..payroll.rates import RateTable
from ..staff.repository import StaffRepository
from .model import FullTimeAttendance, PartTimeAttendance
from .repository import AttendanceRepository


def _new_part_time_id() -> str:
    return f"{PART_TIME_ID_PREFIX}{uuid4().hex}"


class AttendanceService:
    def __init__(
        self,
        attendance: AttendanceRepository,
        staff: StaffRepository,
        *,
        rates: Optional[RateTable] = None,
        id_factory: Callable[[], str] = _new_part_time_id,
    ):
        self._attendance = attendance
        self._staff = staff
        self._rates = rates or RateTable()
        self._new_id = id_factory

    def mark_full_time(self, staff_id: str, work_date, status: str) -> FullTimeAttendance:
        if not self._staff.get_by_id(staff_id):
            raise MissingReferenceError(f"Staff {staff_id!r} does not exist")
        record = FullTimeAttendance(
            staff_id=staff_id,
            work_date=as_date(work_date),
            status=require_enum(AttendanceStatus, status, "Status"),
        )
        return self._attendance.upsert_full_time(record)

    def bulk_mark(self, work_date, status: str) -> list[FullTimeAttendance]:
        """Mark every active staff member with the same status for one day."""
        day = as_date(work_date)
        status = require_enum(AttendanceStatus, status, "Status")
        return [
            self._attendance.upsert_full_time(FullTimeAttendance(staff_id=s.staff_id, work_date=day, status=status))
            for s in self._staff.list_all()
            if s.is_active
        ]

    def add_part_time_entry(
        self,
        *,
        staff_name: str,
        work_date,
        shift: str,
        location: str,
        status: str = AttendanceStatus.PRESENT.value,
    ) -> PartTimeAttendance:
        day = as_date(work_date)
        shift = require_enum(Shift, shift, "Shift")
        record = PartTimeAttendance(
            attendance_id=self._new_id(),
            staff_name=staff_name,
            work_date=day,
            status=status,
            shift=shift,
            location=require_enum(Location, location, "Location"),
            salary=self._rates.entry_salary(shift),
            salary_override=False,
        )
        return self._attendance.upsert_part_time(record)

    def override_part_time_salary(self, attendance_id: str, salary: int) -> PartTimeAttendance:
        record = self._attendance.get_part_time(attendance_id)
        if not record:
            raise MissingReferenceError(f"Part-time entry {attendance_id!r} does not exist")
        updated = replace(record, salary=require_non_negative(salary, "salary"), salary_override=True)
        return self._attendance.upsert_part_time(updated)

    def delete_part_time_entry(self, attendance_id: str) -> None:
        if not self._attendance.delete_part_time(attendance_id):
            raise MissingReferenceError(f"Part-time entry {attendance_id!r} does not exist")
