from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from .model import AttendanceRecord, FullTimeAttendance, PartTimeAttendance


class AttendanceRepository(Protocol):
    def list_for_month(self, *, year: int, month: int) -> Sequence[AttendanceRecord]:
        raise NotImplementedError

    def list_for_date(self, work_date: date) -> Sequence[AttendanceRecord]:
        raise NotImplementedError

    def get_part_time(self, attendance_id: str) -> Optional[PartTimeAttendance]:
        raise NotImplementedError

    def upsert_full_time(self, record: FullTimeAttendance) -> FullTimeAttendance:
        """Insert or replace the single record for (staff_id, work_date)."""

        raise NotImplementedError

    def upsert_part_time(self, record: PartTimeAttendance) -> PartTimeAttendance:
        raise NotImplementedError

    def delete_part_time(self, attendance_id: str) -> bool:
        raise NotImplementedError
