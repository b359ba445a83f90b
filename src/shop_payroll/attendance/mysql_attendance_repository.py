from __future__ import annotations

from dataclasses import replace
from datetime import date
from typing import Optional, Sequence

from ..core.enums import AttendanceStatus, Location, Shift
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, month_bounds, normalize_mysql_date
from .model import AttendanceRecord, FullTimeAttendance, PartTimeAttendance
from .repository import AttendanceRepository

_COLUMNS = """
    attendance_id, staff_id, work_date, status, attendance_value, is_part_time,
    staff_name, shift, location, salary, salary_override
"""


def _to_record(r: dict) -> AttendanceRecord:
    common = dict(
        attendance_id=r["attendance_id"],
        work_date=normalize_mysql_date(r["work_date"]),
        status=AttendanceStatus(r["status"]),
        attendance_value=float(r["attendance_value"]),
    )
    if not r["is_part_time"]:
        return FullTimeAttendance(staff_id=str(r["staff_id"]), **common)
    return PartTimeAttendance(
        staff_name=r["staff_name"],
        shift=Shift(r["shift"]),
        location=Location(r["location"]),
        salary=int(r["salary"]) if r.get("salary") is not None else None,
        salary_override=bool(r["salary_override"]),
        **common,
    )


def full_time_attendance_id(staff_id: str, work_date: date) -> str:
    return f"ft_{staff_id}_{work_date.isoformat()}"


class MySQLAttendanceRepository(AttendanceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_for_month(self, *, year: int, month: int) -> Sequence[AttendanceRecord]:
        start, end = month_bounds(year, month)
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"SELECT {_COLUMNS} FROM attendance WHERE work_date >= %s AND work_date < %s ORDER BY work_date",
                (start, end),
            )
            return [_to_record(r) for r in fetchall(cur)]

    def list_for_date(self, work_date: date) -> Sequence[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM attendance WHERE work_date=%s", (work_date,))
            return [_to_record(r) for r in fetchall(cur)]

    def get_part_time(self, attendance_id: str) -> Optional[PartTimeAttendance]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"SELECT {_COLUMNS} FROM attendance WHERE attendance_id=%s AND is_part_time=1",
                (attendance_id,),
            )
            r = fetchone(cur)
            return _to_record(r) if r else None

    def upsert_full_time(self, record: FullTimeAttendance) -> FullTimeAttendance:
        record = replace(record, attendance_id=full_time_attendance_id(record.staff_id, record.work_date))
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO attendance(attendance_id, staff_id, work_date, status, attendance_value, is_sunday,
                                       is_part_time)
                VALUES(%s,%s,%s,%s,%s,%s,0)
                ON DUPLICATE KEY UPDATE status=VALUES(status), attendance_value=VALUES(attendance_value),
                                        is_sunday=VALUES(is_sunday)
                """,
                (
                    record.attendance_id,
                    record.staff_id,
                    record.work_date,
                    record.status.value,
                    record.attendance_value,
                    1 if record.is_sunday else 0,
                ),
            )
        return record

    def upsert_part_time(self, record: PartTimeAttendance) -> PartTimeAttendance:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO attendance(attendance_id, staff_id, work_date, status, attendance_value, is_sunday,
                                       is_part_time, staff_name, shift, location, salary, salary_override)
                VALUES(%s,NULL,%s,%s,%s,%s,1,%s,%s,%s,%s,%s)
                ON DUPLICATE KEY UPDATE status=VALUES(status), attendance_value=VALUES(attendance_value),
                                        staff_name=VALUES(staff_name), shift=VALUES(shift),
                                        location=VALUES(location), salary=VALUES(salary),
                                        salary_override=VALUES(salary_override)
                """,
                (
                    record.attendance_id,
                    record.work_date,
                    record.status.value,
                    record.attendance_value,
                    1 if record.is_sunday else 0,
                    record.staff_name,
                    record.shift.value,
                    record.location.value,
                    record.salary,
                    1 if record.salary_override else 0,
                ),
            )
        return record

    def delete_part_time(self, attendance_id: str) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM attendance WHERE attendance_id=%s AND is_part_time=1", (attendance_id,))
            return cur.rowcount > 0
