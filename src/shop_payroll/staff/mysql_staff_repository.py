from __future__ import annotations

from datetime import date
from typing import Optional, Sequence

from ..advances.model import AdvanceDeduction
from ..core.enums import EmploymentType, Location
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, normalize_mysql_date
from .model import ArchivedStaff, StaffMember
from .repository import ArchivedStaffRepository, StaffRepository

_STAFF_COLUMNS = (
    "staff_id, name, location, employment_type, experience, basic_salary, incentive, hra, joined_date, is_active"
)


def _to_staff(r: dict) -> StaffMember:
    return StaffMember(
        staff_id=str(r["staff_id"]),
        name=r["name"],
        location=Location(r["location"]),
        employment_type=EmploymentType(r["employment_type"]),
        experience=r.get("experience") or "",
        basic_salary=int(r["basic_salary"]),
        incentive=int(r["incentive"]),
        hra=int(r["hra"]),
        joined_date=normalize_mysql_date(r["joined_date"]),
        is_active=bool(r["is_active"]),
    )


class MySQLStaffRepository(StaffRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_all(self) -> Sequence[StaffMember]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_STAFF_COLUMNS} FROM staff ORDER BY created_at, staff_id")
            return [_to_staff(r) for r in fetchall(cur)]

    def get_by_id(self, staff_id: str) -> Optional[StaffMember]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_STAFF_COLUMNS} FROM staff WHERE staff_id=%s", (staff_id,))
            r = fetchone(cur)
            return _to_staff(r) if r else None

    def create(
        self,
        *,
        name: str,
        location: Location,
        employment_type: EmploymentType,
        experience: str,
        basic_salary: int,
        incentive: int,
        hra: int,
        joined_date: date,
    ) -> str:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO staff(name, location, employment_type, experience, basic_salary, incentive, hra,
                                  joined_date, is_active)
                VALUES(%s,%s,%s,%s,%s,%s,%s,%s,1)
                """,
                (name, location.value, employment_type.value, experience, basic_salary, incentive, hra, joined_date),
            )
            return str(cur.lastrowid)

    def update(self, staff: StaffMember) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE staff
                SET name=%s, location=%s, employment_type=%s, experience=%s,
                    basic_salary=%s, incentive=%s, hra=%s
                WHERE staff_id=%s
                """,
                (
                    staff.name,
                    staff.location.value,
                    staff.employment_type.value,
                    staff.experience,
                    staff.basic_salary,
                    staff.incentive,
                    staff.hra,
                    staff.staff_id,
                ),
            )
            return cur.rowcount > 0

    def set_active(self, staff_id: str, is_active: bool) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("UPDATE staff SET is_active=%s WHERE staff_id=%s", (1 if is_active else 0, staff_id))
            return cur.rowcount > 0


class MySQLArchivedStaffRepository(ArchivedStaffRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    _SELECT = """
        SELECT o.*, a.advance_id AS a_id, a.month AS a_month, a.year AS a_year,
               a.old_advance AS a_old, a.current_advance AS a_cur, a.deduction AS a_ded,
               a.new_advance AS a_new, a.notes AS a_notes
        FROM old_staff_records o
        LEFT JOIN advances a ON a.advance_id = o.last_advance_id
    """

    @staticmethod
    def _to_record(r: dict) -> ArchivedStaff:
        last = None
        if r.get("a_id") is not None:
            last = AdvanceDeduction(
                advance_id=str(r["a_id"]),
                staff_id=str(r["original_staff_id"]),
                month=int(r["a_month"]),
                year=int(r["a_year"]),
                old_advance=int(r["a_old"]),
                current_advance=int(r["a_cur"]),
                deduction=int(r["a_ded"]),
                new_advance=int(r["a_new"]),
                notes=r.get("a_notes"),
            )
        return ArchivedStaff(
            record_id=str(r["record_id"]),
            original_staff_id=str(r["original_staff_id"]),
            name=r["name"],
            location=Location(r["location"]),
            employment_type=EmploymentType(r["employment_type"]),
            experience=r.get("experience") or "",
            basic_salary=int(r["basic_salary"]),
            incentive=int(r["incentive"]),
            hra=int(r["hra"]),
            joined_date=normalize_mysql_date(r["joined_date"]),
            left_date=normalize_mysql_date(r["left_date"]),
            reason=r["reason"],
            advance_outstanding=int(r["advance_outstanding"]),
            last_advance=last,
        )

    def list_all(self) -> Sequence[ArchivedStaff]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(self._SELECT + " ORDER BY o.left_date DESC")
            return [self._to_record(r) for r in fetchall(cur)]

    def get_by_id(self, record_id: str) -> Optional[ArchivedStaff]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(self._SELECT + " WHERE o.record_id=%s", (record_id,))
            r = fetchone(cur)
            return self._to_record(r) if r else None

    def create(self, record: ArchivedStaff) -> str:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO old_staff_records(original_staff_id, name, location, employment_type, experience,
                    basic_salary, incentive, hra, joined_date, left_date, reason, advance_outstanding,
                    last_advance_id)
                VALUES(%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s)
                """,
                (
                    record.original_staff_id,
                    record.name,
                    record.location.value,
                    record.employment_type.value,
                    record.experience,
                    record.basic_salary,
                    record.incentive,
                    record.hra,
                    record.joined_date,
                    record.left_date,
                    record.reason,
                    record.advance_outstanding,
                    record.last_advance.advance_id if record.last_advance else None,
                ),
            )
            return str(cur.lastrowid)

    def delete(self, record_id: str) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM old_staff_records WHERE record_id=%s", (record_id,))
            return cur.rowcount > 0
