from __future__ import annotations

from dataclasses import replace
from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import AdvanceDeduction
from .repository import AdvanceRepository

_COLUMNS = "advance_id, staff_id, month, year, old_advance, current_advance, deduction, new_advance, notes"


def _to_advance(r: dict) -> AdvanceDeduction:
    return AdvanceDeduction(
        advance_id=str(r["advance_id"]),
        staff_id=str(r["staff_id"]),
        month=int(r["month"]),
        year=int(r["year"]),
        old_advance=int(r["old_advance"]),
        current_advance=int(r["current_advance"]),
        deduction=int(r["deduction"]),
        new_advance=int(r["new_advance"]),
        notes=r.get("notes"),
    )


class MySQLAdvanceRepository(AdvanceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_all(self) -> Sequence[AdvanceDeduction]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM advances ORDER BY year, month")
            return [_to_advance(r) for r in fetchall(cur)]

    def list_for_staff(self, staff_id: str) -> Sequence[AdvanceDeduction]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM advances WHERE staff_id=%s ORDER BY year, month", (staff_id,))
            return [_to_advance(r) for r in fetchall(cur)]

    def get(self, *, staff_id: str, month: int, year: int) -> Optional[AdvanceDeduction]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"SELECT {_COLUMNS} FROM advances WHERE staff_id=%s AND month=%s AND year=%s",
                (staff_id, month, year),
            )
            r = fetchone(cur)
            return _to_advance(r) if r else None

    def upsert(self, record: AdvanceDeduction) -> AdvanceDeduction:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO advances(staff_id, month, year, old_advance, current_advance, deduction, new_advance,
                                     notes)
                VALUES(%s,%s,%s,%s,%s,%s,%s,%s)
                ON DUPLICATE KEY UPDATE advance_id=LAST_INSERT_ID(advance_id),
                                        old_advance=VALUES(old_advance), current_advance=VALUES(current_advance),
                                        deduction=VALUES(deduction), new_advance=VALUES(new_advance),
                                        notes=VALUES(notes)
                """,
                (
                    record.staff_id,
                    record.month,
                    record.year,
                    record.old_advance,
                    record.current_advance,
                    record.deduction,
                    record.new_advance,
                    record.notes,
                ),
            )
            return replace(record, advance_id=str(cur.lastrowid))
