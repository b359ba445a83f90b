from __future__ import annotations

import logging
from typing import Optional

from ..common.datetime_utils import require_month, require_year
from ..core.constants import AUTO_CARRY_NOTE
from ..core.exceptions import MissingReferenceError
from ..staff.repository import StaffRepository
from .carry_forward import previous_month_advance
from .model import AdvanceDeduction
from .repository import AdvanceRepository

log = logging.getLogger(__name__)


class AdvanceService:
    """Use cases around the monthly advance / deduction ledger."""

    def __init__(self, advances: AdvanceRepository, staff: StaffRepository):
        self._advances = advances
        self._staff = staff

    def ensure_month_opened(self, staff_id: str, month: int, year: int) -> Optional[AdvanceDeduction]:
        """Make sure (staff, month, year) starts from last month's closing balance.

        Idempotent: an existing record is returned untouched. A new record is
        only written for active staff who still owe something.
        """
        require_month(month)
        require_year(year)

        existing = self._advances.get(staff_id=staff_id, month=month, year=year)
        if existing:
            return existing

        member = self._staff.get_by_id(staff_id)
        if member is None:
            raise MissingReferenceError(f"Staff {staff_id!r} does not exist")
        if not member.is_active:
            return None

        carried = previous_month_advance(staff_id, self._advances.list_for_staff(staff_id), month, year)
        if carried <= 0:
            return None

        record = AdvanceDeduction.open(
            staff_id=staff_id,
            month=month,
            year=year,
            old_advance=carried,
            notes=AUTO_CARRY_NOTE,
        )
        log.info("[advances] opened %s %02d/%d with carried balance %s", staff_id, month + 1, year, carried)
        return self._advances.upsert(record)

    def open_month_for_active_staff(self, month: int, year: int) -> list[AdvanceDeduction]:
        opened = []
        for member in self._staff.list_all():
            if not member.is_active:
                continue
            record = self.ensure_month_opened(member.staff_id, month, year)
            if record is not None:
                opened.append(record)
        return opened

    def update_advance(
        self,
        staff_id: str,
        month: int,
        year: int,
        *,
        old_advance: Optional[int] = None,
        current_advance: Optional[int] = None,
        deduction: Optional[int] = None,
        notes: Optional[str] = None,
    ) -> AdvanceDeduction:
        """Upsert the month's line, recomputing the closing balance."""
        if self._staff.get_by_id(staff_id) is None:
            raise MissingReferenceError(f"Staff {staff_id!r} does not exist")

        existing = self._advances.get(staff_id=staff_id, month=month, year=year)
        if existing is None:
            carried = previous_month_advance(staff_id, self._advances.list_for_staff(staff_id), month, year)
            existing = AdvanceDeduction.open(staff_id=staff_id, month=month, year=year, old_advance=carried)

        record = existing.revised(
            old_advance=old_advance,
            current_advance=current_advance,
            deduction=deduction,
            notes=notes,
        )
        return self._advances.upsert(record)

    def latest_for_staff(self, staff_id: str) -> Optional[AdvanceDeduction]:
        records = self._advances.list_for_staff(staff_id)
        if not records:
            return None
        return max(records, key=lambda adv: (adv.year, adv.month))
