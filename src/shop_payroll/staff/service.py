from __future__ import annotations

import logging
from dataclasses import replace
from datetime import date
from typing import Optional

from ..advances.model import AdvanceDeduction
from ..advances.repository import AdvanceRepository
from ..common.datetime_utils import as_date, now_local
from ..common.validators import require_enum, require_non_empty, require_non_negative
from ..core.constants import RESTORED_ADVANCE_NOTE
from ..core.enums import EmploymentType, Location
from ..core.exceptions import MissingReferenceError, ValidationError
from .model import ArchivedStaff, StaffMember
from .repository import ArchivedStaffRepository, StaffRepository

log = logging.getLogger(__name__)


class StaffService:
    """Use case: manage the roster (admin).

    A member is either Active (on the roster) or Archived (moved to old
    records). ``archive`` and ``rejoin`` are the only transitions and carry
    the outstanding advance balance across.
    """

    def __init__(self, staff: StaffRepository, archive: ArchivedStaffRepository, advances: AdvanceRepository):
        self._staff = staff
        self._archive = archive
        self._advances = advances

    def _get(self, staff_id: str) -> StaffMember:
        member = self._staff.get_by_id(staff_id)
        if not member:
            raise MissingReferenceError(f"Staff {staff_id!r} does not exist")
        return member

    def list_active(self) -> list[StaffMember]:
        return [s for s in self._staff.list_all() if s.is_active]

    def create_staff(
        self,
        *,
        name: str,
        location: str,
        employment_type: str = EmploymentType.FULL_TIME.value,
        basic_salary: int,
        incentive: int,
        hra: int,
        joined_date=None,
        experience: str = "",
    ) -> StaffMember:
        new_id = self._staff.create(
            name=require_non_empty(name, "Name"),
            location=require_enum(Location, location, "Location"),
            employment_type=require_enum(EmploymentType, employment_type, "Employment type"),
            experience=(experience or "").strip(),
            basic_salary=require_non_negative(basic_salary, "basic_salary"),
            incentive=require_non_negative(incentive, "incentive"),
            hra=require_non_negative(hra, "hra"),
            joined_date=as_date(joined_date) if joined_date else now_local().date(),
        )
        return self._get(new_id)

    def update_staff(self, staff_id: str, **changes) -> StaffMember:
        allowed = {"name", "location", "employment_type", "experience", "basic_salary", "incentive", "hra"}
        unknown = set(changes) - allowed
        if unknown:
            raise ValidationError(f"Cannot update: {', '.join(sorted(unknown))}")

        updated = replace(self._get(staff_id), **changes)
        if not self._staff.update(updated):
            raise ValidationError("Updating staff failed")
        return updated

    def archive(self, staff_id: str, reason: str, *, today: Optional[date] = None) -> ArchivedStaff:
        member = self._get(staff_id)
        if not member.is_active:
            raise ValidationError(f"{member.name} is already archived")

        history = self._advances.list_for_staff(staff_id)
        latest = max(history, key=lambda adv: (adv.year, adv.month)) if history else None

        record = ArchivedStaff(
            original_staff_id=member.staff_id,
            name=member.name,
            location=member.location,
            employment_type=member.employment_type,
            experience=member.experience,
            basic_salary=member.basic_salary,
            incentive=member.incentive,
            hra=member.hra,
            joined_date=member.joined_date,
            left_date=today or now_local().date(),
            reason=require_non_empty(reason, "Reason"),
            advance_outstanding=latest.new_advance if latest else 0,
            last_advance=latest,
        )
        record_id = self._archive.create(record)
        self._staff.set_active(staff_id, False)
        log.info("[staff] archived %s (%s), outstanding advance %s", member.name, staff_id, record.advance_outstanding)
        return replace(record, record_id=record_id)

    def rejoin(self, record_id: str, *, today: Optional[date] = None) -> StaffMember:
        record = self._archive.get_by_id(record_id)
        if not record:
            raise MissingReferenceError(f"Old staff record {record_id!r} does not exist")

        today = today or now_local().date()
        new_id = self._staff.create(
            name=record.name,
            location=record.location,
            employment_type=record.employment_type,
            experience=record.experience,
            basic_salary=record.basic_salary,
            incentive=record.incentive,
            hra=record.hra,
            joined_date=today,
        )

        if record.advance_outstanding > 0:
            self._advances.upsert(
                AdvanceDeduction.open(
                    staff_id=new_id,
                    month=today.month - 1,
                    year=today.year,
                    old_advance=record.advance_outstanding,
                    notes=RESTORED_ADVANCE_NOTE.format(name=record.name),
                )
            )

        self._archive.delete(record_id)
        log.info("[staff] %s rejoined as %s", record.name, new_id)
        return self._get(new_id)
