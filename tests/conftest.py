from __future__ import annotations

from dataclasses import replace
from datetime import date
from typing import Optional

import pytest

from shop_payroll.advances.model import AdvanceDeduction
from shop_payroll.attendance.model import FullTimeAttendance, PartTimeAttendance
from shop_payroll.common.datetime_utils import in_period
from shop_payroll.core.enums import EmploymentType, Location
from shop_payroll.staff.model import ArchivedStaff, StaffMember


class InMemoryStaff:
    def __init__(self, members=()):
        self._by_id: dict[str, StaffMember] = {m.staff_id: m for m in members}
        self._next = 100

    def add(self, member: StaffMember) -> StaffMember:
        self._by_id[member.staff_id] = member
        return member

    def list_all(self):
        return list(self._by_id.values())

    def get_by_id(self, staff_id: str) -> Optional[StaffMember]:
        return self._by_id.get(staff_id)

    def create(self, *, name, location, employment_type, experience, basic_salary, incentive, hra, joined_date) -> str:
        self._next += 1
        new_id = str(self._next)
        self._by_id[new_id] = StaffMember(
            staff_id=new_id,
            name=name,
            location=location,
            employment_type=employment_type,
            experience=experience,
            basic_salary=basic_salary,
            incentive=incentive,
            hra=hra,
            joined_date=joined_date,
        )
        return new_id

    def update(self, staff: StaffMember) -> bool:
        if staff.staff_id not in self._by_id:
            return False
        self._by_id[staff.staff_id] = staff
        return True

    def set_active(self, staff_id: str, is_active: bool) -> bool:
        member = self._by_id.get(staff_id)
        if not member:
            return False
        self._by_id[staff_id] = replace(member, is_active=is_active)
        return True


class InMemoryArchive:
    def __init__(self):
        self._by_id: dict[str, ArchivedStaff] = {}
        self._next = 0

    def list_all(self):
        return list(self._by_id.values())

    def get_by_id(self, record_id: str) -> Optional[ArchivedStaff]:
        return self._by_id.get(record_id)

    def create(self, record: ArchivedStaff) -> str:
        self._next += 1
        record_id = f"old-{self._next}"
        self._by_id[record_id] = replace(record, record_id=record_id)
        return record_id

    def delete(self, record_id: str) -> bool:
        return self._by_id.pop(record_id, None) is not None


class InMemoryAttendance:
    def __init__(self, records=()):
        self._full: dict[tuple[str, date], FullTimeAttendance] = {}
        self._part: dict[str, PartTimeAttendance] = {}
        self.add(*records)

    def add(self, *records):
        for r in records:
            if isinstance(r, PartTimeAttendance):
                self._part[r.attendance_id] = r
            else:
                self._full[(r.staff_id, r.work_date)] = r

    def all(self):
        return [*self._full.values(), *self._part.values()]

    def list_for_month(self, *, year: int, month: int):
        return [r for r in self.all() if in_period(r.work_date, year, month)]

    def list_for_date(self, work_date: date):
        return [r for r in self.all() if r.work_date == work_date]

    def get_part_time(self, attendance_id: str):
        return self._part.get(attendance_id)

    def upsert_full_time(self, record: FullTimeAttendance) -> FullTimeAttendance:
        record = replace(record, attendance_id=f"ft_{record.staff_id}_{record.work_date}")
        self._full[(record.staff_id, record.work_date)] = record
        return record

    def upsert_part_time(self, record: PartTimeAttendance) -> PartTimeAttendance:
        self._part[record.attendance_id] = record
        return record

    def delete_part_time(self, attendance_id: str) -> bool:
        return self._part.pop(attendance_id, None) is not None


class InMemoryAdvances:
    def __init__(self, records=()):
        self._by_key: dict[tuple[str, int, int], AdvanceDeduction] = {}
        self._next = 0
        for r in records:
            self.upsert(r)

    def list_all(self):
        return list(self._by_key.values())

    def list_for_staff(self, staff_id: str):
        return [a for a in self._by_key.values() if a.staff_id == staff_id]

    def get(self, *, staff_id: str, month: int, year: int):
        return self._by_key.get((staff_id, month, year))

    def upsert(self, record: AdvanceDeduction) -> AdvanceDeduction:
        key = (record.staff_id, record.month, record.year)
        existing = self._by_key.get(key)
        if existing:
            advance_id = existing.advance_id
        else:
            self._next += 1
            advance_id = str(self._next)
        record = replace(record, advance_id=advance_id)
        self._by_key[key] = record
        return record


def make_staff(staff_id="s1", **overrides) -> StaffMember:
    values = dict(
        staff_id=staff_id,
        name=f"Staff {staff_id}",
        location=Location.BIG_SHOP,
        employment_type=EmploymentType.FULL_TIME,
        basic_salary=15000,
        incentive=10000,
        hra=5000,
        joined_date=date(2023, 4, 1),
    )
    values.update(overrides)
    return StaffMember(**values)


@pytest.fixture
def staff_factory():
    return make_staff


@pytest.fixture
def staff_repo():
    return InMemoryStaff()


@pytest.fixture
def archive_repo():
    return InMemoryArchive()


@pytest.fixture
def attendance_repo():
    return InMemoryAttendance()


@pytest.fixture
def advances_repo():
    return InMemoryAdvances()
