from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import date
from typing import TYPE_CHECKING, Optional

from ..common.validators import require_enum, require_non_empty, require_non_negative
from ..core.enums import EmploymentType, Location, StaffState

if TYPE_CHECKING:
    from ..advances.model import AdvanceDeduction


@dataclass(frozen=True)
class StaffMember:
    """Domain entity: a rostered staff member.

    ``total_salary`` is derived, never stored, so it always equals the sum of
    the three salary components whatever path built or updated the record.
    """

    staff_id: str
    name: str
    location: Location
    employment_type: EmploymentType
    basic_salary: int
    incentive: int
    hra: int
    joined_date: date
    experience: str = ""
    is_active: bool = True

    def __post_init__(self):
        object.__setattr__(self, "name", require_non_empty(self.name, "Name"))
        object.__setattr__(self, "location", require_enum(Location, self.location, "Location"))
        object.__setattr__(
            self, "employment_type", require_enum(EmploymentType, self.employment_type, "Employment type")
        )
        for field_name in ("basic_salary", "incentive", "hra"):
            object.__setattr__(self, field_name, require_non_negative(getattr(self, field_name), field_name))

    @property
    def total_salary(self) -> int:
        return self.basic_salary + self.incentive + self.hra

    @property
    def state(self) -> StaffState:
        return StaffState.ACTIVE if self.is_active else StaffState.ARCHIVED

    def with_salary(
        self,
        *,
        basic_salary: Optional[int] = None,
        incentive: Optional[int] = None,
        hra: Optional[int] = None,
    ) -> "StaffMember":
        return replace(
            self,
            basic_salary=self.basic_salary if basic_salary is None else basic_salary,
            incentive=self.incentive if incentive is None else incentive,
            hra=self.hra if hra is None else hra,
        )


@dataclass(frozen=True)
class ArchivedStaff:
    """Old-records entry written when a staff member leaves.

    Keeps the salary structure and the advance still owed so a later rejoin
    can restore both.
    """

    original_staff_id: str
    name: str
    location: Location
    employment_type: EmploymentType
    experience: str
    basic_salary: int
    incentive: int
    hra: int
    joined_date: date
    left_date: date
    reason: str
    advance_outstanding: int = 0
    last_advance: Optional["AdvanceDeduction"] = None
    record_id: Optional[str] = None

    @property
    def total_salary(self) -> int:
        return self.basic_salary + self.incentive + self.hra

    @property
    def state(self) -> StaffState:
        return StaffState.ARCHIVED
