from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from ..core.enums import EmploymentType, Location
from .model import ArchivedStaff, StaffMember


class StaffRepository(Protocol):
    """Repository interface for the staff roster.

    Services depend on this interface, not on a concrete database.
    """

    def list_all(self) -> Sequence[StaffMember]:
        raise NotImplementedError

    def get_by_id(self, staff_id: str) -> Optional[StaffMember]:
        raise NotImplementedError

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
        """Insert an active member and return its new id."""

        raise NotImplementedError

    def update(self, staff: StaffMember) -> bool:
        raise NotImplementedError

    def set_active(self, staff_id: str, is_active: bool) -> bool:
        raise NotImplementedError


class ArchivedStaffRepository(Protocol):
    def list_all(self) -> Sequence[ArchivedStaff]:
        raise NotImplementedError

    def get_by_id(self, record_id: str) -> Optional[ArchivedStaff]:
        raise NotImplementedError

    def create(self, record: ArchivedStaff) -> str:
        raise NotImplementedError

    def delete(self, record_id: str) -> bool:
        raise NotImplementedError
