from __future__ import annotations

from enum import Enum


class Location(str, Enum):
    """Shop or warehouse a staff member is posted to."""

    BIG_SHOP = "Big Shop"
    SMALL_SHOP = "Small Shop"
    GODOWN = "Godown"


class EmploymentType(str, Enum):
    FULL_TIME = "full-time"
    PART_TIME = "part-time"


class AttendanceStatus(str, Enum):
    """Normalized attendance status stored in the database."""

    PRESENT = "Present"
    HALF_DAY = "Half Day"
    ABSENT = "Absent"

    @property
    def day_value(self) -> float:
        return {
            AttendanceStatus.PRESENT: 1.0,
            AttendanceStatus.HALF_DAY: 0.5,
            AttendanceStatus.ABSENT: 0.0,
        }[self]


class Shift(str, Enum):
    """Part-time shift worked on a given day."""

    MORNING = "Morning"
    EVENING = "Evening"
    BOTH = "Both"


class StaffState(str, Enum):
    ACTIVE = "Active"
    ARCHIVED = "Archived"


class HraPolicy(str, Enum):
    """How HRA is paid when attendance falls below the near-full tier.

    FULL keeps the stipend untouched; PRO_RATED scales it like incentive.
    """

    FULL = "full"
    PRO_RATED = "pro_rated"
