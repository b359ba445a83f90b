from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional, Sequence

from ...advances.model import AdvanceDeduction
from ...attendance.metrics import AttendanceMetrics
from ...staff.model import StaffMember
from ..model import SalaryDetail


class SalaryCalculator(ABC):
    """Calculator interface (Strategy Pattern for payroll)."""

    @abstractmethod
    def calculate(
        self,
        staff: StaffMember,
        metrics: AttendanceMetrics,
        advance: Optional[AdvanceDeduction],
        all_advances: Sequence[AdvanceDeduction],
        month: int,
        year: int,
    ) -> SalaryDetail:
        raise NotImplementedError
