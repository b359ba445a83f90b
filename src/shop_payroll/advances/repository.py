from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import AdvanceDeduction


class AdvanceRepository(Protocol):
    def list_all(self) -> Sequence[AdvanceDeduction]:
        raise NotImplementedError

    def list_for_staff(self, staff_id: str) -> Sequence[AdvanceDeduction]:
        raise NotImplementedError

    def get(self, *, staff_id: str, month: int, year: int) -> Optional[AdvanceDeduction]:
        raise NotImplementedError

    def upsert(self, record: AdvanceDeduction) -> AdvanceDeduction:
        """Insert or replace the record for (staff_id, month, year)."""

        raise NotImplementedError
