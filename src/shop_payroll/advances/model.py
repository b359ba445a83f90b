from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Optional

from ..common.datetime_utils import require_month, require_year
from ..common.money import round_to_nearest_10
from ..common.validators import require_non_negative
from ..core.exceptions import ValidationError


def closing_balance(old_advance: int, current_advance: int, deduction: int) -> int:
    return round_to_nearest_10(old_advance + current_advance - deduction)


@dataclass(frozen=True)
class AdvanceDeduction:
    """Monthly advance ledger line for one staff member.

    ``new_advance`` is the closing balance, old + current - deduction rounded
    to 10. Leave it out to have it computed; a supplied value that disagrees
    is rejected.
    """

    staff_id: str
    month: int
    year: int
    old_advance: int = 0
    current_advance: int = 0
    deduction: int = 0
    new_advance: Optional[int] = None
    notes: Optional[str] = None
    advance_id: Optional[str] = None

    def __post_init__(self):
        require_month(self.month)
        require_year(self.year)
        for field_name in ("old_advance", "current_advance", "deduction"):
            object.__setattr__(self, field_name, require_non_negative(getattr(self, field_name), field_name))

        expected = closing_balance(self.old_advance, self.current_advance, self.deduction)
        if self.new_advance is None:
            object.__setattr__(self, "new_advance", expected)
        elif self.new_advance != expected:
            raise ValidationError(
                f"new_advance {self.new_advance} does not match old + current - deduction ({expected})"
            )

    @classmethod
    def open(
        cls,
        *,
        staff_id: str,
        month: int,
        year: int,
        old_advance: int = 0,
        current_advance: int = 0,
        deduction: int = 0,
        notes: Optional[str] = None,
    ) -> "AdvanceDeduction":
        return cls(
            staff_id=staff_id,
            month=month,
            year=year,
            old_advance=old_advance,
            current_advance=current_advance,
            deduction=deduction,
            notes=notes,
        )

    def revised(
        self,
        *,
        old_advance: Optional[int] = None,
        current_advance: Optional[int] = None,
        deduction: Optional[int] = None,
        notes: Optional[str] = None,
    ) -> "AdvanceDeduction":
        return replace(
            self,
            old_advance=self.old_advance if old_advance is None else old_advance,
            current_advance=self.current_advance if current_advance is None else current_advance,
            deduction=self.deduction if deduction is None else deduction,
            new_advance=None,
            notes=self.notes if notes is None else notes,
        )
