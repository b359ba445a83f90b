import pytest

from shop_payroll.advances.carry_forward import find_advance, previous_month_advance
from shop_payroll.advances.model import AdvanceDeduction
from shop_payroll.core.exceptions import ValidationError


def test_march_opens_with_february_closing_balance():
    feb = AdvanceDeduction.open(staff_id="x", month=1, year=2024, current_advance=1200)
    assert previous_month_advance("x", [feb], 2, 2024) == 1200


def test_january_looks_at_previous_december():
    dec = AdvanceDeduction.open(staff_id="x", month=11, year=2023, old_advance=500, current_advance=200)
    same_month_wrong_year = AdvanceDeduction.open(staff_id="x", month=11, year=2024, current_advance=9000)

    assert previous_month_advance("x", [same_month_wrong_year, dec], 0, 2024) == 700


def test_no_previous_record_is_zero():
    other = AdvanceDeduction.open(staff_id="y", month=1, year=2024, current_advance=1200)
    assert previous_month_advance("x", [other], 2, 2024) == 0
    assert previous_month_advance("x", [], 2, 2024) == 0


def test_find_advance_matches_exact_period():
    rec = AdvanceDeduction.open(staff_id="x", month=4, year=2024)
    assert find_advance("x", [rec], 4, 2024) is rec
    assert find_advance("x", [rec], 5, 2024) is None


def test_closing_balance_is_old_plus_current_minus_deduction():
    rec = AdvanceDeduction.open(staff_id="x", month=0, year=2024, old_advance=0, current_advance=2000, deduction=500)
    assert rec.new_advance == 1500

    odd = AdvanceDeduction.open(staff_id="x", month=0, year=2024, current_advance=1234)
    assert odd.new_advance == 1230


def test_direct_construction_computes_closing_balance():
    rec = AdvanceDeduction(staff_id="x", month=0, year=2024, current_advance=2000, deduction=500)
    assert rec.new_advance == 1500
    assert AdvanceDeduction(staff_id="x", month=0, year=2024, new_advance=0).new_advance == 0


def test_mismatched_closing_balance_is_rejected():
    with pytest.raises(ValidationError):
        AdvanceDeduction(staff_id="x", month=0, year=2024, current_advance=2000, deduction=500, new_advance=0)


def test_revised_recomputes_closing_balance():
    rec = AdvanceDeduction.open(staff_id="x", month=0, year=2024, old_advance=1000)
    revised = rec.revised(deduction=300, notes="paid back")
    assert revised.new_advance == 700
    assert revised.notes == "paid back"
    assert revised.old_advance == 1000


@pytest.mark.parametrize(
    "kwargs",
    [
        {"month": 12, "year": 2024},
        {"month": -1, "year": 2024},
        {"month": 0, "year": 2024, "current_advance": -100},
    ],
)
def test_invalid_ledger_lines_are_rejected(kwargs):
    with pytest.raises(ValidationError):
        AdvanceDeduction.open(staff_id="x", **kwargs)
