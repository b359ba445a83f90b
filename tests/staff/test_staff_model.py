from datetime import date

import pytest

from shop_payroll.core.enums import EmploymentType, Location, StaffState
from shop_payroll.core.exceptions import ValidationError
from shop_payroll.staff.model import StaffMember


def test_total_salary_is_sum_of_components(staff_factory):
    member = staff_factory(basic_salary=15000, incentive=8000, hra=0)
    assert member.total_salary == 23000

    raised = member.with_salary(hra=5000)
    assert raised.total_salary == 28000
    assert member.total_salary == 23000


def test_strings_are_coerced_to_enums():
    member = StaffMember(
        staff_id="s1",
        name="Anu",
        location="Godown",
        employment_type="full-time",
        basic_salary=1,
        incentive=2,
        hra=3,
        joined_date=date(2024, 1, 1),
    )
    assert member.location is Location.GODOWN
    assert member.employment_type is EmploymentType.FULL_TIME
    assert member.state is StaffState.ACTIVE


@pytest.mark.parametrize(
    "overrides",
    [
        {"basic_salary": -1},
        {"incentive": 10.5},
        {"location": "Warehouse"},
        {"name": "  "},
        {"hra": True},
    ],
)
def test_invalid_staff_rejected(staff_factory, overrides):
    with pytest.raises(ValidationError):
        staff_factory(**overrides)


def test_name_is_stored_stripped(staff_factory):
    assert staff_factory(name="  Ravi ").name == "Ravi"
