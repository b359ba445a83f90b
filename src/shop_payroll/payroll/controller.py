from __future__ import annotations

from flask import Flask

from ..common.datetime_utils import parse_iso_date
from ..common.http import ok
from ..container import Container


def register(app: Flask, container: Container) -> None:
    """Read-only payroll endpoints. Months in URLs are 0-indexed (0 = January)."""

    @app.route("/api/payroll/<int:year>/<int:month>", methods=["GET"], endpoint="monthly_payroll")
    def monthly_payroll(year: int, month: int):
        details = container.payroll_service.monthly_salaries(month, year)
        return ok([d.to_dict() for d in details])

    @app.route("/api/payroll/<int:year>/<int:month>/<staff_id>", methods=["GET"], endpoint="staff_payroll")
    def staff_payroll(year: int, month: int, staff_id: str):
        return ok(container.payroll_service.salary_for(staff_id, month, year).to_dict())

    @app.route("/api/part-time/<int:year>/<int:month>", methods=["GET"], endpoint="part_time_payroll")
    def part_time_payroll(year: int, month: int):
        details = container.payroll_service.part_time_salaries(month, year)
        return ok(
            {
                "staff": [d.to_dict() for d in details],
                "totalEarnings": sum(d.total_earnings for d in details),
            }
        )

    @app.route("/api/dashboard/<day>", methods=["GET"], endpoint="dashboard")
    def dashboard(day: str):
        summaries = container.payroll_service.location_summaries(parse_iso_date(day))
        return ok([s.to_dict() for s in summaries])
