from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .advances.mysql_advance_repository import MySQLAdvanceRepository
from .advances.repository import AdvanceRepository
from .advances.service import AdvanceService
from .attendance.mysql_attendance_repository import MySQLAttendanceRepository
from .attendance.repository import AttendanceRepository
from .attendance.service import AttendanceService
from .core.enums import HraPolicy
from .database.connection import DatabaseConnection, DBConfig
from .payroll.calculator.standard_calculator import StandardSalaryCalculator
from .payroll.rates import RateTable
from .payroll.service import PayrollService
from .staff.mysql_staff_repository import MySQLArchivedStaffRepository, MySQLStaffRepository
from .staff.repository import ArchivedStaffRepository, StaffRepository
from .staff.service import StaffService


@dataclass(frozen=True)
class Container:
    staff_repo: StaffRepository
    archive_repo: ArchivedStaffRepository
    attendance_repo: AttendanceRepository
    advances_repo: AdvanceRepository

    staff_service: StaffService
    attendance_service: AttendanceService
    advance_service: AdvanceService
    payroll_service: PayrollService

    conn: Optional[DatabaseConnection] = None


def wire_services(
    *,
    staff_repo: StaffRepository,
    archive_repo: ArchivedStaffRepository,
    attendance_repo: AttendanceRepository,
    advances_repo: AdvanceRepository,
    hra_policy: HraPolicy = HraPolicy.FULL,
    rates: Optional[RateTable] = None,
    conn: Optional[DatabaseConnection] = None,
) -> Container:
    rates = rates or RateTable()
    return Container(
        staff_repo=staff_repo,
        archive_repo=archive_repo,
        attendance_repo=attendance_repo,
        advances_repo=advances_repo,
        staff_service=StaffService(staff_repo, archive_repo, advances_repo),
        attendance_service=AttendanceService(attendance_repo, staff_repo, rates=rates),
        advance_service=AdvanceService(advances_repo, staff_repo),
        payroll_service=PayrollService(
            staff_repo,
            attendance_repo,
            advances_repo,
            calculator=StandardSalaryCalculator(hra_policy=hra_policy),
            rates=rates,
        ),
        conn=conn,
    )


def build_container(*, db_config: dict, hra_policy: str = "full", rates: Optional[dict] = None) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_mapping(db_config))
    return wire_services(
        staff_repo=MySQLStaffRepository(conn),
        archive_repo=MySQLArchivedStaffRepository(conn),
        attendance_repo=MySQLAttendanceRepository(conn),
        advances_repo=MySQLAdvanceRepository(conn),
        hra_policy=HraPolicy(hra_policy),
        rates=RateTable.from_settings(rates),
        conn=conn,
    )
