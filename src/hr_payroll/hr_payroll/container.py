from __future__ import annotations

from dataclasses import dataclass

from .attendance.mysql_attendance_repository import MySQLAttendanceRepository
from .branches.mysql_branch_repository import MySQLBranchRepository
from .database.connection import DBConfig, DatabaseConnection
from .employees.mysql_employee_repository import MySQLEmployeeRepository
from .payroll.model import PayrollPolicy
from .payroll.service import PayrollService


@dataclass(frozen=True)
class Container:
    conn: DatabaseConnection

    employees_repo: MySQLEmployeeRepository
    branches_repo: MySQLBranchRepository
    attendance_repo: MySQLAttendanceRepository

    payroll_service: PayrollService


def build_container(*, db_config: dict, policy: PayrollPolicy) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_dict(db_config))

    employees_repo = MySQLEmployeeRepository(conn)
    branches_repo = MySQLBranchRepository(conn)
    attendance_repo = MySQLAttendanceRepository(conn)

    payroll_service = PayrollService(employees_repo, branches_repo, attendance_repo, policy=policy)

    return Container(
        conn=conn,
        employees_repo=employees_repo,
        branches_repo=branches_repo,
        attendance_repo=attendance_repo,
        payroll_service=payroll_service,
    )
