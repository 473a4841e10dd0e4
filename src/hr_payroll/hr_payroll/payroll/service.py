from __future__ import annotations

import logging
from typing import Optional

from ..attendance.aggregator import AttendanceAggregator
from ..attendance.repository import AttendanceRepository
from ..branches.model import DEFAULT_BRANCH, Branch
from ..branches.repository import BranchRepository
from ..common.datetime_utils import YearMonth
from ..core.exceptions import NotFoundError, SalaryNotConfiguredError
from ..employees.model import Employee
from ..employees.repository import EmployeeRepository
from .calculator.base import PayrollCalculator
from .calculator.standard_calculator import StandardPayrollCalculator
from .model import PayrollPolicy, Payslip

logger = logging.getLogger(__name__)


class PayrollService:
    """Use case: compute payslips from stored employees, branches and attendance."""

    def __init__(
        self,
        employees: EmployeeRepository,
        branches: BranchRepository,
        attendance: AttendanceRepository,
        *,
        policy: Optional[PayrollPolicy] = None,
        calculator: Optional[PayrollCalculator] = None,
    ):
        self._employees = employees
        self._branches = branches
        self._attendance = attendance
        self._policy = policy or PayrollPolicy()
        self._calculator = calculator or StandardPayrollCalculator(self._policy)
        self._aggregator = AttendanceAggregator(shift_hours=self._policy.shift_hours)

    def compute_for_employee(self, employee_id: int, month: YearMonth, *, require_salary: bool = False) -> Payslip:
        employee = self._employees.get_by_id(employee_id)
        if not employee:
            raise NotFoundError(f"Employee {employee_id} not found")

        branch = self._branch_for(employee)
        records = self._attendance.get_for_employee(employee_id, start_date=month.first_day, end_date=month.last_day)
        stats = self._aggregator.aggregate(records, month)

        payslip = self._calculator.calculate(employee, branch, stats, month)
        if not payslip.salary_configured:
            if require_salary:
                raise SalaryNotConfiguredError(employee_id)
            logger.warning("No salary configured for employee %s (%s), payslip for %s is zero", employee_id, employee.name, month)
        return payslip

    def run_month(self, month: YearMonth, *, branch_id: Optional[int] = None) -> list[Payslip]:
        """Payslips for every active employee, optionally limited to one branch.

        One attendance query covers the whole month; each employee is then an
        independent computation.
        """
        employees = list(self._employees.list_active(branch_id=branch_id))
        if not employees:
            return []

        records = self._attendance.get_for_range(
            start_date=month.first_day,
            end_date=month.last_day,
            employee_ids=[e.employee_id for e in employees],
        )
        stats_by_employee = self._aggregator.aggregate_by_employee(records, month)
        branches = {b.branch_id: b for b in self._branches.list_all()}

        payslips = []
        unconfigured = 0
        for employee in employees:
            stats = stats_by_employee.get(employee.employee_id) or self._aggregator.aggregate([], month)
            branch = branches.get(employee.branch_id, DEFAULT_BRANCH)
            if employee.branch_id is not None and branch is DEFAULT_BRANCH:
                logger.warning("Branch %s of employee %s not found, using default OT rates", employee.branch_id, employee.employee_id)
            payslip = self._calculator.calculate(employee, branch, stats, month)
            if not payslip.salary_configured:
                unconfigured += 1
            payslips.append(payslip)

        if unconfigured:
            logger.warning("%s of %s employees have no salary configured for %s", unconfigured, len(payslips), month)
        logger.info("Computed %s payslips for %s (branch=%s)", len(payslips), month, branch_id or "all")
        return payslips

    def _branch_for(self, employee: Employee) -> Branch:
        if employee.branch_id is None:
            return DEFAULT_BRANCH
        branch = self._branches.get_by_id(employee.branch_id)
        if not branch:
            raise NotFoundError(f"Branch {employee.branch_id} not found")
        return branch
