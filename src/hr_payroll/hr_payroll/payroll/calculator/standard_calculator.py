from __future__ import annotations

from typing import Optional

from ...attendance.model import AttendanceStats
from ...branches.model import Branch
from ...common.datetime_utils import YearMonth
from ...employees.model import Employee
from ..model import PayrollPolicy, Payslip
from ..rates import resolve_per_day_salary
from .assembler import assemble
from .base import PayrollCalculator
from .deductions import compute_deductions
from .earnings import compute_earnings


class StandardPayrollCalculator(PayrollCalculator):
    """Standard rule: present days drive Basic/DA, recorded OT hours drive OT pay."""

    def __init__(self, policy: Optional[PayrollPolicy] = None):
        self.policy = policy or PayrollPolicy()

    def calculate(self, employee: Employee, branch: Branch, stats: AttendanceStats, month: YearMonth) -> Payslip:
        per_day_salary = resolve_per_day_salary(employee)
        worked_days = stats.present_days

        earnings = compute_earnings(per_day_salary, worked_days, stats.ot_hours, branch, employee, policy=self.policy)
        deductions = compute_deductions(earnings, employee, branch, stats)

        return Payslip(
            employee=employee,
            branch=branch,
            month=month,
            stats=stats,
            worked_days=worked_days,
            per_day_salary=per_day_salary,
            earnings=earnings,
            deductions=deductions,
            result=assemble(earnings, deductions),
        )
