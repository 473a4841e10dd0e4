from __future__ import annotations

from abc import ABC, abstractmethod

from ...attendance.model import AttendanceStats
from ...branches.model import Branch
from ...common.datetime_utils import YearMonth
from ...employees.model import Employee
from ..model import Payslip


class PayrollCalculator(ABC):
    """Calculator interface (Strategy Pattern for payroll)."""

    @abstractmethod
    def calculate(self, employee: Employee, branch: Branch, stats: AttendanceStats, month: YearMonth) -> Payslip:
        raise NotImplementedError
