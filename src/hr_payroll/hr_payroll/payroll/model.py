from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from ..attendance.model import AttendanceStats
from ..branches.model import Branch
from ..common.datetime_utils import YearMonth
from ..core.constants import DEFAULT_GROSS_CAP, DEFAULT_SHIFT_HOURS
from ..employees.model import Employee


@dataclass(frozen=True)
class PayrollPolicy:
    """Switchable payroll rules that historically varied between screens."""

    gross_cap_enabled: bool = False
    gross_cap_amount: float = DEFAULT_GROSS_CAP
    derive_ot_from_shift: bool = False
    standard_shift_hours: float = DEFAULT_SHIFT_HOURS

    @classmethod
    def from_settings(cls, settings: Any) -> "PayrollPolicy":
        return cls(
            gross_cap_enabled=bool(getattr(settings, "PAYROLL_GROSS_CAP_ENABLED", False)),
            gross_cap_amount=float(getattr(settings, "PAYROLL_GROSS_CAP_AMOUNT", DEFAULT_GROSS_CAP)),
            derive_ot_from_shift=bool(getattr(settings, "PAYROLL_DERIVE_OT_FROM_SHIFT", False)),
            standard_shift_hours=float(getattr(settings, "PAYROLL_STANDARD_SHIFT_HOURS", DEFAULT_SHIFT_HOURS)),
        )

    @property
    def shift_hours(self) -> Optional[float]:
        return self.standard_shift_hours if self.derive_ot_from_shift else None


@dataclass(frozen=True)
class Earnings:
    basic_rate: float
    da_rate: float
    earned_basic: float
    earned_da: float
    ot_pay: int
    gross_earnings: float
    uncapped_gross: float

    @property
    def basic_plus_da(self) -> float:
        return self.earned_basic + self.earned_da


@dataclass(frozen=True)
class Deductions:
    pf: int
    esi: int
    rent: int
    advance: int
    food: int
    uniform: int
    shoe_uniform_offset: int
    total_deduction: int
    pf_base: float
    esi_base: float


@dataclass(frozen=True)
class PayrollResult:
    gross_earnings: float
    total_deduction: int
    take_home: float

    @property
    def net_pay(self) -> float:
        return self.take_home


@dataclass(frozen=True)
class Payslip:
    """Everything computed for one employee and month."""

    employee: Employee
    branch: Branch
    month: YearMonth
    stats: AttendanceStats
    worked_days: float
    per_day_salary: float
    earnings: Earnings
    deductions: Deductions
    result: PayrollResult

    @property
    def salary_configured(self) -> bool:
        return self.per_day_salary > 0
