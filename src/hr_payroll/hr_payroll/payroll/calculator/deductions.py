from __future__ import annotations

from typing import Optional

from ...attendance.model import AttendanceStats
from ...branches.model import Branch
from ...common.money import round_half_away
from ...core.constants import ESI_RATE, ESI_THRESHOLD, PF_CAP, PF_RATE
from ...employees.model import Employee
from ..model import Deductions, Earnings


def pf_amount(pf_base: float, *, eligible: bool) -> int:
    if not eligible:
        return 0
    return min(round_half_away(pf_base * PF_RATE), PF_CAP)


def esi_amount(esi_base: float, *, eligible: bool) -> int:
    # Above the threshold ESI is waived entirely, not pro-rated.
    if not eligible or esi_base > ESI_THRESHOLD:
        return 0
    return round_half_away(esi_base * ESI_RATE)


def esi_base_for(earnings: Earnings, branch: Branch) -> float:
    base = earnings.earned_basic + earnings.earned_da
    return base if branch.is_special_esi else base + earnings.ot_pay


def compute_deductions(
    earnings: Earnings,
    employee: Employee,
    branch: Branch,
    stats: Optional[AttendanceStats] = None,
) -> Deductions:
    """Statutory and recovery deductions for one payslip.

    Rent and advance come from the employee record; when the employee has no
    standing value the amount recorded on the month's attendance is used.
    The shoe & uniform allowance offsets the total.
    """
    stats = stats or AttendanceStats()

    pf_base = earnings.earned_basic + earnings.earned_da
    esi_base = esi_base_for(earnings, branch)
    pf = pf_amount(pf_base, eligible=employee.pf_eligible)
    esi = esi_amount(esi_base, eligible=employee.esi_eligible)

    rent = round_half_away(employee.rent_deduction if employee.rent_deduction is not None else stats.rent_deduction)
    advance = round_half_away(employee.advance if employee.advance is not None else stats.advance)
    food = round_half_away(stats.food or 0)
    uniform = round_half_away(stats.uniform or 0)
    offset = round_half_away(employee.shoe_uniform_allowance or 0)

    return Deductions(
        pf=pf,
        esi=esi,
        rent=rent,
        advance=advance,
        food=food,
        uniform=uniform,
        shoe_uniform_offset=offset,
        total_deduction=pf + esi + rent + advance + food + uniform - offset,
        pf_base=pf_base,
        esi_base=esi_base,
    )
