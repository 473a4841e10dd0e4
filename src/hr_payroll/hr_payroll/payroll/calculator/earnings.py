from __future__ import annotations

from typing import Optional

from ...branches.model import Branch
from ...common.money import round_half_away
from ...common.validators import require_non_negative
from ...core.constants import BASIC_SHARE
from ...employees.model import Employee
from ..model import Earnings, PayrollPolicy


def compute_earnings(
    per_day_salary: float,
    worked_days: float,
    ot_hours: float,
    branch: Branch,
    employee: Employee,
    *,
    policy: Optional[PayrollPolicy] = None,
) -> Earnings:
    """Basic/DA split scaled by worked days, plus OT pay.

    Earned Basic and DA are left unrounded; only OT pay is rounded here.
    """
    policy = policy or PayrollPolicy()
    require_non_negative(per_day_salary, "per_day_salary")
    require_non_negative(worked_days, "worked_days")
    require_non_negative(ot_hours, "ot_hours")
    ot_rate = require_non_negative(branch.ot_rate_for(is_driver=employee.is_driver), "ot_rate")

    basic_rate = per_day_salary * BASIC_SHARE
    # DA is the remainder so basic_rate + da_rate == per_day_salary exactly.
    da_rate = per_day_salary - basic_rate

    earned_basic = basic_rate * worked_days
    earned_da = da_rate * worked_days
    ot_pay = round_half_away(ot_hours * ot_rate)

    gross = earned_basic + earned_da + ot_pay
    capped = min(gross, policy.gross_cap_amount) if policy.gross_cap_enabled else gross

    return Earnings(
        basic_rate=basic_rate,
        da_rate=da_rate,
        earned_basic=earned_basic,
        earned_da=earned_da,
        ot_pay=ot_pay,
        gross_earnings=capped,
        uncapped_gross=gross,
    )
