"""Presentation adapters over computed payslips.

Everything here only reshapes a ``Payslip``; no formula lives in this module.
Rounding for display happens here and nowhere earlier for Basic/DA.
"""

from __future__ import annotations

import io
from typing import Iterable, Sequence

import pandas as pd

from ..common.money import round_half_away, round_money
from .model import Payslip

REGISTER_SHEET = "Payroll"


def payslip_lines(payslip: Payslip) -> list[tuple[str, int]]:
    """Labelled payslip line items in print order."""
    e, d, r = payslip.earnings, payslip.deductions, payslip.result
    return [
        ("Basic + DA", round_half_away(e.basic_plus_da)),
        ("Overtime Amount", e.ot_pay),
        ("Gross Earnings", round_half_away(r.gross_earnings)),
        ("PF", d.pf),
        ("ESI", d.esi),
        ("Rent", d.rent),
        ("Advance", d.advance),
        ("Uniform", d.uniform),
        ("Food", d.food),
        ("Shoe & Uniform Allowance", d.shoe_uniform_offset),
        ("Total Deductions", d.total_deduction),
        ("NET PAY", round_half_away(r.take_home)),
    ]


def register_row(payslip: Payslip) -> dict:
    """One payroll register row per employee per month."""
    emp, e, d, r = payslip.employee, payslip.earnings, payslip.deductions, payslip.result
    return {
        "Emp.No": emp.code,
        "Employee Name": emp.name,
        "Branch": payslip.branch.name,
        "Month": str(payslip.month),
        "Present Days": payslip.worked_days,
        "Absent Days": payslip.stats.absent_days,
        "OT Hours": payslip.stats.ot_hours,
        "Per Day Salary": round_money(payslip.per_day_salary),
        "Earned Basic": round_money(e.earned_basic),
        "Earned DA": round_money(e.earned_da),
        "OT Amount": e.ot_pay,
        "Gross Earnings": round_half_away(r.gross_earnings),
        "PF": d.pf,
        "ESI": d.esi,
        "Rent": d.rent,
        "Advance": d.advance,
        "Food": d.food,
        "Uniform": d.uniform,
        "Shoe & Uniform": d.shoe_uniform_offset,
        "Total Deduction": d.total_deduction,
        "Take Home": round_half_away(r.take_home),
        "Salary Configured": "Yes" if payslip.salary_configured else "No",
    }


def build_register_workbook(payslips: Iterable[Payslip], *, sheet_name: str = REGISTER_SHEET) -> bytes:
    df = pd.DataFrame([register_row(p) for p in payslips])

    # Write into memory; nothing is saved to disk.
    output = io.BytesIO()
    with pd.ExcelWriter(output, engine="openpyxl") as writer:
        df.to_excel(writer, index=False, sheet_name=sheet_name)
    return output.getvalue()


def rows_to_csv(rows: Sequence[dict]) -> str:
    return pd.DataFrame(list(rows)).to_csv(index=False)
