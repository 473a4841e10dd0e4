from __future__ import annotations

from ..model import Deductions, Earnings, PayrollResult


def assemble(earnings: Earnings, deductions: Deductions) -> PayrollResult:
    """Net pay. Any gross cap is already applied inside ``earnings``."""
    return PayrollResult(
        gross_earnings=earnings.gross_earnings,
        total_deduction=deductions.total_deduction,
        take_home=earnings.gross_earnings - deductions.total_deduction,
    )
