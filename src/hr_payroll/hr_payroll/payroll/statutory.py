"""Employer and employee statutory contributions for the monthly PF/ESI reports."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from ..common.money import round_half_away, round_money
from ..core.constants import EPF_EMPLOYER_RATE, EPS_EMPLOYER_RATE, ESI_EMPLOYER_RATE, ESI_THRESHOLD
from .model import Payslip


@dataclass(frozen=True)
class PFContribution:
    pf_base: float
    employee_share: int
    employer_epf: int
    employer_eps: int

    @property
    def total_employer(self) -> int:
        return self.employer_epf + self.employer_eps


@dataclass(frozen=True)
class ESIContribution:
    esi_base: float
    employee_share: int
    employer_share: int

    @property
    def total(self) -> int:
        return self.employee_share + self.employer_share


def pf_contribution(payslip: Payslip) -> PFContribution:
    base = payslip.deductions.pf_base
    if not payslip.employee.pf_eligible:
        return PFContribution(pf_base=base, employee_share=0, employer_epf=0, employer_eps=0)
    return PFContribution(
        pf_base=base,
        employee_share=payslip.deductions.pf,
        employer_epf=round_half_away(base * EPF_EMPLOYER_RATE),
        employer_eps=round_half_away(base * EPS_EMPLOYER_RATE),
    )


def esi_contribution(payslip: Payslip) -> ESIContribution:
    base = payslip.deductions.esi_base
    if not payslip.employee.esi_eligible or base > ESI_THRESHOLD:
        return ESIContribution(esi_base=base, employee_share=0, employer_share=0)
    return ESIContribution(
        esi_base=base,
        employee_share=payslip.deductions.esi,
        employer_share=round_half_away(base * ESI_EMPLOYER_RATE),
    )


def _reportable(payslips: Iterable[Payslip]) -> list[Payslip]:
    return [p for p in payslips if p.stats.has_activity]


def pf_report_rows(payslips: Iterable[Payslip]) -> list[dict]:
    rows = []
    for p in _reportable(payslips):
        c = pf_contribution(p)
        rows.append(
            {
                "Emp.No": p.employee.code,
                "Employee Name": p.employee.name,
                "PF NO": p.employee.pf_number or "",
                "Branch": p.branch.name,
                "Days Present": p.worked_days,
                "PF.Basic": round_money(c.pf_base),
                "Emp.12 Amt": c.employee_share,
                "E.P.F": c.employer_epf,
                "E.P.S": c.employer_eps,
                "Total Employer": c.total_employer,
            }
        )
    return rows


def esi_report_rows(payslips: Iterable[Payslip]) -> list[dict]:
    rows = []
    for p in _reportable(payslips):
        c = esi_contribution(p)
        rows.append(
            {
                "Emp.No": p.employee.code,
                "Employee Name": p.employee.name,
                "ESI NO": p.employee.esi_number or "",
                "Branch": p.branch.name,
                "Days Present": p.worked_days,
                "ESI Base": round_money(c.esi_base),
                "Employee ESI (0.75%)": c.employee_share,
                "Employer ESI (3.25%)": c.employer_share,
                "Total ESI": c.total,
            }
        )
    return rows
