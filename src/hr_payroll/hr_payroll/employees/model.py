from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Employee:
    """Domain entity: the salary and eligibility slice of an employee row.

    Owned by the CRUD layer; payroll code only reads it.
    """

    employee_id: int
    name: str
    branch_id: Optional[int] = None
    code: str = ""

    per_day_salary: Optional[float] = None
    day_rate: Optional[float] = None
    basic_salary: Optional[float] = None
    da_amount: Optional[float] = None

    is_driver: bool = False
    pf_eligible: bool = False
    esi_eligible: bool = False

    rent_deduction: Optional[float] = None
    advance: Optional[float] = None
    shoe_uniform_allowance: Optional[float] = None

    pf_number: Optional[str] = None
    esi_number: Optional[str] = None
