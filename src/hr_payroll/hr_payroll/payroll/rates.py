"""Per-day salary resolution.

Employees carry several overlapping salary fields from different eras of the
employee form. The resolvers below are tried in order and the first positive
value wins.
"""

from __future__ import annotations

from typing import Callable, Optional, Sequence

from ..common.money import positive_or_none
from ..core.constants import FALLBACK_DAYS_PER_MONTH
from ..employees.model import Employee

RateResolver = Callable[[Employee], Optional[float]]


def from_per_day_salary(employee: Employee) -> Optional[float]:
    return positive_or_none(employee.per_day_salary)


def from_day_rate(employee: Employee) -> Optional[float]:
    return positive_or_none(employee.day_rate)


def from_basic_plus_da(employee: Employee) -> Optional[float]:
    if employee.basic_salary is None or employee.da_amount is None:
        return None
    return positive_or_none(employee.basic_salary + employee.da_amount)


def from_monthly_basic(employee: Employee) -> Optional[float]:
    basic = positive_or_none(employee.basic_salary)
    return None if basic is None else basic / FALLBACK_DAYS_PER_MONTH


RATE_RESOLVERS: Sequence[RateResolver] = (
    from_per_day_salary,
    from_day_rate,
    from_basic_plus_da,
    from_monthly_basic,
)


def resolve_per_day_salary(employee: Employee, resolvers: Sequence[RateResolver] = RATE_RESOLVERS) -> float:
    """Return the per-day salary, or 0 when nothing usable is configured.

    0 means "no salary configured"; callers must not treat it as a valid rate.
    """
    for resolver in resolvers:
        value = resolver(employee)
        if value is not None:
            return value
    return 0
