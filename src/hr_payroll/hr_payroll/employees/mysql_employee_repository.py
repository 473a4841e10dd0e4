from __future__ import annotations

from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import Employee
from .repository import EmployeeRepository

_COLUMNS = """
    id, employee_code, name, branch_id, per_day_salary, day_rate, basic_salary, da_amount,
    is_driver, pf_eligible, esi_eligible, rent_deduction, advance, shoe_uniform_allowance,
    pf_number, esi_number
"""


def _float_or_none(value) -> Optional[float]:
    return None if value is None else float(value)


def _to_employee(r: dict) -> Employee:
    return Employee(
        employee_id=int(r["id"]),
        name=r["name"],
        branch_id=int(r["branch_id"]) if r.get("branch_id") is not None else None,
        code=r.get("employee_code") or "",
        per_day_salary=_float_or_none(r.get("per_day_salary")),
        day_rate=_float_or_none(r.get("day_rate")),
        basic_salary=_float_or_none(r.get("basic_salary")),
        da_amount=_float_or_none(r.get("da_amount")),
        is_driver=bool(r.get("is_driver")),
        pf_eligible=bool(r.get("pf_eligible")),
        esi_eligible=bool(r.get("esi_eligible")),
        rent_deduction=_float_or_none(r.get("rent_deduction")),
        advance=_float_or_none(r.get("advance")),
        shoe_uniform_allowance=_float_or_none(r.get("shoe_uniform_allowance")),
        pf_number=r.get("pf_number"),
        esi_number=r.get("esi_number"),
    )


class MySQLEmployeeRepository(EmployeeRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, employee_id: int) -> Optional[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM employees WHERE id=%s", (employee_id,))
            r = fetchone(cur)
            return _to_employee(r) if r else None

    def list_active(self, *, branch_id: Optional[int] = None) -> Sequence[Employee]:
        sql = f"SELECT {_COLUMNS} FROM employees WHERE status='active'"
        params: tuple = ()
        if branch_id is not None:
            sql += " AND branch_id=%s"
            params = (branch_id,)
        sql += " ORDER BY employee_code"

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(sql, params)
            return [_to_employee(r) for r in fetchall(cur)]
