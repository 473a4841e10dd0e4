from __future__ import annotations

from datetime import date
from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, in_clause, normalize_mysql_time
from .model import AttendanceRecord
from .repository import AttendanceRepository

_SELECT = """
    SELECT employee_id, date, status, overtime_hours, present_days, absent_days, late_days,
           rent_deduction, advance, notes, check_in_time, check_out_time
    FROM attendance
"""


def _to_record(r: dict) -> AttendanceRecord:
    return AttendanceRecord(
        employee_id=int(r["employee_id"]),
        work_date=r.get("date"),
        status=r.get("status"),
        overtime_hours=r.get("overtime_hours"),
        present_days=r.get("present_days"),
        absent_days=r.get("absent_days"),
        late_days=r.get("late_days"),
        rent_deduction=r.get("rent_deduction"),
        advance=r.get("advance"),
        notes=r.get("notes"),
        check_in_time=normalize_mysql_time(r.get("check_in_time")),
        check_out_time=normalize_mysql_time(r.get("check_out_time")),
    )


class MySQLAttendanceRepository(AttendanceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_for_employee(self, employee_id: int, *, start_date: date, end_date: date) -> Sequence[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                _SELECT + " WHERE employee_id=%s AND date BETWEEN %s AND %s ORDER BY date",
                (employee_id, start_date, end_date),
            )
            return [_to_record(r) for r in fetchall(cur)]

    def get_for_range(
        self,
        *,
        start_date: date,
        end_date: date,
        employee_ids: Optional[Sequence[int]] = None,
    ) -> Sequence[AttendanceRecord]:
        sql = _SELECT + " WHERE date BETWEEN %s AND %s"
        params: tuple = (start_date, end_date)
        if employee_ids:
            placeholders, ids = in_clause(employee_ids)
            sql += f" AND employee_id IN ({placeholders})"
            params += ids
        sql += " ORDER BY employee_id, date"

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(sql, params)
            return [_to_record(r) for r in fetchall(cur)]
