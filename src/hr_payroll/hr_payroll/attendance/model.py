from __future__ import annotations

from dataclasses import dataclass
from datetime import date, time
from typing import Any, Optional


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: one daily row or one monthly-summary row.

    The same facts may live in the direct columns or, for older manual
    entries, inside the JSON ``notes`` blob.
    """

    employee_id: int
    work_date: Optional[date] = None
    status: Optional[str] = None
    overtime_hours: Any = None
    present_days: Any = None
    absent_days: Any = None
    late_days: Any = None
    rent_deduction: Any = None
    advance: Any = None
    notes: Optional[str] = None
    check_in_time: Optional[time] = None
    check_out_time: Optional[time] = None


@dataclass(frozen=True)
class AttendanceStats:
    """Per employee, per month attendance totals."""

    present_days: float = 0
    absent_days: float = 0
    late_days: float = 0
    ot_hours: float = 0
    food: float = 0
    uniform: float = 0
    rent_deduction: float = 0
    advance: float = 0
    total_records: int = 0

    @property
    def has_activity(self) -> bool:
        return self.present_days > 0 or self.ot_hours > 0
