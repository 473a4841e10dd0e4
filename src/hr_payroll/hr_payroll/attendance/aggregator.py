from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Optional

from ..common.datetime_utils import YearMonth
from .model import AttendanceRecord, AttendanceStats
from .resolvers import DAY_RESOLVERS, DayCounts, RecordContext, amount_resolvers, first_resolved


@dataclass
class _Totals:
    present_days: float = 0
    absent_days: float = 0
    late_days: float = 0
    amounts: dict[str, float] = field(default_factory=dict)
    total_records: int = 0

    def freeze(self) -> AttendanceStats:
        return AttendanceStats(
            present_days=self.present_days,
            absent_days=self.absent_days,
            late_days=self.late_days,
            ot_hours=self.amounts.get("ot_hours", 0),
            food=self.amounts.get("food", 0),
            uniform=self.amounts.get("uniform", 0),
            rent_deduction=self.amounts.get("rent_deduction", 0),
            advance=self.amounts.get("advance", 0),
            total_records=self.total_records,
        )


class AttendanceAggregator:
    """Folds a month's attendance rows into AttendanceStats.

    Stateless apart from configuration, so one instance can be shared.
    ``shift_hours`` enables OT derived from check-in/check-out times when no
    OT figure was recorded.
    """

    def __init__(self, *, shift_hours: Optional[float] = None):
        self._amount_resolvers = amount_resolvers(shift_hours=shift_hours)

    def aggregate(self, records: Iterable[AttendanceRecord], month: YearMonth) -> AttendanceStats:
        totals = _Totals()
        for record in records:
            if record.work_date is not None and not month.contains(record.work_date):
                continue
            self._fold(totals, record)
        return totals.freeze()

    def aggregate_by_employee(self, records: Iterable[AttendanceRecord], month: YearMonth) -> dict[int, AttendanceStats]:
        grouped: dict[int, list[AttendanceRecord]] = {}
        for record in records:
            grouped.setdefault(record.employee_id, []).append(record)
        return {employee_id: self.aggregate(rows, month) for employee_id, rows in grouped.items()}

    def _fold(self, totals: _Totals, record: AttendanceRecord) -> None:
        ctx = RecordContext(record)
        totals.total_records += 1

        days: Optional[DayCounts] = first_resolved(DAY_RESOLVERS, ctx)
        if days is not None:
            totals.present_days += days.present
            totals.absent_days += days.absent
            totals.late_days += days.late

        for name, resolvers in self._amount_resolvers.items():
            value = first_resolved(resolvers, ctx)
            if value:
                totals.amounts[name] = totals.amounts.get(name, 0) + value


_default = AttendanceAggregator()


def aggregate(records: Iterable[AttendanceRecord], month: YearMonth) -> AttendanceStats:
    return _default.aggregate(records, month)
