"""Ordered field resolvers for one attendance record.

Each field of a record is resolved by trying its resolvers in order; the
first one returning a value wins. Day counts resolve as a group:

1. direct monthly columns (``present_days``/``absent_days``/``late_days``)
2. the JSON notes, when they carry any day count
3. a tally of one day chosen by ``status``

Amounts (OT hours, rent, advance, food, uniform) resolve from the direct
column when it is positive, then from the notes.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Optional, Sequence

from ..common.datetime_utils import hours_between
from ..common.money import positive_or_none
from ..core.enums import AttendanceStatus
from .model import AttendanceRecord
from .notes import NotesDecodeError, NotesPayload, decode_notes

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DayCounts:
    present: float = 0
    absent: float = 0
    late: float = 0


class RecordContext:
    """A record plus its lazily decoded notes (decoded at most once)."""

    def __init__(self, record: AttendanceRecord):
        self.record = record
        self._notes: Optional[NotesPayload] = None
        self._decoded = False
        self.notes_failed = False

    @property
    def notes(self) -> Optional[NotesPayload]:
        if not self._decoded:
            self._decoded = True
            raw = self.record.notes
            if raw and raw.strip():
                try:
                    self._notes = decode_notes(raw)
                except NotesDecodeError as e:
                    self.notes_failed = True
                    logger.debug("Ignoring notes for employee %s on %s: %s", self.record.employee_id, self.record.work_date, e)
        return self._notes


DayResolver = Callable[[RecordContext], Optional[DayCounts]]
AmountResolver = Callable[[RecordContext], Optional[float]]


def direct_day_columns(ctx: RecordContext) -> Optional[DayCounts]:
    r = ctx.record
    present, absent, late = (positive_or_none(v) for v in (r.present_days, r.absent_days, r.late_days))
    if present is None and absent is None and late is None:
        return None
    return DayCounts(present=present or 0, absent=absent or 0, late=late or 0)


def notes_day_counts(ctx: RecordContext) -> Optional[DayCounts]:
    # Monthly figures in notes belong to "present" entries; an absent or late
    # status is a daily mark and keeps its own tally.
    if AttendanceStatus.parse(ctx.record.status) in (AttendanceStatus.ABSENT, AttendanceStatus.LATE):
        return None
    notes = ctx.notes
    if notes is None or not notes.has_day_counts:
        return None
    return DayCounts(present=notes.present_days or 0, absent=notes.absent_days or 0, late=notes.late_days or 0)


def status_tally(ctx: RecordContext) -> Optional[DayCounts]:
    status = AttendanceStatus.parse(ctx.record.status)
    if status is AttendanceStatus.PRESENT:
        return DayCounts(present=1)
    if status is AttendanceStatus.ABSENT:
        return DayCounts(absent=1)
    if status is AttendanceStatus.LATE:
        return DayCounts(late=1)
    return None


DAY_RESOLVERS: Sequence[DayResolver] = (direct_day_columns, notes_day_counts, status_tally)


def direct_column(column: str) -> AmountResolver:
    def resolve(ctx: RecordContext) -> Optional[float]:
        return positive_or_none(getattr(ctx.record, column))

    resolve.__name__ = f"direct_{column}"
    return resolve


def notes_field(key: str) -> AmountResolver:
    def resolve(ctx: RecordContext) -> Optional[float]:
        notes = ctx.notes
        return None if notes is None else getattr(notes, key)

    resolve.__name__ = f"notes_{key}"
    return resolve


def shift_overrun(standard_hours: float) -> AmountResolver:
    """OT derived from check-in/check-out times beyond a standard shift."""

    def resolve(ctx: RecordContext) -> Optional[float]:
        r = ctx.record
        if r.check_in_time is None or r.check_out_time is None:
            return None
        extra = hours_between(r.check_in_time, r.check_out_time) - standard_hours
        return extra if extra > 0 else None

    return resolve


def amount_resolvers(*, shift_hours: Optional[float] = None) -> dict[str, Sequence[AmountResolver]]:
    ot: list[AmountResolver] = [direct_column("overtime_hours"), notes_field("ot_hours")]
    if shift_hours is not None:
        ot.append(shift_overrun(shift_hours))
    return {
        "ot_hours": tuple(ot),
        "rent_deduction": (direct_column("rent_deduction"), notes_field("rent_deduction")),
        "advance": (direct_column("advance"), notes_field("advance")),
        "food": (notes_field("food"),),
        "uniform": (notes_field("uniform"),),
    }


def first_resolved(resolvers: Sequence[Callable[[RecordContext], Optional[object]]], ctx: RecordContext):
    for resolver in resolvers:
        value = resolver(ctx)
        if value is not None:
            return value
    return None
