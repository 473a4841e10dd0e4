from __future__ import annotations

import calendar
import re
from dataclasses import dataclass
from datetime import date, datetime, time

from ..core.exceptions import ValidationError

_YEAR_MONTH = re.compile(r"^(\d{4})-(\d{1,2})$")


@dataclass(frozen=True, order=True)
class YearMonth:
    """A calendar month. Boundaries are plain local dates (no timezone shift)."""

    year: int
    month: int

    def __post_init__(self):
        if not 1 <= int(self.month) <= 12:
            raise ValidationError(f"Invalid month: {self.month!r}")

    @classmethod
    def parse(cls, value: str) -> "YearMonth":
        """Parse YYYY-MM string into YearMonth."""
        match = _YEAR_MONTH.match((value or "").strip())
        if not match:
            raise ValidationError(f"Invalid month {value!r}, expected YYYY-MM")
        return cls(int(match.group(1)), int(match.group(2)))

    @classmethod
    def of(cls, day: date) -> "YearMonth":
        return cls(day.year, day.month)

    @property
    def first_day(self) -> date:
        return date(self.year, self.month, 1)

    @property
    def last_day(self) -> date:
        return date(self.year, self.month, calendar.monthrange(self.year, self.month)[1])

    def contains(self, day: date) -> bool:
        if isinstance(day, datetime):
            day = day.date()
        return self.first_day <= day <= self.last_day

    def __str__(self) -> str:
        return f"{self.year:04d}-{self.month:02d}"


def hours_between(start: time, end: time) -> float:
    """Hours from start to end on the same day; 0 when end is not after start."""
    seconds = (datetime.combine(date.min, end) - datetime.combine(date.min, start)).total_seconds()
    return max(seconds / 3600.0, 0.0)
