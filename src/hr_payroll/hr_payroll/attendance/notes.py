"""Decoding of the JSON ``notes`` blob carried by manual attendance entries.

Older screens stored monthly figures as JSON text in ``attendance.notes``
instead of the dedicated columns. This module is the single place that knows
that encoding: it validates the payload shape and hands back typed values.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, fields
from typing import Any, Mapping, Optional

from ..common.money import to_number


class NotesDecodeError(ValueError):
    """Raised when notes are not a JSON object."""


@dataclass(frozen=True)
class NotesPayload:
    present_days: Optional[float] = None
    absent_days: Optional[float] = None
    late_days: Optional[float] = None
    ot_hours: Optional[float] = None
    food: Optional[float] = None
    uniform: Optional[float] = None
    advance: Optional[float] = None
    rent_deduction: Optional[float] = None

    @property
    def has_day_counts(self) -> bool:
        return any(v is not None for v in (self.present_days, self.absent_days, self.late_days))

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "NotesPayload":
        values = {f.name: to_number(data.get(f.name)) for f in fields(cls)}
        if values["rent_deduction"] is None:
            # Legacy key.
            values["rent_deduction"] = to_number(data.get("rent"))
        return cls(**values)


def _reject_constant(name: str) -> Any:
    # NaN and Infinity are not JSON.
    raise NotesDecodeError(f"notes contain non-finite number {name}")


def decode_notes(raw: str) -> NotesPayload:
    try:
        data = json.loads(raw, parse_constant=_reject_constant)
    except (TypeError, ValueError) as e:
        raise NotesDecodeError(f"notes are not valid JSON: {e}") from e
    if not isinstance(data, dict):
        raise NotesDecodeError(f"notes must be a JSON object, got {type(data).__name__}")
    return NotesPayload.from_mapping(data)
