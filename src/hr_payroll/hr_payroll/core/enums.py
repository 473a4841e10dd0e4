from __future__ import annotations

from enum import Enum
from typing import Optional


class AttendanceStatus(str, Enum):
    """Daily attendance status as stored by the attendance screens."""

    PRESENT = "present"
    ABSENT = "absent"
    LATE = "late"

    @classmethod
    def parse(cls, value: Optional[str]) -> Optional["AttendanceStatus"]:
        """Lenient lookup; unknown or empty values map to None."""
        if not value:
            return None
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            return None
