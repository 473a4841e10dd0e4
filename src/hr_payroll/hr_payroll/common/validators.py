from __future__ import annotations

import math
from typing import Optional

from ..core.exceptions import ValidationError


def require_non_negative(value: float, field_name: str) -> float:
    if value is None or not math.isfinite(value) or value < 0:
        raise ValidationError(f"{field_name} must be a non-negative number, got {value!r}")
    return value


def optional_non_negative(value: Optional[float], field_name: str) -> Optional[float]:
    if value is None:
        return None
    return require_non_negative(value, field_name)
