from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Decimal
from typing import Any, Optional


def round_half_away(value: float) -> int:
    """Round to whole rupees, halves away from zero (97.5 -> 98, -97.5 -> -98).

    Goes through ``str`` so float noise such as ``97.49999999999999`` from
    ``13000 * 0.0075`` rounds the way the printed amount suggests.
    """
    return int(Decimal(str(value)).quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def round_money(value: float, places: int = 2) -> float:
    """Display rounding to ``places`` decimals, halves away from zero."""
    return float(Decimal(str(value)).quantize(Decimal(1).scaleb(-places), rounding=ROUND_HALF_UP))


def to_number(value: Any) -> Optional[float]:
    """Coerce a column/JSON value to float; None when it is not numeric."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float, Decimal)):
        return _finite(float(value))
    if isinstance(value, str):
        text = value.strip()
        if not text:
            return None
        try:
            return _finite(float(text))
        except ValueError:
            return None
    return None


def _finite(number: float) -> Optional[float]:
    return number if math.isfinite(number) else None


def positive_or_none(value: Any) -> Optional[float]:
    number = to_number(value)
    if number is None or number <= 0:
        return None
    return number
