"""Numeric guards shared by the underwriting steps."""

from __future__ import annotations

import math
from typing import Any


def finite_or(value: Any, default: float = 0.0) -> float:
    """Return *value* as a float, or *default* if missing or non-finite."""
    if value is None or isinstance(value, bool):
        return default
    try:
        f = float(value)
    except (TypeError, ValueError):
        return default
    return f if math.isfinite(f) else default


def non_negative(value: Any) -> float:
    """Finite, non-negative float; everything else counts as 0."""
    return max(0.0, finite_or(value))


def round_half_up(value: float) -> float:
    """Round to a whole unit, halves away from zero on the positive side.

    Python's round() uses banker's rounding, which would make 2400.5 and
    2401.5 round in different directions.
    """
    return float(math.floor(value + 0.5))
