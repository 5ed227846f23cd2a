"""Map raw metric values onto a [0, 1] band."""

from __future__ import annotations

import math

SOFT_CLIP_LOW = 0.5
SOFT_CLIP_HIGH = 1.5


def normalize(value: float, min_value: float, max_value: float) -> float:
    """Linear map of *value* from [min_value, max_value] onto [0, 1].

    The value is first soft-clipped to ``[min*0.5, max*1.5]`` so figures just
    outside the reference band still get partial credit, then the result is
    clamped to [0, 1]. Non-finite input scores 0.
    """
    try:
        v = float(value)
    except (TypeError, ValueError):
        return 0.0
    if not math.isfinite(v):
        return 0.0
    clipped = max(min_value * SOFT_CLIP_LOW, min(max_value * SOFT_CLIP_HIGH, v))
    span = (max_value - min_value) or 1
    return max(0.0, min(1.0, (clipped - min_value) / span))
