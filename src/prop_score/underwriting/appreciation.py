"""Annual appreciation rate selection."""

from __future__ import annotations

from ..models import Strategy

BASE_APPRECIATION = 0.03
MIN_APPRECIATION = 0.01
MAX_APPRECIATION = 0.07

# High cap rates correlate with weaker long-run appreciation.
HIGH_CAP_RATE = 0.09
VERY_HIGH_CAP_RATE = 0.12
HIGH_CAP_PENALTY = 0.01

STRATEGY_ADJUSTMENT: dict[Strategy, float] = {
    Strategy.RENTAL: 0.0,
    Strategy.APPRECIATION: 0.01,
    Strategy.SHORT_TERM_RENTAL: -0.005,
}


def appreciation_rate(cap_rate: float, strategy: Strategy | str) -> float:
    """Annual appreciation rate in [0.01, 0.07]."""
    rate = BASE_APPRECIATION
    if cap_rate > HIGH_CAP_RATE:
        rate -= HIGH_CAP_PENALTY
    if cap_rate > VERY_HIGH_CAP_RATE:
        rate -= HIGH_CAP_PENALTY
    rate += STRATEGY_ADJUSTMENT[Strategy.parse(strategy)]
    return min(MAX_APPRECIATION, max(MIN_APPRECIATION, rate))
