"""Strategy-weighted 0-100 scoring."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from ..models import InvestmentMetrics, RawProperty, ScoredProperty, ScoringContext, Strategy
from ..underwriting.metrics import compute_metrics
from ..underwriting.numbers import finite_or, round_half_up
from .normalize import normalize

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StrategyWeights:
    cap_rate: float
    cash_on_cash: float
    appreciation: float


STRATEGY_WEIGHTS: dict[Strategy, StrategyWeights] = {
    Strategy.RENTAL: StrategyWeights(cap_rate=0.5, cash_on_cash=0.4, appreciation=0.1),
    Strategy.APPRECIATION: StrategyWeights(cap_rate=0.2, cash_on_cash=0.2, appreciation=0.6),
    # Short-term rentals lean on cash flow.
    Strategy.SHORT_TERM_RENTAL: StrategyWeights(cap_rate=0.3, cash_on_cash=0.5, appreciation=0.2),
}

_missing = set(Strategy) - set(STRATEGY_WEIGHTS)
if _missing:
    raise RuntimeError(f"No scoring weights for strategies: {sorted(s.value for s in _missing)}")

# Reference bands (min, max) for each sub-score.
CAP_RATE_BAND = (0.03, 0.12)
CASH_ON_CASH_BAND = (0.04, 0.20)
APPRECIATION_BAND = (0.10, 0.80)  # total over the horizon, not annualized

LOW_RENT_THRESHOLD = 500
LOW_RENT_PENALTY = 0.9


def weights_for(strategy: Strategy | str) -> StrategyWeights:
    return STRATEGY_WEIGHTS[Strategy.parse(strategy)]


def total_appreciation(metrics: InvestmentMetrics, list_price: float | None) -> float:
    """Projected value over list price, minus one. Prices <= 0 divide by 1."""
    price = finite_or(list_price)
    return metrics.projected_value_year_n / (price if price > 0 else 1) - 1


def score_metrics(
    metrics: InvestmentMetrics,
    list_price: float | None,
    strategy: Strategy | str,
) -> int:
    """Weighted, clamped 0-100 score for already computed metrics."""
    w = weights_for(strategy)
    cap_score = normalize(metrics.cap_rate, *CAP_RATE_BAND)
    coc_score = normalize(metrics.cash_on_cash, *CASH_ON_CASH_BAND)
    appr_score = normalize(total_appreciation(metrics, list_price), *APPRECIATION_BAND)

    total = (
        cap_score * w.cap_rate
        + coc_score * w.cash_on_cash
        + appr_score * w.appreciation
    )
    # Implausibly low rent usually means bad input data.
    if metrics.estimated_rent < LOW_RENT_THRESHOLD:
        total *= LOW_RENT_PENALTY

    return int(round_half_up(max(0.0, min(1.0, total)) * 100))


def score_property(prop: RawProperty, context: ScoringContext) -> ScoredProperty:
    """Score one property under a strategy, horizon and assumption set."""
    if not isinstance(context, ScoringContext):
        raise ValueError(f"context must be a ScoringContext, got {type(context).__name__}")
    if not isinstance(prop, RawProperty):
        raise ValueError(f"property must be a RawProperty, got {type(prop).__name__}")

    metrics = compute_metrics(prop, context.assumptions, context.horizon_years, context.strategy)
    score = score_metrics(metrics, prop.list_price, context.strategy)
    logger.debug(
        "scored %s strategy=%s score=%d cap=%.4f coc=%.4f",
        prop.id,
        context.strategy.value,
        score,
        metrics.cap_rate,
        metrics.cash_on_cash,
    )
    return ScoredProperty(property=prop, metrics=metrics, score=score)
