"""Strategy-weighted scoring of underwritten properties."""

from .engine import ScoringEngine, rank_scored
from .normalize import normalize
from .strategy import STRATEGY_WEIGHTS, StrategyWeights, score_metrics, score_property, weights_for

__all__ = [
    "STRATEGY_WEIGHTS",
    "ScoringEngine",
    "StrategyWeights",
    "normalize",
    "rank_scored",
    "score_metrics",
    "score_property",
    "weights_for",
]
