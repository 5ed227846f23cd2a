"""Deterministic underwriting and 0-100 investment scoring for property listings."""

from .models import (
    DEFAULT_ASSUMPTIONS,
    DownsideScenario,
    ExpenseBreakdown,
    InvestmentAssumptions,
    InvestmentMetrics,
    RawProperty,
    ScoredProperty,
    ScoringContext,
    Strategy,
    StressTestParams,
)
from .scoring import ScoringEngine, normalize, rank_scored, score_property
from .underwriting import (
    amortize,
    annual_expenses,
    appreciation_rate,
    compute_metrics,
    estimate_rent,
    expense_breakdown,
    run_downside_scenarios,
)

__version__ = "0.1.0"

__all__ = [
    "DEFAULT_ASSUMPTIONS",
    "DownsideScenario",
    "ExpenseBreakdown",
    "InvestmentAssumptions",
    "InvestmentMetrics",
    "RawProperty",
    "ScoredProperty",
    "ScoringContext",
    "ScoringEngine",
    "Strategy",
    "StressTestParams",
    "amortize",
    "annual_expenses",
    "appreciation_rate",
    "compute_metrics",
    "estimate_rent",
    "expense_breakdown",
    "normalize",
    "rank_scored",
    "run_downside_scenarios",
    "score_property",
]
