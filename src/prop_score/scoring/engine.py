"""Batch scoring engine."""

from __future__ import annotations

import logging
from typing import Iterable, List

from ..config import get_scoring_context, get_stress_params
from ..models import DownsideScenario, RawProperty, ScoredProperty, ScoringContext
from ..underwriting.stress import run_downside_scenarios
from .strategy import score_property

logger = logging.getLogger(__name__)


def rank_scored(scored: Iterable[ScoredProperty]) -> List[ScoredProperty]:
    """Sort by score desc, then cash-on-cash desc. Ties keep input order."""
    return sorted(scored, key=lambda s: (-s.score, -s.metrics.cash_on_cash))


class ScoringEngine:
    """
    Scores properties under one fixed ScoringContext.
    Holds no per-property state, so one engine can be shared across threads.
    """

    def __init__(
        self,
        context: ScoringContext | None = None,
        config: dict | None = None,
    ) -> None:
        cfg = config or {}
        self.context = context or get_scoring_context(cfg)
        self.stress_params = get_stress_params(cfg)

    def score(self, prop: RawProperty) -> ScoredProperty:
        """Score a single property."""
        return score_property(prop, self.context)

    def score_many(self, properties: Iterable[RawProperty]) -> List[ScoredProperty]:
        """Score multiple properties, preserving input order."""
        results = [self.score(p) for p in properties]
        logger.info(
            "Scored %d properties (strategy=%s, horizon=%dy)",
            len(results),
            self.context.strategy.value,
            self.context.horizon_years,
        )
        return results

    def rank(self, properties: Iterable[RawProperty]) -> List[ScoredProperty]:
        """Score and rank, best first."""
        return rank_scored(self.score_many(properties))

    def downside(self, prop: RawProperty) -> DownsideScenario:
        """Stress-case cash flows for a property under this engine's context."""
        return run_downside_scenarios(prop, self.context, self.stress_params)
