"""Downside scenarios: higher vacancy, lower rent, higher mortgage rate."""

from __future__ import annotations

import dataclasses

from ..models import DownsideScenario, RawProperty, ScoringContext, StressTestParams
from .expenses import annual_expenses
from .mortgage import amortize
from .numbers import finite_or, non_negative, round_half_up
from .rent import estimate_rent


def _cash_flow(prop: RawProperty, rent_monthly: float, ctx: ScoringContext) -> float:
    a = ctx.assumptions
    noi = rent_monthly * 12 - annual_expenses(prop, rent_monthly, a)
    financing = amortize(non_negative(prop.list_price), a.down_payment, a.loan_rate, ctx.horizon_years)
    return round_half_up(finite_or(noi - financing.interest_annual))


def run_downside_scenarios(
    prop: RawProperty,
    ctx: ScoringContext,
    params: StressTestParams | None = None,
) -> DownsideScenario:
    """Annual pre-tax cash flow for the base case and each stress case.

    Each scenario changes one input and reruns the same rent, expense and
    financing steps as compute_metrics.
    """
    params = params or StressTestParams()
    a = ctx.assumptions
    rent = estimate_rent(prop)

    vacancy_ctx = dataclasses.replace(
        ctx,
        assumptions=dataclasses.replace(a, vacancy_rate=max(a.vacancy_rate, params.vacancy_rate)),
    )
    rate_ctx = dataclasses.replace(
        ctx,
        assumptions=dataclasses.replace(a, loan_rate=a.loan_rate + params.interest_rate_bump),
    )
    haircut_rent = rent * (1 - params.rent_haircut)

    return DownsideScenario(
        base_cash_flow=_cash_flow(prop, rent, ctx),
        vacancy_cash_flow=_cash_flow(prop, rent, vacancy_ctx),
        rent_haircut_cash_flow=_cash_flow(prop, haircut_rent, ctx),
        rate_bump_cash_flow=_cash_flow(prop, rent, rate_ctx),
        params=params,
    )
