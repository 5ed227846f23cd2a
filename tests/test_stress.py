"""Tests for downside scenarios."""

import pytest

from prop_score.models import RawProperty, ScoringContext, Strategy, StressTestParams
from prop_score.scoring import ScoringEngine, score_property
from prop_score.underwriting import run_downside_scenarios


def test_base_matches_metrics(scenario_property, rental_context) -> None:
    scenario = run_downside_scenarios(scenario_property, rental_context)
    metrics = score_property(scenario_property, rental_context).metrics
    assert scenario.base_cash_flow == metrics.annual_cash_flow


def test_each_stress_lowers_cash_flow(scenario_property, rental_context) -> None:
    s = run_downside_scenarios(scenario_property, rental_context)
    assert s.vacancy_cash_flow < s.base_cash_flow
    assert s.rent_haircut_cash_flow < s.base_cash_flow
    assert s.rate_bump_cash_flow < s.base_cash_flow
    assert s.worst_cash_flow == min(s.vacancy_cash_flow, s.rent_haircut_cash_flow, s.rate_bump_cash_flow)


def test_scenario_a_values(scenario_property, rental_context) -> None:
    s = run_downside_scenarios(scenario_property, rental_context)
    # Vacancy 5% -> 10% of 28,800 gross rent costs 1,440.
    assert s.vacancy_cash_flow == s.base_cash_flow - 1440
    # One extra point on a 225,000 loan.
    assert s.rate_bump_cash_flow == s.base_cash_flow - 2250
    # Rent 2,400 -> 2,160; 23% of gross rent goes to rent-based expenses.
    assert s.rent_haircut_cash_flow == pytest.approx(s.base_cash_flow - 2880 * 0.77, abs=1)


def test_vacancy_never_below_assumption(scenario_property) -> None:
    ctx = ScoringContext(Strategy.RENTAL, 5)
    s = run_downside_scenarios(scenario_property, ctx, StressTestParams(vacancy_rate=0.0))
    assert s.vacancy_cash_flow == s.base_cash_flow


def test_zero_price_degrades(rental_context) -> None:
    s = run_downside_scenarios(RawProperty(id="z", list_price=0), rental_context)
    assert s.to_dict()["worst_cash_flow"] == 0


def test_engine_uses_configured_params(scenario_property) -> None:
    engine = ScoringEngine(config={"stress_test": {"rent_haircut": 0.5}})
    s = engine.downside(scenario_property)
    assert s.params.rent_haircut == pytest.approx(0.5)
