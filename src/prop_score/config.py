"""Configuration loader."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml

from .models import (
    DEFAULT_ASSUMPTIONS,
    InvestmentAssumptions,
    ScoringContext,
    StressTestParams,
)

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path(__file__).parent.parent.parent / "config.yaml"
DEFAULT_STRATEGY = "rental"
DEFAULT_HORIZON_YEARS = 5


def load_config(config_path: Path | str | None = None) -> dict[str, Any]:
    """Load config from YAML file.

    An explicit path must exist. Without one, the repo-level config.yaml is
    used if present, otherwise an empty config (built-in defaults apply).
    """
    if config_path:
        path = Path(config_path)
        if not path.exists():
            raise FileNotFoundError(f"Config not found: {path}")
    else:
        path = DEFAULT_CONFIG_PATH
        if not path.exists():
            return {}
    with open(path) as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Config root must be a mapping: {path}")
    logger.info("Loaded config from %s", path)
    return data


def parse_rate(value: Any, name: str) -> float:
    """Parse a fraction (0.065) or percent string ("6.5%") into a fraction."""
    if isinstance(value, str):
        text = value.strip()
        try:
            rate = float(text.rstrip("%")) / 100 if text.endswith("%") else float(text)
        except ValueError as err:
            raise ValueError(f"{name} must be numeric or percent-like, got {value!r}") from err
    else:
        try:
            rate = float(value)
        except (TypeError, ValueError) as err:
            raise ValueError(f"{name} must be numeric, got {value!r}") from err
    if rate != rate or rate < 0:
        raise ValueError(f"{name} must be a non-negative number, got {value!r}")
    return rate


def get_investment_assumptions(config: dict[str, Any]) -> InvestmentAssumptions:
    """Extract the seven assumption rates, defaulting each missing key."""
    a = config.get("assumptions") or {}
    d = DEFAULT_ASSUMPTIONS
    return InvestmentAssumptions(
        tax_rate=parse_rate(a.get("tax_rate", d.tax_rate), "tax_rate"),
        insurance_rate=parse_rate(a.get("insurance_rate", d.insurance_rate), "insurance_rate"),
        maintenance_rate=parse_rate(a.get("maintenance_rate", d.maintenance_rate), "maintenance_rate"),
        management_rate=parse_rate(a.get("management_rate", d.management_rate), "management_rate"),
        vacancy_rate=parse_rate(a.get("vacancy_rate", d.vacancy_rate), "vacancy_rate"),
        loan_rate=parse_rate(a.get("loan_rate", d.loan_rate), "loan_rate"),
        down_payment=parse_rate(a.get("down_payment", d.down_payment), "down_payment"),
    )


def parse_horizon(value: Any) -> int:
    """Parse a whole number of years. Booleans and fractional values are rejected."""
    if isinstance(value, bool):
        raise ValueError(f"horizon_years must be an integer, got {value!r}")
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if value.is_integer():
            return int(value)
        raise ValueError(f"horizon_years must be a whole number of years, got {value!r}")
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError as err:
            raise ValueError(f"horizon_years must be an integer, got {value!r}") from err
    raise ValueError(f"horizon_years must be an integer, got {value!r}")


def get_scoring_context(
    config: dict[str, Any],
    strategy: str | None = None,
    horizon_years: int | None = None,
) -> ScoringContext:
    """Build a ScoringContext from config, with explicit arguments taking precedence."""
    sc = config.get("scoring") or {}
    raw_horizon = horizon_years if horizon_years is not None else sc.get("horizon_years", DEFAULT_HORIZON_YEARS)
    horizon = parse_horizon(raw_horizon)
    return ScoringContext(
        strategy=strategy or sc.get("strategy", DEFAULT_STRATEGY),
        horizon_years=horizon,
        assumptions=get_investment_assumptions(config),
    )


def get_stress_params(config: dict[str, Any]) -> StressTestParams:
    """Extract stress test params from config."""
    st = config.get("stress_test") or {}
    d = StressTestParams()
    return StressTestParams(
        vacancy_rate=parse_rate(st.get("vacancy_rate", d.vacancy_rate), "vacancy_rate"),
        rent_haircut=parse_rate(st.get("rent_haircut", d.rent_haircut), "rent_haircut"),
        interest_rate_bump=parse_rate(st.get("interest_rate_bump", d.interest_rate_bump), "interest_rate_bump"),
    )


def get_filter_params(config: dict[str, Any]) -> dict[str, float | None]:
    """Extract search filter bounds; unset bounds are None."""
    flt = config.get("filters") or {}
    params: dict[str, float | None] = {}
    for key in ("min_price", "max_price", "min_beds", "min_baths"):
        value = flt.get(key)
        if value is None:
            params[key] = None
            continue
        try:
            params[key] = float(value)
        except (TypeError, ValueError) as err:
            raise ValueError(f"filters.{key} must be numeric, got {value!r}") from err
    return params
