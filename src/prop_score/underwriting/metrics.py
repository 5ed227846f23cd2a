"""Compose rent, expenses, financing and appreciation into InvestmentMetrics."""

from __future__ import annotations

import logging
import math

from ..models import InvestmentAssumptions, InvestmentMetrics, RawProperty, Strategy
from .appreciation import appreciation_rate
from .expenses import expense_breakdown
from .mortgage import amortize
from .numbers import finite_or, non_negative, round_half_up
from .rent import estimate_rent

logger = logging.getLogger(__name__)


def project_value(price: float, rate: float, horizon_years: int) -> float:
    """Value after compounding *rate* for *horizon_years*; *price* if degenerate."""
    if horizon_years <= 0 or price <= 0:
        return price
    try:
        value = price * (1 + rate) ** horizon_years
    except OverflowError:
        logger.debug("projected value overflowed for horizon=%s rate=%s", horizon_years, rate)
        return price
    return round_half_up(value) if math.isfinite(value) else price


def compute_metrics(
    prop: RawProperty,
    assumptions: InvestmentAssumptions,
    horizon_years: int,
    strategy: Strategy | str,
) -> InvestmentMetrics:
    """Run the underwriting pipeline for one property.

    rent -> expenses -> NOI -> cap rate -> financing -> cash-on-cash ->
    principal paydown -> appreciation -> projected value. Divisions by a
    zero or negative denominator yield 0.
    """
    strategy = Strategy.parse(strategy)
    price = non_negative(prop.list_price)

    rent_monthly = estimate_rent(prop)
    expenses = expense_breakdown(prop, rent_monthly, assumptions)
    annual_expenses = finite_or(expenses.total)
    annual_noi = finite_or(rent_monthly * 12 - annual_expenses)
    cap_rate = finite_or(annual_noi / price) if price > 0 else 0.0

    financing = amortize(price, assumptions.down_payment, assumptions.loan_rate, horizon_years)
    pre_tax_cash_flow = finite_or(annual_noi - financing.interest_annual)
    equity = finite_or(financing.equity)
    cash_on_cash = finite_or(pre_tax_cash_flow / equity) if equity > 0 else 0.0

    rate = appreciation_rate(cap_rate, strategy)
    list_price = finite_or(prop.list_price)
    projected = finite_or(project_value(list_price, rate, horizon_years), list_price)

    return InvestmentMetrics(
        estimated_rent=rent_monthly,
        annual_expenses=annual_expenses,
        annual_noi=annual_noi,
        cap_rate=cap_rate,
        cash_on_cash=cash_on_cash,
        projected_value_year_n=projected,
        annual_cash_flow=round_half_up(pre_tax_cash_flow),
        principal_paydown=finite_or(financing.principal_paid_by_horizon),
        appreciation_rate=rate,
        expenses=expenses,
    )
