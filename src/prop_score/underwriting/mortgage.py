"""Mortgage carrying cost and principal paydown."""

from __future__ import annotations

from ..models import Amortization
from .numbers import finite_or, non_negative, round_half_up

TERM_MONTHS = 360  # 30-year fixed


def remaining_balance(loan: float, monthly_rate: float, months_paid: int) -> float:
    """Balance left after *months_paid* payments on a TERM_MONTHS schedule."""
    factor = (1 + monthly_rate) ** TERM_MONTHS
    k_factor = (1 + monthly_rate) ** months_paid
    return loan * (factor - k_factor) / (factor - 1)


def principal_paid(loan: float, loan_rate: float, horizon_years: int) -> float:
    """Principal repaid over the horizon, rounded. 0 for degenerate loans."""
    monthly_rate = finite_or(loan_rate) / 12
    if loan <= 0 or monthly_rate <= 0:
        return 0.0
    months = int(horizon_years) * 12
    try:
        remaining = remaining_balance(loan, monthly_rate, months)
    except (OverflowError, ZeroDivisionError):
        return 0.0
    return max(0.0, round_half_up(loan - remaining))


def amortize(
    list_price: float,
    down_payment: float,
    loan_rate: float,
    horizon_years: int,
) -> Amortization:
    """Split the purchase into equity and loan, and project carrying costs.

    Interest is a flat ``loan * loan_rate`` per year. This is a deliberate
    approximation used for cash-on-cash; the paydown figure uses the full
    amortization schedule instead.
    """
    price = non_negative(list_price)
    equity = price * finite_or(down_payment)
    loan = max(0.0, price - equity)
    return Amortization(
        equity=equity,
        loan_amount=loan,
        interest_annual=loan * finite_or(loan_rate),
        principal_paid_by_horizon=principal_paid(loan, loan_rate, horizon_years),
    )
