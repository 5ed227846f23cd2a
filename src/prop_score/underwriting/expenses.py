"""Annual operating expense model."""

from __future__ import annotations

from ..models import ExpenseBreakdown, InvestmentAssumptions, RawProperty
from .numbers import finite_or, non_negative


def expense_breakdown(
    prop: RawProperty,
    rent_monthly: float,
    assumptions: InvestmentAssumptions,
) -> ExpenseBreakdown:
    """Annual expense line items.

    Taxes and insurance scale with price; maintenance, management and
    vacancy scale with gross rent; HOA is a fixed monthly fee.
    """
    price = non_negative(prop.list_price)
    gross_rent_annual = non_negative(rent_monthly) * 12
    return ExpenseBreakdown(
        property_tax=finite_or(price * assumptions.tax_rate),
        insurance=finite_or(price * assumptions.insurance_rate),
        maintenance=finite_or(gross_rent_annual * assumptions.maintenance_rate),
        management=finite_or(gross_rent_annual * assumptions.management_rate),
        vacancy=finite_or(gross_rent_annual * assumptions.vacancy_rate),
        hoa=non_negative(prop.hoa_monthly) * 12,
    )


def annual_expenses(
    prop: RawProperty,
    rent_monthly: float,
    assumptions: InvestmentAssumptions,
) -> float:
    """Total annual operating expenses."""
    return expense_breakdown(prop, rent_monthly, assumptions).total
