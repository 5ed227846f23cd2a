"""Underwriting steps: rent, expenses, financing, appreciation, metrics."""

from .appreciation import appreciation_rate
from .expenses import annual_expenses, expense_breakdown
from .metrics import compute_metrics, project_value
from .mortgage import amortize, principal_paid
from .rent import estimate_rent
from .stress import run_downside_scenarios

__all__ = [
    "amortize",
    "annual_expenses",
    "appreciation_rate",
    "compute_metrics",
    "estimate_rent",
    "expense_breakdown",
    "principal_paid",
    "project_value",
    "run_downside_scenarios",
]
