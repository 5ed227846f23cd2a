"""Data models for raw properties, assumptions and scoring results."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class Strategy(str, Enum):
    """Investment strategy. Selects the weighting table and appreciation tweak."""

    RENTAL = "rental"
    APPRECIATION = "appreciation"
    SHORT_TERM_RENTAL = "short_term_rental"

    @classmethod
    def parse(cls, value: Strategy | str) -> Strategy:
        """Return the member for *value*; unknown tags raise ValueError."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            key = value.strip().lower()
            for member in cls:
                if member.value == key:
                    return member
        allowed = ", ".join(m.value for m in cls)
        raise ValueError(f"Unknown strategy {value!r} (expected one of: {allowed})")


# Provider payloads use camelCase; accept both spellings in from_dict.
_PROPERTY_KEY_ALIASES: dict[str, str] = {
    "listPrice": "list_price",
    "price": "list_price",
    "zip": "zip_code",
    "postal_code": "zip_code",
    "bedrooms": "beds",
    "bathrooms": "baths",
    "yearBuilt": "year_built",
    "hoaMonthly": "hoa_monthly",
    "imageUrl": "image_url",
    "externalUrl": "external_url",
    "lat": "latitude",
    "lon": "longitude",
}


@dataclass(frozen=True)
class RawProperty:
    """Normalized listing record (source-agnostic). Never mutated by the engine."""

    id: str
    list_price: float | None
    address: str = ""
    city: str = ""
    state: str = ""
    zip_code: str = ""
    latitude: float | None = None
    longitude: float | None = None
    beds: float | None = None
    baths: float | None = None
    sqft: float | None = None
    year_built: int | None = None
    hoa_monthly: float | None = None
    image_url: str | None = None
    images: tuple[str, ...] = ()
    external_url: str | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> RawProperty:
        """Build from a provider-style dict (camelCase or snake_case keys)."""
        fields_ = set(cls.__dataclass_fields__)
        kwargs: dict[str, Any] = {}
        for key, value in data.items():
            name = _PROPERTY_KEY_ALIASES.get(key, key)
            if name in fields_ and name not in kwargs:
                kwargs[name] = value
        if "id" not in kwargs:
            raise ValueError("Property record is missing 'id'")
        kwargs["id"] = str(kwargs["id"])
        kwargs.setdefault("list_price", None)
        if kwargs.get("images") is not None:
            kwargs["images"] = tuple(kwargs["images"])
        else:
            kwargs.pop("images", None)
        return cls(**kwargs)

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "address": self.address,
            "city": self.city,
            "state": self.state,
            "zip_code": self.zip_code,
            "latitude": self.latitude,
            "longitude": self.longitude,
            "list_price": self.list_price,
            "beds": self.beds,
            "baths": self.baths,
            "sqft": self.sqft,
            "year_built": self.year_built,
            "hoa_monthly": self.hoa_monthly,
            "image_url": self.image_url,
            "images": list(self.images),
            "external_url": self.external_url,
        }


@dataclass(frozen=True)
class InvestmentAssumptions:
    """Cost and financing assumptions, all expressed as fractions."""

    tax_rate: float  # annual, % of price
    insurance_rate: float  # annual, % of price
    maintenance_rate: float  # % of gross rent
    management_rate: float  # % of gross rent
    vacancy_rate: float  # % of gross rent
    loan_rate: float  # annual mortgage rate
    down_payment: float  # % of price

    def to_dict(self) -> dict[str, float]:
        return {
            "tax_rate": self.tax_rate,
            "insurance_rate": self.insurance_rate,
            "maintenance_rate": self.maintenance_rate,
            "management_rate": self.management_rate,
            "vacancy_rate": self.vacancy_rate,
            "loan_rate": self.loan_rate,
            "down_payment": self.down_payment,
        }


DEFAULT_ASSUMPTIONS = InvestmentAssumptions(
    tax_rate=0.012,
    insurance_rate=0.004,
    maintenance_rate=0.10,
    management_rate=0.08,
    vacancy_rate=0.05,
    loan_rate=0.065,
    down_payment=0.25,
)


@dataclass(frozen=True)
class ScoringContext:
    """Per-request scoring parameters. Shape is validated on construction."""

    strategy: Strategy
    horizon_years: int
    assumptions: InvestmentAssumptions = DEFAULT_ASSUMPTIONS

    def __post_init__(self) -> None:
        object.__setattr__(self, "strategy", Strategy.parse(self.strategy))
        if isinstance(self.horizon_years, bool) or not isinstance(self.horizon_years, int):
            raise ValueError(
                f"horizon_years must be an integer number of years, got {self.horizon_years!r}"
            )
        if not isinstance(self.assumptions, InvestmentAssumptions):
            raise ValueError(
                f"assumptions must be InvestmentAssumptions, got {type(self.assumptions).__name__}"
            )

    def to_dict(self) -> dict[str, Any]:
        return {
            "strategy": self.strategy.value,
            "horizon_years": self.horizon_years,
            "assumptions": self.assumptions.to_dict(),
        }


@dataclass(frozen=True)
class ExpenseBreakdown:
    """Annual operating expense line items."""

    property_tax: float
    insurance: float
    maintenance: float
    management: float
    vacancy: float
    hoa: float

    @property
    def total(self) -> float:
        return (
            self.property_tax
            + self.insurance
            + self.maintenance
            + self.management
            + self.vacancy
            + self.hoa
        )

    def to_dict(self) -> dict[str, float]:
        return {
            "property_tax": self.property_tax,
            "insurance": self.insurance,
            "maintenance": self.maintenance,
            "management": self.management,
            "vacancy": self.vacancy,
            "hoa": self.hoa,
            "total": self.total,
        }


@dataclass(frozen=True)
class Amortization:
    """Financing summary for one purchase."""

    equity: float
    loan_amount: float
    interest_annual: float
    principal_paid_by_horizon: float


@dataclass(frozen=True)
class InvestmentMetrics:
    """Derived metrics. Built only by compute_metrics."""

    estimated_rent: float  # monthly
    annual_expenses: float
    annual_noi: float
    cap_rate: float
    cash_on_cash: float
    projected_value_year_n: float
    annual_cash_flow: float
    principal_paydown: float
    appreciation_rate: float
    expenses: ExpenseBreakdown

    def to_dict(self) -> dict[str, Any]:
        return {
            "estimated_rent": self.estimated_rent,
            "annual_expenses": self.annual_expenses,
            "annual_noi": self.annual_noi,
            "cap_rate": self.cap_rate,
            "cash_on_cash": self.cash_on_cash,
            "projected_value_year_n": self.projected_value_year_n,
            "annual_cash_flow": self.annual_cash_flow,
            "principal_paydown": self.principal_paydown,
            "appreciation_rate": self.appreciation_rate,
            "expenses": self.expenses.to_dict(),
        }


@dataclass(frozen=True)
class ScoredProperty:
    """A property with its metrics and 0-100 score."""

    property: RawProperty
    metrics: InvestmentMetrics
    score: int

    def to_dict(self) -> dict[str, Any]:
        return {
            "property": self.property.to_dict(),
            "metrics": self.metrics.to_dict(),
            "score": self.score,
        }


@dataclass(frozen=True)
class StressTestParams:
    """Downside scenario parameters."""

    vacancy_rate: float = 0.10
    rent_haircut: float = 0.10
    interest_rate_bump: float = 0.01


@dataclass(frozen=True)
class DownsideScenario:
    """Annual pre-tax cash flow under each downside scenario."""

    base_cash_flow: float
    vacancy_cash_flow: float
    rent_haircut_cash_flow: float
    rate_bump_cash_flow: float
    params: StressTestParams = field(default_factory=StressTestParams)

    @property
    def worst_cash_flow(self) -> float:
        return min(self.vacancy_cash_flow, self.rent_haircut_cash_flow, self.rate_bump_cash_flow)

    def to_dict(self) -> dict[str, Any]:
        return {
            "base_cash_flow": self.base_cash_flow,
            "vacancy_cash_flow": self.vacancy_cash_flow,
            "rent_haircut_cash_flow": self.rent_haircut_cash_flow,
            "rate_bump_cash_flow": self.rate_bump_cash_flow,
            "worst_cash_flow": self.worst_cash_flow,
            "params": {
                "vacancy_rate": self.params.vacancy_rate,
                "rent_haircut": self.params.rent_haircut,
                "interest_rate_bump": self.params.interest_rate_bump,
            },
        }
