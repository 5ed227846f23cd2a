"""Pytest fixtures."""

import pytest

from prop_score.models import DEFAULT_ASSUMPTIONS, RawProperty, ScoringContext, Strategy


@pytest.fixture
def scenario_property() -> RawProperty:
    """300k three-bed with no HOA."""
    return RawProperty(
        id="scn-a",
        list_price=300000,
        address="123 Main St",
        city="Columbus",
        state="OH",
        zip_code="43215",
        beds=3,
        baths=2,
        sqft=1600,
        hoa_monthly=0,
    )


@pytest.fixture
def rental_context() -> ScoringContext:
    return ScoringContext(strategy=Strategy.RENTAL, horizon_years=5, assumptions=DEFAULT_ASSUMPTIONS)


@pytest.fixture
def mock_properties() -> list[RawProperty]:
    """Small batch with varied price, beds and HOA."""
    return [
        RawProperty(id="p-1", list_price=300000, address="123 Main St", city="Columbus", beds=3, baths=2),
        RawProperty(id="p-2", list_price=180000, address="9 Elm Ct", city="Dayton", beds=5, baths=2),
        RawProperty(
            id="p-3", list_price=450000, address="77 Lake Rd", city="Columbus", beds=2, baths=1, hoa_monthly=350
        ),
        RawProperty(id="p-4", list_price=50000, address="4 Mill St", city="Toledo", beds=1, baths=1),
    ]
