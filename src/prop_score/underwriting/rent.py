"""Rent estimation from list price and bedroom count."""

from __future__ import annotations

import logging

from ..models import RawProperty
from .numbers import finite_or, round_half_up

logger = logging.getLogger(__name__)

# Monthly rent as a share of price (the "0.8% rule").
RENT_TO_PRICE_RATIO = 0.008
BASELINE_BEDS = 3
PER_BEDROOM_ADJUSTMENT = 0.03


def bedroom_factor(beds: float | None) -> float:
    """Rent multiplier: +/-3% per bedroom above/below three. 1.0 when unknown."""
    b = finite_or(beds)
    if b <= 0:
        return 1.0
    return 1 + (b - BASELINE_BEDS) * PER_BEDROOM_ADJUSTMENT


def estimate_rent(prop: RawProperty) -> float:
    """Estimate monthly rent for a property.

    ``list_price * 0.008 * bedroom_factor``, rounded to a whole unit.
    Missing, non-finite or non-positive prices give 0.
    """
    price = finite_or(prop.list_price)
    if price <= 0:
        logger.debug("property %s has no usable list price; rent=0", prop.id)
        return 0.0
    return max(0.0, round_half_up(price * RENT_TO_PRICE_RATIO * bedroom_factor(prop.beds)))
