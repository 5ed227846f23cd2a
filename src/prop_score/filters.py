"""Property filters for search constraints."""

from __future__ import annotations

from .models import RawProperty
from .underwriting.numbers import finite_or


def filter_properties(
    properties: list[RawProperty],
    min_price: float | None = None,
    max_price: float | None = None,
    min_beds: float | None = None,
    min_baths: float | None = None,
) -> list[RawProperty]:
    """
    Filter properties by price, bedroom and bathroom bounds.
    - Unset (None or 0) bounds are ignored
    - Missing price, beds or baths count as 0
    """
    result = []
    for p in properties:
        price = finite_or(p.list_price)
        if min_price and price < min_price:
            continue
        if max_price and price > max_price:
            continue
        if min_beds and finite_or(p.beds) < min_beds:
            continue
        if min_baths and finite_or(p.baths) < min_baths:
            continue
        result.append(p)
    return result
