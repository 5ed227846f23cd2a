"""Tests for data model helpers."""

import dataclasses

import pytest

from prop_score.models import ExpenseBreakdown, RawProperty


class TestRawProperty:
    """Tests for RawProperty construction."""

    def test_from_dict_camel_case(self) -> None:
        p = RawProperty.from_dict({
            "id": 42,
            "address": "1 Main St",
            "zip": "78701",
            "listPrice": 350000,
            "beds": 3,
            "hoaMonthly": 120,
            "yearBuilt": 1995,
            "images": ["a.jpg", "b.jpg"],
            "externalUrl": "https://example.com/42",
            "unknownField": "ignored",
        })
        assert p.id == "42"
        assert p.zip_code == "78701"
        assert p.list_price == 350000
        assert p.hoa_monthly == 120
        assert p.year_built == 1995
        assert p.images == ("a.jpg", "b.jpg")

    def test_from_dict_snake_case(self) -> None:
        p = RawProperty.from_dict({"id": "x", "list_price": 100000, "zip_code": "10001"})
        assert p.list_price == 100000
        assert p.zip_code == "10001"

    def test_from_dict_missing_price_is_none(self) -> None:
        assert RawProperty.from_dict({"id": "x"}).list_price is None

    def test_from_dict_requires_id(self) -> None:
        with pytest.raises(ValueError):
            RawProperty.from_dict({"listPrice": 1})

    def test_frozen(self) -> None:
        p = RawProperty(id="x", list_price=1)
        with pytest.raises(dataclasses.FrozenInstanceError):
            p.list_price = 2

    def test_to_dict_round_trip_fields(self) -> None:
        p = RawProperty(id="x", list_price=1, images=("a",))
        assert RawProperty.from_dict(p.to_dict()) == p


def test_expense_total_includes_every_item() -> None:
    b = ExpenseBreakdown(1, 2, 3, 4, 5, 6)
    assert b.total == 21
    assert b.to_dict()["total"] == 21
