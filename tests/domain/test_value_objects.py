"""Unit tests for domain value objects."""

from decimal import Decimal

import pytest

from bookstore.domain.exceptions import ValidationError
from bookstore.domain.model.genre import Genre
from bookstore.domain.model.query import FilterType, Page, PageRequest
from bookstore.domain.model.value_objects import Money


# ── Money ────────────────────────────────────────────────────────────────────


class TestMoney:

    def test_creation(self):
        m = Money(Decimal("10.50"))
        assert m.amount == Decimal("10.50")

    def test_of_factory_from_string(self):
        assert Money.of("25.99").amount == Decimal("25.99")

    def test_of_factory_from_int(self):
        assert Money.of(10).amount == Decimal("10")

    def test_float_amount_rejected(self):
        with pytest.raises(ValidationError, match="must be a Decimal"):
            Money(15.0)

    def test_negative_amount_rejected(self):
        with pytest.raises(ValidationError, match="cannot be negative"):
            Money(Decimal("-1"))

    def test_garbage_rejected(self):
        with pytest.raises(ValidationError, match="Invalid money amount"):
            Money.of("ten")

    def test_nan_rejected(self):
        with pytest.raises(ValidationError, match="finite"):
            Money.of("NaN")

    def test_single_currency_amount_only(self):
        with pytest.raises(TypeError):
            Money(Decimal("5"), "EUR")

    def test_str_formatting(self):
        assert str(Money.of("15")) == "$15.00"
        assert str(Money.of("9.5")) == "$9.50"

    def test_comparison_operators(self):
        assert Money.of("5") < Money.of("10")
        assert Money.of("10") > Money.of("5")
        assert Money.of("10") >= Money.of("10.00")
        assert Money.of("10") <= Money.of("10")


# ── Genre ────────────────────────────────────────────────────────────────────


class TestGenre:

    def test_fifteen_genres(self):
        assert len(Genre) == 15

    @pytest.mark.parametrize("text", ["fiction", "FICTION", "Fiction", " fiction "])
    def test_parse_ignores_case(self, text):
        assert Genre.parse(text) is Genre.FICTION

    def test_parse_unknown_rejected(self):
        with pytest.raises(ValidationError, match="Invalid genre: poems"):
            Genre.parse("poems")


# ── FilterType ───────────────────────────────────────────────────────────────


class TestFilterType:

    @pytest.mark.parametrize(
        "text, expected",
        [
            ("genre", FilterType.GENRE),
            ("GENRE", FilterType.GENRE),
            ("Title", FilterType.TITLE),
            ("author", FilterType.AUTHOR),
        ],
    )
    def test_parse(self, text, expected):
        assert FilterType.parse(text) is expected

    def test_parse_unknown_rejected(self):
        with pytest.raises(ValidationError, match="Invalid filter type: isbn"):
            FilterType.parse("isbn")


# ── Paging ───────────────────────────────────────────────────────────────────


class TestPageRequest:

    def test_offset(self):
        assert PageRequest(2, 10).offset == 20

    @pytest.mark.parametrize("page, size", [(-1, 10), (0, 0), (0, -5)])
    def test_invalid_rejected(self, page, size):
        with pytest.raises(ValidationError, match="Page must be >= 0"):
            PageRequest(page, size)


class TestPage:

    def test_slice_first_page(self):
        page = Page.slice(list(range(25)), PageRequest(0, 10))
        assert page.items == list(range(10))
        assert page.total_elements == 25
        assert page.total_pages == 3
        assert page.is_first
        assert page.has_next

    def test_slice_last_partial_page(self):
        page = Page.slice(list(range(25)), PageRequest(2, 10))
        assert page.items == [20, 21, 22, 23, 24]
        assert page.is_last
        assert not page.has_next

    def test_slice_past_the_end_is_empty_but_keeps_total(self):
        page = Page.slice(list(range(5)), PageRequest(3, 10))
        assert page.items == []
        assert page.total_elements == 5
        assert len(page) == 0

    def test_empty_result(self):
        page = Page.slice([], PageRequest(0, 10))
        assert page.total_pages == 0
        assert page.is_last
