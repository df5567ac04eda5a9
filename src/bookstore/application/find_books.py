"""Application services: paged book lookups (queries).

Both handlers validate every argument before the store is touched, so
a malformed request never costs a read.
"""

from __future__ import annotations

from decimal import Decimal

from bookstore.domain.exceptions import ValidationError
from bookstore.domain.model.book import Book
from bookstore.domain.model.genre import Genre
from bookstore.domain.model.query import FilterType, Page, PageRequest
from bookstore.domain.model.value_objects import Money, to_decimal
from bookstore.domain.repository.book_repository import BookRepository


class FindBooksByAttributeHandler:

    def __init__(self, book_repo: BookRepository) -> None:
        self._book_repo = book_repo

    def handle(
        self, filter_type: str, filter_value: str, page: int, size: int
    ) -> Page[Book]:
        """Return one page of books whose genre, title or author matches.

        ``filter_type`` is matched case-insensitively. Genre values are
        matched case-insensitively against the genre names; titles and
        authors must match exactly.
        """
        if not filter_type or not filter_type.strip():
            raise ValidationError("Filter type must not be null or blank")
        if not filter_value or not filter_value.strip():
            raise ValidationError("Filter value must not be null or blank")
        request = PageRequest(page, size)

        field = FilterType.parse(filter_type)
        if field is FilterType.GENRE:
            value = Genre.parse(filter_value).name
        else:
            value = filter_value

        return self._book_repo.find_by_field(field, value, request)


class FindBooksByPriceHandler:

    def __init__(self, book_repo: BookRepository) -> None:
        self._book_repo = book_repo

    def handle(
        self,
        min_price: str | int | Decimal,
        max_price: str | int | Decimal,
        page: int,
        size: int,
    ) -> Page[Book]:
        """Return one page of books priced between the bounds, inclusive."""
        low = _price_bound(min_price)
        high = _price_bound(max_price)
        if low < 0 or high < 0:
            raise ValidationError("Prices must not be negative")
        if low > high:
            raise ValidationError("minPrice cannot be greater than maxPrice")
        request = PageRequest(page, size)

        return self._book_repo.find_by_price_range(Money(low), Money(high), request)


def _price_bound(value: str | int | Decimal) -> Decimal:
    amount = to_decimal(value)
    if not amount.is_finite():
        raise ValidationError(f"Invalid price: {value!r}")
    return amount
