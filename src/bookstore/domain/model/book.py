"""Book aggregate: one stocked title, keyed by ISBN.

A Book knows its descriptive attributes and how many copies are on the
shelf. Quantity only moves through ``adjust_quantity`` so the
"never negative" rule has a single enforcement point.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from bookstore.domain.exceptions import ValidationError
from bookstore.domain.model.genre import Genre
from bookstore.domain.model.value_objects import Money, to_decimal


@dataclass(eq=False)
class Book:
    """Aggregate root for a stocked book.

    Invariants:
    - ``isbn``, ``title`` and ``author`` are never blank
    - ``genre`` is a ``Genre`` member
    - ``price`` is never negative
    - ``quantity`` is at least 1 on construction and never negative afterwards
    - two books with the same ``isbn`` are the same book

    Fields are validated in declaration order; the first failing check
    decides the error message.
    """

    isbn: str
    title: str
    author: str
    genre: Genre
    price: Money
    quantity: int

    def __post_init__(self) -> None:
        _require_text(self.isbn, "ISBN")
        _require_text(self.title, "Title")
        _require_text(self.author, "Author")
        self.genre = _coerce_genre(self.genre)
        self.price = _coerce_price(self.price)
        if not _is_whole_number(self.quantity) or self.quantity < 1:
            raise ValidationError("Quantity must be at least 1.")

    def __setattr__(self, name: str, value: Any) -> None:
        if name == "isbn" and "isbn" in self.__dict__:
            raise AttributeError("ISBN cannot be changed once assigned")
        super().__setattr__(name, value)

    # --- Identity -------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Book):
            return NotImplemented
        return self.isbn == other.isbn

    def __hash__(self) -> int:
        return hash(self.isbn)

    # --- Behaviour ------------------------------------------------------------

    def adjust_quantity(self, delta: int) -> None:
        """Add ``delta`` copies to stock (negative ``delta`` removes).

        Raises ValidationError, leaving the quantity untouched, if the
        result would be negative or ``delta`` is not a whole number.
        """
        if not _is_whole_number(delta):
            raise ValidationError("Quantity change must be a whole number.")
        if self.quantity + delta < 0:
            raise ValidationError("Not enough stock available.")
        self.quantity += delta

    def update_details(
        self,
        title: str,
        author: str,
        genre: Genre | str,
        price: Money | str | int | float,
    ) -> None:
        """Replace the descriptive attributes; ISBN and quantity stay as they are.

        All four values are validated before any of them is assigned.
        """
        _require_text(title, "Title")
        _require_text(author, "Author")
        new_genre = _coerce_genre(genre)
        new_price = _coerce_price(price)

        self.title = title
        self.author = author
        self.genre = new_genre
        self.price = new_price


# --- Validation helpers -------------------------------------------------------


def _is_whole_number(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _require_text(value: object, label: str) -> None:
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(f"{label} cannot be null or empty.")


def _coerce_genre(value: Genre | str | None) -> Genre:
    if value is None:
        raise ValidationError("Genre cannot be null.")
    if isinstance(value, Genre):
        return value
    return Genre.parse(value)


def _coerce_price(value: Money | str | int | float | None) -> Money:
    if value is None:
        raise ValidationError("Price cannot be null or negative.")
    if isinstance(value, Money):
        return value
    try:
        amount = to_decimal(value)
    except ValidationError:
        raise ValidationError(f"Invalid price: {value!r}") from None
    if not amount.is_finite():
        raise ValidationError(f"Invalid price: {value!r}")
    if amount < 0:
        raise ValidationError("Price cannot be null or negative.")
    return Money(amount)
