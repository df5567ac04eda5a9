"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass

from bookstore.domain.model.book import Book
from bookstore.domain.model.query import Page


@dataclass(frozen=True)
class BookDTO:
    """Output: a single book as displayed to the user."""

    isbn: str
    title: str
    author: str
    genre: str
    price: str  # formatted, e.g. "$15.00"
    quantity: int


@dataclass(frozen=True)
class BookPageDTO:
    """Output: one page of books plus paging metadata."""

    items: list[BookDTO]
    page: int
    size: int
    total_elements: int
    total_pages: int


# --- Mapping ------------------------------------------------------------------


def to_book_dto(book: Book) -> BookDTO:
    return BookDTO(
        isbn=book.isbn,
        title=book.title,
        author=book.author,
        genre=book.genre.value,
        price=str(book.price),
        quantity=book.quantity,
    )


def to_page_dto(page: Page[Book]) -> BookPageDTO:
    return BookPageDTO(
        items=[to_book_dto(book) for book in page.items],
        page=page.page,
        size=page.size,
        total_elements=page.total_elements,
        total_pages=page.total_pages,
    )
