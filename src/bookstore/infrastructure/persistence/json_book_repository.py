"""JSON-file-backed implementation of BookRepository."""

from __future__ import annotations

import json
import logging
import threading
from decimal import Decimal
from pathlib import Path
from typing import Callable

from bookstore.domain.exceptions import StoreError, ValidationError
from bookstore.domain.model.book import Book
from bookstore.domain.model.genre import Genre
from bookstore.domain.model.query import FilterType, Page, PageRequest
from bookstore.domain.model.value_objects import Money
from bookstore.domain.repository.book_repository import BookRepository

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("isbn", "title", "author", "genre", "price", "quantity")


class JsonBookRepository(BookRepository):

    def __init__(self, file_path: Path) -> None:
        super().__init__()
        self._file_path = file_path
        # Guards the whole-file read-modify-write; per-ISBN locks alone
        # would let saves of two different books overwrite each other.
        self._file_lock = threading.RLock()
        self._ensure_file()

    # --- BookRepository interface ---------------------------------------------

    def get_by_isbn(self, isbn: str) -> Book | None:
        for raw in self._load_raw():
            if raw["isbn"] == isbn:
                return self._to_domain(raw)
        return None

    def save(self, book: Book) -> None:
        with self._file_lock:
            records = self._load_raw()
            replaced = False
            for i, raw in enumerate(records):
                if raw["isbn"] == book.isbn:
                    records[i] = self._to_raw(book)
                    replaced = True
                    break
            if not replaced:
                records.append(self._to_raw(book))
            self._persist_raw(records)

    def delete(self, book: Book) -> None:
        with self._file_lock:
            records = self._load_raw()
            remaining = [raw for raw in records if raw["isbn"] != book.isbn]
            if len(remaining) != len(records):
                self._persist_raw(remaining)

    def find_by_field(
        self, field: FilterType, value: str, request: PageRequest
    ) -> Page[Book]:
        return self._find(lambda raw: raw[field.value] == value, request)

    def find_by_price_range(
        self, min_price: Money, max_price: Money, request: PageRequest
    ) -> Page[Book]:
        def in_range(raw: dict) -> bool:
            price = self._stored_price(raw)
            return min_price <= price <= max_price

        return self._find(in_range, request)

    # --- Queries --------------------------------------------------------------

    def _find(
        self, predicate: Callable[[dict], bool], request: PageRequest
    ) -> Page[Book]:
        matches = [raw for raw in self._load_raw() if predicate(raw)]
        page = Page.slice(matches, request)
        return Page(
            items=[self._to_domain(raw) for raw in page.items],
            total_elements=page.total_elements,
            page=page.page,
            size=page.size,
        )

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(book: Book) -> dict:
        return {
            "isbn": book.isbn,
            "title": book.title,
            "author": book.author,
            "genre": book.genre.value,
            "price": str(book.price.amount),
            "quantity": book.quantity,
        }

    @staticmethod
    def _to_domain(raw: dict) -> Book:
        try:
            return Book(
                isbn=raw["isbn"],
                title=raw["title"],
                author=raw["author"],
                genre=Genre(raw["genre"]),
                price=Money(Decimal(raw["price"])),
                quantity=raw["quantity"],
            )
        except (TypeError, ValueError, ArithmeticError, ValidationError) as exc:
            raise StoreError(f"Corrupt book record: {raw!r}") from exc

    @staticmethod
    def _stored_price(raw: dict) -> Money:
        try:
            return Money(Decimal(raw["price"]))
        except (TypeError, ValueError, ArithmeticError, ValidationError) as exc:
            raise StoreError(f"Corrupt price in book record: {raw!r}") from exc

    # --- File helpers ---------------------------------------------------------

    def _load_raw(self) -> list[dict]:
        with self._file_lock:
            try:
                records = json.loads(self._file_path.read_text(encoding="utf-8"))
            except OSError as exc:
                raise StoreError(f"Cannot read {self._file_path}: {exc}") from exc
            except ValueError as exc:
                raise StoreError(f"Malformed book store {self._file_path}") from exc
        if not isinstance(records, list):
            raise StoreError(f"Malformed book store {self._file_path}")
        for raw in records:
            if not isinstance(raw, dict) or any(k not in raw for k in REQUIRED_FIELDS):
                raise StoreError(f"Corrupt book record: {raw!r}")
        logger.debug("Loaded %d books from %s", len(records), self._file_path)
        return records

    def _persist_raw(self, records: list[dict]) -> None:
        try:
            self._file_path.write_text(
                json.dumps(records, indent=2) + "\n", encoding="utf-8"
            )
        except OSError as exc:
            raise StoreError(f"Cannot write {self._file_path}: {exc}") from exc
        logger.debug("Wrote %d books to %s", len(records), self._file_path)

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            try:
                self._file_path.parent.mkdir(parents=True, exist_ok=True)
                self._file_path.write_text("[]", encoding="utf-8")
            except OSError as exc:
                raise StoreError(f"Cannot create {self._file_path}: {exc}") from exc
