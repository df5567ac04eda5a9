"""Abstract repository for the Book aggregate.

Defined in the domain layer so the domain never depends on
infrastructure. Concrete implementations (JSON, SQL, in-memory)
live in the infrastructure layer.
"""

from __future__ import annotations

import threading
import weakref
from abc import ABC, abstractmethod
from contextlib import contextmanager
from typing import Iterator

from bookstore.domain.model.book import Book
from bookstore.domain.model.query import FilterType, Page, PageRequest
from bookstore.domain.model.value_objects import Money


class BookRepository(ABC):

    def __init__(self) -> None:
        # Entries vanish once no caller holds or waits on the lock.
        self._locks: weakref.WeakValueDictionary[str, threading.Lock] = (
            weakref.WeakValueDictionary()
        )
        self._locks_guard = threading.Lock()

    @abstractmethod
    def get_by_isbn(self, isbn: str) -> Book | None:
        """Return the book stocked under ``isbn``, or None."""

    @abstractmethod
    def save(self, book: Book) -> None:
        """Persist a new or updated book."""

    @abstractmethod
    def delete(self, book: Book) -> None:
        """Remove a book from the store."""

    @abstractmethod
    def find_by_field(
        self, field: FilterType, value: str, request: PageRequest
    ) -> Page[Book]:
        """Return one page of books whose ``field`` equals ``value``.

        For ``FilterType.GENRE`` the value is a ``Genre`` member name.
        """

    @abstractmethod
    def find_by_price_range(
        self, min_price: Money, max_price: Money, request: PageRequest
    ) -> Page[Book]:
        """Return one page of books priced within ``[min_price, max_price]``."""

    @contextmanager
    def lock(self, isbn: str) -> Iterator[None]:
        """Serialize read-check-write sequences on one ISBN.

        Stores with their own row locks or version checks may override
        this; the default is a per-ISBN lock held in process memory.
        """
        with self._locks_guard:
            key_lock = self._locks.get(isbn)
            if key_lock is None:
                key_lock = threading.Lock()
                self._locks[isbn] = key_lock
        with key_lock:
            yield
