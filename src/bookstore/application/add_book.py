"""Application service: Add Book use case.

Adding an ISBN that is already stocked merges stock: only the quantity
of the incoming book is added. The stored title, author, genre and
price are kept as they are.
"""

from __future__ import annotations

import logging

from bookstore.domain.model.book import Book
from bookstore.domain.repository.book_repository import BookRepository

logger = logging.getLogger(__name__)


class AddBookHandler:

    def __init__(self, book_repo: BookRepository) -> None:
        self._book_repo = book_repo

    def handle(self, candidate: Book) -> Book:
        """Stock ``candidate``, merging into an existing record if present."""
        with self._book_repo.lock(candidate.isbn):
            existing = self._book_repo.get_by_isbn(candidate.isbn)
            if existing is None:
                self._book_repo.save(candidate)
                logger.info(
                    "Stocked new book %s (%d copies)",
                    candidate.isbn, candidate.quantity,
                )
                return candidate

            existing.adjust_quantity(candidate.quantity)
            self._book_repo.save(existing)
            logger.info(
                "Added %d copies to %s, now %d in stock",
                candidate.quantity, existing.isbn, existing.quantity,
            )
            return existing
