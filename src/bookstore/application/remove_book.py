"""Application service: Remove Book use case.

Takes copies off the shelf. When the last copy goes, the record is
deleted from the store rather than kept at zero.
"""

from __future__ import annotations

import logging

from bookstore.domain.exceptions import EntityNotFoundError, ValidationError
from bookstore.domain.model.book import Book
from bookstore.domain.repository.book_repository import BookRepository

logger = logging.getLogger(__name__)


class RemoveBookHandler:

    def __init__(self, book_repo: BookRepository) -> None:
        self._book_repo = book_repo

    def handle(self, isbn: str, amount: int) -> Book | None:
        """Remove ``amount`` copies of ``isbn``.

        Returns the remaining book, or None if no copies are left and the
        record was deleted.
        """
        if not isbn or not isbn.strip():
            raise ValidationError("ISBN must not be null or blank")
        if not isinstance(amount, int) or isinstance(amount, bool):
            raise ValidationError("Amount to remove must be a whole number.")
        if amount <= 0:
            raise ValidationError("Amount to remove must be greater than zero.")

        with self._book_repo.lock(isbn):
            book = self._book_repo.get_by_isbn(isbn)
            if book is None:
                raise EntityNotFoundError(f"Book with ISBN {isbn} not found.")

            book.adjust_quantity(-amount)

            if book.quantity == 0:
                self._book_repo.delete(book)
                logger.info("Removed last %d copies of %s", amount, isbn)
                return None

            self._book_repo.save(book)
            logger.info(
                "Removed %d copies of %s, %d remaining",
                amount, isbn, book.quantity,
            )
            return book
