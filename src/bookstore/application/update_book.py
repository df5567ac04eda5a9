"""Application service: Update Book use case."""

from __future__ import annotations

import logging

from bookstore.domain.exceptions import EntityNotFoundError, ValidationError
from bookstore.domain.model.book import Book
from bookstore.domain.repository.book_repository import BookRepository

logger = logging.getLogger(__name__)


class UpdateBookHandler:

    def __init__(self, book_repo: BookRepository) -> None:
        self._book_repo = book_repo

    def handle(self, isbn: str, updated: Book | None) -> Book:
        """Overwrite title, author, genre and price of the book at ``isbn``.

        The ISBN and quantity of ``updated`` are ignored: stock levels only
        change through the add and remove use cases.
        """
        if not isbn or not isbn.strip():
            raise ValidationError("ISBN must not be null or blank")
        if updated is None:
            raise ValidationError("Updated book must not be null")

        with self._book_repo.lock(isbn):
            existing = self._book_repo.get_by_isbn(isbn)
            if existing is None:
                raise EntityNotFoundError(f"Book not found: {isbn}")

            existing.update_details(
                title=updated.title,
                author=updated.author,
                genre=updated.genre,
                price=updated.price,
            )
            self._book_repo.save(existing)

        logger.info("Updated details of %s", isbn)
        return existing
