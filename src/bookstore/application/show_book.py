"""Application service: Show Book use case (query)."""

from __future__ import annotations

from bookstore.domain.exceptions import EntityNotFoundError, ValidationError
from bookstore.domain.model.book import Book
from bookstore.domain.repository.book_repository import BookRepository


class ShowBookHandler:

    def __init__(self, book_repo: BookRepository) -> None:
        self._book_repo = book_repo

    def handle(self, isbn: str) -> Book:
        if not isbn or not isbn.strip():
            raise ValidationError("ISBN must not be null or blank")

        book = self._book_repo.get_by_isbn(isbn)
        if book is None:
            raise EntityNotFoundError(f"Book with ISBN {isbn} not found.")
        return book
