"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from pathlib import Path

from bookstore.infrastructure.persistence.json_book_repository import (
    JsonBookRepository,
)

DEFAULT_DATA_DIR = Path("data")
BOOKS_FILE = "books.json"


def book_repository(data_dir: Path = DEFAULT_DATA_DIR) -> JsonBookRepository:
    return JsonBookRepository(Path(data_dir) / BOOKS_FILE)
