"""Book genres, a closed set of shelf categories."""

from __future__ import annotations

from enum import Enum

from bookstore.domain.exceptions import ValidationError


class Genre(Enum):
    FICTION = "FICTION"
    NON_FICTION = "NON_FICTION"
    MYSTERY = "MYSTERY"
    FANTASY = "FANTASY"
    SCIENCE_FICTION = "SCIENCE_FICTION"
    BIOGRAPHY = "BIOGRAPHY"
    HISTORY = "HISTORY"
    ROMANCE = "ROMANCE"
    HORROR = "HORROR"
    THRILLER = "THRILLER"
    SELF_HELP = "SELF_HELP"
    POETRY = "POETRY"
    CHILDREN = "CHILDREN"
    EDUCATIONAL = "EDUCATIONAL"
    BUSINESS = "BUSINESS"

    @classmethod
    def parse(cls, text: str) -> Genre:
        """Match ``text`` against the genre names, ignoring case."""
        try:
            return cls[text.strip().upper()]
        except (KeyError, AttributeError):
            raise ValidationError(f"Invalid genre: {text}") from None
