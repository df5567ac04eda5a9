"""Query value objects: filter selection and pagination.

A ``PageRequest`` addresses a zero-based slice of a result set; a ``Page``
carries the slice back together with the total number of matches so the
caller can render "page 2 of 7" without a second query.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Generic, Sequence, TypeVar

from bookstore.domain.exceptions import ValidationError

T = TypeVar("T")


class FilterType(Enum):
    """Book attributes that support equality lookups."""

    GENRE = "genre"
    TITLE = "title"
    AUTHOR = "author"

    @classmethod
    def parse(cls, text: str) -> FilterType:
        for member in cls:
            if member.value == text.strip().lower():
                return member
        raise ValidationError(f"Invalid filter type: {text}")


@dataclass(frozen=True)
class PageRequest:
    page: int
    size: int

    def __post_init__(self) -> None:
        if self.page < 0 or self.size <= 0:
            raise ValidationError("Page must be >= 0 and size must be > 0")

    @property
    def offset(self) -> int:
        return self.page * self.size


@dataclass(frozen=True)
class Page(Generic[T]):
    """One page of query results."""

    items: list[T] = field(default_factory=list)
    total_elements: int = 0
    page: int = 0
    size: int = 1

    @property
    def total_pages(self) -> int:
        return math.ceil(self.total_elements / self.size) if self.size else 0

    @property
    def is_first(self) -> bool:
        return self.page == 0

    @property
    def is_last(self) -> bool:
        return self.page >= self.total_pages - 1

    @property
    def has_next(self) -> bool:
        return self.page + 1 < self.total_pages

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self):
        return iter(self.items)

    @staticmethod
    def slice(records: Sequence[T], request: PageRequest) -> Page[T]:
        """Cut the requested page out of a fully materialized result list."""
        start = request.offset
        return Page(
            items=list(records[start:start + request.size]),
            total_elements=len(records),
            page=request.page,
            size=request.size,
        )
