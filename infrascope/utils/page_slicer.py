"""Page slicer - deterministic pagination over an ordered sequence."""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class Page(Generic[T]):
    """One page of an already filtered, ordered sequence."""

    items: list[T] = field(default_factory=list)
    page: int = 1
    page_size: int = 10
    total_count: int = 0

    @property
    def total_pages(self) -> int:
        return math.ceil(self.total_count / self.page_size) if self.total_count else 0

    @property
    def has_previous(self) -> bool:
        return self.page > 1

    @property
    def has_next(self) -> bool:
        return self.page < self.total_pages

    @property
    def first_index(self) -> int:
        """1-based position of the first item, 0 for an empty page."""
        return (self.page - 1) * self.page_size + 1 if self.items else 0

    @property
    def last_index(self) -> int:
        return self.first_index + len(self.items) - 1 if self.items else 0


def paginate(items: Sequence[T], page: int = 1, page_size: int = 10) -> Page[T]:
    """Slice ``items`` into one page.

    ``total_count`` counts ``items`` before slicing. Pages past the end are
    empty rather than an error, and out-of-range ``page``/``page_size``
    values are clamped to 1.
    """
    page = max(page, 1)
    page_size = max(page_size, 1)
    start = (page - 1) * page_size
    return Page(
        items=list(items[start:start + page_size]),
        page=page,
        page_size=page_size,
        total_count=len(items),
    )
