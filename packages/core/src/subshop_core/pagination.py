"""Single-page slice of an ordered source plus paging metadata."""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass
from typing import overload


def check_page_arguments(page_number: int, page_size: int) -> None:
    """Raise ``ValueError`` for a non-positive page number or size."""
    if page_number < 1:
        raise ValueError(f"page_number must be >= 1, got {page_number}")
    if page_size < 1:
        raise ValueError(f"page_size must be >= 1, got {page_size}")


@dataclass(frozen=True, slots=True)
class PaginatedList[T](Sequence[T]):
    """One materialized page of an ordered source.

    The source must already be ordered by a stable key; no sorting happens
    here. A page number past the last page yields an empty page.
    """

    items: tuple[T, ...]
    page_index: int
    total_pages: int
    total_count: int

    @property
    def has_previous_page(self) -> bool:
        return self.page_index > 1

    @property
    def has_next_page(self) -> bool:
        return self.page_index < self.total_pages

    @overload
    def __getitem__(self, index: int) -> T: ...

    @overload
    def __getitem__(self, index: slice) -> tuple[T, ...]: ...

    def __getitem__(self, index):
        return self.items[index]

    def __len__(self) -> int:
        return len(self.items)

    @staticmethod
    def page_count(total_count: int, page_size: int) -> int:
        return math.ceil(total_count / page_size)

    @classmethod
    def from_page(
        cls,
        items: Sequence[T],
        page_number: int,
        page_size: int,
        total_count: int,
    ) -> PaginatedList[T]:
        """Wrap an already sliced page whose total row count is known."""
        check_page_arguments(page_number, page_size)
        return cls(
            items=tuple(items),
            page_index=page_number,
            total_pages=cls.page_count(total_count, page_size),
            total_count=total_count,
        )

    @classmethod
    def create(
        cls,
        source: Sequence[T],
        page_number: int,
        page_size: int,
    ) -> PaginatedList[T]:
        """Slice page *page_number* (1-based) out of an ordered sequence."""
        check_page_arguments(page_number, page_size)
        offset = (page_number - 1) * page_size
        return cls.from_page(
            source[offset : offset + page_size],
            page_number,
            page_size,
            total_count=len(source),
        )
