"""Application pagination – Page and the slicing helpers."""
from __future__ import annotations

import dataclasses
import math
from typing import Any, Callable, Generic, Sequence, TypeVar

from tableview.application.pagination.page_request import PageRequest

T = TypeVar("T")


def total_pages(count: int, page_size: int) -> int:
    """Number of pages needed for *count* rows; never less than one."""
    if page_size < 1:
        raise ValueError("page_size must be >= 1")
    return max(1, math.ceil(count / page_size))


def clamp_page(page: int, count: int, page_size: int) -> int:
    """Pull *page* into ``1..total_pages(count, page_size)``."""
    return min(max(1, page), total_pages(count, page_size))


def paginate(items: Sequence[T], page: int, page_size: int) -> list[T]:
    """Return the half-open window ``[(page-1)*size, page*size)`` of *items*.

    Windows past the end are clipped; a page beyond the last one is empty.
    """
    request = PageRequest(page=page, size=page_size)
    return list(items[request.offset:request.limit])


@dataclasses.dataclass
class Page(Generic[T]):
    """Offset-based page of results with computed navigation properties."""

    items: list[T]
    total: int
    page: int
    size: int

    @property
    def total_pages(self) -> int:
        return total_pages(self.total, self.size)

    @property
    def has_next(self) -> bool:
        return self.page < self.total_pages

    @property
    def has_previous(self) -> bool:
        return self.page > 1

    @property
    def is_out_of_range(self) -> bool:
        """True when the page number points past the last page."""
        return self.page > self.total_pages

    @property
    def page_numbers(self) -> list[int]:
        return list(range(1, self.total_pages + 1))

    def map(self, fn: Callable[[T], Any]) -> "Page[Any]":
        """Return a new :class:`Page` with each item transformed by *fn*."""
        return Page(
            items=[fn(item) for item in self.items],
            total=self.total,
            page=self.page,
            size=self.size,
        )

    @classmethod
    def of(cls, all_items: Sequence[T], request: PageRequest) -> "Page[T]":
        """Build a :class:`Page` by slicing *all_items* with *request*."""
        return cls(
            items=list(all_items[request.offset:request.limit]),
            total=len(all_items),
            page=request.page,
            size=request.size,
        )


__all__ = ["Page", "clamp_page", "paginate", "total_pages"]
