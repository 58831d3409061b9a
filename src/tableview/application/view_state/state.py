"""Application view state – ViewState, SortDirection."""
from __future__ import annotations

import dataclasses
from enum import Enum
from typing import Any


class SortDirection(str, Enum):
    ASC = "asc"
    DESC = "desc"


@dataclasses.dataclass(frozen=True, slots=True)
class ViewState:
    """Interaction state of one table instance.

    Instances are immutable; every transition builds a new value with
    :meth:`replace`. An empty ``sorting_column`` means no column has been
    sorted yet.
    """

    search_term: str = ""
    current_page: int = 1
    items_per_page: int = 10
    sorting_column: str = ""
    sorting_order: SortDirection = SortDirection.ASC

    @property
    def is_sorted(self) -> bool:
        return bool(self.sorting_column)

    def replace(self, **changes: Any) -> "ViewState":
        return dataclasses.replace(self, **changes)


def toggle_sort(state: ViewState, column: str) -> ViewState:
    """Apply a header click on *column*.

    ``(column, asc)`` becomes ``(column, desc)``; any other state becomes
    ``(column, asc)``. There is no transition back to the unsorted state.
    """
    if state.sorting_column == column and state.sorting_order is SortDirection.ASC:
        return state.replace(sorting_order=SortDirection.DESC)
    return state.replace(sorting_column=column, sorting_order=SortDirection.ASC)


__all__ = ["SortDirection", "ViewState", "toggle_sort"]
