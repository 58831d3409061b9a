"""Application table – TableView, the render-ready snapshot of one page."""
from __future__ import annotations

import dataclasses
from typing import Any

from tableview.application.pagination import Page
from tableview.application.view_state import SortDirection, ViewState
from tableview.kernel.types import Cell, Record

ASC_INDICATOR = "▲"
DESC_INDICATOR = "▼"


@dataclasses.dataclass(frozen=True)
class TableView:
    """Everything a renderer needs for the current page.

    ``rows`` holds one list of classified :class:`Cell` values per record on
    the page, in column order. ``header`` and ``footer`` are passed through
    untouched from the table's caller.
    """

    columns: tuple[str, ...]
    rows: list[list[Cell]]
    page: Page[Record]
    state: ViewState
    header: Any = None
    footer: Any = None

    @property
    def can_go_previous(self) -> bool:
        return self.page.has_previous

    @property
    def can_go_next(self) -> bool:
        return self.page.has_next

    def sort_indicator(self, column: str) -> str:
        if not self.state.is_sorted or self.state.sorting_column != column:
            return ""
        return ASC_INDICATOR if self.state.sorting_order is SortDirection.ASC else DESC_INDICATOR

    @classmethod
    def build(
        cls,
        columns: tuple[str, ...],
        page: Page[Record],
        state: ViewState,
        *,
        header: Any = None,
        footer: Any = None,
    ) -> "TableView":
        rows = [[Cell.of(record.get(column)) for column in columns] for record in page.items]
        return cls(columns=columns, rows=rows, page=page, state=state, header=header, footer=footer)


__all__ = ["ASC_INDICATOR", "DESC_INDICATOR", "TableView"]
