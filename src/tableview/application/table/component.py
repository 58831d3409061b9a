"""Application table – DataTable, the stateful table component.

The component owns one :class:`ViewState` and the caller's records. Every
user interaction is a method that swaps in a new state value; the filtered,
sorted and paged views are recomputed from ``(records, state)`` on demand.
"""
from __future__ import annotations

from collections.abc import Sequence
from typing import Any, NoReturn

from tableview.application.export import (
    ExportFormat,
    ExportRequest,
    ExportResult,
    ExportService,
    TableLayoutService,
    TablePayload,
    to_export_rows,
    to_table_rows,
)
from tableview.application.filtering import filter_records
from tableview.application.pagination import Page, PageRequest, clamp_page, total_pages
from tableview.application.sorting import Collation, DescendingMode, sort_records
from tableview.application.table.view import TableView
from tableview.application.view_state import ViewState, toggle_sort
from tableview.config.settings import TableSettings
from tableview.kernel.errors import InvalidInputError
from tableview.kernel.types import Record, ensure_columns, ensure_records
from tableview.observability.logging import get_logger

__all__ = ["DataTable"]


class DataTable:
    """Search, sort, paginate and export a list of uniform records."""

    def __init__(
        self,
        records: Sequence[Record],
        columns: Sequence[str],
        *,
        header: Any = None,
        footer: Any = None,
        settings: TableSettings | None = None,
        layout_service: TableLayoutService | None = None,
    ) -> None:
        self._settings = settings or TableSettings()
        self._columns = ensure_columns(columns)
        self._records = ensure_records(records)
        self.header = header
        self.footer = footer
        self._state = ViewState(items_per_page=self._settings.items_per_page)
        self._export_service = ExportService(layout_service, bom=self._settings.csv_bom)
        self._log = get_logger(__name__, columns=list(self._columns))

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    @property
    def state(self) -> ViewState:
        return self._state

    @property
    def columns(self) -> tuple[str, ...]:
        return self._columns

    @property
    def records(self) -> list[Record]:
        return list(self._records)

    @property
    def settings(self) -> TableSettings:
        return self._settings

    @property
    def total_pages(self) -> int:
        return total_pages(len(self.filtered()), self._state.items_per_page)

    # ------------------------------------------------------------------
    # Transitions
    # ------------------------------------------------------------------

    def on_search(self, term: str) -> ViewState:
        if not isinstance(term, str):
            self._reject("search_term", f"search term must be a string, got {type(term).__name__}")
        return self._transition("search", self._state.replace(search_term=term), clamp=True)

    def on_sort_column(self, column: str) -> ViewState:
        if column not in self._columns:
            self._reject("column", f"unknown column: {column!r}")
        return self._transition("sort", toggle_sort(self._state, column))

    def on_page_change(self, page: int) -> ViewState:
        """Jump to *page*. Pages past the end are allowed and render empty."""
        if isinstance(page, bool) or not isinstance(page, int) or page < 1:
            self._reject("current_page", f"page must be an integer >= 1, got {page!r}")
        return self._transition("page", self._state.replace(current_page=page))

    def next_page(self) -> ViewState:
        if self._state.current_page >= self.total_pages:
            return self._state
        return self.on_page_change(self._state.current_page + 1)

    def previous_page(self) -> ViewState:
        if self._state.current_page <= 1:
            return self._state
        return self.on_page_change(self._state.current_page - 1)

    def on_page_size_change(self, size: int) -> ViewState:
        options = self._settings.page_size_options
        if isinstance(size, bool) or not isinstance(size, int) or size not in options:
            self._reject("items_per_page", f"page size must be one of {options}, got {size!r}")
        return self._transition("page_size", self._state.replace(items_per_page=size), clamp=True)

    def replace_records(self, records: Sequence[Record]) -> ViewState:
        """Swap the raw input; all derived views follow on the next read."""
        self._records = ensure_records(records)
        return self._transition("records", self._state, clamp=True)

    # ------------------------------------------------------------------
    # Derived views
    # ------------------------------------------------------------------

    def filtered(self) -> list[Record]:
        return filter_records(self._records, self._state.search_term)

    def ordered(self) -> list[Record]:
        """Filtered records in the active sort order."""
        rows = self.filtered()
        if not self._state.is_sorted:
            return rows
        return sort_records(
            rows,
            self._state.sorting_column,
            self._state.sorting_order,
            descending=DescendingMode(self._settings.descending_mode),
            collation=Collation(self._settings.collation),
        )

    def page(self) -> Page[Record]:
        request = PageRequest(page=self._state.current_page, size=self._state.items_per_page)
        return Page.of(self.ordered(), request)

    def view(self) -> TableView:
        return TableView.build(
            self._columns,
            self.page(),
            self._state,
            header=self.header,
            footer=self.footer,
        )

    # ------------------------------------------------------------------
    # Export (always the whole filtered + sorted set)
    # ------------------------------------------------------------------

    def export_rows(self) -> list[dict[str, Any]]:
        return to_export_rows(self.ordered(), self._columns)

    def export_table(self) -> TablePayload:
        return to_table_rows(self.ordered(), self._columns)

    def export(self, export_format: ExportFormat, filename: str | None = None) -> ExportResult:
        if filename is None:
            if export_format == "csv":
                filename = self._settings.csv_filename
            elif export_format == "pdf":
                filename = self._settings.pdf_filename
        request = ExportRequest(format=export_format, filename=filename)
        return self._export_service.export(self.ordered(), self._columns, request)

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _transition(self, event: str, new_state: ViewState, *, clamp: bool = False) -> ViewState:
        if clamp and self._settings.clamp_current_page:
            count = len(filter_records(self._records, new_state.search_term))
            page = clamp_page(new_state.current_page, count, new_state.items_per_page)
            if page != new_state.current_page:
                self._log.debug("table.page_clamped", requested=new_state.current_page, page=page)
                new_state = new_state.replace(current_page=page)
        self._state = new_state
        self._log.debug(
            "table.transition",
            transition=event,
            search_term=new_state.search_term,
            page=new_state.current_page,
            page_size=new_state.items_per_page,
            sort_column=new_state.sorting_column,
            sort_order=new_state.sorting_order.value,
        )
        return new_state

    def _reject(self, field: str, message: str) -> NoReturn:
        self._log.warning("table.invalid_input", field=field, reason=message)
        raise InvalidInputError(message, field=field)
