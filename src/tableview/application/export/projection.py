"""Application export – project records onto the column list."""
from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Any

from tableview.application.export.request import TablePayload
from tableview.kernel.types import Record

__all__ = ["to_export_rows", "to_table_rows"]


def to_export_rows(records: Iterable[Record], columns: Sequence[str]) -> list[dict[str, Any]]:
    """One flat ``column -> value`` mapping per record, keys in *columns* order.

    Keys absent from a record map to ``None``; values are passed through as-is.
    """
    return [{column: record.get(column) for column in columns} for record in records]


def to_table_rows(records: Iterable[Record], columns: Sequence[str]) -> TablePayload:
    """Header plus one value list per record, both in *columns* order."""
    return TablePayload(
        header=list(columns),
        rows=[[record.get(column) for column in columns] for record in records],
    )
