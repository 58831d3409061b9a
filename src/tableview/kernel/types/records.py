"""Record and column-list aliases plus boundary validation."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any, TypeAlias

from tableview.kernel.errors import InvalidInputError

Record: TypeAlias = Mapping[str, Any]
ColumnList: TypeAlias = Sequence[str]


def ensure_columns(columns: Any) -> tuple[str, ...]:
    """Return *columns* as a tuple, raising when it is empty or not all strings."""
    if isinstance(columns, (str, bytes)) or not isinstance(columns, Sequence):
        raise InvalidInputError(
            f"columns must be a sequence of strings, got {type(columns).__name__}",
            field="columns",
        )
    if not columns:
        raise InvalidInputError("columns must not be empty", field="columns")
    for idx, name in enumerate(columns):
        if not isinstance(name, str):
            raise InvalidInputError(
                f"column at position {idx} is not a string: {name!r}",
                field="columns",
            )
    return tuple(columns)


def ensure_records(records: Any) -> list[Record]:
    """Return a new list holding the same record references.

    Raises :class:`InvalidInputError` when *records* is not a sequence or any
    element is not a mapping.
    """
    if isinstance(records, (str, bytes, Mapping)) or not isinstance(records, Sequence):
        raise InvalidInputError(
            f"records must be a sequence of mappings, got {type(records).__name__}",
            field="records",
        )
    for idx, record in enumerate(records):
        if not isinstance(record, Mapping):
            raise InvalidInputError(
                f"record at position {idx} is not a mapping: {type(record).__name__}",
                field="records",
                detail={"index": idx},
            )
    return list(records)


__all__ = ["ColumnList", "Record", "ensure_columns", "ensure_records"]
