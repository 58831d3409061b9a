"""Application filtering – case-insensitive substring search over records."""
from __future__ import annotations

from collections.abc import Iterable

from tableview.kernel.types import Record


def matches(record: Record, term: str) -> bool:
    """Return ``True`` when any string value of *record* contains *term*.

    Matching is case-insensitive. Non-string values (numbers included) are
    never stringified, so a numeric cell cannot match.
    """
    if not term:
        return True
    needle = term.lower()
    return any(isinstance(value, str) and needle in value.lower() for value in record.values())


def filter_records(records: Iterable[Record], term: str) -> list[Record]:
    """Return the records matching *term*, in input order."""
    if not term:
        return list(records)
    return [record for record in records if matches(record, term)]


__all__ = ["filter_records", "matches"]
