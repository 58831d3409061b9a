"""Application sorting – column comparator, ascending/descending sort."""
from __future__ import annotations

import functools
import locale
import unicodedata
from collections.abc import Iterable
from enum import Enum
from typing import Any

from tableview.application.view_state import SortDirection
from tableview.kernel.types import Record


class DescendingMode(str, Enum):
    """How a descending sort is derived from the ascending comparator."""

    REVERSE = "reverse"  # sort ascending, then reverse the whole result
    STABLE = "stable"  # negated comparator, tied rows keep input order


class Collation(str, Enum):
    """How two strings are ordered."""

    NATURAL = "natural"  # letters first, then accents, then case (lower before upper)
    LOCALE = "locale"  # locale.strcoll under the process LC_COLLATE


def collation_key(text: str) -> tuple[str, str, tuple[bool, ...]]:
    """Multi-level sort key in the spirit of the Unicode root collation.

    Level one ignores case and accents, level two breaks ties on accents,
    level three puts lowercase before uppercase.
    """
    decomposed = unicodedata.normalize("NFD", text)
    letters = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    return (
        letters.casefold(),
        decomposed.casefold(),
        tuple(ch.isupper() for ch in letters),
    )


def compare_strings(a: str, b: str, collation: Collation | str = Collation.NATURAL) -> int:
    if Collation(collation) is Collation.LOCALE:
        return locale.strcoll(a, b)
    key_a, key_b = collation_key(a), collation_key(b)
    return (key_a > key_b) - (key_a < key_b)


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def compare_values(a: Any, b: Any, collation: Collation | str = Collation.NATURAL) -> int:
    """Three-way comparison of two cell values.

    Two strings compare with *collation*, two numbers by difference. Every
    other pairing (mixed types, ``None``, missing) is a tie.
    """
    if isinstance(a, str) and isinstance(b, str):
        return compare_strings(a, b, collation)
    if _is_number(a) and _is_number(b):
        if a < b:
            return -1
        if a > b:
            return 1
        return 0
    return 0


def sort_records(
    records: Iterable[Record],
    column: str,
    order: SortDirection | str = SortDirection.ASC,
    *,
    descending: DescendingMode | str = DescendingMode.REVERSE,
    collation: Collation | str = Collation.NATURAL,
) -> list[Record]:
    """Return a new list of *records* ordered by *column*.

    The ascending pass is a stable sort. For ``DescendingMode.REVERSE`` the
    descending result is exactly ``reversed(ascending)``, so tied rows come
    out in reverse input order.
    """
    order = SortDirection(order)
    descending = DescendingMode(descending)
    collation = Collation(collation)

    def _cmp(left: Record, right: Record) -> int:
        return compare_values(left.get(column), right.get(column), collation)

    if order is SortDirection.DESC and descending is DescendingMode.STABLE:
        return sorted(records, key=functools.cmp_to_key(lambda left, right: _cmp(right, left)))

    ascending = sorted(records, key=functools.cmp_to_key(_cmp))
    if order is SortDirection.DESC:
        ascending.reverse()
    return ascending


__all__ = [
    "Collation",
    "DescendingMode",
    "collation_key",
    "compare_strings",
    "compare_values",
    "sort_records",
]
