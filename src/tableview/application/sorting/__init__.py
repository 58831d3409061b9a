"""Application sorting – comparator dispatch and column sort."""
from tableview.application.sorting.comparator import (
    Collation,
    DescendingMode,
    collation_key,
    compare_strings,
    compare_values,
    sort_records,
)

__all__ = [
    "Collation",
    "DescendingMode",
    "collation_key",
    "compare_strings",
    "compare_values",
    "sort_records",
]
