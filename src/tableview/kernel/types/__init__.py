"""Kernel value-object types – public re-export surface.

Modules:
  cells.py   – Cell, CellKind
  records.py – Record, ColumnList, ensure_columns, ensure_records
"""

from tableview.kernel.types.cells import Cell, CellKind
from tableview.kernel.types.records import ColumnList, Record, ensure_columns, ensure_records

__all__ = [
    "Cell",
    "CellKind",
    "ColumnList",
    "Record",
    "ensure_columns",
    "ensure_records",
]
