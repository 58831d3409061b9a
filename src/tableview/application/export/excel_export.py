"""Application export – ExcelExporter (openpyxl)."""
from __future__ import annotations

import datetime
import decimal
import io
import re
from typing import Any

import openpyxl
from openpyxl.cell.cell import ILLEGAL_CHARACTERS_RE
from openpyxl.styles import Font
from openpyxl.utils.exceptions import IllegalCharacterError

from tableview.application.export.request import TablePayload
from tableview.kernel.errors import ExportError

__all__ = ["ExcelExporter", "cell_value", "sheet_title"]

_MAX_COLUMN_WIDTH = 50
_MAX_TITLE_LENGTH = 31
_DEFAULT_TITLE = "table"
_INVALID_TITLE_CHARS = re.compile(r"[\[\]:*?/\\]")
_CELL_SCALARS = (
    str,
    int,
    float,
    decimal.Decimal,
    datetime.date,
    datetime.time,
    datetime.timedelta,
)


def sheet_title(name: str) -> str:
    """Turn a filename stem or path into a legal worksheet title."""
    base = re.split(r"[\\/]", name)[-1]
    title = _INVALID_TITLE_CHARS.sub("", base).strip().strip("'")
    return title[:_MAX_TITLE_LENGTH] or _DEFAULT_TITLE


def cell_value(value: Any) -> Any:
    """Coerce a record value into something openpyxl can store."""
    if value is None:
        return None
    if isinstance(value, str):
        return ILLEGAL_CHARACTERS_RE.sub("", value)
    if isinstance(value, _CELL_SCALARS):
        return value
    return ILLEGAL_CHARACTERS_RE.sub("", str(value))


class ExcelExporter:
    """Exports a :class:`TablePayload` to an .xlsx workbook."""

    def export(self, payload: TablePayload, title: str = _DEFAULT_TITLE) -> bytes:
        try:
            return self._build(payload, sheet_title(title))
        except (IllegalCharacterError, ValueError, TypeError) as exc:
            raise ExportError(f"Failed to build xlsx export: {exc}", cause=exc) from exc

    def _build(self, payload: TablePayload, title: str) -> bytes:
        wb = openpyxl.Workbook()
        ws = wb.active
        ws.title = title

        for col_idx, header in enumerate(payload.header, start=1):
            cell = ws.cell(row=1, column=col_idx, value=cell_value(header))
            cell.font = Font(bold=True)

        for row_idx, values in enumerate(payload.rows, start=2):
            for col_idx, value in enumerate(values, start=1):
                ws.cell(row=row_idx, column=col_idx, value=cell_value(value))

        for col_cells in ws.columns:
            max_len = max(len(str(cell.value if cell.value is not None else "")) for cell in col_cells)
            ws.column_dimensions[col_cells[0].column_letter].width = min(max_len + 2, _MAX_COLUMN_WIDTH)

        buf = io.BytesIO()
        wb.save(buf)
        return buf.getvalue()
