"""Application export – CsvExporter."""
from __future__ import annotations

import csv
import io
from collections.abc import Iterable, Mapping, Sequence
from typing import Any

__all__ = ["CsvExporter"]


class CsvExporter:
    """Writes projected export rows into an in-memory CSV file."""

    def __init__(
        self,
        delimiter: str = ",",
        quoting: int = csv.QUOTE_MINIMAL,
        *,
        bom: bool = False,
    ) -> None:
        self._delimiter = delimiter
        self._quoting = quoting
        self._bom = bom

    def export(self, columns: Sequence[str], rows: Iterable[Mapping[str, Any]]) -> bytes:
        """Return the complete CSV content as bytes (UTF-8, optional BOM)."""
        buf = io.StringIO()
        if self._bom:
            buf.write("\ufeff")  # BOM for Excel compatibility

        writer = csv.writer(buf, delimiter=self._delimiter, quoting=self._quoting)
        writer.writerow(columns)
        for row in rows:
            writer.writerow([row.get(column) for column in columns])

        return buf.getvalue().encode("utf-8")
