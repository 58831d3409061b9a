"""Application export – ExportService dispatches to the right exporter."""
from __future__ import annotations

import json
import time
from collections.abc import Sequence

from tableview.application.export.csv_export import CsvExporter
from tableview.application.export.excel_export import ExcelExporter
from tableview.application.export.layout import TableLayoutService
from tableview.application.export.projection import to_export_rows, to_table_rows
from tableview.application.export.request import MEDIA_TYPES, ExportRequest, ExportResult
from tableview.kernel.errors import UnsupportedExportFormatError
from tableview.kernel.types import Record
from tableview.observability.logging import get_logger

__all__ = ["ExportService"]

logger = get_logger(__name__)


class ExportService:
    """Projects records and dispatches them to the exporter for a format.

    ``csv`` and ``json`` use the flat row projection; ``xlsx`` and ``pdf``
    use the header + rows table projection. ``pdf`` needs a
    :class:`TableLayoutService`.
    """

    def __init__(
        self,
        layout_service: TableLayoutService | None = None,
        *,
        bom: bool = False,
    ) -> None:
        self._csv_exporter = CsvExporter(bom=bom)
        self._excel_exporter = ExcelExporter()
        self._layout_service = layout_service

    def export(
        self,
        records: Sequence[Record],
        columns: Sequence[str],
        request: ExportRequest,
    ) -> ExportResult:
        start = time.monotonic()
        filename = request.resolved_filename

        if request.format == "csv":
            content = self._csv_exporter.export(columns, to_export_rows(records, columns))

        elif request.format == "json":
            rows = to_export_rows(records, columns)
            content = json.dumps(rows, default=str, ensure_ascii=False).encode("utf-8")

        elif request.format == "xlsx":
            stem = filename.rsplit(".", 1)[0] or "table"
            content = self._excel_exporter.export(to_table_rows(records, columns), title=stem)

        elif request.format == "pdf":
            if self._layout_service is None:
                raise UnsupportedExportFormatError("pdf", reason="no layout service configured")
            content = self._layout_service.render(to_table_rows(records, columns), filename=filename)

        else:
            raise UnsupportedExportFormatError(str(request.format))

        duration_ms = (time.monotonic() - start) * 1000
        logger.info(
            "table.export",
            format=request.format,
            filename=filename,
            rows=len(records),
            bytes=len(content),
            duration_ms=round(duration_ms, 3),
        )
        return ExportResult(
            filename=filename,
            content=content,
            media_type=MEDIA_TYPES[request.format],
            row_count=len(records),
        )
