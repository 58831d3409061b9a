"""Application export – projections and serializers for table exports."""
from tableview.application.export.request import (
    DEFAULT_FILENAMES,
    ExportFormat,
    ExportRequest,
    ExportResult,
    TablePayload,
)
from tableview.application.export.projection import to_export_rows, to_table_rows
from tableview.application.export.csv_export import CsvExporter
from tableview.application.export.excel_export import ExcelExporter
from tableview.application.export.layout import TableLayoutService
from tableview.application.export.export_service import ExportService

__all__ = [
    "DEFAULT_FILENAMES",
    "CsvExporter",
    "ExcelExporter",
    "ExportFormat",
    "ExportRequest",
    "ExportResult",
    "ExportService",
    "TableLayoutService",
    "TablePayload",
    "to_export_rows",
    "to_table_rows",
]
