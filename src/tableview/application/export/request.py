"""Application export – ExportRequest, TablePayload, ExportResult."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Final, Literal

__all__ = [
    "DEFAULT_FILENAMES",
    "ExportFormat",
    "ExportRequest",
    "ExportResult",
    "MEDIA_TYPES",
    "TablePayload",
]

ExportFormat = Literal["csv", "json", "xlsx", "pdf"]

DEFAULT_FILENAMES: Final[dict[str, str]] = {
    "csv": "data.csv",
    "json": "data.json",
    "xlsx": "table.xlsx",
    "pdf": "table.pdf",
}

MEDIA_TYPES: Final[dict[str, str]] = {
    "csv": "text/csv",
    "json": "application/json",
    "xlsx": "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
    "pdf": "application/pdf",
}


@dataclass(frozen=True)
class TablePayload:
    """Header row plus row-major value arrays for print-style targets."""

    header: list[str]
    rows: list[list[Any]] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.rows)


@dataclass(frozen=True)
class ExportRequest:
    """Describes a data export to be performed."""

    format: ExportFormat
    filename: str | None = None

    @property
    def resolved_filename(self) -> str:
        return self.filename or DEFAULT_FILENAMES.get(self.format, f"export.{self.format}")


@dataclass(frozen=True)
class ExportResult:
    """Serialized export ready to be handed to a download/save collaborator."""

    filename: str
    content: bytes
    media_type: str
    row_count: int
