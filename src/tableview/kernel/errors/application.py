"""Application-layer errors – raised by use-case services."""

from __future__ import annotations

from typing import Any

from tableview.kernel.errors.base import BaseError


class ApplicationError(BaseError):
    """Cross-cutting application-layer concern."""

    default_code = "application_error"


class ExportError(ApplicationError):
    """An export could not be produced."""

    default_code = "export_error"


class UnsupportedExportFormatError(ExportError):
    """The requested export format is unknown or has no backing service."""

    default_code = "unsupported_export_format"

    def __init__(self, export_format: str, *, reason: str | None = None, **kwargs: Any) -> None:
        message = f"Unsupported export format: {export_format!r}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message, **kwargs)
        self.export_format = export_format


__all__ = [
    "ApplicationError",
    "ExportError",
    "UnsupportedExportFormatError",
]
