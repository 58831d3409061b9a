"""Application export – TableLayoutService port for print/PDF targets."""
from __future__ import annotations

from typing import Protocol, runtime_checkable

from tableview.application.export.request import TablePayload

__all__ = ["TableLayoutService"]


@runtime_checkable
class TableLayoutService(Protocol):
    """Lays out a header + rows table into a paginated document."""

    def render(self, payload: TablePayload, *, filename: str) -> bytes: ...
