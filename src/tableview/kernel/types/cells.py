"""Tagged cell value object.

A cell is classified once, when a page is built, so renderers switch on
:attr:`Cell.kind` instead of re-inspecting raw values.
"""

from __future__ import annotations

import dataclasses
from enum import Enum
from typing import Any, Final

_IMAGE_PREFIX: Final = "http"


class CellKind(str, Enum):
    TEXT = "text"
    NUMBER = "number"
    IMAGE_URL = "image_url"
    UNKNOWN = "unknown"


@dataclasses.dataclass(frozen=True, slots=True)
class Cell:
    """A single rendered-ready table cell."""

    kind: CellKind
    value: Any = None

    def __str__(self) -> str:
        return "" if self.value is None else str(self.value)

    @classmethod
    def of(cls, value: Any) -> "Cell":
        """Classify *value* into a :class:`Cell`."""
        if isinstance(value, str):
            if value.startswith(_IMAGE_PREFIX):
                return cls(CellKind.IMAGE_URL, value)
            return cls(CellKind.TEXT, value)
        # bool is an int subclass but not a number for display purposes
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return cls(CellKind.NUMBER, value)
        return cls(CellKind.UNKNOWN, value)


__all__ = ["Cell", "CellKind"]
