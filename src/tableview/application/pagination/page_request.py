"""Application pagination – PageRequest."""
from __future__ import annotations

import dataclasses

from tableview.kernel.errors import InvalidInputError


@dataclasses.dataclass(frozen=True)
class PageRequest:
    """Offset-based pagination parameters (1-based page number)."""
    page: int = 1
    size: int = 10

    def __post_init__(self) -> None:
        if isinstance(self.page, bool) or not isinstance(self.page, int) or self.page < 1:
            raise InvalidInputError(f"page must be an integer >= 1, got {self.page!r}", field="page")
        if isinstance(self.size, bool) or not isinstance(self.size, int) or self.size < 1:
            raise InvalidInputError(f"size must be an integer >= 1, got {self.size!r}", field="size")

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.size

    @property
    def limit(self) -> int:
        """Exclusive end index of the page window."""
        return self.page * self.size


__all__ = ["PageRequest"]
