"""Domain errors – input-contract violations."""

from __future__ import annotations

from typing import Any

from tableview.kernel.errors.base import BaseError


class DomainError(BaseError):
    """Raised when a table input rule is violated."""

    default_code = "domain_error"


class ValidationError(DomainError):
    """Input data does not meet validation rules.

    ``errors`` is a list of field-level validation failures.
    """

    default_code = "validation_error"

    def __init__(
        self,
        message: str,
        *,
        errors: list[dict[str, Any]] | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.errors: list[dict[str, Any]] = errors or []

    def to_dict(self) -> dict[str, Any]:
        base = super().to_dict()
        base["errors"] = self.errors
        return base


class InvalidInputError(ValidationError):
    """Records, columns or a requested page/page size are malformed."""

    default_code = "invalid_input"

    def __init__(self, message: str, *, field: str | None = None, **kwargs: Any) -> None:
        if field is not None and "errors" not in kwargs:
            kwargs["errors"] = [{"field": field, "message": message}]
        super().__init__(message, **kwargs)
        self.field = field


__all__ = [
    "DomainError",
    "InvalidInputError",
    "ValidationError",
]
