"""Kernel error hierarchy – public re-export surface.

Hierarchy::

    BaseError
    ├── DomainError                 (domain.py)
    │   └── ValidationError
    │       └── InvalidInputError
    └── ApplicationError            (application.py)
        └── ExportError
            └── UnsupportedExportFormatError
"""

from tableview.kernel.errors.application import (
    ApplicationError,
    ExportError,
    UnsupportedExportFormatError,
)
from tableview.kernel.errors.base import BaseError
from tableview.kernel.errors.domain import (
    DomainError,
    InvalidInputError,
    ValidationError,
)

__all__ = [
    "ApplicationError",
    "BaseError",
    "DomainError",
    "ExportError",
    "InvalidInputError",
    "UnsupportedExportFormatError",
    "ValidationError",
]
