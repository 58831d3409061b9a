"""Config settings – TableSettings for the DataTable component."""
from __future__ import annotations

import dataclasses
from typing import ClassVar

from tableview.config.settings.base import Settings
from tableview.config.settings.loaders import EnvSettingsLoader
from tableview.config.validation import InvalidSettingValueError

DESCENDING_MODES: frozenset[str] = frozenset({"reverse", "stable"})
COLLATIONS: frozenset[str] = frozenset({"natural", "locale"})


@dataclasses.dataclass
class TableSettings(Settings):
    """Tunables for pagination, sort direction semantics and export names.

    ``descending_mode``:
        ``"reverse"`` sorts ascending then reverses the result, flipping the
        order of tied rows. ``"stable"`` uses a true descending comparator
        that keeps tied rows in input order.
    ``collation``:
        ``"natural"`` orders strings by letter first, then accent, then case,
        so ``"apple"`` sorts before ``"Banana"``. ``"locale"`` defers to
        ``locale.strcoll`` and the process ``LC_COLLATE``.
    ``clamp_current_page``:
        When true, any transition that shrinks the page count pulls
        ``current_page`` back to the last page. When false a table can sit
        on an empty page after a search or page size change.
    """

    _prefix: ClassVar[str] = "TABLEVIEW"

    items_per_page: int = 10
    page_size_options: list[int] = dataclasses.field(default_factory=lambda: [10, 20, 50])
    descending_mode: str = "reverse"
    collation: str = "natural"
    clamp_current_page: bool = True
    csv_filename: str = "data.csv"
    pdf_filename: str = "table.pdf"
    csv_bom: bool = False

    def _validate(self) -> None:
        if not self.page_size_options:
            raise InvalidSettingValueError(
                "page_size_options", self.page_size_options, "must not be empty"
            )
        for option in self.page_size_options:
            if option < 1:
                raise InvalidSettingValueError(
                    "page_size_options", self.page_size_options, "sizes must be positive"
                )
        if self.items_per_page not in self.page_size_options:
            raise InvalidSettingValueError(
                "items_per_page",
                self.items_per_page,
                f"must be one of {self.page_size_options}",
            )
        if self.descending_mode not in DESCENDING_MODES:
            raise InvalidSettingValueError(
                "descending_mode",
                self.descending_mode,
                f"must be one of {sorted(DESCENDING_MODES)}",
            )
        if self.collation not in COLLATIONS:
            raise InvalidSettingValueError(
                "collation",
                self.collation,
                f"must be one of {sorted(COLLATIONS)}",
            )


def load_settings() -> TableSettings:
    """Build :class:`TableSettings` from ``TABLEVIEW_*`` environment variables."""
    return EnvSettingsLoader().load(TableSettings)


__all__ = ["COLLATIONS", "DESCENDING_MODES", "TableSettings", "load_settings"]
