"""Testing generators – Hypothesis strategies for records.

Requires the ``hypothesis`` package:

    pip install hypothesis
    # or
    pip install "tableview[test]"
"""
from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from hypothesis.strategies import SearchStrategy  # type: ignore[import-untyped]


def _require_hypothesis() -> Any:
    """Lazy import guard – raises a clear error when hypothesis is absent."""
    try:
        import hypothesis.strategies as st  # type: ignore[import-untyped]
        return st
    except ImportError as exc:
        raise ImportError(
            "Install 'hypothesis' to use property-based testing strategies: "
            "pip install hypothesis"
        ) from exc


def cell_value_strategy() -> "SearchStrategy[Any]":
    """Scalar cell values: short strings, ints, finite floats, booleans, ``None``."""
    st = _require_hypothesis()
    return st.one_of(
        st.text(alphabet="abcdefgxyzABC 0123", max_size=8),
        st.integers(min_value=-1000, max_value=1000),
        st.floats(allow_nan=False, allow_infinity=False, width=32),
        st.booleans(),
        st.none(),
    )


def record_strategy(
    columns: Sequence[str],
    *,
    homogeneous: bool = False,
) -> "SearchStrategy[dict[str, Any]]":
    """A single record over *columns*; some keys may be missing.

    With ``homogeneous=True`` every column holds an integer and no key is
    dropped, which gives a totally ordered column for sort properties.
    """
    st = _require_hypothesis()
    if homogeneous:
        return st.fixed_dictionaries(
            {column: st.integers(min_value=-50, max_value=50) for column in columns}
        )
    return st.fixed_dictionaries(
        {},
        optional={column: cell_value_strategy() for column in columns},
    )


def records_strategy(
    columns: Sequence[str],
    *,
    max_size: int = 60,
    homogeneous: bool = False,
) -> "SearchStrategy[list[dict[str, Any]]]":
    """Lists of records over *columns*."""
    st = _require_hypothesis()
    return st.lists(record_strategy(columns, homogeneous=homogeneous), max_size=max_size)


__all__ = ["cell_value_strategy", "record_strategy", "records_strategy"]
