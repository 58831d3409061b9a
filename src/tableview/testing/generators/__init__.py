"""Testing generators – Hypothesis strategies."""
from tableview.testing.generators.strategies import (
    cell_value_strategy,
    record_strategy,
    records_strategy,
)

__all__ = ["cell_value_strategy", "record_strategy", "records_strategy"]
