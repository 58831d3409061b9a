"""Unit tests for the column comparator and sort."""

from __future__ import annotations

import pytest

from tableview.application.sorting import (
    Collation,
    DescendingMode,
    collation_key,
    compare_values,
    sort_records,
)
from tableview.application.sorting import comparator
from tableview.application.view_state import SortDirection


class TestCompareValues:
    def test_strings(self) -> None:
        assert compare_values("apple", "banana") < 0
        assert compare_values("banana", "apple") > 0
        assert compare_values("pear", "pear") == 0

    def test_numbers(self) -> None:
        assert compare_values(1, 2) < 0
        assert compare_values(2.5, 1) > 0
        assert compare_values(3, 3.0) == 0

    @pytest.mark.parametrize(
        ("a", "b"),
        [("1", 1), (1, "1"), (None, 1), ("a", None), (None, None), (True, 1), (1, False)],
    )
    def test_mixed_types_tie(self, a, b) -> None:
        assert compare_values(a, b) == 0


# ---------------------------------------------------------------------------
# collation
# ---------------------------------------------------------------------------


class TestCollation:
    def test_case_does_not_outrank_letters(self) -> None:
        assert compare_values("apple", "Banana") < 0
        assert compare_values("Banana", "cherry") < 0

    def test_lowercase_before_uppercase_on_tie(self) -> None:
        assert compare_values("a", "A") < 0
        assert compare_values("Apple", "apple") > 0

    def test_accent_breaks_tie_after_letters(self) -> None:
        assert compare_values("resume", "r\u00e9sum\u00e9") < 0
        assert compare_values("r\u00e9sa", "resb") < 0

    def test_composed_and_decomposed_are_equal(self) -> None:
        assert compare_values("caf\u00e9", "cafe\u0301") == 0

    def test_key_levels(self) -> None:
        assert collation_key("Ab") == ("ab", "ab", (True, False))

    def test_locale_mode_uses_strcoll(self, monkeypatch: pytest.MonkeyPatch) -> None:
        calls: list[tuple[str, str]] = []

        def fake_strcoll(a: str, b: str) -> int:
            calls.append((a, b))
            return -7

        monkeypatch.setattr(comparator.locale, "strcoll", fake_strcoll)
        assert compare_values("x", "y", Collation.LOCALE) == -7
        assert compare_values("x", "y", "natural") < 0
        assert calls == [("x", "y")]

    def test_unknown_collation_raises(self) -> None:
        with pytest.raises(ValueError):
            compare_values("a", "b", "klingon")


class TestSortRecords:
    def test_ascending_strings(self) -> None:
        rows = [{"name": "carol"}, {"name": "alice"}, {"name": "bob"}]
        assert [r["name"] for r in sort_records(rows, "name")] == ["alice", "bob", "carol"]

    def test_ascending_numbers(self) -> None:
        rows = [{"age": 30}, {"age": 5}, {"age": 12.5}]
        assert [r["age"] for r in sort_records(rows, "age", SortDirection.ASC)] == [5, 12.5, 30]

    def test_descending_numbers(self) -> None:
        rows = [{"age": 30}, {"age": 5}, {"age": 12}]
        assert [r["age"] for r in sort_records(rows, "age", "desc")] == [30, 12, 5]

    def test_does_not_mutate_input(self) -> None:
        rows = [{"v": 2}, {"v": 1}]
        sort_records(rows, "v")
        assert rows == [{"v": 2}, {"v": 1}]

    def test_ascending_ties_keep_input_order(self) -> None:
        first, second, third = {"v": 1}, {"v": 1}, {"v": 2}
        result = sort_records([first, second, third], "v", SortDirection.ASC)
        assert result[0] is first
        assert result[1] is second
        assert result[2] is third

    def test_reverse_descending_flips_ties(self) -> None:
        first, second, third = {"v": 1}, {"v": 1}, {"v": 2}
        result = sort_records([first, second, third], "v", SortDirection.DESC)
        assert result[0] is third
        assert result[1] is second
        assert result[2] is first

    def test_stable_descending_keeps_ties(self) -> None:
        first, second, third = {"v": 1}, {"v": 1}, {"v": 2}
        result = sort_records(
            [first, second, third], "v", SortDirection.DESC, descending=DescendingMode.STABLE
        )
        assert result[0] is third
        assert result[1] is first
        assert result[2] is second

    def test_descending_is_reverse_of_ascending(self) -> None:
        rows = [{"v": "b"}, {"v": 2}, {"v": "a"}, {}, {"v": None}, {"v": 1}]
        ascending = sort_records(rows, "v", SortDirection.ASC)
        descending = sort_records(rows, "v", SortDirection.DESC)
        assert [id(r) for r in descending] == [id(r) for r in reversed(ascending)]

    def test_all_ties_keep_input_order(self) -> None:
        rows = [{"v": "x"}, {"v": 1}, {}, {"v": None}]
        result = sort_records(rows, "v")
        assert [id(r) for r in result] == [id(r) for r in rows]

    def test_missing_column_does_not_raise(self) -> None:
        rows = [{"a": 1}, {"a": 2}]
        assert sort_records(rows, "missing") == rows

    def test_invalid_direction_raises(self) -> None:
        with pytest.raises(ValueError):
            sort_records([], "v", "sideways")

    def test_mixed_case_strings(self) -> None:
        rows = [{"v": "banana"}, {"v": "Cherry"}, {"v": "apple"}]
        assert [r["v"] for r in sort_records(rows, "v")] == ["apple", "banana", "Cherry"]

    def test_mixed_case_descending(self) -> None:
        rows = [{"v": "banana"}, {"v": "Cherry"}, {"v": "apple"}]
        result = sort_records(rows, "v", SortDirection.DESC)
        assert [r["v"] for r in result] == ["Cherry", "banana", "apple"]

    def test_locale_collation_is_passed_through(self, monkeypatch: pytest.MonkeyPatch) -> None:
        # reversed code-point order stands in for a host collation
        monkeypatch.setattr(comparator.locale, "strcoll", lambda a, b: (a < b) - (a > b))
        rows = [{"v": "a"}, {"v": "c"}, {"v": "b"}]
        result = sort_records(rows, "v", collation="locale")
        assert [r["v"] for r in result] == ["c", "b", "a"]
