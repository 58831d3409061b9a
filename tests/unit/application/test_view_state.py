"""Unit tests for ViewState and the sort toggle state machine."""

from __future__ import annotations

import pytest

from tableview.application.view_state import SortDirection, ViewState, toggle_sort


class TestViewState:
    def test_defaults(self) -> None:
        state = ViewState()
        assert state.search_term == ""
        assert state.current_page == 1
        assert state.items_per_page == 10
        assert state.sorting_column == ""
        assert state.sorting_order is SortDirection.ASC
        assert not state.is_sorted

    def test_frozen(self) -> None:
        state = ViewState()
        with pytest.raises((AttributeError, TypeError)):
            state.current_page = 2  # type: ignore[misc]

    def test_replace_returns_new_value(self) -> None:
        state = ViewState()
        moved = state.replace(current_page=3)
        assert moved.current_page == 3
        assert state.current_page == 1

    def test_sort_direction_values(self) -> None:
        assert SortDirection("asc") is SortDirection.ASC
        assert SortDirection.DESC.value == "desc"


class TestToggleSort:
    def test_from_unsorted_goes_ascending(self) -> None:
        state = toggle_sort(ViewState(), "name")
        assert (state.sorting_column, state.sorting_order) == ("name", SortDirection.ASC)

    def test_second_click_goes_descending(self) -> None:
        state = toggle_sort(toggle_sort(ViewState(), "name"), "name")
        assert (state.sorting_column, state.sorting_order) == ("name", SortDirection.DESC)

    def test_third_click_goes_back_to_ascending(self) -> None:
        state = ViewState()
        for _ in range(3):
            state = toggle_sort(state, "name")
        assert (state.sorting_column, state.sorting_order) == ("name", SortDirection.ASC)

    def test_other_column_resets_to_ascending(self) -> None:
        state = toggle_sort(toggle_sort(ViewState(), "name"), "name")
        state = toggle_sort(state, "age")
        assert (state.sorting_column, state.sorting_order) == ("age", SortDirection.ASC)

    def test_never_returns_to_unsorted(self) -> None:
        state = ViewState()
        for column in ["name", "name", "age", "age", "name"]:
            state = toggle_sort(state, column)
            assert state.is_sorted

    def test_other_fields_untouched(self) -> None:
        state = ViewState(search_term="x", current_page=4, items_per_page=20)
        toggled = toggle_sort(state, "name")
        assert toggled.search_term == "x"
        assert toggled.current_page == 4
        assert toggled.items_per_page == 20
