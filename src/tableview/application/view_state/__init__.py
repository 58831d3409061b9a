"""Application view state – immutable interaction state and sort toggling."""
from tableview.application.view_state.state import SortDirection, ViewState, toggle_sort

__all__ = ["SortDirection", "ViewState", "toggle_sort"]
