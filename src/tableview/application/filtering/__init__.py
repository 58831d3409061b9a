"""Application filtering – search-term predicate and filter."""
from tableview.application.filtering.search import filter_records, matches

__all__ = ["filter_records", "matches"]
