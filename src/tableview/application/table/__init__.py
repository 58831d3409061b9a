"""Application table – the DataTable component and its page view."""
from tableview.application.table.view import ASC_INDICATOR, DESC_INDICATOR, TableView
from tableview.application.table.component import DataTable

__all__ = ["ASC_INDICATOR", "DESC_INDICATOR", "DataTable", "TableView"]
