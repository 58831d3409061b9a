"""Application layer – view state, filter/sort/paginate pipeline, export.

Sub-packages:
  view_state  – ViewState, SortDirection, toggle_sort
  filtering   – filter_records, matches
  sorting     – compare_values, sort_records, DescendingMode
  pagination  – PageRequest, Page, paginate, total_pages, clamp_page
  export      – projections, CsvExporter, ExcelExporter, ExportService
  table       – DataTable component, TableView
"""
