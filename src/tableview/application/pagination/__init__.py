"""Application pagination – page request, page and slicing algebra."""
from tableview.application.pagination.page_request import PageRequest
from tableview.application.pagination.page import Page, clamp_page, paginate, total_pages

__all__ = ["Page", "PageRequest", "clamp_page", "paginate", "total_pages"]
