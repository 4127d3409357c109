"""Client list query pipeline: search, filters, pagination."""

from bank_browser.query.filters import (
    FilterOptions,
    apply_query,
    matches_document_type,
    matches_marital_status,
    matches_search,
)
from bank_browser.query.pagination import ELLIPSIS, Page, page_numbers, paginate, total_pages
from bank_browser.query.state import BrowserState

__all__ = [
    "BrowserState",
    "ELLIPSIS",
    "FilterOptions",
    "Page",
    "apply_query",
    "matches_document_type",
    "matches_marital_status",
    "matches_search",
    "page_numbers",
    "paginate",
    "total_pages",
]
