"""Immutable browser state and its transitions.

Every transition returns a new :class:`BrowserState`; derived views
(filtered list, current page, detail) are recomputed from the snapshot
on access. Changing the search term or the filters always goes back to
page 1.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace

from bank_browser.config import DEFAULT_PAGE_SIZE
from bank_browser.models import Client
from bank_browser.query.filters import FilterOptions, apply_query
from bank_browser.query.pagination import Page, page_numbers, paginate, total_pages
from bank_browser.store import BankDataStore, ClientDetail


@dataclass(frozen=True)
class BrowserState:
    """Snapshot of what the browser shows."""

    store: BankDataStore = field(default_factory=BankDataStore)
    search_term: str = ""
    filters: FilterOptions = field(default_factory=FilterOptions)
    page: int = 1
    page_size: int = DEFAULT_PAGE_SIZE
    selected_client_id: str | None = None

    # Derived views
    @property
    def filtered(self) -> list[Client]:
        return apply_query(self.store.clients, self.search_term, self.filters)

    @property
    def total_pages(self) -> int:
        return total_pages(len(self.filtered), self.page_size)

    @property
    def current_page(self) -> Page[Client]:
        return paginate(self.filtered, self.page, self.page_size)

    @property
    def page_numbers(self) -> list[int | str]:
        return page_numbers(self.page, self.total_pages)

    @property
    def detail(self) -> ClientDetail | None:
        if self.selected_client_id is None:
            return None
        return self.store.detail(self.selected_client_id)

    # Transitions
    def with_store(self, store: BankDataStore) -> "BrowserState":
        return replace(self, store=store, page=1, selected_client_id=None)

    def with_search(self, term: str) -> "BrowserState":
        return replace(self, search_term=term, page=1)

    def with_filters(self, filters: FilterOptions) -> "BrowserState":
        return replace(self, filters=filters, page=1)

    def clear_filters(self) -> "BrowserState":
        return self.with_filters(FilterOptions())

    def go_to_page(self, page: int) -> "BrowserState":
        """Move to ``page``, clamped into the valid range."""
        return replace(self, page=min(max(page, 1), self.total_pages))

    def next_page(self) -> "BrowserState":
        return self.go_to_page(self.page + 1)

    def previous_page(self) -> "BrowserState":
        return self.go_to_page(self.page - 1)

    def select_client(self, client_id: str) -> "BrowserState":
        return replace(self, selected_client_id=client_id)

    def back_to_list(self) -> "BrowserState":
        return replace(self, selected_client_id=None)
