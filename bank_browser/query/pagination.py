"""Fixed-size pagination and the page-number navigation sequence."""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Generic, TypeVar

from bank_browser.config import DEFAULT_PAGE_SIZE

T = TypeVar("T")

ELLIPSIS = "..."

# Above this many pages the navigation collapses runs into ELLIPSIS.
MAX_UNCOMPRESSED_PAGES = 7


def total_pages(count: int, page_size: int = DEFAULT_PAGE_SIZE) -> int:
    """Number of pages for ``count`` items; at least 1, even when empty."""
    return max(1, math.ceil(count / page_size))


@dataclass(frozen=True)
class Page(Generic[T]):
    """One page of a result list."""

    items: tuple[T, ...]
    number: int
    page_size: int
    total_items: int
    total_pages: int

    @property
    def has_previous(self) -> bool:
        return self.number > 1

    @property
    def has_next(self) -> bool:
        return self.number < self.total_pages


def paginate(items: Sequence[T], page: int, page_size: int = DEFAULT_PAGE_SIZE) -> Page[T]:
    """Slice out page ``page`` (1-based), clipped to the available items.

    A page below 1 is read as page 1. A page past the end yields an
    empty slice; its number is kept as requested.
    """
    page = max(page, 1)
    start = (page - 1) * page_size
    return Page(
        items=tuple(items[start : start + page_size]),
        number=page,
        page_size=page_size,
        total_items=len(items),
        total_pages=total_pages(len(items), page_size),
    )


def page_numbers(current: int, total: int) -> list[int | str]:
    """Page links to render for page ``current`` of ``total``.

    Up to seven pages are all shown. Beyond that the first and last page
    are always shown and the rest is collapsed around the current page:

    - near the start (current < 5): ``1 2 3 4 5 ... N``
    - near the end (current > N - 4): ``1 ... N-4 N-3 N-2 N-1 N``
    - otherwise: ``1 ... c-1 c c+1 ... N``
    """
    pages: list[int | str] = [1]
    if total > MAX_UNCOMPRESSED_PAGES:
        if current < 5:
            pages.extend([2, 3, 4, 5, ELLIPSIS, total])
        elif current > total - 4:
            pages.extend([ELLIPSIS, total - 4, total - 3, total - 2, total - 1, total])
        else:
            pages.extend([ELLIPSIS, current - 1, current, current + 1, ELLIPSIS, total])
    else:
        pages.extend(range(2, total + 1))
    return pages
