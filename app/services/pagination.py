# /app/services/pagination.py

"""
Page arithmetic shared by the history endpoint and the client views.

All metadata for one page is derived from a single snapshot of the total
item count, so the fields can never disagree with each other.
"""

import math
from dataclasses import dataclass, field
from typing import List

DEFAULT_PAGE_SIZE = 10
MAX_PAGE_SIZE = 100
DEFAULT_WINDOW_SIZE = 5


@dataclass(frozen=True)
class PageRequest:
    page: int = 1
    page_size: int = DEFAULT_PAGE_SIZE

    def __post_init__(self):
        if self.page < 1:
            raise ValueError("page must be >= 1")
        if self.page_size < 1:
            raise ValueError("page_size must be >= 1")

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.page_size

    @property
    def limit(self) -> int:
        return self.page_size


def total_pages_for(total_items: int, page_size: int) -> int:
    # An empty history still renders as one (empty) page.
    if total_items <= 0:
        return 1
    return math.ceil(total_items / page_size)


def build_pagination(current_page: int, page_size: int, total_items: int) -> dict:
    total_pages = total_pages_for(total_items, page_size)
    return {
        "currentPage": current_page,
        "totalPages": total_pages,
        "totalItems": total_items,
        "itemsPerPage": page_size,
        "hasNextPage": current_page < total_pages,
        "hasPreviousPage": current_page > 1,
    }


@dataclass(frozen=True)
class PageWindow:
    """The page-number controls to render around the current page."""

    current_page: int
    total_pages: int
    pages: List[int] = field(default_factory=list)

    @property
    def start(self) -> int:
        return self.pages[0]

    @property
    def end(self) -> int:
        return self.pages[-1]

    @property
    def show_first(self) -> bool:
        return self.start > 1

    @property
    def show_leading_ellipsis(self) -> bool:
        return self.start > 2

    @property
    def show_last(self) -> bool:
        return self.end < self.total_pages

    @property
    def show_trailing_ellipsis(self) -> bool:
        return self.end < self.total_pages - 1


def compute_page_window(current_page: int, total_pages: int, max_pages: int = DEFAULT_WINDOW_SIZE) -> PageWindow:
    if max_pages < 1:
        raise ValueError("max_pages must be >= 1")
    total_pages = max(total_pages, 1)

    start = max(1, current_page - max_pages // 2)
    end = min(total_pages, start + max_pages - 1)
    if end - start < max_pages - 1:
        start = max(1, end - max_pages + 1)

    return PageWindow(current_page=current_page, total_pages=total_pages, pages=list(range(start, end + 1)))
