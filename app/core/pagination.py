"""
Pagination arithmetic shared by the favorites listing and search results.

Two modes are supported:
- collection slicing, where the full ordered collection is available
  locally (favorites);
- upstream pages, where the provider already returned one page and
  reports the overall total (search).
"""

import math
from dataclasses import dataclass, field
from typing import Any, List, Optional, Sequence, Union

from app.core.errors import ValidationError

DEFAULT_PAGE_SIZE = 10

# OMDb returns fixed pages of ten results.
UPSTREAM_PAGE_SIZE = 10

MAX_VISIBLE_PAGES = 5


@dataclass(frozen=True)
class Page:
    """One window of a paginated collection."""

    items: List[Any] = field(default_factory=list)
    current_page: int = 1
    page_size: int = DEFAULT_PAGE_SIZE
    total_items: int = 0
    total_pages: int = 0

    @property
    def count(self) -> int:
        return len(self.items)


def total_pages(total_items: int, page_size: int = DEFAULT_PAGE_SIZE) -> int:
    """Number of pages needed for total_items; 0 when there are no items."""
    if page_size <= 0:
        raise ValueError("page_size must be positive")
    if total_items <= 0:
        return 0
    return math.ceil(total_items / page_size)


def paginate(
    items: Sequence[Any],
    page: int,
    page_size: int = DEFAULT_PAGE_SIZE,
) -> Page:
    """
    Slice a full ordered collection into one page.

    Args:
        items: Complete collection in display order
        page: 1-based page number (already validated by the caller)
        page_size: Items per page

    Returns:
        Page with the items in [(page-1)*page_size, page*page_size) clipped
        to the collection. A page past the end is empty, not an error.
    """
    total = len(items)
    start = (page - 1) * page_size
    return Page(
        items=list(items[start:start + page_size]),
        current_page=page,
        page_size=page_size,
        total_items=total,
        total_pages=total_pages(total, page_size),
    )


def _as_count(value: Union[int, str, None]) -> int:
    try:
        return max(int(value), 0)
    except (TypeError, ValueError):
        return 0


def upstream_page(
    items: Sequence[Any],
    total_results: Union[int, str, None],
    page: int,
    page_size: int = UPSTREAM_PAGE_SIZE,
) -> Page:
    """Wrap a page the provider already sliced, using its reported total."""
    total = _as_count(total_results)
    return Page(
        items=list(items),
        current_page=page,
        page_size=page_size,
        total_items=total,
        total_pages=total_pages(total, page_size),
    )


def parse_page(raw: Optional[Union[str, int]]) -> int:
    """
    Validate a raw page parameter.

    Missing or empty means the first page. Anything that is not a whole
    number >= 1 is rejected.

    Raises:
        ValidationError: If the page is non-numeric or below 1
    """
    if raw is None or (isinstance(raw, str) and not raw.strip()):
        return 1
    if isinstance(raw, bool):
        raise ValidationError("Page must be a positive number")
    try:
        page = int(raw.strip()) if isinstance(raw, str) else int(raw)
    except (TypeError, ValueError):
        raise ValidationError("Page must be a positive number")
    if page < 1:
        raise ValidationError("Page must be a positive number")
    return page


def page_range(
    current_page: int,
    total: int,
    max_visible: int = MAX_VISIBLE_PAGES,
) -> List[int]:
    """
    Page numbers shown by a pagination control, centred on current_page.

    The window holds at most max_visible pages and is shifted so it never
    runs past the first or last page.
    """
    if total <= 0:
        return []
    half = max_visible // 2
    end = min(total, max(1, current_page - half) + max_visible - 1)
    start = max(1, end - max_visible + 1)
    return list(range(start, end + 1))
