# src/application/paginator.py

from typing import Sequence

from src.domain.models import PAGE_SIZE, PageView, Record


def total_pages(count: int, page_size: int = PAGE_SIZE) -> int:
    if page_size < 1:
        raise ValueError(f"Page size must be positive, got {page_size}.")
    return (count + page_size - 1) // page_size


def paginate(
    matches: Sequence[Record],
    page_number: int,
    page_size: int = PAGE_SIZE,
) -> PageView:
    """
    Slice a match set into the window for one page.

    A page number outside [1, max(1, total_pages)] is pulled back into
    range so the returned view is always valid. Navigation that should
    leave the current page untouched goes through go_to_page() instead.
    """
    pages = total_pages(len(matches), page_size)
    page_number = max(1, min(page_number, max(1, pages)))

    start = (page_number - 1) * page_size
    return PageView(
        page_number=page_number,
        page_size=page_size,
        total_pages=pages,
        items=tuple(matches[start:start + page_size]),
    )


def go_to_page(current: int, requested: int, pages: int) -> int:
    """Return the new page number, or `current` when `requested` is out of range."""
    if 1 <= requested <= pages:
        return requested
    return current
