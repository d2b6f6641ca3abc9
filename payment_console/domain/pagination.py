"""Pagination state transitions and the windowed page-number strip"""

from dataclasses import replace
from typing import List
from payment_console.domain.models import Page, PaginationState

ITEMS_PER_PAGE_OPTIONS = (5, 10, 20, 50)
ELLIPSIS = "..."
MAX_VISIBLE_PAGES = 5


def change_page(state: PaginationState, target: int) -> PaginationState:
    """Move to `target`; out-of-range targets return `state` unchanged"""
    if not 1 <= target <= state.total_pages:
        return state
    return replace(state, current_page=target)


def change_items_per_page(state: PaginationState, new_size: int) -> PaginationState:
    """Switch page size and go back to page 1; unsupported sizes are ignored"""
    if new_size not in ITEMS_PER_PAGE_OPTIONS:
        return state
    return replace(state, items_per_page=new_size, current_page=1)


def reset_to_first_page(state: PaginationState) -> PaginationState:
    return replace(state, current_page=1)


def apply_page(state: PaginationState, page: Page) -> PaginationState:
    """Take total counts from a freshly fetched page"""
    return replace(state, total_pages=page.total_pages, total_items=page.total_elements)


def page_numbers(current_page: int, total_pages: int) -> List[int | str]:
    """
    Page strip with a bounded width.

    Up to five pages are listed in full. Beyond that the first and last page
    are always present, with at most three pages around the current one and
    an ELLIPSIS marker on each side where pages are skipped.

    Example:
        page_numbers(6, 10) -> [1, "...", 5, 6, 7, "...", 10]
    """
    if total_pages <= MAX_VISIBLE_PAGES:
        return list(range(1, total_pages + 1))

    pages: List[int | str] = [1]

    if current_page > 3:
        pages.append(ELLIPSIS)

    start = max(2, current_page - 1)
    end = min(total_pages - 1, current_page + 1)
    pages.extend(range(start, end + 1))

    if current_page < total_pages - 2:
        pages.append(ELLIPSIS)

    pages.append(total_pages)
    return pages


def range_label(state: PaginationState) -> str:
    return f"Showing {state.start_item}-{state.end_item} of {state.total_items}"
