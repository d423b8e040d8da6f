"""Pagination button layout."""

from __future__ import annotations

from cts_dashboard.models.dashboard import PaginationLayout

WIDE_RADIUS = 2
NARROW_RADIUS = 1


def layout(current_page: int, page_count: int, radius: int = WIDE_RADIUS) -> PaginationLayout:
    """Page buttons around ``current_page`` with ellipsis markers.

    ``page_count`` is the highest valid zero-based page index; ``radius`` is
    how many neighbours to show on each side.
    """
    first = max(current_page - radius, 0)
    last = min(current_page + radius, page_count)
    at_start = current_page == 0
    at_end = current_page >= page_count
    return PaginationLayout(
        show_left_ellipsis=current_page > radius,
        page_buttons=list(range(first, last + 1)),
        show_right_ellipsis=current_page < max(page_count - radius, 0),
        first_disabled=at_start,
        prev_disabled=at_start,
        next_disabled=at_end,
        last_disabled=at_end,
    )
