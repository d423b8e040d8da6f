"""Filtered, windowed view of a result set."""

from __future__ import annotations

import logging

from cts_dashboard.models.dashboard import FilterState, PageView
from cts_dashboard.models.test_result import ResultSet

logger = logging.getLogger(__name__)

DEFAULT_PAGE_SIZE = 100


def last_page_index(filtered_count: int, page_size: int = DEFAULT_PAGE_SIZE) -> int:
    """Highest valid zero-based page index for ``filtered_count`` matches.

    0 matches gives 0. At exact multiples of ``page_size`` one trailing page
    is counted (100 matches at size 100 gives 1), so the last page can be
    empty. Callers and tests depend on this exact arithmetic.
    """
    if page_size <= 0:
        raise ValueError("page_size must be positive")
    return max(filtered_count, page_size - 1) // page_size


def compute_page(
    result_set: ResultSet,
    filter_state: FilterState,
    current_page: int = 0,
    page_size: int = DEFAULT_PAGE_SIZE,
) -> PageView:
    """Compute the match count, last page index and current page window.

    Both scans use the same predicate over the same generation, so the count
    and the window are always consistent with each other.
    """
    if page_size <= 0:
        raise ValueError("page_size must be positive")
    current_page = max(current_page, 0)
    matches = filter_state.matches
    records = result_set.records

    filtered_count = 0
    for record in records:
        if matches(record):
            filtered_count += 1

    shift = current_page * page_size
    page_records = []
    if shift < filtered_count:
        idx = 0
        for record in records:
            if not matches(record):
                continue
            if idx >= shift:
                page_records.append(record)
                if len(page_records) == page_size:
                    break
            idx += 1

    view = PageView(
        filtered_count=filtered_count,
        page_count=last_page_index(filtered_count, page_size),
        current_page=current_page,
        page_records=page_records,
    )
    logger.debug(
        "Generation %d: %d matches, page %d/%d (%d rows)",
        result_set.generation, view.filtered_count, view.current_page,
        view.page_count, len(view.page_records),
    )
    return view
