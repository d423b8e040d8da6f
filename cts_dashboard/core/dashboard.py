"""Dashboard state owner: applies user input and recomputes derived state."""

from __future__ import annotations

import logging
from typing import Callable, Optional

from cts_dashboard.core.chart import compute_segments
from cts_dashboard.core.histogram import compute_histogram
from cts_dashboard.core.pagination import WIDE_RADIUS, layout
from cts_dashboard.core.store import ResultStore
from cts_dashboard.core.view import DEFAULT_PAGE_SIZE, compute_page, last_page_index
from cts_dashboard.models.dashboard import (
    DashboardSnapshot,
    FilterState,
    PaginationLayout,
)
from cts_dashboard.models.status import TestStatus

logger = logging.getLogger(__name__)

Subscriber = Callable[[DashboardSnapshot], None]


class DashboardState:
    """Single owner of the filter, the page index and the result store.

    Every derived value is recomputed from scratch in ``snapshot``; nothing
    is patched incrementally. Changing the status filter or the settled
    search resets the page to 0; paging and reloading do not.
    """

    def __init__(self, store: ResultStore, page_size: int = DEFAULT_PAGE_SIZE):
        if page_size <= 0:
            raise ValueError("page_size must be positive")
        self.store = store
        self.page_size = page_size
        self._filter = FilterState()
        self._current_page = 0
        self._subscribers: list[Subscriber] = []

    @property
    def filter_state(self) -> FilterState:
        return self._filter

    @property
    def current_page(self) -> int:
        return self._current_page

    def subscribe(self, callback: Subscriber) -> Callable[[], None]:
        """Register ``callback`` for fresh snapshots. Returns an unsubscribe function."""
        self._subscribers.append(callback)

        def unsubscribe() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe

    # --- input-changing events ---

    def set_status_filter(self, status: Optional[TestStatus]) -> None:
        if status == self._filter.status_filter:
            return
        self._set_filter(self._filter.model_copy(update={"status_filter": status}))

    def set_search(self, term: Optional[str]) -> None:
        """Apply a settled search term; empty or None clears the search."""
        new_filter = FilterState(
            status_filter=self._filter.status_filter, settled_search=term
        )
        if new_filter == self._filter:
            return
        self._set_filter(new_filter)

    def _set_filter(self, new_filter: FilterState) -> None:
        logger.debug("Filter changed: %s -> %s", self._filter, new_filter)
        self._filter = new_filter
        self._current_page = 0
        self._notify()

    # --- page-only events ---

    def last_page(self) -> int:
        view = compute_page(
            self.store.current, self._filter, 0, self.page_size
        )
        return last_page_index(view.filtered_count, self.page_size)

    def go_to_page(self, page: int) -> None:
        page = min(max(page, 0), self.last_page())
        if page == self._current_page:
            return
        self._current_page = page
        self._notify()

    def first(self) -> None:
        self.go_to_page(0)

    def prev(self) -> None:
        self.go_to_page(self._current_page - 1)

    def next(self) -> None:
        self.go_to_page(self._current_page + 1)

    def last(self) -> None:
        self.go_to_page(self.last_page())

    def data_changed(self) -> None:
        """Notify subscribers after the store published a new generation."""
        self._notify()

    # --- derived state ---

    def snapshot(self) -> DashboardSnapshot:
        result_set = self.store.current
        histogram = compute_histogram(result_set)
        return DashboardSnapshot(
            generation=result_set.generation,
            histogram=histogram,
            filter_state=self._filter,
            view=compute_page(
                result_set, self._filter, self._current_page, self.page_size
            ),
            segments=compute_segments(histogram),
            page_size=self.page_size,
        )

    def pagination(self, radius: int = WIDE_RADIUS) -> PaginationLayout:
        view = self.snapshot().view
        return layout(view.current_page, view.page_count, radius)

    def _notify(self) -> None:
        if not self._subscribers:
            return
        snap = self.snapshot()
        for callback in list(self._subscribers):
            callback(snap)
