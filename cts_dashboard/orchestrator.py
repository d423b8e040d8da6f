"""Dashboard orchestrator: coordinates load, state updates and reporting."""

from __future__ import annotations

import asyncio
import logging
import time
from pathlib import Path
from typing import Optional

from cts_dashboard.core.dashboard import DashboardState
from cts_dashboard.core.debounce import SearchDebouncer
from cts_dashboard.core.store import ResultStore
from cts_dashboard.loader.results_loader import LoadError, load_results
from cts_dashboard.models.config import DashboardConfig
from cts_dashboard.models.dashboard import DashboardSnapshot
from cts_dashboard.models.status import TestStatus
from cts_dashboard.reporter.reporter import Reporter

logger = logging.getLogger(__name__)


class Orchestrator:
    """Owns the store and dashboard state for one configured results source."""

    def __init__(self, config: DashboardConfig):
        self.config = config
        self.store = ResultStore()
        self.state = DashboardState(self.store, page_size=config.page_size)
        self.debouncer = SearchDebouncer(
            self.state.set_search, interval=config.search_debounce_seconds
        )

    async def load(self, source: str | None = None) -> bool:
        """Load the dataset into a new generation. Returns False on failure.

        On failure the previously loaded generation (possibly empty) stays
        current and dashboards keep rendering from it.
        """
        source = source or self.config.results_source
        token = self.store.begin_load()
        logger.info("Loading CTS results from %s", source)
        start = time.time()
        try:
            records = await load_results(source, self.config.fetch_timeout_seconds)
        except LoadError as e:
            logger.error("Failed to load CTS results: %s", e)
            self.store.fail(token, e)
            return False
        except BaseException as e:
            self.store.fail(token, e)
            raise
        if self.store.publish(token, records):
            logger.info(
                "Successfully loaded %d CTS results in %.1fs",
                len(records), time.time() - start,
            )
            self.state.data_changed()
        return True

    def run_load(self, source: str | None = None) -> bool:
        return asyncio.run(self.load(source))

    def apply(
        self,
        status: Optional[TestStatus] = None,
        search: Optional[str] = None,
        page: int = 0,
    ) -> DashboardSnapshot:
        """Apply a filter, a settled search and a page, then snapshot."""
        self.state.set_status_filter(status)
        self.state.set_search(search)
        self.state.go_to_page(page)
        return self.state.snapshot()

    def generate_reports(self, output_dir: Path | None = None) -> dict[str, str]:
        reporter = Reporter(self.config)
        return reporter.generate_reports(
            self.state.snapshot(),
            output_dir=output_dir or Path(self.config.report_output_dir),
        )
