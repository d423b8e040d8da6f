"""Pytest configuration and shared fixtures."""

from pathlib import Path
from typing import Callable

import pytest

from cts_dashboard.core.dashboard import DashboardState
from cts_dashboard.core.store import ResultStore
from cts_dashboard.models.config import DashboardConfig
from cts_dashboard.models.test_result import ResultSet, TestRecord


# ============================================================================
# Record Fixtures
# ============================================================================


def make_records(rows: list[tuple[str, str, str]]) -> tuple[TestRecord, ...]:
    """Build records from (name, status, duration) tuples."""
    return tuple(TestRecord.from_row(row) for row in rows)


@pytest.fixture
def sample_rows() -> list[tuple[str, str, str]]:
    """The four-record example: two passes, a fail and an unknown status."""
    return [
        ("a", "Pass", "1.0"),
        ("b", "Fail", "2.0"),
        ("c", "Pass", "3.0"),
        ("d", "Bogus", "4.0"),
    ]


@pytest.fixture
def sample_result_set(sample_rows) -> ResultSet:
    return ResultSet(generation=1, records=make_records(sample_rows))


@pytest.fixture
def large_result_set() -> ResultSet:
    """250 records cycling through every status plus one unknown kind."""
    kinds = ["Pass", "Fail", "Warn", "Skip", "Crash", "Timeout", "Flaky"]
    rows = [
        (f"dEQP-GLES.case_{i:03d}", kinds[i % len(kinds)], f"{i * 0.5}")
        for i in range(250)
    ]
    return ResultSet(generation=1, records=make_records(rows))


@pytest.fixture
def loaded_store(sample_result_set) -> ResultStore:
    store = ResultStore()
    token = store.begin_load()
    store.publish(token, sample_result_set.records)
    return store


@pytest.fixture
def dashboard(loaded_store) -> DashboardState:
    return DashboardState(loaded_store, page_size=100)


# ============================================================================
# Timer Fixtures
# ============================================================================


class ManualHandle:
    def __init__(self, callback: Callable[[], None]):
        self.callback = callback
        self.cancelled = False

    def cancel(self) -> None:
        self.cancelled = True


class ManualTimer:
    """Timer whose callbacks run only when the test fires them."""

    def __init__(self):
        self.handles: list[ManualHandle] = []
        self.delays: list[float] = []

    def arm(self, delay: float, callback: Callable[[], None]) -> ManualHandle:
        handle = ManualHandle(callback)
        self.handles.append(handle)
        self.delays.append(delay)
        return handle

    def fire_all(self) -> None:
        """Fire every handle that has not been cancelled, like a real clock would."""
        for handle in list(self.handles):
            if not handle.cancelled:
                handle.callback()

    def fire_including_cancelled(self) -> None:
        """Fire every handle, simulating a timer that raced its cancellation."""
        for handle in list(self.handles):
            handle.callback()


@pytest.fixture
def manual_timer() -> ManualTimer:
    return ManualTimer()


# ============================================================================
# Configuration Fixtures
# ============================================================================


CSV_TEXT = (
    "name,status,duration\n"
    "dEQP-VK.api.smoke.triangle,Pass,0.25\n"
    "dEQP-VK.api.smoke.create_sampler,Fail,1.5\n"
    "dEQP-VK.memory.allocation.basic,Pass,61.002\n"
    "dEQP-VK.wsi.display.get_props,NotSupported,abc\n"
)


@pytest.fixture
def csv_file(tmp_path: Path) -> Path:
    path = tmp_path / "results.csv"
    path.write_text(CSV_TEXT, encoding="utf-8")
    return path


@pytest.fixture
def dashboard_config(csv_file: Path, tmp_path: Path) -> DashboardConfig:
    return DashboardConfig(
        results_source=str(csv_file),
        page_size=2,
        search_debounce_seconds=0.01,
        report_output_dir=str(tmp_path / "reports"),
    )


@pytest.fixture
def temp_config_file(dashboard_config: DashboardConfig, tmp_path: Path) -> Path:
    config_file = tmp_path / "dashboard-config.json"
    dashboard_config.save(config_file)
    return config_file
