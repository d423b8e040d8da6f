"""Status histogram over a result set."""

from __future__ import annotations

from cts_dashboard.models.dashboard import Histogram
from cts_dashboard.models.status import TestStatus
from cts_dashboard.models.test_result import ResultSet


def compute_histogram(result_set: ResultSet) -> Histogram:
    """Count records per status in one pass.

    Records whose status is not a known TestStatus are left out; they are
    expected (new status kinds) and not an error.
    """
    counts = {s: 0 for s in TestStatus}
    for record in result_set.records:
        status = TestStatus.parse(record.status_raw)
        if status is not None:
            counts[status] += 1
    return Histogram(counts=counts)
