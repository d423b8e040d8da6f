"""JSON report output."""

from __future__ import annotations

import json
from pathlib import Path

from cts_dashboard.core.pagination import layout
from cts_dashboard.models.dashboard import DashboardSnapshot


def build_json_report(snapshot: DashboardSnapshot, radius: int = 2) -> dict:
    """Machine-readable view of one snapshot."""
    view = snapshot.view
    return {
        "generation": snapshot.generation,
        "total": snapshot.total,
        "histogram": {s.value: n for s, n in snapshot.histogram.counts.items()},
        "filter": snapshot.filter_state.model_dump(mode="json"),
        "page_size": snapshot.page_size,
        "filtered_count": view.filtered_count,
        "page_count": view.page_count,
        "current_page": view.current_page,
        "page_records": [
            {
                "name": r.name,
                "status": r.status_raw,
                "duration": r.duration_raw,
                "duration_seconds": r.duration_seconds,
                "recognized": r.status is not None,
            }
            for r in view.page_records
        ],
        "segments": [s.model_dump(mode="json") for s in snapshot.segments],
        "pagination": layout(view.current_page, view.page_count, radius).model_dump(),
    }


def generate_json_report(
    snapshot: DashboardSnapshot,
    output_path: Path,
    radius: int = 2,
) -> None:
    """Write a machine-readable JSON report."""
    with open(output_path, "w") as f:
        json.dump(build_json_report(snapshot, radius), f, indent=2, default=str)
