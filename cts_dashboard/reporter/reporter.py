"""Report generation orchestration."""

from __future__ import annotations

import logging
from pathlib import Path

from cts_dashboard.models.config import DashboardConfig
from cts_dashboard.models.dashboard import DashboardSnapshot

from .html_report import generate_html_report
from .json_report import generate_json_report

logger = logging.getLogger(__name__)


class Reporter:
    """Writes dashboard snapshots in the configured formats."""

    def __init__(self, config: DashboardConfig):
        self.config = config

    def generate_reports(
        self,
        snapshot: DashboardSnapshot,
        output_dir: Path | None = None,
    ) -> dict[str, str]:
        """Generate all configured report formats. Returns format -> file path."""
        out_dir = output_dir or Path(self.config.report_output_dir)
        out_dir.mkdir(parents=True, exist_ok=True)
        generated = {}
        logger.debug("Report output directory: %s", out_dir)

        radius = self.config.wide_pagination_radius
        stem = f"dashboard_gen{snapshot.generation}_page{snapshot.view.current_page + 1}"

        if "html" in self.config.report_formats:
            path = out_dir / f"{stem}.html"
            logger.debug("Generating HTML report...")
            generate_html_report(snapshot, path, radius)
            generated["html"] = str(path)
            logger.info("HTML report: %s", path)

        if "json" in self.config.report_formats:
            path = out_dir / f"{stem}.json"
            logger.debug("Generating JSON report...")
            generate_json_report(snapshot, path, radius)
            generated["json"] = str(path)
            logger.info("JSON report: %s", path)

        return generated
