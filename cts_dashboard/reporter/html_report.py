"""HTML dashboard generator: stat cards, status pie chart and the results table."""

from __future__ import annotations

import html
import logging
from pathlib import Path

from cts_dashboard.core.chart import arc_path
from cts_dashboard.core.pagination import layout
from cts_dashboard.duration_utils import display_duration
from cts_dashboard.models.dashboard import DashboardSnapshot, PaginationLayout
from cts_dashboard.models.status import (
    UNRECOGNIZED_COLOR,
    UNRECOGNIZED_LABEL,
    TestStatus,
)
from cts_dashboard.models.test_result import TestRecord

logger = logging.getLogger(__name__)


def _build_stat_card(snapshot: DashboardSnapshot, status: TestStatus) -> str:
    count = snapshot.histogram.counts.get(status, 0)
    pct = snapshot.histogram.percentage(status)
    return f'''
    <div class="stat-card">
      <div class="stat-title"><span class="dot" style="background-color: {status.color};"></span>{status.value}</div>
      <div class="value" style="color: {status.color};">{count}</div>
      <div class="label">{pct:.1f}% of total</div>
    </div>'''


def _build_pie_chart(snapshot: DashboardSnapshot) -> str:
    """SVG pie chart, or an empty string when there is nothing to draw."""
    if not snapshot.segments:
        return ""
    paths = []
    for seg in snapshot.segments:
        paths.append(
            f'<path d="{arc_path(seg)}" fill="{seg.color}" opacity="0.9" '
            f'stroke="rgba(255, 255, 255, 0.1)" stroke-width="1">'
            f'<title>{seg.status.value}: {seg.percentage:.1f}%</title></path>'
        )
    return f'<svg class="pie" viewBox="0 0 200 200">{"".join(paths)}</svg>'


def _build_status_badge(record: TestRecord) -> str:
    status = record.status
    color = status.color if status else UNRECOGNIZED_COLOR
    name = status.value if status else UNRECOGNIZED_LABEL
    return (
        f'<span class="badge" style="background-color: {color}0F; color: {color}; '
        f'border-color: {color};">{name}</span>'
    )


def _build_row(record: TestRecord) -> str:
    return f'''
      <tr>
        <td>{html.escape(record.name)}</td>
        <td class="duration">{display_duration(record.duration_seconds)}</td>
        <td class="status">{_build_status_badge(record)}</td>
      </tr>'''


def _build_pagination(pages: PaginationLayout, current_page: int, page_count: int) -> str:
    """Render the pagination bar; page numbers are shown 1-based."""
    def button(label: str, disabled: bool, active: bool = False) -> str:
        attrs = ' disabled' if disabled else ''
        attrs += ' data-active="true"' if active else ''
        return f'<button class="pagination-button"{attrs}>{label}</button>'

    parts = [
        button("First", pages.first_disabled),
        button("Prev", pages.prev_disabled),
    ]
    if pages.show_left_ellipsis:
        parts.append("<span>...</span>")
    for i in pages.page_buttons:
        parts.append(button(str(i + 1), False, active=i == current_page))
    if pages.show_right_ellipsis:
        parts.append("<span>...</span>")
    parts.append(button("Next", pages.next_disabled))
    parts.append(button("Last", pages.last_disabled))
    return (
        f'<p class="page-label">Page {current_page + 1} of {page_count + 1}</p>'
        f'<div class="pagination">{"".join(parts)}</div>'
    )


def _build_filter_summary(snapshot: DashboardSnapshot) -> str:
    fs = snapshot.filter_state
    status = (
        f"{fs.status_filter.glyph} {fs.status_filter.value}"
        if fs.status_filter else "&#128260; None"
    )
    search = html.escape(fs.settled_search) if fs.settled_search else "&mdash;"
    return (
        f'<div class="filters"><span>Status: {status}</span>'
        f'<span>Search: {search}</span></div>'
    )


def render_html(snapshot: DashboardSnapshot, radius: int = 2) -> str:
    """Render the dashboard for one snapshot as a self-contained HTML page."""
    view = snapshot.view
    stat_cards = "".join(_build_stat_card(snapshot, s) for s in TestStatus)
    rows = "".join(_build_row(r) for r in view.page_records)
    pagination = _build_pagination(
        layout(view.current_page, view.page_count, radius),
        view.current_page,
        view.page_count,
    )

    return f'''<!DOCTYPE html>
<html lang="en">
<head>
<meta charset="UTF-8">
<meta name="viewport" content="width=device-width, initial-scale=1.0">
<title>CTS Results &mdash; generation {snapshot.generation}</title>
<style>
  :root {{ --bg: #020617; --card: #090f21; --border: #1e293b; --text: #e2e8f0; --muted: #94a3b8; --accent: #38bdf8; --pass: #22c55e; }}
  * {{ margin: 0; padding: 0; box-sizing: border-box; }}
  body {{ font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', Roboto, sans-serif; background: var(--bg); color: var(--text); line-height: 1.6; padding: 1.5rem; }}
  .container {{ max-width: 1400px; margin: 0 auto; display: flex; flex-direction: column; gap: 1rem; }}
  .pills {{ display: flex; gap: 1rem; }}
  .pill {{ border: 1px solid; border-radius: 9999px; padding: 0.15rem 0.6rem; font-size: 0.75rem; color: var(--muted); }}
  .pill.total {{ border-color: var(--accent); background: rgba(56, 189, 248, 0.15); }}
  .pill.filtered {{ border-color: var(--pass); background: rgba(34, 197, 94, 0.15); }}
  /* Stat cards */
  .summary {{ display: grid; grid-template-columns: repeat(auto-fit, minmax(160px, 1fr)); gap: 1rem; }}
  .stat-card {{ background: var(--card); border: 1px solid var(--border); border-radius: 16px; padding: 1rem; }}
  .stat-title {{ display: flex; align-items: center; gap: 0.5rem; font-size: 0.85rem; color: #d1d5db; }}
  .dot {{ display: inline-block; width: 1rem; height: 1rem; border-radius: 9999px; }}
  .stat-card .value {{ font-size: 1.5rem; font-weight: 700; }}
  .stat-card .label {{ font-size: 0.75rem; color: var(--muted); }}
  .pie {{ display: block; margin: 0 auto; max-width: 200px; height: auto; }}
  /* Filters and pagination */
  .toolbar {{ display: flex; flex-wrap: wrap; justify-content: space-between; align-items: center; gap: 1rem; color: var(--muted); font-size: 0.85rem; }}
  .filters {{ display: flex; gap: 1rem; }}
  .pagination {{ display: flex; gap: 0.5rem; align-items: center; }}
  .pagination-button {{ padding: 0.2rem 0.6rem; border-radius: 6px; border: 1px solid var(--border); background: var(--card); color: var(--text); }}
  .pagination-button[disabled] {{ opacity: 0.4; }}
  .pagination-button[data-active="true"] {{ border-color: var(--accent); color: var(--accent); }}
  /* Table */
  table {{ width: 100%; border-collapse: collapse; background: #111827; border: 1px solid #334155; border-radius: 8px; overflow: hidden; color: var(--muted); }}
  th {{ text-align: left; text-transform: uppercase; white-space: nowrap; padding: 0.5rem 0.75rem; border-bottom: 1px solid #334155; }}
  td {{ padding: 0.5rem 0.75rem; font-size: 0.85rem; }}
  td.duration, td.status, th.status {{ text-align: center; }}
  .badge {{ display: inline-block; border: 1px solid; border-radius: 9999px; padding: 0.2rem 0.75rem; font-size: 0.75rem; }}
</style>
</head>
<body>
<div class="container">
  <div class="pills">
    <span class="pill total">Total: {snapshot.total} tests</span>
    <span class="pill filtered">Filtered: {view.filtered_count} tests</span>
  </div>

  <div class="summary">
    {stat_cards}
  </div>

  {_build_pie_chart(snapshot)}

  <div class="toolbar">
    {_build_filter_summary(snapshot)}
    {pagination}
  </div>

  <table>
    <tr><th>Test name</th><th>Duration (H:M:S.MS)</th><th class="status">Status</th></tr>
    {rows}
  </table>
</div>
</body>
</html>'''


def generate_html_report(
    snapshot: DashboardSnapshot,
    output_path: Path,
    radius: int = 2,
) -> None:
    """Write the HTML dashboard for ``snapshot`` to ``output_path``."""
    report_html = render_html(snapshot, radius)
    with open(output_path, "w", encoding="utf-8") as f:
        f.write(report_html)
    logger.debug("Wrote %d bytes of HTML to %s", len(report_html), output_path)
