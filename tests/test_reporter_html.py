"""Tests for the HTML dashboard."""

from conftest import make_records
from cts_dashboard.core.dashboard import DashboardState
from cts_dashboard.core.store import ResultStore
from cts_dashboard.models.status import TestStatus
from cts_dashboard.reporter.html_report import (
    _build_pagination,
    _build_row,
    _build_status_badge,
    generate_html_report,
    render_html,
)
from cts_dashboard.core.pagination import layout


def _state(rows, page_size=100) -> DashboardState:
    store = ResultStore()
    store.publish(store.begin_load(), make_records(rows))
    return DashboardState(store, page_size=page_size)


class TestRows:
    def test_row_shows_duration_and_status(self):
        record = make_records([("dEQP.x", "Fail", "1.5")])[0]
        row = _build_row(record)
        assert "dEQP.x" in row
        assert "0:0:1.500" in row
        assert ">Fail<" in row
        assert TestStatus.FAIL.color in row

    def test_invalid_duration(self):
        record = make_records([("dEQP.x", "Pass", "n/a")])[0]
        assert "Invalid data" in _build_row(record)

    def test_unrecognized_badge(self):
        record = make_records([("dEQP.x", "NotSupported", "1")])[0]
        badge = _build_status_badge(record)
        assert "Unrecognized" in badge
        assert "#FFF" in badge

    def test_name_is_escaped(self):
        record = make_records([("<script>alert(1)</script>", "Pass", "1")])[0]
        row = _build_row(record)
        assert "<script>" not in row
        assert "&lt;script&gt;" in row


class TestPagination:
    def test_labels_are_one_based(self):
        bar = _build_pagination(layout(0, 4, 2), 0, 4)
        assert "Page 1 of 5" in bar
        assert '<button class="pagination-button" data-active="true">1</button>' in bar
        assert ">3</button>" in bar
        assert ">4</button>" not in bar

    def test_ellipses(self):
        bar = _build_pagination(layout(5, 10, 2), 5, 10)
        assert bar.count("<span>...</span>") == 2

    def test_disabled_buttons(self):
        bar = _build_pagination(layout(0, 0, 2), 0, 0)
        assert '<button class="pagination-button" disabled>First</button>' in bar
        assert '<button class="pagination-button" disabled>Last</button>' in bar


class TestRenderHtml:
    def test_stat_cards_and_totals(self, dashboard):
        page = render_html(dashboard.snapshot())
        assert "Total: 3 tests" in page
        assert "Filtered: 4 tests" in page
        assert "66.7% of total" in page
        for status in TestStatus:
            assert f"{status.value}</div>" in page

    def test_pie_chart_present(self, dashboard):
        page = render_html(dashboard.snapshot())
        assert page.count("<path ") == 2

    def test_no_pie_for_empty_dataset(self):
        page = render_html(_state([]).snapshot())
        assert "<svg" not in page
        assert "Total: 0 tests" in page
        assert "0.0% of total" in page

    def test_filter_summary(self, dashboard):
        dashboard.set_status_filter(TestStatus.PASS)
        dashboard.set_search("a")
        page = render_html(dashboard.snapshot())
        assert "Status: " + TestStatus.PASS.glyph + " Pass" in page
        assert "Search: a" in page
        assert "Filtered: 1 tests" in page

    def test_only_current_page_rows(self):
        rows = [(f"t{i}", "Pass", "1") for i in range(5)]
        state = _state(rows, page_size=2)
        state.go_to_page(1)
        page = render_html(state.snapshot())
        assert "<td>t2</td>" in page
        assert "<td>t3</td>" in page
        assert "<td>t1</td>" not in page
        assert "<td>t4</td>" not in page

    def test_generate_writes_file(self, dashboard, tmp_path):
        path = tmp_path / "dash.html"
        generate_html_report(dashboard.snapshot(), path)
        content = path.read_text(encoding="utf-8")
        assert content.startswith("<!DOCTYPE html>")
