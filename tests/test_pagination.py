"""Tests for the pagination button layout."""

import pytest

from cts_dashboard.core.pagination import NARROW_RADIUS, WIDE_RADIUS, layout


class TestLayout:
    def test_single_page(self):
        pages = layout(0, 0, WIDE_RADIUS)
        assert pages.page_buttons == [0]
        assert not pages.show_left_ellipsis
        assert not pages.show_right_ellipsis
        assert pages.first_disabled and pages.prev_disabled
        assert pages.next_disabled and pages.last_disabled

    def test_start_of_many(self):
        pages = layout(0, 10, WIDE_RADIUS)
        assert pages.page_buttons == [0, 1, 2]
        assert not pages.show_left_ellipsis
        assert pages.show_right_ellipsis
        assert pages.first_disabled
        assert not pages.next_disabled

    def test_middle(self):
        pages = layout(5, 10, WIDE_RADIUS)
        assert pages.page_buttons == [3, 4, 5, 6, 7]
        assert pages.show_left_ellipsis
        assert pages.show_right_ellipsis
        assert not pages.prev_disabled
        assert not pages.last_disabled

    def test_end(self):
        pages = layout(10, 10, WIDE_RADIUS)
        assert pages.page_buttons == [8, 9, 10]
        assert pages.show_left_ellipsis
        assert not pages.show_right_ellipsis
        assert pages.next_disabled and pages.last_disabled

    def test_narrow(self):
        pages = layout(3, 10, NARROW_RADIUS)
        assert pages.page_buttons == [2, 3, 4]
        assert pages.show_left_ellipsis

    @pytest.mark.parametrize("current,left", [(1, False), (2, False), (3, True)])
    def test_left_ellipsis_boundary(self, current, left):
        assert layout(current, 10, 2).show_left_ellipsis is left

    @pytest.mark.parametrize("current,right", [(7, True), (8, False), (9, False)])
    def test_right_ellipsis_boundary(self, current, right):
        assert layout(current, 10, 2).show_right_ellipsis is right

    def test_page_count_smaller_than_radius(self):
        pages = layout(1, 1, WIDE_RADIUS)
        assert pages.page_buttons == [0, 1]
        assert not pages.show_right_ellipsis

    def test_current_beyond_page_count(self):
        pages = layout(4, 1, WIDE_RADIUS)
        assert pages.page_buttons == []
        assert pages.next_disabled
