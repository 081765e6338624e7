"""
Unit tests for opentakeoff.utils.pagination
"""
import pytest

from opentakeoff.utils.pagination import build_link_header, build_page, clamp_limit


class TestClampLimit:
    def test_default_applied(self, mock_settings):
        assert clamp_limit(None) == 50

    @pytest.mark.parametrize("requested,expected", [(0, 1), (-3, 1), (20, 20), (500, 100)])
    def test_bounds(self, mock_settings, requested, expected):
        assert clamp_limit(requested) == expected


class TestBuildPage:
    def test_extra_item_signals_more(self):
        page = build_page(["a", "b", "c"], 2, key=lambda item: item)
        assert page.items == ["a", "b"]
        assert page.count == 2
        assert page.has_more is True
        assert page.next_cursor == "b"

    def test_last_page(self):
        page = build_page(["a"], 2, key=lambda item: item)
        assert page.has_more is False
        assert page.next_cursor is None

    def test_empty(self):
        page = build_page([], 10, key=lambda item: item)
        assert page.count == 0
        assert page.next_cursor is None


class TestBuildLinkHeader:
    def test_next_link(self):
        link = build_link_header("/api/v1/projects", {"limit": 10}, "abc123")
        assert link == '</api/v1/projects?limit=10&cursor=abc123>; rel="next"'

    def test_drops_none_and_stale_cursor(self):
        link = build_link_header("/p", {"limit": None, "cursor": "old"}, "new")
        assert link == '</p?cursor=new>; rel="next"'

    def test_no_cursor_no_header(self):
        assert build_link_header("/p", {"limit": 10}, None) is None
