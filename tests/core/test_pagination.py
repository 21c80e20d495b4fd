"""
Unit tests for pagination arithmetic.
"""

import pytest

from app.core.errors import ValidationError
from app.core.pagination import (
    page_range,
    paginate,
    parse_page,
    total_pages,
    upstream_page,
)


class TestTotalPages:
    """Tests for total_pages."""

    @pytest.mark.parametrize(
        "total_items, page_size, expected",
        [(0, 10, 0), (1, 10, 1), (10, 10, 1), (11, 10, 2), (12, 10, 2), (25, 5, 5)],
    )
    def test_ceil(self, total_items, page_size, expected):
        assert total_pages(total_items, page_size) == expected

    def test_rejects_non_positive_page_size(self):
        with pytest.raises(ValueError):
            total_pages(5, 0)


class TestPaginate:
    """Tests for collection slicing."""

    def test_twelve_items(self):
        items = list(range(12))

        first = paginate(items, 1, 10)
        second = paginate(items, 2, 10)
        third = paginate(items, 3, 10)

        assert first.items == list(range(10))
        assert second.items == [10, 11]
        assert third.items == []
        assert third.count == 0
        assert first.total_pages == second.total_pages == third.total_pages == 2
        assert third.current_page == 3

    def test_empty_collection(self):
        page = paginate([], 1)

        assert page.items == []
        assert page.total_items == 0
        assert page.total_pages == 0

    def test_default_page_size(self):
        assert paginate(list(range(30)), 1).count == 10


class TestUpstreamPage:
    """Tests for wrapping a provider page."""

    def test_uses_reported_total(self):
        page = upstream_page(["a", "b"], "42", 5)

        assert page.count == 2
        assert page.total_items == 42
        assert page.total_pages == 5
        assert page.current_page == 5

    @pytest.mark.parametrize("reported", [None, "", "N/A", "-3"])
    def test_unparseable_total_is_zero(self, reported):
        page = upstream_page([], reported, 1)

        assert page.total_items == 0
        assert page.total_pages == 0


class TestParsePage:
    """Tests for page parameter validation."""

    @pytest.mark.parametrize("raw, expected", [(None, 1), ("", 1), ("1", 1), ("7", 7), (" 3 ", 3), (2, 2)])
    def test_valid(self, raw, expected):
        assert parse_page(raw) == expected

    @pytest.mark.parametrize("raw", ["0", "-1", "abc", "1.5", 0, -4, True])
    def test_invalid(self, raw):
        with pytest.raises(ValidationError, match="positive number"):
            parse_page(raw)


class TestPageRange:
    """Tests for the visible page window."""

    def test_no_pages(self):
        assert page_range(1, 0) == []

    def test_fewer_pages_than_window(self):
        assert page_range(2, 3) == [1, 2, 3]

    def test_window_starts_at_first_page(self):
        assert page_range(1, 20) == [1, 2, 3, 4, 5]
        assert page_range(3, 20) == [1, 2, 3, 4, 5]

    def test_window_centred(self):
        assert page_range(10, 20) == [8, 9, 10, 11, 12]

    def test_window_clamped_at_last_page(self):
        assert page_range(20, 20) == [16, 17, 18, 19, 20]
        assert page_range(19, 20) == [16, 17, 18, 19, 20]
