"""
Unit tests for IMDb id comparison and year parsing.
"""

import pytest

from app.core.identity import UNKNOWN_YEAR, normalize_imdb_id, parse_year, same_imdb_id


class TestImdbId:
    """Tests for case-insensitive identity."""

    def test_normalize(self):
        assert normalize_imdb_id(" TT0133093 ") == "tt0133093"

    def test_same(self):
        assert same_imdb_id("tt1", "TT1")
        assert not same_imdb_id("tt1", "tt2")


class TestParseYear:
    """Tests for upstream year normalization."""

    @pytest.mark.parametrize(
        "raw, expected",
        [
            ("1999", 1999),
            ("1999-2000", 1999),
            ("2019–", 2019),
            ("2005–2013", 2005),
        ],
    )
    def test_leading_year(self, raw, expected):
        assert parse_year(raw) == expected

    @pytest.mark.parametrize("raw", ["", "N/A", "99", "abcd", None])
    def test_unparseable_is_sentinel(self, raw):
        assert parse_year(raw) == UNKNOWN_YEAR == 0
