"""
Unit tests for the sort table.
"""

import pytest

from app.core.search.models import MovieSummary
from app.core.search.sorting import (
    SORTERS,
    SortKey,
    normalize_title,
    parse_sort_key,
    parse_year,
    sort_movies,
)


def movie(title, year, poster="N/A"):
    return MovieSummary(title=title, year=year, poster=poster)


@pytest.fixture
def pair():
    """The two-movie result set used throughout."""
    return [movie("A", "1999"), movie("B", "2001", "https://x/y.jpg")]


def titles(movies):
    return [m.title for m in movies]


class TestSortTable:
    """Test each sort key."""

    def test_every_key_has_sorter(self):
        assert set(SORTERS) == set(SortKey)

    def test_year_desc(self, pair):
        assert titles(sort_movies(pair, SortKey.YEAR_DESC)) == ["B", "A"]

    def test_year_asc(self, pair):
        assert titles(sort_movies(list(reversed(pair)), SortKey.YEAR_ASC)) == ["A", "B"]

    def test_title_desc(self, pair):
        assert titles(sort_movies(pair, SortKey.TITLE_DESC)) == ["B", "A"]

    def test_title_asc(self, pair):
        assert titles(sort_movies(pair, SortKey.TITLE_ASC)) == ["A", "B"]

    def test_returns_new_list(self, pair):
        """Input is never mutated."""
        original = list(pair)
        result = sort_movies(pair, SortKey.YEAR_DESC)
        assert result is not pair
        assert pair == original

    def test_title_ignores_case_and_accents(self):
        movies = [movie("zed", "2000"), movie("Élan", "2000"), movie("apple", "2000")]
        assert titles(sort_movies(movies, SortKey.TITLE_ASC)) == ["apple", "Élan", "zed"]

    def test_unparsable_years_last_both_directions(self):
        """Years without a leading number sort last, in original order."""
        movies = [movie("X", "N/A"), movie("A", "1990"), movie("Y", ""), movie("B", "2010")]
        assert titles(sort_movies(movies, SortKey.YEAR_ASC)) == ["A", "B", "X", "Y"]
        assert titles(sort_movies(movies, SortKey.YEAR_DESC)) == ["B", "A", "X", "Y"]

    def test_year_range_uses_start(self):
        movies = [movie("Series", "2001–2003"), movie("Film", "2002")]
        assert titles(sort_movies(movies, SortKey.YEAR_ASC)) == ["Series", "Film"]


class TestHelpers:
    """Test parsing helpers."""

    @pytest.mark.parametrize("value,expected", [
        ("titleAsc", SortKey.TITLE_ASC),
        ("yearDesc", SortKey.YEAR_DESC),
        (SortKey.YEAR_ASC, SortKey.YEAR_ASC),
        ("", None),
        (None, None),
        ("ratingDesc", None),
    ])
    def test_parse_sort_key(self, value, expected):
        assert parse_sort_key(value) == expected

    @pytest.mark.parametrize("value,expected", [
        ("1999", 1999),
        ("2001–2003", 2001),
        ("N/A", None),
        ("", None),
    ])
    def test_parse_year(self, value, expected):
        assert parse_year(value) == expected

    def test_normalize_title(self):
        assert normalize_title("Amélie") == "amelie"
