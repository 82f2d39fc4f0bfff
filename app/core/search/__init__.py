"""
OMDb search: result model, HTTP client and sort table.
"""

from app.core.search.models import MovieSummary, NO_POSTER
from app.core.search.client import search_movies
from app.core.search.sorting import SortKey, SORT_LABELS, parse_sort_key, sort_movies

__all__ = [
    "MovieSummary",
    "NO_POSTER",
    "search_movies",
    "SortKey",
    "SORT_LABELS",
    "parse_sort_key",
    "sort_movies",
]
