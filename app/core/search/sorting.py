"""
Sort table for search results.

Every SortKey maps to a function returning a new ordered copy of the
result set; nothing here touches the network or mutates its input.
"""

import re
import unicodedata
from enum import Enum
from typing import Callable, Dict, List, Optional, Sequence

from app.core.search.models import MovieSummary

_YEAR_RE = re.compile(r"^\s*(\d{4})")


class SortKey(str, Enum):
    """Orderings offered by the sort selector."""

    TITLE_ASC = "titleAsc"
    TITLE_DESC = "titleDesc"
    YEAR_ASC = "yearAsc"
    YEAR_DESC = "yearDesc"


SORT_LABELS = {
    SortKey.TITLE_ASC: "Title (A-Z)",
    SortKey.TITLE_DESC: "Title (Z-A)",
    SortKey.YEAR_ASC: "Year (oldest first)",
    SortKey.YEAR_DESC: "Year (newest first)",
}


def normalize_title(text: str) -> str:
    """Strip accents and case-fold, for collation."""
    if not text:
        return ""
    return "".join(
        c for c in unicodedata.normalize("NFD", text.casefold())
        if unicodedata.category(c) != "Mn"
    )


def parse_year(year: str) -> Optional[int]:
    """Leading four-digit year ("2001–2003" -> 2001), None if there is none."""
    m = _YEAR_RE.match(year or "")
    return int(m.group(1)) if m else None


def _by_title(descending: bool) -> Callable[[Sequence[MovieSummary]], List[MovieSummary]]:
    def sorter(movies):
        return sorted(
            movies,
            key=lambda m: (normalize_title(m.title), m.title),
            reverse=descending,
        )
    return sorter


def _by_year(descending: bool) -> Callable[[Sequence[MovieSummary]], List[MovieSummary]]:
    # Unparsable years go last in both directions
    def sorter(movies):
        dated = [m for m in movies if parse_year(m.year) is not None]
        undated = [m for m in movies if parse_year(m.year) is None]
        return sorted(dated, key=lambda m: parse_year(m.year), reverse=descending) + undated
    return sorter


SORTERS: Dict[SortKey, Callable[[Sequence[MovieSummary]], List[MovieSummary]]] = {
    SortKey.TITLE_ASC: _by_title(descending=False),
    SortKey.TITLE_DESC: _by_title(descending=True),
    SortKey.YEAR_ASC: _by_year(descending=False),
    SortKey.YEAR_DESC: _by_year(descending=True),
}


def parse_sort_key(value) -> Optional[SortKey]:
    """Map a raw selector value to a SortKey, None when unknown or empty."""
    if isinstance(value, SortKey):
        return value
    try:
        return SortKey(value)
    except ValueError:
        return None


def sort_movies(movies: Sequence[MovieSummary], key: SortKey) -> List[MovieSummary]:
    """Return a new list of movies ordered by key."""
    return SORTERS[key](movies)
