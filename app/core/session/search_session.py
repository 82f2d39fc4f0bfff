"""
Search session: the widget's event handling and its one piece of state.

A SearchSession owns the results container, the last successful result
set and the widget state. Surfaces (Streamlit page, tests) call submit()
and change_sort() and repaint from the container when notified.
"""

import logging
import threading
import time
from enum import Enum
from typing import Callable, List, Optional

from app.config import get_settle_delay, get_skeleton_count
from app.core.render.dom import Element, show_message
from app.core.render.grid import render_movies
from app.core.render.poster import PosterLoader
from app.core.render.skeleton import show_skeletons
from app.core.search.client import search_movies
from app.core.search.models import MovieSummary
from app.core.search.sorting import parse_sort_key, sort_movies

logger = logging.getLogger(__name__)

NETWORK_ERROR_MESSAGE = "Network error. Please try again."
NOT_FOUND_MESSAGE = "No movies found."

LAYOUT_SPACED = "main--spaced"
LAYOUT_COMPACT = "main--compact"

SearchFn = Callable[[str], Optional[List[MovieSummary]]]
UpdateFn = Callable[["SearchSession"], None]


class WidgetState(str, Enum):
    IDLE = "idle"
    LOADING = "loading"
    DISPLAYING = "displaying"
    MESSAGE = "message"


class SearchSession:
    """
    State machine behind the search widget.

    idle -> loading on a non-blank submit; loading -> displaying on results,
    loading -> message on error or no match; displaying -> displaying on a
    sort change. A newer submit supersedes an older one still in flight.

    Usage:
        session = SearchSession()
        session.submit("alien")
        session.change_sort("yearDesc")
        html = session.container.inner_html()
    """

    def __init__(
        self,
        search: SearchFn = search_movies,
        loader: Optional[PosterLoader] = None,
        settle_delay: Optional[float] = None,
        sleep: Callable[[float], None] = time.sleep,
        skeleton_count: Optional[int] = None,
    ):
        self._search = search
        self._loader = loader
        self._sleep = sleep
        self.settle_delay = get_settle_delay() if settle_delay is None else settle_delay
        self.skeleton_count = get_skeleton_count() if skeleton_count is None else skeleton_count

        self.container = Element("div", attrs={"id": "results"})
        self.results: List[MovieSummary] = []
        self.state = WidgetState.IDLE
        self.sort_visible = False
        self.layout = LAYOUT_SPACED

        self._generation = 0
        self._lock = threading.Lock()

    @property
    def loader(self) -> PosterLoader:
        if self._loader is None:
            self._loader = PosterLoader()
        return self._loader

    def _next_generation(self) -> int:
        with self._lock:
            self._generation += 1
            return self._generation

    def _is_current(self, generation: int) -> bool:
        with self._lock:
            return generation == self._generation

    def _notify(self, on_update: Optional[UpdateFn]) -> None:
        if on_update is not None:
            on_update(self)

    def submit(self, query: Optional[str], on_update: Optional[UpdateFn] = None) -> bool:
        """
        Handle a search form submission.

        Args:
            query: Raw text from the search box
            on_update: Called after each visible change

        Returns:
            False when nothing happened (blank query or superseded), else True
        """
        query = (query or "").strip()
        if not query:
            return False

        generation = self._next_generation()
        self.state = WidgetState.LOADING
        show_skeletons(self.container, self.skeleton_count)
        self._notify(on_update)

        movies = self._search(query)
        if not self._is_current(generation):
            logger.info("Search for %r superseded, dropping response", query)
            return False

        if movies is None:
            self._show_message(NETWORK_ERROR_MESSAGE, on_update)
            return True
        if not movies:
            self._show_message(NOT_FOUND_MESSAGE, on_update)
            return True

        self.layout = LAYOUT_COMPACT
        for card in self.container.select("skeleton__fade"):
            card.style["opacity"] = "0"
        self._notify(on_update)

        self._sleep(self.settle_delay)
        if not self._is_current(generation):
            logger.info("Search for %r superseded during settle delay", query)
            return False

        self.results = list(movies)
        self.sort_visible = True
        self.state = WidgetState.DISPLAYING
        self._render(self.results, on_update)
        logger.info("Displaying %d results for %r", len(self.results), query)
        self._notify(on_update)
        return True

    def change_sort(self, key, on_update: Optional[UpdateFn] = None) -> bool:
        """Re-sort the last result set; no-op for unknown keys or before any results."""
        sort_key = parse_sort_key(key)
        if sort_key is None or not self.results:
            return False
        self.state = WidgetState.DISPLAYING
        self._render(sort_movies(self.results, sort_key), on_update)
        self._notify(on_update)
        return True

    def _render(self, movies: List[MovieSummary], on_update: Optional[UpdateFn]) -> None:
        # Cards are painted before posters load; reconciliation repaints after
        render_movies(
            self.container,
            movies,
            self.loader,
            on_cards=lambda: self._notify(on_update),
        )

    def _show_message(self, msg: str, on_update: Optional[UpdateFn]) -> None:
        show_message(self.container, msg, "error")
        self.state = WidgetState.MESSAGE
        self._notify(on_update)
