"""
FastAPI dependency injection for the search client and poster loader.
"""

import logging

from app.core.render.poster import PosterLoader
from app.core.search.client import search_movies

logger = logging.getLogger(__name__)


def get_search_client():
    """Search callable for FastAPI Depends()."""
    return search_movies


# Singleton poster loader
_poster_loader: PosterLoader | None = None


def get_poster_loader() -> PosterLoader:
    """Get or create singleton PosterLoader."""
    global _poster_loader
    if _poster_loader is None:
        _poster_loader = PosterLoader()
        logger.info("Poster loader initialized (width=%d)", _poster_loader.width)
    return _poster_loader
