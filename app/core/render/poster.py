"""
Poster handling: the "no poster" placeholder and the image loader.

The loader plays the part of the browser's image pipeline: it fetches a
poster, decodes it with Pillow and reports the height it would render at
inside a card.
"""

import logging
import threading
from io import BytesIO
from typing import Dict, Optional

import requests
from PIL import Image, UnidentifiedImageError

from app.config import get_request_timeout
from app.core.render.dom import Element, create_el
from app.core.search.models import NO_POSTER

logger = logging.getLogger(__name__)

# Card width posters are scaled to (OMDb serves SX300 images)
POSTER_WIDTH = 300
# Intrinsic height of the placeholder before reconciliation
NO_POSTER_HEIGHT = 240


def has_poster_url(poster: Optional[str]) -> bool:
    """True when poster is a usable http(s) URL."""
    return bool(poster) and poster != NO_POSTER and poster.startswith("http")


def create_no_poster() -> Element:
    no_poster = create_el("div", "", "no-poster")
    no_poster.append(
        create_el("div", "\U0001F3AC", "film-icon"),
        create_el("div", "Poster Not Available"),
    )
    no_poster.offset_height = NO_POSTER_HEIGHT
    return no_poster


class PosterLoader:
    """
    Fetch posters and measure their rendered height.

    Heights are remembered per URL, so re-rendering the same result set does
    not fetch again. Failed loads are not remembered.

    Usage:
        loader = PosterLoader()
        height = loader.load("https://.../poster.jpg")  # None on failure
    """

    def __init__(
        self,
        session: Optional[requests.Session] = None,
        width: int = POSTER_WIDTH,
        timeout: Optional[float] = None,
    ):
        self.session = session or requests.Session()
        self.width = width
        self.timeout = timeout if timeout is not None else get_request_timeout()
        # Heights of posters already loaded, by URL
        self._heights: Dict[str, int] = {}
        self._lock = threading.Lock()

    def load(self, url: str) -> Optional[int]:
        """
        Load one poster.

        Returns:
            Height in px at self.width, or None if the image could not be
            fetched or decoded.
        """
        with self._lock:
            if url in self._heights:
                return self._heights[url]

        try:
            r = self.session.get(url, timeout=self.timeout)
            r.raise_for_status()
            with Image.open(BytesIO(r.content)) as img:
                w, h = img.size
        except (requests.RequestException, UnidentifiedImageError, OSError) as e:
            logger.debug("Poster load failed for %s: %s", url, e)
            return None
        if not w or not h:
            return None
        height = round(h * self.width / w)
        with self._lock:
            self._heights[url] = height
        return height
