"""
Card grid renderer.

Builds one card per movie and, once every attempted poster has either
loaded or fallen back to a placeholder, gives all placeholders the height
of the tallest resolved poster so the grid lines up.
"""

import logging
from concurrent.futures import ThreadPoolExecutor, wait
from typing import Callable, List, Optional, Sequence

from app.config import get_poster_workers
from app.core.render.dom import Element, clear_results, create_el, show_message
from app.core.render.poster import PosterLoader, create_no_poster, has_poster_url
from app.core.search.models import MovieSummary

logger = logging.getLogger(__name__)

NO_MOVIES_TO_DISPLAY = "No movies to display."


def build_card(movie: MovieSummary) -> Element:
    """Card with poster (or placeholder), title and year, in that order."""
    card = create_el("div", "", "movie-card fade__in")
    if has_poster_url(movie.poster):
        img = Element(
            "img",
            attrs={
                "src": movie.poster,
                "alt": f"{movie.title} poster",
                "loading": "lazy",
            },
        )
        card.append(img)
    else:
        card.append(create_no_poster())
    card.append(create_el("h3", movie.title), create_el("p", movie.year))
    return card


def resolve_posters(
    images: Sequence[Element],
    loader: PosterLoader,
    max_workers: Optional[int] = None,
) -> List[Element]:
    """
    Load every image and wait for all of them.

    Each image resolves to itself (with offset_height set) or, when loading
    fails, to a fresh placeholder that replaces it in the tree.

    Returns:
        Resolved elements, in the order of images
    """
    if not images:
        return []

    workers = min(len(images), max_workers or get_poster_workers())
    with ThreadPoolExecutor(max_workers=workers) as pool:
        futures = [pool.submit(loader.load, img.attrs["src"]) for img in images]
        wait(futures)

    resolved = []
    for img, future in zip(images, futures):
        height = future.result()
        if height is None:
            fallback = create_no_poster()
            img.replace_with(fallback)
            resolved.append(fallback)
        else:
            img.offset_height = height
            resolved.append(img)
    return resolved


def reconcile_heights(container: Element, resolved: Sequence[Element]) -> int:
    """Apply the tallest resolved height to every placeholder in container."""
    max_height = max((el.offset_height for el in resolved), default=0)
    for div in container.select("no-poster"):
        div.style["height"] = f"{max_height}px"
    return max_height


def render_movies(
    container: Element,
    movies: Sequence[MovieSummary],
    loader: Optional[PosterLoader] = None,
    on_cards: Optional[Callable[[], None]] = None,
) -> List[Element]:
    """
    Rebuild container from movies.

    Args:
        container: Results container, cleared first
        movies: Ordered result set
        loader: Poster loader (default: PosterLoader())
        on_cards: Called once the cards are in place, before posters load

    Returns:
        Poster elements resolved during reconciliation
    """
    clear_results(container)
    if not movies:
        show_message(container, NO_MOVIES_TO_DISPLAY, "info")
        return []

    images = []
    for movie in movies:
        card = build_card(movie)
        if card.children[0].tag == "img":
            images.append(card.children[0])
        container.append(card)

    if not images:
        return []

    if on_cards is not None:
        on_cards()
    resolved = resolve_posters(images, loader or PosterLoader())
    max_height = reconcile_heights(container, resolved)
    logger.debug(
        "Rendered %d cards, %d posters resolved, placeholder height %dpx",
        len(movies), len(resolved), max_height,
    )
    return resolved
