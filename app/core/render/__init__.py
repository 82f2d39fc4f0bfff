"""
Rendering of the results container: element tree, skeletons, posters, card grid.
"""

from app.core.render.dom import Element, create_el, clear_results, show_message
from app.core.render.skeleton import show_skeletons
from app.core.render.poster import PosterLoader, create_no_poster, has_poster_url
from app.core.render.grid import render_movies, NO_MOVIES_TO_DISPLAY

__all__ = [
    "Element",
    "create_el",
    "clear_results",
    "show_message",
    "show_skeletons",
    "PosterLoader",
    "create_no_poster",
    "has_poster_url",
    "render_movies",
    "NO_MOVIES_TO_DISPLAY",
]
