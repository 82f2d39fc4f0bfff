"""
Pydantic schemas for API request/response validation.
"""

from app.api.models.movie import MovieItem, MovieList, SortRequest, RenderRequest

__all__ = [
    "MovieItem",
    "MovieList",
    "SortRequest",
    "RenderRequest",
]
