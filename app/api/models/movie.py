"""
Pydantic schemas for Movie API.
"""

from pydantic import BaseModel


class MovieItem(BaseModel):
    """A single search hit as exchanged with API clients."""

    title: str
    year: str
    poster: str = "N/A"

    class Config:
        from_attributes = True


class MovieList(BaseModel):
    """Response model for list of movies with total count."""

    movies: list[MovieItem]
    total: int
    message: str | None = None


class SortRequest(BaseModel):
    """Request body for re-sorting a result set."""

    movies: list[MovieItem]
    sort_key: str


class RenderRequest(BaseModel):
    """Request body for rendering a result set as cards."""

    movies: list[MovieItem]
