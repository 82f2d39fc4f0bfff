"""
Movie API endpoints.
"""

from fastapi import APIRouter, Depends, Query, HTTPException
from fastapi.responses import HTMLResponse

from app.api.dependencies import get_poster_loader, get_search_client
from app.api.models.movie import MovieItem, MovieList, SortRequest, RenderRequest
from app.core.render import Element, render_movies
from app.core.render.poster import PosterLoader
from app.core.search import MovieSummary, parse_sort_key, sort_movies
from app.core.session import NETWORK_ERROR_MESSAGE, NOT_FOUND_MESSAGE

router = APIRouter(prefix="/api/movies", tags=["movies"])


def _to_summaries(items: list[MovieItem]) -> list[MovieSummary]:
    return [MovieSummary(title=m.title, year=m.year, poster=m.poster) for m in items]


def _to_list(movies: list[MovieSummary], message: str | None = None) -> MovieList:
    return MovieList(
        movies=[MovieItem.model_validate(m) for m in movies],
        total=len(movies),
        message=message,
    )


@router.get("/search", response_model=MovieList)
def search_titles(
    s: str = Query(..., description="Search term"),
    search_client=Depends(get_search_client),
):
    """Search OMDb for movies by title."""
    query = s.strip()
    if not query:
        raise HTTPException(status_code=400, detail="Search term must not be empty")
    movies = search_client(query)
    if movies is None:
        raise HTTPException(status_code=502, detail=NETWORK_ERROR_MESSAGE)
    if not movies:
        return _to_list([], message=NOT_FOUND_MESSAGE)
    return _to_list(movies)


@router.post("/sort", response_model=MovieList)
def sort_results(body: SortRequest):
    """Re-sort a result set. Unknown sort keys leave the order unchanged."""
    movies = _to_summaries(body.movies)
    key = parse_sort_key(body.sort_key)
    if key is not None:
        movies = sort_movies(movies, key)
    return _to_list(movies)


@router.post("/render", response_class=HTMLResponse)
def render_results(body: RenderRequest, loader: PosterLoader = Depends(get_poster_loader)):
    """Render a result set as an HTML card grid."""
    container = Element("div", attrs={"id": "results"})
    render_movies(container, _to_summaries(body.movies), loader)
    return container.to_html()
