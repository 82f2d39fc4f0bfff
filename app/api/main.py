"""
FastAPI application entry point for the Movie Search API.

Run: uvicorn app.api.main:app --host 0.0.0.0 --port 8000
"""

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app import __version__
from app.config import get_api_host, get_api_port, get_omdb_api_key
from app.api.routers import movies, system

logger = logging.getLogger(__name__)

app = FastAPI(
    title="Movie Search API",
    description="Search OMDb for movies, sort result sets and render them as cards",
    version=__version__,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(movies.router)
app.include_router(system.router)

if not get_omdb_api_key():
    logger.warning("OMDB_API_KEY is not set; searches will fail with a network error")


@app.get("/")
def root():
    """Root endpoint."""
    return {
        "message": "Movie Search API",
        "docs": "/docs",
        "health": "/api/health",
    }


if __name__ == "__main__":
    import uvicorn
    from app.utils.logging_config import configure_api_logging

    configure_api_logging()
    uvicorn.run(app, host=get_api_host(), port=get_api_port())
