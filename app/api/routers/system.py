"""
System API endpoints (health).
"""

from fastapi import APIRouter

from app import __version__
from app.config import get_omdb_api_key, get_omdb_base_url

router = APIRouter(prefix="/api", tags=["system"])


@router.get("/health")
def health_check():
    """Health check: service up and OMDb configuration present."""
    return {
        "status": "healthy",
        "version": __version__,
        "omdb_url": get_omdb_base_url(),
        "omdb_api_key_configured": bool(get_omdb_api_key()),
    }
