"""
OMDb search client.

One GET per query; the response is normalized to a list of MovieSummary
records, or to None when the request or the payload could not be used.
"""

import logging
from typing import List, Optional

import requests
from pydantic import ValidationError

from app.config import get_omdb_api_key, get_omdb_base_url, get_request_timeout
from app.core.search.models import MovieSummary

logger = logging.getLogger(__name__)


def build_search_params(query: str, api_key: Optional[str] = None) -> dict:
    """Query parameters for an OMDb title search restricted to movies."""
    return {
        "s": query,
        "type": "movie",
        "apikey": get_omdb_api_key() if api_key is None else api_key,
    }


def search_movies(
    query: str,
    session: Optional[requests.Session] = None,
) -> Optional[List[MovieSummary]]:
    """
    Search OMDb for movies matching a free-text query.

    Args:
        query: Search term, sent verbatim
        session: Optional requests session (defaults to module-level requests)

    Returns:
        List of MovieSummary (empty when OMDb reports no match), or None
        on transport failure, non-success status or malformed payload.
    """
    http = session or requests
    try:
        resp = http.get(
            get_omdb_base_url(),
            params=build_search_params(query),
            timeout=get_request_timeout(),
        )
        resp.raise_for_status()
        data = resp.json()
        if not isinstance(data, dict):
            raise ValueError(f"unexpected payload type {type(data).__name__}")
        if data.get("Response") == "False":
            logger.info("No results for %r: %s", query, data.get("Error", "unknown"))
            return []
        hits = data.get("Search") or []
        return [MovieSummary.model_validate(hit) for hit in hits]
    except (requests.RequestException, ValueError, ValidationError) as e:
        logger.error("Fetch error: %s", e)
        return None
