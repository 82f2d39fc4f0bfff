"""
Configuration loaded from environment or defaults.
"""

import os


def get_omdb_base_url() -> str:
    """Get OMDb endpoint URL from env or default."""
    return os.getenv("OMDB_API_URL", "https://www.omdbapi.com/").strip()


def get_omdb_api_key() -> str:
    """Get OMDb API key from env (empty when unset)."""
    return os.getenv("OMDB_API_KEY", "").strip()


def get_request_timeout() -> float:
    """Get timeout in seconds for outbound HTTP requests."""
    return float(os.getenv("OMDB_TIMEOUT", "10"))


def get_settle_delay() -> float:
    """Get the post-fetch settle delay in seconds."""
    return int(os.getenv("SETTLE_DELAY_MS", "700")) / 1000


def get_skeleton_count() -> int:
    """Get number of skeleton cards shown while loading."""
    return int(os.getenv("SKELETON_COUNT", "6"))


def get_poster_workers() -> int:
    """Get max number of concurrent poster loads."""
    return max(1, int(os.getenv("POSTER_WORKERS", "6")))


def get_log_level() -> str:
    """Get log level from env or default."""
    return os.getenv("LOG_LEVEL", "INFO").upper()


def get_api_host() -> str:
    """Get API host for binding."""
    return os.getenv("API_HOST", "0.0.0.0")


def get_api_port() -> int:
    """Get API port."""
    return int(os.getenv("API_PORT", "8000"))
