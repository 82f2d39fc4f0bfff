"""
Search session state machine.
"""

from app.core.session.search_session import (
    SearchSession,
    WidgetState,
    NETWORK_ERROR_MESSAGE,
    NOT_FOUND_MESSAGE,
)

__all__ = ["SearchSession", "WidgetState", "NETWORK_ERROR_MESSAGE", "NOT_FOUND_MESSAGE"]
