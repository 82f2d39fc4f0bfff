"""
Session state helpers for Streamlit.
"""

import streamlit as st

from app.core.session import SearchSession


def get_search_session() -> SearchSession:
    """Get the search session for this browser session."""
    return st.session_state["search_session"]


def init_session_state() -> None:
    """Initialize session state keys if not present."""
    if "search_session" not in st.session_state:
        st.session_state["search_session"] = SearchSession()
    if "sort_key" not in st.session_state:
        st.session_state["sort_key"] = ""
