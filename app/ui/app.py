"""
Streamlit movie search widget.

Run: streamlit run app/ui/app.py --server.port 8501
"""

import sys
from datetime import datetime
from pathlib import Path

import streamlit as st

# Ensure project root in path
sys.path.insert(0, str(Path(__file__).resolve().parents[2]))

from app.config import get_log_level, get_omdb_api_key
from app.core.search import SORT_LABELS, SortKey
from app.ui.components.movie_grid import inject_styles, paint_results
from app.ui.utils.session_state import get_search_session, init_session_state
from app.utils.logging_config import configure_ui_logging, get_logger

st.set_page_config(
    page_title="Movie Search",
    page_icon="🎬",
    layout="wide",
)

configure_ui_logging(get_log_level())
logger = get_logger(__name__)
init_session_state()
inject_styles()

session = get_search_session()

st.title("🎬 Movie Search")
st.markdown("Find movies by title and sort the results.")

if not get_omdb_api_key():
    st.warning("OMDB_API_KEY is not set; searches will report a network error.")

with st.form("searchForm"):
    query = st.text_input("Search", key="search_box", placeholder="e.g. Alien")
    submitted = st.form_submit_button("Search")

sort_slot = st.empty()
results_slot = st.empty()


def handle_sort_change() -> None:
    """Callback when the sort selection changes."""
    logger.debug("Sort changed to %r", st.session_state["sort_key"])
    get_search_session().change_sort(st.session_state["sort_key"])


if submitted:
    logger.info("Search submitted: %r", query)

# Repaint unless a submit already painted (blank submits paint nothing)
if not (submitted and session.submit(query, on_update=lambda s: paint_results(results_slot, s))):
    paint_results(results_slot, session)

if session.sort_visible:
    with sort_slot.container():
        st.selectbox(
            "Sort by",
            options=[""] + [k.value for k in SortKey],
            format_func=lambda v: SORT_LABELS[SortKey(v)] if v else "Default order",
            key="sort_key",
            on_change=handle_sort_change,
        )

st.markdown(
    f'<div class="footer">© <span id="year">{datetime.now().year}</span> Movie Search · data from OMDb</div>',
    unsafe_allow_html=True,
)
