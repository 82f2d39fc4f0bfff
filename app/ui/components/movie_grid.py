"""
Results grid component: stylesheet and HTML painting of a SearchSession.
"""

import streamlit as st

from app.core.session import SearchSession

GRID_CSS = """
<style>
.main { transition: padding 0.4s ease; }
.main--spaced { padding-top: 4rem; }
.main--compact { padding-top: 0.5rem; }
#results {
    display: grid;
    grid-template-columns: repeat(auto-fill, minmax(180px, 1fr));
    gap: 1.2rem;
}
.movie-card {
    background: #1e1e1e;
    border-radius: 10px;
    padding: 0.6rem;
    text-align: center;
    transition: opacity 0.6s ease;
}
.movie-card img { width: 100%; border-radius: 6px; }
.movie-card h3 { font-size: 1rem; margin: 0.5rem 0 0.2rem; color: #eeeeee; }
.movie-card p { font-size: 0.85rem; color: #aaaaaa; margin: 0; }
.fade__in { animation: fadeIn 0.5s ease both; }
@keyframes fadeIn { from { opacity: 0; } to { opacity: 1; } }
.skeleton-card { height: 240px; border-radius: 6px; background: #2c2c2c; }
.skeleton-text { height: 0.9rem; margin-top: 0.5rem; border-radius: 4px; background: #2c2c2c; }
.no-poster {
    min-height: 240px;
    display: flex;
    flex-direction: column;
    align-items: center;
    justify-content: center;
    border-radius: 6px;
    background: #2a2a2a;
    color: #999999;
}
.film-icon { font-size: 2.5rem; }
.msg { grid-column: 1 / -1; text-align: center; font-size: 1.05rem; }
.msg--info { color: #bbbbbb; }
.msg--error { color: #e57373; }
.footer { text-align: center; font-size: 0.8rem; color: #888888; margin-top: 2rem; }
</style>
"""


def inject_styles() -> None:
    st.markdown(GRID_CSS, unsafe_allow_html=True)


def results_html(session: SearchSession) -> str:
    """HTML for the results area, wrapped in the current layout class."""
    return f'<div class="main {session.layout}">{session.container.to_html()}</div>'


def paint_results(slot, session: SearchSession) -> None:
    """
    Write the session's results container into a Streamlit placeholder.

    Args:
        slot: Placeholder from st.empty()
        session: Search session to paint
    """
    slot.markdown(results_html(session), unsafe_allow_html=True)
