"""
Placeholder cards shown while a search is in flight.
"""

from app.core.render.dom import Element, clear_results, create_el

DEFAULT_SKELETON_COUNT = 6


def show_skeletons(container: Element, count: int = DEFAULT_SKELETON_COUNT) -> None:
    clear_results(container)
    for _ in range(count):
        card = create_el("div", "", "movie-card skeleton__fade")
        card.append(
            create_el("div", "", "skeleton-card"),
            create_el("div", "", "skeleton-text"),
            create_el("div", "", "skeleton-text"),
        )
        container.append(card)
