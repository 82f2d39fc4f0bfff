"""
Minimal element tree used to build the results container.

Element mirrors the handful of DOM operations the widget needs
(append, replace in place, class lookup, inline style) and serializes
to an HTML fragment.
"""

from html import escape
from typing import Dict, Iterator, List, Optional

VOID_TAGS = {"img", "br", "hr", "input"}


class Element:
    """A node in the results tree."""

    def __init__(
        self,
        tag: str,
        text: str = "",
        class_name: str = "",
        attrs: Optional[Dict[str, str]] = None,
    ):
        self.tag = tag
        self.text = text
        self.class_name = class_name
        self.attrs: Dict[str, str] = dict(attrs or {})
        self.style: Dict[str, str] = {}
        self.children: List["Element"] = []
        self.parent: Optional["Element"] = None
        # Rendered height in px, as a browser would report offsetHeight
        self.offset_height: int = 0

    def __repr__(self) -> str:
        return f"<Element {self.tag} class={self.class_name!r} children={len(self.children)}>"

    @property
    def classes(self) -> List[str]:
        return self.class_name.split()

    def has_class(self, name: str) -> bool:
        return name in self.classes

    def append(self, *children: "Element") -> None:
        for child in children:
            if child.parent is not None:
                child.parent.children.remove(child)
            child.parent = self
            self.children.append(child)

    def clear(self) -> None:
        for child in self.children:
            child.parent = None
        self.children = []

    def replace_with(self, other: "Element") -> None:
        """Swap this node for other at the same position in its parent."""
        if self.parent is None:
            return
        parent = self.parent
        idx = parent.children.index(self)
        if other.parent is not None:
            other.parent.children.remove(other)
        parent.children[idx] = other
        other.parent = parent
        self.parent = None

    def iter(self) -> Iterator["Element"]:
        """Depth-first walk over descendants (not including self)."""
        for child in self.children:
            yield child
            yield from child.iter()

    def select(self, class_name: str) -> List["Element"]:
        """All descendants carrying class_name, in document order."""
        return [el for el in self.iter() if el.has_class(class_name)]

    def find_all(self, tag: str) -> List["Element"]:
        return [el for el in self.iter() if el.tag == tag]

    def to_html(self) -> str:
        parts = [self.tag]
        if self.class_name:
            parts.append(f'class="{escape(self.class_name)}"')
        for name, value in self.attrs.items():
            parts.append(f'{name}="{escape(str(value))}"')
        if self.style:
            css = "; ".join(f"{k}: {v}" for k, v in self.style.items())
            parts.append(f'style="{escape(css)}"')
        opening = "<" + " ".join(parts) + ">"
        if self.tag in VOID_TAGS:
            return opening
        inner = escape(self.text) + "".join(c.to_html() for c in self.children)
        return f"{opening}{inner}</{self.tag}>"

    def inner_html(self) -> str:
        return "".join(c.to_html() for c in self.children)


def create_el(tag: str, text: str = "", class_name: str = "") -> Element:
    return Element(tag, text=text, class_name=class_name)


def clear_results(container: Element) -> None:
    container.clear()


def show_message(container: Element, msg: str, kind: str = "info") -> Element:
    """Replace the container contents with a single styled message."""
    clear_results(container)
    p = create_el("p", msg, f"msg msg--{kind}")
    container.append(p)
    return p
