"""Navigering och scrollbeteende.

Samma regler körs i webbläsaren vid varje scroll (static/js/portfolio.js);
här används de för den första renderingen och i tester.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Sequence, Tuple

SCROLL_ACTIVATION_MARGIN = 200
HEADER_SCROLL_THRESHOLD = 100

NAV_SECTIONS: List[Tuple[str, str]] = [
    ("hero", "Home"),
    ("about", "About"),
    ("skills", "Skills"),
    ("experience", "Experience"),
    ("projects", "Projects"),
    ("contact", "Contact"),
]


@dataclass(frozen=True)
class NavLink:
    section_id: str
    label: str
    active: bool

    @property
    def href(self) -> str:
        return f"#{self.section_id}"


@dataclass(frozen=True)
class HeaderStyle:
    background: str
    box_shadow: str
    scrolled: bool


def active_section(
    scroll_y: float,
    sections: Sequence[Tuple[str, float]],
    margin: float = SCROLL_ACTIVATION_MARGIN,
) -> str:
    """Id för den sista sektion vars topp (minus marginal) passerats, annars tom sträng."""
    current = ""
    for section_id, top in sections:
        if scroll_y >= top - margin:
            current = section_id
    return current


def nav_links(current: str) -> List[NavLink]:
    return [NavLink(section_id, label, section_id == current) for section_id, label in NAV_SECTIONS]


def header_style(scroll_y: float, threshold: float = HEADER_SCROLL_THRESHOLD) -> HeaderStyle:
    if scroll_y > threshold:
        return HeaderStyle("rgba(var(--bg-color-rgb), 0.95)", "0 2px 20px var(--shadow)", True)
    return HeaderStyle("rgba(var(--bg-color-rgb), 0.9)", "none", False)


def initial_navigation() -> Tuple[List[NavLink], HeaderStyle]:
    """Navigering för sidan innan någon scroll skett (hero överst)."""
    sections = [(section_id, 0.0 if section_id == "hero" else float("inf")) for section_id, _ in NAV_SECTIONS]
    return nav_links(active_section(0, sections)), header_style(0)


__all__ = [
    "HEADER_SCROLL_THRESHOLD",
    "HeaderStyle",
    "NAV_SECTIONS",
    "NavLink",
    "SCROLL_ACTIVATION_MARGIN",
    "active_section",
    "header_style",
    "initial_navigation",
    "nav_links",
]
