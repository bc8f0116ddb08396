from __future__ import annotations

from enum import Enum
from typing import Dict, Optional

from pydantic import BaseModel, Field

THEME_STORAGE_KEY = "portfolio-theme"
MANUAL_STORAGE_KEY = "portfolio-theme-manual"
SYSTEM_STORAGE_KEY = "portfolio-theme-system"
TOGGLE_ANIMATION_MS = 150


class Theme(str, Enum):
    """De två tillgängliga temana."""

    LIGHT = "light"
    DARK = "dark"

    @classmethod
    def parse(cls, raw: Optional[str]) -> Optional["Theme"]:
        """Tolka ett lagrat värde, eller None om det saknas eller är trasigt."""
        if not raw:
            return None
        try:
            return cls(raw.strip().lower())
        except ValueError:
            return None

    def flipped(self) -> "Theme":
        return Theme.DARK if self is Theme.LIGHT else Theme.LIGHT


_META_COLORS: Dict[Theme, str] = {Theme.LIGHT: "#ffffff", Theme.DARK: "#0f1419"}
_ICONS: Dict[Theme, str] = {Theme.LIGHT: "fas fa-moon", Theme.DARK: "fas fa-sun"}


def meta_theme_color(theme: Theme) -> str:
    return _META_COLORS.get(theme, _META_COLORS[Theme.LIGHT])


def theme_icon(theme: Theme) -> str:
    return _ICONS.get(theme, _ICONS[Theme.LIGHT])


def resolve_initial_theme(stored: Optional[str], system: Theme) -> Theme:
    """Lagrat tema om det finns, annars systemets."""
    return Theme.parse(stored) or system


class ThemeState(BaseModel):
    """Ögonblicksbild av alla ytor som speglar aktuellt tema."""

    theme: Theme = Field(..., description="Aktuellt tema")
    body_class: str = Field(..., description="CSS-klass på body")
    meta_theme_color: str = Field(..., description="Innehåll i meta theme-color")
    icon_class: str = Field(..., description="Ikonklass för tema-knappen")
    manual: bool = Field(False, description="Om besökaren valt tema själv")
    toggle_animation_ms: int = Field(TOGGLE_ANIMATION_MS, description="Längd på knappens skalanimation")

    @classmethod
    def for_theme(cls, theme: Theme, manual: bool = False) -> "ThemeState":
        return cls(
            theme=theme,
            body_class=f"theme-{theme.value}",
            meta_theme_color=meta_theme_color(theme),
            icon_class=theme_icon(theme),
            manual=manual,
        )


class SystemPreference(BaseModel):
    prefers_dark: bool = Field(..., description="Om operativsystemet föredrar mörkt läge")


__all__ = [
    "MANUAL_STORAGE_KEY",
    "SYSTEM_STORAGE_KEY",
    "THEME_STORAGE_KEY",
    "TOGGLE_ANIMATION_MS",
    "SystemPreference",
    "Theme",
    "ThemeState",
    "meta_theme_color",
    "resolve_initial_theme",
    "theme_icon",
]
