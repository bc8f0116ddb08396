from __future__ import annotations

import logging
from typing import Optional

from models.theme import (
    MANUAL_STORAGE_KEY,
    SYSTEM_STORAGE_KEY,
    THEME_STORAGE_KEY,
    Theme,
    ThemeState,
    resolve_initial_theme,
)
from services.storage import KeyValueStore, SQLiteStore

logger = logging.getLogger(__name__)

CLIENT_HINT_HEADER = "Sec-CH-Prefers-Color-Scheme"


def theme_from_client_hint(header_value: Optional[str]) -> Theme:
    """Tolka webbläsarens client hint. Allt utom "dark" räknas som ljust."""
    if header_value and header_value.strip().strip('"').lower() == Theme.DARK.value:
        return Theme.DARK
    return Theme.LIGHT


class ThemeManager:
    """Håller en besökares tema och synkar det mot lagringen.

    Ytorna (data-theme, body-klass, meta theme-color, ikon) härleds alltid
    ur ``current_theme`` via ``state()``. Ett manuellt val går före
    systemets inställning tills lagringen rensas.
    """

    def __init__(self, storage: KeyValueStore, system_theme: Optional[Theme] = None) -> None:
        self.storage = storage
        # Utan client hint används det schema webbläsaren senast rapporterade
        self.system_theme = system_theme or Theme.parse(self._read(SYSTEM_STORAGE_KEY)) or Theme.LIGHT
        self.current_theme = resolve_initial_theme(self._read(THEME_STORAGE_KEY), self.system_theme)

    def get_stored_theme(self) -> Optional[Theme]:
        return Theme.parse(self._read(THEME_STORAGE_KEY))

    def has_manual_preference(self) -> bool:
        return self._read(MANUAL_STORAGE_KEY) == "true"

    def get_system_theme(self) -> Theme:
        return self.system_theme

    def apply_theme(self, theme: Theme) -> None:
        self.current_theme = theme

    def toggle(self) -> Theme:
        """Växla tema, spara valet och markera det som manuellt."""
        new_theme = self.current_theme.flipped()
        self.apply_theme(new_theme)
        self.store_theme(new_theme)
        logger.debug("Theme toggled to %s", new_theme.value)
        return new_theme

    def on_system_change(self, prefers_dark: bool) -> bool:
        """Följ systemets nya inställning om inget manuellt val finns. Returnerar True vid ändring."""
        self.remember_system_theme(Theme.DARK if prefers_dark else Theme.LIGHT)
        if self.has_manual_preference():
            return False
        changed = self.current_theme is not self.system_theme
        self.apply_theme(self.system_theme)
        return changed

    def remember_system_theme(self, theme: Theme) -> None:
        """Spara systemets schema (inte ett manuellt val) till nästa anrop utan client hint."""
        self.system_theme = theme
        self.storage.set(SYSTEM_STORAGE_KEY, theme.value)

    def reset(self, system_theme: Optional[Theme] = None) -> Theme:
        """Glöm det manuella valet och gå tillbaka till systemets tema."""
        if system_theme is not None:
            self.remember_system_theme(system_theme)
        for key in (THEME_STORAGE_KEY, MANUAL_STORAGE_KEY):
            self.storage.remove(key)
        self.apply_theme(self.system_theme)
        return self.current_theme

    def store_theme(self, theme: Theme) -> bool:
        theme_result = self.storage.set(THEME_STORAGE_KEY, theme.value)
        manual_result = self.storage.set(MANUAL_STORAGE_KEY, "true")
        if not (theme_result.ok and manual_result.ok):
            # Fel loggas redan av lagringen; temat gäller ändå för sidan
            logger.warning("Could not save theme preference")
            return False
        return True

    def state(self) -> ThemeState:
        return ThemeState.for_theme(self.current_theme, manual=self.has_manual_preference())

    def _read(self, key: str) -> Optional[str]:
        result = self.storage.get(key)
        return result.value if result.ok else None


def theme_manager_for(client_id: str, client_hint: Optional[str] = None) -> ThemeManager:
    """Bygg en ThemeManager mot SQLite-lagringen för given besökare."""
    system_theme = theme_from_client_hint(client_hint) if client_hint else None
    return ThemeManager(SQLiteStore(client_id), system_theme)


__all__ = ["CLIENT_HINT_HEADER", "ThemeManager", "theme_from_client_hint", "theme_manager_for"]
