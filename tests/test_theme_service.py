"""Tester för ThemeManager och temamodellen."""

import pytest

from models.theme import (
    MANUAL_STORAGE_KEY,
    SYSTEM_STORAGE_KEY,
    THEME_STORAGE_KEY,
    Theme,
    ThemeState,
    resolve_initial_theme,
)
from services.theme_service import ThemeManager, theme_from_client_hint
from tests.conftest import BrokenStore, MemoryStore


class TestInitialTheme:
    def test_stored_theme_wins_over_system(self):
        store = MemoryStore({THEME_STORAGE_KEY: "dark"})
        manager = ThemeManager(store, system_theme=Theme.LIGHT)
        assert manager.current_theme is Theme.DARK

    def test_falls_back_to_system_theme(self):
        manager = ThemeManager(MemoryStore(), system_theme=Theme.DARK)
        assert manager.current_theme is Theme.DARK

    def test_corrupt_stored_value_falls_back_to_system(self):
        store = MemoryStore({THEME_STORAGE_KEY: "purple"})
        manager = ThemeManager(store, system_theme=Theme.DARK)
        assert manager.current_theme is Theme.DARK
        assert manager.get_stored_theme() is None

    def test_unavailable_storage_falls_back_to_system(self):
        manager = ThemeManager(BrokenStore(), system_theme=Theme.DARK)
        assert manager.current_theme is Theme.DARK
        assert manager.has_manual_preference() is False

    @pytest.mark.parametrize(
        "stored, system, expected",
        [(None, Theme.LIGHT, Theme.LIGHT), ("dark", Theme.LIGHT, Theme.DARK), (" LIGHT ", Theme.DARK, Theme.LIGHT)],
    )
    def test_resolve_initial_theme(self, stored, system, expected):
        assert resolve_initial_theme(stored, system) is expected


class TestToggle:
    @pytest.mark.parametrize("start", [Theme.LIGHT, Theme.DARK])
    def test_toggle_mirrors_state_and_persists(self, start):
        store = MemoryStore({THEME_STORAGE_KEY: start.value})
        manager = ThemeManager(store)

        new_theme = manager.toggle()
        state = manager.state()

        assert new_theme is start.flipped()
        assert state.theme is new_theme
        assert state.body_class == f"theme-{new_theme.value}"
        assert store.values[THEME_STORAGE_KEY] == new_theme.value
        assert store.values[MANUAL_STORAGE_KEY] == "true"
        assert state.manual is True

    def test_double_toggle_returns_to_start(self):
        manager = ThemeManager(MemoryStore(), system_theme=Theme.LIGHT)
        manager.toggle()
        manager.toggle()
        assert manager.current_theme is Theme.LIGHT

    def test_toggle_with_unavailable_storage_still_switches(self):
        manager = ThemeManager(BrokenStore(), system_theme=Theme.LIGHT)
        assert manager.toggle() is Theme.DARK
        assert manager.state().theme is Theme.DARK

    def test_state_carries_toggle_animation(self):
        assert ThemeManager(MemoryStore()).state().toggle_animation_ms == 150


class TestSystemChange:
    def test_manual_override_ignores_system_change(self):
        manager = ThemeManager(MemoryStore(), system_theme=Theme.LIGHT)
        manager.toggle()

        changed = manager.on_system_change(prefers_dark=False)
        changed_again = manager.on_system_change(prefers_dark=True)

        assert changed is False
        assert changed_again is False
        assert manager.current_theme is Theme.DARK

    def test_without_override_follows_system(self):
        manager = ThemeManager(MemoryStore(), system_theme=Theme.LIGHT)

        changed = manager.on_system_change(prefers_dark=True)

        assert changed is True
        assert manager.current_theme is Theme.DARK
        assert manager.state().theme is Theme.DARK

    def test_reset_restores_system_following(self):
        store = MemoryStore()
        manager = ThemeManager(store, system_theme=Theme.LIGHT)
        manager.toggle()

        assert manager.reset() is Theme.LIGHT
        assert store.values == {}
        manager.on_system_change(prefers_dark=True)
        assert manager.current_theme is Theme.DARK


class TestThemeState:
    def test_surfaces_for_dark(self):
        state = ThemeState.for_theme(Theme.DARK)
        assert state.meta_theme_color == "#0f1419"
        assert state.icon_class == "fas fa-sun"
        assert state.body_class == "theme-dark"

    def test_surfaces_for_light(self):
        state = ThemeState.for_theme(Theme.LIGHT)
        assert state.meta_theme_color == "#ffffff"
        assert state.icon_class == "fas fa-moon"

    @pytest.mark.parametrize(
        "header, expected",
        [("dark", Theme.DARK), ('"dark"', Theme.DARK), ("light", Theme.LIGHT), (None, Theme.LIGHT), ("bogus", Theme.LIGHT)],
    )
    def test_client_hint(self, header, expected):
        assert theme_from_client_hint(header) is expected


class TestRememberedSystemTheme:
    def test_reported_system_theme_used_by_next_manager(self):
        store = MemoryStore()
        ThemeManager(store).on_system_change(prefers_dark=True)

        manager = ThemeManager(store)

        assert manager.current_theme is Theme.DARK
        assert manager.toggle() is Theme.LIGHT

    def test_client_hint_wins_over_remembered_theme(self):
        store = MemoryStore({SYSTEM_STORAGE_KEY: "dark"})
        assert ThemeManager(store, system_theme=Theme.LIGHT).current_theme is Theme.LIGHT

    def test_system_report_is_not_a_manual_choice(self):
        store = MemoryStore()
        manager = ThemeManager(store)
        manager.on_system_change(prefers_dark=True)
        assert store.values == {SYSTEM_STORAGE_KEY: "dark"}
        assert manager.has_manual_preference() is False
