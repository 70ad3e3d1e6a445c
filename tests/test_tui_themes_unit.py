#!/usr/bin/env python3
"""Unit tests for tui_themes module."""

from prompt_toolkit.styles import Style

from core.desktop.devtools.interface.tui_themes import (
    THEMES,
    DEFAULT_THEME,
    get_theme_palette,
    build_style,
)


class TestThemes:
    def test_themes_has_default_theme(self):
        assert DEFAULT_THEME in THEMES

    def test_themes_has_expected_themes(self):
        assert set(THEMES) == {"dark-olive", "dark-contrast"}

    def test_done_tasks_are_struck_through(self):
        for theme_name, theme_dict in THEMES.items():
            assert "strike" in theme_dict["text.done"], theme_name


class TestGetThemePalette:
    def test_get_theme_palette_existing_theme(self):
        palette = get_theme_palette("dark-contrast")
        assert palette == THEMES["dark-contrast"]

    def test_get_theme_palette_returns_copy(self):
        palette = get_theme_palette("dark-olive")
        palette["text"] = "#000000"
        assert THEMES["dark-olive"]["text"] != "#000000"

    def test_get_theme_palette_empty_name_falls_back(self):
        assert get_theme_palette("") == THEMES[DEFAULT_THEME]


class TestBuildStyle:
    def test_build_style_returns_style(self):
        style = build_style("dark-olive")
        assert isinstance(style, Style)

    def test_build_style_covers_palette_classes(self):
        style = build_style("dark-olive")
        class_names = {rule[0] for rule in style.style_rules}
        assert {"selected", "editing", "text.done"} <= class_names
