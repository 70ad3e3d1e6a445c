#!/usr/bin/env python3
"""TUI themes and styling."""

from typing import Dict

from prompt_toolkit.styles import Style


THEMES: Dict[str, Dict[str, str]] = {
    "dark-olive": {
        "": "#d7dfe6",  # no forced background
        "header": "#5f9ee8 bold",
        "text": "#d7dfe6",
        "text.done": "#6d717a italic strike",
        "selected": "bg:#e5c07b #1d1f21",
        "editing": "bg:#5f9ee8 #1d1f21",
        "footer": "#97a0a9",
        "footer.key": "#ffb347 bold",
        "border": "#4b525a",
    },
    "dark-contrast": {
        "": "#e8eaec",
        "header": "#6fb3ff bold",
        "text": "#e8eaec",
        "text.done": "#8a9097 italic strike",
        "selected": "bg:#f0c674 #000000",
        "editing": "bg:#6fb3ff #000000",
        "footer": "#a7b0ba",
        "footer.key": "#ffb347 bold",
        "border": "#5a6169",
    },
}

DEFAULT_THEME = "dark-olive"


def get_theme_palette(theme: str) -> Dict[str, str]:
    """Get theme palette, falling back to default if theme not found."""
    base = THEMES.get(theme)
    if not base:
        base = THEMES[DEFAULT_THEME]
    return dict(base)


def build_style(theme: str) -> Style:
    """Build Style object from theme name."""
    palette = get_theme_palette(theme)
    return Style.from_dict(palette)
