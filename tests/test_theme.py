import unittest

from core.desktop.devtools.interface.tui_app import TodoTUI
from core.desktop.devtools.interface.tui_themes import DEFAULT_THEME, THEMES


REQUIRED_KEYS = {
    "",
    "header",
    "text",
    "text.done",
    "selected",
    "editing",
    "footer",
    "footer.key",
    "border",
}


class ThemeTests(unittest.TestCase):
    def test_all_themes_have_required_keys(self):
        for name in THEMES.keys():
            palette = TodoTUI.get_theme_palette(name)
            missing = REQUIRED_KEYS - set(palette.keys())
            self.assertFalse(missing, f"theme {name} missing {missing}")

    def test_unknown_theme_falls_back_to_default(self):
        palette_default = TodoTUI.get_theme_palette(DEFAULT_THEME)
        palette_unknown = TodoTUI.get_theme_palette("non-existent")
        self.assertEqual(palette_unknown, palette_default)
        self.assertIsNot(palette_unknown, palette_default)

    def test_style_builds_without_errors(self):
        style = TodoTUI.build_style(DEFAULT_THEME)
        self.assertTrue(getattr(style, "style_rules", None))


if __name__ == "__main__":
    unittest.main()
