from __future__ import annotations

import unittest

from dirpane.ansi import clip_text, display_width, fit_text, sanitize_text
from dirpane.ui_theme import DEFAULT_THEME, PLAIN_THEME, available_theme_names, normalize_theme_name, resolve_theme
from dirpane.render.styles import Style


class TextWidthTests(unittest.TestCase):
    def test_display_width_counts_wide_chars_and_ignores_escapes(self) -> None:
        self.assertEqual(display_width("abc"), 3)
        self.assertEqual(display_width("漢字"), 4)
        self.assertEqual(display_width("\033[1;34mdir\033[0m"), 3)

    def test_clip_drops_wide_char_that_would_straddle_edge(self) -> None:
        self.assertEqual(clip_text("a漢b", 2), "a")
        self.assertEqual(clip_text("abc", 0), "")

    def test_fit_text_sanitizes_and_pads(self) -> None:
        self.assertEqual(sanitize_text("a\x1bb\nc"), "a?b?c")
        self.assertEqual(fit_text("ab", 5, pad=True), "ab   ")
        self.assertEqual(fit_text("abcdef", 3, pad=True), "abc")


class ThemeTests(unittest.TestCase):
    def test_unknown_theme_falls_back_to_default(self) -> None:
        self.assertEqual(normalize_theme_name("nope"), "default")
        self.assertEqual(normalize_theme_name(" OCEAN "), "ocean")
        self.assertIs(resolve_theme(None), DEFAULT_THEME)
        self.assertIn("ocean", available_theme_names())

    def test_no_color_keeps_reverse_video_selection(self) -> None:
        theme = resolve_theme("ocean", no_color=True)

        self.assertIs(theme, PLAIN_THEME)
        self.assertEqual(theme.sgr(Style.SELECTED), "\033[7m")
        self.assertEqual(theme.sgr(Style.DIRECTORY), "")

    def test_every_style_has_a_theme_entry(self) -> None:
        for style in Style:
            with self.subTest(style=style):
                self.assertIsInstance(DEFAULT_THEME.sgr(style), str)


if __name__ == "__main__":
    unittest.main()
