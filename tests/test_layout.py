"""Pane geometry and scroll-window correction tests."""

from __future__ import annotations

import unittest

from dirpane.render import compute_layout, corrected_scroll_offset
from dirpane.render.layout import clamp_pane_ratio


class ComputeLayoutTests(unittest.TestCase):
    def test_even_split_with_divider(self) -> None:
        layout = compute_layout(80, 24)

        self.assertEqual((layout.header.row, layout.header.width, layout.header.height), (0, 80, 1))
        self.assertEqual((layout.main.row, layout.main.col, layout.main.width, layout.main.height), (1, 0, 40, 23))
        self.assertIsNotNone(layout.divider)
        self.assertEqual((layout.divider.col, layout.divider.width), (40, 1))
        self.assertEqual((layout.side.col, layout.side.width, layout.side.height), (41, 39, 23))
        self.assertEqual([pane.name for pane in layout.panes()], ["header", "main", "divider", "side"])

    def test_without_borders_side_starts_right_after_main(self) -> None:
        layout = compute_layout(80, 24, draw_borders=False)

        self.assertIsNone(layout.divider)
        self.assertEqual((layout.side.col, layout.side.width), (40, 40))
        self.assertEqual(len(layout.panes()), 3)

    def test_pane_ratio_controls_main_width(self) -> None:
        layout = compute_layout(100, 30, pane_ratio=0.6)

        self.assertEqual(layout.main.width, 60)
        self.assertEqual(layout.side.width, 39)

    def test_degenerate_sizes_keep_a_usable_main_pane(self) -> None:
        layout = compute_layout(1, 1)

        self.assertEqual(layout.main.width, 1)
        self.assertEqual(layout.main.height, 1)
        self.assertIsNone(layout.divider)
        self.assertEqual(layout.side.width, 0)

    def test_ratio_is_clamped(self) -> None:
        self.assertEqual(clamp_pane_ratio(0.0), 0.1)
        self.assertEqual(clamp_pane_ratio(5), 0.9)
        self.assertEqual(clamp_pane_ratio(0.3), 0.3)


class ScrollCorrectionTests(unittest.TestCase):
    def test_selection_inside_window_keeps_offset(self) -> None:
        self.assertEqual(corrected_scroll_offset(4, 2, 9), 2)

    def test_selection_above_window_scrolls_up_to_it(self) -> None:
        self.assertEqual(corrected_scroll_offset(1, 5, 9), 1)

    def test_selection_below_window_lands_on_last_row(self) -> None:
        self.assertEqual(corrected_scroll_offset(12, 0, 9), 4)

    def test_shrinking_terminal_keeps_selection_on_last_visible_row(self) -> None:
        tall = compute_layout(80, 10)
        self.assertEqual(corrected_scroll_offset(8, 0, tall.main.height), 0)

        short = compute_layout(80, 5)
        offset = corrected_scroll_offset(8, 0, short.main.height)

        self.assertEqual(offset, 8 - 5 + 2)
        self.assertEqual(offset + short.main.height - 1, 8)


if __name__ == "__main__":
    unittest.main()
