"""Browser app wiring tests.

Drives ``BrowserApp`` through key tokens against a temporary tree with a
recording surface and launcher, without a terminal.
"""

from __future__ import annotations

import os
import tempfile
import unittest
from pathlib import Path

from dirpane.errors import PermissionDenied
from dirpane.listing import OsFilesystem
from dirpane.navigation import TabSet
from dirpane.render.layout import PaneGeometry
from dirpane.render.styles import Style
from dirpane.runtime.app import STATUS_MESSAGE_SECONDS, BrowserApp
from dirpane.runtime.config import BrowserConfig
from dirpane.runtime.launcher import LaunchMode


class _LockedFilesystem(OsFilesystem):
    def check_directory(self, path: Path) -> None:
        raise PermissionDenied(path)


class _RecordingSurface:
    def __init__(self) -> None:
        self.written: list[tuple[str, str, Style]] = []
        self.refreshed: list[str] = []

    def clear_pane(self, pane: PaneGeometry) -> None:
        pass

    def move(self, pane: PaneGeometry, row: int, col: int) -> None:
        pass

    def write(self, pane: PaneGeometry, text: str, style: Style) -> None:
        self.written.append((pane.name, text, style))

    def refresh(self, pane: PaneGeometry) -> None:
        self.refreshed.append(pane.name)


class _RecordingLauncher:
    def __init__(self, error: str | None = None) -> None:
        self.error = error
        self.calls: list[tuple[str, list[str], LaunchMode, dict]] = []

    def __call__(self, program, args, mode, **kwargs):
        self.calls.append((program, args, mode, kwargs))
        return self.error


class _FakeTerminal:
    def __init__(self) -> None:
        self.events: list[str] = []

    def disable_tui_mode(self) -> None:
        self.events.append("disable")

    def enable_tui_mode(self) -> None:
        self.events.append("enable")


class BrowserAppTestCase(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.root = OsFilesystem().canonicalize(Path(self._tmp.name))
        (self.root / "docs").mkdir()
        (self.root / "docs" / "guide.md").write_text("g", encoding="utf-8")
        (self.root / "src").mkdir()
        (self.root / "notes.txt").write_text("n", encoding="utf-8")
        (self.root / ".env").write_text("e", encoding="utf-8")
        self.now = 100.0
        self.surface = _RecordingSurface()
        self.launcher = _RecordingLauncher()

    def tearDown(self) -> None:
        self._tmp.cleanup()

    def make_app(self, config: BrowserConfig | None = None, terminal=None) -> BrowserApp:
        config = config if config is not None else BrowserConfig(opener="opener", editor="editor")
        tabs = TabSet(self.root, view_count=config.view_count, change_directory=lambda _path: None)
        return BrowserApp(
            tabs,
            self.surface,
            config=config,
            terminal=terminal,
            launcher=self.launcher,
            clock=lambda: self.now,
        )

    def press(self, app: BrowserApp, *keys: str) -> list[bool]:
        return [app.handle_key(key) for key in keys]


class NavigationKeyTests(BrowserAppTestCase):
    def test_j_k_move_selection(self) -> None:
        app = self.make_app()

        self.press(app, "j", "j", "k")

        self.assertEqual(app.tabs.active_view.selected_entry.name, "src")

    def test_l_descends_and_h_ascends(self) -> None:
        app = self.make_app()

        self.press(app, "l")
        self.assertEqual(app.tabs.active_view.path, self.root / "docs")
        self.press(app, "h")

        self.assertEqual(app.tabs.active_view.path, self.root)
        self.assertEqual(app.tabs.active_view.selected_entry.name, "docs")

    def test_arrow_aliases(self) -> None:
        app = self.make_app()

        self.press(app, "DOWN", "RIGHT")

        self.assertEqual(app.tabs.active_view.path, self.root / "src")

    def test_capital_h_toggles_hidden(self) -> None:
        app = self.make_app()

        self.press(app, "H")

        self.assertIn(".env", [entry.name for entry in app.tabs.active_view.entries])

    def test_digit_selects_tab_and_out_of_range_digit_is_ignored(self) -> None:
        app = self.make_app(BrowserConfig(view_count=3))

        self.press(app, "3")
        self.assertEqual(app.tabs.active_index, 2)
        self.press(app, "9")

        self.assertEqual(app.tabs.active_index, 2)

    def test_tabs_keep_independent_paths(self) -> None:
        app = self.make_app()

        self.press(app, "l", "2")

        self.assertEqual(app.tabs.views[0].path, self.root / "docs")
        self.assertEqual(app.tabs.active_view.path, self.root)

    def test_q_quits_and_other_keys_do_not(self) -> None:
        app = self.make_app()

        self.assertEqual(self.press(app, "j", "x", "q"), [False, False, True])

    def test_refresh_rescans_active_view(self) -> None:
        app = self.make_app()
        (self.root / "added.txt").write_text("a", encoding="utf-8")

        self.press(app, "r")

        self.assertIn("added.txt", [entry.name for entry in app.tabs.active_view.entries])

    def test_configured_bindings_replace_defaults(self) -> None:
        bindings = dict(BrowserConfig().key_bindings)
        bindings["down"] = ("n",)
        app = self.make_app(BrowserConfig(key_bindings=bindings))

        self.press(app, "j")
        self.assertEqual(app.tabs.active_view.selected_index, 0)
        self.press(app, "n")

        self.assertEqual(app.tabs.active_view.selected_index, 1)


class LaunchActionTests(BrowserAppTestCase):
    def test_enter_opens_files_detached(self) -> None:
        app = self.make_app()
        app.tabs.active_view.set_selection(app.tabs.active_view.index_of("notes.txt"))

        self.press(app, "ENTER_CR")

        self.assertEqual(
            self.launcher.calls,
            [("opener", [str(self.root / "notes.txt")], LaunchMode.DETACHED, {})],
        )

    def test_enter_on_directory_does_nothing(self) -> None:
        app = self.make_app()

        self.press(app, "ENTER_CR")

        self.assertEqual(self.launcher.calls, [])

    def test_open_symlink_is_allowed(self) -> None:
        os.symlink(self.root / "notes.txt", self.root / "zlink")
        app = self.make_app()
        app.tabs.active_view.set_selection(app.tabs.active_view.index_of("zlink"))

        self.press(app, "ENTER_LF")

        self.assertEqual(self.launcher.calls[0][1], [str(self.root / "zlink")])

    def test_edit_runs_foreground_with_terminal_handoff_and_rescans(self) -> None:
        terminal = _FakeTerminal()
        app = self.make_app(terminal=terminal)
        (self.root / "new.txt").write_text("x", encoding="utf-8")

        self.press(app, "e")

        program, args, mode, kwargs = self.launcher.calls[0]
        self.assertEqual((program, args, mode), ("editor", [str(self.root / "docs")], LaunchMode.FOREGROUND))
        kwargs["disable_tui_mode"]()
        kwargs["enable_tui_mode"]()
        self.assertEqual(terminal.events, ["disable", "enable"])
        self.assertIn("new.txt", [entry.name for entry in app.tabs.active_view.entries])

    def test_vanished_entry_is_reported_not_launched(self) -> None:
        app = self.make_app()
        app.tabs.active_view.set_selection(app.tabs.active_view.index_of("notes.txt"))
        (self.root / "notes.txt").unlink()

        self.press(app, "ENTER_CR")

        self.assertEqual(self.launcher.calls, [])
        self.assertIn("no longer exists", app.status_message)

    def test_launch_error_goes_to_status_line(self) -> None:
        self.launcher.error = "Failed to launch opener: missing"
        app = self.make_app()
        app.tabs.active_view.set_selection(app.tabs.active_view.index_of("notes.txt"))

        self.press(app, "ENTER_CR")

        self.assertEqual(app.status_message, "Failed to launch opener: missing")


class DrawingTests(BrowserAppTestCase):
    def test_draw_requires_layout_and_clears_dirty_flag(self) -> None:
        app = self.make_app()
        app.draw()
        self.assertEqual(self.surface.refreshed, [])

        app.resize(60, 10)
        self.assertTrue(app.needs_redraw())
        app.draw()

        self.assertFalse(app.needs_redraw())
        self.assertEqual(self.surface.refreshed, ["header", "main", "divider", "side"])
        main_text = [text for pane, text, _style in self.surface.written if pane == "main"]
        self.assertEqual(main_text[0].strip(), "docs")

    def test_draw_stores_corrected_offset_for_current_depth(self) -> None:
        for index in range(12):
            (self.root / "src" / f"m{index:02d}.py").write_text("", encoding="utf-8")
        app = self.make_app()
        self.press(app, "j", "l")
        for _ in range(10):
            app.handle_key("j")
        app.resize(60, 6)

        app.draw()

        self.assertEqual(app.tabs.active_view.scroll_offset, 10 - 5 + 1)

    def test_navigation_errors_show_then_expire(self) -> None:
        app = self.make_app()
        app.tabs.active_view.set_path(self.root / "missing")
        self.assertIn("not a directory", app.status_message)

        self.now += STATUS_MESSAGE_SECONDS - 0.5
        app.expire_status_message(self.now)
        self.assertTrue(app.status_message)
        self.now += 1.0
        app.expire_status_message(self.now)

        self.assertEqual(app.status_message, "")
        self.assertTrue(app.needs_redraw())

    def test_unenterable_launch_directory_reports_and_renders_unreadable(self) -> None:
        tabs = TabSet(self.root, filesystem=_LockedFilesystem(), change_directory=lambda _path: None)
        app = BrowserApp(tabs, self.surface, launcher=self.launcher, clock=lambda: self.now)

        self.assertIn("permission denied", app.status_message)
        app.resize(120, 10)
        app.draw()

        main_text = [text for pane, text, _style in self.surface.written if pane == "main"]
        header_text = "".join(text for pane, text, _style in self.surface.written if pane == "header")
        self.assertEqual(main_text[0].strip(), "unreadable")
        self.assertIn("permission denied", header_text)

    def test_resize_never_changes_navigation_state(self) -> None:
        app = self.make_app()
        self.press(app, "j")

        app.resize(20, 3)
        app.resize(200, 80)

        self.assertEqual(app.tabs.active_view.selected_index, 1)
        self.assertEqual(app.tabs.active_view.path, self.root)


if __name__ == "__main__":
    unittest.main()
