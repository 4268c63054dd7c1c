"""Runtime composition layer for dirpane.

Builds the tab set from config, binds key actions to navigation and launch
operations, and starts the loop. This is the only module where navigation,
rendering, the launcher and the terminal meet.
"""

from __future__ import annotations

import os
import sys
import time
from collections.abc import Callable, Sequence
from pathlib import Path

from ..debug import get_logger
from ..errors import EntryVanished, NavigationError
from ..input import KeyComboRegistry, build_key_registry, tab_index_for_action
from ..input.keys import (
    ACTION_BACKWARD,
    ACTION_DOWN,
    ACTION_EDIT,
    ACTION_FORWARD,
    ACTION_OPEN,
    ACTION_QUIT,
    ACTION_REFRESH,
    ACTION_TOGGLE_HIDDEN,
    ACTION_UP,
    TAB_ACTIONS,
)
from ..listing import EntryKind
from ..navigation import BrowserSettings, TabSet
from ..render import AnsiSurface, Layout, Surface, compute_layout, paint_frame, render_frame
from ..ui_theme import resolve_theme
from .config import BrowserConfig
from .launcher import LaunchMode, default_opener, launch, resolve_editor
from .loop import RuntimeLoopCallbacks, RuntimeLoopTiming, run_main_loop
from .terminal import TerminalController

log = get_logger("app")

STATUS_MESSAGE_SECONDS = 3.0
OPENABLE_KINDS = frozenset({EntryKind.FILE, EntryKind.SYMBOLIC_LINK})

Launcher = Callable[..., str | None]


class BrowserApp:
    """Root object owning the tabs, the current layout and the status line."""

    def __init__(
        self,
        tabs: TabSet,
        surface: Surface,
        config: BrowserConfig | None = None,
        terminal: TerminalController | None = None,
        launcher: Launcher = launch,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.tabs = tabs
        self.surface = surface
        self.config = config if config is not None else BrowserConfig()
        self.terminal = terminal
        self.launcher = launcher
        self.clock = clock
        self.opener = self.config.opener or default_opener()
        self.editor = resolve_editor(self.config.editor)
        self.layout: Layout | None = None
        self.status_message = ""
        self.status_message_until = 0.0
        self.dirty = True
        self.tabs.on_error = self.report_error
        self.registry: KeyComboRegistry = build_key_registry(self.config.key_bindings, self.action_handlers())
        # The launch directory was scanned before errors reached the status line.
        startup_error = self.tabs.active_view.scan_error
        if startup_error is not None:
            self.report_error(startup_error)

    def action_handlers(self) -> dict[str, Callable[[], bool | None]]:
        handlers: dict[str, Callable[[], bool | None]] = {
            ACTION_QUIT: self.quit,
            ACTION_OPEN: self.open_selected,
            ACTION_EDIT: self.edit_selected,
            ACTION_BACKWARD: self.backward,
            ACTION_FORWARD: self.forward,
            ACTION_UP: self.move_up,
            ACTION_DOWN: self.move_down,
            ACTION_TOGGLE_HIDDEN: self.toggle_hidden,
            ACTION_REFRESH: self.refresh,
        }
        for action in TAB_ACTIONS:
            index = tab_index_for_action(action)
            handlers[action] = lambda index=index: self.select_tab(index)
        return handlers

    # Status line

    def set_status_message(self, message: str) -> None:
        self.status_message = message
        self.status_message_until = self.clock() + STATUS_MESSAGE_SECONDS
        self.dirty = True

    def report_error(self, error: NavigationError) -> None:
        self.set_status_message(error.message)

    def expire_status_message(self, now: float) -> None:
        if self.status_message and now >= self.status_message_until:
            self.status_message = ""
            self.status_message_until = 0.0
            self.dirty = True

    # Actions. Only ``quit`` returns True, which stops the loop.

    def quit(self) -> bool:
        return True

    def backward(self) -> None:
        self.tabs.active_view.ascend()

    def forward(self) -> None:
        self.tabs.active_view.descend()

    def move_up(self) -> None:
        self.tabs.active_view.move_up()

    def move_down(self) -> None:
        self.tabs.active_view.move_down()

    def toggle_hidden(self) -> None:
        self.tabs.toggle_hidden()

    def refresh(self) -> None:
        self.tabs.active_view.rescan()

    def select_tab(self, index: int) -> None:
        self.tabs.activate(index)

    def _selected_target(self, kinds: frozenset[EntryKind] | None = None) -> Path | None:
        view = self.tabs.active_view
        entry = view.selected_entry
        if entry is None:
            return None
        if kinds is not None and entry.kind not in kinds:
            return None
        target = view.path / entry.name
        if not self.tabs.filesystem.exists(target):
            self.report_error(EntryVanished(target))
            return None
        return target

    def _run(self, program: str, args: Sequence[str], mode: LaunchMode) -> bool:
        kwargs = {}
        if mode is LaunchMode.FOREGROUND and self.terminal is not None:
            kwargs = {
                "disable_tui_mode": self.terminal.disable_tui_mode,
                "enable_tui_mode": self.terminal.enable_tui_mode,
            }
        error = self.launcher(program, list(args), mode, **kwargs)
        if error:
            log.debug("launch failed: %s", error)
            self.set_status_message(error)
            return False
        return True

    def open_selected(self) -> None:
        """Hand the selected file to the desktop opener without waiting."""
        target = self._selected_target(OPENABLE_KINDS)
        if target is None:
            return
        self._run(self.opener, [str(target)], LaunchMode.DETACHED)

    def edit_selected(self) -> None:
        """Edit the selected entry in the foreground, then re-list the directory."""
        target = self._selected_target()
        if target is None:
            return
        self._run(self.editor, [str(target)], LaunchMode.FOREGROUND)
        self.tabs.active_view.rescan()

    # Loop hooks

    def resize(self, columns: int, rows: int) -> None:
        self.layout = compute_layout(
            columns,
            rows,
            pane_ratio=self.config.pane_ratio,
            draw_borders=self.config.draw_borders,
        )
        self.dirty = True

    def needs_redraw(self) -> bool:
        return self.dirty

    def draw(self) -> None:
        if self.layout is None:
            return
        frame = render_frame(self.layout, self.tabs, self.status_message)
        self.tabs.active_view.remember_scroll_offset(frame.main_offset)
        paint_frame(frame, self.surface)
        self.dirty = False

    def handle_key(self, key: str) -> bool:
        """Dispatch ``key``; return True when the browser should exit."""
        result = self.registry.dispatch(key)
        if result is True:
            return True
        self.dirty = True
        return False

    def loop_callbacks(self) -> RuntimeLoopCallbacks:
        return RuntimeLoopCallbacks(
            resize=self.resize,
            expire_status_message=self.expire_status_message,
            needs_redraw=self.needs_redraw,
            draw=self.draw,
            handle_key=self.handle_key,
        )


def run_browser(
    path: Path,
    config: BrowserConfig | None = None,
    theme_name: str | None = None,
    no_color: bool = False,
) -> None:
    """Start the interactive browser rooted at ``path``."""
    config = config if config is not None else BrowserConfig()
    stdin_fd = sys.stdin.fileno()
    stdout_fd = sys.stdout.fileno()
    if not os.isatty(stdin_fd):
        raise SystemExit("dirpane needs an interactive terminal on stdin.")

    settings = BrowserSettings(show_hidden=config.show_hidden)
    tabs = TabSet(path, view_count=config.view_count, settings=settings)
    theme = resolve_theme(theme_name or config.theme, no_color=no_color)
    terminal = TerminalController(stdin_fd, stdout_fd)
    app = BrowserApp(
        tabs,
        AnsiSurface(theme, stdout_fd),
        config=config,
        terminal=terminal,
    )
    log.debug("starting in %s with %d views", tabs.active_view.path, len(tabs))
    run_main_loop(
        terminal=terminal,
        stdin_fd=stdin_fd,
        timing=RuntimeLoopTiming(),
        callbacks=app.loop_callbacks(),
    )
