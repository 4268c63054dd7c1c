"""Per-tab navigation state: directory, selection, and depth-indexed scroll memory.

Scroll offsets are remembered per directory depth, not per path: every
directory at depth ``n`` shares slot ``n``. The list of slots only grows, and
always covers ``depth(path) + 1`` so a child directory starts unscrolled.
"""

from __future__ import annotations

import os
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol

from ..debug import get_logger
from ..errors import NavigationError
from ..listing import DEFAULT_FILESYSTEM, Entry, Filesystem, scan_directory

log = get_logger("view")


@dataclass
class BrowserSettings:
    """Listing options shared by every view and the side preview."""

    show_hidden: bool = False


class ViewListener(Protocol):
    """Receives notifications after a view transitions."""

    def view_path_changed(self, view: View) -> None:
        ...

    def view_selection_changed(self, view: View) -> None:
        ...


def path_depth(path: Path) -> int:
    """Count separators in a canonical absolute path; the root is depth 0."""
    text = str(path)
    if text == os.sep:
        return 0
    return text.count(os.sep)


class View:
    """One tab's navigation state machine."""

    def __init__(
        self,
        path: Path | str,
        settings: BrowserSettings | None = None,
        filesystem: Filesystem = DEFAULT_FILESYSTEM,
        on_error: Callable[[NavigationError], None] | None = None,
    ) -> None:
        self.settings = settings if settings is not None else BrowserSettings()
        self.filesystem = filesystem
        self.on_error = on_error
        self.listener: ViewListener | None = None
        self.path = filesystem.canonicalize(Path(path))
        self.selected_index = 0
        self.entries: list[Entry] = []
        self.scan_error: NavigationError | None = None
        self.scroll_offsets: list[int] = []
        self._grow_scroll_offsets()
        try:
            filesystem.check_directory(self.path)
        except NavigationError as exc:
            self.scan_error = exc
            self._report(exc)
            return
        self._load_entries()

    @property
    def depth(self) -> int:
        return path_depth(self.path)

    @property
    def selected_entry(self) -> Entry | None:
        if not self.entries:
            return None
        return self.entries[self.selected_index]

    @property
    def selected_path(self) -> Path | None:
        entry = self.selected_entry
        if entry is None:
            return None
        return self.path / entry.name

    @property
    def scroll_offset(self) -> int:
        """Remembered main-list offset for the current depth."""
        return self.scroll_offsets[self.depth]

    @property
    def preview_scroll_offset(self) -> int:
        """Remembered offset one level deeper, used by the side preview."""
        return self.scroll_offsets[self.depth + 1]

    def remember_scroll_offset(self, offset: int) -> None:
        self.scroll_offsets[self.depth] = max(0, offset)

    def index_of(self, name: str) -> int | None:
        """Return the index of the entry called ``name``, if listed."""
        for index, entry in enumerate(self.entries):
            if entry.name == name:
                return index
        return None

    def _report(self, error: NavigationError) -> None:
        log.debug("navigation failed: %s", error.message)
        if self.on_error is not None:
            self.on_error(error)

    def _grow_scroll_offsets(self) -> None:
        needed = self.depth + 2
        if len(self.scroll_offsets) < needed:
            self.scroll_offsets.extend([0] * (needed - len(self.scroll_offsets)))

    def _load_entries(self) -> None:
        scan = scan_directory(self.path, self.settings.show_hidden, self.filesystem)
        self.entries = list(scan.entries)
        self.scan_error = scan.error
        if scan.error is not None:
            log.debug("%s", scan.error.message)

    def _apply_selection(self, index: int) -> None:
        if not self.entries:
            index = 0
        else:
            index = max(0, min(index, len(self.entries) - 1))
        self.selected_index = index
        self._grow_scroll_offsets()
        self.scroll_offsets[self.depth + 1] = 0

    def set_path(self, new_path: Path | str) -> bool:
        """Enter ``new_path`` and re-scan; leave state untouched on failure.

        Relative paths resolve against the view's current directory.
        """
        candidate = Path(new_path)
        if not candidate.is_absolute():
            candidate = self.path / candidate
        target = self.filesystem.canonicalize(candidate)
        try:
            self.filesystem.check_directory(target)
        except NavigationError as exc:
            self._report(exc)
            return False

        self.path = target
        self._load_entries()
        self._grow_scroll_offsets()
        if len(self.entries) <= 1:
            self._apply_selection(0)
        elif self.selected_index >= len(self.entries):
            self._apply_selection(len(self.entries) - 1)
        if self.listener is not None:
            self.listener.view_path_changed(self)
        return True

    def set_selection(self, index: int) -> None:
        """Select ``index`` clamped into range and reset the child scroll slot."""
        self._apply_selection(index)
        if self.listener is not None:
            self.listener.view_selection_changed(self)

    def move_up(self) -> bool:
        if self.selected_index <= 0:
            return False
        self.set_selection(self.selected_index - 1)
        return True

    def move_down(self) -> bool:
        if self.selected_index >= len(self.entries) - 1:
            return False
        self.set_selection(self.selected_index + 1)
        return True

    def descend(self) -> bool:
        """Enter the selected directory and select its first entry."""
        entry = self.selected_entry
        if entry is None or not entry.is_dir:
            return False
        if not self.set_path(self.path / entry.name):
            return False
        self.set_selection(0)
        return True

    def ascend(self) -> bool:
        """Go to the parent and re-select the directory just left."""
        parent = self.path.parent
        if parent == self.path:
            return False
        leaf = self.path.name
        if not self.set_path(parent):
            return False
        index = self.index_of(leaf)
        self.set_selection(index if index is not None else 0)
        return True

    def rescan(self) -> None:
        """Re-list the current directory, keeping the selection by name."""
        entry = self.selected_entry
        name = entry.name if entry is not None else None
        self._load_entries()
        index = self.index_of(name) if name is not None else None
        self.set_selection(index if index is not None else 0)

    def toggle_hidden(self) -> None:
        """Flip the shared hidden-file flag and re-list this view."""
        self.settings.show_hidden = not self.settings.show_hidden
        self.rescan()
