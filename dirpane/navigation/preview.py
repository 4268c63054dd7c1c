"""Side preview: a read-only listing of the directory highlighted in a view."""

from __future__ import annotations

from pathlib import Path

from ..errors import ScanUnreadable
from ..listing import DEFAULT_FILESYSTEM, Entry, Filesystem, scan_directory
from .view import BrowserSettings, View


class SidePreview:
    """Listing derived entirely from the active view's current selection."""

    def __init__(
        self,
        settings: BrowserSettings | None = None,
        filesystem: Filesystem = DEFAULT_FILESYSTEM,
    ) -> None:
        self.settings = settings if settings is not None else BrowserSettings()
        self.filesystem = filesystem
        self.path: Path | None = None
        self.entries: list[Entry] = []
        self.active = False
        self.scan_error: ScanUnreadable | None = None

    def clear(self) -> None:
        self.path = None
        self.entries = []
        self.active = False
        self.scan_error = None

    def refresh(self, view: View) -> None:
        """Recompute from ``view``: list the selected directory or go inactive."""
        entry = view.selected_entry
        if entry is None or not entry.is_dir:
            self.clear()
            return
        target = self.filesystem.canonicalize(view.path / entry.name)
        scan = scan_directory(target, self.settings.show_hidden, self.filesystem)
        self.path = target
        self.entries = list(scan.entries)
        self.scan_error = scan.error
        self.active = True
