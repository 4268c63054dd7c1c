"""Fixed-size tab collection and the side effects of changing directories.

The active view's directory is mirrored into the process working directory so
launched programs start where the user is looking. Inactive tabs are never
re-scanned on activation; their listings may be stale until refreshed.
"""

from __future__ import annotations

import os
from collections.abc import Callable, Iterator
from pathlib import Path

from ..debug import get_logger
from ..errors import NavigationError
from ..listing import DEFAULT_FILESYSTEM, Filesystem
from .preview import SidePreview
from .view import BrowserSettings, View

log = get_logger("tabs")

DEFAULT_VIEW_COUNT = 4
MAX_VIEW_COUNT = 9


class TabSet:
    """Owns every view, the shared side preview, and the active index."""

    def __init__(
        self,
        launch_path: Path | str,
        view_count: int = DEFAULT_VIEW_COUNT,
        settings: BrowserSettings | None = None,
        filesystem: Filesystem = DEFAULT_FILESYSTEM,
        change_directory: Callable[[Path], None] = os.chdir,
        on_error: Callable[[NavigationError], None] | None = None,
    ) -> None:
        if not 1 <= view_count <= MAX_VIEW_COUNT:
            raise ValueError(f"view_count must be between 1 and {MAX_VIEW_COUNT}, got {view_count}")
        self.settings = settings if settings is not None else BrowserSettings()
        self.filesystem = filesystem
        self.on_error = on_error
        self._change_directory = change_directory
        self.views = [
            View(launch_path, self.settings, filesystem, on_error=self._report_error)
            for _ in range(view_count)
        ]
        for view in self.views:
            view.listener = self
        self.preview = SidePreview(self.settings, filesystem)
        self.active_index = 0
        self.activate(0)

    def __len__(self) -> int:
        return len(self.views)

    def __iter__(self) -> Iterator[View]:
        return iter(self.views)

    @property
    def active_view(self) -> View:
        return self.views[self.active_index]

    def _report_error(self, error: NavigationError) -> None:
        if self.on_error is not None:
            self.on_error(error)

    def _sync_working_directory(self) -> None:
        path = self.active_view.path
        try:
            self._change_directory(path)
        except OSError as exc:
            log.debug("chdir to %s failed: %s", path, exc)

    def activate(self, index: int) -> bool:
        """Make tab ``index`` active; out-of-range indices are ignored."""
        if not 0 <= index < len(self.views):
            return False
        self.active_index = index
        self._sync_working_directory()
        self.preview.refresh(self.active_view)
        return True

    def toggle_hidden(self) -> None:
        self.active_view.toggle_hidden()

    def view_path_changed(self, view: View) -> None:
        if view is not self.active_view:
            return
        self._sync_working_directory()
        self.preview.refresh(view)

    def view_selection_changed(self, view: View) -> None:
        if view is not self.active_view:
            return
        self.preview.refresh(view)
