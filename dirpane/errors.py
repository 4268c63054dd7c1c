"""Navigation error kinds shared by the scanner, views, and launcher.

None of these are fatal. Views absorb them and forward them to an optional
status hook; the scanner returns ``ScanUnreadable`` instead of raising it.
"""

from __future__ import annotations

from pathlib import Path


class NavigationError(Exception):
    """Base class for recoverable navigation failures tied to one path."""

    reason = "navigation failed"

    def __init__(self, path: Path | str, detail: str | None = None) -> None:
        self.path = Path(path)
        self.detail = detail
        super().__init__(self.message)

    @property
    def message(self) -> str:
        """User-facing one-line description suitable for the status line."""
        text = f"{self.reason}: {self.path}"
        if self.detail:
            text = f"{text} ({self.detail})"
        return text


class PathNotDirectory(NavigationError):
    """Target does not exist or is not a directory."""

    reason = "not a directory"


class PermissionDenied(NavigationError):
    """Target directory exists but cannot be entered."""

    reason = "permission denied"


class EntryVanished(NavigationError):
    """Selected entry no longer exists when acted upon."""

    reason = "no longer exists"


class ScanUnreadable(NavigationError):
    """Directory listing could not be opened."""

    reason = "cannot read directory"
