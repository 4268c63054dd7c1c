"""Domain datatypes for scanned directory entries."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field

from ..errors import ScanUnreadable


class EntryKind(enum.Enum):
    """Filesystem kind of one entry, observed without following symlinks."""

    FILE = "file"
    DIRECTORY = "directory"
    SYMBOLIC_LINK = "symlink"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class Entry:
    """One child of a scanned directory."""

    name: str
    kind: EntryKind

    @property
    def is_dir(self) -> bool:
        return self.kind is EntryKind.DIRECTORY


@dataclass(frozen=True)
class DirectoryScan:
    """Sorted scan result plus the error that emptied it, if any.

    ``entries`` is empty both for an empty directory and for one that could
    not be opened; ``error`` tells the two apart.
    """

    entries: tuple[Entry, ...] = ()
    error: ScanUnreadable | None = field(default=None)


__all__ = [
    "EntryKind",
    "Entry",
    "DirectoryScan",
]
