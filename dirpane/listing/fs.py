"""Filesystem capability and the sorted, filtered directory scanner."""

from __future__ import annotations

import locale
import os
from collections.abc import Iterable, Iterator
from pathlib import Path
from typing import Protocol

from ..debug import get_logger
from ..errors import PathNotDirectory, PermissionDenied, ScanUnreadable
from .types import DirectoryScan, Entry, EntryKind

log = get_logger("listing")


class Filesystem(Protocol):
    """Operations the navigation core needs from a filesystem."""

    def canonicalize(self, path: Path) -> Path:
        """Return the absolute path with symlinks and ``..`` resolved."""
        ...

    def check_directory(self, path: Path) -> None:
        """Raise ``PathNotDirectory``/``PermissionDenied`` unless enterable."""
        ...

    def iter_children(self, path: Path) -> Iterable[tuple[str, EntryKind]]:
        """Yield ``(name, kind)`` for every child; raise ``OSError`` if unreadable."""
        ...

    def exists(self, path: Path) -> bool:
        """Return whether ``path`` exists, without following a final symlink."""
        ...


def _entry_kind(child: os.DirEntry) -> EntryKind:
    """Classify a scandir entry without following symlinks."""
    try:
        if child.is_symlink():
            return EntryKind.SYMBOLIC_LINK
        if child.is_dir(follow_symlinks=False):
            return EntryKind.DIRECTORY
        if child.is_file(follow_symlinks=False):
            return EntryKind.FILE
    except OSError:
        pass
    return EntryKind.UNKNOWN


class OsFilesystem:
    """``Filesystem`` backed by ``os.scandir`` and ``os.path.realpath``."""

    def canonicalize(self, path: Path) -> Path:
        return Path(os.path.realpath(os.path.abspath(path)))

    def check_directory(self, path: Path) -> None:
        if not os.path.isdir(path):
            raise PathNotDirectory(path)
        if not os.access(path, os.X_OK):
            raise PermissionDenied(path)

    def iter_children(self, path: Path) -> Iterator[tuple[str, EntryKind]]:
        with os.scandir(path) as entries:
            for child in entries:
                yield child.name, _entry_kind(child)

    def exists(self, path: Path) -> bool:
        return os.path.lexists(path)


DEFAULT_FILESYSTEM = OsFilesystem()


def is_visible_name(name: str, show_hidden: bool) -> bool:
    """Return whether ``name`` belongs in a listing under the hidden flag."""
    if name in {".", ".."}:
        return False
    return show_hidden or not name.startswith(".")


def entry_sort_key(entry: Entry) -> tuple[int, str, str]:
    """Directories first, then locale collation, then raw name for totality."""
    group = 0 if entry.kind is EntryKind.DIRECTORY else 1
    try:
        collated = locale.strxfrm(entry.name)
    except (OSError, ValueError):
        collated = entry.name
    return group, collated, entry.name


def scan_directory(
    path: Path,
    show_hidden: bool,
    filesystem: Filesystem = DEFAULT_FILESYSTEM,
) -> DirectoryScan:
    """List visible children of ``path`` in display order.

    An unreadable directory yields no entries and a ``ScanUnreadable`` error
    rather than raising.
    """
    entries: list[Entry] = []
    try:
        for name, kind in filesystem.iter_children(path):
            if not is_visible_name(name, show_hidden):
                continue
            entries.append(Entry(name=name, kind=kind))
    except OSError as exc:
        log.debug("scan failed for %s: %s", path, exc)
        return DirectoryScan(entries=(), error=ScanUnreadable(path, exc.strerror or str(exc)))

    entries.sort(key=entry_sort_key)
    return DirectoryScan(entries=tuple(entries))


def list_entries(
    path: Path,
    show_hidden: bool,
    filesystem: Filesystem = DEFAULT_FILESYSTEM,
) -> list[Entry]:
    """Return only the sorted entries of ``scan_directory``."""
    return list(scan_directory(path, show_hidden, filesystem).entries)


__all__ = [
    "Filesystem",
    "OsFilesystem",
    "DEFAULT_FILESYSTEM",
    "is_visible_name",
    "entry_sort_key",
    "scan_directory",
    "list_entries",
]
