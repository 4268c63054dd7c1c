"""Entry scanning: typed, sorted, hidden-filtered directory listings.

This package contains non-UI primitives:
- entry and scan-result datatypes
- the injectable ``Filesystem`` capability and its ``os`` implementation
- the scanner that filters and orders children
"""

from __future__ import annotations

from .types import DirectoryScan, Entry, EntryKind
from .fs import (
    DEFAULT_FILESYSTEM,
    Filesystem,
    OsFilesystem,
    entry_sort_key,
    is_visible_name,
    list_entries,
    scan_directory,
)

__all__ = [
    "Entry",
    "EntryKind",
    "DirectoryScan",
    "Filesystem",
    "OsFilesystem",
    "DEFAULT_FILESYSTEM",
    "entry_sort_key",
    "is_visible_name",
    "list_entries",
    "scan_directory",
]
