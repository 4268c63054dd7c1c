"""Semantic text styles used in draw instructions."""

from __future__ import annotations

import enum


class Style(enum.Enum):
    """Render style; each value names the matching ``UITheme`` attribute."""

    NORMAL = "normal"
    DIRECTORY = "directory"
    SELECTED = "selected"
    SELECTED_DIRECTORY = "selected_directory"
    TAB = "tab"
    TAB_ACTIVE = "tab_active"
    PATH = "path"
    STATUS = "status"
    EMPTY = "empty"
    ERROR = "error"
    DIVIDER = "divider"
