"""Navigation core: views, the side preview, and the tab set."""

from __future__ import annotations

from .view import BrowserSettings, View, ViewListener, path_depth
from .preview import SidePreview
from .tabs import DEFAULT_VIEW_COUNT, MAX_VIEW_COUNT, TabSet

__all__ = [
    "BrowserSettings",
    "View",
    "ViewListener",
    "path_depth",
    "SidePreview",
    "DEFAULT_VIEW_COUNT",
    "MAX_VIEW_COUNT",
    "TabSet",
]
