"""Layout and rendering engine for the header/list/preview screen.

Geometry (``layout``) and frame composition (``frame``) are pure; only
``surface`` touches the terminal.
"""

from __future__ import annotations

from .styles import Style
from .layout import (
    DEFAULT_PANE_RATIO,
    HEADER_HEIGHT,
    Layout,
    PaneGeometry,
    clamp_pane_ratio,
    compute_layout,
    corrected_scroll_offset,
)
from .frame import Frame, PaneDraw, Row, Segment, render_frame
from .surface import AnsiSurface, Surface, paint_frame

__all__ = [
    "Style",
    "DEFAULT_PANE_RATIO",
    "HEADER_HEIGHT",
    "Layout",
    "PaneGeometry",
    "clamp_pane_ratio",
    "compute_layout",
    "corrected_scroll_offset",
    "Frame",
    "PaneDraw",
    "Row",
    "Segment",
    "render_frame",
    "AnsiSurface",
    "Surface",
    "paint_frame",
]
