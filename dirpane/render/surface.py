"""Draw surface primitives and the ANSI implementation.

Every paint is a full redraw: each pane is blanked, its rows rewritten, and
the buffered escape output flushed with a single write per pane.
"""

from __future__ import annotations

import os
import sys
from typing import TYPE_CHECKING, Protocol

from .frame import Frame
from .layout import PaneGeometry
from .styles import Style

if TYPE_CHECKING:
    from ..ui_theme import UITheme


class Surface(Protocol):
    """Pane-addressed drawing operations used by ``paint_frame``."""

    def clear_pane(self, pane: PaneGeometry) -> None:
        ...

    def move(self, pane: PaneGeometry, row: int, col: int) -> None:
        ...

    def write(self, pane: PaneGeometry, text: str, style: Style) -> None:
        ...

    def refresh(self, pane: PaneGeometry) -> None:
        ...


class AnsiSurface:
    """``Surface`` that emits cursor-addressed ANSI sequences to a file descriptor."""

    def __init__(self, theme: UITheme, stdout_fd: int | None = None) -> None:
        self.theme = theme
        self.stdout_fd = sys.stdout.fileno() if stdout_fd is None else stdout_fd
        self._pending: list[str] = []

    @staticmethod
    def _cursor(pane: PaneGeometry, row: int, col: int) -> str:
        return f"\033[{pane.row + row + 1};{pane.col + col + 1}H"

    def clear_pane(self, pane: PaneGeometry) -> None:
        if pane.width <= 0:
            return
        blank = " " * pane.width
        for row in range(pane.height):
            self._pending.append(self._cursor(pane, row, 0))
            self._pending.append(blank)

    def move(self, pane: PaneGeometry, row: int, col: int) -> None:
        self._pending.append(self._cursor(pane, row, col))

    def write(self, pane: PaneGeometry, text: str, style: Style) -> None:
        prefix = self.theme.sgr(style)
        if prefix:
            self._pending.append(f"{prefix}{text}{self.theme.reset}")
        else:
            self._pending.append(text)

    def refresh(self, pane: PaneGeometry) -> None:
        if not self._pending:
            return
        payload = "".join(self._pending)
        self._pending.clear()
        os.write(self.stdout_fd, payload.encode("utf-8", errors="replace"))


def paint_frame(frame: Frame, surface: Surface) -> None:
    """Redraw every pane of ``frame`` on ``surface``."""
    for draw in frame.panes:
        surface.clear_pane(draw.pane)
        for row in draw.rows:
            if row.index >= draw.pane.height:
                continue
            surface.move(draw.pane, row.index, 0)
            for segment in row.segments:
                surface.write(draw.pane, segment.text, segment.style)
        surface.refresh(draw.pane)
