"""Pane geometry and scroll-window policy.

Geometry is a pure function of terminal size and the configured split ratio.
A resize only ever recomputes this; it never touches navigation state.
"""

from __future__ import annotations

from dataclasses import dataclass

HEADER_HEIGHT = 1
DEFAULT_PANE_RATIO = 0.5
MIN_PANE_RATIO = 0.1
MAX_PANE_RATIO = 0.9


@dataclass(frozen=True)
class PaneGeometry:
    """Screen rectangle of one pane, 0-based."""

    name: str
    row: int
    col: int
    width: int
    height: int


@dataclass(frozen=True)
class Layout:
    """Header, main list, optional divider, and side preview rectangles."""

    columns: int
    rows: int
    header: PaneGeometry
    main: PaneGeometry
    side: PaneGeometry
    divider: PaneGeometry | None = None

    def panes(self) -> tuple[PaneGeometry, ...]:
        if self.divider is None:
            return (self.header, self.main, self.side)
        return (self.header, self.main, self.divider, self.side)


def clamp_pane_ratio(ratio: float) -> float:
    """Bound the main-pane fraction so both panes stay usable."""
    return max(MIN_PANE_RATIO, min(MAX_PANE_RATIO, float(ratio)))


def compute_layout(
    columns: int,
    rows: int,
    pane_ratio: float = DEFAULT_PANE_RATIO,
    draw_borders: bool = True,
) -> Layout:
    """Split the terminal into header, main list, and side preview panes.

    The header spans row 0. The main list takes the left fraction of the width
    and every row below the header; the side preview gets what remains after
    the optional one-column divider.
    """
    columns = max(1, columns)
    rows = max(HEADER_HEIGHT + 1, rows)
    body_rows = rows - HEADER_HEIGHT

    main_width = max(1, min(columns, int(columns * clamp_pane_ratio(pane_ratio))))
    divider: PaneGeometry | None = None
    side_col = main_width
    if draw_borders and main_width < columns:
        divider = PaneGeometry("divider", HEADER_HEIGHT, main_width, 1, body_rows)
        side_col = main_width + 1
    side_width = max(0, columns - side_col)

    return Layout(
        columns=columns,
        rows=rows,
        header=PaneGeometry("header", 0, 0, columns, HEADER_HEIGHT),
        main=PaneGeometry("main", HEADER_HEIGHT, 0, main_width, body_rows),
        side=PaneGeometry("side", HEADER_HEIGHT, side_col, side_width, body_rows),
        divider=divider,
    )


def corrected_scroll_offset(selected: int, offset: int, visible_rows: int) -> int:
    """Move ``offset`` just enough to keep ``selected`` inside the window.

    The window shows rows ``[offset, offset + visible_rows)``. Scrolling up
    puts the selection on the first row; scrolling down puts it on the last.
    """
    visible_rows = max(1, visible_rows)
    if selected < offset:
        offset = selected
    if selected >= offset + visible_rows:
        offset = selected - visible_rows + 1
    return max(0, offset)
