"""Frame composition: draw instructions for every pane.

``render_frame`` is pure. It reads the active view and side preview and
returns styled rows per pane together with the corrected main-list scroll
offset, which the caller stores back into the view for the current depth.
"""

from __future__ import annotations

from dataclasses import dataclass

from ..ansi import display_width, fit_text, sanitize_text
from ..listing import Entry
from ..navigation import SidePreview, TabSet, View
from .layout import Layout, PaneGeometry, corrected_scroll_offset
from .styles import Style

DIVIDER_CHAR = "│"
EMPTY_LABEL = "empty"
UNREADABLE_LABEL = "unreadable"


@dataclass(frozen=True)
class Segment:
    """A run of text drawn in one style."""

    text: str
    style: Style = Style.NORMAL


@dataclass(frozen=True)
class Row:
    """One pane row, 0-based relative to the pane top."""

    index: int
    segments: tuple[Segment, ...]

    @property
    def text(self) -> str:
        return "".join(segment.text for segment in self.segments)


@dataclass(frozen=True)
class PaneDraw:
    """Full contents of one pane; rows not listed are blank."""

    pane: PaneGeometry
    rows: tuple[Row, ...] = ()


@dataclass(frozen=True)
class Frame:
    """Everything needed to repaint the screen once."""

    panes: tuple[PaneDraw, ...]
    main_offset: int

    def pane(self, name: str) -> PaneDraw:
        for draw in self.panes:
            if draw.pane.name == name:
                return draw
        raise KeyError(name)


def clip_segments(segments: list[Segment], width: int) -> tuple[Segment, ...]:
    """Clip a row of segments to ``width`` display columns."""
    out: list[Segment] = []
    remaining = width
    for segment in segments:
        if remaining <= 0:
            break
        text = fit_text(segment.text, remaining)
        if not text:
            continue
        out.append(Segment(text, segment.style))
        remaining -= display_width(text)
    return tuple(out)


def header_row(tabs: TabSet, width: int, status_message: str = "") -> Row:
    """Build ``[1 2 3 4] - /path`` with the active tab highlighted.

    A status message follows the path. The path is clipped first so the
    message stays visible when the path is long.
    """
    segments: list[Segment] = [Segment("[")]
    for index in range(len(tabs)):
        style = Style.TAB_ACTIVE if index == tabs.active_index else Style.TAB
        segments.append(Segment(str(index + 1), style))
        if index + 1 < len(tabs):
            segments.append(Segment(" "))
    segments.append(Segment("] - "))
    status: list[Segment] = []
    if status_message:
        status = [Segment("  "), Segment(sanitize_text(status_message), Style.STATUS)]
    used = sum(display_width(segment.text) for segment in segments + status)
    path_text = fit_text(str(tabs.active_view.path), max(0, width - used))
    segments.append(Segment(path_text, Style.PATH))
    return Row(0, clip_segments(segments + status, width))


def _entry_style(entry: Entry, selected: bool) -> Style:
    if selected:
        return Style.SELECTED_DIRECTORY if entry.is_dir else Style.SELECTED
    return Style.DIRECTORY if entry.is_dir else Style.NORMAL


def main_list_rows(view: View, pane: PaneGeometry) -> tuple[int, tuple[Row, ...]]:
    """Return ``(offset, rows)`` for the main list of ``view``.

    The selected row is padded to the full pane width so reverse video
    covers the whole line.
    """
    if pane.width <= 0 or pane.height <= 0:
        return view.scroll_offset, ()
    if not view.entries:
        label = UNREADABLE_LABEL if view.scan_error is not None else EMPTY_LABEL
        style = Style.ERROR if view.scan_error is not None else Style.EMPTY
        return view.scroll_offset, (Row(0, (Segment(fit_text(label, pane.width), style),)),)

    offset = corrected_scroll_offset(view.selected_index, view.scroll_offset, pane.height)
    rows: list[Row] = []
    last = min(len(view.entries), offset + pane.height)
    for index in range(offset, last):
        entry = view.entries[index]
        selected = index == view.selected_index
        text = fit_text(entry.name, pane.width, pad=selected)
        rows.append(Row(index - offset, (Segment(text, _entry_style(entry, selected)),)))
    return offset, tuple(rows)


def side_preview_rows(preview: SidePreview, offset: int, pane: PaneGeometry) -> tuple[Row, ...]:
    """Rows for an active preview starting at the remembered child offset."""
    if not preview.active or pane.width <= 0 or pane.height <= 0:
        return ()
    if not preview.entries:
        if preview.scan_error is not None:
            return (Row(0, (Segment(fit_text(UNREADABLE_LABEL, pane.width), Style.ERROR),)),)
        return ()

    start = max(0, min(offset, len(preview.entries) - 1))
    rows: list[Row] = []
    for index, entry in enumerate(preview.entries[start:start + pane.height]):
        style = Style.DIRECTORY if entry.is_dir else Style.NORMAL
        rows.append(Row(index, (Segment(fit_text(entry.name, pane.width), style),)))
    return tuple(rows)


def divider_rows(pane: PaneGeometry) -> tuple[Row, ...]:
    return tuple(Row(index, (Segment(DIVIDER_CHAR, Style.DIVIDER),)) for index in range(pane.height))


def render_frame(layout: Layout, tabs: TabSet, status_message: str = "") -> Frame:
    """Compose draw instructions for header, main list, divider, and preview."""
    view = tabs.active_view
    main_offset, main_rows = main_list_rows(view, layout.main)
    panes = [
        PaneDraw(layout.header, (header_row(tabs, layout.header.width, status_message),)),
        PaneDraw(layout.main, main_rows),
    ]
    if layout.divider is not None:
        panes.append(PaneDraw(layout.divider, divider_rows(layout.divider)))
    panes.append(
        PaneDraw(layout.side, side_preview_rows(tabs.preview, view.preview_scroll_offset, layout.side))
    )
    return Frame(panes=tuple(panes), main_offset=main_offset)
