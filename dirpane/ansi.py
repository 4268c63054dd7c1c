"""Display-width measurement and clipping for pane text.

Entry names are plain text, but wide characters and control bytes still have
to be accounted for so rows line up with terminal cells.
"""

from __future__ import annotations

import re
import unicodedata

ANSI_ESCAPE_RE = re.compile(r"\x1b\[[0-9;?]*[ -/]*[@-~]")
REPLACEMENT_CHAR = "?"


def char_display_width(ch: str) -> int:
    """Return terminal column width for one printable character.

    Combining marks consume no columns and East Asian wide/fullwidth
    characters consume two.
    """
    if unicodedata.combining(ch):
        return 0
    if unicodedata.east_asian_width(ch) in {"W", "F"}:
        return 2
    return 1


def sanitize_text(text: str) -> str:
    """Replace control characters (including ESC and tabs) with ``?``."""
    return "".join(REPLACEMENT_CHAR if unicodedata.category(ch) == "Cc" else ch for ch in text)


def display_width(text: str) -> int:
    """Return column width of ``text`` ignoring ANSI escape sequences."""
    plain = ANSI_ESCAPE_RE.sub("", text)
    return sum(char_display_width(ch) for ch in plain)


def clip_text(text: str, max_cols: int) -> str:
    """Trim plain ``text`` to at most ``max_cols`` display columns.

    A wide character that would straddle the limit is dropped entirely.
    """
    if max_cols <= 0 or not text:
        return ""

    out: list[str] = []
    col = 0
    for ch in text:
        w = char_display_width(ch)
        if col + w > max_cols:
            break
        out.append(ch)
        col += w
    return "".join(out)


def fit_text(text: str, width: int, pad: bool = False) -> str:
    """Sanitize and clip ``text`` to ``width``; optionally pad with spaces to fill it."""
    clipped = clip_text(sanitize_text(text), width)
    if pad:
        missing = width - display_width(clipped)
        if missing > 0:
            clipped += " " * missing
    return clipped
