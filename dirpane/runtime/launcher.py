"""External program launching for open and edit actions.

Returns an error message string instead of raising for UI-friendly handling;
callers only care whether the program ran.
"""

from __future__ import annotations

import enum
import os
import shlex
import subprocess
import sys
from collections.abc import Callable, Mapping, Sequence

from ..debug import get_logger

log = get_logger("launcher")

DEFAULT_EDITOR = "nvim"


class LaunchMode(enum.Enum):
    """How the browser waits for a launched program."""

    FOREGROUND = "foreground"
    SUPPRESSED = "suppressed"
    DETACHED = "detached"


def default_opener(platform: str | None = None) -> str:
    """Return the desktop "open with default application" command."""
    platform = sys.platform if platform is None else platform
    if platform == "darwin":
        return "open"
    return "xdg-open"


def resolve_editor(configured: str | None, environ: Mapping[str, str] | None = None) -> str:
    """Pick the editor: config value, then ``$EDITOR``, then ``nvim``."""
    if configured:
        return configured
    environ = os.environ if environ is None else environ
    editor_env = environ.get("EDITOR", "").strip()
    return editor_env or DEFAULT_EDITOR


def launch(
    program: str,
    args: Sequence[str],
    mode: LaunchMode,
    disable_tui_mode: Callable[[], None] | None = None,
    enable_tui_mode: Callable[[], None] | None = None,
) -> str | None:
    """Run ``program`` with ``args``; return an error message or ``None``.

    ``program`` may carry its own arguments (``"code -w"``). Foreground
    launches leave TUI mode around the child and wait for it; suppressed
    launches wait with output discarded; detached launches return at once in
    a new session.
    """
    try:
        cmd = shlex.split(program)
    except ValueError as exc:
        return f"Cannot launch {program!r}: {exc}"
    if not cmd:
        return "Cannot launch: no program configured."
    argv = [*cmd, *args]
    log.debug("launch %s mode=%s", argv, mode.value)

    if mode is LaunchMode.DETACHED:
        try:
            subprocess.Popen(
                argv,
                stdin=subprocess.DEVNULL,
                stdout=subprocess.DEVNULL,
                stderr=subprocess.DEVNULL,
                start_new_session=True,
            )
        except OSError as exc:
            return f"Failed to launch {cmd[0]}: {exc}"
        return None

    if mode is LaunchMode.SUPPRESSED:
        try:
            subprocess.run(argv, stdout=subprocess.DEVNULL, stderr=subprocess.DEVNULL, check=False)
        except OSError as exc:
            return f"Failed to launch {cmd[0]}: {exc}"
        return None

    if disable_tui_mode is not None:
        disable_tui_mode()
    try:
        subprocess.run(argv, check=False)
    except OSError as exc:
        return f"Failed to launch {cmd[0]}: {exc}"
    finally:
        if enable_tui_mode is not None:
            enable_tui_mode()
    return None
