"""Main interactive event loop for the terminal UI.

Polls the terminal size, expires status messages, repaints when dirty, and
dispatches decoded keys. Feature logic lives in the injected callbacks.
"""

from __future__ import annotations

import shutil
import time
from collections.abc import Callable
from dataclasses import dataclass

from ..input import read_key
from .terminal import TerminalController


@dataclass(frozen=True)
class RuntimeLoopTiming:
    """Timing constants controlling interactive loop behavior."""

    key_timeout_ms: int = 120


@dataclass(frozen=True)
class RuntimeLoopCallbacks:
    """Injected operations used by ``run_main_loop``."""

    resize: Callable[[int, int], None]
    expire_status_message: Callable[[float], None]
    needs_redraw: Callable[[], bool]
    draw: Callable[[], None]
    handle_key: Callable[[str], bool]
    terminal_size: Callable[[], tuple[int, int]] | None = None


def _default_terminal_size() -> tuple[int, int]:
    term = shutil.get_terminal_size((80, 24))
    return term.columns, term.lines


def run_main_loop(
    terminal: TerminalController,
    stdin_fd: int,
    timing: RuntimeLoopTiming,
    callbacks: RuntimeLoopCallbacks,
) -> None:
    """Run the main interactive TUI loop until a handler asks to quit.

    Each iteration handles terminal resize bookkeeping, optional rendering,
    and one key read with a short timeout so resizes are noticed while idle.
    """
    ops = callbacks
    terminal_size = ops.terminal_size if ops.terminal_size is not None else _default_terminal_size
    last_size: tuple[int, int] | None = None
    skip_next_lf = False

    with terminal.raw_mode():
        while True:
            size = terminal_size()
            if size != last_size:
                last_size = size
                ops.resize(*size)
            ops.expire_status_message(time.monotonic())
            if ops.needs_redraw():
                ops.draw()

            try:
                key = read_key(stdin_fd, timeout_ms=timing.key_timeout_ms)
            except KeyboardInterrupt:
                continue
            if key == "":
                continue
            # Terminals sending CR LF for Enter would otherwise act twice.
            if skip_next_lf and key == "ENTER_LF":
                skip_next_lf = False
                continue
            skip_next_lf = key == "ENTER_CR"

            if ops.handle_key(key):
                break
