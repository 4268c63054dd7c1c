"""Browser actions and their default key bindings."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping

from .key_registry import KeyComboBinding, KeyComboRegistry

ACTION_QUIT = "quit"
ACTION_OPEN = "open"
ACTION_EDIT = "edit"
ACTION_BACKWARD = "backward"
ACTION_FORWARD = "forward"
ACTION_UP = "up"
ACTION_DOWN = "down"
ACTION_TOGGLE_HIDDEN = "toggle_hidden"
ACTION_REFRESH = "refresh"
TAB_ACTIONS: tuple[str, ...] = tuple(f"tab_{number}" for number in range(1, 10))

ACTIONS: tuple[str, ...] = (
    ACTION_QUIT,
    ACTION_OPEN,
    ACTION_EDIT,
    ACTION_BACKWARD,
    ACTION_FORWARD,
    ACTION_UP,
    ACTION_DOWN,
    ACTION_TOGGLE_HIDDEN,
    ACTION_REFRESH,
    *TAB_ACTIONS,
)

DEFAULT_KEY_BINDINGS: dict[str, tuple[str, ...]] = {
    ACTION_QUIT: ("q", "CTRL_C"),
    ACTION_OPEN: ("ENTER_CR", "ENTER_LF"),
    ACTION_EDIT: ("e",),
    ACTION_BACKWARD: ("h", "LEFT"),
    ACTION_FORWARD: ("l", "RIGHT"),
    ACTION_UP: ("k", "UP"),
    ACTION_DOWN: ("j", "DOWN"),
    ACTION_TOGGLE_HIDDEN: ("H",),
    ACTION_REFRESH: ("r", "CTRL_L"),
    **{action: (action[-1],) for action in TAB_ACTIONS},
}

# Friendly names accepted in config files.
_TOKEN_ALIASES: dict[str, tuple[str, ...]] = {
    "ENTER": ("ENTER_CR", "ENTER_LF"),
    "RETURN": ("ENTER_CR", "ENTER_LF"),
    "SPACE": (" ",),
}


def expand_key_token(token: str) -> tuple[str, ...]:
    """Map a configured key name to the tokens ``read_key`` produces.

    Single characters are case-sensitive (``h`` and ``H`` differ); longer
    names are case-insensitive.
    """
    if len(token) == 1:
        return (token,)
    upper = token.strip().upper()
    if not upper:
        return ()
    return _TOKEN_ALIASES.get(upper, (upper,))


def tab_index_for_action(action: str) -> int | None:
    """Return the 0-based tab index for ``tab_N`` actions."""
    if action in TAB_ACTIONS:
        return int(action[-1]) - 1
    return None


def build_key_registry(
    bindings: Mapping[str, Iterable[str]],
    handlers: Mapping[str, Callable[[], bool | None]],
) -> KeyComboRegistry:
    """Bind every configured key of every action that has a handler."""
    registry = KeyComboRegistry()
    for action, combos in bindings.items():
        handler = handlers.get(action)
        if handler is None:
            continue
        registry.register_binding(KeyComboBinding(combos=tuple(combos), handler=handler))
    return registry


__all__ = [
    "ACTIONS",
    "ACTION_QUIT",
    "ACTION_OPEN",
    "ACTION_EDIT",
    "ACTION_BACKWARD",
    "ACTION_FORWARD",
    "ACTION_UP",
    "ACTION_DOWN",
    "ACTION_TOGGLE_HIDDEN",
    "ACTION_REFRESH",
    "TAB_ACTIONS",
    "DEFAULT_KEY_BINDINGS",
    "expand_key_token",
    "tab_index_for_action",
    "build_key_registry",
]
