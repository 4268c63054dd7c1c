"""Key token to action-handler dispatch table."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass


@dataclass(frozen=True)
class KeyComboBinding:
    """Mapping from one or more key tokens to a single action callback."""

    combos: tuple[str, ...]
    handler: Callable[[], bool | None]


class KeyComboRegistry:
    """Dispatch table; later bindings win for a token bound twice."""

    def __init__(self) -> None:
        self._handlers: dict[str, Callable[[], bool | None]] = {}

    def register_binding(self, binding: KeyComboBinding) -> KeyComboRegistry:
        for combo in binding.combos:
            self._handlers[combo] = binding.handler
        return self

    def bound_keys(self) -> tuple[str, ...]:
        return tuple(sorted(self._handlers))

    def dispatch(self, key: str) -> bool | None:
        """Invoke bound handler for ``key``; ``None`` means nothing is bound."""
        handler = self._handlers.get(key)
        if handler is None:
            return None
        return handler()
