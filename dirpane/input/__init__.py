"""Input-layer public API for key decoding and action dispatch.

Exports are split between low-level terminal decoding (`read_key`) and the
action bindings used by the runtime.
"""

from .reader import ESC_SEQUENCE_TIMEOUT_MS, _PENDING_BYTES, read_key
from .key_registry import KeyComboBinding, KeyComboRegistry
from .keys import (
    ACTIONS,
    DEFAULT_KEY_BINDINGS,
    TAB_ACTIONS,
    build_key_registry,
    expand_key_token,
    tab_index_for_action,
)

__all__ = [
    "read_key",
    "_PENDING_BYTES",
    "ESC_SEQUENCE_TIMEOUT_MS",
    "KeyComboBinding",
    "KeyComboRegistry",
    "ACTIONS",
    "DEFAULT_KEY_BINDINGS",
    "TAB_ACTIONS",
    "build_key_registry",
    "expand_key_token",
    "tab_index_for_action",
]
