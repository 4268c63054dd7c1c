"""Read-only JSON settings.

Loads view count, pane split, hidden-file default, external programs, theme,
and key bindings. All access is defensive: a malformed or missing config, or
any single invalid key, falls back to defaults. Nothing is ever written back.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path

from platformdirs import user_config_dir

from ..debug import get_logger
from ..input.keys import ACTIONS, DEFAULT_KEY_BINDINGS, expand_key_token
from ..navigation.tabs import DEFAULT_VIEW_COUNT, MAX_VIEW_COUNT
from ..render.layout import DEFAULT_PANE_RATIO, MAX_PANE_RATIO, MIN_PANE_RATIO

log = get_logger("config")

APP_NAME = "dirpane"
CONFIG_FILENAME = "config.json"
CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME


@dataclass(frozen=True)
class BrowserConfig:
    """Validated settings with defaults matching the stock key layout."""

    view_count: int = DEFAULT_VIEW_COUNT
    pane_ratio: float = DEFAULT_PANE_RATIO
    draw_borders: bool = True
    show_hidden: bool = False
    opener: str | None = None
    editor: str | None = None
    theme: str | None = None
    key_bindings: dict[str, tuple[str, ...]] = field(default_factory=lambda: dict(DEFAULT_KEY_BINDINGS))


def load_config(path: Path | None = None) -> dict[str, object]:
    """Load the JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    config_path = CONFIG_PATH if path is None else path
    try:
        data = json.loads(config_path.read_text(encoding="utf-8"))
    except FileNotFoundError:
        return {}
    except (OSError, ValueError) as exc:
        log.debug("ignoring config %s: %s", config_path, exc)
        return {}
    if not isinstance(data, dict):
        log.debug("ignoring config %s: top level is not an object", config_path)
        return {}
    return data


def _coerce_view_count(value: object) -> int:
    """Accept integers in ``[1, 9]``; booleans and anything else use the default."""
    if isinstance(value, bool) or not isinstance(value, int):
        return DEFAULT_VIEW_COUNT
    if not 1 <= value <= MAX_VIEW_COUNT:
        return DEFAULT_VIEW_COUNT
    return value


def _coerce_pane_ratio(value: object) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return DEFAULT_PANE_RATIO
    if not MIN_PANE_RATIO <= value <= MAX_PANE_RATIO:
        return DEFAULT_PANE_RATIO
    return float(value)


def _coerce_bool(value: object, default: bool) -> bool:
    return value if isinstance(value, bool) else default


def _coerce_command(value: object) -> str | None:
    if not isinstance(value, str):
        return None
    stripped = value.strip()
    return stripped if stripped else None


def _coerce_key_bindings(value: object) -> dict[str, tuple[str, ...]]:
    """Overlay configured ``{action: key | [keys]}`` onto the defaults.

    Unknown actions and non-string keys are dropped. An action configured with
    no valid keys keeps its default binding.
    """
    bindings = dict(DEFAULT_KEY_BINDINGS)
    if not isinstance(value, Mapping):
        return bindings
    for action, raw_keys in value.items():
        if action not in ACTIONS:
            log.debug("ignoring binding for unknown action %r", action)
            continue
        if isinstance(raw_keys, str):
            raw_keys = [raw_keys]
        if not isinstance(raw_keys, list):
            continue
        tokens: list[str] = []
        for raw_key in raw_keys:
            if not isinstance(raw_key, str):
                continue
            for token in expand_key_token(raw_key):
                if token not in tokens:
                    tokens.append(token)
        if tokens:
            bindings[action] = tuple(tokens)
    return bindings


def load_browser_config(path: Path | None = None) -> BrowserConfig:
    """Load and validate settings into a ``BrowserConfig``."""
    data = load_config(path)
    return BrowserConfig(
        view_count=_coerce_view_count(data.get("view_count", DEFAULT_VIEW_COUNT)),
        pane_ratio=_coerce_pane_ratio(data.get("pane_ratio", DEFAULT_PANE_RATIO)),
        draw_borders=_coerce_bool(data.get("draw_borders"), True),
        show_hidden=_coerce_bool(data.get("show_hidden"), False),
        opener=_coerce_command(data.get("opener")),
        editor=_coerce_command(data.get("editor")),
        theme=_coerce_command(data.get("theme")),
        key_bindings=_coerce_key_bindings(data.get("keys")),
    )
