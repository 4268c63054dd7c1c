"""UI theme definitions and selection helpers.

Themes are ANSI palettes keyed by semantic render styles; the renderer never
emits raw color codes itself.
"""

from __future__ import annotations

from dataclasses import dataclass

from .render.styles import Style


@dataclass(frozen=True)
class UITheme:
    """Semantic ANSI palette used by the terminal surface."""

    name: str
    reset: str
    normal: str
    directory: str
    selected: str
    selected_directory: str
    tab: str
    tab_active: str
    path: str
    status: str
    empty: str
    error: str
    divider: str

    def sgr(self, style: Style) -> str:
        """Return the escape prefix for ``style``."""
        return getattr(self, style.value)


DEFAULT_THEME = UITheme(
    name="default",
    reset="\033[0m",
    normal="",
    directory="\033[1;34m",
    selected="\033[7m",
    selected_directory="\033[1;34;7m",
    tab="\033[2m",
    tab_active="\033[1;34m",
    path="\033[1m",
    status="\033[38;5;214m",
    empty="\033[37;41m",
    error="\033[1;31m",
    divider="\033[2m",
)

OCEAN_THEME = UITheme(
    name="ocean",
    reset="\033[0m",
    normal="\033[38;5;252m",
    directory="\033[1;38;5;45m",
    selected="\033[7m",
    selected_directory="\033[1;38;5;45;7m",
    tab="\033[2;38;5;110m",
    tab_active="\033[1;38;5;45m",
    path="\033[38;5;153m",
    status="\033[38;5;215m",
    empty="\033[38;5;231;48;5;24m",
    error="\033[38;5;203m",
    divider="\033[2;38;5;31m",
)

PLAIN_THEME = UITheme(
    name="plain",
    reset="\033[0m",
    normal="",
    directory="",
    selected="\033[7m",
    selected_directory="\033[7m",
    tab="",
    tab_active="\033[7m",
    path="",
    status="",
    empty="",
    error="",
    divider="",
)

_THEMES: dict[str, UITheme] = {
    DEFAULT_THEME.name: DEFAULT_THEME,
    OCEAN_THEME.name: OCEAN_THEME,
}


def available_theme_names() -> tuple[str, ...]:
    """Return selectable non-plain theme names."""
    return tuple(sorted(_THEMES.keys()))


def normalize_theme_name(name: str | None) -> str:
    """Return a valid theme name, falling back to default."""
    if not name:
        return DEFAULT_THEME.name
    candidate = str(name).strip().lower()
    if candidate in _THEMES:
        return candidate
    return DEFAULT_THEME.name


def resolve_theme(name: str | None, *, no_color: bool = False) -> UITheme:
    """Return concrete theme for requested name and color mode.

    ``no_color`` keeps reverse video so the selection stays visible.
    """
    if no_color:
        return PLAIN_THEME
    return _THEMES[normalize_theme_name(name)]


__all__ = [
    "UITheme",
    "DEFAULT_THEME",
    "OCEAN_THEME",
    "PLAIN_THEME",
    "available_theme_names",
    "normalize_theme_name",
    "resolve_theme",
]
