"""Command-line front door for dirpane.

Parses CLI options, resolves the starting directory and the config file, and
dispatches into the interactive browser runtime.
"""

from __future__ import annotations

import argparse
import dataclasses
import locale
from pathlib import Path

from .debug import configure_logging, get_logger
from .navigation.tabs import MAX_VIEW_COUNT
from .runtime import run_browser
from .runtime.config import load_browser_config
from .ui_theme import available_theme_names

log = get_logger("cli")


def _view_count(value: str) -> int:
    """argparse type for the number of tabs."""
    try:
        parsed = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid integer value: {value!r}") from exc
    if not 1 <= parsed <= MAX_VIEW_COUNT:
        raise argparse.ArgumentTypeError(f"value must be between 1 and {MAX_VIEW_COUNT}")
    return parsed


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="dirpane",
        description="Browse directories in a two-pane terminal view with numbered tabs.",
    )
    parser.add_argument("path", nargs="?", default=None, help="Starting directory. Defaults to current directory.")
    parser.add_argument(
        "--tabs",
        type=_view_count,
        default=None,
        help=f"Number of tabs (1-{MAX_VIEW_COUNT}, default from config or 4).",
    )
    parser.add_argument("--show-hidden", action="store_true", help="Start with dotfiles visible.")
    parser.add_argument(
        "--theme",
        default=None,
        help=f"UI theme name ({', '.join(available_theme_names())}).",
    )
    parser.add_argument("--no-color", action="store_true", help="Disable color output.")
    parser.add_argument("--config", type=Path, default=None, help="Read settings from this JSON file.")
    parser.add_argument("--debug", action="store_true", help="Write a debug log file.")
    parser.add_argument("--log-file", default=None, help="Debug log location (implies --debug).")
    return parser


def _set_collation_locale() -> None:
    try:
        locale.setlocale(locale.LC_COLLATE, "")
    except locale.Error as exc:
        log.debug("keeping C collation: %s", exc)


def main(argv: list[str] | None = None, default_path: Path | None = None) -> None:
    """Parse CLI arguments and launch dirpane on a directory.

    ``default_path`` is primarily for tests; when omitted the current working
    directory is used.
    """
    args = build_parser().parse_args(argv)
    debug = True if args.debug or args.log_file else None
    configure_logging(debug=debug, log_path=args.log_file)
    _set_collation_locale()

    if default_path is None:
        default_path = Path.cwd()
    path = Path(args.path) if args.path is not None else default_path
    if not path.exists():
        raise SystemExit(f"Path not found: {path}")
    if not path.is_dir():
        raise SystemExit(f"Not a directory: {path}")

    config = load_browser_config(args.config)
    overrides: dict[str, object] = {}
    if args.tabs is not None:
        overrides["view_count"] = args.tabs
    if args.show_hidden:
        overrides["show_hidden"] = True
    if overrides:
        config = dataclasses.replace(config, **overrides)
    log.debug("config: %s", config)

    run_browser(path.resolve(), config, args.theme, args.no_color)
