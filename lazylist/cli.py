"""Command-line front door for lazylist.

Parses CLI options, resolves the directory to browse and loads settings.
Then dispatches into the interactive list-view runtime.
"""

from __future__ import annotations

import argparse
import sys
from dataclasses import replace
from pathlib import Path

from .errors import ListViewError, format_error
from .file_model import SortBy
from .runtime import run_list_view
from .runtime.config import load_list_settings, save_list_settings
from .runtime.logging import configure_logging
from .ui_theme import theme_names


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Browse a directory in a scrollable terminal list.")
    parser.add_argument("path", nargs="?", default=None, help="Directory to open. Defaults to current directory.")
    parser.add_argument(
        "--theme",
        default=None,
        help=f"UI theme name ({', '.join(theme_names())}).",
    )
    parser.add_argument("--no-color", action="store_true", help="Disable color output even on TTY.")
    parser.add_argument(
        "--sort",
        choices=[member.value for member in SortBy],
        default=None,
        help="Initial sort key (default: last used).",
    )
    parser.add_argument("--hidden", action="store_true", help="Show hidden files.")
    parser.add_argument(
        "--log-level",
        default=None,
        help="Log level for the session log file, or 'off'.",
    )
    return parser


def main(default_path: Path | None = None, argv: list[str] | None = None) -> None:
    """Parse CLI arguments and launch lazylist on a directory.

    ``default_path`` is primarily for tests; when omitted the current working
    directory is used.
    """
    args = build_parser().parse_args(argv)
    configure_logging(args.log_level)

    if default_path is None:
        default_path = Path.cwd()
    path = Path(args.path or default_path)
    if not path.is_dir():
        raise SystemExit(f"Not a directory: {path}")
    if not sys.stdin.isatty() or not sys.stdout.isatty():
        raise SystemExit("lazylist needs an interactive terminal.")

    settings = load_list_settings()
    if args.sort is not None:
        settings = replace(settings, sort_by=SortBy(args.sort))
    if args.hidden:
        settings = replace(settings, show_hidden=True)
    if args.theme is not None:
        settings = replace(settings, theme=args.theme)

    try:
        final_settings = run_list_view(path, settings, no_color=args.no_color)
    except ListViewError as exc:
        raise SystemExit(format_error(exc)) from exc
    save_list_settings(final_settings)


if __name__ == "__main__":
    main()
