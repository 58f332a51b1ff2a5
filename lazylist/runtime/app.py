"""Interactive session bootstrap: build the view, run the loop, keep settings."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

from ..file_model import Files, TagStore
from ..input import read_key
from ..list_view import FileListView, WidgetContext
from ..lscolors import LsColors
from ..ui_theme import resolve_theme
from .config import ListSettings
from .loop import layout_coordinates, run_main_loop
from .minibuffer import Minibuffer
from .terminal import TerminalController

logger = logging.getLogger(__name__)


def build_file_view(path: Path, settings: ListSettings, context: WidgetContext) -> FileListView:
    """Open ``path`` with stored settings; raises ``PathOpenError``."""
    files = Files.new_from_path(
        path,
        sort_by=settings.sort_by,
        reverse=settings.reverse,
        dirs_first=settings.dirs_first,
        show_hidden=settings.show_hidden,
        tag_store=TagStore(),
        ls_colors=LsColors.from_environ(),
    )
    view = FileListView(context, files)
    view.refresh()
    return view


def settings_from_view(view: FileListView, theme: str | None) -> ListSettings:
    content = view.content
    return ListSettings(
        sort_by=content.sort_by,
        reverse=content.reverse,
        dirs_first=content.dirs_first,
        show_hidden=content.show_hidden,
        theme=theme,
    )


def run_list_view(path: Path, settings: ListSettings, *, no_color: bool = False) -> ListSettings:
    """Browse ``path`` interactively and return the settings in effect on exit."""
    stdin_fd = sys.stdin.fileno()
    stdout_fd = sys.stdout.fileno()
    terminal = TerminalController(stdin_fd, stdout_fd)
    theme = resolve_theme(settings.theme, no_color=no_color)

    minibuffer = Minibuffer(
        read_key=lambda: read_key(stdin_fd),
        write=terminal.write,
        row=lambda: terminal.size().lines,
        width=lambda: terminal.size().columns,
        theme=theme,
    )
    size = terminal.size()
    context = WidgetContext(
        coordinates=layout_coordinates(size.columns, size.lines),
        theme=theme,
        prompt=minibuffer,
    )
    view = build_file_view(path, settings, context)
    logger.info("browsing %s", view.content.directory)

    with terminal.raw_mode():
        run_main_loop(view, terminal.write, lambda: read_key(stdin_fd), terminal_size=terminal.size)

    return settings_from_view(view, settings.theme)


__all__ = ["build_file_view", "run_list_view", "settings_from_view"]
