"""Main interactive event loop for the terminal UI.

Each iteration re-reads the terminal size, refreshes the view, draws one
frame and feeds one decoded key to the view. Keys the view leaves unhandled
are interpreted here (quit).
"""

from __future__ import annotations

import logging
import os
import shutil
from collections.abc import Callable

from ..ansi import CLEAR_LINE, goto_xy, sized_string, strip_ansi
from ..list_view import Coordinates, ListView

QUIT_KEYS = frozenset({"q", "CTRL_C"})

logger = logging.getLogger(__name__)


def layout_coordinates(columns: int, rows: int) -> Coordinates:
    """List area between the header row and the footer/status row."""
    return Coordinates(x=1, y=2, width=max(1, columns), height=max(1, rows - 2))


def compose_frame(view: ListView, columns: int, rows: int) -> str:
    """Header, list draw list, then footer or pending status message."""
    theme = view.context.theme
    header = sized_string(strip_ansi(view.render_header()), columns)
    status = view.context.status_message
    footer = status or view.render_footer()
    footer_color = theme.status if status else theme.footer
    return "".join(
        [
            goto_xy(1, 1),
            CLEAR_LINE,
            theme.header,
            header,
            theme.reset,
            view.get_drawlist(),
            goto_xy(1, rows),
            CLEAR_LINE,
            footer_color,
            sized_string(strip_ansi(footer), max(0, columns - 1)),
            theme.reset,
        ]
    )


def run_main_loop(
    view: ListView,
    write: Callable[[str], None],
    read_key: Callable[[], str],
    terminal_size: Callable[[], os.terminal_size] = shutil.get_terminal_size,
) -> None:
    """Run until a quit key or end of input."""
    context = view.context
    while True:
        size = terminal_size()
        coordinates = layout_coordinates(size.columns, size.lines)
        if coordinates != context.coordinates:
            # Rows are formatted for a fixed width.
            if coordinates.width != context.coordinates.width:
                context.set_dirty()
            context.coordinates = coordinates

        view.refresh()
        write(compose_frame(view, size.columns, size.lines))

        key = read_key()
        if not key:
            return
        context.status_message = ""
        if view.handle_key(key):
            continue
        if key in QUIT_KEYS:
            return
        logger.debug("unhandled key %r", key)


__all__ = ["QUIT_KEYS", "compose_frame", "layout_coordinates", "run_main_loop"]
