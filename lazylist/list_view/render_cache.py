"""Cached rendered rows for a list view and the per-frame draw list.

The buffer holds one formatted line per item passing the active filter.
It is rebuilt wholesale only when the context is dirty or the buffer length
no longer matches the content; localized changes patch a single slot.
"""

from __future__ import annotations

import logging

from ..ansi import goto_xy
from ..errors import ListViewError
from .context import WidgetContext
from .listable import Listable
from .rendering import render_empty_rows
from .viewport import Viewport

logger = logging.getLogger(__name__)


class RenderCache:
    def __init__(self, context: WidgetContext) -> None:
        self.context = context
        self.buffer: list[str] = []

    def refresh(self, listable: Listable, viewport: Viewport) -> None:
        """Run the content hook, clamp selection, then rebuild if stale.

        A shrunk collection moves the selection back by exactly one row; larger
        shrinks are expected to reposition the selection themselves.
        """
        try:
            listable.on_refresh()
        except ListViewError as exc:
            logger.warning("refresh hook failed: %s", exc)

        lines = listable.length()
        if viewport.selection >= lines and viewport.selection != 0:
            viewport.selection -= 1
        viewport.keep_visible()

        if self.context.is_dirty() or len(self.buffer) != lines:
            self.buffer = listable.render()
            self.context.set_clean()

    def patch(self, index: int, line: str) -> None:
        """Overwrite one rendered slot in place; out-of-range is ignored."""
        if 0 <= index < len(self.buffer):
            self.buffer[index] = line

    def drawlist(self, viewport: Viewport) -> str:
        """Compose the visible slice, inverting the selected row."""
        theme = self.context.theme
        coordinates = self.context.coordinates
        ysize = coordinates.ysize
        visible = self.buffer[viewport.offset : viewport.offset + ysize]

        out: list[str] = [theme.reset]
        for row, line in enumerate(visible):
            out.append(theme.normal)
            if row == viewport.selection - viewport.offset:
                out.append(theme.reverse)
            out.append(goto_xy(coordinates.x, coordinates.y + row))
            out.append(line)
            out.append(theme.reset)

        out.append(render_empty_rows(coordinates, len(visible), theme))
        return "".join(out)


__all__ = ["RenderCache"]
