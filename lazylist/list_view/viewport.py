"""Selection and scroll-offset bookkeeping for a list viewport.

Invariant kept by every operation: ``offset <= selection < offset + ysize``
where ``ysize`` is read fresh from the widget context on each call.
"""

from __future__ import annotations

from collections.abc import Callable

from .context import WidgetContext


class Viewport:
    """Owns selection index, offset and the sticky mtime-seeking flag."""

    def __init__(self, context: WidgetContext, length: Callable[[], int]) -> None:
        self.context = context
        self._length = length
        self.selection = 0
        self.offset = 0
        self.seeking = False

    @property
    def ysize(self) -> int:
        return self.context.coordinates.ysize

    @property
    def lines(self) -> int:
        return self._length()

    def reset(self) -> None:
        self.selection = 0
        self.offset = 0
        self.seeking = False

    def move_up(self) -> None:
        if self.selection == 0:
            return

        if self.selection - self.offset <= 0:
            self.offset -= 1

        self.selection -= 1
        self.seeking = False

    def move_down(self) -> None:
        lines = self.lines
        ysize = self.ysize

        if lines == 0 or self.selection >= lines - 1:
            return

        # Scroll only once the next row would fall below the window.
        if self.selection + 1 >= ysize and self.selection + 1 - self.offset >= ysize:
            self.offset += 1

        self.selection += 1
        self.seeking = False

    def set_selection(self, position: int) -> None:
        """Select ``position`` keeping two rows of lookahead below it.

        The offset grows until ``position + 2 < ysize + offset``. It never
        passes ``position`` (tiny windows) nor the last full page of content.
        """
        ysize = self.ysize
        offset = 0
        while position + 2 >= ysize + offset:
            offset += 1

        last_page = max(0, self.lines - ysize)
        self.offset = max(0, min(offset, position, last_page))
        self.selection = position

    def keep_visible(self) -> None:
        """Re-establish the window invariant after a resize or clamp."""
        ysize = self.ysize
        if self.selection < self.offset:
            self.offset = self.selection
        elif self.selection >= self.offset + ysize:
            self.offset = self.selection - ysize + 1


__all__ = ["Viewport"]
