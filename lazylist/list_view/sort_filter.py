"""Ordering and visibility mutations that preserve selection identity.

Every mutation remembers the selected item, applies the change, re-sorts,
re-locates the item by equality (falling back to the first row), marks the
view dirty and reports the new state as a status message.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from ..errors import ListViewError, NotFoundError, format_error
from ..file_model import Files, SortBy
from .locate import locate, locate_or_first

if TYPE_CHECKING:
    from .view import FileListView

logger = logging.getLogger(__name__)


class SortFilterController:
    def __init__(self, view: FileListView) -> None:
        self.view = view

    @property
    def content(self) -> Files:
        return self.view.content

    def _finish(self, message: str | None = None) -> None:
        self.view.context.set_dirty()
        self.view.refresh()
        if message is not None:
            self.view.show_status(message)

    def cycle_sort(self) -> None:
        item = self.view.selected_file()
        self.content.cycle_sort()
        self.content.sort()
        self.view.select_file(item)
        self._finish(f"Sorting by: {self.content.sort_by}")

    def reverse_sort(self) -> None:
        item = self.view.selected_file()
        self.content.reverse_sort()
        self.content.sort()
        self.view.select_file(item)
        prefix = "Reversed sorting" if self.content.reverse else "Sorting"
        self._finish(f"{prefix} by: {self.content.sort_by}")

    def toggle_dirs_first(self) -> None:
        item = self.view.selected_file()
        self.content.dirs_first = not self.content.dirs_first
        self.content.sort()
        self.view.select_file(item)
        self._finish(f"Directories first: {self.content.dirs_first}")

    def toggle_hidden(self) -> None:
        """Flip hidden-file visibility and rescan; the item may disappear."""
        item = self.view.selected_file()
        self.content.toggle_hidden()
        try:
            self.content.reload_files()
        except ListViewError as exc:
            self.content.toggle_hidden()
            logger.warning("reload after toggling hidden files failed: %s", exc)
            self.view.show_status(format_error(exc))
            return
        self.view.select_file(item)
        self._finish(f"Showing hidden files: {self.content.show_hidden}")

    def select_next_mtime(self) -> None:
        self._seek_mtime(forward=True)

    def select_prev_mtime(self) -> None:
        self._seek_mtime(forward=False)

    def _seek_mtime(self, forward: bool) -> None:
        """Step through items by modification time without keeping that order.

        Outside seeking mode, or when the step would leave the sequence, the
        selection jumps to the newest (forward) or oldest (backward) item.
        """
        content = self.content
        viewport = self.view.viewport
        if len(content) == 0:
            return

        item = self.view.selected_file()
        dirs_first = content.dirs_first
        sort_by = content.sort_by

        content.dirs_first = False
        content.sort_by = SortBy.MTIME
        content.sort()
        self.view.select_file(item)

        last = len(content) - 1
        if forward:
            if not viewport.seeking or viewport.selection >= last:
                viewport.selection = 0
                viewport.offset = 0
            else:
                viewport.move_down()
        else:
            if not viewport.seeking or viewport.selection == 0:
                viewport.set_selection(last)
            else:
                viewport.move_up()

        item = self.view.selected_file()
        content.dirs_first = dirs_first
        content.sort_by = sort_by
        content.sort()
        self.view.select_file(item)
        viewport.seeking = True
        self._finish()

    def filter(self, text: str | None = None) -> None:
        """Apply a substring filter, prompting when ``text`` is not given.

        A cancelled prompt or empty text clears the filter.
        """
        if text is None:
            text = self.view.minibuffer("filter")
        self.content.set_filter(text)

        length = len(self.content)
        if self.view.get_selection() > length:
            self.view.set_selection(length)

        filter_text = self.content.get_filter()
        self._finish(f"Filter: {filter_text}" if filter_text else "Filter cleared")

    def find(self, name: str | None = None) -> bool:
        """Select the first item whose name contains ``name``, ignoring case.

        Prompts when ``name`` is not given; a cancelled prompt returns
        ``False``. Raises ``NotFoundError`` when nothing matches, leaving the
        selection untouched. A match hidden by the filter clears the filter.
        """
        if name is None:
            name = self.view.minibuffer("find")
            if name is None:
                return False

        item = self.content.find(name.lower())
        if item is None:
            raise NotFoundError(name)

        position = locate(self.content.visible(), item)
        if position is None:
            self.content.set_filter(None)
            self.view.context.set_dirty()
            position = locate_or_first(self.content.visible(), item)

        self.view.set_selection(position)
        self.view.refresh()
        return True


__all__ = ["SortFilterController"]
