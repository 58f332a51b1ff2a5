"""List-view facade composing viewport, render cache and content hooks.

``ListView`` is generic over its content; each content kind subclasses it
once and fills in the ``Listable`` hooks. ``FileListView`` is the directory
listing implementation with sorting, filtering and path navigation.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Generic, TypeVar

from ..errors import ListViewError, NoGrandParentError, format_error
from ..file_model import FileItem, Files
from .context import WidgetContext
from .key_dispatch import KeyDispatcher
from .listable import Listable
from .locate import locate_or_first
from .render_cache import RenderCache
from .rendering import render_file_line
from .sort_filter import SortFilterController
from .viewport import Viewport

T = TypeVar("T")

logger = logging.getLogger(__name__)


class ListView(Listable, Generic[T]):
    """Selection, scrolling and cached drawing for any listable content."""

    def __init__(self, context: WidgetContext, content: T) -> None:
        self.context = context
        self.content = content
        self.viewport = Viewport(context, self.length)
        self.cache = RenderCache(context)

    @property
    def selection(self) -> int:
        return self.viewport.selection

    @property
    def offset(self) -> int:
        return self.viewport.offset

    @property
    def seeking(self) -> bool:
        return self.viewport.seeking

    @property
    def buffer(self) -> list[str]:
        return self.cache.buffer

    def get_selection(self) -> int:
        return self.viewport.selection

    def move_up(self) -> None:
        self.viewport.move_up()

    def move_down(self) -> None:
        self.viewport.move_down()

    def set_selection(self, position: int) -> None:
        self.viewport.set_selection(position)

    def refresh(self) -> None:
        self.cache.refresh(self, self.viewport)

    def get_drawlist(self) -> str:
        return self.cache.drawlist(self.viewport)

    def handle_key(self, key: str) -> bool:
        """Route ``key`` through the content's key hook; ``False`` if unhandled."""
        return self.on_key(key)

    def replace_content(self, content: T) -> None:
        """Swap in new content, resetting selection and scroll position."""
        self.content = content
        self.viewport.reset()
        self.context.set_dirty()
        self.refresh()

    def show_status(self, message: str) -> None:
        self.context.show_status(message)

    def minibuffer(self, label: str) -> str | None:
        return self.context.minibuffer(label)


class FileListView(ListView[Files]):
    """Directory listing view."""

    def __init__(self, context: WidgetContext, content: Files) -> None:
        super().__init__(context, content)
        self.sorting = SortFilterController(self)
        self.keys = KeyDispatcher(self)

    def length(self) -> int:
        return len(self.content)

    def render(self) -> list[str]:
        return [self.render_line(item) for item in self.content.visible()]

    def render_line(self, item: FileItem) -> str:
        return render_file_line(item, self.context.coordinates.xsize, self.context.theme)

    def render_header(self) -> str:
        return str(self.content.directory)

    def render_footer(self) -> str:
        content = self.content
        total = len(content)
        position = self.selection + 1 if total else 0
        parts = [f"{position}/{total}", f"sort: {content.sort_by}"]
        if content.reverse:
            parts.append("reversed")
        if content.dirs_first:
            parts.append("dirs-first")
        if content.show_hidden:
            parts.append("hidden")
        if content.get_filter():
            parts.append(f"filter: {content.get_filter()}")
        return "  ".join(parts[:2]) + "".join(f" {part}" for part in parts[2:])

    def on_refresh(self) -> None:
        """Load metadata for rows about to be visible; stale rows mark dirty."""
        visible_file_num = self.selection + self.context.coordinates.ysize
        self.content.meta_upto(visible_file_num)

        if self.content.is_dirty():
            self.context.set_dirty()
            self.content.set_clean()

    def on_key(self, key: str) -> bool:
        return self.keys.dispatch(key)

    def selected_file(self) -> FileItem | None:
        if self.length() == 0:
            return None
        return self.content[min(self.selection, self.length() - 1)]

    def select_file(self, item: FileItem | None) -> None:
        self.set_selection(locate_or_first(self.content.visible(), item))

    def grand_parent(self) -> Path | None:
        item = self.selected_file()
        if item is not None:
            return item.grand_parent()
        parent = self.content.directory.parent
        if parent == self.content.directory:
            return None
        return parent

    def goto_grand_parent(self) -> bool:
        grand_parent = self.grand_parent()
        if grand_parent is None:
            self.show_status(format_error(NoGrandParentError()))
            return False
        return self.goto_path(grand_parent)

    def goto_selected(self) -> bool:
        item = self.selected_file()
        if item is None:
            return False
        return self.goto_path(item.path)

    def goto_path(self, path: Path) -> bool:
        """Replace the listing with ``path``; failures leave the view intact."""
        try:
            files = self.content.for_path(path)
        except ListViewError as exc:
            logger.info("cannot open %s: %s", path, exc)
            self.show_status(format_error(exc))
            return False
        self.replace_content(files)
        return True

    def multi_select_file(self) -> None:
        item = self.selected_file()
        if item is None:
            return
        item.toggle_selection()
        self.cache.patch(self.selection, self.render_line(item))
        self.move_down()

    def toggle_tag(self) -> None:
        """Toggle the persisted tag; raises ``TagError`` when it cannot be saved."""
        item = self.selected_file()
        if item is None:
            return
        self.content.toggle_tag(item)
        self.cache.patch(self.selection, self.render_line(item))
        self.move_down()


__all__ = ["ListView", "FileListView"]
