"""Directory listing collection: scanning, ordering, filtering, lazy metadata."""

from __future__ import annotations

import logging
import os
import re
from pathlib import Path

from ..errors import PathOpenError, TagError
from ..lscolors import LsColors
from .tags import TagStore
from .types import FileItem, SortBy

_DIGIT_RUN_RE = re.compile(r"(\d+)")

logger = logging.getLogger(__name__)


def natural_sort_key(name: str) -> tuple[tuple[object, ...], str]:
    """Case-insensitive key where digit runs compare numerically.

    ``re.split`` with a capture group yields text at even positions and digit
    runs at odd ones, so keys of different names always compare like-for-like.
    """
    parts = _DIGIT_RUN_RE.split(name.casefold())
    folded = tuple(int(part) if idx % 2 else part for idx, part in enumerate(parts))
    return folded, name


def scan_directory(
    directory: Path,
    show_hidden: bool,
    tag_store: TagStore | None = None,
) -> list[FileItem]:
    """List children of ``directory`` without stat metadata.

    Raises ``OSError`` when the directory cannot be scanned.
    """
    items: list[FileItem] = []
    with os.scandir(directory) as entries:
        for child in entries:
            name = child.name
            if not show_hidden and name.startswith("."):
                continue
            try:
                is_dir = child.is_dir()
            except OSError:
                is_dir = False
            path = Path(child.path)
            tagged = False
            if tag_store is not None:
                tagged = tag_store.is_tagged(path)
            items.append(FileItem(name=name, path=path, is_dir=is_dir, tagged=tagged))
    return items


class Files:
    """Ordered directory listing plus its sort, visibility and filter criteria.

    ``len()`` and indexing address the filtered view, which is the order the
    list view renders and selects in.
    """

    def __init__(
        self,
        directory: Path,
        items: list[FileItem],
        *,
        sort_by: SortBy = SortBy.NAME,
        reverse: bool = False,
        dirs_first: bool = True,
        show_hidden: bool = False,
        tag_store: TagStore | None = None,
        ls_colors: LsColors | None = None,
    ) -> None:
        self.directory = directory
        self.items = items
        self.sort_by = sort_by
        self.reverse = reverse
        self.dirs_first = dirs_first
        self.show_hidden = show_hidden
        self.tag_store = tag_store
        self.ls_colors = ls_colors
        self.filter_text: str | None = None
        self._dirty = True

    @classmethod
    def new_from_path(
        cls,
        path: Path,
        *,
        sort_by: SortBy = SortBy.NAME,
        reverse: bool = False,
        dirs_first: bool = True,
        show_hidden: bool = False,
        tag_store: TagStore | None = None,
        ls_colors: LsColors | None = None,
    ) -> Files:
        """Scan ``path`` and return a sorted listing.

        Raises ``PathOpenError`` when ``path`` is not a readable directory.
        """
        directory = Path(path).absolute()
        try:
            items = scan_directory(directory, show_hidden, tag_store)
        except OSError as exc:
            raise PathOpenError(exc) from exc

        files = cls(
            directory,
            items,
            sort_by=sort_by,
            reverse=reverse,
            dirs_first=dirs_first,
            show_hidden=show_hidden,
            tag_store=tag_store,
            ls_colors=ls_colors,
        )
        files.sort()
        return files

    def for_path(self, path: Path) -> Files:
        """Open ``path`` with this listing's sort and visibility settings."""
        return Files.new_from_path(
            path,
            sort_by=self.sort_by,
            reverse=self.reverse,
            dirs_first=self.dirs_first,
            show_hidden=self.show_hidden,
            tag_store=self.tag_store,
            ls_colors=self.ls_colors,
        )

    def visible(self) -> list[FileItem]:
        """Return items passing the active substring filter, in order."""
        if not self.filter_text:
            return list(self.items)
        return [item for item in self.items if self.filter_text in item.name]

    def __len__(self) -> int:
        return len(self.visible())

    def __getitem__(self, index: int) -> FileItem:
        return self.visible()[index]

    def is_dirty(self) -> bool:
        return self._dirty

    def set_dirty(self) -> None:
        self._dirty = True

    def set_clean(self) -> None:
        self._dirty = False

    def sort(self) -> None:
        """Order items by sort key, then partition directories, then reverse."""
        self.items.sort(key=lambda item: natural_sort_key(item.name))
        if self.sort_by is SortBy.SIZE:
            self.meta_all()
            self.items.sort(key=lambda item: item.size or 0, reverse=True)
        elif self.sort_by is SortBy.MTIME:
            self.meta_all()
            self.items.sort(key=lambda item: item.mtime_ns or 0, reverse=True)

        if self.dirs_first:
            self.items.sort(key=lambda item: not item.is_dir)
        if self.reverse:
            self.items.reverse()
        self._dirty = True

    def cycle_sort(self) -> None:
        self.sort_by = self.sort_by.cycle()

    def reverse_sort(self) -> None:
        self.reverse = not self.reverse

    def toggle_hidden(self) -> None:
        self.show_hidden = not self.show_hidden

    def reload_files(self) -> None:
        """Rescan the directory with current settings and re-sort.

        Raises ``PathOpenError`` when the directory is no longer readable.
        """
        try:
            self.items = scan_directory(self.directory, self.show_hidden, self.tag_store)
        except OSError as exc:
            raise PathOpenError(exc) from exc
        self.sort()

    def set_filter(self, text: str | None) -> None:
        self.filter_text = text or None
        self._dirty = True

    def get_filter(self) -> str | None:
        return self.filter_text

    def meta_upto(self, count: int) -> None:
        """Load metadata for the first ``count`` visible items still missing it."""
        loaded = 0
        for item in self.visible()[: max(0, count)]:
            if item.meta_loaded:
                continue
            item.load_meta(self.ls_colors)
            loaded += 1
        if loaded:
            logger.debug("loaded metadata for %d items in %s", loaded, self.directory)
            self._dirty = True

    def meta_all(self) -> None:
        for item in self.items:
            if not item.meta_loaded:
                item.load_meta(self.ls_colors)

    def toggle_tag(self, item: FileItem) -> None:
        """Flip and persist ``item``'s tag; raises ``TagError`` on failure."""
        if self.tag_store is None:
            raise TagError(item.path, RuntimeError("no tag store configured"))
        item.tagged = self.tag_store.toggle(item.path)

    def find(self, query: str) -> FileItem | None:
        """Return the first raw item whose lowercased name contains ``query``."""
        for item in self.items:
            if query in item.name.lower():
                return item
        return None


__all__ = ["Files", "natural_sort_key", "scan_directory"]
