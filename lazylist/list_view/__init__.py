"""Scrollable, stateful list view.

Components, leaf-first:
- ``Viewport``: selection index, scroll offset, seeking flag
- ``RenderCache``: rendered line buffer and per-frame draw list
- ``SortFilterController``: re-ordering that keeps selection identity
- ``KeyDispatcher``: key tokens to actions
- ``ListView`` / ``FileListView``: the facade over a content type
"""

from __future__ import annotations

from .context import Coordinates, Prompt, StatusSink, WidgetContext
from .listable import Listable
from .locate import locate, locate_or_first
from .viewport import Viewport
from .render_cache import RenderCache
from .rendering import render_empty_rows, render_file_line
from .sort_filter import SortFilterController
from .key_dispatch import JUMP_ROWS, KeyDispatcher
from .view import FileListView, ListView

__all__ = [
    "Coordinates",
    "Prompt",
    "StatusSink",
    "WidgetContext",
    "Listable",
    "locate",
    "locate_or_first",
    "Viewport",
    "RenderCache",
    "render_empty_rows",
    "render_file_line",
    "SortFilterController",
    "JUMP_ROWS",
    "KeyDispatcher",
    "FileListView",
    "ListView",
]
