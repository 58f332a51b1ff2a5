"""Directory-listing content source for the list view.

This package contains non-UI listing primitives:
- listing item datatype with lazily loaded stat metadata
- sort criteria and natural name ordering
- filesystem scanning into an ordered, filterable collection
- a persisted tag set
"""

from __future__ import annotations

from .types import SIZE_UNITS, FileItem, SortBy
from .tags import TagStore, default_tags_path
from .files import Files, natural_sort_key, scan_directory

__all__ = [
    "SIZE_UNITS",
    "FileItem",
    "SortBy",
    "TagStore",
    "default_tags_path",
    "Files",
    "natural_sort_key",
    "scan_directory",
]
