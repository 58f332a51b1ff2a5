"""Row formatting for directory listings and blank-row filler."""

from __future__ import annotations

from ..ansi import (
    RESTORE_CURSOR,
    SAVE_CURSOR,
    cursor_right,
    display_width,
    goto_xy,
    pad_to_width,
    sgr,
    sized_string,
)
from ..file_model import FileItem
from ..ui_theme import DEFAULT_THEME, UITheme
from .context import Coordinates

SELECTION_GAP = "  "
TAG_MARKER = "*"
LINK_INDICATOR = "--> "


def render_file_line(item: FileItem, xsize: int, theme: UITheme | None = None) -> str:
    """Render one listing row as a self-positioning ANSI string.

    The name segment is drawn padded to the full width, then the cursor is
    restored and moved right so the size column lands right-aligned. A link
    indicator, when present, sits directly before the size and shifts it left
    by its own width.
    """
    active_theme = theme or DEFAULT_THEME
    size, unit = item.calculate_size()

    tag = f"{active_theme.tag_marker}{TAG_MARKER}" if item.tagged else ""
    tag_len = len(TAG_MARKER) if item.tagged else 0

    if item.selected:
        name = SELECTION_GAP + item.name
        selection_color = active_theme.multi_select
    else:
        name = item.name
        selection_color = ""

    if item.target is not None:
        link_indicator = f"{active_theme.link_indicator}{LINK_INDICATOR}{active_theme.highlight}"
        link_indicator_len = len(LINK_INDICATOR)
    else:
        link_indicator = ""
        link_indicator_len = 0

    size_text = f"{size}{unit}"
    size_pos = max(0, xsize - (display_width(size_text) + link_indicator_len))
    name_cols = max(0, xsize - tag_len)
    name_text = pad_to_width(sized_string(name, name_cols), name_cols)
    name_color = sgr(item.color) if item.color else active_theme.normal

    return (
        f"{SAVE_CURSOR}"
        f"{tag}{name_color}{selection_color}{name_text}{active_theme.normal}"
        f"{RESTORE_CURSOR}"
        f"{cursor_right(size_pos)}"
        f"{link_indicator}{active_theme.highlight}{size_text}"
    )


def render_empty_rows(coordinates: Coordinates, used_rows: int, theme: UITheme | None = None) -> str:
    """Blank out window rows from ``used_rows`` to the bottom edge."""
    active_theme = theme or DEFAULT_THEME
    out: list[str] = []
    blank = " " * coordinates.xsize
    for row in range(max(0, used_rows), coordinates.ysize):
        out.append(f"{active_theme.reset}{goto_xy(coordinates.x, coordinates.y + row)}{blank}")
    return "".join(out)


__all__ = [
    "SELECTION_GAP",
    "TAG_MARKER",
    "LINK_INDICATOR",
    "render_file_line",
    "render_empty_rows",
]
