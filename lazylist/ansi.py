"""ANSI-aware text measurement and terminal positioning primitives.

Width helpers honour East Asian wide characters so list rows stay aligned.
Escape builders produce the opaque directives embedded in rendered rows.
"""

from __future__ import annotations

import re
import unicodedata

ANSI_ESCAPE_RE = re.compile(r"\x1b\[[0-9;?]*[ -/]*[@-~]|\x1b[78]")

SAVE_CURSOR = "\0337"
RESTORE_CURSOR = "\0338"
CLEAR_LINE = "\033[K"


def char_display_width(ch: str) -> int:
    """Return terminal column width for one character.

    Combining marks consume no columns and East Asian wide/fullwidth
    characters consume two.
    """
    if unicodedata.combining(ch):
        return 0
    if unicodedata.east_asian_width(ch) in {"W", "F"}:
        return 2
    return 1


def display_width(text: str) -> int:
    """Return terminal column width for ANSI-styled text."""
    plain = ANSI_ESCAPE_RE.sub("", text)
    return sum(char_display_width(ch) for ch in plain)


def sized_string(text: str, max_cols: int) -> str:
    """Trim plain ``text`` to at most ``max_cols`` display columns.

    A wide character that would straddle the limit is dropped entirely.
    """
    if max_cols <= 0 or not text:
        return ""

    out: list[str] = []
    col = 0
    for ch in text:
        w = char_display_width(ch)
        if col + w > max_cols:
            break
        out.append(ch)
        col += w
    return "".join(out)


def pad_to_width(text: str, width: int) -> str:
    """Right-pad ``text`` with spaces until it spans ``width`` columns."""
    missing = width - display_width(text)
    if missing <= 0:
        return text
    return text + (" " * missing)


def goto_xy(x: int, y: int) -> str:
    """Cursor-position directive for 1-based column ``x`` and row ``y``."""
    return f"\033[{max(1, y)};{max(1, x)}H"


def cursor_right(cols: int) -> str:
    """Move the cursor ``cols`` columns right; empty for zero movement."""
    if cols <= 0:
        return ""
    return f"\033[{cols}C"


def sgr(params: str) -> str:
    """Wrap raw SGR parameters (``"01;34"``) into an escape sequence."""
    if not params:
        return ""
    return f"\033[{params}m"


def strip_ansi(text: str) -> str:
    return ANSI_ESCAPE_RE.sub("", text)


__all__ = [
    "ANSI_ESCAPE_RE",
    "SAVE_CURSOR",
    "RESTORE_CURSOR",
    "CLEAR_LINE",
    "char_display_width",
    "display_width",
    "sized_string",
    "pad_to_width",
    "goto_xy",
    "cursor_right",
    "sgr",
    "strip_ansi",
]
