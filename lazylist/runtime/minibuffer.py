"""Blocking single-line text prompt drawn on the bottom terminal row."""

from __future__ import annotations

from collections.abc import Callable

from ..ansi import CLEAR_LINE, goto_xy, sized_string
from ..ui_theme import DEFAULT_THEME, UITheme

CANCEL_KEYS = frozenset({"ESC", "CTRL_G", "CTRL_C", ""})


class Minibuffer:
    """Prompt facility: call with a label, get the text or ``None`` on cancel.

    ``read_key`` returning ``""`` (end of input) cancels like ``ESC``.
    """

    def __init__(
        self,
        read_key: Callable[[], str],
        write: Callable[[str], None],
        row: Callable[[], int],
        width: Callable[[], int],
        theme: UITheme | None = None,
    ) -> None:
        self.read_key = read_key
        self.write = write
        self.row = row
        self.width = width
        self.theme = theme or DEFAULT_THEME

    def _draw(self, label: str, text: str) -> None:
        line = sized_string(f"{label}: {text}", max(0, self.width() - 1))
        self.write(f"{goto_xy(1, self.row())}{CLEAR_LINE}{self.theme.status}{line}{self.theme.reset}")

    def __call__(self, label: str) -> str | None:
        text = ""
        while True:
            self._draw(label, text)
            key = self.read_key()
            if key in CANCEL_KEYS:
                return None
            if key == "ENTER":
                return text
            if key == "BACKSPACE":
                text = text[:-1]
            elif key == "CTRL_U":
                text = ""
            elif len(key) == 1 and key.isprintable():
                text += key


__all__ = ["CANCEL_KEYS", "Minibuffer"]
