"""Widget context shared by reference between the facade and its parts."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field

from ..ui_theme import DEFAULT_THEME, UITheme

Prompt = Callable[[str], str | None]
StatusSink = Callable[[str], None]


@dataclass
class Coordinates:
    """Screen rectangle of the list area; ``x``/``y`` are 1-based."""

    x: int = 1
    y: int = 1
    width: int = 80
    height: int = 24

    @property
    def xsize(self) -> int:
        return max(0, self.width)

    @property
    def ysize(self) -> int:
        return max(1, self.height)


@dataclass
class WidgetContext:
    """Layout, dirty flag, theme and the external prompt/status facilities.

    ``prompt`` is the blocking minibuffer: it returns the confirmed text or
    ``None`` when cancelled. ``status`` receives user-facing messages.
    """

    coordinates: Coordinates = field(default_factory=Coordinates)
    theme: UITheme = DEFAULT_THEME
    prompt: Prompt | None = None
    status: StatusSink | None = None
    dirty: bool = True
    status_message: str = ""

    def is_dirty(self) -> bool:
        return self.dirty

    def set_dirty(self) -> None:
        self.dirty = True

    def set_clean(self) -> None:
        self.dirty = False

    def show_status(self, message: str) -> None:
        self.status_message = message
        if self.status is not None:
            self.status(message)

    def minibuffer(self, label: str) -> str | None:
        """Ask the prompt facility for text; no facility behaves as cancel."""
        if self.prompt is None:
            return None
        return self.prompt(label)


__all__ = ["Coordinates", "Prompt", "StatusSink", "WidgetContext"]
