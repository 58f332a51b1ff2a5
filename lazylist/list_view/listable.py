"""Capability set a list view requires from its content type."""

from __future__ import annotations


class Listable:
    """Hooks implemented once per content kind.

    ``length`` and ``render`` are required. Header, footer, the per-refresh
    hook and the key hook default to empty/no-op; ``on_key`` returns whether
    the key was handled so unhandled keys can bubble to an enclosing widget.
    """

    def length(self) -> int:
        raise NotImplementedError

    def render(self) -> list[str]:
        raise NotImplementedError

    def render_header(self) -> str:
        return ""

    def render_footer(self) -> str:
        return ""

    def on_refresh(self) -> None:
        return None

    def on_key(self, key: str) -> bool:
        return False


__all__ = ["Listable"]
