"""Key-token to action table used by list views."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass


@dataclass(frozen=True)
class KeyBinding:
    """Key tokens that all trigger one action."""

    keys: tuple[str, ...]
    action: Callable[[], object]


class KeyRegistry:
    """Dispatch table; ``after_action`` runs once after every bound action.

    Action return values are ignored. A key is handled exactly when it is
    bound, so unbound keys can be passed to an enclosing widget.
    """

    def __init__(self, after_action: Callable[[], None] | None = None) -> None:
        self._after_action = after_action
        self._actions: dict[str, Callable[[], object]] = {}

    def bind(self, *bindings: KeyBinding) -> KeyRegistry:
        """Register bindings in order; a later binding replaces an earlier key."""
        for binding in bindings:
            for key in binding.keys:
                self._actions[key] = binding.action
        return self

    def bound_keys(self) -> tuple[str, ...]:
        return tuple(self._actions)

    def dispatch(self, key: str) -> bool:
        action = self._actions.get(key)
        if action is None:
            return False
        action()
        if self._after_action is not None:
            self._after_action()
        return True


__all__ = ["KeyBinding", "KeyRegistry"]
