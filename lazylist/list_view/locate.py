"""Re-locate a remembered item in a (possibly re-ordered) collection."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TypeVar

T = TypeVar("T")


def locate(collection: Sequence[T], target: T | None) -> int | None:
    """Return the index of the first item equal to ``target``, else ``None``."""
    if target is None:
        return None
    for idx, item in enumerate(collection):
        if item == target:
            return idx
    return None


def locate_or_first(collection: Sequence[T], target: T | None) -> int:
    located = locate(collection, target)
    return 0 if located is None else located


__all__ = ["locate", "locate_or_first"]
