"""Key bindings for directory list views."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TYPE_CHECKING

from ..errors import ListViewError, format_error
from ..input import KeyBinding, KeyRegistry

if TYPE_CHECKING:
    from .view import FileListView

JUMP_ROWS = 10

logger = logging.getLogger(__name__)


class KeyDispatcher:
    """Map decoded key tokens onto list-view actions.

    Every bound action is followed by a view refresh. ``dispatch`` returns
    ``False`` for unbound keys so the caller can give them to an enclosing
    component.
    """

    def __init__(self, view: FileListView) -> None:
        self.view = view
        sorting = view.sorting
        self.registry = KeyRegistry(after_action=view.refresh).bind(
            KeyBinding(("UP", "p"), view.move_up),
            KeyBinding(("DOWN", "n"), view.move_down),
            KeyBinding(("P",), lambda: self._jump(view.move_up)),
            KeyBinding(("N",), lambda: self._jump(view.move_down)),
            KeyBinding(("CTRL_S",), self._find),
            KeyBinding(("F",), self._filter),
            KeyBinding(("LEFT",), view.goto_grand_parent),
            KeyBinding(("RIGHT",), view.goto_selected),
            KeyBinding((" ",), view.multi_select_file),
            KeyBinding(("t",), self._toggle_tag),
            KeyBinding(("h",), sorting.toggle_hidden),
            KeyBinding(("r",), sorting.reverse_sort),
            KeyBinding(("s",), sorting.cycle_sort),
            KeyBinding(("K",), sorting.select_next_mtime),
            KeyBinding(("k",), sorting.select_prev_mtime),
            KeyBinding(("d",), sorting.toggle_dirs_first),
        )

    def dispatch(self, key: str) -> bool:
        return self.registry.dispatch(key)

    @staticmethod
    def _jump(step: Callable[[], None]) -> None:
        for _ in range(JUMP_ROWS):
            step()

    def _find(self) -> None:
        try:
            self.view.sorting.find()
        except ListViewError as exc:
            self.view.show_status(format_error(exc))

    def _filter(self) -> None:
        try:
            self.view.sorting.filter()
        except ListViewError as exc:
            logger.warning("filter failed: %s", exc)

    def _toggle_tag(self) -> None:
        try:
            self.view.toggle_tag()
        except ListViewError as exc:
            logger.warning("toggling tag failed: %s", exc)


__all__ = ["JUMP_ROWS", "KeyDispatcher"]
