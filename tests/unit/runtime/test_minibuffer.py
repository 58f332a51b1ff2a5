"""Tests for the bottom-row text prompt."""

from __future__ import annotations

import unittest

from lazylist.runtime.minibuffer import Minibuffer
from lazylist.ui_theme import PLAIN_THEME


def _prompt(*keys: str) -> tuple[Minibuffer, list[str]]:
    pending = list(keys)
    written: list[str] = []
    minibuffer = Minibuffer(
        read_key=lambda: pending.pop(0),
        write=written.append,
        row=lambda: 24,
        width=lambda: 40,
        theme=PLAIN_THEME,
    )
    return minibuffer, written


class MinibufferTests(unittest.TestCase):
    def test_enter_returns_typed_text(self) -> None:
        minibuffer, written = _prompt("a", "b", "BACKSPACE", "c", "ENTER")

        self.assertEqual(minibuffer("find"), "ac")
        self.assertTrue(written[-1].endswith("find: ac\033[0m"))
        self.assertTrue(written[0].startswith("\033[24;1H"))

    def test_cancel_keys_return_none(self) -> None:
        for cancel in ("ESC", "CTRL_G", "CTRL_C", ""):
            minibuffer, _written = _prompt("x", cancel)

            self.assertIsNone(minibuffer("filter"), cancel)

    def test_ctrl_u_clears_and_named_keys_are_ignored(self) -> None:
        minibuffer, _written = _prompt("a", "CTRL_U", "UP", "b", "ENTER")

        self.assertEqual(minibuffer("filter"), "b")

    def test_empty_confirmation_is_empty_string(self) -> None:
        minibuffer, _written = _prompt("ENTER")

        self.assertEqual(minibuffer("filter"), "")


if __name__ == "__main__":
    unittest.main()
