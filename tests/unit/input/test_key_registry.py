"""Tests for key binding and dispatch."""

from __future__ import annotations

import unittest

from lazylist.input import KeyBinding, KeyRegistry


class KeyRegistryTests(unittest.TestCase):
    def test_dispatch_runs_action_then_after_hook(self) -> None:
        calls: list[str] = []
        registry = KeyRegistry(after_action=lambda: calls.append("refresh")).bind(
            KeyBinding(("UP", "p"), lambda: calls.append("up")),
        )

        self.assertTrue(registry.dispatch("p"))
        self.assertTrue(registry.dispatch("UP"))
        self.assertEqual(calls, ["up", "refresh", "up", "refresh"])

    def test_unbound_key_is_unhandled_and_skips_hook(self) -> None:
        calls: list[str] = []
        registry = KeyRegistry(after_action=lambda: calls.append("refresh"))

        self.assertFalse(registry.dispatch("x"))
        self.assertEqual(calls, [])

    def test_action_result_does_not_affect_handling(self) -> None:
        registry = KeyRegistry().bind(KeyBinding(("s",), lambda: False))

        self.assertTrue(registry.dispatch("s"))

    def test_later_binding_replaces_key(self) -> None:
        calls: list[str] = []
        registry = KeyRegistry().bind(
            KeyBinding(("s", "S"), lambda: calls.append("first")),
            KeyBinding(("s",), lambda: calls.append("second")),
        )

        registry.dispatch("s")
        registry.dispatch("S")

        self.assertEqual(calls, ["second", "first"])
        self.assertEqual(registry.bound_keys(), ("s", "S"))


if __name__ == "__main__":
    unittest.main()
