"""Tests for persisted list settings."""

from __future__ import annotations

import json
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from lazylist.file_model import SortBy
from lazylist.runtime import config


class ListSettingsConfigTests(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.config_path = Path(self._tmp.name) / "nested" / "config.json"
        patcher = mock.patch("lazylist.runtime.config.CONFIG_PATH", self.config_path)
        patcher.start()
        self.addCleanup(patcher.stop)

    def tearDown(self) -> None:
        self._tmp.cleanup()

    def test_missing_file_yields_defaults(self) -> None:
        self.assertEqual(config.load_list_settings(), config.ListSettings())

    def test_round_trip_keeps_unrelated_keys(self) -> None:
        self.config_path.parent.mkdir(parents=True)
        self.config_path.write_text(json.dumps({"editor": "vi"}), encoding="utf-8")
        settings = config.ListSettings(
            sort_by=SortBy.MTIME,
            reverse=True,
            dirs_first=False,
            show_hidden=True,
            theme="ocean",
        )

        config.save_list_settings(settings)

        self.assertEqual(config.load_list_settings(), settings)
        self.assertEqual(config.load_config()["editor"], "vi")
        self.assertEqual(config.load_config()["sort"], "mtime")

    def test_malformed_values_fall_back_per_key(self) -> None:
        self.config_path.parent.mkdir(parents=True)
        self.config_path.write_text(
            json.dumps({"sort": "colour", "reverse": "yes", "show_hidden": True, "theme": "  "}),
            encoding="utf-8",
        )

        settings = config.load_list_settings()

        self.assertEqual(settings.sort_by, SortBy.NAME)
        self.assertFalse(settings.reverse)
        self.assertTrue(settings.show_hidden)
        self.assertIsNone(settings.theme)

    def test_non_object_json_is_ignored(self) -> None:
        self.config_path.parent.mkdir(parents=True)
        self.config_path.write_text("[1, 2]", encoding="utf-8")

        self.assertEqual(config.load_config(), {})


if __name__ == "__main__":
    unittest.main()
