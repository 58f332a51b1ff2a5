"""CLI argument handling tests.

``run_list_view`` and settings persistence are patched out so the entrypoint
can be exercised without a terminal.
"""

from __future__ import annotations

import tempfile
import unittest
from dataclasses import replace
from pathlib import Path
from unittest import mock

from lazylist import cli
from lazylist.errors import PathOpenError
from lazylist.file_model import SortBy
from lazylist.runtime.config import ListSettings


class CliTests(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.root = Path(self._tmp.name)
        for target in ("configure_logging", "save_list_settings"):
            patcher = mock.patch(f"lazylist.cli.{target}")
            self.addCleanup(patcher.stop)
            setattr(self, target, patcher.start())
        patcher = mock.patch("lazylist.cli.load_list_settings", return_value=ListSettings(theme="ocean"))
        self.addCleanup(patcher.stop)
        patcher.start()
        patcher = mock.patch("lazylist.cli.sys")
        self.addCleanup(patcher.stop)
        self.fake_sys = patcher.start()
        self.fake_sys.stdin.isatty.return_value = True
        self.fake_sys.stdout.isatty.return_value = True

    def tearDown(self) -> None:
        self._tmp.cleanup()

    def test_non_directory_path_exits(self) -> None:
        target = self.root / "file.txt"
        target.write_text("x", encoding="utf-8")

        with self.assertRaises(SystemExit):
            cli.main(argv=[str(target)])

    def test_non_terminal_exits(self) -> None:
        self.fake_sys.stdout.isatty.return_value = False

        with self.assertRaises(SystemExit):
            cli.main(argv=[str(self.root)])

    def test_options_override_stored_settings_and_result_is_saved(self) -> None:
        final = ListSettings(sort_by=SortBy.SIZE, reverse=True)
        with mock.patch("lazylist.cli.run_list_view", return_value=final) as run_list_view:
            cli.main(argv=[str(self.root), "--sort", "size", "--hidden", "--no-color", "--log-level", "debug"])

        path, settings = run_list_view.call_args.args
        self.assertEqual(path, self.root)
        self.assertEqual(settings, replace(ListSettings(theme="ocean"), sort_by=SortBy.SIZE, show_hidden=True))
        self.assertTrue(run_list_view.call_args.kwargs["no_color"])
        self.configure_logging.assert_called_once_with("debug")
        self.save_list_settings.assert_called_once_with(final)

    def test_default_path_used_without_argument(self) -> None:
        with mock.patch("lazylist.cli.run_list_view", return_value=ListSettings()) as run_list_view:
            cli.main(default_path=self.root, argv=[])

        self.assertEqual(run_list_view.call_args.args[0], self.root)

    def test_open_failure_becomes_exit_message(self) -> None:
        error = PathOpenError(PermissionError("denied"))
        with mock.patch("lazylist.cli.run_list_view", side_effect=error):
            with self.assertRaises(SystemExit) as raised:
                cli.main(argv=[str(self.root)])

        self.assertEqual(str(raised.exception), "Can't open this path: denied")
        self.save_list_settings.assert_not_called()


if __name__ == "__main__":
    unittest.main()
