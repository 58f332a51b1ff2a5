"""Tests for directory scanning, ordering and lazy metadata.

Uses real temporary directories to validate hidden-file filtering, natural
name order, size/mtime sorting, filters and the size column calculation.
"""

from __future__ import annotations

import os
import tempfile
import unittest
from pathlib import Path

from lazylist.errors import PathOpenError, TagError
from lazylist.file_model import FileItem, Files, SortBy, natural_sort_key


class NaturalSortKeyTests(unittest.TestCase):
    def test_digit_runs_compare_numerically(self) -> None:
        names = ["file10", "File2", "file1", "file"]

        self.assertEqual(sorted(names, key=natural_sort_key), ["file", "file1", "File2", "file10"])

    def test_mixed_names_do_not_raise(self) -> None:
        names = ["10", "a", "a1b2", "a1b", "1a"]

        self.assertEqual(sorted(names, key=natural_sort_key), ["1a", "10", "a", "a1b", "a1b2"])


class SortByTests(unittest.TestCase):
    def test_cycle_visits_every_key(self) -> None:
        self.assertEqual(SortBy.NAME.cycle(), SortBy.SIZE)
        self.assertEqual(SortBy.SIZE.cycle(), SortBy.MTIME)
        self.assertEqual(SortBy.MTIME.cycle(), SortBy.NAME)

    def test_parse(self) -> None:
        self.assertEqual(SortBy.parse(" MTime "), SortBy.MTIME)
        self.assertIsNone(SortBy.parse("color"))
        self.assertIsNone(SortBy.parse(3))


class FileItemTests(unittest.TestCase):
    def test_calculate_size_scales_by_1024(self) -> None:
        self.assertEqual(FileItem(name="a", path=Path("/a"), size=1024).calculate_size(), (1024, ""))
        self.assertEqual(FileItem(name="a", path=Path("/a"), size=2048).calculate_size(), (2, " KB"))
        self.assertEqual(FileItem(name="a", path=Path("/a"), size=5 * 1024**3).calculate_size(), (5, " GB"))
        self.assertEqual(FileItem(name="a", path=Path("/a")).calculate_size(), (0, ""))

    def test_directory_size_is_entry_count(self) -> None:
        item = FileItem(name="d", path=Path("/d"), is_dir=True, size=4096)

        self.assertEqual(item.calculate_size(), (4096, ""))

    def test_grand_parent(self) -> None:
        self.assertEqual(FileItem(name="b", path=Path("/a/b/c")).grand_parent(), Path("/a"))
        self.assertIsNone(FileItem(name="x", path=Path("/x")).grand_parent())


class FilesTestCase(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.root = Path(self._tmp.name)

    def tearDown(self) -> None:
        self._tmp.cleanup()


class ScanTests(FilesTestCase):
    def test_hidden_files_are_skipped_until_toggled(self) -> None:
        (self.root / ".env").write_text("x", encoding="utf-8")
        (self.root / "main.py").write_text("x", encoding="utf-8")
        files = Files.new_from_path(self.root)
        self.assertEqual([item.name for item in files.visible()], ["main.py"])

        files.toggle_hidden()
        files.reload_files()

        self.assertEqual([item.name for item in files.visible()], [".env", "main.py"])

    def test_new_from_path_rejects_non_directories(self) -> None:
        target = self.root / "file.txt"
        target.write_text("x", encoding="utf-8")

        with self.assertRaises(PathOpenError):
            Files.new_from_path(target)
        with self.assertRaises(PathOpenError):
            Files.new_from_path(self.root / "missing")

    def test_reload_of_removed_directory_raises(self) -> None:
        gone = self.root / "gone"
        gone.mkdir()
        files = Files.new_from_path(gone)
        gone.rmdir()

        with self.assertRaises(PathOpenError):
            files.reload_files()

    def test_for_path_keeps_settings(self) -> None:
        (self.root / "sub").mkdir()
        files = Files.new_from_path(self.root, sort_by=SortBy.MTIME, reverse=True, show_hidden=True)

        other = files.for_path(self.root / "sub")

        self.assertEqual(other.sort_by, SortBy.MTIME)
        self.assertTrue(other.reverse)
        self.assertTrue(other.show_hidden)


class OrderingTests(FilesTestCase):
    def setUp(self) -> None:
        super().setUp()
        for name, size, mtime in (("b", 10, 3000), ("a", 300, 1000), ("c", 20, 2000)):
            path = self.root / name
            path.write_bytes(b"x" * size)
            os.utime(path, (mtime, mtime))
        (self.root / "dir").mkdir()

    def names(self, files: Files) -> list[str]:
        return [item.name for item in files.visible()]

    def test_name_sort_with_directories_first(self) -> None:
        files = Files.new_from_path(self.root)

        self.assertEqual(self.names(files), ["dir", "a", "b", "c"])

    def test_size_sort_is_descending(self) -> None:
        files = Files.new_from_path(self.root, sort_by=SortBy.SIZE, dirs_first=False)

        self.assertEqual(self.names(files), ["a", "c", "b", "dir"])

    def test_mtime_sort_is_newest_first(self) -> None:
        files = Files.new_from_path(self.root, sort_by=SortBy.MTIME, dirs_first=False)
        os.utime(self.root / "dir", (10, 10))
        files.meta_all()
        for item in files.items:
            item.meta_loaded = False
        files.sort()

        self.assertEqual(self.names(files), ["b", "c", "a", "dir"])

    def test_reverse_applies_after_directory_partition(self) -> None:
        files = Files.new_from_path(self.root, reverse=True)

        self.assertEqual(self.names(files), ["c", "b", "a", "dir"])

    def test_filter_is_case_sensitive_substring(self) -> None:
        files = Files.new_from_path(self.root)

        files.set_filter("i")
        self.assertEqual(self.names(files), ["dir"])
        self.assertEqual(len(files), 1)

        files.set_filter("")
        self.assertIsNone(files.get_filter())
        self.assertEqual(len(files), 4)

    def test_find_searches_lowercased_names(self) -> None:
        (self.root / "Report.CSV").write_text("x", encoding="utf-8")
        files = Files.new_from_path(self.root)

        self.assertEqual(files.find("report").name, "Report.CSV")
        self.assertIsNone(files.find("zzz"))


class MetadataTests(FilesTestCase):
    def test_meta_upto_loads_only_requested_rows(self) -> None:
        for name in ("a", "b", "c"):
            (self.root / name).write_bytes(b"12345")
        files = Files.new_from_path(self.root)
        files.set_clean()

        files.meta_upto(2)

        self.assertEqual([item.meta_loaded for item in files.items], [True, True, False])
        self.assertEqual(files.items[0].size, 5)
        self.assertTrue(files.is_dirty())

    def test_meta_upto_without_work_stays_clean(self) -> None:
        (self.root / "a").write_bytes(b"1")
        files = Files.new_from_path(self.root)
        files.meta_upto(5)
        files.set_clean()

        files.meta_upto(5)

        self.assertFalse(files.is_dirty())

    def test_directory_size_counts_entries(self) -> None:
        sub = self.root / "sub"
        sub.mkdir()
        (sub / "one").write_text("1", encoding="utf-8")
        (sub / "two").write_text("2", encoding="utf-8")
        files = Files.new_from_path(self.root)

        files.meta_all()

        self.assertEqual(files[0].calculate_size(), (2, ""))

    @unittest.skipUnless(hasattr(os, "symlink"), "symlinks unavailable")
    def test_symlink_records_target(self) -> None:
        (self.root / "real.txt").write_text("x", encoding="utf-8")
        os.symlink("real.txt", self.root / "link.txt")
        files = Files.new_from_path(self.root)

        files.meta_all()

        link = next(item for item in files.items if item.name == "link.txt")
        real = next(item for item in files.items if item.name == "real.txt")
        self.assertEqual(link.target, Path("real.txt"))
        self.assertIsNone(real.target)

    def test_toggle_tag_without_store_raises(self) -> None:
        (self.root / "a").write_text("x", encoding="utf-8")
        files = Files.new_from_path(self.root)

        with self.assertRaises(TagError):
            files.toggle_tag(files[0])


if __name__ == "__main__":
    unittest.main()
