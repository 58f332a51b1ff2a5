"""Domain datatypes for directory listing items and sort criteria."""

from __future__ import annotations

import os
import stat as stat_mod
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

from ..lscolors import LsColors

SIZE_UNITS: tuple[str, ...] = ("", " KB", " MB", " GB", " TB", " PB")


class SortBy(Enum):
    """Sort key for directory listings; ``cycle`` walks them in order."""

    NAME = "name"
    SIZE = "size"
    MTIME = "mtime"

    def __str__(self) -> str:
        return self.value

    def cycle(self) -> SortBy:
        members = list(SortBy)
        return members[(members.index(self) + 1) % len(members)]

    @classmethod
    def parse(cls, value: object) -> SortBy | None:
        """Return the member named by ``value`` or ``None`` when unknown."""
        if not isinstance(value, str):
            return None
        try:
            return cls(value.strip().lower())
        except ValueError:
            return None


@dataclass
class FileItem:
    """One listing row. Equality is path identity so flags can change freely."""

    name: str = field(compare=False)
    path: Path
    is_dir: bool = field(default=False, compare=False)
    size: int | None = field(default=None, compare=False)
    mtime_ns: int | None = field(default=None, compare=False)
    target: Path | None = field(default=None, compare=False)
    color: str | None = field(default=None, compare=False)
    meta_loaded: bool = field(default=False, compare=False)
    tagged: bool = field(default=False, compare=False)
    selected: bool = field(default=False, compare=False)

    def toggle_selection(self) -> None:
        self.selected = not self.selected

    def grand_parent(self) -> Path | None:
        """Return the parent of the directory holding this item, if any."""
        parent = self.path.parent
        grand_parent = parent.parent
        if grand_parent == parent:
            return None
        return grand_parent

    def load_meta(self, ls_colors: LsColors | None = None) -> None:
        """Stat the item once; stat failures leave metadata empty."""
        self.meta_loaded = True
        try:
            lstat = self.path.lstat()
        except OSError:
            return

        self.mtime_ns = int(lstat.st_mtime_ns)
        is_link = stat_mod.S_ISLNK(lstat.st_mode)
        is_broken_link = False
        if is_link:
            try:
                self.target = Path(os.readlink(self.path))
            except OSError:
                self.target = None
            is_broken_link = not self.path.exists()

        if self.is_dir:
            try:
                with os.scandir(self.path) as entries:
                    self.size = sum(1 for _entry in entries)
            except OSError:
                self.size = None
        else:
            self.size = int(lstat.st_size)

        if ls_colors is not None:
            self.color = ls_colors.color_for(
                self.path,
                is_dir=self.is_dir,
                is_link=is_link,
                is_broken_link=is_broken_link,
                is_executable=bool(lstat.st_mode & stat_mod.S_IXUSR),
            )

    def calculate_size(self) -> tuple[int, str]:
        """Return ``(amount, unit)`` for the size column.

        Directories report their entry count without a unit; files scale by
        1024 while larger than 1024 bytes.
        """
        if self.size is None:
            return 0, ""
        if self.is_dir:
            return self.size, ""
        size = self.size
        unit = 0
        while size > 1024 and unit < len(SIZE_UNITS) - 1:
            size //= 1024
            unit += 1
        return size, SIZE_UNITS[unit]


__all__ = ["SIZE_UNITS", "SortBy", "FileItem"]
