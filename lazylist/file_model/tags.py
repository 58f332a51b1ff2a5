"""Persistent tag set stored as newline-separated absolute paths."""

from __future__ import annotations

import logging
from pathlib import Path

from platformdirs import user_data_dir

from ..errors import TagError

APP_NAME = "lazylist"
TAGS_FILENAME = "tags"

logger = logging.getLogger(__name__)


def default_tags_path() -> Path:
    return Path(user_data_dir(APP_NAME, appauthor=False)) / TAGS_FILENAME


class TagStore:
    """Lazily loaded tag set; every toggle rewrites the backing file."""

    def __init__(self, path: Path | None = None) -> None:
        self.path = path if path is not None else default_tags_path()
        self._tags: set[Path] | None = None

    def _load(self) -> set[Path]:
        if self._tags is not None:
            return self._tags
        try:
            text = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            text = ""
        except OSError as exc:
            logger.warning("could not read tags from %s: %s", self.path, exc)
            text = ""
        self._tags = {Path(line) for line in text.splitlines() if line.strip()}
        return self._tags

    def is_tagged(self, path: Path) -> bool:
        return path in self._load()

    def toggle(self, path: Path) -> bool:
        """Flip the tag for ``path`` and persist; return the new tag state.

        Raises ``TagError`` when the tag file cannot be written. The in-memory
        set is left unchanged in that case.
        """
        tags = set(self._load())
        if path in tags:
            tags.discard(path)
            tagged = False
        else:
            tags.add(path)
            tagged = True

        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            body = "".join(f"{tag}\n" for tag in sorted(tags, key=str))
            self.path.write_text(body, encoding="utf-8")
        except OSError as exc:
            raise TagError(path, exc) from exc

        self._tags = tags
        return tagged


__all__ = ["TagStore", "default_tags_path"]
