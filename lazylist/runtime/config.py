"""Persistent JSON config helpers.

Stores list ordering preferences, hidden-file visibility and the UI theme.
All access is defensive: malformed or missing config falls back safely.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path

from platformdirs import user_config_dir

from ..file_model import SortBy

APP_NAME = "lazylist"
CONFIG_FILENAME = "config.json"
CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME


@dataclass(frozen=True)
class ListSettings:
    """Listing preferences restored at startup."""

    sort_by: SortBy = SortBy.NAME
    reverse: bool = False
    dirs_first: bool = True
    show_hidden: bool = False
    theme: str | None = None


def load_config() -> dict[str, object]:
    """Load the persisted JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except Exception:
        return {}
    return data if isinstance(data, dict) else {}


def save_config(data: dict[str, object]) -> None:
    """Persist config data as pretty-printed JSON.

    Any filesystem/serialization error is ignored to keep runtime behavior
    non-fatal when config cannot be written.
    """
    try:
        CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
        CONFIG_PATH.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
    except Exception:
        pass


def _load_bool(data: dict[str, object], key: str, default: bool) -> bool:
    """Only explicit booleans are accepted; anything else yields ``default``."""
    value = data.get(key)
    return value if isinstance(value, bool) else default


def load_list_settings() -> ListSettings:
    data = load_config()
    theme = data.get("theme")
    if not isinstance(theme, str) or not theme.strip():
        theme = None
    return ListSettings(
        sort_by=SortBy.parse(data.get("sort")) or SortBy.NAME,
        reverse=_load_bool(data, "reverse", False),
        dirs_first=_load_bool(data, "dirs_first", True),
        show_hidden=_load_bool(data, "show_hidden", False),
        theme=theme.strip() if theme else None,
    )


def save_list_settings(settings: ListSettings) -> None:
    """Merge ``settings`` into the stored config, keeping unrelated keys."""
    config = load_config()
    config["sort"] = settings.sort_by.value
    config["reverse"] = bool(settings.reverse)
    config["dirs_first"] = bool(settings.dirs_first)
    config["show_hidden"] = bool(settings.show_hidden)
    if settings.theme:
        config["theme"] = settings.theme
    save_config(config)


__all__ = [
    "APP_NAME",
    "CONFIG_PATH",
    "ListSettings",
    "load_config",
    "save_config",
    "load_list_settings",
    "save_list_settings",
]
