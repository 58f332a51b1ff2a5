"""Log setup for interactive sessions.

The terminal is in raw mode while the list view runs, so records go to a file
under the user log directory or are dropped entirely.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

from platformdirs import user_log_dir

APP_NAME = "lazylist"
LOG_FILENAME = "lazylist.log"
LOG_LEVEL_ENV = "LAZYLIST_LOG_LEVEL"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"


def default_log_dir() -> Path:
    return Path(user_log_dir(APP_NAME, appauthor=False))


def configure_logging(level: str | None = None, log_dir: Path | None = None) -> Path | None:
    """Install a file handler on the package logger and return the log path.

    ``level`` falls back to ``$LAZYLIST_LOG_LEVEL`` then ``warning``; the
    value ``off`` installs a ``NullHandler`` and returns ``None``.
    """
    requested = (level or os.environ.get(LOG_LEVEL_ENV) or "warning").strip().lower()
    logger = logging.getLogger(APP_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.propagate = False

    if requested == "off":
        logger.addHandler(logging.NullHandler())
        return None

    target_dir = log_dir if log_dir is not None else default_log_dir()
    try:
        target_dir.mkdir(parents=True, exist_ok=True)
        handler: logging.Handler = logging.FileHandler(target_dir / LOG_FILENAME, encoding="utf-8")
    except OSError:
        logger.addHandler(logging.NullHandler())
        return None

    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    level_value = getattr(logging, requested.upper(), logging.WARNING)
    logger.setLevel(level_value if isinstance(level_value, int) else logging.WARNING)
    return target_dir / LOG_FILENAME


__all__ = ["LOG_LEVEL_ENV", "configure_logging", "default_log_dir"]
