"""Error type raised by list-view operations.

Every failure originating in the list view is recoverable: callers turn it
into a status message or log it and continue.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class ListViewError(Exception):
    code: str
    message: str
    detail: str | None = None

    def __str__(self) -> str:
        if self.detail:
            return f"{self.message} ({self.detail})"
        return self.message


class NotFoundError(ListViewError):
    def __init__(self, query: str) -> None:
        super().__init__(code="not_found", message=f"Not found: {query}")


class NoGrandParentError(ListViewError):
    def __init__(self) -> None:
        super().__init__(code="no_grand_parent", message="Can't go further!")


class PathOpenError(ListViewError):
    def __init__(self, error: BaseException) -> None:
        super().__init__(code="path_open", message=f"Can't open this path: {error}")


class TagError(ListViewError):
    def __init__(self, path: object, error: BaseException) -> None:
        super().__init__(
            code="tag",
            message=f"Can't update tag for {path}",
            detail=str(error),
        )


def format_error(error: BaseException) -> str:
    """Return user-facing status text for ``error``."""
    return str(error)


__all__ = [
    "ListViewError",
    "NotFoundError",
    "NoGrandParentError",
    "PathOpenError",
    "TagError",
    "format_error",
]
