"""Runtime package: config, logging, terminal session and event loop."""

from __future__ import annotations


def run_list_view(*args, **kwargs):
    """Lazily import the session bootstrap; it needs a real terminal."""
    from .app import run_list_view as _run_list_view

    return _run_list_view(*args, **kwargs)


__all__ = ["run_list_view"]
