"""UI theme definitions and selection helpers.

Themes are ANSI palettes for list rows and chrome. Per-file name colours come
from ``LS_COLORS`` and are layered on top of the active theme.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass


@dataclass(frozen=True)
class UITheme:
    """Semantic ANSI palette used by list renderers."""

    name: str
    normal: str
    reverse: str
    reset: str
    tag_marker: str
    multi_select: str
    link_indicator: str
    highlight: str
    header: str
    footer: str
    status: str


DEFAULT_THEME = UITheme(
    name="default",
    normal="\033[39m",
    reverse="\033[7m",
    reset="\033[0m",
    tag_marker="\033[31m",
    multi_select="\033[33m",
    link_indicator="\033[33m",
    highlight="\033[38;5;109m",
    header="\033[1;38;5;81m",
    footer="\033[2;38;5;250m",
    status="\033[38;5;229m",
)

OCEAN_THEME = UITheme(
    name="ocean",
    normal="\033[39m",
    reverse="\033[7m",
    reset="\033[0m",
    tag_marker="\033[38;5;203m",
    multi_select="\033[38;5;153m",
    link_indicator="\033[38;5;117m",
    highlight="\033[38;5;73m",
    header="\033[1;38;5;45m",
    footer="\033[2;38;5;110m",
    status="\033[38;5;153m",
)

# Reverse video is kept without colour so the selected row stays visible.
PLAIN_THEME = UITheme(
    name="plain",
    normal="",
    reverse="\033[7m",
    reset="\033[0m",
    tag_marker="",
    multi_select="",
    link_indicator="",
    highlight="",
    header="",
    footer="",
    status="",
)

COLOR_THEMES: tuple[UITheme, ...] = (DEFAULT_THEME, OCEAN_THEME)

logger = logging.getLogger(__name__)


def theme_names() -> tuple[str, ...]:
    """Names accepted by ``--theme`` and the ``theme`` config key."""
    return tuple(theme.name for theme in COLOR_THEMES)


def resolve_theme(name: str | None, *, no_color: bool = False) -> UITheme:
    """Return the palette for ``name``; unknown names log and use the default.

    ``no_color`` always wins and yields the plain palette.
    """
    if no_color:
        return PLAIN_THEME
    wanted = (name or DEFAULT_THEME.name).strip().lower()
    for theme in COLOR_THEMES:
        if theme.name == wanted:
            return theme
    logger.warning("unknown theme %r, using %s", name, DEFAULT_THEME.name)
    return DEFAULT_THEME


__all__ = [
    "UITheme",
    "COLOR_THEMES",
    "DEFAULT_THEME",
    "OCEAN_THEME",
    "PLAIN_THEME",
    "resolve_theme",
    "theme_names",
]
