"""``LS_COLORS`` parsing for per-file name colours.

The colour class of an item is the raw SGR parameter string (``"01;34"``)
selected by file type first and by ``*.ext`` glob second, mirroring ``ls``.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

# GNU ls defaults for the handful of types shown when LS_COLORS is unset.
DEFAULT_LS_COLORS = "di=01;34:ln=01;36:ex=01;32:or=40;31;01"


@dataclass(frozen=True)
class LsColors:
    """Parsed ``LS_COLORS`` table split into type keys and suffix globs."""

    types: dict[str, str] = field(default_factory=dict)
    suffixes: dict[str, str] = field(default_factory=dict)

    @classmethod
    def parse(cls, text: str) -> LsColors:
        """Parse a colon-separated ``key=params`` specification.

        Malformed fragments are skipped. ``*.ext`` keys are matched
        case-insensitively against file suffixes.
        """
        types: dict[str, str] = {}
        suffixes: dict[str, str] = {}
        for fragment in text.split(":"):
            key, sep, params = fragment.partition("=")
            if not sep or not key or not params:
                continue
            if key.startswith("*"):
                suffixes[key[1:].lower()] = params
            else:
                types[key] = params
        return cls(types=types, suffixes=suffixes)

    @classmethod
    def from_environ(cls) -> LsColors:
        return cls.parse(os.environ.get("LS_COLORS") or DEFAULT_LS_COLORS)

    def color_for(
        self,
        path: Path,
        *,
        is_dir: bool = False,
        is_link: bool = False,
        is_broken_link: bool = False,
        is_executable: bool = False,
    ) -> str | None:
        """Return the SGR colour class for one listing item, if any."""
        if is_broken_link and "or" in self.types:
            return self.types["or"]
        if is_link and "ln" in self.types:
            params = self.types["ln"]
            # "ln=target" means colour as the link target would be.
            if params != "target":
                return params
        if is_dir:
            return self.types.get("di")
        name = path.name.lower()
        for suffix, params in self.suffixes.items():
            if name.endswith(suffix):
                return params
        if is_executable and "ex" in self.types:
            return self.types["ex"]
        return self.types.get("fi")


__all__ = ["DEFAULT_LS_COLORS", "LsColors"]
