"""Colour bindings shared by every rendering call.

Purpose
-------
Collect the Rich style strings for levels, the line header, and every JSON
value shape in one immutable object constructed at startup.

Contents
--------
* ``LEVEL_STYLES`` - default level-token to style mapping.
* :class:`Palette` - frozen style table with level lookup helpers.
* :func:`parse_level_styles` - ``LEVEL=style`` override parsing.

System Role
-----------
Passed read-only into :class:`~pretty_json_log.domain.record.Record` and the
field renderer so no rendering code reaches for module globals.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import Mapping

from .levels import LogLevel

DEFAULT_LEVEL_KEY = "DEFAULT"

LEVEL_STYLES: Mapping[str, str] = MappingProxyType(
    {
        LogLevel.PANIC.value: "bold red on bright_white",
        LogLevel.FATAL.value: "bold bright_white on red",
        LogLevel.ERROR.value: "bold bright_white on bright_red",
        LogLevel.WARN.value: "bold bright_black on bright_yellow",
        LogLevel.INFO.value: "bold bright_white on bright_blue",
        LogLevel.DEBUG.value: "bold bright_white on bright_black",
        LogLevel.TRACE.value: "bold bright_white on black",
        DEFAULT_LEVEL_KEY: "bold white on bright_black",
    }
)
#: Default Rich styles keyed by normalised level token.


@dataclass(slots=True, frozen=True)
class Palette:
    """Immutable style table used by records and the field renderer."""

    levels: Mapping[str, str] = field(default_factory=lambda: LEVEL_STYLES)
    time: str = "bold bright_black"
    message: str = "bold bright_white"
    field_key: str = "bright_black"
    string: str = "bright_blue"
    number: str = "bright_cyan"
    boolean: str = "bright_green"
    null: str = "bright_red"
    object_punctuation: str = "bright_yellow"
    array_punctuation: str = "bright_magenta"
    fallback: str = "white"

    def level_style(self, token: str) -> str | None:
        """Return the style bound to ``token`` or ``None`` when unbound."""

        if token == DEFAULT_LEVEL_KEY:
            return None
        return self.levels.get(token)

    @property
    def default_level_style(self) -> str:
        return self.levels.get(DEFAULT_LEVEL_KEY, LEVEL_STYLES[DEFAULT_LEVEL_KEY])

    def with_level_styles(self, overrides: Mapping[str, str]) -> "Palette":
        """Return a copy whose level styles are merged with ``overrides``.

        Examples
        --------
        >>> palette = Palette().with_level_styles({"info": "green"})
        >>> palette.level_style("INFO")
        'green'
        >>> palette.level_style("ERROR")
        'bold bright_white on bright_red'
        """

        if not overrides:
            return self
        merged = dict(self.levels)
        for key, value in overrides.items():
            norm = key.strip().upper()
            if norm and value.strip():
                merged[norm] = value.strip()
        return replace(self, levels=MappingProxyType(merged))


def parse_level_styles(raw: str | None) -> dict[str, str]:
    """Convert ``LEVEL=style`` comma-separated strings into a dictionary.

    Examples
    --------
    >>> parse_level_styles('info=green, ERROR = bold red')
    {'INFO': 'green', 'ERROR': 'bold red'}
    >>> parse_level_styles(None)
    {}
    """
    if not raw:
        return {}
    result: dict[str, str] = {}
    for chunk in raw.split(","):
        if "=" not in chunk:
            continue
        key, value = chunk.split("=", 1)
        key = key.strip().upper()
        value = value.strip()
        if not key or not value:
            continue
        result[key] = value
    return result


__all__ = ["DEFAULT_LEVEL_KEY", "LEVEL_STYLES", "Palette", "parse_level_styles"]
