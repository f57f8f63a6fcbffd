"""One decoded log line under field extraction.

Purpose
-------
Pull the well-known header fields (time, level, message) out of a decoded JSON
object using the configured fallback key lists, then render whatever is left.

Contents
--------
* :class:`Record` - destructive ``pop_*`` accessors plus :meth:`Record.get_fields`.
* ``EMPTY_TIME`` / ``INVALID_TIME`` / ``NULL_MESSAGE`` sentinels.

System Role
-----------
Built by the printer use case for every line that decodes to an object. A
record is owned by the single printer thread and never shared.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from rich.text import Text

from .levels import normalize_level
from .palette import Palette
from .render import render_value
from .timestamps import format_timestamp, parse_timestamp
from .values import JsonNumber, decode_object

if TYPE_CHECKING:
    from pretty_json_log.config import PrettyJsonLogConfig

EMPTY_TIME = "EMPTY TIME"
INVALID_TIME = "INVALID TIME [{detail}]"
NULL_MESSAGE = "null"
LEVEL_WIDTH = 5


def _time_text(value: str | JsonNumber) -> str:
    if isinstance(value, JsonNumber):
        return str(value.to_int())
    return value


class Record:
    """Decoded JSON object with destructive accessors for header fields.

    Pops should run in the order time, level, message so each consumed key is
    gone before :meth:`get_fields` renders the rest.

    Examples
    --------
    >>> from pretty_json_log.config import PrettyJsonLogConfig
    >>> record = Record.parse('{"level": 30, "msg": "up", "pid": 1}', PrettyJsonLogConfig())
    >>> record.pop_time().plain
    'EMPTY TIME'
    >>> record.pop_level().plain
    ' INFO'
    >>> record.pop_message().plain
    'up'
    >>> record.get_fields().plain
    'pid=1'
    """

    __slots__ = ("fields", "_config", "_palette", "level")

    def __init__(self, fields: dict[str, Any], config: "PrettyJsonLogConfig", palette: Palette | None = None) -> None:
        self.fields = fields
        self._config = config
        self._palette = palette or Palette()
        self.level = ""

    @classmethod
    def parse(cls, line: str, config: "PrettyJsonLogConfig", palette: Palette | None = None) -> "Record":
        """Decode ``line``; raises :class:`~pretty_json_log.domain.values.ParseError`."""

        return cls(decode_object(line), config, palette)

    def pop_time(self) -> Text:
        style = self._palette.time
        for key in self._config.time_keys:
            value = self.fields.get(key)
            if not isinstance(value, (str, JsonNumber)) or value == "":
                continue
            try:
                rendered = format_timestamp(parse_timestamp(_time_text(value)), self._config.display_time_format)
            except (ValueError, OverflowError) as exc:
                # Bad timestamps stay in the field list.
                return Text(INVALID_TIME.format(detail=exc), style=style)
            del self.fields[key]
            return Text(rendered, style=style)
        return Text(EMPTY_TIME, style=style)

    def pop_level(self) -> Text:
        """Consume the first key yielding a severity token and render it.

        Bound tokens are right-aligned to :data:`LEVEL_WIDTH`; anything else,
        the empty token included, renders as-is in the palette's default style.
        """

        level = ""
        for key in self._config.level_keys:
            if key not in self.fields:
                continue
            token = normalize_level(self.fields[key])
            if token:
                del self.fields[key]
                level = token
                break
        self.level = level
        style = self._palette.level_style(level)
        if style is None:
            return Text(level, style=self._palette.default_level_style)
        return Text(f"{level:>{LEVEL_WIDTH}}", style=style)

    def pop_message(self) -> Text:
        for key in self._config.message_keys:
            value = self.fields.get(key)
            if not isinstance(value, str) or not value:
                continue
            del self.fields[key]
            return Text(value, style=self._palette.message)
        return Text(NULL_MESSAGE, style=self._palette.null)

    def get_fields(self) -> Text:
        """Render every remaining field as ``key=value``, sorted by that text."""

        rendered = []
        for key, value in self.fields.items():
            entry = Text(key, style=self._palette.field_key)
            entry.append("=")
            entry.append_text(render_value(value, self._palette))
            rendered.append(entry)
        rendered.sort(key=lambda entry: entry.plain)
        return Text(" ").join(rendered)

    def render(self) -> Text:
        """Pop the header fields and assemble the full display line."""

        time_text = self.pop_time()
        level_text = self.pop_level()
        message_text = self.pop_message()
        return Text(" ").join([time_text, level_text, message_text, self.get_fields()])


__all__ = ["EMPTY_TIME", "INVALID_TIME", "LEVEL_WIDTH", "NULL_MESSAGE", "Record"]
