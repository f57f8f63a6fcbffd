"""Recursive colourised rendering of decoded JSON values."""

from __future__ import annotations

from typing import Any, Mapping, Sequence

from rich.text import Text

from .palette import Palette
from .values import JsonNumber


def _render_object(value: Mapping[str, Any], palette: Palette) -> Text:
    style = palette.object_punctuation
    text = Text("{", style=style)
    for index, key in enumerate(sorted(value)):
        if index:
            text.append(", ", style=style)
        text.append(key, style=palette.field_key)
        text.append(":", style=style)
        text.append_text(render_value(value[key], palette))
    text.append("}", style=style)
    return text


def _render_array(value: Sequence[Any], palette: Palette) -> Text:
    style = palette.array_punctuation
    text = Text("[", style=style)
    for index, item in enumerate(value):
        if index:
            text.append(", ", style=style)
        text.append_text(render_value(item, palette))
    text.append("]", style=style)
    return text


def render_value(value: Any, palette: Palette) -> Text:
    """Return ``value`` as styled Rich text.

    Objects render with sorted keys, arrays keep their order, numbers keep the
    literal text they were decoded from.

    Examples
    --------
    >>> render_value({"b": [1, True], "a": None}, Palette()).plain
    '{a:null, b:[1, true]}'
    >>> render_value(JsonNumber("42.50"), Palette()).plain
    '42.50'
    """

    if isinstance(value, str):
        return Text(f'"{value}"', style=palette.string)
    if isinstance(value, JsonNumber):
        return Text(value.text, style=palette.number)
    if isinstance(value, bool):
        return Text("true" if value else "false", style=palette.boolean)
    if value is None:
        return Text("null", style=palette.null)
    if isinstance(value, dict):
        return _render_object(value, palette)
    if isinstance(value, list):
        return _render_array(value, palette)
    return Text(str(value), style=palette.fallback)


__all__ = ["render_value"]
