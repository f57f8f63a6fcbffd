"""Domain model: JSON values, severities, palettes, and per-line records."""

from __future__ import annotations

from .levels import LogLevel, normalize_level
from .palette import Palette, parse_level_styles
from .record import Record
from .render import render_value
from .timestamps import TimeParseError, expand_time_format, format_timestamp, parse_timestamp
from .values import JsonNumber, ParseError, decode_object

__all__ = [
    "JsonNumber",
    "LogLevel",
    "Palette",
    "ParseError",
    "Record",
    "TimeParseError",
    "decode_object",
    "expand_time_format",
    "format_timestamp",
    "normalize_level",
    "parse_level_styles",
    "parse_timestamp",
    "render_value",
]
