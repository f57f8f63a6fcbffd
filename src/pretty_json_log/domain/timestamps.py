"""Permissive timestamp parsing and local-time display.

Purpose
-------
Accept whatever a producer put in its time field (ISO8601, RFC1123, syslog
style stamps, Unix epochs in seconds through nanoseconds) and render it in the
operator's local timezone.

Contents
--------
* :class:`TimeParseError` - detail shown inside the ``INVALID TIME`` sentinel.
* :func:`expand_time_format` - ``{d}``/``{t}``/``{ms}`` template expansion.
* :func:`parse_timestamp` - locale-agnostic parser returning aware datetimes.
* :func:`format_timestamp` - local-time rendering honouring ``%f`` as millis.
"""

from __future__ import annotations

import re
from datetime import datetime, timedelta, timezone
from decimal import Decimal

from dateutil import parser as date_parser

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
_EPOCH_RE = re.compile(r"^-?\d+(\.\d+)?$")
# Digit counts dateutil reads as calendar dates (YYYY, YYYYMMDD, YYYYMMDDhhmmss).
_CALENDAR_DIGITS = frozenset({4, 8, 14})
# Digit count -> divisor turning the integer into seconds.
_EPOCH_SCALES = ((10, 1), (13, 10**3), (16, 10**6), (19, 10**9))

_TIME_TOKENS = {
    "{d}": "%Y-%m-%d",
    "{t}": "%H:%M:%S",
    "{ms}": ".%f",
}


class TimeParseError(ValueError):
    """Raised when a time value matches no known representation."""


def expand_time_format(template: str) -> str:
    """Expand display placeholders into a ``strftime`` pattern.

    Examples
    --------
    >>> expand_time_format("{d} {t}{ms}")
    '%Y-%m-%d %H:%M:%S.%f'
    >>> expand_time_format("[{t}]")
    '[%H:%M:%S]'
    """

    expanded = template
    for token, directive in _TIME_TOKENS.items():
        expanded = expanded.replace(token, directive)
    return expanded


def _parse_epoch(text: str) -> datetime:
    digits = len(text.lstrip("-").split(".", 1)[0])
    for max_digits, divisor in _EPOCH_SCALES:
        if digits <= max_digits:
            break
    else:
        raise TimeParseError(f"epoch value out of range: {text}")
    micros = int(Decimal(text) * 10**6 / divisor)
    try:
        return _EPOCH + timedelta(microseconds=micros)
    except OverflowError as exc:
        raise TimeParseError(f"epoch value out of range: {text}") from exc


def parse_timestamp(text: str) -> datetime:
    """Parse ``text`` into a timezone-aware datetime.

    Values without an offset are taken as UTC.

    Examples
    --------
    >>> parse_timestamp("1700000000").isoformat()
    '2023-11-14T22:13:20+00:00'
    >>> parse_timestamp("1700000000123").isoformat()
    '2023-11-14T22:13:20.123000+00:00'
    >>> parse_timestamp("2024-05-01T10:00:00+02:00").isoformat()
    '2024-05-01T10:00:00+02:00'
    >>> parse_timestamp("yesterday-ish")
    Traceback (most recent call last):
    ...
    pretty_json_log.domain.timestamps.TimeParseError: Unknown string format: yesterday-ish
    """

    candidate = text.strip()
    if _EPOCH_RE.match(candidate) and not (candidate.isdigit() and len(candidate) in _CALENDAR_DIGITS):
        return _parse_epoch(candidate)
    try:
        parsed = date_parser.parse(candidate)
    except (ValueError, OverflowError) as exc:
        raise TimeParseError(str(exc)) from exc
    if parsed.tzinfo is None or parsed.tzinfo.utcoffset(parsed) is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def format_timestamp(value: datetime, display_format: str) -> str:
    """Render ``value`` in local time; ``%f`` yields three-digit milliseconds."""

    local = value.astimezone()
    pattern = display_format.replace("%f", f"{local.microsecond // 1000:03d}")
    return local.strftime(pattern)


__all__ = ["TimeParseError", "expand_time_format", "format_timestamp", "parse_timestamp"]
