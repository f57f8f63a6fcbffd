"""Severity normalisation for levels found in arbitrary JSON logs.

Purpose
-------
Turn the many ways producers spell a severity (``"warn"``, ``30``, ``"Error"``)
into one upper-case token that the palette can look up.

Contents
--------
* :class:`LogLevel` enum of the tokens with a dedicated colour binding.
* ``NUMERIC_LEVELS`` - numeric codes used by bunyan/pino style loggers.
* :func:`normalize_level` - coerce one decoded JSON value into a token.

System Role
-----------
Consumed by :meth:`pretty_json_log.domain.record.Record.pop_level`; the palette
keys its level styles by the tokens produced here.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from .values import JsonNumber


class LogLevel(Enum):
    """Severity tokens that carry their own console style."""

    TRACE = "TRACE"
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARN = "WARN"
    ERROR = "ERROR"
    FATAL = "FATAL"
    PANIC = "PANIC"


NUMERIC_LEVELS: dict[int, str] = {
    10: "trace",
    20: "debug",
    30: "info",
    40: "warn",
    50: "error",
    60: "fatal",
}
# Numeric severities emitted by bunyan/pino style loggers.


def normalize_level(value: Any) -> str:
    """Return the upper-case severity token for a decoded JSON value.

    Numbers go through ``NUMERIC_LEVELS`` and fall back to their literal text
    when unmapped; strings are upper-cased as-is. Any other shape yields an
    empty token so the caller moves on to the next candidate key.

    Examples
    --------
    >>> normalize_level(JsonNumber("30"))
    'INFO'
    >>> normalize_level("warn")
    'WARN'
    >>> normalize_level(JsonNumber("99"))
    '99'
    >>> normalize_level(JsonNumber("1e99999999"))
    '1e99999999'
    >>> normalize_level(None)
    ''
    """

    if isinstance(value, JsonNumber):
        try:
            code = value.to_int()
        except ValueError:
            return value.text
        name = NUMERIC_LEVELS.get(code)
        if name is None:
            return value.text
        return name.upper()
    if isinstance(value, str):
        return value.upper()
    return ""


__all__ = ["LogLevel", "NUMERIC_LEVELS", "normalize_level"]
