"""JSON value model used by records and the field renderer.

Purpose
-------
Decode a raw log line into a mapping of field names to JSON values without
losing the literal text of numbers.

Contents
--------
* :class:`JsonNumber` - number wrapper keeping the exact literal text.
* :class:`ParseError` - raised when a line is not a JSON object.
* :func:`decode_object` - strict line decoder used by :class:`Record`.

System Role
-----------
Sits at the bottom of the domain layer. Decoded values are plain Python shapes
(``str``, ``bool``, ``None``, ``dict``, ``list``) plus :class:`JsonNumber`, so
rendering can dispatch on shape without ever touching floats.
"""

from __future__ import annotations

import json
import re
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Any

# Integer conversion is refused past this decimal exponent.
MAX_INT_EXPONENT = 30

_SURROGATES = re.compile("[\ud800-\udfff]")


@dataclass(slots=True, frozen=True)
class JsonNumber:
    """JSON number carried as its literal text.

    Examples
    --------
    >>> JsonNumber("42").text
    '42'
    >>> JsonNumber("1.5e3").to_int()
    1500
    """

    text: str

    def __str__(self) -> str:
        return self.text

    def to_decimal(self) -> Decimal:
        """Return the exact numeric value."""

        return Decimal(self.text)

    def to_int(self) -> int:
        """Return the value truncated towards zero."""

        try:
            value = self.to_decimal()
        except InvalidOperation as exc:
            raise ValueError(f"not a number: {self.text}") from exc
        if not value.is_finite() or abs(value.adjusted()) > MAX_INT_EXPONENT:
            raise ValueError(f"number out of range: {self.text}")
        return int(value)


class ParseError(ValueError):
    """Raised when a raw line does not decode to a JSON object."""

    def __init__(self, line: str, reason: str) -> None:
        super().__init__(reason)
        self.line = line
        self.reason = reason


def _reject_constant(name: str) -> Any:
    raise ValueError(f"invalid JSON constant {name!r}")


_DECODER = json.JSONDecoder(
    parse_int=JsonNumber,
    parse_float=JsonNumber,
    parse_constant=_reject_constant,
)


def _scrub(value: Any) -> Any:
    """Replace lone surrogates in strings and keys with U+FFFD, recursively."""

    if isinstance(value, str):
        return _SURROGATES.sub("\ufffd", value)
    if isinstance(value, dict):
        return {_scrub(key): _scrub(item) for key, item in value.items()}
    if isinstance(value, list):
        return [_scrub(item) for item in value]
    return value


def decode_object(line: str) -> dict[str, Any]:
    """Decode ``line`` into a mapping, raising :class:`ParseError` otherwise.

    Lone UTF-16 surrogates, whether escaped (``"\\ud800"``) or left over from
    undecodable input bytes, come back as U+FFFD so the result always encodes.

    Examples
    --------
    >>> decode_object('{"pid": 7}')
    {'pid': JsonNumber(text='7')}
    >>> decode_object('[1, 2]')
    Traceback (most recent call last):
    ...
    pretty_json_log.domain.values.ParseError: expected a JSON object, got list
    """

    try:
        value = _DECODER.decode(line)
    except ValueError as exc:
        raise ParseError(line, str(exc)) from exc
    if not isinstance(value, dict):
        raise ParseError(line, f"expected a JSON object, got {type(value).__name__}")
    return _scrub(value)


__all__ = ["JsonNumber", "ParseError", "decode_object"]
