"""Public package surface for the JSON log pretty printer.

``import pretty_json_log`` gives host code the coordinator, its configuration,
and the per-line building blocks; ``python -m pretty_json_log`` and the
``pretty-json-log`` console script run the same coordinator over stdin.
"""

from __future__ import annotations

from .config import PrettyJsonLogConfig
from .domain import JsonNumber, Palette, ParseError, Record, render_value
from .pretty_json_log import PrettyJsonLog, summary_info

__all__ = [
    "JsonNumber",
    "Palette",
    "ParseError",
    "PrettyJsonLog",
    "PrettyJsonLogConfig",
    "Record",
    "render_value",
    "summary_info",
]
