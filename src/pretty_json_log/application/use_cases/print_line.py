"""Use case turning one raw line into console output.

Purpose
-------
Decode the line into a :class:`Record`, pop the header fields, and emit the
formatted result; anything that is not a JSON object goes out verbatim.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TYPE_CHECKING

from pretty_json_log.application.ports.console import ConsolePort
from pretty_json_log.domain import Palette, ParseError, Record

if TYPE_CHECKING:
    from pretty_json_log.config import PrettyJsonLogConfig

logger = logging.getLogger(__name__)


def create_print_line(
    *,
    config: "PrettyJsonLogConfig",
    palette: Palette,
    console: ConsolePort,
) -> Callable[[str], None]:
    """Build the printer callable executed by the queue worker for every line."""

    def print_line(raw: str) -> None:
        try:
            record = Record.parse(raw, config, palette)
        except ParseError as exc:
            logger.debug("Passing through non-object line: %s", exc.reason)
            console.passthrough(raw)
            return
        console.emit(record.render())

    return print_line


__all__ = ["create_print_line"]
