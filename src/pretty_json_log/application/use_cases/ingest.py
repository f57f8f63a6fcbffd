"""Use case reading raw lines from an input stream into the queue.

Purpose
-------
Split the input into lines, drop blank ones, and forward the rest in order
through a :class:`ShutdownGate` so nothing is queued after shutdown begins.

Contents
--------
* :func:`iter_lines` - line splitter that keeps undecodable bytes escaped.
* :func:`create_ingest` - factory returning the reader callable.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator
from typing import IO, AnyStr

from pretty_json_log.application.ports.queue import QueuePort

from .shutdown import ShutdownGate

logger = logging.getLogger(__name__)


def _strip_newline(text: str) -> str:
    if text.endswith("\n"):
        text = text[:-1]
    if text.endswith("\r"):
        text = text[:-1]
    return text


def iter_lines(stream: IO[AnyStr], *, encoding: str = "utf-8") -> Iterator[str]:
    """Yield the non-blank lines of ``stream`` without their line terminator.

    Binary streams are decoded line by line with ``surrogateescape`` so bytes
    that are not valid in ``encoding`` survive until the line is written back.
    An ``OSError`` while reading ends the stream.

    Examples
    --------
    >>> from io import StringIO
    >>> list(iter_lines(StringIO("a\\n\\n  \\n b \\r\\n")))
    ['a', ' b ']
    """

    while True:
        try:
            chunk = stream.readline()
        except OSError as exc:
            logger.warning("Input stream read failed; treating as end of input: %s", exc)
            return
        if not chunk:
            return
        text = chunk.decode(encoding, "surrogateescape") if isinstance(chunk, bytes) else chunk
        text = _strip_newline(text)
        if text.strip():
            yield text


def create_ingest(*, queue: QueuePort, gate: ShutdownGate) -> Callable[[IO[AnyStr]], int]:
    """Build the reader callable bound to ``queue`` and ``gate``."""

    def ingest(stream: IO[AnyStr]) -> int:
        """Forward every non-blank line until EOF or shutdown; return the count."""
        forwarded = 0
        for line in iter_lines(stream):
            if not gate.forward(queue.put, line):
                logger.debug("Shutdown in progress; stopped reading input")
                break
            forwarded += 1
        return forwarded

    return ingest


__all__ = ["create_ingest", "iter_lines"]
