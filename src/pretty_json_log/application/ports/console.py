"""Console port describing terminal emission contracts.

Purpose
-------
Define the abstraction for adapters that write rendered log lines to an
interactive console, letting the application layer depend on a narrow protocol.

Contents
--------
* :class:`ConsolePort` – runtime-checkable protocol for styled lines and raw
  passthrough.

System Role
-----------
Clarifies the output boundary so the Rich adapter (or a test double) can plug
in without leaking implementation details upstream.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from rich.text import Text


@runtime_checkable
class ConsolePort(Protocol):
    """Write formatted or verbatim lines to an output stream."""

    def emit(self, line: Text) -> None:
        """Render one formatted ``line``."""

    def passthrough(self, raw: str) -> None:
        """Write ``raw`` exactly as received, followed by a newline."""


__all__ = ["ConsolePort"]
