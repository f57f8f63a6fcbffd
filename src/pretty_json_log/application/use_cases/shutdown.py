"""Shutdown orchestration for the line pipeline.

Purpose
-------
Unify end-of-input and termination signals into one cooperative shutdown:
stop forwarding new lines, then drain the queue through the printer.
"""

from __future__ import annotations

import threading
from collections.abc import Callable

from pretty_json_log.application.ports.queue import QueuePort


class ShutdownGate:
    """Serialise line forwarding against queue closure.

    A line handed to :meth:`forward` before :meth:`close` is always enqueued;
    afterwards :meth:`forward` refuses new lines.

    Examples
    --------
    >>> gate = ShutdownGate()
    >>> queued = []
    >>> gate.forward(queued.append, "a")
    True
    >>> gate.close()
    >>> gate.forward(queued.append, "b")
    False
    >>> queued
    ['a']
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    def forward(self, put: Callable[[str], object], line: str) -> bool:
        with self._lock:
            if self._closed:
                return False
            put(line)
            return True

    def close(self) -> None:
        with self._lock:
            self._closed = True


def create_shutdown(*, queue: QueuePort, gate: ShutdownGate) -> Callable[[], None]:
    """Return a callable performing the shutdown sequence."""

    def shutdown() -> None:
        """Close the gate, then drain every queued line through the printer."""
        gate.close()
        queue.stop()

    return shutdown


__all__ = ["ShutdownGate", "create_shutdown"]
