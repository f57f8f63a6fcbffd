"""Port describing the bounded line queue between reader and printer."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class QueuePort(Protocol):
    """Bridge between the ingesting thread and the printing worker."""

    def start(self) -> None:
        """Start the queue worker."""

    def stop(self) -> None:
        """Stop the queue worker after every queued line is processed."""

    def put(self, line: str) -> bool:
        """Enqueue ``line``, blocking while the queue is full."""


__all__ = ["QueuePort"]
