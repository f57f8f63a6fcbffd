"""Concrete adapters: the Rich console writer and the threaded line queue."""

from __future__ import annotations

from .console.rich_console import RichConsoleAdapter
from .queue import QueueAdapter

__all__ = ["QueueAdapter", "RichConsoleAdapter"]
