"""Protocols separating use cases from concrete adapters."""

from __future__ import annotations

from .console import ConsolePort
from .queue import QueuePort

__all__ = ["ConsolePort", "QueuePort"]
