"""Use cases wiring the domain to the ports."""

from __future__ import annotations

from .ingest import create_ingest, iter_lines
from .print_line import create_print_line
from .shutdown import ShutdownGate, create_shutdown

__all__ = ["ShutdownGate", "create_ingest", "create_print_line", "create_shutdown", "iter_lines"]
