"""Pipeline façade wiring the reader, the line queue, and the printer.

Purpose
-------
Expose one object host code (and the CLI) can construct from a finished
configuration and run against an input stream until end of input or a
termination signal.

Contents
--------
* :class:`PrettyJsonLog` - coordinator owning the reader thread, the queue
  worker, and the shutdown sequence.
* :func:`summary_info` - package metadata banner used by the CLI.

System Role
-----------
Composition root: picks the concrete adapters, builds the use-case callables,
and enforces the shutdown ordering (stop reading, close the queue, drain the
printer) for both EOF and signals.
"""

from __future__ import annotations

import logging
import signal
import sys
import threading
from contextlib import contextmanager
from typing import IO, Any, Callable, Iterator

from .adapters import QueueAdapter, RichConsoleAdapter
from .adapters.queue import DEFAULT_QUEUE_SIZE
from .application.ports import ConsolePort
from .application.use_cases import ShutdownGate, create_ingest, create_print_line, create_shutdown
from .config import PrettyJsonLogConfig
from .domain import Palette

logger = logging.getLogger(__name__)

TERMINATION_SIGNALS: tuple[str, ...] = ("SIGHUP", "SIGINT", "SIGTERM", "SIGQUIT")
"""Signal names that trigger a graceful shutdown where the platform has them."""

_STOP_POLL_INTERVAL = 0.2


@contextmanager
def _termination_handlers(callback: Callable[[], None], *, enabled: bool) -> Iterator[None]:
    """Route termination signals to ``callback`` for the duration of the block.

    Handlers can only be installed from the main thread; elsewhere the block
    runs without them.
    """
    if not enabled or threading.current_thread() is not threading.main_thread():
        yield
        return

    def _handle(signum: int, _frame: Any) -> None:
        logger.debug("Received %s; shutting down", signal.Signals(signum).name)
        callback()

    previous: dict[int, Any] = {}
    for name in TERMINATION_SIGNALS:
        signum = getattr(signal, name, None)
        if signum is None:
            continue
        previous[signum] = signal.signal(signum, _handle)
    try:
        yield
    finally:
        for signum, handler in previous.items():
            signal.signal(signum, handler)


def _default_input() -> IO[Any]:
    return getattr(sys.stdin, "buffer", sys.stdin)


class PrettyJsonLog:
    """Read JSON log lines and print them as coloured, single-line records.

    Parameters
    ----------
    config:
        Finished option set; defaults to :class:`PrettyJsonLogConfig` defaults.
    console:
        Output adapter; defaults to a :class:`RichConsoleAdapter` on stdout.
    palette:
        Style table shared by every record.
    queue_size:
        Lines buffered between reader and printer before the reader blocks.

    Examples
    --------
    >>> from io import StringIO
    >>> from rich.console import Console
    >>> out = StringIO()
    >>> console = RichConsoleAdapter(console=Console(file=out, color_system=None))
    >>> PrettyJsonLog(console=console).run(StringIO('plain text\\n'), install_signal_handlers=False)
    >>> out.getvalue()
    'plain text\\n'
    """

    def __init__(
        self,
        config: PrettyJsonLogConfig | None = None,
        *,
        console: ConsolePort | None = None,
        palette: Palette | None = None,
        queue_size: int = DEFAULT_QUEUE_SIZE,
    ) -> None:
        self.config = config or PrettyJsonLogConfig()
        self.palette = palette or Palette()
        self.console = console or RichConsoleAdapter()
        self.queue_size = queue_size
        self._stop_requested = threading.Event()

    def request_stop(self) -> None:
        """Trigger the same graceful shutdown path as end of input."""

        self._stop_requested.set()

    def run(self, stream: IO[Any] | None = None, *, install_signal_handlers: bool = True) -> None:
        """Process ``stream`` (stdin by default) until EOF or a stop request.

        Every line read before shutdown begins is printed before this returns.
        """

        source = stream if stream is not None else _default_input()
        self._stop_requested.clear()

        queue = QueueAdapter(
            worker=create_print_line(config=self.config, palette=self.palette, console=self.console),
            maxsize=self.queue_size,
        )
        gate = ShutdownGate()
        ingest = create_ingest(queue=queue, gate=gate)
        shutdown = create_shutdown(queue=queue, gate=gate)

        def _read() -> None:
            try:
                count = ingest(source)
                logger.debug("Input exhausted after %d line(s)", count)
            finally:
                self._stop_requested.set()

        queue.start()
        reader = threading.Thread(target=_read, name="pretty-json-log-reader", daemon=True)
        with _termination_handlers(self.request_stop, enabled=install_signal_handlers):
            reader.start()
            while not self._stop_requested.wait(_STOP_POLL_INTERVAL):
                continue
            shutdown()


def summary_info() -> str:
    """Return the metadata banner used by the CLI entry point.

    Examples
    --------
    >>> banner = summary_info()
    >>> "version" in banner
    True
    """
    from . import __init__conf__

    lines: list[str] = []

    def _capture(text: str) -> None:
        lines.append(text)

    __init__conf__.print_info(writer=_capture)
    return "".join(lines)


__all__ = ["PrettyJsonLog", "TERMINATION_SIGNALS", "summary_info"]
