"""Thread-based bounded queue between the line reader and the printer.

Purpose
-------
Decouple reading standard input from rendering so a slow terminal applies
backpressure to the reader instead of growing memory.

Contents
--------
* :class:`QueueAdapter` - background worker implementation of :class:`QueuePort`.

System Role
-----------
Runs the printer use case on a dedicated thread. Lines are processed strictly in
insertion order; :meth:`QueueAdapter.stop` returns only after every queued line
has been handed to the worker.
"""

from __future__ import annotations

import logging
import queue
import threading
from collections.abc import Callable

from pretty_json_log.application.ports.queue import QueuePort


LOGGER = logging.getLogger(__name__)

DEFAULT_QUEUE_SIZE = 10


class QueueAdapter(QueuePort):
    """Process raw lines on a background thread.

    Examples
    --------
    >>> processed = []
    >>> adapter = QueueAdapter(worker=processed.append)
    >>> adapter.start()
    >>> adapter.put('{"msg": "hi"}')
    True
    >>> adapter.stop()
    >>> processed
    ['{"msg": "hi"}']
    """

    def __init__(
        self,
        *,
        worker: Callable[[str], None] | None = None,
        maxsize: int = DEFAULT_QUEUE_SIZE,
    ) -> None:
        """Create the queue with the printer callable and its capacity.

        Parameters
        ----------
        worker:
            Callable invoked for each line.
        maxsize:
            Number of buffered lines before :meth:`put` blocks the producer.
        """
        if maxsize < 1:
            raise ValueError("maxsize must be at least 1")
        self._worker = worker
        self._queue: queue.Queue[str | None] = queue.Queue(maxsize=maxsize)
        self._thread: threading.Thread | None = None

    def start(self) -> None:
        """Start the background worker thread if it is not already running."""
        if self._thread is not None and self._thread.is_alive():
            return
        self._thread = threading.Thread(target=self._run, name="pretty-json-log-printer", daemon=True)
        self._thread.start()

    def stop(self) -> None:
        """Process every line queued before the call, then join the worker."""
        thread = self._thread
        if thread is None:
            return
        self._queue.put(None)
        thread.join()
        self._thread = None

    def put(self, line: str) -> bool:
        """Enqueue ``line``, blocking while the queue is full."""
        self._queue.put(line)
        return True

    def _run(self) -> None:
        """Internal worker loop draining the queue until the stop sentinel."""
        while True:
            item = self._queue.get()
            if item is None:
                break
            if self._worker is None:
                continue
            try:
                self._worker(item)
            except Exception as exc:  # noqa: BLE001
                LOGGER.error("Printer raised while rendering a line; continuing", exc_info=exc)


__all__ = ["DEFAULT_QUEUE_SIZE", "QueueAdapter"]
