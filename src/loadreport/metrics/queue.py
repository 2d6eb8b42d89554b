from __future__ import annotations

import queue
import threading
from typing import Iterator

from loadreport.metrics.models import Result


class QueueClosedError(ValueError):
    pass


class QueueNotClosedError(ValueError):
    pass


class ResultQueue:
    """Many producers put, one consumer drains once every producer is done.

    Producers must finish (and the queue be closed) before ``drain`` runs,
    so an empty queue at drain time means every result has been seen.
    """

    def __init__(self) -> None:
        self._items: queue.SimpleQueue[Result] = queue.SimpleQueue()
        self._closed = threading.Event()
        self._lock = threading.Lock()

    @property
    def closed(self) -> bool:
        return self._closed.is_set()

    def put(self, result: Result) -> None:
        with self._lock:
            if self.closed:
                msg = "cannot put a result on a closed queue"
                raise QueueClosedError(msg)
            self._items.put_nowait(result)

    def close(self) -> None:
        with self._lock:
            self._closed.set()

    def drain(self) -> Iterator[Result]:
        if not self.closed:
            msg = "queue must be closed by the producers before it is drained"
            raise QueueNotClosedError(msg)
        return self._drain()

    def _drain(self) -> Iterator[Result]:
        while True:
            try:
                yield self._items.get_nowait()
            except queue.Empty:
                return
