"""Single-threaded queue for widget mutations."""

from __future__ import annotations

import threading
from collections import deque
from collections.abc import Callable

from orbgate.logging import get_logger

Task = Callable[[], None]


class ClientThread:
    """Closures scheduled here run in order on whichever thread drains the queue.

    The host's UI loop is expected to call :meth:`run_pending` once per frame;
    plugins only ever call :meth:`invoke_later`.
    """

    def __init__(self) -> None:
        self.logger = get_logger("client-thread")
        self._tasks: deque[Task] = deque()
        self._lock = threading.RLock()

    def invoke_later(self, task: Task) -> None:
        with self._lock:
            self._tasks.append(task)

    def pending(self) -> int:
        with self._lock:
            return len(self._tasks)

    def run_pending(self) -> int:
        """Run every queued task, including ones queued while draining."""
        ran = 0
        while True:
            with self._lock:
                if not self._tasks:
                    return ran
                task = self._tasks.popleft()
            try:
                task()
            except Exception as exc:
                self.logger.exception("Client thread task failed: {}", exc)
            ran += 1
