"""A fixed-size pool of worker threads that run submitted callables."""

from __future__ import annotations

import queue
import threading
from typing import Callable

_STOP = object()


class TaskPool:
    """Runs submitted callables on a fixed number of worker threads.

    ``wait`` blocks until every submitted task has finished, then shuts the
    workers down; the pool accepts no tasks afterwards. The first exception
    raised by a task is re-raised from ``wait``.
    """

    def __init__(self, workers: int) -> None:
        if workers < 1:
            raise ValueError("a pool needs at least one worker")
        self.workers = workers
        self._tasks: queue.Queue = queue.Queue()
        self._lock = threading.Lock()
        self._closed = False
        self._errors: list[Exception] = []
        self._threads = [
            threading.Thread(target=self._run, daemon=True) for _ in range(workers)
        ]
        for thread in self._threads:
            thread.start()

    def _run(self) -> None:
        while True:
            func = self._tasks.get()
            try:
                if func is _STOP:
                    return
                func()
            except Exception as exc:
                with self._lock:
                    self._errors.append(exc)
            finally:
                self._tasks.task_done()

    def submit(self, func: Callable[[], object]) -> None:
        """Queue ``func`` to be called with no arguments."""
        with self._lock:
            if self._closed:
                raise RuntimeError("pool is closed")
            self._tasks.put(func)

    def wait(self) -> None:
        """Wait for all tasks, then stop the workers."""
        with self._lock:
            if self._closed:
                return
            self._closed = True
        self._tasks.join()
        for _ in self._threads:
            self._tasks.put(_STOP)
        for thread in self._threads:
            thread.join()
        if self._errors:
            raise self._errors[0]

    def __enter__(self) -> "TaskPool":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.wait()