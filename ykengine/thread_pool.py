"""A fixed-size pool of worker threads fed from a shared task queue."""

from __future__ import annotations

import os
import threading
from collections import deque
from functools import partial
from typing import Any, Callable


def _default_thread_count() -> int:
    return max(1, (os.cpu_count() or 1) - 1)


class ThreadPool:
    """Runs queued callables on worker threads.

    Tasks may be queued before :meth:`start`. Exceptions raised by tasks are
    collected in :attr:`errors` rather than killing the worker.
    """

    def __init__(self, num_threads: int | None = None) -> None:
        if num_threads is None:
            num_threads = _default_thread_count()
        if num_threads < 1:
            raise ValueError("a thread pool needs at least one thread")
        self.num_threads = num_threads
        self.errors: list[BaseException] = []
        self._tasks: deque[Callable[[], Any]] = deque()
        self._lock = threading.Lock()
        self._work_available = threading.Condition(self._lock)
        self._finished = threading.Condition(self._lock)
        self._active_tasks = 0
        self._stopping = False
        self._workers: list[threading.Thread] = []

    @property
    def is_running(self) -> bool:
        """Whether worker threads have been started and not shut down."""
        return bool(self._workers)

    def __enter__(self) -> ThreadPool:
        self.start()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.shutdown()

    def start(self) -> None:
        """Start the worker threads."""
        if self._workers:
            raise RuntimeError("thread pool is already running")
        with self._lock:
            self._stopping = False
        self._workers = [
            threading.Thread(target=self._worker, daemon=True)
            for _ in range(self.num_threads)
        ]
        for worker in self._workers:
            worker.start()

    def shutdown(self) -> None:
        """Stop the workers once every queued task has run, and join them."""
        if not self._workers:
            return
        with self._lock:
            self._stopping = True
            self._work_available.notify_all()
        for worker in self._workers:
            worker.join()
        self._workers = []

    def enqueue_task(self, task: Callable[..., Any], *args: Any, **kwargs: Any) -> None:
        """Queue ``task(*args, **kwargs)`` to run on a worker."""
        call = partial(task, *args, **kwargs) if args or kwargs else task
        with self._lock:
            if self._stopping:
                raise RuntimeError("thread pool has been shut down")
            self._tasks.append(call)
            self._active_tasks += 1
            self._work_available.notify()

    def wait_for_completion(self) -> None:
        """Block until the queue is empty and every task has finished."""
        with self._lock:
            if not self._workers and self._active_tasks:
                raise RuntimeError("tasks are pending but the pool is not running")
            self._finished.wait_for(
                lambda: not self._tasks and self._active_tasks == 0
            )

    def _worker(self) -> None:
        while True:
            with self._lock:
                self._work_available.wait_for(lambda: self._stopping or self._tasks)
                if self._stopping and not self._tasks:
                    return
                task = self._tasks.popleft()
            error: BaseException | None = None
            try:
                task()
            except Exception as exc:  # noqa: BLE001 - recorded for the caller
                error = exc
            with self._lock:
                if error is not None:
                    self.errors.append(error)
                self._active_tasks -= 1
                self._finished.notify_all()