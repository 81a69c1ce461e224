"""A fixed-size pool of worker threads fed from a bounded task channel."""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable
from typing import Any

from .channel import Channel, ChannelClosedError

_log = logging.getLogger(__name__)

_POLL_INTERVAL = 0.01


class PoolClosedError(Exception):
    """Raised when a pool that has been shut down is used."""


class WorkerPool:
    """Runs submitted tasks on ``workers_count`` threads.

    ``tasks_capacity`` is how many tasks may wait in the queue; with 0 a
    submission waits until a worker takes it.
    """

    def __init__(self, workers_count: int, tasks_capacity: int) -> None:
        if workers_count < 1:
            raise ValueError("workers count must be positive")
        self._tasks: Channel[Callable[[], Any]] = Channel(tasks_capacity)
        self._force = threading.Event()
        self._lock = threading.Lock()
        self._closed = False
        self._workers = [
            threading.Thread(target=self._work, args=(index,), daemon=True)
            for index in range(workers_count)
        ]
        for worker in self._workers:
            worker.start()

    @property
    def closed(self) -> bool:
        """True once a shutdown has begun."""
        with self._lock:
            return self._closed

    def __enter__(self) -> WorkerPool:
        return self

    def __exit__(self, *exc_info: object) -> None:
        if not self.closed:
            self.graceful_shutdown()

    def _work(self, index: int) -> None:
        try:
            while not self._force.is_set():
                try:
                    task = self._tasks.receive(timeout=_POLL_INTERVAL)
                except TimeoutError:
                    continue
                except ChannelClosedError:
                    _log.debug("[worker #%d] task queue closed", index)
                    return
                try:
                    task()
                except Exception:
                    _log.exception("[worker #%d] task failed", index)
                else:
                    _log.debug("[worker #%d] made task", index)
        finally:
            _log.debug("[worker #%d] stopped", index)

    def do(self, task: Callable[[], Any]) -> None:
        """Queue ``task``, waiting while the queue is full."""
        if self.closed:
            raise PoolClosedError("worker pool is closed, cannot accept new tasks")
        try:
            self._tasks.send(task)
        except ChannelClosedError as error:
            raise PoolClosedError(
                "worker pool is closed, cannot accept new tasks"
            ) from error

    def _begin_shutdown(self) -> None:
        with self._lock:
            if self._closed:
                raise PoolClosedError("worker pool already shut down")
            self._closed = True

    def _join_workers(self) -> None:
        for worker in self._workers:
            worker.join()

    def graceful_shutdown(self) -> None:
        """Stop accepting tasks, run every queued one, then wait for the workers."""
        self._begin_shutdown()
        self._tasks.close()
        self._join_workers()

    def force_shutdown(self) -> None:
        """Stop the workers after their current task, dropping queued ones."""
        self._begin_shutdown()
        self._force.set()
        self._join_workers()
        self._tasks.close()