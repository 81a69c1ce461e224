"""Synchronisation primitives: a semaphore, a blocking queue, a call-once guard and an error group."""

from __future__ import annotations

import threading
from collections import deque
from collections.abc import Callable
from typing import Any, Generic, Optional, TypeVar

T = TypeVar("T")


class Semaphore:
    """Limits how many routines run at once."""

    def __init__(self, initial_value: int) -> None:
        if initial_value < 0:
            raise ValueError("semaphore value must not be negative")
        self._slots = threading.BoundedSemaphore(initial_value)

    def acquire(self) -> None:
        """Take a slot, blocking until one is free."""
        self._slots.acquire()

    def release(self) -> None:
        """Give a slot back; raises ValueError if none is taken."""
        self._slots.release()

    def __enter__(self) -> Semaphore:
        self.acquire()
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.release()

    def go(self, routine: Callable[[], Any]) -> threading.Thread:
        """Take a slot, then run ``routine`` in a thread that frees it when done."""
        self.acquire()

        def run() -> None:
            try:
                routine()
            finally:
                self.release()

        thread = threading.Thread(target=run, daemon=True)
        thread.start()
        return thread


class BlockingQueue(Generic[T]):
    """Unbounded FIFO queue whose ``front`` waits for a value."""

    def __init__(self) -> None:
        self._items: deque[T] = deque()
        self._not_empty = threading.Condition()

    def __len__(self) -> int:
        with self._not_empty:
            return len(self._items)

    def push(self, value: T) -> None:
        """Append ``value`` and wake one waiting consumer."""
        with self._not_empty:
            self._items.append(value)
            self._not_empty.notify()

    def front(self) -> T:
        """Remove and return the oldest value, waiting while the queue is empty."""
        with self._not_empty:
            self._not_empty.wait_for(lambda: bool(self._items))
            return self._items.popleft()


class CallOnce:
    """Runs an action at most once, however many threads ask."""

    def __init__(self) -> None:
        self._done = False
        self._lock = threading.Lock()

    def once(self, action: Callable[[], Any]) -> bool:
        """Run ``action`` if no action has run yet; return whether it ran.

        An action that raises still counts as having run.
        """
        if self._done:
            return False
        with self._lock:
            if self._done:
                return False
            try:
                action()
            finally:
                self._done = True
        return True


class ErrorGroup:
    """Runs tasks in threads and keeps the first error any of them raises.

    Once a task has failed, tasks that have not yet started are skipped.
    """

    def __init__(self) -> None:
        self._error: Optional[Exception] = None
        self._done = threading.Event()
        self._lock = threading.Lock()
        self._threads: list[threading.Thread] = []

    @property
    def done(self) -> threading.Event:
        """Set as soon as a task has failed."""
        return self._done

    def go(self, task: Callable[[], Any]) -> None:
        """Start ``task`` in a new thread."""

        def run() -> None:
            if self._done.is_set():
                return
            try:
                task()
            except Exception as error:
                with self._lock:
                    if self._error is None:
                        self._error = error
                        self._done.set()

        thread = threading.Thread(target=run, daemon=True)
        with self._lock:
            self._threads.append(thread)
        thread.start()

    def wait(self) -> None:
        """Wait for every started task, then raise the first error if there was one."""
        joined = 0
        while True:
            with self._lock:
                pending = self._threads[joined:]
            if not pending:
                break
            for thread in pending:
                thread.join()
            joined += len(pending)
        if self._error is not None:
            raise self._error