"""Collapse concurrent calls for the same key into a single execution."""

from __future__ import annotations

import threading
from collections.abc import Callable, Hashable
from typing import Generic, Optional, TypeVar

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")


class _Call(Generic[V]):
    def __init__(self) -> None:
        self.finished = threading.Event()
        self.value: Optional[V] = None
        self.error: Optional[Exception] = None

    def result(self) -> V:
        self.finished.wait()
        if self.error is not None:
            raise self.error
        return self.value  # type: ignore[return-value]


class SingleFlight(Generic[K, V]):
    """While an action for a key is running, later callers share its outcome."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._calls: dict[K, _Call[V]] = {}

    def do(self, key: K, action: Callable[[], V]) -> V:
        """Run ``action`` for ``key`` unless it is already running, and return its result.

        An error raised by the action is raised to every caller sharing it.
        """
        with self._lock:
            call = self._calls.get(key)
            if call is not None:
                leader = False
            else:
                call = _Call()
                self._calls[key] = call
                leader = True

        if leader:
            try:
                call.value = action()
            except Exception as error:
                call.error = error
            finally:
                with self._lock:
                    del self._calls[key]
                    call.finished.set()

        return call.result()