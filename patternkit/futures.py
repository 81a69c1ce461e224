"""Futures resolved by background work, promises that feed them, and callback promises."""

from __future__ import annotations

import threading
from collections.abc import Callable
from typing import Any, Generic, Optional, TypeVar

T = TypeVar("T")


class Future(Generic[T]):
    """A value that becomes available once some other thread resolves it."""

    def __init__(self) -> None:
        self._resolved = threading.Event()
        self._lock = threading.Lock()
        self._value: Optional[T] = None
        self._error: Optional[BaseException] = None

    def done(self) -> bool:
        """True once a value or an error has been stored."""
        return self._resolved.is_set()

    def get(self, timeout: Optional[float] = None) -> T:
        """Wait for the result and return it, re-raising a stored error.

        Raises TimeoutError when ``timeout`` seconds pass first.
        """
        if not self._resolved.wait(timeout):
            raise TimeoutError("future not resolved in time")
        if self._error is not None:
            raise self._error
        return self._value  # type: ignore[return-value]

    def _resolve(
        self, value: Optional[T] = None, error: Optional[BaseException] = None
    ) -> None:
        with self._lock:
            if self._resolved.is_set():
                raise RuntimeError("future already resolved")
            self._value = value
            self._error = error
            self._resolved.set()


def run_async(operation: Callable[[], T]) -> Future[T]:
    """Run ``operation`` in a background thread and return a future of its result."""
    future: Future[T] = Future()

    def run() -> None:
        try:
            value = operation()
        except Exception as error:
            future._resolve(error=error)
        else:
            future._resolve(value)

    threading.Thread(target=run, daemon=True).start()
    return future


class Promise(Generic[T]):
    """The writing side of a future: set a value once, read it through ``get_future``."""

    def __init__(self) -> None:
        self._future: Future[T] = Future()

    def set(self, value: T) -> None:
        """Resolve the future; a second call raises RuntimeError."""
        self._future._resolve(value)

    def get_future(self) -> Future[T]:
        """Return the future this promise resolves."""
        return self._future


class CallbackPromise(Generic[T]):
    """Runs ``routine`` in the background and hands its outcome to callbacks."""

    def __init__(self, routine: Callable[[], T]) -> None:
        self._future = run_async(routine)

    def then(
        self,
        on_success: Callable[[T], Any],
        on_error: Callable[[Exception], Any],
    ) -> Future[None]:
        """Call ``on_success`` with the result or ``on_error`` with the raised error.

        The callback runs in a background thread; the returned future resolves
        once it has finished.
        """

        def dispatch() -> None:
            try:
                value = self._future.get()
            except Exception as error:
                on_error(error)
                return
            on_success(value)

        return run_async(dispatch)