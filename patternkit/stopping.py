"""Cancellable forwarding and periodic background work driven by stop signals."""

from __future__ import annotations

import threading
from collections.abc import Callable, Iterator
from typing import Generic, Optional, TypeVar

from .channel import Channel, ChannelClosedError

T = TypeVar("T")

_POLL_INTERVAL = 0.01


def stop_or_done(data_channel: Channel[T], stop: threading.Event) -> Channel[T]:
    """Forward values from ``data_channel`` until it closes or ``stop`` is set.

    A set stop signal takes priority over a value that is ready at the same time.
    """
    output: Channel[T] = Channel()

    def run() -> None:
        try:
            while not stop.is_set():
                try:
                    value = data_channel.receive(timeout=_POLL_INTERVAL)
                except TimeoutError:
                    continue
                except ChannelClosedError:
                    return
                output.send(value)
        finally:
            output.close()

    threading.Thread(target=run, daemon=True).start()
    return output


class StopOrDoneWorker(Generic[T]):
    """Forwards ``data_channel`` into ``channel`` until shut down or the input closes."""

    def __init__(self, data_channel: Channel[T]) -> None:
        self._stop = threading.Event()
        self.channel: Channel[T] = stop_or_done(data_channel, self._stop)

    def __iter__(self) -> Iterator[T]:
        return iter(self.channel)

    def shutdown(self) -> None:
        """Signal the worker to stop forwarding."""
        if self._stop.is_set():
            raise RuntimeError("worker already stopped")
        self._stop.set()


def _check_period(period: float) -> None:
    if period <= 0:
        raise ValueError("period must be positive")


def process(
    stop: threading.Event, period: float, routine: Callable[[], object]
) -> threading.Event:
    """Call ``routine`` every ``period`` seconds until ``stop`` is set.

    Returns an event that is set once the background loop has finished.
    """
    _check_period(period)
    done = threading.Event()

    def run() -> None:
        try:
            while not stop.wait(period):
                routine()
        finally:
            done.set()

    threading.Thread(target=run, daemon=True).start()
    return done


class PeriodicWorker:
    """Runs ``routine`` every ``period`` seconds between ``launch`` and ``shutdown``."""

    def __init__(self, period: float, routine: Callable[[], object]) -> None:
        _check_period(period)
        self._period = period
        self._routine = routine
        self._stop: Optional[threading.Event] = None
        self._done: Optional[threading.Event] = None

    @property
    def running(self) -> bool:
        """True between ``launch`` and ``shutdown``."""
        return self._stop is not None

    def launch(self) -> None:
        """Start the periodic loop in the background."""
        if self._stop is not None:
            raise RuntimeError("worker already working")
        self._stop = threading.Event()
        self._done = process(self._stop, self._period, self._routine)

    def shutdown(self) -> None:
        """Stop the loop and wait for it to finish."""
        if self._stop is None or self._done is None:
            raise RuntimeError("worker already stopped")
        self._stop.set()
        self._done.wait()
        self._stop = None
        self._done = None