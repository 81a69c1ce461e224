"""A thread-safe channel with close semantics, and simple producer/stage helpers."""

from __future__ import annotations

import threading
from collections import deque
from collections.abc import Callable, Iterable, Iterator
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


class ChannelClosedError(Exception):
    """Raised on sending to, closing twice, or receiving from a drained closed channel."""


class Channel(Generic[T]):
    """A FIFO channel shared between threads.

    With ``capacity`` 0 a send blocks until a receiver has taken the value;
    otherwise a send blocks only while the buffer is full.
    """

    def __init__(self, capacity: int = 0) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self._capacity = capacity
        self._items: deque[T] = deque()
        self._closed = False
        self._sent = 0
        self._received = 0
        self._cond = threading.Condition()

    @property
    def closed(self) -> bool:
        """True once the channel has been closed."""
        with self._cond:
            return self._closed

    def send(self, value: T) -> None:
        """Put ``value`` into the channel, blocking as described on the class."""
        slots = max(self._capacity, 1)
        with self._cond:
            self._cond.wait_for(lambda: self._closed or len(self._items) < slots)
            if self._closed:
                raise ChannelClosedError("send on closed channel")
            self._items.append(value)
            self._sent += 1
            ticket = self._sent
            self._cond.notify_all()
            if self._capacity == 0:
                self._cond.wait_for(
                    lambda: self._closed or self._received >= ticket
                )

    def receive(self, timeout: Optional[float] = None) -> T:
        """Take the next value.

        Raises ChannelClosedError when the channel is closed and empty, and
        TimeoutError when ``timeout`` seconds pass without a value.
        """
        with self._cond:
            ready = self._cond.wait_for(
                lambda: self._closed or bool(self._items), timeout
            )
            if not ready:
                raise TimeoutError("no value received in time")
            if not self._items:
                raise ChannelClosedError("receive from closed channel")
            value = self._items.popleft()
            self._received += 1
            self._cond.notify_all()
            return value

    def close(self) -> None:
        """Close the channel; values already in it can still be received."""
        with self._cond:
            if self._closed:
                raise ChannelClosedError("close of closed channel")
            self._closed = True
            self._cond.notify_all()

    def __iter__(self) -> Iterator[T]:
        while True:
            try:
                yield self.receive()
            except ChannelClosedError:
                return


def _feed(values: Iterable[T]) -> Channel[T]:
    output: Channel[T] = Channel()

    def run() -> None:
        try:
            for value in values:
                output.send(value)
        finally:
            output.close()

    threading.Thread(target=run, daemon=True).start()
    return output


def generate(left: int, right: int) -> Channel[int]:
    """Return a channel producing ``left`` .. ``right - 1``, then closed."""
    return _feed(range(left, right))


def generate_values(*args: T) -> Channel[T]:
    """Return a channel producing the given values in order, then closed."""
    return _feed(args)


def transform(input_channel: Channel[T], operation: Callable[[T], T]) -> Channel[T]:
    """Return a channel of ``operation`` applied to every value of ``input_channel``."""
    return _feed(operation(value) for value in input_channel)


def filter_channel(
    input_channel: Channel[T], predicate: Callable[[T], bool]
) -> Channel[T]:
    """Return a channel of the values of ``input_channel`` that satisfy ``predicate``."""
    return _feed(value for value in input_channel if predicate(value))