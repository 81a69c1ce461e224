"""A chainable, lazily evaluated stream over a collection."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from typing import Generic, TypeVar

T = TypeVar("T")


class Stream(Generic[T]):
    """Chainable view over a collection.

    ``map`` and ``filter`` are lazy and rebind this stream in place, returning it
    for chaining; every traversal re-runs the whole chain from the source data.
    """

    def __init__(self, iterable: Iterable[T]) -> None:
        items = list(iterable)
        self._source: Callable[[], Iterator[T]] = lambda: iter(items)

    def __iter__(self) -> Iterator[T]:
        return self._source()

    def collect(self) -> list[T]:
        """Materialise the current chain into a list."""
        return list(self)

    def map(self, action: Callable[[T], T]) -> Stream[T]:
        """Apply ``action`` to every value."""
        previous = self._source
        self._source = lambda: (action(value) for value in previous())
        return self

    def filter(self, predicate: Callable[[T], bool]) -> Stream[T]:
        """Keep only the values for which ``predicate`` holds."""
        previous = self._source
        self._source = lambda: (value for value in previous() if predicate(value))
        return self

    def reverse(self) -> Stream[T]:
        """Return a new stream over the current values in reverse order."""
        return Stream(reversed(self.collect()))

    def each(self, action: Callable[[T], object]) -> Stream[T]:
        """Call ``action`` on every current value and return this stream."""
        for value in self:
            action(value)
        return self