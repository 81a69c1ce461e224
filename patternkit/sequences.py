"""Lazy sequence builders and combinators."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator, Sequence
from itertools import zip_longest
from typing import TypeVar

T = TypeVar("T")

_MISSING = object()


def fibonacci(n: int) -> Iterator[int]:
    """Yield the first ``n + 1`` Fibonacci numbers, starting from 0."""
    lhs, rhs = 0, 1
    for _ in range(n + 1):
        yield lhs
        lhs, rhs = rhs, lhs + rhs


def integers(size: int) -> Iterator[int]:
    """Yield 0, 1, ..., size - 1."""
    yield from range(size)


def even(sequence: Iterable[int]) -> Iterator[int]:
    """Yield only the even values of ``sequence``."""
    return (value for value in sequence if value % 2 == 0)


def multiply(sequence: Iterable[int], number: int) -> Iterator[int]:
    """Yield every value of ``sequence`` multiplied by ``number``."""
    return (value * number for value in sequence)


def filter_values(sequence: Iterable[T], predicate: Callable[[T], bool]) -> Iterator[T]:
    """Yield the values of ``sequence`` for which ``predicate`` holds."""
    return (value for value in sequence if predicate(value))


def backward(data: Sequence[T]) -> Iterator[T]:
    """Yield the items of ``data`` from last to first."""
    return reversed(data)


def indexed(items: Iterable[T]) -> Iterator[tuple[int, T]]:
    """Yield ``(index, item)`` pairs."""
    return enumerate(items)


def equal(lhs: Iterable[T], rhs: Iterable[T]) -> bool:
    """Return True when both iterables produce the same values in the same order."""
    return all(a == b for a, b in zip_longest(lhs, rhs, fillvalue=_MISSING))