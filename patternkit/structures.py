"""Small iterable data structures: a linked list, a collection and a binary tree."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


@dataclass
class _LinkedNode(Generic[T]):
    value: T
    next: Optional[_LinkedNode[T]] = None


class LinkedList(Generic[T]):
    """Singly linked list where new values are pushed at the head."""

    def __init__(self) -> None:
        self._head: Optional[_LinkedNode[T]] = None

    def push(self, value: T) -> None:
        """Insert ``value`` at the front of the list."""
        self._head = _LinkedNode(value, self._head)

    def __iter__(self) -> Iterator[T]:
        node = self._head
        while node is not None:
            yield node.value
            node = node.next


@dataclass
class CollectionItem:
    field1: int
    field2: int


class Collection:
    """An iterable collection of items."""

    def __init__(self, items: Iterable[CollectionItem]) -> None:
        self.items = list(items)

    def __iter__(self) -> Iterator[CollectionItem]:
        return iter(self.items)


@dataclass
class TreeNode(Generic[T]):
    """Binary tree node with pre-order and in-order traversals."""

    value: T
    left: Optional[TreeNode[T]] = None
    right: Optional[TreeNode[T]] = None

    def pre_order(self) -> Iterator[T]:
        """Yield node, then left subtree, then right subtree."""
        yield self.value
        if self.left is not None:
            yield from self.left.pre_order()
        if self.right is not None:
            yield from self.right.pre_order()

    def in_order(self) -> Iterator[T]:
        """Yield left subtree, then node, then right subtree."""
        if self.left is not None:
            yield from self.left.in_order()
        yield self.value
        if self.right is not None:
            yield from self.right.in_order()