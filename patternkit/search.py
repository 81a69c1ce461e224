"""Binary-search based algorithms over sorted sequences, plus bracket matching."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TypeVar

T = TypeVar("T")

_CLOSING_TO_OPENING = {")": "(", "}": "{", "]": "["}
_OPENING = frozenset(_CLOSING_TO_OPENING.values())


def count_negatives(grid: Sequence[Sequence[int]]) -> int:
    """Count negative numbers in a grid whose rows are sorted in descending order."""
    total = 0
    for row in grid:
        left, right = 0, len(row) - 1
        while left <= right:
            middle = (left + right) // 2
            if row[middle] < 0:
                right = middle - 1
            else:
                left = middle + 1
        total += len(row) - left
    return total


def is_valid(s: str) -> bool:
    """Return True when every bracket in ``s`` is closed in the right order.

    Any character that is not a bracket makes the string invalid.
    """
    stack: list[str] = []
    for ch in s:
        if ch in _OPENING:
            stack.append(ch)
            continue
        if not stack or _CLOSING_TO_OPENING.get(ch) != stack[-1]:
            return False
        stack.pop()
    return not stack


def search_insert(nums: Sequence[int], target: int) -> int:
    """Return the index of ``target`` in ``nums``, or where it would be inserted."""
    left, right = 0, len(nums) - 1
    while left <= right:
        middle = (left + right) // 2
        value = nums[middle]
        if value == target:
            return middle
        if target > value:
            left = middle + 1
        else:
            right = middle - 1
    return left


def search(nums: Sequence[int], target: int) -> int:
    """Return the index of ``target`` in sorted ``nums``, or -1 if absent."""
    left, right = 0, len(nums) - 1
    while left <= right:
        middle = (left + right) // 2
        value = nums[middle]
        if value == target:
            return middle
        if value < target:
            left = middle + 1
        else:
            right = middle - 1
    return -1


def next_greatest_letter(letters: Sequence[T], target: T) -> T:
    """Return the smallest letter strictly greater than ``target``, wrapping around.

    Raises IndexError when ``letters`` is empty.
    """
    if target >= letters[-1]:
        return letters[0]
    left, right = 0, len(letters) - 1
    while left <= right:
        middle = (left + right) // 2
        if letters[middle] > target:
            right = middle - 1
        else:
            left = middle + 1
    return letters[left]


def search_range_scan(nums: Sequence[int], target: int) -> tuple[int, int]:
    """Find the first and last positions of ``target`` by bisecting once and scanning outward."""
    left, right = 0, len(nums) - 1
    while left <= right:
        middle = (left + right) // 2
        value = nums[middle]
        if value == target:
            first = middle
            while first > 0 and nums[first - 1] == target:
                first -= 1
            last = middle
            while last < len(nums) - 1 and nums[last + 1] == target:
                last += 1
            return first, last
        if value < target:
            left = middle + 1
        else:
            right = middle - 1
    return -1, -1


def binary_search(nums: Sequence[int], target: int, go_left: bool) -> int:
    """Return the leftmost (``go_left``) or rightmost index of ``target``, or -1."""
    left, right = 0, len(nums) - 1
    index = -1
    while left <= right:
        middle = (left + right) // 2
        value = nums[middle]
        if value == target:
            index = middle
            if go_left:
                right = middle - 1
            else:
                left = middle + 1
        elif value < target:
            left = middle + 1
        else:
            right = middle - 1
    return index


def search_range(nums: Sequence[int], target: int) -> tuple[int, int]:
    """Find the first and last positions of ``target`` with two bounded searches."""
    return (
        binary_search(nums, target, go_left=True),
        binary_search(nums, target, go_left=False),
    )