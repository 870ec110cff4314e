"""Quick sort with Lomuto partitioning over an inclusive index range."""

from __future__ import annotations

from typing import Any, MutableSequence


def partition(items: MutableSequence[Any], left: int, right: int) -> int:
    """Partition ``items[left..right]`` around ``items[right]``.

    Returns the pivot's final index: everything before it is no greater
    than the pivot, everything after it is greater.
    """
    pivot = items[right]
    boundary = left - 1
    for index in range(left, right):
        if items[index] <= pivot:
            boundary += 1
            items[index], items[boundary] = items[boundary], items[index]
    items[right], items[boundary + 1] = items[boundary + 1], items[right]
    return boundary + 1


def quicksort(items: MutableSequence[Any], left: int = 0, right: int | None = None) -> None:
    """Sort ``items[left..right]`` (inclusive) in place."""
    if right is None:
        right = len(items) - 1
    pending = [(left, right)]
    while pending:
        low, high = pending.pop()
        if low < high:
            pivot = partition(items, low, high)
            pending.append((low, pivot - 1))
            pending.append((pivot + 1, high))