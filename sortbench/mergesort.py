"""Stable top-down merge sort over an inclusive index range."""

from __future__ import annotations

import heapq
from typing import Any, MutableSequence


def merge(items: MutableSequence[Any], left: int, mid: int, right: int) -> None:
    """Merge the sorted runs ``items[left..mid]`` and ``items[mid+1..right]``.

    Equal items keep their order, those of the left run first.
    """
    lower = items[left : mid + 1]
    upper = items[mid + 1 : right + 1]
    items[left : right + 1] = list(heapq.merge(lower, upper))


def mergesort(items: MutableSequence[Any], left: int = 0, right: int | None = None) -> None:
    """Sort ``items[left..right]`` (inclusive) in place."""
    if right is None:
        right = len(items) - 1
    if left < right:
        mid = left + (right - left) // 2
        mergesort(items, left, mid)
        mergesort(items, mid + 1, right)
        merge(items, left, mid, right)