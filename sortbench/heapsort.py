"""In-place heap sort over any list of mutually comparable items."""

from __future__ import annotations

from typing import Any, MutableSequence


def heapify(items: MutableSequence[Any], size: int, root: int) -> None:
    """Sift ``items[root]`` down so the subtree at ``root`` is a max-heap.

    Only the first ``size`` elements are treated as part of the heap.
    """
    while True:
        largest = root
        left = 2 * root + 1
        right = left + 1
        if left < size and items[left] > items[largest]:
            largest = left
        if right < size and items[right] > items[largest]:
            largest = right
        if largest == root:
            return
        items[root], items[largest] = items[largest], items[root]
        root = largest


def heapsort(items: MutableSequence[Any]) -> None:
    """Sort ``items`` in place in ascending order."""
    size = len(items)
    for root in range(size // 2 - 1, -1, -1):
        heapify(items, size, root)
    for end in range(size - 1, 0, -1):
        items[0], items[end] = items[end], items[0]
        heapify(items, end, 0)