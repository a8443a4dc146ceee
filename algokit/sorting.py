"""Classic sorting algorithms on lists of integers."""

from __future__ import annotations

import heapq
from typing import MutableSequence, Sequence


def _partition(items: MutableSequence[int], left: int, right: int) -> int:
    pivot = items[left]
    boundary = left + 1
    for i in range(boundary, right + 1):
        if items[i] < pivot:
            items[i], items[boundary] = items[boundary], items[i]
            boundary += 1
    items[left], items[boundary - 1] = items[boundary - 1], items[left]
    return boundary - 1


def quick_sort(items: MutableSequence[int]) -> None:
    """Sort ``items`` in place with quicksort (not stable)."""
    pending = [(0, len(items) - 1)]
    while pending:
        left, right = pending.pop()
        if left < right:
            pivot = _partition(items, left, right)
            pending.append((left, pivot - 1))
            pending.append((pivot + 1, right))


def merge(left: Sequence[int], right: Sequence[int]) -> list[int]:
    """Merge two sorted sequences into a new sorted list, left first on ties."""
    return list(heapq.merge(left, right))


def merge_sort(items: Sequence[int]) -> list[int]:
    """Return a sorted copy of ``items`` using a stable merge sort."""
    if len(items) < 2:
        return list(items)
    middle = len(items) // 2
    return merge(merge_sort(items[:middle]), merge_sort(items[middle:]))


def counting_sort(items: MutableSequence[int], max_value: int) -> None:
    """Sort ``items`` in place; every value must lie in ``0..max_value - 1``."""
    counts = [0] * max_value
    for value in items:
        if not 0 <= value < max_value:
            raise ValueError(f"value {value} outside 0..{max_value - 1}")
        counts[value] += 1
    items[:] = [value for value, count in enumerate(counts) for _ in range(count)]