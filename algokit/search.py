"""Binary search and lookups built on it."""

from __future__ import annotations

from bisect import bisect_left
from collections import Counter
from typing import Callable, Optional, Sequence


def first_bad_version(n: int, is_bad_version: Callable[[int], bool]) -> int:
    """Smallest version in ``1..n`` for which ``is_bad_version`` is true."""
    start, end = 1, n
    while start < end:
        mid = (start + end) // 2
        if is_bad_version(mid):
            end = mid
        else:
            start = mid + 1
    return start


def binary_search(items: Sequence[int], target: int) -> bool:
    """True when ``target`` occurs in the sorted sequence ``items``."""
    i = bisect_left(items, target)
    return i < len(items) and items[i] == target


def first_uniq_char(s: str) -> str:
    """First character that occurs once in ``s``, or a space if there is none."""
    counts = Counter(s)
    return next((ch for ch in s if counts[ch] == 1), " ")


def two_sum(nums: Sequence[int], target: int) -> Optional[list[int]]:
    """Two values of the sorted ``nums`` that add up to ``target``, or None.

    Values are tried from the largest down.
    """
    for value in reversed(nums):
        other = target - value
        if binary_search(nums, other):
            return [value, other]
    return None