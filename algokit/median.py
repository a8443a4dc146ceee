"""Running median of a stream, and the maximum of each sliding window."""

from __future__ import annotations

import heapq
from typing import Sequence


class MedianFinder:
    """Keeps the median of the numbers added so far.

    The lower half lives in a max-heap and the upper half in a min-heap;
    the upper half holds the extra element when the count is odd.
    """

    def __init__(self) -> None:
        self._lower: list[int] = []  # negated values
        self._upper: list[int] = []

    def add_num(self, num: int) -> None:
        """Add ``num`` to the stream."""
        if not self._upper or num > self._upper[0]:
            heapq.heappush(self._upper, num)
            if len(self._upper) > len(self._lower) + 1:
                heapq.heappush(self._lower, -heapq.heappop(self._upper))
        else:
            heapq.heappush(self._lower, -num)
            if len(self._lower) > len(self._upper):
                heapq.heappush(self._upper, -heapq.heappop(self._lower))

    def find_median(self) -> float:
        """Return the median of every number added."""
        if not self._upper:
            raise ValueError("no numbers added")
        if len(self._upper) > len(self._lower):
            return float(self._upper[0])
        return (self._upper[0] - self._lower[0]) / 2


def max_sliding_window(nums: Sequence[int], k: int) -> list[int]:
    """Maximum of every window of ``k`` consecutive elements."""
    if not 1 <= k <= len(nums):
        raise ValueError("k must be between 1 and len(nums)")
    heap = [(-nums[i], i) for i in range(k)]
    heapq.heapify(heap)
    result = [-heap[0][0]]
    for i in range(k, len(nums)):
        heapq.heappush(heap, (-nums[i], i))
        while heap[0][1] <= i - k:
            heapq.heappop(heap)
        result.append(-heap[0][0])
    return result