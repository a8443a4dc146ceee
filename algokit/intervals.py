"""Puzzles over ranges and interval lists."""

from __future__ import annotations

from collections import Counter
from itertools import pairwise
from typing import Sequence


def smallest_common_element(mat: Sequence[Sequence[int]]) -> int:
    """Smallest value present in every row of ``mat``, or -1."""
    counts = Counter(value for row in mat for value in row)
    return min(
        (value for value, count in counts.items() if count >= len(mat)), default=-1
    )


def find_missing_ranges(nums: Sequence[int], lower: int, upper: int) -> list[list[int]]:
    """The ``[start, end]`` ranges of ``lower..upper`` not covered by sorted ``nums``."""
    if not nums:
        return [[lower, upper]]
    ranges = []
    if nums[0] > lower:
        ranges.append([lower, nums[0] - 1])
    for previous, current in pairwise(nums):
        if current - previous > 1:
            ranges.append([previous + 1, current - 1])
    if upper > nums[-1]:
        ranges.append([nums[-1] + 1, upper])
    return ranges


def can_attend_meetings(intervals: Sequence[Sequence[int]]) -> bool:
    """True when no two ``[start, end]`` meetings overlap; touching is allowed."""
    ordered = sorted(intervals, key=lambda interval: interval[0])
    return all(later[0] >= earlier[1] for earlier, later in pairwise(ordered))