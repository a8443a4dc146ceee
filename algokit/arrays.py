"""Array and string puzzles, plus a randomized set and an array shuffler."""

from __future__ import annotations

import math
import random
from collections import Counter
from typing import Hashable, Iterable, MutableSequence, Optional, Sequence

from .search import binary_search

_ROTATED_DIGITS = {0: 0, 1: 1, 6: 9, 8: 8, 9: 6}


def is_unique(items: Iterable[Hashable]) -> bool:
    """True when no element of ``items`` occurs twice."""
    seen = set()
    for item in items:
        if item in seen:
            return False
        seen.add(item)
    return True


def max_distance(arrays: Sequence[Sequence[int]]) -> int:
    """Largest ``|a - b|`` with ``a`` and ``b`` taken from two different sorted arrays.

    Returns 0 for no arrays; a single array has no pair to measure.
    """
    if not arrays:
        return 0
    if len(arrays) < 2:
        raise ValueError("need at least two arrays")
    best = -math.inf
    low, high = arrays[0][0], arrays[0][-1]
    for array in arrays[1:]:
        best = max(best, abs(array[-1] - low), abs(high - array[0]))
        low = min(low, array[0])
        high = max(high, array[-1])
    return int(best)


def confusing_number(n: int) -> bool:
    """True when ``n`` turned upside down is a valid, different number."""
    rotated = 0
    rest = n
    while rest:
        rest, digit = divmod(rest, 10)
        if digit not in _ROTATED_DIGITS:
            return False
        rotated = rotated * 10 + _ROTATED_DIGITS[digit]
    return rotated != n


def string_shift(s: str, shift: Iterable[Sequence[int]]) -> str:
    """Apply ``[direction, amount]`` shifts; direction 0 is left, 1 is right."""
    if not s:
        return s
    moved = sum(amount if direction == 0 else -amount for direction, amount in shift)
    start = moved % len(s)
    return s[start:] + s[:start]


def is_one_edit_distance(s: str, t: str) -> bool:
    """True when exactly one insertion, deletion or replacement turns ``s`` into ``t``."""
    if len(s) < len(t):
        s, t = t, s
    difference = len(s) - len(t)
    if difference > 1:
        return False
    if difference == 0:
        return sum(a != b for a, b in zip(s, t)) == 1
    for i, (a, b) in enumerate(zip(s, t)):
        if a != b:
            return s[i + 1:] == t[i:]
    return True


def max_sub_array(nums: Sequence[int]) -> int:
    """Largest sum of a non-empty contiguous subarray."""
    if not nums:
        raise ValueError("nums must not be empty")
    best = current = nums[0]
    for value in nums[1:]:
        current = max(current + value, value)
        best = max(best, current)
    return best


def max_product(nums: Sequence[int]) -> int:
    """Largest product of a non-empty contiguous subarray; 0 for no numbers."""
    if not nums:
        return 0
    high = low = best = nums[0]
    for value in nums[1:]:
        candidates = (high * value, low * value, value)
        high, low = max(candidates), min(candidates)
        best = max(best, high)
    return best


def majority_element(nums: Sequence[int]) -> int:
    """Most frequent value of ``nums``; 0 for no numbers."""
    if not nums:
        return 0
    return Counter(nums).most_common(1)[0][0]


def rotate(nums: MutableSequence[int], k: int) -> None:
    """Rotate ``nums`` right by ``k`` places, in place."""
    if not nums:
        return
    k %= len(nums)
    nums[:] = list(nums[len(nums) - k:]) + list(nums[:len(nums) - k])


def contains_duplicate(nums: Sequence[int]) -> bool:
    """True when some value occurs more than once."""
    return not is_unique(nums)


def move_zeroes(nums: MutableSequence[int]) -> None:
    """Move every zero to the end, in place, keeping the other values in order."""
    non_zero = [value for value in nums if value != 0]
    nums[:] = non_zero + [0] * (len(nums) - len(non_zero))


def intersect(nums1: Sequence[int], nums2: Sequence[int]) -> list[int]:
    """Multiset intersection of the two sequences, in ascending order."""
    return sorted((Counter(nums1) & Counter(nums2)).elements())


def search_matrix(matrix: Iterable[Sequence[int]], target: int) -> bool:
    """True when ``target`` is in a matrix whose rows are sorted."""
    return any(binary_search(row, target) for row in matrix)


def product_except_self(nums: Sequence[int]) -> list[int]:
    """For each position, the product of every other element."""
    zeros = sum(1 for value in nums if value == 0)
    product = math.prod(value for value in nums if value != 0)
    if zeros > 1:
        return [0] * len(nums)
    if zeros == 1:
        if zeros == len(nums):
            return [0]
        return [product if value == 0 else 0 for value in nums]
    return [product // value for value in nums]


def _truncating_div(a: int, b: int) -> int:
    quotient = abs(a) // abs(b)
    return quotient if (a < 0) == (b < 0) else -quotient


def calculate(s: str) -> int:
    """Evaluate an expression of non-negative integers and ``+ - * /``.

    Multiplication and division bind tighter; division truncates toward zero.
    """
    terms: list[int] = []
    number = 0
    sign = "+"

    def flush() -> None:
        if sign == "+":
            terms.append(number)
        elif sign == "-":
            terms.append(-number)
        elif sign == "*":
            terms[-1] *= number
        else:
            terms[-1] = _truncating_div(terms[-1], number)

    for ch in s:
        if ch.isdigit():
            number = number * 10 + int(ch)
        elif ch in "+-*/":
            flush()
            sign = ch
            number = 0
        elif ch != " ":
            raise ValueError(f"unexpected character {ch!r}")
    if s.strip():
        flush()
    return sum(terms)


def title_to_number(column_title: str) -> int:
    """Spreadsheet column number of a title such as ``"AB"``."""
    total = 0
    for ch in column_title:
        if not "A" <= ch <= "Z":
            raise ValueError(f"invalid column letter {ch!r}")
        total = total * 26 + ord(ch) - ord("A") + 1
    return total


def can_complete_circuit(gas: Sequence[int], cost: Sequence[int]) -> int:
    """Index of a station to start from to drive the whole circle, or -1.

    When several stations work, the highest index is returned.
    """
    if len(gas) != len(cost):
        raise ValueError("gas and cost must have the same length")
    length = len(gas)

    def completes(start: int) -> bool:
        tank = 0
        for step in range(length):
            station = (start + step) % length
            tank += gas[station] - cost[station]
            if tank < 0:
                return False
        return True

    return next((i for i in reversed(range(length)) if completes(i)), -1)


def max_profit(prices: Sequence[int]) -> int:
    """Best profit from one buy followed by one sell; 0 if none is possible."""
    best = 0
    lowest: Optional[int] = None
    for price in prices:
        if lowest is not None:
            best = max(best, price - lowest)
        if lowest is None or price < lowest:
            lowest = price
    return best


def length_of_longest_substring(s: str) -> int:
    """Length of the longest substring without a repeated character."""
    last_seen: dict[str, int] = {}
    best = left = 0
    for right, ch in enumerate(s):
        if last_seen.get(ch, -1) >= left:
            left = last_seen[ch] + 1
        last_seen[ch] = right
        best = max(best, right - left + 1)
    return best


class RandomizedSet:
    """Set with O(1) insert, remove and uniform random pick."""

    def __init__(self, rng: Optional[random.Random] = None) -> None:
        self._index: dict[int, int] = {}
        self._values: list[int] = []
        self._rng = rng or random.Random()

    def insert(self, value: int) -> bool:
        """Add ``value``; False if it was already there."""
        if value in self._index:
            return False
        self._index[value] = len(self._values)
        self._values.append(value)
        return True

    def remove(self, value: int) -> bool:
        """Remove ``value``; False if it was not there."""
        position = self._index.pop(value, None)
        if position is None:
            return False
        last = self._values.pop()
        if position < len(self._values):
            self._values[position] = last
            self._index[last] = position
        return True

    def get_random(self) -> int:
        """Return a stored value chosen uniformly at random."""
        if not self._values:
            raise IndexError("random pick from empty set")
        return self._rng.choice(self._values)

    def __contains__(self, value: object) -> bool:
        return value in self._index

    def __len__(self) -> int:
        return len(self._values)


class Shuffler:
    """Produces random permutations of a fixed array."""

    def __init__(self, nums: Sequence[int]) -> None:
        self._nums = list(nums)

    def reset(self) -> list[int]:
        """Return a copy of the original array."""
        return list(self._nums)

    def shuffle(self) -> list[int]:
        """Return a uniformly random permutation (Fisher-Yates)."""
        result = list(self._nums)
        for i in range(len(result)):
            j = random.randint(0, i)
            result[i], result[j] = result[j], result[i]
        return result