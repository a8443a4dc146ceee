"""Bit manipulation puzzles and a few sliding-window string counters."""

from __future__ import annotations

from collections import Counter
from typing import MutableSequence, Sequence

_INT32_MAX = 2147483647
_WORD_BITS = 32


def insert_bits(n: int, m: int, i: int, j: int) -> int:
    """Overwrite bits ``i`` to ``j`` of ``n`` with the value ``m``."""
    for k in range(i, j + 1):
        n &= ~(1 << k)
    return n | (m << i)


def print_bin(num: float) -> str:
    """Return the binary expansion of a fraction, such as ``"0.101"``.

    Raises ValueError when more than 32 binary digits would be needed.
    """
    digits = ["0."]
    for _ in range(_WORD_BITS):
        num *= 2
        if num >= 1:
            digits.append("1")
            num -= 1
        else:
            digits.append("0")
        if num == 0:
            return "".join(digits)
    raise ValueError("fraction needs more than 32 binary digits")


def reverse_bits(num: int) -> int:
    """Length of the longest run of 1s after flipping one bit of a 32-bit word."""
    run = joined = best = 0
    for _ in range(_WORD_BITS):
        if num & 1:
            joined += 1
            run += 1
        else:
            joined = run + 1
            run = 0
        best = max(best, joined)
        num >>= 1
    return best


def _next_same_popcount(x: int) -> int:
    if x == 0:
        return -1
    lowest = x & -x
    ripple = x + lowest
    result = (((ripple ^ x) >> 2) // lowest) | ripple
    return result if result <= _INT32_MAX else -1


def _previous_same_popcount(x: int) -> int:
    temp = x
    ones = 0
    while temp & 1:
        ones += 1
        temp >>= 1
    if temp == 0:
        return -1
    zeros = 0
    while not temp & 1:
        zeros += 1
        temp >>= 1
    x &= ~0 << (zeros + ones + 1)
    return x | (((1 << (ones + 1)) - 1) << (zeros - 1))


def find_closed_numbers(num: int) -> list[int]:
    """Return ``[larger, smaller]``: the nearest numbers with as many 1 bits.

    Either is -1 when it does not exist within the positive 32-bit range.
    """
    if num < 0:
        raise ValueError("num must not be negative")
    return [_next_same_popcount(num), _previous_same_popcount(num)]


def convert_integer(a: int, b: int) -> int:
    """Number of bits that differ between ``a`` and ``b`` as 32-bit integers."""
    return ((a ^ b) & 0xFFFFFFFF).bit_count()


def exchange_bits(num: int) -> int:
    """Swap every odd bit of a 32-bit value with the even bit next to it."""
    return ((num & 0x55555555) << 1) | ((num & 0xAAAAAAAA) >> 1)


def draw_line(length: int, w: int, x1: int, x2: int, y: int) -> list[int]:
    """Draw a horizontal line on a monochrome screen of signed 32-bit words.

    The screen is ``w`` pixels wide; pixels ``x1`` to ``x2`` of row ``y``
    are set.
    """
    start, end = x1 + y * w, x2 + y * w
    screen = []
    for word in range(length):
        value = 0
        for bit, pixel in enumerate(range(_WORD_BITS * word, _WORD_BITS * (word + 1))):
            if start <= pixel <= end:
                value |= 1 << (_WORD_BITS - 1 - bit)
        if value & (1 << (_WORD_BITS - 1)):
            value -= 1 << _WORD_BITS
        screen.append(value)
    return screen


def subsets(nums: Sequence[int]) -> list[list[int]]:
    """Every subset of ``nums``, in order of the bit mask that selects it."""
    return [
        [num for bit, num in enumerate(nums) if mask >> bit & 1]
        for mask in range(1 << len(nums))
    ]


def multiply(a: int, b: int) -> int:
    """Multiply ``a`` by a positive ``b`` using only shifts and additions."""
    if b < 1:
        raise ValueError("b must be a positive integer")
    total = 0
    while b > 1:
        if b & 1:
            total += a
        a <<= 1
        b >>= 1
    return total + a


def reverse_words(chars: MutableSequence[str]) -> None:
    """Reverse the order of space-separated words in a list of characters, in place."""
    words = "".join(chars).split(" ")
    chars[:] = " ".join(reversed(words))


def length_of_longest_substring_k_distinct(s: str, k: int) -> int:
    """Length of the longest substring holding at most ``k`` distinct characters."""
    if k < 0:
        raise ValueError("k must not be negative")
    window: Counter[str] = Counter()
    best = left = 0
    for right, ch in enumerate(s):
        window[ch] += 1
        while len(window) > k:
            gone = s[left]
            window[gone] -= 1
            if not window[gone]:
                del window[gone]
            left += 1
        best = max(best, right - left + 1)
    return best


def length_of_longest_substring_two_distinct(s: str) -> int:
    """Length of the longest substring holding at most two distinct characters."""
    return length_of_longest_substring_k_distinct(s, 2)


def num_k_len_substr_no_repeats(s: str, k: int) -> int:
    """Count substrings of length ``k`` with no repeated character."""
    window: Counter[str] = Counter()
    count = left = 0
    for right, ch in enumerate(s):
        window[ch] += 1
        while window[ch] > 1:
            window[s[left]] -= 1
            left += 1
        if right - left + 1 == k:
            count += 1
            window[s[left]] -= 1
            left += 1
    return count