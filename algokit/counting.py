"""Puzzles solved by counting with hash maps."""

from __future__ import annotations

from collections import Counter
from typing import Iterable, Sequence

_MAX_VALUE = 1000


def _check_range(values: Iterable[int]) -> None:
    for value in values:
        if not 0 <= value <= _MAX_VALUE:
            raise ValueError(f"value {value} outside 0..{_MAX_VALUE}")


def anagram_mappings(nums1: Sequence[int], nums2: Sequence[int]) -> list[int]:
    """For each value of ``nums1``, an index where it appears in ``nums2``."""
    index = {value: position for position, value in enumerate(nums2)}
    try:
        return [index[value] for value in nums1]
    except KeyError as exc:
        raise ValueError(f"value {exc.args[0]} missing from nums2") from None


def can_permute_palindrome(s: str) -> bool:
    """True when some permutation of ``s`` is a palindrome."""
    return sum(count % 2 for count in Counter(s).values()) < 2


def are_sentences_similar(
    sentence1: Sequence[str],
    sentence2: Sequence[str],
    similar_pairs: Iterable[Sequence[str]],
) -> bool:
    """True when the sentences match word by word, up to the similar pairs."""
    if len(sentence1) != len(sentence2):
        return False
    pairs = {(a, b) for a, b in similar_pairs}
    return all(
        a == b or (a, b) in pairs or (b, a) in pairs
        for a, b in zip(sentence1, sentence2)
    )


def calculate_time(keyboard: str, word: str) -> int:
    """Finger travel to type ``word`` on a single-row ``keyboard``, starting at 0."""
    positions = {ch: i for i, ch in enumerate(keyboard)}
    total = current = 0
    for ch in word:
        try:
            target = positions[ch]
        except KeyError:
            raise ValueError(f"character {ch!r} not on keyboard") from None
        total += abs(target - current)
        current = target
    return total


def largest_unique_number(nums: Sequence[int]) -> int:
    """Largest value (0..1000) that occurs exactly once, or -1."""
    _check_range(nums)
    counts = Counter(nums)
    return max((value for value, count in counts.items() if count == 1), default=-1)


def count_elements(arr: Sequence[int]) -> int:
    """Count elements ``x`` (0..1000) for which ``x + 1`` is also present."""
    _check_range(arr)
    counts = Counter(arr)
    return sum(count for value, count in counts.items() if value + 1 in counts)


def four_sum_count(
    nums1: Sequence[int],
    nums2: Sequence[int],
    nums3: Sequence[int],
    nums4: Sequence[int],
) -> int:
    """Number of index tuples whose four values sum to zero."""
    sums = Counter(a + b for a in nums1 for b in nums2)
    return sum(sums[-(c + d)] for c in nums3 for d in nums4)