import random

import pytest

from algokit.counting import (
    anagram_mappings,
    are_sentences_similar,
    calculate_time,
    can_permute_palindrome,
    count_elements,
    four_sum_count,
    largest_unique_number,
)


def test_anagram_mappings_points_at_equal_values():
    rng = random.Random(1)
    nums2 = [rng.randrange(0, 50) for _ in range(30)]
    nums1 = nums2[:]
    rng.shuffle(nums1)
    mapping = anagram_mappings(nums1, nums2)
    assert len(mapping) == len(nums1)
    assert all(nums2[m] == v for m, v in zip(mapping, nums1))


def test_anagram_mappings_missing_value():
    with pytest.raises(ValueError):
        anagram_mappings([1, 2], [2, 3])


def test_can_permute_palindrome():
    for s in ["abc", "racecar", "xyzzy"]:
        assert can_permute_palindrome(s + s[::-1])
        assert can_permute_palindrome(s + "q" + s[::-1])
    assert not can_permute_palindrome("code")
    assert can_permute_palindrome("aab")


def test_sentences_similar():
    pairs = [["great", "fine"], ["drama", "acting"], ["skills", "talent"]]
    s1 = ["great", "acting", "skills"]
    s2 = ["fine", "drama", "talent"]
    assert are_sentences_similar(s1, s2, pairs)
    assert are_sentences_similar(s2, s1, pairs)
    assert are_sentences_similar(s1, s1, [])
    assert not are_sentences_similar(s1, s2, [])
    assert not are_sentences_similar(["great"], ["great", "fine"], pairs)


def test_calculate_time():
    keyboard = "abcdefghijklmnopqrstuvwxyz"
    assert calculate_time(keyboard, "cba") == 4
    assert calculate_time(keyboard, keyboard) == len(keyboard) - 1
    assert calculate_time(keyboard, "aaaa") == 0
    with pytest.raises(ValueError):
        calculate_time("abc", "abd")


def test_largest_unique_number():
    assert largest_unique_number([5, 7, 3, 9, 4, 9, 8, 3, 1]) == 8
    assert largest_unique_number([9, 9, 8, 8]) == -1
    assert largest_unique_number([1000, 0]) == 1000
    with pytest.raises(ValueError):
        largest_unique_number([1001])


def test_count_elements():
    for n in range(1, 10):
        assert count_elements(list(range(n))) == n - 1
    assert count_elements([1, 1, 3, 3, 5, 5, 7, 7]) == 0
    with pytest.raises(ValueError):
        count_elements([-1, 0])


def test_four_sum_count():
    assert four_sum_count([1, 2], [-2, -1], [-1, 2], [0, 2]) == 2
    for n in range(1, 5):
        zeros = [0] * n
        assert four_sum_count(zeros, zeros, zeros, zeros) == n ** 4
    assert four_sum_count([1], [1], [1], [1]) == 0