import random
import statistics

import pytest

from algokit.median import MedianFinder, max_sliding_window


def test_running_median_matches_statistics():
    rng = random.Random(7)
    finder = MedianFinder()
    seen = []
    for _ in range(100):
        value = rng.randint(-1000, 1000)
        finder.add_num(value)
        seen.append(value)
        assert finder.find_median() == pytest.approx(statistics.median(seen))


def test_median_single_and_pair():
    finder = MedianFinder()
    finder.add_num(5)
    assert finder.find_median() == 5.0
    finder.add_num(5)
    assert finder.find_median() == 5.0


def test_median_empty_raises():
    with pytest.raises(ValueError):
        MedianFinder().find_median()


def test_sliding_window_example():
    assert max_sliding_window([1, 3, -1, -3, 5, 3, 6, 7], 3) == [3, 3, 5, 5, 6, 7]


def test_sliding_window_invariants():
    rng = random.Random(3)
    nums = [rng.randint(-20, 20) for _ in range(40)]
    k = 5
    result = max_sliding_window(nums, k)
    assert len(result) == len(nums) - k + 1
    for i, value in enumerate(result):
        window = nums[i:i + k]
        assert value in window
        assert all(value >= other for other in window)


def test_sliding_window_edges():
    nums = [4, -2, 9, 0]
    assert max_sliding_window(nums, 1) == nums
    assert max_sliding_window(nums, len(nums)) == [max(nums)]


@pytest.mark.parametrize("k", [0, 5, -1])
def test_sliding_window_bad_k(k):
    with pytest.raises(ValueError):
        max_sliding_window([1, 2, 3, 4], k)