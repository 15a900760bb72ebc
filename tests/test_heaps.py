from collections import Counter

import pytest

from algosolve.heaps import (
    find_kth_largest,
    k_smallest_pairs,
    least_interval,
    most_booked,
    top_k_frequent,
)


def test_find_kth_largest_example():
    assert find_kth_largest([3, 2, 1, 5, 6, 4], 2) == 5


@pytest.mark.parametrize(
    "nums,k",
    [([3, 2, 3, 1, 2, 4, 5, 5, 6], 4), ([7], 1), ([5, 5, 5, 1], 3), ([-1, -8, 4, 0], 4)],
)
def test_find_kth_largest_rank_invariant(nums, k):
    result = find_kth_largest(nums, k)
    assert result in nums
    assert sum(1 for x in nums if x > result) < k
    assert sum(1 for x in nums if x >= result) >= k


def test_find_kth_largest_does_not_modify_input():
    nums = [4, 1, 3]
    find_kth_largest(nums, 2)
    assert nums == [4, 1, 3]


@pytest.mark.parametrize("k", [0, 4, -1])
def test_find_kth_largest_rejects_bad_k(k):
    with pytest.raises(ValueError):
        find_kth_largest([1, 2, 3], k)


def test_top_k_frequent_example():
    assert top_k_frequent([1, 1, 1, 2, 2, 3], 2) == [1, 2]


def test_top_k_frequent_ordering_and_length():
    nums = [4, 4, 9, 9, 9, 2, 7, 7, 7, 7]
    result = top_k_frequent(nums, 3)
    counts = Counter(nums)
    assert len(result) == 3
    assert len(set(result)) == 3
    freqs = [counts[x] for x in result]
    assert freqs == sorted(freqs, reverse=True)


def test_top_k_frequent_k_larger_than_distinct():
    nums = [5, 6, 5]
    assert sorted(top_k_frequent(nums, 10)) == sorted(set(nums))


def test_k_smallest_pairs_example():
    assert k_smallest_pairs([1, 7, 11], [2, 4, 6], 3) == [(1, 6), (1, 4), (1, 2)]


def test_k_smallest_pairs_sums_are_smallest():
    nums1, nums2, k = [1, 1, 2], [1, 2, 3], 4
    result = k_smallest_pairs(nums1, nums2, k)
    assert len(result) == k
    all_sums = sorted(a + b for a in nums1 for b in nums2)
    assert sorted(a + b for a, b in result) == all_sums[:k]
    sums = [a + b for a, b in result]
    assert sums == sorted(sums, reverse=True)
    for a, b in result:
        assert a in nums1 and b in nums2


def test_k_smallest_pairs_nonpositive_k():
    assert k_smallest_pairs([1, 2], [3], 0) == []


def test_least_interval_example():
    assert least_interval("AAABBB", 2) == 8


def test_least_interval_no_cooldown_equals_task_count():
    tasks = list("AABCCCD")
    assert least_interval(tasks, 0) == len(tasks)


def test_least_interval_at_least_task_count():
    tasks = "AAAABBC"
    assert least_interval(tasks, 3) >= len(tasks)


def test_least_interval_rejects_lowercase():
    with pytest.raises(ValueError):
        least_interval("Ab", 1)


def test_most_booked_examples():
    assert most_booked(2, [[0, 10], [1, 5], [2, 7], [3, 4]]) == 0
    assert most_booked(3, [[1, 20], [2, 10], [3, 5], [4, 9], [6, 8]]) == 1


def test_most_booked_result_in_range():
    meetings = [[i, i + 3] for i in range(0, 20, 2)]
    result = most_booked(4, meetings)
    assert 0 <= result < 4


def test_most_booked_rejects_no_rooms():
    with pytest.raises(ValueError):
        most_booked(0, [[1, 2]])