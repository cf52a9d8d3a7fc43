import bisect
from itertools import combinations

import pytest

from algodrills.arrays import (
    binary_search,
    find_kth_positive,
    find_min_rotated,
    find_peak_element,
    merge_sorted,
    move_zeroes,
    my_sqrt,
    peak_index_in_mountain,
    plus_one,
    search_insert,
    search_rotated,
    three_sum_closest,
)

BASE = [0, 1, 2, 4, 5, 6, 7]
ROTATIONS = [BASE[i:] + BASE[:i] for i in range(len(BASE))]


def digits_value(digits):
    return int("".join(str(d) for d in digits))


@pytest.mark.parametrize("nums", ROTATIONS)
def test_find_min_rotated(nums):
    assert find_min_rotated(nums) == min(nums)


def test_find_min_rotated_empty():
    with pytest.raises(ValueError):
        find_min_rotated([])


@pytest.mark.parametrize("nums", [[1, 2, 3, 1], [1, 2, 1, 3, 5, 6, 4], [5, 4, 3], [1, 2, 3]])
def test_find_peak_element_is_local_maximum(nums):
    idx = find_peak_element(nums)
    assert 0 <= idx < len(nums)
    if idx > 0:
        assert nums[idx] > nums[idx - 1]
    if idx < len(nums) - 1:
        assert nums[idx] > nums[idx + 1]


def test_find_peak_single_and_empty():
    assert find_peak_element([42]) == 0
    with pytest.raises(ValueError):
        find_peak_element([])


@pytest.mark.parametrize("arr, k", [([2, 3, 4, 7, 11], 5), ([1, 2, 3, 4], 2), ([5, 6], 3)])
def test_find_kth_positive(arr, k):
    result = find_kth_positive(arr, k)
    assert result not in arr
    assert len([x for x in range(1, result) if x not in arr]) == k - 1


@pytest.mark.parametrize("nums", ROTATIONS)
def test_search_rotated_finds_every_value(nums):
    for value in nums:
        assert nums[search_rotated(nums, value)] == value
    assert search_rotated(nums, 3) == -1


@pytest.mark.parametrize("key", [-1, 0, 1, 3, 5, 6, 9])
def test_search_insert_matches_bisect(key):
    nums = [1, 3, 5, 6]
    assert search_insert(nums, key) == bisect.bisect_left(nums, key)


def test_binary_search():
    nums = [-1, 0, 3, 5, 9, 12]
    for value in nums:
        assert nums[binary_search(nums, value)] == value
    assert binary_search(nums, 2) == -1
    assert binary_search([], 2) == -1


@pytest.mark.parametrize("arr", [[0, 1, 0], [0, 2, 1, 0], [0, 10, 5, 2], [1, 3, 5, 7, 6, 2]])
def test_peak_index_in_mountain(arr):
    assert arr[peak_index_in_mountain(arr)] == max(arr)


def test_peak_index_in_mountain_too_short():
    with pytest.raises(ValueError):
        peak_index_in_mountain([1, 2])


@pytest.mark.parametrize("x", [0, 1, 2, 3, 4, 8, 15, 16, 2147395599])
def test_my_sqrt_bounds(x):
    root = my_sqrt(x)
    assert root * root <= x < (root + 1) * (root + 1)


def test_my_sqrt_negative():
    with pytest.raises(ValueError):
        my_sqrt(-4)


def test_move_zeroes():
    original = [0, 1, 0, 3, 12]
    nums = list(original)
    move_zeroes(nums)
    non_zero = [v for v in original if v]
    assert nums[:len(non_zero)] == non_zero
    assert nums[len(non_zero):] == [0] * original.count(0)


def test_merge_sorted():
    a = [1, 2, 3, 0, 0, 0]
    b = [2, 5, 6]
    merge_sorted(a, 3, b, 3)
    assert a == sorted([1, 2, 3] + b)


def test_merge_sorted_empty_first():
    a = [0]
    merge_sorted(a, 0, [1], 1)
    assert a == [1]


def test_merge_sorted_no_room():
    with pytest.raises(ValueError):
        merge_sorted([1, 2], 2, [3], 1)


@pytest.mark.parametrize("digits", [[1, 2, 3], [4, 3, 2, 1], [9], [9, 9, 9]])
def test_plus_one(digits):
    assert digits_value(plus_one(digits)) == digits_value(digits) + 1


def test_plus_one_empty():
    assert plus_one([]) == [0]


def test_three_sum_closest_example():
    assert three_sum_closest([-1, 2, 1, -4], 1) == 2


@pytest.mark.parametrize("nums, target", [([0, 0, 0], 1), ([1, 1, 1, 0], -100), ([4, -2, 7, 3, 9], 10)])
def test_three_sum_closest_is_optimal(nums, target):
    result = three_sum_closest(nums, target)
    sums = {sum(triple) for triple in combinations(nums, 3)}
    assert result in sums
    assert abs(result - target) == min(abs(s - target) for s in sums)


def test_three_sum_closest_exact_match():
    nums = [3, 8, -5, 11, 2]
    assert three_sum_closest(nums, 3 + 8 + 2) == 3 + 8 + 2


def test_three_sum_closest_too_short():
    with pytest.raises(ValueError):
        three_sum_closest([1, 2], 3)