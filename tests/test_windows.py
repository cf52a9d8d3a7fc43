import pytest

from algodrills.windows import (
    count_subarrays_score_below,
    count_subarrays_with_max_at_least_k,
    max_subarray_length,
    min_subarray_len,
    num_subarray_product_less_than_k,
    subarray_sum,
    subarrays_with_k_distinct,
)


def _all_subarrays(n):
    return n * (n + 1) // 2


def test_k_distinct_all_distinct_k_one():
    nums = [1, 2, 3, 4, 5]
    assert subarrays_with_k_distinct(nums, 1) == len(nums)
    assert subarrays_with_k_distinct(nums, len(nums)) == 1
    assert subarrays_with_k_distinct(nums, len(nums) + 1) == 0


def test_k_distinct_partitions_all_subarrays():
    nums = [1, 2, 1, 2, 3, 1, 4]
    counts = sum(subarrays_with_k_distinct(nums, k) for k in range(1, 5))
    assert counts == _all_subarrays(len(nums))


def test_min_subarray_len_unreachable():
    assert min_subarray_len(100, [1, 2, 3]) == 0


def test_min_subarray_len_single_element():
    nums = [2, 3, 1, 2, 4, 3]
    assert min_subarray_len(max(nums), nums) == 1
    assert min_subarray_len(sum(nums), nums) == len(nums)


def test_score_below_large_k_counts_everything():
    nums = [2, 1, 4, 3, 5]
    assert count_subarrays_score_below(nums, 10**9) == _all_subarrays(len(nums))


def test_score_below_small_k_counts_nothing():
    assert count_subarrays_score_below([2, 1, 4, 3, 5], 1) == 0


def test_max_at_least_k_all_equal():
    nums = [3, 3, 3, 3]
    assert count_subarrays_with_max_at_least_k(nums, 1) == _all_subarrays(len(nums))
    assert count_subarrays_with_max_at_least_k(nums, len(nums)) == 1


def test_max_at_least_k_too_many():
    assert count_subarrays_with_max_at_least_k([1, 3, 2, 3, 3], 4) == 0


def test_max_at_least_k_example():
    assert count_subarrays_with_max_at_least_k([1, 3, 2, 3, 3], 2) == 6


def test_max_subarray_length_loose_limit():
    nums = [1, 2, 3, 1, 2, 3]
    assert max_subarray_length(nums, len(nums)) == len(nums)


def test_max_subarray_length_repeated_value():
    assert max_subarray_length([5, 5, 5, 5, 5], 2) == 2


def test_product_less_than_one_is_empty():
    assert num_subarray_product_less_than_k([1, 2, 3], 1) == 0


def test_product_all_ones():
    nums = [1] * 6
    assert num_subarray_product_less_than_k(nums, 2) == _all_subarrays(len(nums))


def test_product_example():
    assert num_subarray_product_less_than_k([10, 5, 2, 6], 100) == 8


@pytest.mark.parametrize("n", [1, 3, 6])
def test_subarray_sum_zeros(n):
    assert subarray_sum([0] * n, 0) == _all_subarrays(n)


def test_subarray_sum_ones():
    assert subarray_sum([1, 1, 1], 2) == 2


def test_subarray_sum_whole_array():
    nums = [3, -1, 4, -1, 5]
    assert subarray_sum(nums, sum(nums)) >= 1
    assert subarray_sum([], 0) == 0