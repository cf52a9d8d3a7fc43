"""Sliding-window and prefix-sum counting over integer arrays."""

from __future__ import annotations

from collections import Counter
from collections.abc import Sequence


def _subarrays_with_at_least(nums: Sequence[int], k: int) -> int:
    n = len(nums)
    freq: Counter[int] = Counter()
    found = start = distinct = 0
    for end, value in enumerate(nums):
        freq[value] += 1
        if freq[value] == 1:
            distinct += 1
        while distinct == k:
            found += n - end
            freq[nums[start]] -= 1
            if freq[nums[start]] == 0:
                distinct -= 1
            start += 1
    return found


def subarrays_with_k_distinct(nums: Sequence[int], k: int) -> int:
    """Number of subarrays with exactly ``k`` distinct values."""
    return _subarrays_with_at_least(nums, k) - _subarrays_with_at_least(nums, k + 1)


def min_subarray_len(target: int, nums: Sequence[int]) -> int:
    """Length of the shortest subarray whose sum reaches ``target``, or 0."""
    best: int | None = None
    window = start = 0
    for end, value in enumerate(nums):
        window += value
        while window >= target and start <= end:
            length = end - start + 1
            best = length if best is None else min(best, length)
            window -= nums[start]
            start += 1
    return 0 if best is None else best


def count_subarrays_score_below(nums: Sequence[int], k: int) -> int:
    """Number of subarrays whose sum times length is less than ``k``."""
    found = start = window = 0
    for end, value in enumerate(nums):
        window += value
        while start <= end and window * (end - start + 1) >= k:
            window -= nums[start]
            start += 1
        found += end - start + 1
    return found


def count_subarrays_with_max_at_least_k(nums: Sequence[int], k: int) -> int:
    """Number of subarrays in which the array maximum appears at least ``k`` times.

    The maximum is taken from zero upwards, so an array of negatives has none.
    """
    largest = max(0, *nums) if nums else 0
    n = len(nums)
    found = start = seen = 0
    for end, value in enumerate(nums):
        if value == largest:
            seen += 1
        while seen == k:
            found += n - end
            if nums[start] == largest:
                seen -= 1
            start += 1
    return found


def max_subarray_length(nums: Sequence[int], k: int) -> int:
    """Longest subarray in which no value occurs more than ``k`` times."""
    counts: Counter[int] = Counter()
    best = start = 0
    for end, value in enumerate(nums):
        counts[value] += 1
        while counts[value] > k:
            counts[nums[start]] -= 1
            start += 1
        best = max(best, end - start + 1)
    return best


def num_subarray_product_less_than_k(nums: Sequence[int], k: int) -> int:
    """Number of subarrays whose product is strictly less than ``k``."""
    found = start = 0
    product = 1
    for end, value in enumerate(nums):
        product *= value
        while product >= k and start <= end:
            product //= nums[start]
            start += 1
        found += end - start + 1
    return found


def subarray_sum(nums: Sequence[int], k: int) -> int:
    """Number of subarrays summing to exactly ``k``."""
    prefixes: Counter[int] = Counter({0: 1})
    running = found = 0
    for value in nums:
        running += value
        found += prefixes[running - k]
        prefixes[running] += 1
    return found