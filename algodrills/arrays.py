"""Binary searches and in-place array manipulation."""

from __future__ import annotations

import math
from collections.abc import MutableSequence, Sequence
from heapq import merge


def find_min_rotated(nums: Sequence[int]) -> int:
    """Smallest value of a rotated ascending array of distinct values."""
    if not nums:
        raise ValueError("empty array")
    start, end = 0, len(nums) - 1
    answer = nums[0]
    while start <= end:
        mid = start + (end - start) // 2
        if nums[mid] >= nums[0]:
            start = mid + 1
        else:
            answer = nums[mid]
            end = mid - 1
    return answer


def find_peak_element(nums: Sequence[int]) -> int:
    """Index of an element larger than its neighbours, or -1 if none is found."""
    n = len(nums)
    if n == 0:
        raise ValueError("empty array")
    if n == 1 or nums[0] > nums[1]:
        return 0
    if nums[-1] > nums[-2]:
        return n - 1
    start, end = 1, n - 2
    while start <= end:
        mid = start + (end - start) // 2
        if nums[mid] > nums[mid - 1] and nums[mid] > nums[mid + 1]:
            return mid
        if nums[mid] > nums[mid + 1]:
            end = mid - 1
        else:
            start = mid + 1
    return -1


def find_kth_positive(arr: Sequence[int], k: int) -> int:
    """The k-th positive integer missing from the ascending array ``arr``."""
    start, end = 0, len(arr) - 1
    while start <= end:
        mid = start + (end - start) // 2
        if arr[mid] - (mid + 1) < k:
            start = mid + 1
        else:
            end = mid - 1
    return start + k


def search_rotated(nums: Sequence[int], target: int) -> int:
    """Index of ``target`` in a rotated ascending array, or -1."""
    start, end = 0, len(nums) - 1
    while start <= end:
        mid = start + (end - start) // 2
        if nums[mid] == target:
            return mid
        if nums[mid] >= nums[start]:
            if nums[start] <= target < nums[mid]:
                end = mid - 1
            else:
                start = mid + 1
        elif nums[mid] < target <= nums[end]:
            start = mid + 1
        else:
            end = mid - 1
    return -1


def search_insert(nums: Sequence[int], key: int) -> int:
    """Index of ``key`` in the sorted array, or where it would be inserted."""
    start, end = 0, len(nums) - 1
    while start <= end:
        mid = start + (end - start) // 2
        if nums[mid] == key:
            return mid
        if nums[mid] < key:
            start = mid + 1
        else:
            end = mid - 1
    return start


def binary_search(nums: Sequence[int], key: int) -> int:
    """Index of ``key`` in the sorted array, or -1."""
    found = search_insert(nums, key)
    return found if found < len(nums) and nums[found] == key else -1


def peak_index_in_mountain(arr: Sequence[int]) -> int:
    """Index of the summit of a strictly rising then falling array, or -1."""
    if len(arr) < 3:
        raise ValueError("a mountain array needs at least three elements")
    start, end = 0, len(arr) - 1
    while start <= end:
        mid = end - (end - start) // 2
        if arr[mid] > arr[mid - 1] and arr[mid] > arr[mid + 1]:
            return mid
        if arr[mid] > arr[mid - 1]:
            start = mid + 1
        else:
            end = mid - 1
    return -1


def my_sqrt(x: int) -> int:
    """Integer square root of a non-negative ``x``, rounded down."""
    if x < 0:
        raise ValueError("square root of a negative number")
    return math.isqrt(x)


def move_zeroes(nums: MutableSequence[int]) -> None:
    """Move every zero to the end in place, keeping the order of the rest."""
    non_zero = [value for value in nums if value != 0]
    nums[:] = non_zero + [0] * (len(nums) - len(non_zero))


def merge_sorted(a: MutableSequence[int], m: int, b: Sequence[int], n: int) -> None:
    """Merge the first ``n`` values of ``b`` into the first ``m`` of ``a``, in place.

    ``a`` must have room for ``m + n`` values.
    """
    if len(a) < m + n:
        raise ValueError(f"target holds {len(a)} values, needs {m + n}")
    a[:m + n] = list(merge(a[:m], b[:n]))


def plus_one(digits: Sequence[int]) -> list[int]:
    """The decimal digits of the number ``digits`` plus one, as a new list."""
    if not digits:
        return [0]
    result = []
    carry = 1
    for digit in reversed(digits):
        carry, remainder = divmod(digit + carry, 10)
        result.append(remainder)
    if carry:
        result.append(carry)
    return result[::-1]


def three_sum_closest(nums: Sequence[int], target: int) -> int:
    """Sum of three values whose total is closest to ``target``."""
    if len(nums) < 3:
        raise ValueError("need at least three values")
    ordered = sorted(nums)
    closest = sum(ordered[:3])
    for i, first in enumerate(ordered[:-2]):
        start, end = i + 1, len(ordered) - 1
        while start < end:
            current = first + ordered[start] + ordered[end]
            if abs(target - current) < abs(target - closest):
                closest = current
            if current < target:
                start += 1
            elif current > target:
                end -= 1
            else:
                return current
    return closest