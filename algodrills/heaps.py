"""Priority-queue exercises built on :mod:`heapq`."""

from __future__ import annotations

import heapq
from collections.abc import Sequence
from math import isqrt

_MEDALS = ("Gold Medal", "Silver Medal", "Bronze Medal")


def last_stone_weight(stones: Sequence[int]) -> int:
    """Smash the two heaviest stones together until at most one is left.

    Returns the weight of the last stone, or 0 when none remains.
    """
    heap = [-stone for stone in stones]
    heapq.heapify(heap)
    while len(heap) > 1:
        heaviest = -heapq.heappop(heap)
        second = -heapq.heappop(heap)
        if heaviest != second:
            heapq.heappush(heap, -(heaviest - second))
    return -heap[0] if heap else 0


def find_kth_largest(arr: Sequence[int], k: int) -> int:
    """The k-th largest value of ``arr`` (counting duplicates)."""
    if not 1 <= k <= len(arr):
        raise ValueError(f"k must be between 1 and {len(arr)}, got {k}")
    heap = list(arr[:k])
    heapq.heapify(heap)
    for value in arr[k:]:
        if value > heap[0]:
            heapq.heapreplace(heap, value)
    return heap[0]


def pick_gifts(gifts: Sequence[int], k: int) -> int:
    """Gifts left after ``k`` times reducing the richest pile to its square root."""
    if not gifts and k > 0:
        raise ValueError("no piles to take gifts from")
    heap = [-gift for gift in gifts]
    heapq.heapify(heap)
    for _ in range(k):
        heapq.heapreplace(heap, -isqrt(-heap[0]))
    return -sum(heap)


def find_relative_ranks(score: Sequence[int]) -> list[str]:
    """Rank label for each score: medals for the top three, numbers after that.

    Equal scores are ranked with the later index first.
    """
    order = sorted(range(len(score)), key=lambda i: (score[i], i), reverse=True)
    result = [""] * len(score)
    for rank, index in enumerate(order, start=1):
        result[index] = _MEDALS[rank - 1] if rank <= len(_MEDALS) else str(rank)
    return result


def smallest_range(nums: Sequence[Sequence[int]]) -> tuple[int, int]:
    """Smallest range that holds at least one value from each ascending list."""
    if not nums or any(not row for row in nums):
        raise ValueError("every list must hold at least one value")
    heap = [(row[0], index, 0) for index, row in enumerate(nums)]
    heapq.heapify(heap)
    current_max = max(row[0] for row in nums)
    best: tuple[int, int] | None = None
    while True:
        value, row, position = heapq.heappop(heap)
        if best is None or current_max - value < best[1] - best[0]:
            best = (value, current_max)
        if position + 1 == len(nums[row]):
            return best
        following = nums[row][position + 1]
        heapq.heappush(heap, (following, row, position + 1))
        current_max = max(current_max, following)