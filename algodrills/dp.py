"""Dynamic-programming exercises."""

from __future__ import annotations

from collections.abc import Sequence


def fib(n: int) -> int:
    """The n-th Fibonacci number; values of ``n`` up to 1 are returned unchanged."""
    if n <= 1:
        return n
    a, b = 0, 1
    for _ in range(n - 1):
        a, b = b, a + b
    return b


def climb_stairs(n: int) -> int:
    """Number of ways to climb ``n`` steps taking one or two at a time."""
    if n <= 1:
        return 1
    a, b = 1, 1
    for _ in range(2, n + 1):
        a, b = b, a + b
    return b


def coin_change(coins: Sequence[int], amount: int) -> int:
    """Fewest coins that make ``amount``, or -1 when it cannot be made."""
    unreachable = amount + 1
    best = [0] + [unreachable] * amount
    ordered = sorted(coins)
    for value in range(1, amount + 1):
        for coin in ordered:
            if coin > value:
                break
            best[value] = min(best[value], best[value - coin] + 1)
    return -1 if best[amount] > amount else best[amount]


def min_cost_climbing_stairs(cost: Sequence[int]) -> int:
    """Cheapest way past the top, starting from step 0 or 1."""
    before, last = 0, 0
    for i in range(2, len(cost) + 1):
        before, last = last, min(last + cost[i - 1], before + cost[i - 2])
    return last