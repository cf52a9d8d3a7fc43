import pytest

from algodrills.dp import climb_stairs, coin_change, fib, min_cost_climbing_stairs


def test_fib_base_cases():
    assert fib(0) == 0
    assert fib(1) == 1


def test_fib_recurrence():
    for n in range(2, 40):
        assert fib(n) == fib(n - 1) + fib(n - 2)


def test_climb_stairs_follows_fibonacci():
    assert climb_stairs(0) == 1
    assert climb_stairs(1) == 1
    for n in range(1, 30):
        assert climb_stairs(n) == fib(n + 1)


def test_coin_change_unit_coin():
    assert coin_change([1], 7) == 7


def test_coin_change_impossible():
    assert coin_change([2], 3) == -1


def test_coin_change_zero_amount():
    assert coin_change([3, 7], 0) == 0


@pytest.mark.parametrize("amount", range(0, 40))
def test_coin_change_bounded_by_unit_coins(amount):
    result = coin_change([5, 2, 1], amount)
    assert 0 <= result <= amount
    assert coin_change([5, 2, 1], amount) == coin_change([1, 2, 5], amount)


def test_coin_change_single_coin_multiple():
    assert coin_change([4], 4 * 6) == 6


def test_min_cost_short_inputs():
    assert min_cost_climbing_stairs([]) == 0
    assert min_cost_climbing_stairs([5]) == 0


def test_min_cost_example():
    assert min_cost_climbing_stairs([10, 15, 20]) == 15


def test_min_cost_invariants():
    cost = [1, 100, 1, 1, 1, 100, 1, 1, 100, 1]
    result = min_cost_climbing_stairs(cost)
    assert 0 <= result <= sum(cost)
    assert min_cost_climbing_stairs([0] * 8) == 0