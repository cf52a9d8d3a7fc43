"""Small number and list exercises, plus a command that counts primes and Armstrong numbers."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Sequence

MAX_SIZE = 100


def is_prime(num: int) -> bool:
    """Return True if ``num`` (or its magnitude, for negatives) is prime."""
    num = abs(num)
    if num in (0, 1):
        return False
    return all(num % divisor for divisor in range(2, num // 2 + 1))


def count_primes(values: Iterable[int]) -> int:
    """Count the values for which :func:`is_prime` holds."""
    return sum(1 for value in values if is_prime(value))


def is_armstrong(num: int) -> bool:
    """Return True if the sum of the cubes of the digits of ``num`` equals ``num``.

    Digits of a negative number count as negative, so ``-153`` qualifies.
    """
    sign = -1 if num < 0 else 1
    cubes = sum(int(digit) ** 3 for digit in str(abs(num))) if num else 0
    return sign * cubes == num


def count_armstrong(values: Iterable[int]) -> int:
    """Count the values for which :func:`is_armstrong` holds."""
    return sum(1 for value in values if is_armstrong(value))


def gcd(a: int, b: int) -> int:
    """Greatest common divisor by repeated remainders.

    The loop only runs while both numbers are positive; otherwise ``b`` is
    returned when ``a`` is zero and ``a`` is returned as is.
    """
    while a > 0 and b > 0:
        if a > b:
            a %= b
        else:
            b %= a
    return b if a == 0 else a


def prime_label(n: int) -> str:
    """Describe ``n`` as ``"prime"`` or ``"non prime"`` by trial division up to its root."""
    divisor = 2
    while divisor * divisor <= n:
        if n % divisor == 0:
            return "non prime"
        divisor += 1
    return "prime"


def maximum(values: Iterable[int]) -> int:
    """Largest value, never less than zero (the search starts from 0)."""
    return max(0, *values) if values else 0


def total(values: Iterable[int]) -> int:
    """Sum of all values."""
    return sum(values)


def odd_position_sum(values: Sequence[int]) -> int:
    """Sum of the values at odd indices (1, 3, 5, ...)."""
    return sum(values[1::2])


def reversed_values(values: Iterable[int]) -> list[int]:
    """The values in reverse order, as a new list."""
    return list(values)[::-1]


def shift_values(values: Iterable[int], amount: int) -> list[int]:
    """Each value increased by ``amount``."""
    return [value + amount for value in values]


def padded(values: Sequence[int], size: int) -> list[int]:
    """The values followed by zeros up to ``size`` elements."""
    if len(values) > size:
        raise ValueError(f"{len(values)} values do not fit in size {size}")
    return [*values, *([0] * (size - len(values)))]


def sequence(start: int, count: int) -> list[int]:
    """``count`` consecutive integers beginning at ``start``."""
    return list(range(start, start + count))


def _read_values() -> list[int]:
    size = int(input(f"Enter Size MAX {MAX_SIZE}\n"))
    if not 0 < size <= MAX_SIZE:
        raise ValueError("INVALID SIZE, PROGRAM EXIT")
    return [int(input("Enter Element: ")) for _ in range(size)]


def main(argv: Sequence[str] | None = None) -> int:
    """Read integers, list them and report how many are prime and Armstrong numbers."""
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        if args:
            values = [int(arg) for arg in args]
            if len(values) > MAX_SIZE:
                raise ValueError("INVALID SIZE, PROGRAM EXIT")
        else:
            values = _read_values()
    except (ValueError, EOFError) as error:
        print(str(error) or "INVALID INPUT", file=sys.stderr)
        print("INVALID SIZE, PROGRAM EXIT")
        return 1

    for value in values:
        print(f"Element: {value}")
    print(f"Prime Count={count_primes(values)}")
    print(f"Armstrong Count={count_armstrong(values)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())