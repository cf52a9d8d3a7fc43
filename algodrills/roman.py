"""Conversion between integers and Roman numerals."""

from __future__ import annotations

_VALUE_SYMBOLS = (
    (1000, "M"),
    (900, "CM"),
    (500, "D"),
    (400, "CD"),
    (100, "C"),
    (90, "XC"),
    (50, "L"),
    (40, "XL"),
    (10, "X"),
    (9, "IX"),
    (5, "V"),
    (4, "IV"),
    (1, "I"),
)

_SYMBOL_VALUES = {"I": 1, "V": 5, "X": 10, "L": 50, "C": 100, "D": 500}


def int_to_roman(num: int) -> str:
    """Write ``num`` as a Roman numeral, largest symbols first."""
    parts = []
    for value, symbol in _VALUE_SYMBOLS:
        count, num = divmod(num, value) if num >= value else (0, num)
        parts.append(symbol * count)
    return "".join(parts)


def _value(symbol: str) -> int:
    # Any letter other than I, V, X, L, C and D counts as M.
    return _SYMBOL_VALUES.get(symbol, 1000)


def roman_to_int(s: str) -> int:
    """Read a Roman numeral; a symbol before a larger one is subtracted."""
    if not s:
        raise ValueError("empty Roman numeral")
    values = [_value(symbol) for symbol in s]
    result = sum(
        -current if current < following else current
        for current, following in zip(values, values[1:])
    )
    return result + values[-1]