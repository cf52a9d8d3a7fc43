"""String exercises: joining, reversing, searching and counting over text."""

from __future__ import annotations

from collections import Counter
from itertools import zip_longest
from string import ascii_lowercase

_VOWELS = frozenset("aeiouAEIOU")
_DIGITS = "0123456789"
_ODD_DIGITS = frozenset("13579")


def concat(first: str, second: str) -> str:
    """The second string appended to the first."""
    return first + second


def reverse_text(text: str) -> str:
    """The characters of ``text`` in reverse order."""
    return text[::-1]


def is_palindrome(text: str) -> bool:
    """True if ``text`` reads the same forwards and backwards."""
    return text == text[::-1]


def strings_equal(first: str, second: str) -> bool:
    """True if the strings agree over their common length.

    Only the characters both strings have are compared, so a string counts
    as equal to any string it is a prefix of.
    """
    return all(a == b for a, b in zip(first, second))


def defang_ip(address: str) -> str:
    """Replace every ``.`` in ``address`` with ``[.]``."""
    return address.replace(".", "[.]")


def is_pangram(sentence: str) -> bool:
    """True if every lower-case English letter occurs in ``sentence``."""
    return set(ascii_lowercase) <= set(sentence)


def sort_sentence(s: str) -> str:
    """Rebuild a sentence whose words each end in their position digit.

    Words are separated by single spaces; position 0 and empty words are
    dropped from the result.
    """
    slots = [""] * 10
    for token in s.split(" "):
        if not token or token[-1] not in _DIGITS:
            raise ValueError(f"word without a position digit: {token!r}")
        slots[int(token[-1])] = token[:-1]
    return " ".join(word for word in slots[1:] if word)


def largest_odd_number(num: str) -> str:
    """Longest prefix of the digit string ``num`` that ends in an odd digit."""
    for end in range(len(num), 0, -1):
        if num[end - 1] in _ODD_DIGITS:
            return num[:end]
    return ""


def find_first(haystack: str, needle: str) -> int:
    """Index of the first occurrence of ``needle`` in ``haystack``, or -1."""
    return haystack.find(needle)


def sort_vowels(s: str) -> str:
    """Sort the vowels of ``s`` in place, upper case before lower case."""
    vowels = iter(sorted(ch for ch in s if ch in _VOWELS))
    return "".join(next(vowels) if ch in _VOWELS else ch for ch in s)


def longest_unique_substring(s: str) -> int:
    """Length of the longest substring without a repeated character."""
    last_seen: dict[str, int] = {}
    best = start = 0
    for end, ch in enumerate(s):
        if last_seen.get(ch, -1) >= start:
            start = last_seen[ch] + 1
        last_seen[ch] = end
        best = max(best, end - start + 1)
    return best


def longest_palindrome_length(s: str) -> int:
    """Length of the longest palindrome that can be built from the letters of ``s``."""
    counts = Counter(s).values()
    paired = sum(count - count % 2 for count in counts)
    return paired + (1 if any(count % 2 for count in counts) else 0)


def add_strings(num1: str, num2: str) -> str:
    """Sum of two non-negative decimal strings, digit by digit."""
    digits = []
    carry = 0
    for a, b in zip_longest(reversed(num1), reversed(num2), fillvalue="0"):
        carry, digit = divmod(int(a) + int(b) + carry, 10)
        digits.append(str(digit))
    if carry:
        digits.append(str(carry))
    return "".join(reversed(digits))


def length_of_last_word(s: str) -> int:
    """Length of the last space-separated word in ``s``."""
    return len(s.rstrip(" ").split(" ")[-1])


def min_window(s: str, t: str) -> str:
    """Shortest substring of ``s`` holding every character of ``t`` with multiplicity.

    Among windows of equal length the leftmost is returned; ``""`` when none exists.
    """
    need = Counter(t)
    missing = len(t)
    best_start, best_len = 0, None
    start = 0
    for end, ch in enumerate(s):
        need[ch] -= 1
        if need[ch] >= 0:
            missing -= 1
        while missing == 0 and start <= end:
            if best_len is None or end - start + 1 < best_len:
                best_start, best_len = start, end - start + 1
            need[s[start]] += 1
            if need[s[start]] > 0:
                missing += 1
            start += 1
    if best_len is None:
        return ""
    return s[best_start:best_start + best_len]


def is_anagram(s: str, t: str) -> bool:
    """True if ``t`` is a rearrangement of ``s``."""
    return len(s) == len(t) and sorted(s) == sorted(t)