"""String puzzles solved by counting and mapping characters."""

from __future__ import annotations

from collections import Counter
from typing import Iterable

_ROMAN_DIGITS = (
    ("C", "D", "M"),
    ("X", "L", "C"),
    ("I", "V", "X"),
)


def first_uniq_char(s: str) -> int:
    """Index of the first character that occurs once, or -1."""
    counts = Counter(s)
    return next((index for index, char in enumerate(s) if counts[char] == 1), -1)


def group_anagrams(strs: Iterable[str]) -> list[list[str]]:
    """Group words that are anagrams of each other, in order of first appearance."""
    groups: dict[str, list[str]] = {}
    for word in strs:
        groups.setdefault("".join(sorted(word)), []).append(word)
    return list(groups.values())


def _roman_digit(digit: int, one: str, five: str, ten: str) -> str:
    if digit == 9:
        return one + ten
    if digit >= 5:
        return five + one * (digit - 5)
    if digit == 4:
        return one + five
    return one * digit


def int_to_roman(num: int) -> str:
    """Roman numeral for ``num``, built from its last four decimal digits.

    Raises ValueError for negative input.
    """
    if num < 0:
        raise ValueError(f"cannot write {num} as a Roman numeral")
    thousands = (num // 1000) % 10
    parts = ["M" * thousands]
    for power, symbols in zip((100, 10, 1), _ROMAN_DIGITS):
        parts.append(_roman_digit((num // power) % 10, *symbols))
    return "".join(parts)


def is_isomorphic(s: str, t: str) -> bool:
    """Tell whether the characters of ``s`` map one-to-one onto those of ``t``."""
    if len(s) != len(t):
        return False
    forward: dict[str, str] = {}
    backward: dict[str, str] = {}
    for a, b in zip(s, t):
        if forward.setdefault(a, b) != b or backward.setdefault(b, a) != a:
            return False
    return True


def longest_palindrome(s: str) -> int:
    """Length of the longest palindrome that can be built from the letters of ``s``."""
    counts = Counter(s).values()
    pairs = sum(count - count % 2 for count in counts)
    return pairs + (1 if any(count % 2 for count in counts) else 0)


def can_construct(ransom_note: str, magazine: str) -> bool:
    """Tell whether ``ransom_note`` can be made from the letters of ``magazine``."""
    return not (Counter(ransom_note) - Counter(magazine))


def is_anagram(s: str, t: str) -> bool:
    """Tell whether ``t`` is a rearrangement of ``s``."""
    return len(s) == len(t) and Counter(s) == Counter(t)


def word_pattern(pattern: str, s: str) -> bool:
    """Tell whether the space-separated words of ``s`` follow ``pattern`` one-to-one."""
    words = s.split(" ")
    if len(words) != len(pattern):
        return False
    to_word: dict[str, str] = {}
    to_letter: dict[str, str] = {}
    for letter, word in zip(pattern, words):
        if to_word.setdefault(letter, word) != word:
            return False
        if to_letter.setdefault(word, letter) != letter:
            return False
    return True