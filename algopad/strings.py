"""String puzzles: counting, sliding windows and two pointers."""

from __future__ import annotations

import math
from itertools import groupby, zip_longest
from typing import MutableSequence

_LOWER_VOWELS = frozenset("aeiou")
_VOWELS = frozenset("aeiouAEIOU")


def fizz_buzz(n: int) -> list[str]:
    """The FizzBuzz words for 1..n."""
    words = []
    for i in range(1, n + 1):
        if i % 15 == 0:
            words.append("FizzBuzz")
        elif i % 3 == 0:
            words.append("Fizz")
        elif i % 5 == 0:
            words.append("Buzz")
        else:
            words.append(str(i))
    return words


def gcd_of_strings(str1: str, str2: str) -> str:
    """Longest string that divides both ``str1`` and ``str2``, or ""."""
    if str1 + str2 != str2 + str1:
        return ""
    return str1[: math.gcd(len(str1), len(str2))]


def max_repeating(sequence: str, word: str) -> int:
    """Largest k such that ``word`` repeated k times occurs in ``sequence``.

    Raises ValueError for an empty word.
    """
    if not word:
        raise ValueError("word must not be empty")
    k = 0
    while word * (k + 1) in sequence:
        k += 1
    return k


def remove_stars(s: str) -> str:
    """Let each '*' delete the closest kept character to its left.

    Raises ValueError when a star has nothing left to delete.
    """
    kept: list[str] = []
    for char in s:
        if char != "*":
            kept.append(char)
        elif kept:
            kept.pop()
        else:
            raise ValueError("a star has no character to remove")
    return "".join(kept)


def convert_zigzag(s: str, num_rows: int) -> str:
    """Write ``s`` in a zigzag over ``num_rows`` rows and read it row by row."""
    if num_rows < 1:
        raise ValueError("num_rows must be at least 1")
    if num_rows == 1 or num_rows >= len(s):
        return s
    cycle = 2 * (num_rows - 1)
    rows: list[list[str]] = [[] for _ in range(num_rows)]
    for index, char in enumerate(s):
        position = index % cycle
        rows[min(position, cycle - position)].append(char)
    return "".join("".join(row) for row in rows)


def length_of_longest_substring(s: str) -> int:
    """Length of the longest substring without a repeated character."""
    last_seen: dict[str, int] = {}
    start = 0
    best = 0
    for index, char in enumerate(s):
        previous = last_seen.get(char)
        if previous is not None and previous >= start:
            start = previous + 1
        last_seen[char] = index
        best = max(best, index - start + 1)
    return best


def max_vowels(s: str, k: int) -> int:
    """Most lowercase vowels in any substring of length ``k``."""
    if not 1 <= k <= len(s):
        raise ValueError(f"window length {k} must be between 1 and {len(s)}")
    window = sum(1 for char in s[:k] if char in _LOWER_VOWELS)
    best = window
    for outgoing, incoming in zip(s, s[k:]):
        window += (incoming in _LOWER_VOWELS) - (outgoing in _LOWER_VOWELS)
        best = max(best, window)
    return best


def is_subsequence(s: str, t: str) -> bool:
    """Tell whether ``s`` can be had by deleting characters from ``t``."""
    remaining = iter(t)
    return all(char in remaining for char in s)


def merge_alternately(word1: str, word2: str) -> str:
    """Interleave the characters of both words, appending what is left over."""
    return "".join(a + b for a, b in zip_longest(word1, word2, fillvalue=""))


def reverse_vowels(s: str) -> str:
    """Reverse the order of the vowels of ``s``, leaving other characters in place."""
    positions = [index for index, char in enumerate(s) if char in _VOWELS]
    chars = list(s)
    for target, source in zip(positions, reversed(positions)):
        chars[target] = s[source]
    return "".join(chars)


def reverse_words(s: str) -> str:
    """Reverse the order of the space-separated words, joined by single spaces."""
    words = [word for word in s.split(" ") if word]
    return " ".join(reversed(words))


def compress(chars: MutableSequence[str]) -> int:
    """Run-length encode ``chars`` in place and return the encoded length.

    Each run becomes its character followed by its length when that exceeds
    one. Elements past the returned length are left as they were.
    """
    encoded: list[str] = []
    for char, run in groupby(list(chars)):
        count = sum(1 for _ in run)
        encoded.append(char)
        if count > 1:
            encoded.extend(str(count))
    chars[: len(encoded)] = encoded
    return len(encoded)