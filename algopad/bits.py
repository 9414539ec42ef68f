"""Bit manipulation puzzles."""

from __future__ import annotations

from functools import reduce
from operator import xor
from typing import Iterable


def count_bits(n: int) -> list[int]:
    """Number of set bits of every integer from 0 to ``n``."""
    return [i.bit_count() for i in range(n + 1)]


def add_binary(a: str, b: str) -> str:
    """Add two binary strings; the result keeps at least the width of the wider input."""
    if not a and not b:
        return ""
    total = int(a or "0", 2) + int(b or "0", 2)
    return format(total, "b").zfill(max(len(a), len(b)))


def find_the_difference(s: str, t: str) -> str:
    """Return the one character added to ``s`` to make ``t``."""
    return chr(reduce(xor, map(ord, s + t), 0))


def hamming_weight(n: int) -> int:
    """Count the set bits of ``n``.

    Negative input counts the bits of its magnitude, negated, as repeated
    truncating division by two does.
    """
    count = abs(n).bit_count()
    return -count if n < 0 else count


def reverse_bits(n: int) -> int:
    """Reverse the bit order of ``n`` taken as an unsigned 32-bit integer."""
    return int(format(n & 0xFFFFFFFF, "032b")[::-1], 2)


def single_number(nums: Iterable[int]) -> int:
    """Return the value that appears once when every other appears twice."""
    return reduce(xor, nums, 0)