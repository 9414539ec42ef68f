"""Array puzzles solved with hash maps and sets."""

from __future__ import annotations

import random
from collections import Counter
from typing import Iterable, Optional, Sequence


def contains_nearby_duplicate(nums: Sequence[int], k: int) -> bool:
    """Tell whether two equal values sit at most ``k`` positions apart."""
    last_seen: dict[int, int] = {}
    for index, value in enumerate(nums):
        previous = last_seen.get(value)
        if previous is not None and abs(previous - index) <= k:
            return True
        last_seen[value] = index
    return False


def contains_duplicate(nums: Iterable[int]) -> bool:
    """Tell whether any value appears more than once."""
    seen: set[int] = set()
    for value in nums:
        if value in seen:
            return True
        seen.add(value)
    return False


def find_disappeared_numbers(nums: Sequence[int]) -> list[int]:
    """Values in 1..len(nums) that do not appear in ``nums``."""
    present = set(nums)
    return [value for value in range(1, len(nums) + 1) if value not in present]


def find_difference(nums1: Sequence[int], nums2: Sequence[int]) -> list[list[int]]:
    """Distinct values only in ``nums1`` and distinct values only in ``nums2``.

    Each list keeps the order of first appearance.
    """
    set1, set2 = set(nums1), set(nums2)
    only_first = list(dict.fromkeys(value for value in nums1 if value not in set2))
    only_second = list(dict.fromkeys(value for value in nums2 if value not in set1))
    return [only_first, only_second]


class RandomizedSet:
    """A set of integers with constant-time insert, remove and random pick."""

    def __init__(self, rng: Optional[random.Random] = None) -> None:
        self._values: list[int] = []
        self._positions: dict[int, int] = {}
        self._rng = rng if rng is not None else random.Random()

    def __len__(self) -> int:
        return len(self._values)

    def __contains__(self, val: object) -> bool:
        return val in self._positions

    def insert(self, val: int) -> bool:
        """Add ``val``; return False if it was already present."""
        if val in self._positions:
            return False
        self._positions[val] = len(self._values)
        self._values.append(val)
        return True

    def remove(self, val: int) -> bool:
        """Remove ``val``; return False if it was not present."""
        index = self._positions.pop(val, None)
        if index is None:
            return False
        last = self._values.pop()
        if index < len(self._values):
            self._values[index] = last
            self._positions[last] = index
        return True

    def get_random(self) -> int:
        """Return a uniformly chosen member; raise IndexError when empty."""
        if not self._values:
            raise IndexError("get_random from an empty set")
        return self._rng.choice(self._values)


def intersect(nums1: Sequence[int], nums2: Sequence[int]) -> list[int]:
    """Common values counted as often as they appear in both, in ``nums2`` order."""
    available = Counter(nums1)
    result = []
    for value in nums2:
        if available[value] > 0:
            available[value] -= 1
            result.append(value)
    return result


def intersection(nums1: Sequence[int], nums2: Sequence[int]) -> list[int]:
    """Distinct values found in both sequences, in ``nums1`` order."""
    other = set(nums2)
    return list(dict.fromkeys(value for value in nums1 if value in other))


def longest_consecutive(nums: Iterable[int]) -> int:
    """Length of the longest run of consecutive integers among the values."""
    values = set(nums)
    best = 0
    for value in values:
        if value - 1 in values:
            continue
        end = value
        while end + 1 in values:
            end += 1
        best = max(best, end - value + 1)
    return best


def unique_occurrences(arr: Iterable[int]) -> bool:
    """Tell whether every distinct value occurs a different number of times."""
    counts = Counter(arr).values()
    return len(counts) == len(set(counts))