"""Binary search puzzles."""

from __future__ import annotations

from typing import Callable, Sequence


def _bisect(nums: Sequence[int], target: int) -> tuple[bool, int]:
    """Binary search: (True, index) on a hit, else (False, insertion point)."""
    left, right = 0, len(nums) - 1
    while left <= right:
        mid = left + (right - left) // 2
        if nums[mid] == target:
            return True, mid
        if target > nums[mid]:
            left = mid + 1
        else:
            right = mid - 1
    return False, left


def search(nums: Sequence[int], target: int) -> int:
    """Index of ``target`` in sorted ``nums``, or -1 if it is absent."""
    found, index = _bisect(nums, target)
    return index if found else -1


def guess_number(n: int, guess: Callable[[int], int]) -> int:
    """Find the picked number in 1..n.

    ``guess(num)`` returns -1 if num is higher than the pick, 1 if lower, 0 if
    equal. Returns -1 if the answers never settle on a number.
    """
    low, high = 1, n
    while low <= high:
        mid = low + (high - low) // 2
        answer = guess(mid)
        if answer == 0:
            return mid
        if answer == -1:
            high = mid - 1
        elif answer == 1:
            low = mid + 1
    return -1


def search_insert(nums: Sequence[int], target: int) -> int:
    """Index of ``target`` in sorted ``nums``, or where it would be inserted."""
    return _bisect(nums, target)[1]