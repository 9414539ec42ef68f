"""Greedy puzzles on arrays."""

from __future__ import annotations

import math
from itertools import pairwise
from typing import Sequence


def can_place_flowers(flowerbed: Sequence[int], n: int) -> bool:
    """Tell whether ``n`` flowers fit in the bed with no two adjacent."""
    if not flowerbed:
        return n <= 0
    planted = 0
    previous = 0
    for current, following in pairwise(flowerbed):
        if previous == 0 and current == 0 and following == 0:
            planted += 1
            previous = 1
        else:
            previous = current
    if previous == 0 and flowerbed[-1] == 0:
        planted += 1
    return planted >= n


def can_complete_circuit(gas: Sequence[int], cost: Sequence[int]) -> int:
    """Station from which the circular route can be completed, or -1."""
    total = 0
    tank = 0
    start = 0
    for index, (fuel, spend) in enumerate(zip(gas, cost)):
        total += fuel - spend
        tank += fuel - spend
        if tank < 0:
            tank = 0
            start = index + 1
    return -1 if total < 0 else start


def increasing_triplet(nums: Sequence[int]) -> bool:
    """Tell whether some i < j < k has nums[i] < nums[j] < nums[k]."""
    if len(nums) < 3:
        return False
    first = second = math.inf
    for num in nums:
        if num <= first:
            first = num
        elif num <= second:
            second = num
        else:
            return True
    return False


def can_jump(nums: Sequence[int]) -> bool:
    """Tell whether the last index can be reached from the first."""
    if not nums:
        return False
    goal = len(nums) - 1
    for index, step in reversed(list(enumerate(nums))):
        if index + step >= goal:
            goal = index
    return goal == 0


def jump(nums: Sequence[int]) -> int:
    """Fewest jumps needed to reach the last index.

    Raises ValueError if the last index cannot be reached.
    """
    last = len(nums) - 1
    if last <= 0:
        return 0
    low = high = 0
    jumps = 0
    while high < last:
        farthest = max(index + step for index, step in enumerate(nums[low:high + 1], low))
        if farthest <= high:
            raise ValueError("the last index cannot be reached")
        low, high = high + 1, farthest
        jumps += 1
    return jumps