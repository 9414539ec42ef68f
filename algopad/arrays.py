"""Array puzzles: prefix sums, sliding windows, two pointers and stacks."""

from __future__ import annotations

import heapq
from bisect import bisect_right
from itertools import accumulate, groupby
from operator import mul
from typing import MutableSequence, Sequence


def h_index(citations: Sequence[int]) -> int:
    """Largest h such that h papers have at least h citations each."""
    ranked = sorted(citations, reverse=True)
    return sum(1 for rank, count in enumerate(ranked, 1) if count >= rank)


def kids_with_candies(candies: Sequence[int], extra_candies: int) -> list[bool]:
    """For each kid, whether the extra candies would give them the most."""
    greatest = max([0, *candies])
    return [candy + extra_candies >= greatest for candy in candies]


def find_max_consecutive_ones(nums: Sequence[int]) -> int:
    """Length of the longest run of ones."""
    return max(
        (sum(1 for _ in run) for value, run in groupby(nums) if value == 1),
        default=0,
    )


def maximum_beauty(items: Sequence[Sequence[int]], queries: Sequence[int]) -> list[int]:
    """For each query price, the best beauty among items costing at most that price."""
    ranked = sorted(items, key=lambda item: item[0])
    prices = [price for price, _ in ranked]
    best = list(accumulate((beauty for _, beauty in ranked), max, initial=0))
    return [best[bisect_right(prices, query)] for query in queries]


def plus_one(digits: Sequence[int]) -> list[int]:
    """Add one to a number given as most-significant-first decimal digits."""
    result = list(digits)
    trailing = 0
    while result and result[-1] >= 9:
        result.pop()
        trailing += 1
    if result:
        result[-1] += 1
    else:
        result = [1]
    return result + [0] * trailing


def product_except_self(nums: Sequence[int]) -> list[int]:
    """For each position, the product of every other element."""
    values = list(nums)
    if not values:
        return []
    prefix = list(accumulate(values[:-1], mul, initial=1))
    suffix = list(accumulate(reversed(values[1:]), mul, initial=1))[::-1]
    return [left * right for left, right in zip(prefix, suffix)]


def summary_ranges(nums: Sequence[int]) -> list[str]:
    """Describe runs of consecutive integers as "a->b", or "a" for a single value."""
    ranges = []
    for _, run in groupby(enumerate(nums), key=lambda pair: pair[1] - pair[0]):
        values = [value for _, value in run]
        first, last = values[0], values[-1]
        ranges.append(f"{first}->{last}" if len(values) > 1 else str(first))
    return ranges


def two_sum(nums: Sequence[int], target: int) -> list[int]:
    """Indices of two elements adding up to ``target``, or an empty list."""
    ranked = sorted((value, index) for index, value in enumerate(nums))
    left, right = 0, len(ranked) - 1
    while left < right:
        total = ranked[left][0] + ranked[right][0]
        if total == target:
            return [ranked[left][1], ranked[right][1]]
        if total < target:
            left += 1
        else:
            right -= 1
    return []


def insert_interval(
    intervals: Sequence[Sequence[int]], new_interval: Sequence[int]
) -> list[list[int]]:
    """Insert an interval into sorted disjoint intervals, merging overlaps."""
    start, end = new_interval
    result: list[list[int]] = []
    merging = False
    placed = False
    for low, high in intervals:
        if placed:
            result.append([low, high])
        elif not merging and high < start:
            result.append([low, high])
        elif low <= end:
            merging = True
            start, end = min(start, low), max(end, high)
        else:
            result.append([start, end])
            placed = True
            result.append([low, high])
    if not placed:
        result.append([start, end])
    return result


def pivot_index(nums: Sequence[int]) -> int:
    """First index whose left and right sums are equal, or -1."""
    total = sum(nums)
    left = 0
    for index, value in enumerate(nums):
        if left == total - left - value:
            return index
        left += value
    return -1


def largest_altitude(gain: Sequence[int]) -> int:
    """Highest altitude reached starting at 0 and applying each gain in turn."""
    return max(accumulate(gain, initial=0))


def find_max_average(nums: Sequence[int], k: int) -> float:
    """Largest average of a contiguous window of length ``k``."""
    if not 1 <= k <= len(nums):
        raise ValueError(f"window length {k} must be between 1 and {len(nums)}")
    window = sum(nums[:k])
    best = window
    for outgoing, incoming in zip(nums, nums[k:]):
        window += incoming - outgoing
        best = max(best, window)
    return best / k


def longest_ones(nums: Sequence[int], k: int) -> int:
    """Longest run of ones possible after flipping at most ``k`` zeros."""
    left = 0
    zeros = 0
    best = 0
    for right, value in enumerate(nums):
        if value == 0:
            zeros += 1
        if zeros <= k:
            best = max(best, right - left + 1)
        else:
            if nums[left] == 0:
                zeros -= 1
            left += 1
    return best


def asteroid_collision(asteroids: Sequence[int]) -> list[int]:
    """State of the asteroids after every collision has happened."""
    stack: list[int] = []
    for asteroid in asteroids:
        alive = True
        while alive and stack and stack[-1] > 0 and asteroid < 0:
            if -asteroid > stack[-1]:
                stack.pop()
            elif -asteroid == stack[-1]:
                stack.pop()
                alive = False
            else:
                alive = False
        if alive:
            stack.append(asteroid)
    return stack


def max_area(height: Sequence[int]) -> int:
    """Most water held between two of the given vertical lines."""
    left, right = 0, len(height) - 1
    best = 0
    while left < right:
        best = max(best, min(height[left], height[right]) * (right - left))
        if height[left] > height[right]:
            right -= 1
        else:
            left += 1
    return best


def max_operations(nums: Sequence[int], k: int) -> int:
    """Most disjoint pairs that can be removed whose values add up to ``k``."""
    values = sorted(nums)
    left, right = 0, len(values) - 1
    count = 0
    while left < right:
        total = values[left] + values[right]
        if total == k:
            count += 1
            left += 1
            right -= 1
        elif total > k:
            right -= 1
        else:
            left += 1
    return count


def merge(nums1: MutableSequence[int], m: int, nums2: Sequence[int], n: int) -> None:
    """Merge the first ``n`` of ``nums2`` into the first ``m`` of ``nums1``, in place."""
    nums1[: m + n] = list(heapq.merge(nums1[:m], nums2[:n]))


def move_zeroes(nums: MutableSequence[int]) -> None:
    """Move every zero to the end in place, keeping the others in order."""
    nonzero = [value for value in nums if value != 0]
    zeros = [value for value in nums if value == 0]
    nums[:] = nonzero + zeros