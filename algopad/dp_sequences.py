"""Dynamic programming over sequences: common, increasing and palindromic subsequences."""

from __future__ import annotations

from bisect import bisect_left, bisect_right
from typing import Hashable, Sequence


def longest_common_subsequence(text1: Sequence[Hashable], text2: Sequence[Hashable]) -> int:
    """Length of the longest subsequence shared by both sequences."""
    previous = [0] * (len(text2) + 1)
    for a in text1:
        current = [0]
        for j, b in enumerate(text2, 1):
            if a == b:
                current.append(previous[j - 1] + 1)
            else:
                current.append(max(previous[j], current[j - 1]))
        previous = current
    return previous[-1]


def min_distance(word1: str, word2: str) -> int:
    """Fewest character deletions that make the two words equal."""
    common = longest_common_subsequence(word1, word2)
    return len(word1) - common + len(word2) - common


def longest_subsequence(arr: Sequence[int], difference: int) -> int:
    """Longest arithmetic subsequence with the given step; at least 1."""
    lengths: dict[int, int] = {}
    best = 1
    for value in arr:
        lengths[value] = lengths.get(value - difference, 0) + 1
        best = max(best, lengths[value])
    return best


def length_of_lis(nums: Sequence[int]) -> int:
    """Length of the longest strictly increasing subsequence."""
    tails: list[int] = []
    for value in nums:
        index = bisect_left(tails, value)
        if index == len(tails):
            tails.append(value)
        else:
            tails[index] = value
    return len(tails)


def longest_palindrome_subseq(s: str) -> int:
    """Length of the longest palindromic subsequence of ``s``."""
    return longest_common_subsequence(s, s[::-1])


def longest_obstacle_course(obstacles: Sequence[int]) -> list[int]:
    """For each position, the longest non-decreasing course ending there."""
    tails: list[int] = []
    result = []
    for height in obstacles:
        index = bisect_right(tails, height)
        if index == len(tails):
            tails.append(height)
        else:
            tails[index] = height
        result.append(index + 1)
    return result


def find_longest_chain(pairs: Sequence[Sequence[int]]) -> int:
    """Longest chain of pairs where each starts after the previous one ends."""
    count = 0
    end = float("-inf")
    for start, finish in sorted(pairs, key=lambda pair: pair[1]):
        if start > end:
            count += 1
            end = finish
    return count


def min_insertions(s: str) -> int:
    """Fewest insertions that make ``s`` a palindrome."""
    return len(s) - longest_palindrome_subseq(s)


def find_number_of_lis(nums: Sequence[int]) -> int:
    """Number of longest strictly increasing subsequences."""
    lengths: list[int] = []
    counts: list[int] = []
    for value in nums:
        length, count = 1, 1
        for prev_length, prev_count, prev_value in zip(lengths, counts, nums):
            if value > prev_value:
                if prev_length + 1 > length:
                    length, count = prev_length + 1, prev_count
                elif prev_length + 1 == length:
                    count += prev_count
        lengths.append(length)
        counts.append(count)
    best = max(lengths, default=0)
    return sum(count for length, count in zip(lengths, counts) if length == best)


def max_envelopes(envelopes: Sequence[Sequence[int]]) -> int:
    """Most envelopes that can be nested, each strictly larger in both sides."""
    ordered = sorted(envelopes, key=lambda env: (env[0], -env[1]))
    return length_of_lis([height for _, height in ordered])


def max_uncrossed_lines(nums1: Sequence[int], nums2: Sequence[int]) -> int:
    """Most equal-value lines drawable between the two rows without crossing."""
    return longest_common_subsequence(nums1, nums2)