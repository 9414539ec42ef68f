from itertools import accumulate

import pytest

from algopad.arrays import (
    asteroid_collision,
    find_max_average,
    find_max_consecutive_ones,
    h_index,
    insert_interval,
    kids_with_candies,
    largest_altitude,
    longest_ones,
    max_area,
    max_operations,
    maximum_beauty,
    merge,
    move_zeroes,
    pivot_index,
    plus_one,
    product_except_self,
    summary_ranges,
    two_sum,
)


@pytest.mark.parametrize(
    "citations", [[3, 0, 6, 1, 5], [1, 3, 1], [0, 0, 0], [10, 10, 10, 10], [100], []]
)
def test_h_index_meets_definition(citations):
    h = h_index(citations)
    assert sum(c >= h for c in citations) >= h
    assert sum(c >= h + 1 for c in citations) < h + 1


def test_h_index_ignores_order_and_keeps_input():
    citations = [3, 0, 6, 1, 5]
    assert h_index(citations) == h_index(sorted(citations))
    assert citations == [3, 0, 6, 1, 5]


def test_h_index_all_highly_cited():
    citations = [50] * 4
    assert h_index(citations) == len(citations)


def test_kids_with_candies_zero_extra_marks_only_the_greatest():
    candies = [2, 3, 5, 1, 3]
    assert kids_with_candies(candies, 0) == [c == max(candies) for c in candies]


def test_kids_with_candies_large_extra_marks_everyone():
    candies = [4, 2, 1, 1, 2]
    result = kids_with_candies(candies, max(candies))
    assert len(result) == len(candies)
    assert all(result)


def test_find_max_consecutive_ones():
    assert find_max_consecutive_ones([1] * 7) == 7
    assert find_max_consecutive_ones([1, 1, 0] + [1] * 5 + [0, 1]) == 5


ITEMS = [[1, 2], [3, 2], [2, 4], [5, 6], [3, 5]]


def test_maximum_beauty_worked_example():
    assert maximum_beauty(ITEMS, [1, 2, 3, 4, 5, 6]) == [2, 4, 5, 5, 6, 6]


def test_maximum_beauty_bounds_and_monotonic():
    queries = [0, 1, 2, 3, 4, 5, 100]
    result = maximum_beauty(ITEMS, queries)
    assert result == sorted(result)
    assert result[0] < min(beauty for _, beauty in ITEMS)
    assert result[-1] == max(beauty for _, beauty in ITEMS)


def test_maximum_beauty_keeps_query_order():
    assert maximum_beauty(ITEMS, [6, 1]) == maximum_beauty(ITEMS, [1, 6])[::-1]


@pytest.mark.parametrize("number", [0, 9, 129, 999, 4321])
def test_plus_one_matches_integer_increment(number):
    digits = [int(c) for c in str(number)]
    assert plus_one(digits) == [int(c) for c in str(number + 1)]
    assert digits == [int(c) for c in str(number)]


@pytest.mark.parametrize("nums", [[1, 2, 3, 4], [-1, 1, -3, 3], [7]])
def test_product_except_self_without_zeros(nums):
    result = product_except_self(nums)
    total = 1
    for value in nums:
        total *= value
    assert len(result) == len(nums)
    assert all(r * v == total for r, v in zip(result, nums))


def test_product_except_self_with_one_zero():
    nums = [1, 2, 0, 4]
    result = product_except_self(nums)
    zero_at = nums.index(0)
    assert all(r == 0 for i, r in enumerate(result) if i != zero_at)
    others = 1
    for value in nums:
        if value:
            others *= value
    assert result[zero_at] == others


def test_product_except_self_empty():
    assert product_except_self([]) == []


def _expand(ranges):
    for item in ranges:
        low, _, high = item.partition("->")
        yield from range(int(low), int(high or low) + 1)


@pytest.mark.parametrize(
    "nums", [[0, 1, 2, 4, 5, 7], [0, 2, 3, 4, 6, 8, 9], [-3, -2, -1, 5], [], [1]]
)
def test_summary_ranges_round_trip(nums):
    assert list(_expand(summary_ranges(nums))) == nums


def test_summary_ranges_format():
    assert summary_ranges([0, 1, 2, 4, 5, 7]) == ["0->2", "4->5", "7"]


@pytest.mark.parametrize(
    "nums, target",
    [([2, 7, 11, 15], 9), ([3, 2, 4], 6), ([3, 3], 6), ([-1, -2, -3, -4, -5], -8)],
)
def test_two_sum_finds_pair(nums, target):
    i, j = two_sum(nums, target)
    assert i != j
    assert nums[i] + nums[j] == target


def test_two_sum_without_solution():
    assert two_sum([1, 2, 3], 100) == []
    assert two_sum([], 0) == []


def test_insert_interval_merges_overlaps():
    assert insert_interval([[1, 3], [6, 9]], [2, 5]) == [[1, 5], [6, 9]]
    assert insert_interval([[1, 2], [3, 5], [6, 7], [8, 10], [12, 16]], [4, 8]) == [
        [1, 2],
        [3, 10],
        [12, 16],
    ]


def test_insert_interval_at_edges():
    assert insert_interval([], [5, 7]) == [[5, 7]]
    assert insert_interval([[3, 4]], [1, 2]) == [[1, 2], [3, 4]]
    assert insert_interval([[1, 2]], [3, 4]) == [[1, 2], [3, 4]]


def test_insert_interval_keeps_arguments():
    intervals = [[1, 3], [6, 9]]
    new_interval = [2, 7]
    assert insert_interval(intervals, new_interval) == [[1, 9]]
    assert intervals == [[1, 3], [6, 9]]
    assert new_interval == [2, 7]


@pytest.mark.parametrize("nums", [[1, 7, 3, 6, 5, 6], [2, 1, -1], [0, 0, 0]])
def test_pivot_index_balances(nums):
    p = pivot_index(nums)
    assert sum(nums[:p]) == sum(nums[p + 1:])
    assert all(sum(nums[:q]) != sum(nums[q + 1:]) for q in range(p))


def test_pivot_index_missing():
    assert pivot_index([1, 2, 3]) == -1
    assert pivot_index([]) == -1


def test_largest_altitude():
    assert largest_altitude([-1, -2, -3]) == 0
    gain = [1, 2, 3]
    assert largest_altitude(gain) == sum(gain)
    mixed = [-5, 1, 5, 0, -7]
    result = largest_altitude(mixed)
    assert result in {0, *accumulate(mixed)}
    assert all(result >= level for level in accumulate(mixed))


def test_find_max_average_whole_and_single():
    nums = [1, 12, -5, -6, 50, 3]
    assert find_max_average(nums, len(nums)) == pytest.approx(sum(nums) / len(nums))
    assert find_max_average(nums, 1) == pytest.approx(max(nums))


def test_find_max_average_is_best_window():
    nums = [1, 12, -5, -6, 50, 3]
    k = 4
    result = find_max_average(nums, k)
    windows = [sum(nums[i:i + k]) / k for i in range(len(nums) - k + 1)]
    assert any(result == pytest.approx(w) for w in windows)
    assert all(result >= w - 1e-9 for w in windows)


@pytest.mark.parametrize("k", [0, 7])
def test_find_max_average_rejects_bad_window(k):
    with pytest.raises(ValueError):
        find_max_average([1, 2, 3, 4, 5, 6], k)


def test_longest_ones_enough_flips():
    nums = [1, 1, 1, 0, 0, 0, 1, 1, 1, 1, 0]
    assert longest_ones(nums, nums.count(0)) == len(nums)


def test_longest_ones_without_flips_matches_runs():
    nums = [1, 1, 1, 0, 0, 0, 1, 1, 1, 1, 0]
    assert longest_ones(nums, 0) == find_max_consecutive_ones(nums)


def test_longest_ones_monotone_in_k():
    nums = [0, 0, 1, 1, 0, 0, 1, 1, 1, 0, 1, 1, 0, 0, 0, 1, 1, 1, 1]
    results = [longest_ones(nums, k) for k in range(6)]
    assert results == sorted(results)


def test_asteroid_collision():
    assert asteroid_collision([5, 10, -5]) == [5, 10]
    assert asteroid_collision([8, -8]) == []
    assert asteroid_collision([10, 2, -5]) == [10]
    assert asteroid_collision([-2, -1, 1, 2]) == [-2, -1, 1, 2]


def test_max_area_equal_heights():
    heights = [4] * 5
    assert max_area(heights) == 4 * (len(heights) - 1)


def test_max_area_grows_with_more_lines():
    heights = [1, 8, 6, 2, 5, 4, 8, 3, 7]
    assert max_area(heights + [9]) >= max_area(heights)


def test_max_operations():
    nums = [1, 4] * 3
    assert max_operations(nums, 5) == len(nums) // 2
    assert max_operations([1, 2, 3], 100) == 0
    other = [3, 1, 3, 4, 3]
    assert max_operations(other, 6) <= len(other) // 2
    assert other == [3, 1, 3, 4, 3]


def test_merge_in_place():
    nums1 = [1, 2, 3, 0, 0, 0]
    merge(nums1, 3, [2, 5, 6], 3)
    assert nums1 == sorted([1, 2, 3, 2, 5, 6])


def test_merge_edge_counts():
    nums1 = [0]
    merge(nums1, 0, [1], 1)
    assert nums1 == [1]
    nums1 = [1]
    merge(nums1, 1, [], 0)
    assert nums1 == [1]


def test_move_zeroes():
    nums = [0, 1, 0, 3, 12]
    move_zeroes(nums)
    assert nums == [1, 3, 12, 0, 0]


def test_move_zeroes_keeps_elements():
    original = [4, 0, 0, -2, 7, 0, 1]
    nums = list(original)
    move_zeroes(nums)
    assert sorted(nums) == sorted(original)
    assert nums[: len(nums) - original.count(0)] == [x for x in original if x]