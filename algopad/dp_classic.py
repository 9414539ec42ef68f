"""Classic dynamic programming puzzles: stairs, coins, robbers, grids and triangles."""

from __future__ import annotations

import math
from typing import Sequence

_CHANGE_MODULUS = 10_000_000_007


def climb_stairs(n: int) -> int:
    """Number of ways to climb ``n`` steps taking one or two at a time."""
    a, b = 1, 1
    for _ in range(n - 1):
        a, b = a + b, a
    return a


def _check_coins(coins: Sequence[int], amount: int) -> None:
    if not coins:
        raise ValueError("at least one coin is needed")
    if any(coin <= 0 for coin in coins):
        raise ValueError("coin values must be positive")
    if amount < 0:
        raise ValueError("amount must not be negative")


def change(amount: int, coins: Sequence[int]) -> int:
    """Number of coin combinations making up ``amount``, modulo 10**10 + 7."""
    _check_coins(coins, amount)
    ways = [1] + [0] * amount
    for coin in coins:
        for target in range(coin, amount + 1):
            ways[target] = (ways[target] + ways[target - coin]) % _CHANGE_MODULUS
    return ways[amount]


def coin_change(coins: Sequence[int], amount: int) -> int:
    """Fewest coins making up ``amount``, or -1 if it cannot be made."""
    _check_coins(coins, amount)
    fewest: list[float] = [0.0] + [math.inf] * amount
    for coin in coins:
        for target in range(coin, amount + 1):
            fewest[target] = min(fewest[target], fewest[target - coin] + 1)
    result = fewest[amount]
    return -1 if result == math.inf else int(result)


def fib(n: int) -> int:
    """The ``n``-th Fibonacci number; values of ``n`` up to 1 are returned as is."""
    if n <= 1:
        return n
    a, b = 0, 1
    for _ in range(n - 1):
        a, b = b, a + b
    return b


def rob(nums: Sequence[int]) -> int:
    """Most money taken from a row of houses without robbing two neighbours."""
    previous, before_previous = 0, 0
    for value in nums:
        previous, before_previous = max(value + before_previous, previous), previous
    return previous


def rob_circular(nums: Sequence[int]) -> int:
    """Like :func:`rob`, but the first and last houses are neighbours."""
    if len(nums) == 1:
        return nums[0]
    return max(rob(nums[1:]), rob(nums[:-1]))


def maximal_square(matrix: Sequence[Sequence[str]]) -> int:
    """Area of the largest square of '1' cells in a grid of '0' and '1'."""
    side = 0
    previous: list[int] = []
    for i, row in enumerate(matrix):
        current: list[int] = []
        for j, cell in enumerate(row):
            value = int(cell)
            if i == 0 or j == 0:
                size = value
            elif value == 1:
                size = 1 + min(previous[j - 1], previous[j], current[j - 1])
            else:
                size = 0
            current.append(size)
            side = max(side, size)
        previous = current
    return side * side


def min_cost_climbing_stairs(cost: Sequence[int]) -> int:
    """Cheapest way past the top, starting on step 0 or 1 and climbing one or two."""
    if len(cost) < 2:
        raise ValueError("at least two steps are needed")
    a, b = cost[-2], cost[-1]
    for step in reversed(cost[:-2]):
        a, b = step + min(a, b), a
    return min(a, b)


def min_falling_path_sum(matrix: Sequence[Sequence[int]]) -> int:
    """Smallest sum of a path going down one row at a time, shifting at most one column."""
    if not matrix:
        raise ValueError("matrix must not be empty")
    below = list(matrix[-1])
    for row in reversed(matrix[:-1]):
        below = [
            value + min(below[max(col - 1, 0):col + 2])
            for col, value in enumerate(row)
        ]
    return min(below)


def min_path_sum(grid: Sequence[Sequence[int]]) -> int:
    """Smallest sum of a path from top left to bottom right moving right or down."""
    if not grid or not grid[0]:
        raise ValueError("grid must not be empty")
    below: list[float] = [math.inf] * len(grid[0])
    for row_index, row in enumerate(reversed(grid)):
        current: list[float] = [math.inf] * len(row)
        for col in reversed(range(len(row))):
            if row_index == 0 and col == len(row) - 1:
                current[col] = row[col]
            else:
                right = current[col + 1] if col + 1 < len(row) else math.inf
                current[col] = row[col] + min(below[col], right)
        below = current
    return int(below[0])


def max_sum_after_partitioning(arr: Sequence[int], k: int) -> int:
    """Largest sum after splitting into pieces of at most ``k`` and flattening each to its max."""
    n = len(arr)
    best = [0] * (n + 1)
    for i in reversed(range(n)):
        biggest = -math.inf
        result = 0
        for j in range(i, min(n, i + k)):
            biggest = max(biggest, arr[j])
            result = max(result, (j - i + 1) * biggest + best[j + 1])
        best[i] = int(result)
    return best[0]


def generate_pascal(num_rows: int) -> list[list[int]]:
    """The first ``num_rows`` rows of Pascal's triangle."""
    rows: list[list[int]] = []
    for _ in range(num_rows):
        if not rows:
            rows.append([1])
        else:
            last = rows[-1]
            rows.append([1, *(a + b for a, b in zip(last, last[1:])), 1])
    return rows


def get_pascal_row(row_index: int) -> list[int]:
    """Row ``row_index`` (counted from 0) of Pascal's triangle."""
    if row_index < 0:
        raise ValueError("row index must not be negative")
    return generate_pascal(row_index + 1)[-1]


def num_squares(n: int) -> int:
    """Fewest perfect squares adding up to ``n``."""
    if n < 0:
        raise ValueError("n must not be negative")
    squares = [i * i for i in range(1, math.isqrt(n) + 1)]
    fewest = [0] + [n] * n
    for target in range(1, n + 1):
        for square in squares:
            if square > target:
                break
            fewest[target] = min(fewest[target], fewest[target - square] + 1)
    return fewest[n]


def most_points(questions: Sequence[Sequence[int]]) -> int:
    """Most points earned when solving a question skips the next ``brainpower`` ones."""
    n = len(questions)
    best = [0] * (n + 1)
    for index in reversed(range(n)):
        points, brainpower = questions[index][0], questions[index][1]
        pick = points + best[min(index + 1 + brainpower, n)]
        best[index] = max(pick, best[index + 1])
    return best[0]


def minimum_total(triangle: Sequence[Sequence[int]]) -> int:
    """Smallest top-to-bottom path sum, stepping to an adjacent number below."""
    if not triangle:
        raise ValueError("triangle must not be empty")
    below = list(triangle[-1])
    for row in reversed(triangle[:-1]):
        below = [value + min(below[col], below[col + 1]) for col, value in enumerate(row)]
    return below[0]


def tribonacci(n: int) -> int:
    """The ``n``-th Tribonacci number; values of ``n`` up to 1 are returned as is."""
    if n <= 1:
        return n
    a, b, c = 0, 1, 1
    for _ in range(3, n + 1):
        a, b, c = b, c, a + b + c
    return c


def unique_paths(m: int, n: int) -> int:
    """Number of right/down paths across an ``m`` by ``n`` grid."""
    if m < 1 or n < 1:
        raise ValueError("grid dimensions must be positive")
    return math.comb(m + n - 2, m - 1)


def unique_paths_with_obstacles(obstacle_grid: Sequence[Sequence[int]]) -> int:
    """Number of right/down paths across a grid whose cells of 1 are blocked."""
    if not obstacle_grid or not obstacle_grid[0]:
        raise ValueError("grid must not be empty")
    width = len(obstacle_grid[0])
    below = [0] * width
    last_row = len(obstacle_grid) - 1
    for row_index, row in enumerate(reversed(obstacle_grid)):
        current = [0] * width
        for col in reversed(range(width)):
            if row[col] == 1:
                current[col] = 0
            elif row_index == 0 and col == width - 1:
                current[col] = 1
            else:
                right = current[col + 1] if col + 1 < width else 0
                current[col] = below[col] + right
        below = current
    del last_row
    return below[0]