"""Dynamic programming over counts, weights and prices.

Covers knapsacks, subset sums, coin change, ladders, matrix chains, rod
cutting, grid paths and the wine-selling problem.
"""

from __future__ import annotations

import math
from functools import lru_cache
from typing import Iterable, Sequence

NO_SOLUTION = -1


def _paired(weights: Iterable[int], values: Iterable[int]) -> list[tuple[int, int]]:
    weights, values = list(weights), list(values)
    if len(weights) != len(values):
        raise ValueError("weights and values must have the same length")
    return list(zip(weights, values))


def knapsack_01(capacity: int, weights: Iterable[int], values: Iterable[int]) -> int:
    """Largest total value of items, each used at most once, within ``capacity``."""
    if capacity < 0:
        raise ValueError("capacity must not be negative")
    items = _paired(weights, values)
    if any(weight < 0 for weight, _ in items):
        raise ValueError("weights must not be negative")
    previous = [0] * (capacity + 1)
    for weight, value in items:
        current = [0] * (capacity + 1)
        for j in range(1, capacity + 1):
            if weight <= j:
                current[j] = max(value + previous[j - weight], previous[j])
            else:
                current[j] = previous[j]
        previous = current
    return previous[capacity]


def unbounded_knapsack(capacity: int, weights: Iterable[int], values: Iterable[int]) -> int:
    """Largest total value within ``capacity`` when each item may be reused freely."""
    if capacity < 0:
        raise ValueError("capacity must not be negative")
    items = _paired(weights, values)
    if any(weight <= 0 for weight, _ in items):
        raise ValueError("weights must be positive")
    previous = [0] * (capacity + 1)
    for weight, value in items:
        current = [0] * (capacity + 1)
        for j in range(1, capacity + 1):
            if weight <= j:
                current[j] = max(value + current[j - weight], previous[j])
            else:
                current[j] = previous[j]
        previous = current
    return previous[capacity]


def _check_subset_input(items: Iterable[int], total: int) -> list[int]:
    data = list(items)
    if total < 0:
        raise ValueError("total must not be negative")
    if any(value < 0 for value in data):
        raise ValueError("items must not be negative")
    return data


def count_subsets_with_sum(items: Iterable[int], total: int) -> int:
    """Number of subsets of ``items`` (by position) whose elements add up to ``total``."""
    data = _check_subset_input(items, total)
    previous = [1] + [0] * total
    for value in data:
        current = [1] + [0] * total
        for j in range(1, total + 1):
            current[j] = previous[j]
            if value <= j:
                current[j] += previous[j - value]
        previous = current
    return previous[total]


def has_subset_with_sum(items: Iterable[int], total: int) -> bool:
    """True when some subset of ``items`` adds up to ``total``."""
    data = _check_subset_input(items, total)
    previous = [True] + [False] * total
    for value in data:
        current = [True] + [False] * total
        for j in range(1, total + 1):
            current[j] = previous[j] or (value <= j and previous[j - value])
        previous = current
    return previous[total]


def fibonacci(n: int) -> int:
    """The ``n``-th Fibonacci number, counting from F(0) = 0."""
    if n < 0:
        raise ValueError("n must not be negative")
    current, following = 0, 1
    for _ in range(n):
        current, following = following, current + following
    return current


def ladder_ways(n: int, k: int) -> int:
    """Ways to climb ``n`` steps taking between 1 and ``k`` steps at a time."""
    if n < 0:
        raise ValueError("n must not be negative")
    if k < 1:
        raise ValueError("k must be at least 1")
    ways = [1] + [0] * n
    for i in range(1, n + 1):
        ways[i] = sum(ways[max(0, i - k):i])
    return ways[n]


def _check_coins(coins: Iterable[int], amount: int) -> list[int]:
    values = list(coins)
    if amount < 0:
        raise ValueError("amount must not be negative")
    if any(coin <= 0 for coin in values):
        raise ValueError("coins must be positive")
    return values


def coin_change_ways(coins: Iterable[int], amount: int) -> int:
    """Number of unordered ways to pay ``amount`` with unlimited ``coins``."""
    values = _check_coins(coins, amount)
    ways = [1] + [0] * amount
    for coin in values:
        for j in range(coin, amount + 1):
            ways[j] += ways[j - coin]
    return ways[amount]


def min_coins(coins: Iterable[int], amount: int) -> int:
    """Fewest coins that pay ``amount`` exactly, or -1 when it cannot be paid."""
    values = _check_coins(coins, amount)
    best = [0] + [math.inf] * amount
    for coin in values:
        for j in range(coin, amount + 1):
            best[j] = min(best[j], best[j - coin] + 1)
    result = best[amount]
    return NO_SOLUTION if result == math.inf else int(result)


def matrix_chain_cost(dimensions: Sequence[int]) -> int:
    """Fewest scalar multiplications to multiply a chain of matrices.

    Matrix ``i`` has shape ``dimensions[i] x dimensions[i + 1]``.
    """
    dims = list(dimensions)
    count = len(dims) - 1
    if count <= 1:
        return 0
    cost = [[0] * count for _ in range(count)]
    for length in range(2, count + 1):
        for i in range(count - length + 1):
            j = i + length - 1
            cost[i][j] = min(
                cost[i][k] + cost[k + 1][j] + dims[i] * dims[k + 1] * dims[j + 1]
                for k in range(i, j)
            )
    return cost[0][count - 1]


def min_steps_to_one(n: int) -> int:
    """Fewest steps to reach 1 from ``n`` by dividing by 3, by 2, or subtracting 1."""
    if n < 1:
        raise ValueError("n must be at least 1")
    steps = [0] * (n + 1)
    for i in range(2, n + 1):
        best = steps[i - 1]
        if i % 2 == 0:
            best = min(best, steps[i // 2])
        if i % 3 == 0:
            best = min(best, steps[i // 3])
        steps[i] = best + 1
    return steps[n]


def rod_cutting(prices: Sequence[int]) -> int:
    """Best revenue from a rod of length ``len(prices)``; a piece of length i sells for prices[i-1]."""
    price_list = list(prices)
    n = len(price_list)
    best = [0] * (n + 1)
    for length, price in enumerate(price_list, start=1):
        for j in range(length, n + 1):
            best[j] = max(best[j], price + best[j - length])
    return best[n]


def unique_paths(rows: int, cols: int) -> int:
    """Monotone right/down paths across a ``rows`` x ``cols`` grid."""
    if rows < 1 or cols < 1:
        raise ValueError("rows and cols must be at least 1")
    return math.comb(rows + cols - 2, rows - 1)


def wine_profit(prices: Sequence[int]) -> int:
    """Best profit selling one wine a year from either end of the shelf.

    A bottle sold in year ``y`` (from 1) earns its price times ``y``.
    """
    shelf = list(prices)
    n = len(shelf)

    @lru_cache(maxsize=None)
    def profit(i: int, j: int) -> int:
        if i > j:
            return 0
        year = n - (j - i)
        return max(
            shelf[i] * year + profit(i + 1, j),
            shelf[j] * year + profit(i, j - 1),
        )

    return profit(0, n - 1)