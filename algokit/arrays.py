"""Array utilities: element frequencies and maximum-sum subarrays."""

from __future__ import annotations

from collections import Counter
from typing import Any, Hashable, Iterable, Sequence


def count_frequencies(items: Iterable[Hashable]) -> dict[Hashable, int]:
    """Count each distinct element, keyed in order of first appearance."""
    return dict(Counter(items))


def max_subarray_sum(items: Iterable[int]) -> int:
    """Largest sum of a non-empty contiguous run of ``items`` (Kadane)."""
    best: int | None = None
    running = 0
    for value in items:
        running += value
        if best is None or running > best:
            best = running
        if running < 0:
            running = 0
    if best is None:
        raise ValueError("max_subarray_sum needs at least one element")
    return best


def max_subarray(items: Sequence[Any]) -> list[Any]:
    """The earliest non-empty contiguous run of ``items`` with the largest sum."""
    if not items:
        raise ValueError("max_subarray needs at least one element")
    best = None
    best_range = (0, 0)
    running = 0
    start = 0
    for i, value in enumerate(items):
        running += value
        if best is None or running > best:
            best = running
            best_range = (start, i)
        if running < 0:
            running = 0
            start = i + 1
    first, last = best_range
    return list(items[first:last + 1])