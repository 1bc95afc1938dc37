"""Searching: binary, interpolation, linear, Rabin-Karp and integer square roots."""

from __future__ import annotations

from decimal import Decimal
from typing import Any, Sequence

ALPHABET_SIZE = 256
DEFAULT_MODULUS = 2147483647


def binary_search(items: Sequence[Any], target: Any) -> int:
    """Return an index of ``target`` in the sorted ``items``, or -1."""
    lo, hi = 0, len(items) - 1
    while hi >= lo:
        mid = lo + (hi - lo) // 2
        value = items[mid]
        if value == target:
            return mid
        if value > target:
            hi = mid - 1
        else:
            lo = mid + 1
    return -1


def lower_bound_search(items: Sequence[Any], target: Any) -> int:
    """Return the first index of ``target`` in the sorted ``items``, or -1."""
    if not items:
        return -1
    lo, hi = 0, len(items) - 1
    while hi - lo > 1:
        mid = (hi + lo) // 2
        if items[mid] < target:
            lo = mid + 1
        else:
            hi = mid
    if items[lo] == target:
        return lo
    if items[hi] == target:
        return hi
    return -1


def square_root(number: int, precision: int) -> float:
    """Square root of ``number`` truncated to ``precision`` decimal places."""
    if number < 0:
        raise ValueError("number must not be negative")
    if precision < 0:
        raise ValueError("precision must not be negative")
    start, end = 0, number
    ans = 0
    while start <= end:
        mid = (start + end) // 2
        square = mid * mid
        if square == number:
            ans = mid
            break
        if square < number:
            start = mid + 1
            ans = mid
        else:
            end = mid - 1

    result = Decimal(ans)
    increment = Decimal("0.1")
    for _ in range(precision):
        while result * result <= number:
            result += increment
        result -= increment
        increment /= 10
    return float(result)


def interpolation_search(items: Sequence[int], target: int) -> int:
    """Return an index of ``target`` in sorted numeric ``items``, or -1.

    Probes are placed by linear interpolation between the ends of the
    current range.
    """
    lo, hi = 0, len(items) - 1
    while lo <= hi and items[lo] <= target <= items[hi]:
        if items[hi] == items[lo]:
            return lo if items[lo] == target else -1
        mid = lo + (hi - lo) * (target - items[lo]) // (items[hi] - items[lo])
        value = items[mid]
        if value == target:
            return mid
        if target < value:
            hi = mid - 1
        else:
            lo = mid + 1
    return -1


def linear_search(items: Sequence[Any], target: Any) -> int:
    """Return the first index of ``target`` in ``items``, or -1."""
    return next((i for i, value in enumerate(items) if value == target), -1)


def rabin_karp(pattern: str, text: str, modulus: int = DEFAULT_MODULUS) -> list[int]:
    """Return every index at which ``pattern`` occurs in ``text``.

    Uses a rolling hash over a 256-symbol alphabet reduced by ``modulus``;
    hash matches are confirmed character by character.
    """
    if not pattern:
        raise ValueError("pattern must not be empty")
    if modulus <= 0:
        raise ValueError("modulus must be positive")
    m, n = len(pattern), len(text)
    if m > n:
        return []

    high = pow(ALPHABET_SIZE, m - 1, modulus)
    p_hash = t_hash = 0
    for pc, tc in zip(pattern, text[:m]):
        p_hash = (ALPHABET_SIZE * p_hash + ord(pc)) % modulus
        t_hash = (ALPHABET_SIZE * t_hash + ord(tc)) % modulus

    found = []
    for i in range(n - m + 1):
        if p_hash == t_hash and text[i:i + m] == pattern:
            found.append(i)
        if i < n - m:
            t_hash = (
                ALPHABET_SIZE * (t_hash - ord(text[i]) * high) + ord(text[i + m])
            ) % modulus
    return found