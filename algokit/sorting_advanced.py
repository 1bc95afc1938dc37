"""Divide-and-conquer and distribution sorts.

Covers counting, heap, merge, quick, radix, tim and bucket sort.
"""

from __future__ import annotations

from typing import Any, Iterable

DEFAULT_RUN = 32


def counting_sort(items: Iterable[int]) -> list[int]:
    """Return the non-negative integers in ``items`` sorted by counting."""
    data = list(items)
    if not data:
        return []
    if min(data) < 0:
        raise ValueError("counting sort needs non-negative integers")
    counts = [0] * (max(data) + 1)
    for value in data:
        counts[value] += 1
    return [value for value, count in enumerate(counts) for _ in range(count)]


def _sift_down(data: list[Any], size: int, root: int) -> None:
    while True:
        largest = root
        left, right = 2 * root + 1, 2 * root + 2
        if left < size and data[left] > data[largest]:
            largest = left
        if right < size and data[right] > data[largest]:
            largest = right
        if largest == root:
            return
        data[root], data[largest] = data[largest], data[root]
        root = largest


def heap_sort(items: Iterable[Any]) -> list[Any]:
    """Return a new list sorted with an in-place max-heap."""
    data = list(items)
    n = len(data)
    for i in range(n // 2 - 1, -1, -1):
        _sift_down(data, n, i)
    for end in range(n - 1, 0, -1):
        data[0], data[end] = data[end], data[0]
        _sift_down(data, end, 0)
    return data


def _merge(left: list[Any], right: list[Any]) -> list[Any]:
    """Merge two sorted lists, taking from the left on ties."""
    merged: list[Any] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] <= right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def merge_sort(items: Iterable[Any]) -> list[Any]:
    """Return a new list sorted with stable top-down merge sort."""
    data = list(items)
    if len(data) <= 1:
        return data
    mid = (len(data) + 1) // 2
    return _merge(merge_sort(data[:mid]), merge_sort(data[mid:]))


def _partition(data: list[Any], start: int, end: int) -> int:
    """Place the first element of ``data[start:end+1]`` at its final index."""
    pivot = data[start]
    smaller = sum(1 for value in data[start + 1:end + 1] if value <= pivot)
    pivot_index = start + smaller
    data[pivot_index], data[start] = data[start], data[pivot_index]

    i, j = start, end
    while i < pivot_index and j > pivot_index:
        while data[i] <= pivot:
            i += 1
        while data[j] > pivot:
            j -= 1
        if i < pivot_index and j > pivot_index:
            data[i], data[j] = data[j], data[i]
            i += 1
            j -= 1
    return pivot_index


def quick_sort(items: Iterable[Any]) -> list[Any]:
    """Return a new list sorted with quicksort, pivoting on the first element."""
    data = list(items)
    pending = [(0, len(data) - 1)]
    while pending:
        start, end = pending.pop()
        if start >= end:
            continue
        p = _partition(data, start, end)
        pending.append((start, p - 1))
        pending.append((p + 1, end))
    return data


def radix_sort(items: Iterable[int]) -> list[int]:
    """Return the non-negative integers sorted by least-significant-digit radix sort."""
    data = list(items)
    if not data:
        return []
    if min(data) < 0:
        raise ValueError("radix sort needs non-negative integers")
    largest = max(data)
    exp = 1
    while largest // exp > 0:
        buckets: list[list[int]] = [[] for _ in range(10)]
        for value in data:
            buckets[(value // exp) % 10].append(value)
        data = [value for bucket in buckets for value in bucket]
        exp *= 10
    return data


def _insertion_sort_range(data: list[Any], left: int, right: int) -> None:
    for i in range(left + 1, right + 1):
        temp = data[i]
        j = i - 1
        while j >= left and data[j] > temp:
            data[j + 1] = data[j]
            j -= 1
        data[j + 1] = temp


def tim_sort(items: Iterable[Any], run: int = DEFAULT_RUN) -> list[Any]:
    """Return a new list sorted by insertion-sorting runs and merging them."""
    if run <= 0:
        raise ValueError("run must be positive")
    data = list(items)
    n = len(data)
    for start in range(0, n, run):
        _insertion_sort_range(data, start, min(start + run - 1, n - 1))

    size = run
    while size < n:
        for left in range(0, n, 2 * size):
            mid = left + size - 1
            right = min(left + 2 * size - 1, n - 1)
            if mid < right:
                data[left:right + 1] = _merge(data[left:mid + 1], data[mid + 1:right + 1])
        size *= 2
    return data


def bucket_sort(items: Iterable[float]) -> list[float]:
    """Return numbers in the range [0, 1) sorted by bucket sort.

    There are as many buckets as items; each bucket is sorted on its own.
    """
    data = list(items)
    n = len(data)
    buckets: list[list[float]] = [[] for _ in range(n)]
    for value in data:
        if not 0 <= value < 1:
            raise ValueError(f"bucket sort needs values in [0, 1), got {value!r}")
        buckets[int(n * value)].append(value)
    return [value for bucket in buckets for value in sorted(bucket)]