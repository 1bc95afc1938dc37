"""Simple comparison sorts: bubble, cocktail, insertion, selection, shell and wave."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterable


@dataclass
class SortStats:
    """Counters collected while a sort runs.

    ``snapshots`` holds a copy of the list after each pass that the
    algorithm reports.
    """

    passes: int = 0
    comparisons: int = 0
    swaps: int = 0
    snapshots: list[list[Any]] = field(default_factory=list)


def bubble_sort(items: Iterable[Any]) -> list[Any]:
    """Return a new list sorted with bubble sort."""
    result, _ = bubble_sort_with_stats(items)
    return result


def bubble_sort_with_stats(items: Iterable[Any]) -> tuple[list[Any], SortStats]:
    """Bubble sort that stops early once a pass makes no swap.

    A pass that makes no swap ends the sort. It still counts its
    comparisons, but it is not counted as a pass and leaves no snapshot.
    """
    data = list(items)
    stats = SortStats()
    n = len(data)
    for done in range(n - 1):
        swapped = False
        for j in range(n - 1 - done):
            stats.comparisons += 1
            if data[j] > data[j + 1]:
                data[j], data[j + 1] = data[j + 1], data[j]
                stats.swaps += 1
                swapped = True
        if not swapped:
            break
        stats.snapshots.append(list(data))
        stats.passes += 1
    return data, stats


def cocktail_sort(items: Iterable[Any]) -> list[Any]:
    """Return a new list sorted with bidirectional bubble (cocktail) sort."""
    data = list(items)
    start, end = 0, len(data) - 1
    while True:
        swapped = False
        for i in range(start, end):
            if data[i] > data[i + 1]:
                data[i], data[i + 1] = data[i + 1], data[i]
                swapped = True
        if not swapped:
            break
        swapped = False
        end -= 1
        for i in range(end - 1, start - 1, -1):
            if data[i] > data[i + 1]:
                data[i], data[i + 1] = data[i + 1], data[i]
                swapped = True
        if not swapped:
            break
        start += 1
    return data


def insertion_sort(items: Iterable[Any]) -> list[Any]:
    """Return a new list sorted with insertion sort."""
    result, _ = insertion_sort_with_stats(items)
    return result


def insertion_sort_with_stats(items: Iterable[Any]) -> tuple[list[Any], SortStats]:
    """Insertion sort that counts passes and comparisons.

    Every element shifted right counts as a comparison, and so does the
    final comparison that stops the shifting when the element found is
    strictly smaller than the key. ``swaps`` is not used.
    """
    data = list(items)
    stats = SortStats()
    for i in range(1, len(data)):
        key = data[i]
        j = i - 1
        while j >= 0 and data[j] > key:
            data[j + 1] = data[j]
            j -= 1
            stats.comparisons += 1
        if j >= 0 and data[j] < key:
            stats.comparisons += 1
        data[j + 1] = key
        stats.passes += 1
        stats.snapshots.append(list(data))
    return data, stats


def selection_sort(items: Iterable[Any]) -> list[Any]:
    """Return a new list sorted with selection sort."""
    result, _ = selection_sort_with_stats(items)
    return result


def selection_sort_with_stats(items: Iterable[Any]) -> tuple[list[Any], SortStats]:
    """Selection sort that counts passes, comparisons and swaps.

    A swap is counted only when the minimum is not already in place.
    """
    data = list(items)
    stats = SortStats()
    n = len(data)
    for i in range(n - 1):
        stats.passes += 1
        index_min = i
        for j in range(i + 1, n):
            if data[j] < data[index_min]:
                index_min = j
            stats.comparisons += 1
        if index_min != i:
            data[i], data[index_min] = data[index_min], data[i]
            stats.swaps += 1
        stats.snapshots.append(list(data))
    return data, stats


def shell_sort(items: Iterable[Any]) -> list[Any]:
    """Return a new list sorted with shell sort using halving gaps."""
    data = list(items)
    n = len(data)
    gap = n // 2
    while gap > 0:
        for i in range(gap, n):
            temp = data[i]
            j = i
            while j >= gap and data[j - gap] > temp:
                data[j] = data[j - gap]
                j -= gap
            data[j] = temp
        gap //= 2
    return data


def wave_sort(items: Iterable[Any]) -> list[Any]:
    """Return the items arranged so that a[0] >= a[1] <= a[2] >= a[3] ..."""
    data = sorted(items)
    for i in range(0, len(data) - 1, 2):
        data[i], data[i + 1] = data[i + 1], data[i]
    return data