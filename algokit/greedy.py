"""Greedy algorithms for scheduling, pairing and balancing problems."""

from __future__ import annotations

from dataclasses import dataclass
from itertools import pairwise
from typing import Any, Iterable, Sequence

UNBALANCEABLE = -1


@dataclass(frozen=True)
class Job:
    """A job that earns ``profit`` if finished by its ``deadline`` slot."""

    id: int
    deadline: int
    profit: int


def _widest_gap(coords: list[int], limit: int) -> int:
    gaps = [coords[0] - 1]
    gaps.extend(b - a - 1 for a, b in pairwise(coords))
    gaps.append(limit - coords[-1])
    return max(gaps)


def largest_undefended_area(
    width: int, height: int, towers: Iterable[tuple[int, int]]
) -> int:
    """Area of the largest rectangle no tower's row or column reaches.

    Each tower at ``(x, y)`` guards all of column ``x`` and row ``y``
    on a ``width`` x ``height`` board.
    """
    placed = list(towers)
    if not placed:
        return width * height
    xs = sorted(x for x, _ in placed)
    ys = sorted(y for _, y in placed)
    return _widest_gap(xs, width) * _widest_gap(ys, height)


def max_activities(intervals: Iterable[tuple[int, int]]) -> int:
    """Most activities one person can do; the next may start when the last ends."""
    count = 0
    limit = None
    for start, end in sorted(intervals, key=lambda interval: interval[1]):
        if limit is None or start >= limit:
            limit = end
            count += 1
    return count


def load_balance(loads: Iterable[int]) -> int:
    """Rounds needed to even out ``loads`` moving one unit between neighbours.

    Returns -1 when the total cannot be shared out equally.
    """
    data = list(loads)
    if not data:
        raise ValueError("load_balance needs at least one load")
    total = sum(data)
    if total % len(data):
        return UNBALANCEABLE
    average = total // len(data)
    running = 0
    worst = 0
    for value in data:
        running += value - average
        worst = max(worst, abs(running))
    return worst


def max_meetings(starts: Sequence[int], ends: Sequence[int]) -> int:
    """Most meetings one room can hold; the next must start after the last ends."""
    if len(starts) != len(ends):
        raise ValueError("starts and ends must have the same length")
    meetings = sorted(zip(starts, ends), key=lambda meeting: (meeting[1], meeting[0]))
    count = 0
    limit = None
    for start, end in meetings:
        if limit is None or start > limit:
            limit = end
            count += 1
    return count


def min_badness(preferences: Iterable[tuple[Any, int]]) -> int:
    """Smallest total distance between each team's preferred and given rank.

    ``preferences`` holds ``(team, preferred_rank)`` pairs; ranks given
    out run from 1 to the number of teams.
    """
    ranks = sorted(rank for _, rank in preferences)
    return sum(abs(rank - place) for place, rank in enumerate(ranks, start=1))


def count_chopstick_pairs(lengths: Iterable[int], max_diff: int) -> int:
    """Most disjoint pairs of sticks whose lengths differ by at most ``max_diff``."""
    data = sorted(lengths)
    pairs = 0
    i = 0
    while i < len(data) - 1:
        if data[i + 1] - data[i] <= max_diff:
            pairs += 1
            i += 2
        else:
            i += 1
    return pairs


def job_sequencing(jobs: Iterable[Job]) -> tuple[int, int]:
    """Return ``(jobs_done, total_profit)`` for the most profitable schedule.

    Each job takes one slot and must finish in a slot no later than its
    deadline; jobs are placed greedily by descending profit.
    """
    ordered = sorted(jobs, key=lambda job: job.profit, reverse=True)
    latest = max((job.deadline for job in ordered), default=0)
    taken = [False] * (max(latest, 0) + 1)
    done = 0
    profit = 0
    for job in ordered:
        for slot in range(job.deadline, 0, -1):
            if not taken[slot]:
                taken[slot] = True
                done += 1
                profit += job.profit
                break
    return done, profit


def min_platforms(arrivals: Sequence[int], departures: Sequence[int]) -> int:
    """Fewest platforms so that no train waits.

    A train arriving at the moment another departs needs its own platform.
    """
    if len(arrivals) != len(departures):
        raise ValueError("arrivals and departures must have the same length")
    arr = sorted(arrivals)
    dep = sorted(departures)
    n = len(arr)
    if n == 0:
        return 0
    platforms = best = 1
    i, j = 1, 0
    while i < n and j < n:
        if arr[i] <= dep[j]:
            platforms += 1
            i += 1
        else:
            platforms -= 1
            j += 1
        best = max(best, platforms)
    return best