"""Shortest paths on a weighted adjacency matrix and topological ordering."""

from __future__ import annotations

import heapq
import math
from typing import Iterator, Sequence


def dijkstra(matrix: Sequence[Sequence[float]], source: int) -> list[float]:
    """Shortest distance from ``source`` to every vertex.

    ``matrix[u][v]`` is the weight of the edge from ``u`` to ``v``; zero
    means there is no edge. Unreachable vertices get ``math.inf``.
    """
    n = len(matrix)
    if any(len(row) != n for row in matrix):
        raise ValueError("adjacency matrix must be square")
    if not 0 <= source < n:
        raise ValueError(f"source {source} is not a vertex")
    dist: list[float] = [math.inf] * n
    dist[source] = 0
    settled = [False] * n
    heap: list[tuple[float, int]] = [(0, source)]
    while heap:
        d, u = heapq.heappop(heap)
        if settled[u]:
            continue
        settled[u] = True
        for v, weight in enumerate(matrix[u]):
            if weight and not settled[v] and d + weight < dist[v]:
                dist[v] = d + weight
                heapq.heappush(heap, (dist[v], v))
    return dist


class Graph:
    """A directed graph on vertices ``0 .. vertices - 1``."""

    def __init__(self, vertices: int) -> None:
        if vertices < 0:
            raise ValueError("vertex count must not be negative")
        self.vertices = vertices
        self._adjacency: list[list[int]] = [[] for _ in range(vertices)]

    def _check(self, vertex: int) -> None:
        if not 0 <= vertex < self.vertices:
            raise ValueError(f"{vertex} is not a vertex of this graph")

    def add_edge(self, u: int, v: int) -> None:
        """Add a directed edge from ``u`` to ``v``."""
        self._check(u)
        self._check(v)
        self._adjacency[u].append(v)

    def topological_sort(self) -> list[int]:
        """Vertices ordered so that every edge points forward.

        Depth-first search from each unvisited vertex in increasing order,
        following edges in the order they were added.
        """
        visited = [False] * self.vertices
        finished: list[int] = []
        for root in range(self.vertices):
            if visited[root]:
                continue
            visited[root] = True
            stack: list[tuple[int, Iterator[int]]] = [
                (root, iter(self._adjacency[root]))
            ]
            while stack:
                node, children = stack[-1]
                for child in children:
                    if not visited[child]:
                        visited[child] = True
                        stack.append((child, iter(self._adjacency[child])))
                        break
                else:
                    stack.pop()
                    finished.append(node)
        return finished[::-1]