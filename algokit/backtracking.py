"""Backtracking searches: the n-queens puzzle and a rat in a maze."""

from __future__ import annotations

from typing import Sequence

# Moves tried in this order so that paths come out in lexicographic order.
_MOVES = (("D", 1, 0), ("L", 0, -1), ("R", 0, 1), ("U", -1, 0))


def _render(rows_of_columns: list[int], n: int) -> list[str]:
    board = [["."] * n for _ in range(n)]
    for col, row in enumerate(rows_of_columns):
        board[row][col] = "Q"
    return ["".join(row) for row in board]


def solve_n_queens(n: int) -> list[list[str]]:
    """Every placement of ``n`` non-attacking queens on an ``n`` x ``n`` board.

    Each solution is a list of rows, ``'Q'`` for a queen and ``'.'`` for
    an empty square. Queens are placed column by column, trying rows from
    the top.
    """
    if n < 0:
        raise ValueError("n must not be negative")
    solutions: list[list[str]] = []
    placed: list[int] = []
    used_rows: set[int] = set()
    used_diagonals: set[int] = set()
    used_anti_diagonals: set[int] = set()

    def place(col: int) -> None:
        if col == n:
            solutions.append(_render(placed, n))
            return
        for row in range(n):
            if (
                row in used_rows
                or row - col in used_diagonals
                or row + col in used_anti_diagonals
            ):
                continue
            placed.append(row)
            used_rows.add(row)
            used_diagonals.add(row - col)
            used_anti_diagonals.add(row + col)
            place(col + 1)
            placed.pop()
            used_rows.discard(row)
            used_diagonals.discard(row - col)
            used_anti_diagonals.discard(row + col)

    place(0)
    return solutions


def rat_in_maze(grid: Sequence[Sequence[int]]) -> list[str]:
    """Every path from the top-left to the bottom-right corner of a square maze.

    Cells holding 1 are open. Paths are strings of ``D``, ``L``, ``R`` and
    ``U`` moves, visit no cell twice, and are returned in sorted order.
    """
    n = len(grid)
    if any(len(row) != n for row in grid):
        raise ValueError("maze must be square")
    if n == 0 or grid[0][0] != 1:
        return []

    paths: list[str] = []
    visited = [[False] * n for _ in range(n)]
    moves: list[str] = []

    def walk(i: int, j: int) -> None:
        if i == n - 1 and j == n - 1:
            paths.append("".join(moves))
            return
        visited[i][j] = True
        for letter, di, dj in _MOVES:
            ni, nj = i + di, j + dj
            if 0 <= ni < n and 0 <= nj < n and not visited[ni][nj] and grid[ni][nj] == 1:
                moves.append(letter)
                walk(ni, nj)
                moves.pop()
        visited[i][j] = False

    walk(0, 0)
    return paths