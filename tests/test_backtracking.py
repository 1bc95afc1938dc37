import pytest

from algokit.backtracking import rat_in_maze, solve_n_queens

SOURCE_MAZE = [[1, 0, 0, 0], [1, 1, 0, 1], [1, 1, 0, 0], [0, 1, 1, 1]]
STEPS = {"D": (1, 0), "U": (-1, 0), "L": (0, -1), "R": (0, 1)}


def _queens(board):
    return [(r, c) for r, row in enumerate(board) for c, cell in enumerate(row) if cell == "Q"]


def _assert_valid_board(board, n):
    assert len(board) == n
    assert all(len(row) == n and set(row) <= {"Q", "."} for row in board)
    queens = _queens(board)
    assert len(queens) == n
    assert len({r for r, _ in queens}) == n
    assert len({c for _, c in queens}) == n
    assert len({r - c for r, c in queens}) == n
    assert len({r + c for r, c in queens}) == n


def _assert_valid_path(grid, path):
    n = len(grid)
    i = j = 0
    seen = {(0, 0)}
    for move in path:
        di, dj = STEPS[move]
        i, j = i + di, j + dj
        assert 0 <= i < n and 0 <= j < n
        assert grid[i][j] == 1
        assert (i, j) not in seen
        seen.add((i, j))
    assert (i, j) == (n - 1, n - 1)


def test_four_queens_source_example():
    assert solve_n_queens(4) == [
        ["..Q.", "Q...", "...Q", ".Q.."],
        [".Q..", "...Q", "Q...", "..Q."],
    ]


@pytest.mark.parametrize("n", [5, 6, 7])
def test_queen_boards_are_valid_and_distinct(n):
    solutions = solve_n_queens(n)
    assert solutions
    for board in solutions:
        _assert_valid_board(board, n)
    assert len({tuple(board) for board in solutions}) == len(solutions)


def test_one_queen():
    assert solve_n_queens(1) == [["Q"]]


@pytest.mark.parametrize("n", [2, 3])
def test_small_boards_have_no_solution(n):
    assert not solve_n_queens(n)


def test_negative_queens_rejected():
    with pytest.raises(ValueError):
        solve_n_queens(-1)


def test_rat_in_maze_source_example():
    assert rat_in_maze(SOURCE_MAZE) == ["DDRDRR", "DRDDRR"]


@pytest.mark.parametrize(
    "grid",
    [SOURCE_MAZE, [[1, 1, 1], [1, 1, 1], [1, 1, 1]], [[1, 1, 0], [0, 1, 1], [1, 1, 1]]],
)
def test_rat_paths_are_valid_sorted_and_distinct(grid):
    paths = rat_in_maze(grid)
    assert paths
    for path in paths:
        _assert_valid_path(grid, path)
    assert paths == sorted(paths)
    assert len(set(paths)) == len(paths)


def test_rat_blocked_start():
    assert not rat_in_maze([[0, 1], [1, 1]])


def test_rat_maze_must_be_square():
    with pytest.raises(ValueError):
        rat_in_maze([[1, 1, 1], [1, 1]])