"""Dynamic programming over square boards."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Sequence

_MOVES = ((1, 0), (-1, 0), (0, 1), (0, -1))


def max_staircase_sum(matrix: Iterable[Sequence[int]]) -> int:
    """Best total when the columns are cut into runs, each scoring a row maximum.

    A run that raises the running level by ``d`` scores the largest entry of
    row ``d - 1`` over its columns; the level must end at the size of the
    board. Columns may be left out, and the total is never below 0.
    """
    grid = [list(row) for row in matrix]
    n = len(grid)
    if n == 0 or any(len(row) != n for row in grid):
        raise ValueError("the matrix must be square and not empty")
    best = [[0] * (n + 1) for _ in range(n + 1)]
    for i in range(1, n + 1):
        for j in range(1, n + 1):
            result = 0
            for level in range(j):
                row = grid[j - level - 1]
                peak = 0
                for col in range(i - 1, -1, -1):
                    peak = max(peak, row[col])
                    result = max(result, best[col][level] + peak)
            best[i][j] = result
    return best[n][n]


def count_walks_of_length(rows: Iterable[str], steps: int) -> int:
    """Count walks of exactly ``steps`` moves from the top left to the bottom right.

    Moves go to a side neighbour marked ``0``; the starting cell is not checked.
    """
    grid = [str(row) for row in rows]
    if not grid or not grid[0] or any(len(row) != len(grid[0]) for row in grid):
        raise ValueError("the grid must be rectangular and not empty")
    if steps < 0:
        raise ValueError("steps must not be negative")
    height, width = len(grid), len(grid[0])
    walks: Counter[tuple[int, int]] = Counter({(0, 0): 1})
    for _ in range(steps):
        following: Counter[tuple[int, int]] = Counter()
        for (i, j), ways in walks.items():
            for di, dj in _MOVES:
                ni, nj = i + di, j + dj
                if 0 <= ni < height and 0 <= nj < width and grid[ni][nj] == "0":
                    following[(ni, nj)] += ways
        walks = following
    return walks[(height - 1, width - 1)]