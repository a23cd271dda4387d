"""Dynamic programming over rectangular grids."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

_DIE_FACES = range(1, 7)


def _matrix(matrix: Iterable[Sequence[int]]) -> list[list[int]]:
    rows = [list(row) for row in matrix]
    if not rows or not rows[0]:
        raise ValueError("the matrix must not be empty")
    width = len(rows[0])
    if any(len(row) != width for row in rows):
        raise ValueError("all rows must have the same length")
    return rows


def _text_grid(rows: Iterable[str]) -> list[str]:
    grid = [str(row) for row in rows]
    if not grid or not grid[0]:
        raise ValueError("the grid must not be empty")
    width = len(grid[0])
    if any(len(row) != width for row in grid):
        raise ValueError("all rows must have the same length")
    return grid


def largest_square_area(rows: Iterable[str]) -> int:
    """Area of the largest square made only of ``1`` cells.

    The answer is never below 1, even for a grid without a ``1``.
    """
    grid = _text_grid(rows)
    side = [[0] * len(grid[0]) for _ in grid]
    best = 1
    for i, row in enumerate(grid):
        for j, ch in enumerate(row):
            if ch != "1":
                continue
            if i and j:
                side[i][j] = 1 + min(side[i - 1][j - 1], side[i][j - 1], side[i - 1][j])
            else:
                side[i][j] = 1
            best = max(best, side[i][j] ** 2)
    return best


def max_submatrix_sum(matrix: Iterable[Sequence[int]]) -> int:
    """Largest sum of a non-empty rectangular block of the matrix."""
    grid = _matrix(matrix)
    width = len(grid[0])
    best: int | None = None
    for top in range(len(grid)):
        columns = [0] * width
        for row in grid[top:]:
            columns = [acc + value for acc, value in zip(columns, row)]
            running: int | None = None
            for value in columns:
                running = value if running is None or running < 0 else running + value
                if best is None or running > best:
                    best = running
    assert best is not None
    return best


def min_path_sum(matrix: Iterable[Sequence[int]]) -> int:
    """Smallest sum along a path from the top left to the bottom right moving right or down."""
    grid = _matrix(matrix)
    previous: list[int] = []
    for i, row in enumerate(grid):
        current: list[int] = []
        for j, value in enumerate(row):
            if i == 0 and j == 0:
                current.append(value)
            elif i == 0:
                current.append(current[j - 1] + value)
            elif j == 0:
                current.append(previous[j] + value)
            else:
                current.append(min(previous[j], current[j - 1]) + value)
        previous = current
    return previous[-1]


def count_jump_paths(matrix: Iterable[Sequence[int]]) -> int:
    """Count paths from the top left to the bottom right.

    From a cell holding ``v`` one jumps exactly ``v`` cells down or right;
    a cell holding 0 is a dead end.
    """
    grid = _matrix(matrix)
    height, width = len(grid), len(grid[0])
    ways = [[0] * width for _ in range(height)]
    ways[0][0] = 1
    for i, row in enumerate(grid):
        for j, jump in enumerate(row):
            if jump == 0 or not ways[i][j]:
                continue
            if i + jump < height:
                ways[i + jump][j] += ways[i][j]
            if j + jump < width:
                ways[i][j + jump] += ways[i][j]
    return ways[-1][-1]


def min_path_picture(rows: Iterable[str]) -> list[str]:
    """Draw with ``#`` a cheapest right-or-down path over a grid of digits.

    Other cells are ``.``. When both ways in are equally cheap the path comes
    from the left.
    """
    grid = _text_grid(rows)
    if any(not row.isdigit() for row in grid):
        raise ValueError("the grid must consist of decimal digits")
    height, width = len(grid), len(grid[0])
    far = float("inf")
    cost = [[far] * (width + 1) for _ in range(height + 1)]
    cost[0][1] = 0
    parent: dict[tuple[int, int], tuple[int, int]] = {}
    for i in range(1, height + 1):
        for j in range(1, width + 1):
            digit = int(grid[i - 1][j - 1])
            if cost[i - 1][j] < cost[i][j - 1]:
                parent[(i, j)] = (i - 1, j)
                cost[i][j] = cost[i - 1][j] + digit
            else:
                parent[(i, j)] = (i, j - 1)
                cost[i][j] = cost[i][j - 1] + digit
    picture = [["."] * width for _ in range(height)]
    picture[0][0] = "#"
    cell = (height, width)
    while cell != (1, 1):
        picture[cell[0] - 1][cell[1] - 1] = "#"
        cell = parent[cell]
    return ["".join(line) for line in picture]


def min_column_route(matrix: Iterable[Sequence[int]]) -> tuple[int, list[int]]:
    """Cheapest route through the columns from left to right.

    Each step goes to the next column in the same row or a neighbouring one.
    Returns the total and the row of each column, numbered from 1. Ties go to
    the upper row.
    """
    grid = _matrix(matrix)
    height, width = len(grid), len(grid[0])
    cost = [[0] * width for _ in range(height)]
    parent = [[-1] * width for _ in range(height)]
    for i in range(height):
        cost[i][0] = grid[i][0]
    for j in range(1, width):
        for i in range(height):
            candidates = [r for r in (i - 1, i, i + 1) if 0 <= r < height]
            source = min(candidates, key=lambda r: cost[r][j - 1])
            parent[i][j] = source
            cost[i][j] = cost[source][j - 1] + grid[i][j]
    row = min(range(height), key=lambda r: cost[r][width - 1])
    total = cost[row][width - 1]
    route = [row + 1]
    for j in range(width - 1, 0, -1):
        row = parent[row][j]
        route.append(row + 1)
    route.reverse()
    return total, route


def max_dice_path(matrix: Iterable[Sequence[int]]) -> int:
    """Best score rolling a die from the top left to the bottom right.

    Each move goes right or down and tips the die, so the new top face differs
    from the old one and from its opposite. A cell scores its value times the
    top face.
    """
    grid = _matrix(matrix)
    best: list[list[dict[int, int]]] = []
    for i, row in enumerate(grid):
        line: list[dict[int, int]] = []
        for j, value in enumerate(row):
            if i == 0 and j == 0:
                line.append({face: value * face for face in _DIE_FACES})
                continue
            sources = []
            if i > 0:
                sources.append(best[i - 1][j])
            if j > 0:
                sources.append(line[j - 1])
            line.append(
                {
                    face: max(
                        source[prev]
                        for source in sources
                        for prev in _DIE_FACES
                        if prev not in (face, 7 - face)
                    )
                    + value * face
                    for face in _DIE_FACES
                }
            )
        best.append(line)
    return max(best[-1][-1].values())