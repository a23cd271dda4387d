import math

import pytest

from dpkit.grids import (
    count_jump_paths,
    largest_square_area,
    max_dice_path,
    max_submatrix_sum,
    min_column_route,
    min_path_picture,
    min_path_sum,
)


@pytest.mark.parametrize("n", [1, 2, 3, 5])
def test_largest_square_all_ones(n):
    assert largest_square_area(["1" * n] * n) == n * n


def test_largest_square_never_below_one():
    assert largest_square_area(["000", "000", "000"]) == 1


def test_largest_square_bounded_by_grid():
    rows = ["1101", "1111", "0111", "1111"]
    area = largest_square_area(rows)
    assert math.isqrt(area) ** 2 == area
    assert area <= 16


def test_largest_square_rejects_empty():
    with pytest.raises(ValueError):
        largest_square_area([])


def test_max_submatrix_all_positive_is_total():
    matrix = [[1, 2, 3], [4, 5, 6]]
    assert max_submatrix_sum(matrix) == sum(map(sum, matrix))


def test_max_submatrix_all_negative_is_largest_entry():
    matrix = [[-5, -2], [-7, -9]]
    assert max_submatrix_sum(matrix) == max(map(max, matrix))


def test_max_submatrix_at_least_any_entry():
    matrix = [[3, -10, 4], [-1, 8, -2], [6, -3, 1]]
    assert max_submatrix_sum(matrix) >= max(map(max, matrix))


def test_max_submatrix_rejects_ragged():
    with pytest.raises(ValueError):
        max_submatrix_sum([[1, 2], [3]])


def test_min_path_sum_single_row_and_column():
    assert min_path_sum([[1, 2, 3, 4]]) == 10
    assert min_path_sum([[1], [2], [3]]) == 6


def test_min_path_sum_uniform():
    n, m, v = 3, 4, 7
    assert min_path_sum([[v] * m for _ in range(n)]) == v * (n + m - 1)


def test_min_path_sum_matches_picture_path():
    rows = ["131", "151", "421"]
    picture = min_path_picture(rows)
    drawn = sum(
        int(d) for row, line in zip(rows, picture) for d, mark in zip(row, line) if mark == "#"
    )
    assert drawn == min_path_sum([[int(d) for d in row] for row in rows])


@pytest.mark.parametrize("n,m", [(1, 1), (2, 3), (4, 4)])
def test_count_jump_paths_all_ones(n, m):
    assert count_jump_paths([[1] * m for _ in range(n)]) == math.comb(n + m - 2, n - 1)


def test_count_jump_paths_blocked_start():
    assert count_jump_paths([[0, 1], [1, 1]]) == 0


def test_picture_path_shape():
    rows = ["9123", "4567", "8912", "3456"]
    picture = min_path_picture(rows)
    assert sum(line.count("#") for line in picture) == len(rows) * 2 - 1
    assert picture[0][0] == "#"
    assert picture[-1][-1] == "#"


def test_picture_ties_come_from_left():
    picture = min_path_picture(["000", "000", "000"])
    assert all(line[0] == "#" for line in picture)
    assert picture[-1] == "###"


def test_picture_rejects_non_digits():
    with pytest.raises(ValueError):
        min_path_picture(["1a", "11"])


def test_column_route_is_consistent():
    matrix = [[3, 1, 4, 1], [5, 9, 2, 6], [5, 3, 5, 8]]
    total, route = min_column_route(matrix)
    assert len(route) == 4
    assert all(abs(a - b) <= 1 for a, b in zip(route, route[1:]))
    assert total == sum(matrix[r - 1][c] for c, r in enumerate(route))


def test_column_route_single_column():
    total, route = min_column_route([[4], [2], [2]])
    assert (total, route) == (2, [2])


def test_column_route_ties_go_up():
    total, route = min_column_route([[1, 1, 1]] * 3)
    assert route == [1, 1, 1]
    assert total == 3


def test_dice_single_cell():
    assert max_dice_path([[4]]) == 24
    assert max_dice_path([[-4]]) == -4


def test_dice_two_cells():
    assert max_dice_path([[1, 1]]) == 11


def test_dice_zeros():
    assert max_dice_path([[0, 0], [0, 0]]) == 0