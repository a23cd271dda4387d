import math

import pytest

from dpkit.boards import count_walks_of_length, max_staircase_sum


def test_staircase_single_cell():
    assert max_staircase_sum([[5]]) == 5
    assert max_staircase_sum([[-3]]) == 0


def test_staircase_zero_board():
    assert max_staircase_sum([[0] * 3 for _ in range(3)]) == 0


def test_staircase_bounds():
    matrix = [[3, 1, 4], [1, 5, 9], [2, 6, 5]]
    result = max_staircase_sum(matrix)
    assert 0 <= result <= len(matrix) * max(map(max, matrix))
    assert result >= max(matrix[0])


def test_staircase_monotone_in_entries():
    matrix = [[1, -2, 3], [-4, 5, -6], [7, -8, 9]]
    raised = [[v + 1 for v in row] for row in matrix]
    assert max_staircase_sum(raised) >= max_staircase_sum(matrix)


def test_staircase_rejects_non_square():
    with pytest.raises(ValueError):
        max_staircase_sum([[1, 2]])


def test_walks_zero_steps():
    assert count_walks_of_length(["0"], 0) == 1
    assert count_walks_of_length(["00", "00"], 0) == 0


def test_walks_small_open_board():
    assert count_walks_of_length(["00", "00"], 2) == 2


@pytest.mark.parametrize("n", [2, 3, 4])
def test_walks_shortest_paths(n):
    board = ["0" * n] * n
    assert count_walks_of_length(board, 2 * n - 2) == math.comb(2 * n - 2, n - 1)


@pytest.mark.parametrize("steps", [1, 3, 5])
def test_walks_parity(steps):
    assert count_walks_of_length(["000", "000", "000"], steps) == 0


def test_walks_blocked_target():
    assert count_walks_of_length(["00", "01"], 2) == 0


def test_walks_rejects_negative_steps():
    with pytest.raises(ValueError):
        count_walks_of_length(["00", "00"], -1)