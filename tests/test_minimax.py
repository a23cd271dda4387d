import pytest

from dpkit.minimax import alternating_pick_value


def test_single_value():
    assert alternating_pick_value([7]) == 7


@pytest.mark.parametrize("pair", [(1, 9), (9, 1), (4, 4)])
def test_two_values_take_the_larger(pair):
    assert alternating_pick_value(pair) == max(pair)


def test_three_values():
    assert alternating_pick_value([1, 2, 3]) == 2


@pytest.mark.parametrize(
    "values", [[5, 1, 8, 2], [3, 3, 9, 0, 4], [10, -2, 7, 6, 1, 8]]
)
def test_result_is_one_of_the_values(values):
    result = alternating_pick_value(values)
    assert result in values
    assert min(values) <= result <= max(values)


def test_constant_row():
    assert alternating_pick_value([6] * 5) == 6


def test_rejects_empty():
    with pytest.raises(ValueError):
        alternating_pick_value([])