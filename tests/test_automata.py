import pytest

from dpkit.automata import count_prime_chains, evolve_row, robot_steps

EMPTY = ["", "", "", "", "", ""]


@pytest.mark.parametrize("depth", [1, 2, 5])
@pytest.mark.parametrize("direction", list("NSWEUD"))
def test_robot_steps_empty_programs(direction, depth):
    assert robot_steps(EMPTY, direction, depth) == 1


def test_robot_steps_depth_one_is_single_step():
    programs = ["NSW", "EE", "U", "D", "NN", "S"]
    for direction in "NSWEUD":
        assert robot_steps(programs, direction, 1) == 1


def test_robot_steps_nondecreasing_in_depth():
    programs = ["NS", "W", "E", "", "NU", "D"]
    results = [robot_steps(programs, "N", depth) for depth in range(1, 8)]
    assert results == sorted(results)


def test_robot_steps_ignores_carriage_return():
    plain = ["NS", "W", "E", "", "NU", "D"]
    with_cr = [line + "\r" for line in plain]
    assert robot_steps(with_cr, "U", 6) == robot_steps(plain, "U", 6)


def test_robot_steps_unknown_letter_counts_as_north():
    assert robot_steps(["X", "", "", "", "", ""], "N", 4) == robot_steps(
        ["N", "", "", "", "", ""], "N", 4
    )


def test_robot_steps_requires_six_lines():
    with pytest.raises(ValueError):
        robot_steps(["", ""], "N", 3)


def test_count_prime_chains_three_digits():
    assert count_prime_chains(3) == 143


@pytest.mark.parametrize("length", [4, 5, 10])
def test_count_prime_chains_bounded(length):
    result = count_prime_chains(length)
    assert 0 <= result <= count_prime_chains(length - 1) * 10


def test_count_prime_chains_error():
    with pytest.raises(ValueError):
        count_prime_chains(2)


def test_evolve_row_single_generation_is_zero():
    assert evolve_row([5, 6, 7], 1, 100) == [0, 0, 0]


def test_evolve_row_second_generation():
    assert evolve_row([1, 1, 1], 2, 100) == [2, 3, 2]


@pytest.mark.parametrize("generations", [2, 3, 4, 9])
def test_evolve_row_modulus_consistency(generations):
    values = [3, 14, 15, 92, 65, 35]
    wide = evolve_row(values, generations, 7 * 11)
    narrow = evolve_row(values, generations, 7)
    assert [v % 7 for v in wide] == narrow


@pytest.mark.parametrize("generations", [2, 3, 5, 8])
def test_evolve_row_mirror_symmetry(generations):
    values = [4, 8, 15, 16, 23]
    forward = evolve_row(values, generations, 1009)
    backward = evolve_row(list(reversed(values)), generations, 1009)
    assert backward == list(reversed(forward))


def test_evolve_row_zero_input_stays_zero():
    assert evolve_row([0, 0, 0, 0], 6, 13) == [0, 0, 0, 0]


def test_evolve_row_values_below_modulus():
    result = evolve_row([100, 200, 300, 400], 7, 37)
    assert all(0 <= v < 37 for v in result)


def test_evolve_row_errors():
    with pytest.raises(ValueError):
        evolve_row([1, 2], 3, 0)
    with pytest.raises(ValueError):
        evolve_row([1, 2], 0, 5)