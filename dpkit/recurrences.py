"""Counting problems solved by linear recurrences."""

from __future__ import annotations

_TOWER_MODULUS = 1_000_000
_TOWER_HEIGHT = 10
_MAX_POWER = 10


def _require_non_negative(name: str, value: int) -> None:
    if value < 0:
        raise ValueError(f"{name} must not be negative")


def count_no_double_zero(length: int, base: int) -> int:
    """Count ``length``-digit numbers in ``base`` without a leading zero or two adjacent zeros."""
    if length < 1:
        raise ValueError("length must be at least 1")
    ending_zero, ending_other = 0, base - 1
    for _ in range(length - 1):
        ending_zero, ending_other = ending_other, (ending_zero + ending_other) * (base - 1)
    return ending_zero + ending_other


def count_block_sequences(block: int, length: int) -> int:
    """Count rows of ``length`` cells filled with single cells and blocks of ``block`` cells."""
    if block < 1:
        raise ValueError("block must be at least 1")
    _require_non_negative("length", length)
    ways = [1]
    for i in range(1, length + 1):
        ways.append(ways[i - 1] + (ways[i - block] if i >= block else 0))
    return ways[length]


def count_domino_tilings_3xn(n: int) -> int:
    """Count tilings of a 3 by ``n`` board with 1 by 2 dominoes."""
    _require_non_negative("n", n)
    if n % 2:
        return 0
    notched = [0, 2]  # tilings with one corner cell sticking out
    complete = [1, 0]
    for i in range(2, n + 1):
        notched.append(2 * complete[i - 1] + notched[i - 2])
        complete.append(complete[i - 2] + notched[i - 1])
    return complete[n]


def count_binary_partitions(n: int) -> int:
    """Count ways to write ``n`` as a sum of powers of two up to ``2**10``, order ignored."""
    _require_non_negative("n", n)
    ways = [1] + [0] * n
    for power in (1 << k for k in range(_MAX_POWER + 1)):
        for total in range(power, n + 1):
            ways[total] += ways[total - power]
    return ways[n]


def count_step_ways(n: int) -> int:
    """Count ways to climb ``n`` steps taking one, two or three at a time."""
    _require_non_negative("n", n)
    here, next1, next2 = 1, 0, 0
    for _ in range(n):
        here, next1, next2 = here + next1 + next2, here, next1
    return here


def max_pieces(n: int) -> int:
    """Largest number of pieces a plane is cut into by ``n`` straight lines."""
    _require_non_negative("n", n)
    return n * (n + 1) // 2 + 1


def count_flag_colorings(n: int) -> int:
    """Count stripes of ``n`` rows in three colours with no two neighbours alike."""
    _require_non_negative("n", n)
    white = blue = other = 1
    for _ in range(1, n):
        white, blue, other = blue + other, white + other, blue + white
    return white + blue + other


def count_59_strings(n: int) -> int:
    """Count strings of ``n`` digits 5 and 9 with no three equal digits in a row and no isolated 9 pattern."""
    if n < 1:
        raise ValueError("n must be at least 1")
    if n == 1:
        return 2
    if n == 2:
        return 4
    # counts[a][b]: a is the second to last digit, b the last (0 for 5, 1 for 9)
    counts = [[1, 1], [1, 1]]
    for _ in range(3, n + 1):
        counts = [
            [counts[1][0], counts[0][0] + counts[1][0]],
            [counts[1][1] + counts[0][1], counts[0][1]],
        ]
    return sum(map(sum, counts))


def count_domino_towers(n: int) -> int:
    """Count towers of height ``n`` built from dominoes, modulo one million."""
    _require_non_negative("n", n)
    if n < _TOWER_HEIGHT:
        return 0
    if n == _TOWER_HEIGHT:
        return 2
    # states 0-2: upside down, 3-5: upright; the index within a triple is the offset
    towers = [[0] * 6 for _ in range(n + 1)]
    towers[_TOWER_HEIGHT][0] = 1
    towers[_TOWER_HEIGHT][3] = 1
    for i in range(_TOWER_HEIGHT + 1, n + 1):
        base = towers[i - _TOWER_HEIGHT]
        prev = towers[i - 1]
        row = towers[i]
        row[0] = sum(base[3:6]) % _TOWER_MODULUS
        row[3] = sum(base[0:3]) % _TOWER_MODULUS
        row[1] = prev[0] % _TOWER_MODULUS
        row[2] = prev[1] % _TOWER_MODULUS
        row[4] = prev[3] % _TOWER_MODULUS
        row[5] = prev[4] % _TOWER_MODULUS
    return sum(towers[n]) % _TOWER_MODULUS