"""Counting evolutions of small state machines and rows of cells."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Sequence

_DIRECTIONS = "NSWEUD"
_IGNORED = "\r\n"
_PRIME_MODULUS = 1_000_000_009


def _direction_index(letter: str) -> int:
    # Letters other than S, W, E, U and D count as N.
    index = _DIRECTIONS.find(letter)
    return index if index > 0 else 0


def robot_steps(program_lines: Sequence[str], direction: str, depth: int) -> int:
    """Count moves made by a robot told to move in ``direction`` at recursion ``depth``.

    ``program_lines`` holds six programs, for N, S, W, E, U and D in that order.
    A move at depth 1 is a single step; at a greater depth it is one step plus
    every move of its program at one depth less.
    """
    lines = list(program_lines)
    if len(lines) != len(_DIRECTIONS):
        raise ValueError("exactly six program lines are required")
    calls = [
        Counter(_direction_index(ch) for ch in line if ch not in _IGNORED)
        for line in lines
    ]
    steps = [1] * len(_DIRECTIONS)
    for _ in range(2, depth + 1):
        steps = [
            1 + sum(count * steps[target] for target, count in program.items())
            for program in calls
        ]
    return steps[_direction_index(direction)]


def _three_digit_primes() -> list[int]:
    limit = 1000
    sieve = [True] * limit
    sieve[0] = sieve[1] = False
    for p in range(2, int(limit**0.5) + 1):
        if sieve[p]:
            sieve[p * p :: p] = [False] * len(range(p * p, limit, p))
    return [p for p in range(100, limit) if sieve[p]]


def count_prime_chains(length: int) -> int:
    """Count digit strings of ``length`` whose every three consecutive digits form a prime.

    The result is taken modulo 1000000009.
    """
    if length < 3:
        raise ValueError("length must be at least 3")
    primes = _three_digit_primes()
    follow: dict[tuple[int, int], list[int]] = {}
    for p in primes:
        follow.setdefault((p // 100, p // 10 % 10), []).append(p % 10)
    counts: Counter[tuple[int, int]] = Counter((p // 10 % 10, p % 10) for p in primes)
    for _ in range(length - 3):
        following: Counter[tuple[int, int]] = Counter()
        for (first, second), amount in counts.items():
            for third in follow.get((first, second), ()):
                key = (second, third)
                following[key] = (following[key] + amount) % _PRIME_MODULUS
        counts = following
    return sum(counts.values()) % _PRIME_MODULUS


def evolve_row(values: Iterable[int], generations: int, modulus: int) -> list[int]:
    """Row of cells after ``generations`` generations, modulo ``modulus``.

    The second generation adds each cell's neighbours to it. Later ones add
    twice the neighbours and subtract the cell two generations back (once for
    the third generation, twice afterwards); edge cells subtract nothing. For a
    single generation the result is a row of zeros.
    """
    if modulus < 1:
        raise ValueError("modulus must be positive")
    if generations < 1:
        raise ValueError("generations must be at least 1")
    first = [value % modulus for value in values]
    width = len(first)
    if generations == 1:
        return [0] * width

    def around(row: list[int], j: int) -> int:
        return (row[j - 1] if j > 0 else 0) + (row[j + 1] if j < width - 1 else 0)

    older = first
    latest = [(around(first, j) + first[j]) % modulus for j in range(width)]
    for generation in range(3, generations + 1):
        weight = 1 if generation == 3 else 2
        latest, older = [
            (
                2 * around(latest, j)
                + latest[j]
                - (weight * older[j] if 0 < j < width - 1 else 0)
            )
            % modulus
            for j in range(width)
        ], latest
    return latest