"""Probabilities computed by dynamic programming."""

from __future__ import annotations

from collections.abc import Iterable

_FACES = 6


def parity_probability(probabilities: Iterable[float]) -> float:
    """Probability that an even number of the independent events fail.

    The first event is taken as is; each later event keeps the running state
    with its probability and flips it otherwise.
    """
    values = iter(probabilities)
    try:
        state = float(next(values))
    except StopIteration:
        raise ValueError("at least one probability is required") from None
    for p in values:
        state = state * p + (1 - state) * (1 - p)
    return state


def dice_sum_probability(dice: int, total: int) -> float:
    """Probability that ``dice`` fair six-sided dice add up to ``total``."""
    if dice < 0:
        raise ValueError("dice must not be negative")
    if total < dice or total > _FACES * dice:
        return 0.0
    chance = 1.0 / _FACES
    dist = [1.0] + [0.0] * total
    for _ in range(dice):
        dist = [0.0] + [
            chance * sum(dist[max(0, j - _FACES):j]) for j in range(1, total + 1)
        ]
    return dist[total]