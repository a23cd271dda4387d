"""Two players alternately removing values from the ends of a row."""

from __future__ import annotations

from collections.abc import Iterable


def alternating_pick_value(values: Iterable[int]) -> int:
    """Value of the last item left when two players take turns removing an end.

    The first player wants the remaining item large and the second wants it
    small; the player making the final removal depends on the row's length.
    """
    row = list(values)
    n = len(row)
    if n == 0:
        raise ValueError("at least one value is required")
    best = row[:]  # best[lo]: value of the interval starting at lo
    for extra in range(1, n):
        pick = max if (extra + n) % 2 else min
        best = [pick(best[lo], best[lo + 1]) for lo in range(n - extra)]
    return best[0]