"""Dynamic programming over one-dimensional sequences."""

from __future__ import annotations

import bisect
import math
from collections.abc import Iterable

_FAR = 1_000_000_000
_JUMP_CAP = 1_000_000
_HUGE = 2 * 10**18


def frog_jump_cost(heights: Iterable[int]) -> int:
    """Cheapest way from the first to the last stone.

    A step to the next stone costs the height difference. A jump over one
    stone costs three times the height difference.
    """
    h = list(heights)
    if not h:
        raise ValueError("at least one height is required")
    before, last = 0, 0  # costs to reach stones i-2 and i-1
    for i in range(1, len(h)):
        step = last + abs(h[i] - h[i - 1])
        leap = before + 3 * abs(h[i] - h[i - 2]) if i > 1 else _JUMP_CAP
        before, last = last, min(step, leap)
    return last


def longest_increasing_subsequence(values: Iterable[int]) -> int:
    """Length of the longest strictly increasing subsequence."""
    tails: list[int] = []
    seen = False
    for value in values:
        seen = True
        pos = bisect.bisect_left(tails, value)
        if pos == len(tails):
            tails.append(value)
        else:
            tails[pos] = value
    if not seen:
        raise ValueError("at least one value is required")
    return len(tails)


def _cheapest_cover(weights: list[int]) -> int:
    """Cheapest choice of links so that every point touches one of them.

    ``weights[i - 1]`` is the price of the link between points ``i - 1`` and ``i``.
    """
    not_taken, taken = 0, _FAR
    for i, weight in enumerate(weights, start=1):
        new_taken = not_taken + weight
        if i == 1:
            new_not_taken = _FAR
        else:
            new_not_taken = taken
            new_taken = min(new_taken, taken + weight)
        not_taken, taken = new_not_taken, new_taken
    return taken


def min_link_length(positions: Iterable[int]) -> int:
    """Least total length of links so that every point is linked to a neighbour."""
    points = sorted(positions)
    if len(points) < 2:
        raise ValueError("at least two positions are required")
    return _cheapest_cover([b - a for a, b in zip(points, points[1:])])


def min_link_value_by_age(items: Iterable[tuple[int, int]]) -> int:
    """Like :func:`min_link_length`, with links priced by the value of their later item.

    Items are ``(age, value)`` pairs ordered by age, ties keeping input order.
    """
    ordered = sorted((tuple(item) for item in items), key=lambda item: item[0])
    if len(ordered) < 2:
        raise ValueError("at least two items are required")
    return _cheapest_cover([value for _, value in ordered[1:]])


def min_link_max_gap(positions: Iterable[int]) -> int:
    """Smallest possible longest chain of links when every point must be linked."""
    points = sorted(positions)
    if len(points) < 2:
        raise ValueError("at least two positions are required")
    best_not_taken = 0
    best = (_HUGE, _HUGE)  # (longest chain so far, current chain length)
    for i, (a, b) in enumerate(zip(points, points[1:]), start=1):
        gap = b - a
        new_not_taken = best[0]
        new_best = (max(best_not_taken, gap), gap)
        if i > 1:
            extended = best[1] + gap
            candidate = max(best[0], extended)
            if candidate < new_best[0]:
                new_best = (candidate, extended)
        best_not_taken, best = new_not_taken, new_best
    return best[0]


def min_queue_time(times: Iterable[tuple[int, int, int]]) -> int:
    """Least time to serve a queue.

    Each entry ``(a, b, c)`` gives the time to serve that person alone, together
    with the next one, or together with the next two.
    """
    entries = [tuple(entry) for entry in times]
    n = len(entries)
    if n == 0:
        return 0
    best = [0] * (n + 1)
    best[1] = entries[0][0]
    if n > 1:
        best[2] = min(entries[0][0] + entries[1][0], entries[0][1])
    for i in range(3, n + 1):
        best[i] = min(
            best[i - 1] + entries[i - 1][0],
            best[i - 2] + entries[i - 2][1],
            best[i - 3] + entries[i - 3][2],
        )
    return best[n]


def max_path_with_route(values: Iterable[int]) -> tuple[int, list[int]]:
    """Best total collected moving by one or two cells to the last cell.

    Returns the total and the visited cells, numbered from 1.
    """
    a = list(values)
    if not a:
        raise ValueError("at least one value is required")
    n = len(a)
    if n == 1:
        return a[0], [1]
    best = [0] * n
    parent = [-1] * n
    best[0] = a[0]
    best[1] = a[1] + max(a[0], 0)
    parent[1] = 0 if a[0] > 0 else -1
    for i in range(2, n):
        if best[i - 1] > best[i - 2]:
            best[i], parent[i] = best[i - 1], i - 1
        else:
            best[i], parent[i] = best[i - 2], i - 2
        best[i] += a[i]
    route: list[int] = []
    cell = n - 1
    while cell != -1:
        route.append(cell + 1)
        cell = parent[cell]
    route.reverse()
    return best[n - 1], route


def min_recolorings(text: str, reach: int) -> int:
    """Fewest recolourings to get from the first to the last cell.

    From a cell one may move to a later cell at most ``reach`` away, landing on
    the last earlier cell of some colour; arriving on a cell of another colour
    costs one recolouring. Colours are the letters ``A`` to ``Z``.
    """
    if not text:
        raise ValueError("text must not be empty")
    codes = [ord(ch) - ord("A") for ch in text]
    if any(not 0 <= code < 26 for code in codes):
        raise ValueError("text must consist of the letters A to Z")
    last_seen = {codes[0]: 0}
    cost = [math.inf] * len(codes)
    cost[0] = 0
    for i, code in enumerate(codes[1:], start=1):
        for letter, pos in last_seen.items():
            if i - pos <= reach:
                cost[i] = min(cost[i], cost[pos] + (code != letter))
        last_seen[code] = i
    if math.isinf(cost[-1]):
        raise ValueError("the last cell cannot be reached")
    return int(cost[-1])