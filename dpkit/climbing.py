"""Shortest route up a wall that visits every marked hold."""

from __future__ import annotations

from collections.abc import Iterable


def min_climb_route(points: Iterable[tuple[int, int]]) -> int:
    """Shortest walk from ``(1, 1)`` visiting every ``(x, y)`` point, row by row upwards.

    Moving up one row costs one; moving along a row costs the distance.
    Every row must be swept fully before going up.
    """
    holds = [tuple(point) for point in points]
    if not holds:
        raise ValueError("at least one point is required")
    if any(y < 1 for _, y in holds):
        raise ValueError("rows are numbered from 1")
    top = max(y for _, y in holds)

    spans: dict[int, tuple[int, int]] = {}
    for x, y in holds:
        low, high = spans.get(y, (x, x))
        spans[y] = (min(low, x), max(high, x))

    # end_left / end_right: cost having finished the row at its left / right end
    if 1 in spans:
        left, right = spans[1]
        end_left = right - 1 + right - left
        end_right = right - 1
    else:
        left = right = 1
        end_left = end_right = 0

    for row in range(2, top + 1):
        if row not in spans:
            end_left += 1
            end_right += 1
            continue
        low, high = spans[row]
        width = high - low
        end_left, end_right = (
            min(end_left + 1 + abs(left - high), end_right + 1 + abs(right - high)) + width,
            min(end_left + 1 + abs(left - low), end_right + 1 + abs(right - low)) + width,
        )
        left, right = low, high
    return min(end_left, end_right)