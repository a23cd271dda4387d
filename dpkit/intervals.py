"""Dynamic programming over intervals of a sequence."""

from __future__ import annotations

import math
from collections.abc import Iterable

_DAY_START = 3600
_DAY_END = 13 * 3600


def _to_seconds(stamp: str) -> int:
    parts = stamp.split(":")
    if len(parts) != 3 or not all(part.isdigit() for part in parts):
        raise ValueError(f"malformed time: {stamp!r}")
    hours, minutes, seconds = map(int, parts)
    return hours * 3600 + minutes * 60 + seconds


def _format(seconds: int) -> str:
    hours, rest = divmod(seconds, 3600)
    minutes, secs = divmod(rest, 60)
    return f"{hours}:{minutes:02d}:{secs:02d}"


def best_meeting_time(times: Iterable[str]) -> str:
    """Pick the given ``H:MM:SS`` time that keeps total waiting smallest.

    Earlier times wait until the chosen one; later times are weighed against
    the end of the day. The earliest best time wins ties.
    """
    moments = sorted(_to_seconds(stamp) for stamp in times)
    if not moments:
        raise ValueError("at least one time is required")
    n = len(moments)
    suffix = [0] * n
    for i in range(n - 2, -1, -1):
        suffix[i] = suffix[i + 1] + _DAY_END - moments[i + 1]
    prefix = [0] * n
    for i in range(1, n):
        prefix[i] = prefix[i - 1] + (moments[i] - moments[i - 1]) * i
    waiting = [0] * n
    waiting[n - 1] = prefix[n - 1]
    for i in range(n - 2, -1, -1):
        if moments[i] == moments[i + 1]:
            waiting[i] = waiting[i + 1]
        else:
            waiting[i] = prefix[i] + suffix[i] + (n - i - 1) * (moments[i] - _DAY_START)
    best = min(range(n), key=waiting.__getitem__)
    return _format(moments[best])


def min_merge_cost(pairs: Iterable[tuple[int, int]]) -> int:
    """Least cost of merging a row of ``(m, k)`` items from either end.

    Closing the range ``i..j`` costs ``m`` of its first item times ``k`` of its last.
    """
    items = [tuple(pair) for pair in pairs]
    n = len(items)
    if n == 0:
        raise ValueError("at least one pair is required")
    cost = [[math.inf] * n for _ in range(n)]
    for i in range(n):
        cost[i][i] = 0
    for length in range(2, n + 1):
        for i in range(n - length + 1):
            j = i + length - 1
            price = items[i][0] * items[j][1]
            cost[i][j] = min(cost[i][j], cost[i][j - 1] + price, cost[i + 1][j] + price)
    return int(cost[0][n - 1])


def min_removal_cost(values: Iterable[int]) -> int:
    """Least cost of removing all inner values.

    Removing a value costs it times the sum of its current neighbours; the two
    end values stay.
    """
    a = list(values)
    n = len(a)
    if n <= 2:
        return 0
    cost = [[math.inf] * (n + 1) for _ in range(n + 1)]
    for i in range(n - 1):
        cost[i][i] = 0
        cost[i][i + 1] = 0
    for size in range(2, n):
        for i in range(n - size):
            j = i + size
            for k in range(i + 1, j):
                cost[i][j] = min(cost[i][j], cost[i][k] + cost[k][j] + a[k] * (a[i] + a[j]))
    return int(cost[0][n - 1])