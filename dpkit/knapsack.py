"""Knapsack-style problems: coins, coupons and subset sums."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

_FAR = 1_000_000_000
_COUPON_THRESHOLD = 100
_QUERY_LIMIT = 1000


def min_ticket_cost(prices: Iterable[int]) -> tuple[int, int, int]:
    """Cheapest way to pay for a run of days with coupons.

    Every day priced above 100 earns a coupon; a coupon pays for one day.
    Returns the total cost, the coupons left over and the coupons spent.
    Among equally cheap outcomes the one keeping the most coupons wins.
    """
    days = list(prices)
    n = len(days)
    previous = [(_FAR, 0)] * (n + 2)
    previous[0] = (0, 0)
    for price in days:
        current = [(_FAR, 0)] * (n + 2)
        bonus = 1 if price > _COUPON_THRESHOLD else 0
        for coupons in range(n + 1):
            cost, spent = previous[coupons]
            if cost + price < current[coupons + bonus][0]:
                current[coupons + bonus] = (cost + price, spent)
            if coupons > 0 and cost < current[coupons - 1][0]:
                current[coupons - 1] = (cost, spent + 1)
        previous = current
    best, left, used = _FAR, 0, 0
    for coupons, (cost, spent) in enumerate(previous):
        if cost <= best:
            best, left, used = cost, coupons, spent
    return best, left, used


def min_segment_cost(weights: Iterable[Sequence[int]]) -> int:
    """Cheapest way to get from point 0 to point ``n`` by jumps forward.

    Row ``i`` of ``weights`` holds the prices of jumping from point ``i`` to
    points ``i + 1`` through ``n``, so it has ``n - i`` entries.
    """
    rows = [list(row) for row in weights]
    n = len(rows)
    for i, row in enumerate(rows):
        if len(row) != n - i:
            raise ValueError(f"row {i} must hold {n - i} prices")
    cost = [0] * (n + 1)
    for end in range(1, n + 1):
        cost[end] = min(
            _FAR, min(cost[start] + rows[start][end - start - 1] for start in range(end))
        )
    return cost[n]


def _extreme_fill(target: int, coins: list[tuple[int, int]], pick) -> int | None:
    best: list[int | None] = [0] + [None] * target
    for weight_total in range(1, target + 1):
        for value, weight in coins:
            if weight_total >= weight:
                before = best[weight_total - weight]
                if before is not None:
                    here = best[weight_total]
                    candidate = before + value
                    best[weight_total] = candidate if here is None else pick(here, candidate)
    return best[target]


def piggy_bank_range(
    empty: int, full: int, coins: Iterable[tuple[int, int]]
) -> tuple[int, int] | None:
    """Least and greatest money a piggy bank can hold.

    ``empty`` and ``full`` are the bank's weights; ``coins`` are
    ``(value, weight)`` pairs usable any number of times. Returns ``None``
    when no set of coins weighs exactly the difference.
    """
    target = full - empty
    if target < 0:
        raise ValueError("full weight must not be below the empty weight")
    kinds = [tuple(coin) for coin in coins]
    if any(weight <= 0 for _, weight in kinds):
        raise ValueError("coin weights must be positive")
    low = _extreme_fill(target, kinds, min)
    if low is None:
        return None
    high = _extreme_fill(target, kinds, max)
    assert high is not None
    return low, high


def count_subset_sums(values: Iterable[int]) -> int:
    """Number of distinct sums of subsets of ``values``, the empty sum included."""
    reachable = 1
    for value in values:
        if value < 0:
            raise ValueError("values must not be negative")
        reachable |= reachable << value
    return bin(reachable).count("1")


def min_coin_count(coins: Iterable[int], target: int) -> int | None:
    """Fewest coins adding up to ``target``, or ``None`` if it cannot be paid."""
    kinds = list(coins)
    if target < 0:
        raise ValueError("target must not be negative")
    if any(coin < 0 for coin in kinds):
        raise ValueError("coins must not be negative")
    best: list[int | None] = [0] + [None] * target
    for amount in range(1, target + 1):
        for coin in kinds:
            if amount - coin >= 0:
                before = best[amount - coin]
                if before is not None and (best[amount] is None or before + 1 < best[amount]):
                    best[amount] = before + 1
    return best[target]


def min_purchase_cost(needed: int, offers: Iterable[tuple[int, int]]) -> int:
    """Cheapest way to buy at least ``needed`` units.

    Each offer ``(amount, price)`` may be bought any number of times.
    """
    packs = [tuple(offer) for offer in offers]
    if not packs:
        raise ValueError("at least one offer is required")
    if any(amount <= 0 for amount, _ in packs):
        raise ValueError("offer amounts must be positive")
    if needed < 0:
        raise ValueError("needed must not be negative")
    largest = max(amount for amount, _ in packs)
    size = (needed // largest + 2) * largest + 1
    cost: list[int | None] = [0] + [None] * (size - 1)
    for total in range(1, size):
        for amount, price in packs:
            if total - amount >= 0:
                before = cost[total - amount]
                if before is not None and (cost[total] is None or before + price < cost[total]):
                    cost[total] = before + price
    return min(value for value in cost[needed:] if value is not None)


def equal_thirds(values: Iterable[int]) -> list[int] | None:
    """Items, numbered from 1, whose values add up to a third of the total.

    Returns ``None`` when the total is not divisible by three or no such
    selection is found.
    """
    items = list(values)
    if any(value < 0 for value in items):
        raise ValueError("values must not be negative")
    total = sum(items)
    if total % 3:
        return None
    chosen: dict[int, frozenset[int]] = {0: frozenset()}
    for reached in range(total + 1):
        used = chosen.get(reached)
        if used is None:
            continue
        for index, value in enumerate(items):
            following = reached + value
            if index not in used and following <= total and following not in chosen:
                chosen[following] = used | {index}
    selection = chosen.get(total // 3)
    if selection is None:
        return None
    return sorted(index + 1 for index in selection)


def representable(coins: Iterable[int], queries: Iterable[int]) -> list[bool]:
    """Whether each query, from 0 to 1000, is a sum of the coins used any number of times."""
    kinds = list(coins)
    if any(coin < 0 for coin in kinds):
        raise ValueError("coins must not be negative")
    asked = list(queries)
    if any(not 0 <= query <= _QUERY_LIMIT for query in asked):
        raise ValueError(f"queries must lie between 0 and {_QUERY_LIMIT}")
    reachable = [True] + [False] * _QUERY_LIMIT
    for amount in range(1, _QUERY_LIMIT + 1):
        reachable[amount] = any(
            amount - coin >= 0 and reachable[amount - coin] for coin in kinds
        )
    return [reachable[query] for query in asked]