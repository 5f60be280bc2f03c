"""Greedy drills: coins, card merging, bundling, meetings and brackets."""

from __future__ import annotations

import heapq
from collections.abc import Iterable, Sequence

_DIGITS = frozenset("0123456789")


def min_coins(coins: Iterable[int], amount: int) -> int:
    """Fewest coins to pay ``amount``, taking the largest coin that fits first."""
    if amount < 0:
        raise ValueError("amount must not be negative")
    denominations = sorted(coins, reverse=True)
    if any(coin <= 0 for coin in denominations):
        raise ValueError("coins must be positive")
    used = 0
    for coin in denominations:
        if amount == 0:
            break
        taken, amount = divmod(amount, coin)
        used += taken
    if amount:
        raise ValueError("the amount cannot be paid with these coins")
    return used


def min_merge_cost(sizes: Iterable[int]) -> int:
    """Least total comparisons to merge all card bundles two at a time."""
    heap = list(sizes)
    if not heap:
        raise ValueError("at least one bundle is required")
    heapq.heapify(heap)
    cost = 0
    while len(heap) > 1:
        merged = heapq.heappop(heap) + heapq.heappop(heap)
        cost += merged
        heapq.heappush(heap, merged)
    return cost


def _pair_up(ordered: Sequence[int]) -> tuple[int, int | None]:
    products = sum(a * b for a, b in zip(ordered[::2], ordered[1::2]))
    leftover = ordered[-1] if len(ordered) % 2 else None
    return products, leftover


def max_bundled_sum(values: Iterable[int]) -> int:
    """Largest sum when any disjoint pairs of values may be multiplied first."""
    items = list(values)
    positives = sorted((v for v in items if v > 1), reverse=True)
    negatives = sorted(v for v in items if v < 0)
    total = items.count(1)
    products, leftover = _pair_up(positives)
    total += products + (leftover or 0)
    products, leftover = _pair_up(negatives)
    total += products
    if leftover is not None and 0 not in items:
        total += leftover
    return total


def max_meetings(meetings: Iterable[tuple[int, int]]) -> int:
    """Most ``(start, end)`` meetings that fit in one room without overlap."""
    count = 0
    free_from = 0
    for start, end in sorted(meetings, key=lambda m: (m[1], m[0])):
        if start >= free_from:
            count += 1
            free_from = end
    return count


def _term_sum(group: str) -> int:
    total = 0
    for term in group.split("+"):
        if not term or not set(term) <= _DIGITS:
            raise ValueError(f"malformed term: {term!r}")
        total += int(term)
    return total


def min_expression_value(expression: str) -> int:
    """Smallest value of a ``+``/``-`` expression once brackets are added."""
    first, *rest = expression.split("-")
    return _term_sum(first) - sum(_term_sum(group) for group in rest)