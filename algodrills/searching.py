"""Binary-search drills."""

from __future__ import annotations

from bisect import bisect_left
from collections.abc import Iterable, Sequence


def membership(values: Iterable[int], queries: Iterable[int]) -> list[bool]:
    """For each query, whether it occurs among ``values``."""
    items = sorted(values)

    def present(query: int) -> bool:
        index = bisect_left(items, query)
        return index < len(items) and items[index] == query

    return [present(query) for query in queries]


def _discs_needed(lengths: Sequence[int], capacity: int) -> int:
    discs = 0
    used = 0
    for length in lengths:
        if used + length > capacity:
            discs += 1
            used = 0
        used += length
    if used:
        discs += 1
    return discs


def min_bluray_size(lengths: Sequence[int], count: int) -> int:
    """Smallest disc size that holds the lessons, in order, on ``count`` discs."""
    if not lengths:
        raise ValueError("at least one lesson is required")
    if count < 1:
        raise ValueError("at least one disc is required")
    low, high = max(lengths), sum(lengths)
    offset = bisect_left(
        range(low, high + 1),
        True,
        key=lambda capacity: _discs_needed(lengths, capacity) <= count,
    )
    return low + offset


def _entries_at_most(n: int, value: int) -> int:
    return sum(min(value // row, n) for row in range(1, n + 1))


def kth_in_product_table(n: int, k: int) -> int:
    """The ``k``-th smallest entry (1-based) of the ``n`` by ``n`` table ``i * j``."""
    if n < 1:
        raise ValueError("n must be positive")
    if not 1 <= k <= n * n:
        raise ValueError(f"k must be between 1 and {n * n}")
    offset = bisect_left(
        range(1, k + 1), True, key=lambda value: _entries_at_most(n, value) >= k
    )
    return 1 + offset