"""Prefix-sum drills: digit sums, averages, range and grid sums, remainders."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Sequence
from itertools import accumulate

_DIGITS = frozenset("0123456789")


def digit_sum(digits: str) -> int:
    """Return the sum of the decimal digits written in ``digits``."""
    text = str(digits)
    if not text or not set(text) <= _DIGITS:
        raise ValueError(f"not a string of decimal digits: {text!r}")
    return sum(int(char) for char in text)


def adjusted_average(scores: Sequence[float]) -> float:
    """Average of the scores after rescaling each to ``score / best * 100``."""
    if not scores:
        raise ValueError("at least one score is required")
    best = max(scores)
    if best <= 0:
        raise ValueError("the highest score must be positive")
    return sum(scores) * 100.0 / best / len(scores)


def range_sums(
    values: Sequence[int], queries: Iterable[tuple[int, int]]
) -> list[int]:
    """Answer 1-based inclusive ``(start, end)`` range-sum queries."""
    prefix = list(accumulate(values, initial=0))
    size = len(values)
    results = []
    for start, end in queries:
        if not 1 <= start <= end <= size:
            raise ValueError(f"range ({start}, {end}) is outside 1..{size}")
        results.append(prefix[end] - prefix[start - 1])
    return results


def _grid_prefix(grid: Sequence[Sequence[int]]) -> list[list[int]]:
    width = len(grid[0]) if grid else 0
    table = [[0] * (width + 1)]
    for row in grid:
        if len(row) != width:
            raise ValueError("all grid rows must have the same length")
        above = table[-1]
        table.append(
            [0] + [left + up for left, up in zip(accumulate(row), above[1:])]
        )
    return table


def grid_range_sums(
    grid: Sequence[Sequence[int]],
    queries: Iterable[tuple[int, int, int, int]],
) -> list[int]:
    """Answer 1-based ``(x1, y1, x2, y2)`` sub-rectangle sum queries.

    ``x`` selects rows and ``y`` selects columns; both corners are inclusive.
    """
    table = _grid_prefix(grid)
    rows = len(grid)
    cols = len(table[0]) - 1
    results = []
    for x1, y1, x2, y2 in queries:
        if not (1 <= x1 <= x2 <= rows and 1 <= y1 <= y2 <= cols):
            raise ValueError(f"rectangle ({x1}, {y1}, {x2}, {y2}) is out of range")
        results.append(
            table[x2][y2]
            - table[x2][y1 - 1]
            - table[x1 - 1][y2]
            + table[x1 - 1][y1 - 1]
        )
    return results


def count_divisible_subarrays(values: Iterable[int], divisor: int) -> int:
    """Count contiguous non-empty runs whose sum is divisible by ``divisor``."""
    if divisor <= 0:
        raise ValueError("divisor must be positive")
    remainders = Counter(total % divisor for total in accumulate(values))
    pairs = sum(count * (count - 1) // 2 for count in remainders.values())
    return remainders[0] + pairs