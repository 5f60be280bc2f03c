"""Sorting drills: merge, bubble, counting sort, quickselect and friends."""

from __future__ import annotations

import heapq
from collections import Counter
from collections.abc import Iterable
from itertools import accumulate

COUNTING_MIN = 1
COUNTING_MAX = 10000
_DIGITS = frozenset("0123456789")


def merge_sort(values: Iterable[int]) -> list[int]:
    """Return a new list with ``values`` in ascending order (stable)."""
    items = list(values)
    if len(items) <= 1:
        return items
    middle = (len(items) + 1) // 2
    return list(heapq.merge(merge_sort(items[:middle]), merge_sort(items[middle:])))


def bubble_sort(values: Iterable[int]) -> list[int]:
    """Return a new list sorted ascending by adjacent swaps."""
    items = list(values)
    for done in range(len(items) - 1):
        for j in range(len(items) - 1 - done):
            if items[j] > items[j + 1]:
                items[j], items[j + 1] = items[j + 1], items[j]
    return items


def bubble_sort_passes(values: Iterable[int]) -> int:
    """Number of bubble-sort passes until a pass makes no swap."""
    ranked = sorted((value, index) for index, value in enumerate(values))
    moved_left = (
        original - final for final, (_, original) in enumerate(ranked)
    )
    return max(moved_left, default=0) + 1


def sort_digits_descending(number: str | int) -> str:
    """Return the digits of ``number`` arranged from largest to smallest."""
    text = str(number)
    if not text or not set(text) <= _DIGITS:
        raise ValueError(f"not a string of decimal digits: {text!r}")
    return "".join(sorted(text, reverse=True))


def min_total_wait(times: Iterable[int]) -> int:
    """Smallest total of finishing times when everyone is served in one line."""
    return sum(accumulate(sorted(times)))


def _partition(items: list[int], start: int, end: int) -> int:
    if start + 1 == end:
        if items[start] > items[end]:
            items[start], items[end] = items[end], items[start]
        return end
    middle = (start + end) // 2
    items[start], items[middle] = items[middle], items[start]
    pivot = items[start]
    i, j = start + 1, end
    while i <= j:
        while j >= start + 1 and pivot < items[j]:
            j -= 1
        while i <= end and pivot > items[i]:
            i += 1
        if i < j:
            items[i], items[j] = items[j], items[i]
            i += 1
            j -= 1
        else:
            break
    items[start] = items[j]
    items[j] = pivot
    return j


def kth_smallest(values: Iterable[int], k: int) -> int:
    """Return the ``k``-th smallest value (1-based) by quickselect."""
    items = list(values)
    if not 1 <= k <= len(items):
        raise ValueError(f"k must be between 1 and {len(items)}")
    target = k - 1
    start, end = 0, len(items) - 1
    while True:
        pivot = _partition(items, start, end)
        if pivot == target:
            return items[target]
        if target < pivot:
            end = pivot - 1
        else:
            start = pivot + 1


def _sort_counting(items: list[int]) -> tuple[list[int], int]:
    if len(items) <= 1:
        return items, 0
    middle = (len(items) + 1) // 2
    left, left_swaps = _sort_counting(items[:middle])
    right, right_swaps = _sort_counting(items[middle:])
    merged: list[int] = []
    swaps = left_swaps + right_swaps
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] > right[j]:
            merged.append(right[j])
            swaps += len(left) - i
            j += 1
        else:
            merged.append(left[i])
            i += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged, swaps


def count_swaps(values: Iterable[int]) -> int:
    """Number of adjacent swaps bubble sort performs (the inversion count)."""
    return _sort_counting(list(values))[1]


def counting_sort(values: Iterable[int]) -> list[int]:
    """Sort integers in the range 1..10000 by counting occurrences."""
    counts = Counter(values)
    out_of_range = [v for v in counts if not COUNTING_MIN <= v <= COUNTING_MAX]
    if out_of_range:
        raise ValueError(
            f"values must lie in {COUNTING_MIN}..{COUNTING_MAX}: {sorted(out_of_range)}"
        )
    return [
        value
        for value in range(COUNTING_MIN, COUNTING_MAX + 1)
        for _ in range(counts[value])
    ]