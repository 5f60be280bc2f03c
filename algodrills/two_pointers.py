"""Two-pointer and sliding-window drills."""

from __future__ import annotations

from collections import Counter, deque
from collections.abc import Iterable, Sequence

BASES = "ACGT"


def count_consecutive_sums(n: int) -> int:
    """Count the ways ``n`` is a sum of one or more consecutive positive integers."""
    if n < 1:
        raise ValueError("n must be a positive integer")
    count = 1
    start = end = total = 1
    while end != n:
        if total == n:
            count += 1
            end += 1
            total += end
        elif total > n:
            total -= start
            start += 1
        else:
            end += 1
            total += end
    return count


def count_pairs_with_sum(values: Iterable[int], target: int) -> int:
    """Count disjoint pairs, matched greedily after sorting, that add up to ``target``."""
    items = sorted(values)
    count = 0
    start, end = 0, len(items) - 1
    while start < end:
        total = items[start] + items[end]
        if total == target:
            count += 1
            start += 1
            end -= 1
        elif total > target:
            end -= 1
        else:
            start += 1
    return count


def _is_good(items: list[int], position: int) -> bool:
    wanted = items[position]
    start, end = 0, len(items) - 1
    while start < end:
        total = items[start] + items[end]
        if total == wanted:
            if start != position and end != position:
                return True
            if start == position:
                start += 1
            else:
                end -= 1
        elif total < wanted:
            start += 1
        else:
            end -= 1
    return False


def count_good_numbers(values: Iterable[int]) -> int:
    """Count elements equal to the sum of two other elements at distinct positions."""
    items = sorted(values)
    return sum(_is_good(items, position) for position in range(len(items)))


def count_valid_passwords(
    dna: str, window: int, minimums: Sequence[int]
) -> int:
    """Count windows of ``dna`` holding at least the given numbers of A, C, G and T."""
    if len(minimums) != len(BASES):
        raise ValueError("minimums must give one count for each of A, C, G, T")
    if not 1 <= window <= len(dna):
        raise ValueError("window must be between 1 and the length of the string")
    required = dict(zip(BASES, minimums))
    counts: Counter[str] = Counter()
    satisfied = sum(1 for need in required.values() if need == 0)

    def add(base: str) -> None:
        nonlocal satisfied
        if base in required:
            counts[base] += 1
            if counts[base] == required[base]:
                satisfied += 1

    def remove(base: str) -> None:
        nonlocal satisfied
        if base in required:
            if counts[base] == required[base]:
                satisfied -= 1
            counts[base] -= 1

    for base in dna[:window]:
        add(base)
    valid = int(satisfied == len(BASES))
    for incoming, outgoing in zip(dna[window:], dna):
        add(incoming)
        remove(outgoing)
        valid += satisfied == len(BASES)
    return valid


def sliding_window_minimum(values: Iterable[int], window: int) -> list[int]:
    """Minimum of the last ``window`` values seen, at every position."""
    if window < 1:
        raise ValueError("window must be positive")
    candidates: deque[tuple[int, int]] = deque()
    minima = []
    for index, value in enumerate(values):
        while candidates and candidates[-1][1] > value:
            candidates.pop()
        candidates.append((index, value))
        if candidates[0][0] <= index - window:
            candidates.popleft()
        minima.append(candidates[0][1])
    return minima