"""Stack, queue and priority-queue drills."""

from __future__ import annotations

import heapq
from collections import deque
from collections.abc import Iterable


class StackSequenceError(ValueError):
    """The sequence cannot be produced by pushing 1..n in order onto a stack."""


def stack_sequence_ops(sequence: Iterable[int]) -> list[str]:
    """Return the ``+``/``-`` push and pop steps that produce ``sequence``.

    Numbers 1, 2, 3, ... are pushed in ascending order; every pop emits the
    top of the stack.
    """
    ops: list[str] = []
    stack: list[int] = []
    next_number = 1
    for target in sequence:
        if target >= next_number:
            while target >= next_number:
                stack.append(next_number)
                next_number += 1
                ops.append("+")
            stack.pop()
            ops.append("-")
        elif stack and stack.pop() == target:
            ops.append("-")
        else:
            raise StackSequenceError(f"cannot pop {target} at this point")
    return ops


def next_greater(values: list[int]) -> list[int]:
    """For each value, the nearest later value that is larger, or -1."""
    result = [-1] * len(values)
    waiting: list[int] = []
    for index, value in enumerate(values):
        while waiting and values[waiting[-1]] < value:
            result[waiting.pop()] = value
        waiting.append(index)
    return result


def last_card(n: int) -> int:
    """Discard the top card, move the next to the bottom, until one card is left."""
    if n < 1:
        raise ValueError("there must be at least one card")
    cards = deque(range(1, n + 1))
    while len(cards) > 1:
        cards.popleft()
        cards.append(cards.popleft())
    return cards[0]


class AbsoluteHeap:
    """Min-heap ordered by absolute value, negative values first on ties."""

    def __init__(self) -> None:
        self._heap: list[tuple[int, int]] = []

    def push(self, value: int) -> None:
        heapq.heappush(self._heap, (abs(value), value))

    def pop(self) -> int:
        if not self._heap:
            raise IndexError("pop from an empty heap")
        return heapq.heappop(self._heap)[1]

    def __len__(self) -> int:
        return len(self._heap)


def absolute_heap_results(commands: Iterable[int]) -> list[int]:
    """Run heap commands: 0 pops (printing 0 if empty), anything else is pushed."""
    heap = AbsoluteHeap()
    results = []
    for command in commands:
        if command == 0:
            results.append(heap.pop() if heap else 0)
        else:
            heap.push(command)
    return results