import pytest
from hypothesis import given
from hypothesis import strategies as st

from algodrills.stacks_queues import (
    AbsoluteHeap,
    StackSequenceError,
    absolute_heap_results,
    last_card,
    next_greater,
    stack_sequence_ops,
)


def _replay(ops):
    stack, output, pushed = [], [], 0
    for op in ops:
        if op == "+":
            pushed += 1
            stack.append(pushed)
        else:
            output.append(stack.pop())
    return output


def _sequence_from_choices(choices):
    stack, output, pushed = [], [], 0
    for push in choices:
        if push or not stack:
            pushed += 1
            stack.append(pushed)
        else:
            output.append(stack.pop())
    output.extend(reversed(stack))
    return output


def test_stack_sequence_worked_example():
    assert stack_sequence_ops([4, 3, 6, 8, 7, 5, 2, 1]) == list("++++--++-++-----")


@given(st.lists(st.booleans(), max_size=40))
def test_stack_sequence_ops_replay_reproduces_sequence(choices):
    sequence = _sequence_from_choices(choices)
    ops = stack_sequence_ops(sequence)
    assert _replay(ops) == sequence
    assert ops.count("+") == ops.count("-") == len(sequence)


@pytest.mark.parametrize("sequence", [[1, 2, 5, 3, 4], [3, 1, 2], [1, 1], [0]])
def test_stack_sequence_ops_impossible(sequence):
    with pytest.raises(StackSequenceError):
        stack_sequence_ops(sequence)


@given(st.lists(st.integers(-50, 50), max_size=40))
def test_next_greater_is_nearest_larger_to_the_right(values):
    expected = [
        next((later for later in values[i + 1 :] if later > value), -1)
        for i, value in enumerate(values)
    ]
    assert next_greater(values) == expected


def test_last_card_worked_example():
    assert last_card(6) == 4


@pytest.mark.parametrize("power", range(0, 10))
def test_last_card_of_power_of_two_is_bottom(power):
    assert last_card(2**power) == 2**power


def test_last_card_rejects_empty_deck():
    with pytest.raises(ValueError):
        last_card(0)


@given(st.lists(st.integers(-100, 100).filter(bool), max_size=30))
def test_absolute_heap_pops_in_absolute_order(values):
    heap = AbsoluteHeap()
    for value in values:
        heap.push(value)
    assert len(heap) == len(values)
    popped = [heap.pop() for _ in values]
    assert popped == sorted(values, key=lambda v: (abs(v), v))
    assert len(heap) == 0


def test_absolute_heap_pop_empty_raises():
    with pytest.raises(IndexError):
        AbsoluteHeap().pop()


@given(st.lists(st.integers(-20, 20), max_size=40))
def test_absolute_heap_results_counts_and_values(commands):
    results = absolute_heap_results(commands)
    assert len(results) == commands.count(0)
    pushed = [c for c in commands if c != 0]
    assert all(r == 0 or r in pushed for r in results)


def test_absolute_heap_results_empty_pops_give_zero():
    assert absolute_heap_results([0, 0, -1, 1, 0, 0, 0]) == [0, 0, -1, 1, 0]