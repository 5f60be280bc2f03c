from itertools import accumulate, combinations, permutations

import pytest
from hypothesis import given
from hypothesis import strategies as st

from algodrills.sorting import (
    bubble_sort,
    bubble_sort_passes,
    count_swaps,
    counting_sort,
    kth_smallest,
    merge_sort,
    min_total_wait,
    sort_digits_descending,
)

int_lists = st.lists(st.integers(-1000, 1000), max_size=50)


@given(int_lists)
def test_merge_sort_matches_sorted(values):
    original = list(values)
    assert merge_sort(values) == sorted(values)
    assert values == original


@given(int_lists)
def test_bubble_sort_matches_sorted(values):
    assert bubble_sort(values) == sorted(values)


def _passes_until_no_swap(values):
    items = list(values)
    passes = 0
    while True:
        passes += 1
        swapped = False
        for j in range(len(items) - 1):
            if items[j] > items[j + 1]:
                items[j], items[j + 1] = items[j + 1], items[j]
                swapped = True
        if not swapped:
            return passes


@given(st.lists(st.integers(0, 20), max_size=30))
def test_bubble_sort_passes_matches_simulation(values):
    assert bubble_sort_passes(values) == _passes_until_no_swap(values)


@given(st.lists(st.integers(), max_size=30))
def test_bubble_sort_passes_on_sorted_input_is_one(values):
    assert bubble_sort_passes(sorted(values)) == 1


@given(st.text(alphabet="0123456789", min_size=1, max_size=20))
def test_sort_digits_descending_is_descending_permutation(digits):
    result = sort_digits_descending(digits)
    assert sorted(result) == sorted(digits)
    assert list(result) == sorted(result, reverse=True)


def test_sort_digits_descending_accepts_int_and_rejects_junk():
    assert sort_digits_descending(2143) == sort_digits_descending("3412")
    with pytest.raises(ValueError):
        sort_digits_descending("12a")


def test_min_total_wait_worked_example():
    assert min_total_wait([3, 1, 4, 3, 2]) == 32


@given(st.lists(st.integers(1, 50), min_size=1, max_size=6))
def test_min_total_wait_is_minimum_over_orders(times):
    best = min(sum(accumulate(order)) for order in permutations(times))
    assert min_total_wait(times) == best


@given(st.lists(st.integers(-100, 100), min_size=1, max_size=40), st.data())
def test_kth_smallest_matches_sorted(values, data):
    k = data.draw(st.integers(min_value=1, max_value=len(values)))
    assert kth_smallest(values, k) == sorted(values)[k - 1]


@pytest.mark.parametrize("k", [0, 4])
def test_kth_smallest_rejects_bad_k(k):
    with pytest.raises(ValueError):
        kth_smallest([3, 1, 2], k)


@given(st.lists(st.integers(-30, 30), max_size=30))
def test_count_swaps_is_inversion_count(values):
    expected = sum(1 for a, b in combinations(values, 2) if a > b)
    assert count_swaps(values) == expected


@given(st.lists(st.integers(1, 10000), max_size=60))
def test_counting_sort_matches_sorted(values):
    assert counting_sort(values) == sorted(values)


@pytest.mark.parametrize("bad", [0, 10001, -5])
def test_counting_sort_rejects_out_of_range(bad):
    with pytest.raises(ValueError):
        counting_sort([5, bad])