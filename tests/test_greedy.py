import pytest
from hypothesis import given
from hypothesis import strategies as st

from algodrills.greedy import (
    max_bundled_sum,
    max_meetings,
    min_coins,
    min_expression_value,
    min_merge_cost,
)

COINS = [1, 5, 10, 50, 100, 500, 1000, 5000, 10000, 50000]

meetings_strategy = st.lists(
    st.tuples(st.integers(0, 20), st.integers(1, 10)).map(
        lambda pair: (pair[0], pair[0] + pair[1])
    ),
    max_size=12,
)


def test_coin_sample():
    assert min_coins(COINS, 4200) == 6


@given(st.integers(0, 500))
def test_unit_coins_pay_one_by_one(amount):
    assert min_coins([1], amount) == amount


@pytest.mark.parametrize("coin", COINS)
def test_single_coin_amounts(coin):
    assert min_coins(COINS, coin) == min_coins(COINS, 0) + 1


def test_unpayable_amount_raises():
    with pytest.raises(ValueError):
        min_coins([5], 7)


def test_merge_cost_sample():
    assert min_merge_cost([10, 20, 40]) == 100


@given(st.integers(1, 1000), st.integers(1, 1000))
def test_merge_cost_small_cases(a, b):
    assert min_merge_cost([a]) == 0
    assert min_merge_cost([a, b]) == a + b


@given(st.lists(st.integers(1, 100), min_size=1, max_size=10).flatmap(
    lambda sizes: st.tuples(st.just(sizes), st.permutations(sizes))
))
def test_merge_cost_ignores_order(case):
    sizes, shuffled = case
    assert min_merge_cost(sizes) == min_merge_cost(shuffled)


def test_merge_cost_rejects_empty():
    with pytest.raises(ValueError):
        min_merge_cost([])


def test_bundled_sum_sample():
    assert max_bundled_sum([-1, 2, 1, 3]) == 6


@given(st.lists(st.integers(-50, 50), max_size=12))
def test_bundling_never_loses(values):
    assert max_bundled_sum(values) >= sum(values)
    assert max_bundled_sum(list(reversed(values))) == max_bundled_sum(values)


@given(st.integers(0, 20))
def test_ones_are_never_bundled(count):
    assert max_bundled_sum([1] * count) == count


def test_chained_meetings_all_fit():
    chain = [(hour, hour + 1) for hour in range(8)]
    assert max_meetings(chain) == len(chain)
    assert max_meetings([]) == 0


@given(meetings_strategy)
def test_meeting_count_bounds_and_duplicates(meetings):
    chosen = max_meetings(meetings)
    assert chosen <= len(meetings)
    assert (chosen >= 1) == bool(meetings)
    assert max_meetings(meetings + meetings) == chosen


def test_expression_sample():
    assert min_expression_value("55-50+40") == -35


@given(st.integers(0, 10**6))
def test_plain_number_is_itself(number):
    assert min_expression_value(str(number)) == number


@given(st.lists(st.integers(0, 999), min_size=1, max_size=6))
def test_all_plus_is_sum(numbers):
    assert min_expression_value("+".join(map(str, numbers))) == sum(numbers)


@pytest.mark.parametrize("expression", ["", "1++2", "a", "3-"])
def test_malformed_expression_raises(expression):
    with pytest.raises(ValueError):
        min_expression_value(expression)