from hypothesis import given
from hypothesis import strategies as st

from algodrills.number_theory import count_almost_primes, primes_between


def _is_prime(number):
    return number >= 2 and all(number % d for d in range(2, int(number**0.5) + 1))


def test_primes_sample():
    assert primes_between(3, 16) == [3, 5, 7, 11, 13]


@given(st.integers(0, 300), st.integers(0, 300))
def test_primes_between_are_exactly_the_primes(start, end):
    found = primes_between(start, end)
    assert found == sorted(found)
    assert set(found) == {n for n in range(start, end + 1) if _is_prime(n)}


def test_no_primes_below_two():
    assert primes_between(0, 1) == []


def test_almost_prime_sample():
    assert count_almost_primes(1, 1000) == 25


@given(st.integers(1, 20000), st.integers(0, 20000), st.integers(0, 20000))
def test_almost_prime_count_adds_over_split(low, span_a, span_b):
    middle = low + span_a
    high = middle + span_b
    assert count_almost_primes(low, high) == (
        count_almost_primes(low, middle) + count_almost_primes(middle + 1, high)
    )


@given(st.integers(1, 10**6))
def test_empty_range_has_no_almost_primes(high):
    assert count_almost_primes(high + 1, high) == 0


@given(st.sampled_from([2, 3, 5, 7, 11, 13]))
def test_prime_square_counts_itself(prime):
    square = prime * prime
    assert count_almost_primes(square, square) == count_almost_primes(1, square) - (
        count_almost_primes(1, square - 1)
    )
    assert count_almost_primes(square + 1, square * prime - 1) == (
        count_almost_primes(1, square * prime - 1) - count_almost_primes(1, square)
    )