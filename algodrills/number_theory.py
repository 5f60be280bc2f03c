"""Prime sieves and prime-power counting."""

from __future__ import annotations

from math import isqrt

SIEVE_LIMIT = 10_000_000


def _sieve(limit: int) -> bytearray:
    flags = bytearray(b"\x01") * (limit + 1)
    for small in (0, 1):
        if small <= limit:
            flags[small] = 0
    for number in range(2, isqrt(limit) + 1):
        if flags[number]:
            start = number * number
            flags[start::number] = bytes(len(range(start, limit + 1, number)))
    return flags


def primes_between(start: int, end: int) -> list[int]:
    """All primes in the inclusive range ``start..end``."""
    if end < 2:
        return []
    flags = _sieve(end)
    return [n for n in range(max(start, 2), end + 1) if flags[n]]


def count_almost_primes(low: int, high: int) -> int:
    """Count powers ``p**k`` with ``k >= 2`` and prime ``p <= 10**7`` in ``low..high``."""
    if high < 4:
        return 0
    limit = min(isqrt(high), SIEVE_LIMIT)
    flags = _sieve(limit)
    count = 0
    for prime in range(2, limit + 1):
        if not flags[prime]:
            continue
        power = prime * prime
        while power <= high:
            if power >= low:
                count += 1
            power *= prime
    return count