"""
Well-known number sequences built on Stream.

These are plain clients of the Stream API and double as usage examples.
"""

import logging
from typing import List, Optional

from lazystream.streams import Stream

logger = logging.getLogger(__name__)


class Naturals(Stream[int]):
    """The natural numbers start, start + 1, start + 2, ..."""

    def __init__(self, start: int = 1):
        super().__init__(start, lambda: Naturals(start + 1))

    @staticmethod
    def odd() -> Stream[int]:
        """1, 3, 5, ..."""
        return Naturals().filter_not(lambda n: n % 2 == 0)

    @staticmethod
    def even() -> Stream[int]:
        """2, 4, 6, ..."""
        return Naturals.odd().map(lambda n: n + 1)


class PrimeSource(Stream[int]):
    """
    Sieve of Eratosthenes by lazy filtering.

    The head of the seed is prime; the tail sieves the rest of the seed by
    dropping every multiple of that head. With the default seed of naturals
    from 3, this yields every odd prime.
    """

    def __init__(self, seed: Optional[Stream[int]] = None):
        if seed is None:
            seed = Naturals(3)
        prime = seed.first
        super().__init__(prime, lambda: _sieve(seed.rest, prime))


def _sieve(seed: Stream[int], prime: int) -> Stream[int]:
    remaining = seed.filter_not(lambda n: n % prime == 0)
    if remaining.is_empty:
        return Stream.Empty
    return PrimeSource(remaining)


def primes() -> Stream[int]:
    """2, 3, 5, 7, 11, ..."""
    return PrimeSource().prepend(2)


class Fibonacci(Stream[int]):
    """a, b, a + b, ... (1, 1, 2, 3, 5, ... by default)"""

    def __init__(self, a: int = 1, b: int = 1):
        super().__init__(a, lambda: Fibonacci(b, a + b))


def collatz(n: int) -> Stream[int]:
    """
    The Collatz chain from n down to 1.

    Computed eagerly, then returned as a finite stream. Inputs below 1 have
    no chain and give the empty stream.
    """
    if n < 1:
        return Stream.Empty

    chain: List[int] = [n]
    while n != 1:
        n = n // 2 if n % 2 == 0 else 3 * n + 1
        chain.append(n)
    logger.debug("Collatz chain from %d has %d steps", chain[0], len(chain) - 1)

    result: Stream[int] = Stream.Empty
    for value in reversed(chain):
        result = result.prepend(value)
    return result
