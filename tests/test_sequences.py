#!/usr/bin/env python3
"""
Tests for the number sequences built on Stream.
"""

import unittest

from lazystream import Stream, Naturals, PrimeSource, Fibonacci, primes, collatz


class TestSequences(unittest.TestCase):
    """Test infinite generators and the Collatz chain."""

    def test_naturals(self):
        """Test counting up from a start value."""
        self.assertEqual(Naturals().sample(5), [1, 2, 3, 4, 5])
        self.assertEqual(Naturals(10).sample(3), [10, 11, 12])
        self.assertFalse(Naturals().is_empty)

    def test_odd_and_even(self):
        """Test the derived parity streams."""
        self.assertEqual(Naturals.odd().sample(5), [1, 3, 5, 7, 9])
        self.assertEqual(Naturals.even().sample(5), [2, 4, 6, 8, 10])

    def test_primes(self):
        """Test the lazy sieve."""
        self.assertEqual(primes().take(5).sample(), [2, 3, 5, 7, 11])
        self.assertEqual(primes().sample(15),
                         [2, 3, 5, 7, 11, 13, 17, 19, 23, 29, 31, 37, 41, 43, 47])

    def test_prime_source_with_custom_seed(self):
        """Test sieving a finite seed."""
        sieve = PrimeSource(Stream.of(*range(2, 20)))
        self.assertEqual(list(sieve), [2, 3, 5, 7, 11, 13, 17, 19])

    def test_fibonacci(self):
        """Test the Fibonacci recurrence."""
        self.assertEqual(Fibonacci().sample(10), [1, 1, 2, 3, 5, 8, 13, 21, 34, 55])
        self.assertEqual(Fibonacci(0, 1).sample(5), [0, 1, 1, 2, 3])

    def test_fibonacci_is_memoized(self):
        """Test walking the same stream twice reuses nodes."""
        fib = Fibonacci()
        self.assertIs(fib.drop(20), fib.drop(20))
        self.assertEqual(fib.drop(20).first, 10946)

    def test_collatz(self):
        """Test Collatz chains."""
        self.assertEqual(collatz(6).sample(20), [6, 3, 10, 5, 16, 8, 4, 2, 1])
        self.assertEqual(collatz(2).sample(), [2, 1])
        self.assertEqual(collatz(1).sample(), [1])

    def test_collatz_long_chain(self):
        """Test a chain longer than the default sample."""
        chain = collatz(27)
        self.assertEqual(len(list(chain)), 112)
        self.assertEqual(max(chain), 9232)
        self.assertEqual(chain.sample(3), [27, 82, 41])

    def test_collatz_without_chain(self):
        """Test inputs below 1."""
        self.assertIs(collatz(-1), Stream.Empty)
        self.assertIs(collatz(0), Stream.Empty)


if __name__ == "__main__":
    unittest.main()
