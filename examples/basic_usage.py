#!/usr/bin/env python3
"""
Basic usage examples for lazystream.
"""

import logging
import operator

from lazystream import (
    Stream,
    StreamConfig,
    Naturals,
    Fibonacci,
    primes,
    collatz,
)
from lazystream.profiler import ForcingProfile, profile_memory


def example_finite_streams():
    """Example: Build and transform finite streams."""
    print("\n=== Finite Stream Example ===")

    numbers = Stream.of(1, 2, 3, 4, 5)
    print(f"Stream: {numbers}")
    print(f"Doubled: {numbers.map(lambda n: n * 2).sample()}")
    print(f"Sum: {numbers.reduce(operator.add, 0)}")

    evens, odds = numbers.partition(lambda n: n % 2 == 0)
    print(f"Evens: {evens.sample()}, odds: {odds.sample()}")
    print(f"Combined: {evens.combine(odds).append(6).sample()}")


def example_infinite_streams():
    """Example: Describe infinite sequences, read only what you need."""
    print("\n=== Infinite Stream Example ===")

    print(f"Naturals: {Naturals().sample()}")
    print(f"Odd: {Naturals.odd().sample(5)}, even: {Naturals.even().sample(5)}")
    print(f"Primes: {primes().sample(15)}")
    print(f"Fibonacci: {Fibonacci().sample(12)}")
    print(f"Squares above 50: {Naturals().map(lambda n: n * n).filter(lambda n: n > 50).sample(5)}")

    # Pair primes with their index
    indexed = Naturals().zip(primes())
    print(f"Indexed primes: {indexed.drop(5).take(3).sample()}")


def example_collatz():
    """Example: Finite chains built eagerly."""
    print("\n=== Collatz Example ===")

    for start in (6, 7, 27):
        chain = collatz(start)
        print(f"collatz({start}): {len(list(chain))} terms, peak {max(chain)}")


def example_memoization():
    """Example: Forced tails are computed once and shared."""
    print("\n=== Memoization Example ===")

    fib = Fibonacci()
    with ForcingProfile("first walk") as first:
        fib.sample(30)
    with ForcingProfile("second walk") as second:
        fib.sample(30)

    print(f"Tails forced: first walk {first.forced}, second walk {second.forced}")


@profile_memory(threshold_mb=50)
def example_memory_profiling():
    """Example: Profile memory used by a long memoized prefix."""
    print("\n=== Memory Profiling Example ===")

    fib = Fibonacci()
    return fib.drop(20000).first.bit_length()


def main():
    """Run all examples."""
    print("=== lazystream Examples ===")

    logging.basicConfig(level=logging.INFO)
    StreamConfig.set_defaults(default_sample_size=10)

    example_finite_streams()
    example_infinite_streams()
    example_collatz()
    example_memoization()

    bits = example_memory_profiling()
    print(f"F(20001) has {bits} bits, used {example_memory_profiling.memory_used:.1f}MB")

    print("\n=== All examples completed! ===")


if __name__ == "__main__":
    main()
