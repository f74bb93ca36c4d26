"""
lazystream: lazily evaluated, memoized streams.

A Stream is an immutable linked list whose tail is computed on demand and
cached once computed. Infinite sequences can be described in a few lines and
only the elements actually read are ever produced.
"""

from lazystream.config import StreamConfig
from lazystream.streams import Stream, EmptyStreamError, Thunk
from lazystream.sequences import Naturals, PrimeSource, Fibonacci, primes, collatz
from lazystream.profiler import profile_memory, profile_time, ForcingProfile

__version__ = "0.1.0"
__license__ = "Apache-2.0"

__all__ = [
    "StreamConfig",
    "Stream",
    "EmptyStreamError",
    "Thunk",
    "Naturals",
    "PrimeSource",
    "Fibonacci",
    "primes",
    "collatz",
    "profile_memory",
    "profile_time",
    "ForcingProfile",
]

# Configure default settings
StreamConfig.set_defaults()
