"""
Stream operators for lazy transformation.

Every operator builds the first node of its result right away and defers the
rest of the work into that node's tail, so chaining operators costs nothing
until somebody reads `rest`.
"""

from abc import ABC, abstractmethod
from typing import Any, Callable, TYPE_CHECKING, Tuple, TypeVar

if TYPE_CHECKING:
    from lazystream.streams.stream import Stream

T = TypeVar('T')
U = TypeVar('U')


class StreamOperator(ABC):
    """Base class for stream operators."""

    @abstractmethod
    def apply(self, stream: 'Stream[T]') -> 'Stream[Any]':
        """Apply operator to stream."""
        pass


class MapOperator(StreamOperator):
    """Map each element to a new value."""

    def __init__(self, func: Callable[[T], U]):
        self.func = func

    def apply(self, stream: 'Stream[T]') -> 'Stream[U]':
        if stream.is_empty:
            return stream.Empty
        return stream.cons(self.func(stream.first), lambda: self.apply(stream.rest))


class FilterOperator(StreamOperator):
    """
    Keep elements matching a predicate.

    The head of the result is found by scanning past rejected elements, so
    applying the operator forces the source up to its first match.
    """

    def __init__(self, predicate: Callable[[T], bool]):
        self.predicate = predicate

    def apply(self, stream: 'Stream[T]') -> 'Stream[T]':
        while not stream.is_empty and not self.predicate(stream.first):
            stream = stream.rest

        if stream.is_empty:
            return stream
        return stream.cons(stream.first, lambda: self.apply(stream.rest))


class TakeOperator(StreamOperator):
    """Take first n elements."""

    def __init__(self, n: int):
        self.n = n

    def apply(self, stream: 'Stream[T]') -> 'Stream[T]':
        if stream.is_empty or self.n <= 0:
            return stream.Empty
        if self.n == 1:
            # Last element: leave the source tail unforced
            return stream.cons(stream.first)
        return stream.cons(stream.first,
                           lambda: TakeOperator(self.n - 1).apply(stream.rest))


class DropOperator(StreamOperator):
    """Skip first n elements."""

    def __init__(self, n: int):
        self.n = n

    def apply(self, stream: 'Stream[T]') -> 'Stream[T]':
        remaining = self.n
        while remaining > 0 and not stream.is_empty:
            stream = stream.rest
            remaining -= 1
        return stream


class ZipOperator(StreamOperator):
    """Pair elements with those of another stream, position by position."""

    def __init__(self, other: 'Stream[U]'):
        self.other = other

    def apply(self, stream: 'Stream[T]') -> 'Stream[Tuple[T, U]]':
        other = self.other
        if stream.is_empty or other.is_empty:
            return stream.Empty
        return stream.cons((stream.first, other.first),
                           lambda: ZipOperator(other.rest).apply(stream.rest))


class AppendOperator(StreamOperator):
    """Add a value after the last element."""

    def __init__(self, value: T):
        self.value = value

    def apply(self, stream: 'Stream[T]') -> 'Stream[T]':
        if stream.is_empty:
            return stream.cons(self.value)
        return stream.cons(stream.first, lambda: self.apply(stream.rest))


class CombineOperator(StreamOperator):
    """Concatenate another stream after the last element."""

    def __init__(self, other: 'Stream[T]'):
        self.other = other

    def apply(self, stream: 'Stream[T]') -> 'Stream[T]':
        if stream.is_empty:
            return self.other
        return stream.cons(stream.first, lambda: self.apply(stream.rest))
