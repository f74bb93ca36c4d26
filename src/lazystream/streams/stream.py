"""
Lazily evaluated, memoized streams.

A Stream is a persistent singly-linked list whose head is known and whose
tail is a Thunk. Reading `rest` forces the tail once and caches the result,
so streams derived from the same source share every node computed so far.
"""

from typing import (
    Any, Callable, Generic, Iterable, Iterator, List, Optional,
    Sequence, Tuple, TypeVar, Union
)

from lazystream.config import config
from lazystream.streams.thunk import Thunk
from lazystream.streams.operators import (
    MapOperator, FilterOperator, TakeOperator, DropOperator,
    ZipOperator, AppendOperator, CombineOperator
)

T = TypeVar('T')
U = TypeVar('U')

TailLike = Union['Stream[T]', Callable[[], 'Stream[T]'], Thunk['Stream[T]'], None]


class EmptyStreamError(LookupError):
    """Raised when reading the head of the empty stream."""

    def __init__(self, message: str = "Empty stream"):
        super().__init__(message)


class Stream(Generic[T]):
    """
    An immutable node holding a head value and a memoized tail.

    Args:
        data: Head value
        tail: The rest of the stream: a Stream, a zero-argument callable
            returning one, a Thunk, or None for the empty stream
    """

    # The canonical empty stream, compared by identity
    Empty: 'Stream[Any]'

    def __init__(self, data: T, tail: TailLike = None):
        self._data = data
        self._tail = _to_thunk(tail)

    # Construction

    @staticmethod
    def cons(data: T, tail: TailLike = None) -> 'Stream[T]':
        """Create a plain Stream node, whatever the caller's subclass."""
        return Stream(data, tail)

    @staticmethod
    def empty() -> 'Stream[Any]':
        """Return the canonical empty stream."""
        return Stream.Empty

    @staticmethod
    def of(*values: T) -> 'Stream[T]':
        """Create a finite stream of values; only the first node is built now."""
        return _from_sequence(values, 0)

    @staticmethod
    def from_iterable(iterable: Iterable[T]) -> 'Stream[T]':
        """
        Create a stream over any iterable.

        The first item is pulled immediately. Each later item is pulled from
        the underlying iterator when its node is first reached, and only once,
        so the stream can be walked repeatedly even over a one-shot iterator.
        """
        iterator = iter(iterable)

        def pull() -> 'Stream[T]':
            try:
                item = next(iterator)
            except StopIteration:
                return Stream.Empty
            return Stream(item, pull)

        return pull()

    @staticmethod
    def iterate(seed: T, func: Callable[[T], T]) -> 'Stream[T]':
        """Create the infinite stream seed, func(seed), func(func(seed)), ..."""
        return Stream(seed, lambda: Stream.iterate(func(seed), func))

    # Inspection

    @property
    def first(self) -> T:
        """
        The head of the stream.

        Raises:
            EmptyStreamError: If the stream is empty
        """
        if self is Stream.Empty:
            raise EmptyStreamError()
        return self._data

    @property
    def rest(self) -> 'Stream[T]':
        """The tail of the stream, forced on first access and cached."""
        return self._tail.force()

    @property
    def is_empty(self) -> bool:
        return self is Stream.Empty

    # Transformation operators

    def map(self, func: Callable[[T], U]) -> 'Stream[U]':
        """Apply function to each element."""
        return MapOperator(func).apply(self)

    def filter(self, predicate: Callable[[T], bool]) -> 'Stream[T]':
        """Keep only elements matching predicate."""
        return FilterOperator(predicate).apply(self)

    def filter_not(self, predicate: Callable[[T], bool]) -> 'Stream[T]':
        """Keep only elements not matching predicate."""
        return self.filter(lambda item: not predicate(item))

    def partition(self, predicate: Callable[[T], bool]) -> Tuple['Stream[T]', 'Stream[T]']:
        """
        Split into (matching, not matching).

        Both halves walk this stream on their own, so predicate runs twice
        for every element consumed from both.
        """
        return self.filter(predicate), self.filter_not(predicate)

    def take(self, n: int) -> 'Stream[T]':
        """Take first n elements."""
        return TakeOperator(n).apply(self)

    def drop(self, n: int) -> 'Stream[T]':
        """Skip first n elements, forcing them."""
        return DropOperator(n).apply(self)

    def zip(self, other: 'Stream[U]') -> 'Stream[Tuple[T, U]]':
        """Pair elements positionally, stopping at the shorter stream."""
        return ZipOperator(other).apply(self)

    def prepend(self, value: T) -> 'Stream[T]':
        """Add value in front of this stream."""
        return Stream(value, self)

    def append(self, value: T) -> 'Stream[T]':
        """Add value after the last element. Never ends on an infinite stream."""
        return AppendOperator(value).apply(self)

    def combine(self, other: 'Stream[T]') -> 'Stream[T]':
        """All elements of this stream followed by all elements of other."""
        return CombineOperator(other).apply(self)

    # Terminal operators

    def reduce(self, func: Callable[[U, T], U], initial: U) -> U:
        """Fold elements from left to right into initial."""
        result = initial
        position = self
        while position is not Stream.Empty:
            result = func(result, position._data)
            position = position.rest
        return result

    def exists(self, predicate: Callable[[T], bool]) -> bool:
        """Check whether any element matches, stopping at the first match."""
        position = self
        while position is not Stream.Empty:
            if predicate(position._data):
                return True
            position = position.rest
        return False

    def for_all(self, predicate: Callable[[T], bool]) -> bool:
        """Check whether every element matches. True for the empty stream."""
        position = self
        while position is not Stream.Empty:
            if not predicate(position._data):
                return False
            position = position.rest
        return True

    def sample(self, k: Optional[int] = None) -> List[T]:
        """Collect up to k leading elements into a list."""
        if k is None:
            k = config.default_sample_size

        result: List[T] = []
        if k <= 0:
            return result

        position = self
        while position is not Stream.Empty:
            result.append(position._data)
            if len(result) >= k:
                break
            position = position.rest
        return result

    def __iter__(self) -> Iterator[T]:
        position = self
        while position is not Stream.Empty:
            yield position._data
            position = position.rest

    def __bool__(self) -> bool:
        return self is not Stream.Empty

    def __repr__(self) -> str:
        if self is Stream.Empty:
            return "Empty"
        return f"Stream({self._data}, <...>)"


def _to_thunk(tail: TailLike) -> Thunk['Stream[Any]']:
    if tail is None:
        return Thunk.resolved(Stream.Empty)
    if isinstance(tail, Thunk):
        return tail
    if isinstance(tail, Stream):
        return Thunk.resolved(tail)
    if callable(tail):
        return Thunk.deferred(tail)
    raise TypeError(
        f"Stream tail must be a Stream, a callable or a Thunk, "
        f"got {type(tail).__name__}"
    )


def _from_sequence(values: Sequence[T], index: int) -> 'Stream[T]':
    if index >= len(values):
        return Stream.Empty
    return Stream(values[index], lambda: _from_sequence(values, index + 1))


def _make_empty() -> 'Stream[Any]':
    empty = Stream.__new__(Stream)
    empty._data = None
    empty._tail = Thunk.resolved(empty)
    return empty


Stream.Empty = _make_empty()
