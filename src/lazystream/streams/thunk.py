"""
Memoized deferred values.

A thunk is either a resolved value or a zero-argument callable that produces
one. Forcing a pending thunk runs the callable once, caches the result and
drops the callable; every later force returns the cached value.
"""

import logging
import threading
from typing import Any, Callable, Generic, List, Optional, TypeVar, Union

from lazystream.config import config

A = TypeVar('A')

ThunkLike = Union[A, Callable[[], A]]

logger = logging.getLogger(__name__)

_PENDING = object()

# Callbacks run after every first-time force
_force_listeners: List[Callable[['Thunk[Any]'], None]] = []


def add_force_listener(listener: Callable[['Thunk[Any]'], None]) -> None:
    """Register a callback invoked with each thunk right after it is forced."""
    _force_listeners.append(listener)


def remove_force_listener(listener: Callable[['Thunk[Any]'], None]) -> None:
    """Unregister a callback added with add_force_listener."""
    if listener in _force_listeners:
        _force_listeners.remove(listener)


class Thunk(Generic[A]):
    """
    A value, or a deferred computation of it, resolved at most once.

    Args:
        value_or_compute: A zero-argument callable to defer, or an already
            computed value. Use Thunk.resolved() to hold a callable as a value.
    """

    __slots__ = ('_value', '_compute', '_lock')

    def __init__(self, value_or_compute: ThunkLike):
        if callable(value_or_compute):
            self._value = _PENDING
            self._compute: Optional[Callable[[], A]] = value_or_compute
        else:
            self._value = value_or_compute
            self._compute = None
        self._lock = threading.Lock() if config.thread_safe else None

    @classmethod
    def resolved(cls, value: A) -> 'Thunk[A]':
        """Create a thunk that already holds value."""
        thunk = cls(None)
        thunk._value = value
        return thunk

    @classmethod
    def deferred(cls, compute: Callable[[], A]) -> 'Thunk[A]':
        """Create a thunk that will run compute on first force."""
        if not callable(compute):
            raise TypeError(f"Expected a callable, got {type(compute).__name__}")
        return cls(compute)

    @property
    def is_forced(self) -> bool:
        return self._value is not _PENDING

    def force(self) -> A:
        """Return the value, computing it on the first call only."""
        if self._value is not _PENDING:
            return self._value

        if self._lock is None:
            return self._run()

        with self._lock:
            # Another thread may have forced it while we waited
            if self._value is not _PENDING:
                return self._value
            return self._run()

    def _run(self) -> A:
        # If compute raises, the thunk stays pending
        value = self._compute()
        self._value = value
        self._compute = None

        if config.trace_forcing:
            logger.debug("Forced thunk %#x -> %r", id(self), value)
        for listener in list(_force_listeners):
            listener(self)

        return value

    def __repr__(self) -> str:
        if self._value is _PENDING:
            return "Thunk(<pending>)"
        return f"Thunk({self._value!r})"
