"""Lazy, memoized streams and their operators."""

from lazystream.streams.thunk import (
    Thunk,
    add_force_listener,
    remove_force_listener,
)
from lazystream.streams.stream import (
    Stream,
    EmptyStreamError,
)
from lazystream.streams.operators import (
    StreamOperator,
    MapOperator,
    FilterOperator,
    TakeOperator,
    DropOperator,
    ZipOperator,
    AppendOperator,
    CombineOperator,
)

__all__ = [
    "Thunk",
    "add_force_listener",
    "remove_force_listener",
    "Stream",
    "EmptyStreamError",
    "StreamOperator",
    "MapOperator",
    "FilterOperator",
    "TakeOperator",
    "DropOperator",
    "ZipOperator",
    "AppendOperator",
    "CombineOperator",
]
