"""Profiling helpers for stream consumption."""

from lazystream.profiler.decorators import (
    profile_memory,
    profile_time,
    ForcingProfile,
)

__all__ = [
    "profile_memory",
    "profile_time",
    "ForcingProfile",
]
