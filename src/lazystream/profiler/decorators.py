"""Decorators and context managers for profiling stream consumption."""

import functools
import logging
import time
from typing import Any, Callable, Optional

import psutil

from lazystream.config import config
from lazystream.streams.thunk import Thunk, add_force_listener, remove_force_listener

logger = logging.getLogger(__name__)


def profile_memory(threshold_mb: Optional[float] = None,
                   alert: bool = True) -> Callable:
    """
    Decorator to profile memory usage.

    Memoized streams keep every forced node alive for as long as the head is
    referenced, so consuming a long prefix can grow the process noticeably.

    Args:
        threshold_mb: Memory threshold in MB to trigger alert
            (defaults to config.memory_alert_mb)
        alert: Log a warning if threshold exceeded

    Example:
        @profile_memory(threshold_mb=500)
        def first_primes():
            return primes().sample(10_000)
    """
    def decorator(func: Callable) -> Callable:
        @functools.wraps(func)
        def wrapper(*args, **kwargs) -> Any:
            limit = threshold_mb if threshold_mb is not None else config.memory_alert_mb
            process = psutil.Process()

            start_memory = process.memory_info().rss
            start_time = time.time()

            try:
                result = func(*args, **kwargs)
            finally:
                end_memory = process.memory_info().rss
                end_time = time.time()

                memory_used = (end_memory - start_memory) / (1024 * 1024)
                duration = end_time - start_time

                # Store metrics
                wrapper.memory_used = memory_used
                wrapper.duration = duration

                if alert and memory_used > limit:
                    logger.warning("Memory alert: %s used %.1fMB (threshold: %.1fMB)",
                                   func.__name__, memory_used, limit)

                logger.info("%s memory: %.1fMB, time: %.2fs",
                            func.__name__, memory_used, duration)

            return result

        wrapper.memory_used = None
        wrapper.duration = None
        return wrapper

    return decorator


def profile_time(threshold_seconds: Optional[float] = None,
                 alert: bool = True) -> Callable:
    """
    Decorator to profile execution time.

    Args:
        threshold_seconds: Time threshold to trigger alert
            (defaults to config.time_alert_seconds)
        alert: Log a warning if threshold exceeded
    """
    def decorator(func: Callable) -> Callable:
        @functools.wraps(func)
        def wrapper(*args, **kwargs) -> Any:
            limit = (threshold_seconds if threshold_seconds is not None
                     else config.time_alert_seconds)
            start_time = time.time()

            try:
                result = func(*args, **kwargs)
            finally:
                duration = time.time() - start_time
                wrapper.duration = duration

                if alert and duration > limit:
                    logger.warning("Time alert: %s took %.2fs (threshold: %.2fs)",
                                   func.__name__, duration, limit)

                logger.info("%s execution time: %.2fs", func.__name__, duration)

            return result

        wrapper.duration = None
        return wrapper

    return decorator


class ForcingProfile:
    """
    Context manager counting the stream tails forced inside a block.

    Example:
        with ForcingProfile("primes") as profile:
            primes().sample(100)
        print(profile.forced)
    """

    def __init__(self, name: str = "block", log_summary: bool = True):
        self.name = name
        self.log_summary = log_summary
        self.forced = 0
        self.duration: Optional[float] = None
        self._start_time = 0.0

    def _on_force(self, thunk: Thunk) -> None:
        self.forced += 1

    def __enter__(self) -> 'ForcingProfile':
        self.forced = 0
        self.duration = None
        add_force_listener(self._on_force)
        self._start_time = time.time()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.duration = time.time() - self._start_time
        remove_force_listener(self._on_force)

        if self.log_summary:
            logger.info("Profile %s: %d tails forced in %.3fs",
                        self.name, self.forced, self.duration)
