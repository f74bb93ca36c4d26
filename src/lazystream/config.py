"""
Configuration management for lazy stream evaluation.
"""

from typing import Optional
from dataclasses import dataclass, field, fields
import psutil


def _default_memory_alert_mb() -> float:
    # 10% of physical memory
    return psutil.virtual_memory().total * 0.1 / (1024 * 1024)


@dataclass
class StreamConfig:
    """Global configuration for stream evaluation."""

    # Consumption
    default_sample_size: int = 10

    # Forcing
    thread_safe: bool = False  # Guard each tail with a lock
    trace_forcing: bool = False  # Log every forced tail at DEBUG

    # Profiling
    memory_alert_mb: float = field(default_factory=_default_memory_alert_mb)
    time_alert_seconds: float = 1.0

    _instance: Optional['StreamConfig'] = None

    def __post_init__(self):
        """Validate settings."""
        if self.default_sample_size < 0:
            raise ValueError(
                f"default_sample_size must be >= 0, got {self.default_sample_size}"
            )

    @classmethod
    def get_instance(cls) -> 'StreamConfig':
        """Get singleton instance."""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    @classmethod
    def set_defaults(cls, **kwargs) -> None:
        """Set default configuration values."""
        instance = cls.get_instance()
        for key, value in kwargs.items():
            if hasattr(instance, key):
                setattr(instance, key, value)

    @classmethod
    def reset(cls) -> None:
        """Restore every setting on the shared instance to its default."""
        fresh = cls()
        instance = cls.get_instance()
        for f in fields(cls):
            if not f.name.startswith('_'):
                setattr(instance, f.name, getattr(fresh, f.name))


# Global configuration instance
config = StreamConfig.get_instance()
