"""Shared helpers: exceptions and logging."""

from .errors import ConfigError, FixtureError, UniquenessExhaustedError
from .logging import configure_logging, get_logger

__all__ = [
    "ConfigError",
    "FixtureError",
    "UniquenessExhaustedError",
    "configure_logging",
    "get_logger",
]
