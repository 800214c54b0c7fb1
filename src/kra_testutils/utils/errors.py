"""Typed exceptions for fixture generation and configuration."""


class FixtureError(Exception):
    """Base class for fixture generation errors."""


class ConfigError(FixtureError, ValueError):
    """Raised when configuration values cannot be interpreted."""


class UniquenessExhaustedError(FixtureError, RuntimeError):
    """Raised when a unique batch cannot be filled within the attempt budget."""

    def __init__(self, count: int, produced: int, attempts: int) -> None:
        super().__init__(
            f"cannot satisfy uniqueness: {produced}/{count} distinct values "
            f"after {attempts} attempts"
        )
        self.count = count
        self.produced = produced
        self.attempts = attempts
