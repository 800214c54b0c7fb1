"""Bulk generation with optional uniqueness.

All values in a batch are drawn from one resolved source, so a seeded batch
is reproducible as a whole.  Uniqueness is enforced by rejection sampling:
values are drawn until ``count`` distinct ones have been collected, and the
result keeps first-insertion order.  The loop is bounded by an attempt
budget; running out raises :class:`UniquenessExhaustedError` instead of
spinning forever when the value space (or a seeded stream's period) is too
small for the request.
"""

from __future__ import annotations

from collections.abc import Callable, Hashable
from typing import TypeVar

from ..rng import RandomSource, resolve_source
from ..utils.errors import UniquenessExhaustedError
from ..utils.logging import get_logger
from .identifiers import generate_eslip, generate_pin, generate_tcc

__all__ = [
    "ATTEMPTS_PER_ITEM",
    "MIN_ATTEMPTS",
    "default_max_attempts",
    "generate_many",
    "generate_pins",
    "generate_tccs",
    "generate_eslips",
]

logger = get_logger(__name__)

H = TypeVar("H", bound=Hashable)

ATTEMPTS_PER_ITEM = 100
MIN_ATTEMPTS = 1000


def default_max_attempts(count: int) -> int:
    """Return the default draw budget for a unique batch of ``count`` values."""

    return max(count * ATTEMPTS_PER_ITEM, MIN_ATTEMPTS)


def generate_many(
    generator: Callable[..., H],
    count: int,
    unique: bool = True,
    *,
    seed: int | None = None,
    source: RandomSource | None = None,
    max_attempts: int | None = None,
) -> list[H]:
    """Return ``count`` values produced by ``generator``.

    ``generator`` is called as ``generator(source=...)``.  A ``count`` of zero
    or less yields an empty list without drawing.
    """

    if count <= 0:
        return []
    rng = resolve_source(source, seed)
    if not unique:
        return [generator(source=rng) for _ in range(count)]

    budget = default_max_attempts(count) if max_attempts is None else max_attempts
    seen: dict[H, None] = {}
    attempts = 0
    while len(seen) < count:
        if attempts >= budget:
            logger.warning(
                "uniqueness budget exhausted: %d/%d values after %d attempts",
                len(seen),
                count,
                attempts,
            )
            raise UniquenessExhaustedError(count, len(seen), attempts)
        seen.setdefault(generator(source=rng))
        attempts += 1
    if attempts > count:
        logger.debug("resampled %d duplicates for %d unique values", attempts - count, count)
    return list(seen)


def generate_pins(
    count: int,
    unique: bool = True,
    *,
    seed: int | None = None,
    source: RandomSource | None = None,
    max_attempts: int | None = None,
) -> list[str]:
    """Return ``count`` PINs, distinct unless ``unique`` is false."""

    return generate_many(
        generate_pin, count, unique, seed=seed, source=source, max_attempts=max_attempts
    )


def generate_tccs(
    count: int,
    unique: bool = True,
    *,
    seed: int | None = None,
    source: RandomSource | None = None,
    max_attempts: int | None = None,
) -> list[str]:
    """Return ``count`` TCC numbers, distinct unless ``unique`` is false."""

    return generate_many(
        generate_tcc, count, unique, seed=seed, source=source, max_attempts=max_attempts
    )


def generate_eslips(
    count: int,
    unique: bool = True,
    *,
    seed: int | None = None,
    source: RandomSource | None = None,
    max_attempts: int | None = None,
) -> list[str]:
    """Return ``count`` e-slip numbers, distinct unless ``unique`` is false."""

    return generate_many(
        generate_eslip, count, unique, seed=seed, source=source, max_attempts=max_attempts
    )
