"""Randomness sources for fixture generation.

Every generator draws floats in ``[0, 1)`` from an explicit
:class:`RandomSource` instead of the module-level :mod:`random` state.  Two
implementations are provided:

``LCGRandom``
    A tiny linear congruential generator using the recurrence
    ``v' = (v * 9301 + 49297) mod 233280`` and emitting ``v' / 233280``.  The
    same seed always yields the same sequence, which keeps fixtures stable
    across test runs and across implementations sharing the recurrence.

``PlatformRandom``
    A private :class:`random.Random` instance seeded from OS entropy.  It is
    not reproducible and is the fallback when no seed is supplied.

The LCG period is at most 233280, so a single seeded stream cannot produce
more distinct values than that.  Neither source is suitable for security
purposes.
"""

from __future__ import annotations

import math
import random
from collections.abc import Sequence
from typing import Final, Protocol, TypeVar, runtime_checkable

T = TypeVar("T")

LCG_MULTIPLIER: Final = 9301
LCG_INCREMENT: Final = 49297
LCG_MODULUS: Final = 233280


@runtime_checkable
class RandomSource(Protocol):
    """Capability supplying floats in ``[0, 1)``."""

    def next(self) -> float: ...


class LCGRandom:
    """Deterministic source driven by the 9301/49297/233280 recurrence."""

    def __init__(self, seed: int) -> None:
        self.seed = int(seed)
        self._value = self.seed

    def next(self) -> float:
        self._value = (self._value * LCG_MULTIPLIER + LCG_INCREMENT) % LCG_MODULUS
        return self._value / LCG_MODULUS

    def __repr__(self) -> str:
        return f"LCGRandom(seed={self.seed})"


class PlatformRandom:
    """Source backed by a private :class:`random.Random` instance."""

    def __init__(self, seed: int | None = None) -> None:
        self._rng = random.Random(seed)

    def next(self) -> float:
        return self._rng.random()


def draw_int(source: RandomSource, scale: float, offset: float = 0) -> int:
    """Return ``floor(r * scale + offset)`` for one draw ``r``."""

    return math.floor(source.next() * scale + offset)


def draw_choice(source: RandomSource, items: Sequence[T]) -> T:
    """Return one element of ``items`` using a single draw."""

    return items[math.floor(source.next() * len(items))]


def with_seed(seed: int | None = None) -> RandomSource:
    """Return a reproducible source for ``seed`` or a platform source.

    ``0`` is a valid seed; only ``None`` selects platform randomness.
    """

    if seed is None:
        return PlatformRandom()
    return LCGRandom(seed)


def resolve_source(source: RandomSource | None = None, seed: int | None = None) -> RandomSource:
    """Pick the source a generator call draws from.

    An explicit ``source`` wins over ``seed``; with neither a fresh platform
    source is created for the call.
    """

    if source is not None:
        return source
    return with_seed(seed)


__all__ = [
    "LCG_MULTIPLIER",
    "LCG_INCREMENT",
    "LCG_MODULUS",
    "RandomSource",
    "LCGRandom",
    "PlatformRandom",
    "draw_int",
    "draw_choice",
    "with_seed",
    "resolve_source",
]
