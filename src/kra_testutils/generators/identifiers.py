"""KRA identifier generators.

Each generator draws a fixed number of values from a
:class:`~kra_testutils.rng.RandomSource` in a fixed order, so the same seed
always reproduces the same identifier:

- ``generate_pin``: 2 draws, ``P`` + 9 digits + letter
- ``generate_tcc``: 1 draw, ``TCC`` + 6 digits
- ``generate_eslip``: 1 draw, ``ESLIP`` + 9 digits
- ``generate_obligation_id``: 1 draw, ``OBL`` + 3 digits
- ``generate_tax_period``: 0 or 1 draw, ``YYYYMM``

The TCC and e-slip validators accept longer digit runs than these
generators produce; generated values are always a subset of what the
validators accept.
"""

from __future__ import annotations

import string
from datetime import date

from ..rng import RandomSource, draw_choice, draw_int, resolve_source

__all__ = [
    "generate_pin",
    "generate_tcc",
    "generate_eslip",
    "generate_obligation_id",
    "generate_tax_period",
]

_LETTERS = string.ascii_uppercase


def _nine_digits(source: RandomSource) -> str:
    return str(draw_int(source, 900000000, 100000000))


def generate_pin(*, seed: int | None = None, source: RandomSource | None = None) -> str:
    """Return a PIN such as ``P471844135A``."""

    rng = resolve_source(source, seed)
    digits = _nine_digits(rng)
    letter = draw_choice(rng, _LETTERS)
    return f"P{digits}{letter}"


def generate_tcc(*, seed: int | None = None, source: RandomSource | None = None) -> str:
    """Return a Tax Compliance Certificate number such as ``TCC471844``."""

    rng = resolve_source(source, seed)
    digits = str(draw_int(rng, 90000000, 10000000))[:6]
    return f"TCC{digits}"


def generate_eslip(*, seed: int | None = None, source: RandomSource | None = None) -> str:
    """Return an e-slip payment reference such as ``ESLIP471844135``."""

    rng = resolve_source(source, seed)
    return f"ESLIP{_nine_digits(rng)}"


def generate_obligation_id(
    *, seed: int | None = None, source: RandomSource | None = None
) -> str:
    """Return an obligation identifier between ``OBL001`` and ``OBL999``."""

    rng = resolve_source(source, seed)
    num = draw_int(rng, 999, 1)
    return f"OBL{num:03d}"


def generate_tax_period(
    years_ago: int = 0,
    month: int | None = None,
    *,
    seed: int | None = None,
    source: RandomSource | None = None,
    today: date | None = None,
) -> str:
    """Return a tax period in ``YYYYMM`` form.

    ``years_ago`` counts back from the current year.  A falsy ``month``
    picks one at random from the resolved source, so seeded calls are
    reproducible.  Explicit months outside 1-12 and years outside
    1-9999 raise ``ValueError``; years before 1000 are zero padded.
    """

    current = today or date.today()
    year = current.year - years_ago
    if not 1 <= year <= 9999:
        raise ValueError(f"tax period year must be between 1 and 9999, got {year}")
    if month:
        if not 1 <= month <= 12:
            raise ValueError(f"month must be between 1 and 12, got {month}")
        mon = month
    else:
        mon = draw_int(resolve_source(source, seed), 12, 1)
    return f"{year:04d}{mon:02d}"
