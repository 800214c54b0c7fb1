"""Taxpayer name generators.

Names are synthesized from small, hard coded corpora of Kenyan given names,
surnames and business tokens.  Three shapes are supported:

``individual``
    ``"<First> <Last>"`` (2 draws)
``company``
    ``"<Prefix> <Type>"`` optionally followed by a legal suffix (3 draws; the
    empty suffix drops the trailing token)
``partnership``
    ``"<Name> & <Name> Partners"`` (2 draws; both partners may coincide)

The corpora are part of the fixture contract: tests in consuming projects may
assert membership, so entries are only ever appended.
"""

from __future__ import annotations

from typing import Literal, get_args

from ..rng import RandomSource, draw_choice, resolve_source

__all__ = [
    "TaxpayerType",
    "TAXPAYER_TYPES",
    "FIRST_NAMES",
    "LAST_NAMES",
    "COMPANY_PREFIXES",
    "COMPANY_TYPES",
    "COMPANY_SUFFIXES",
    "PARTNER_NAMES",
    "generate_taxpayer_name",
]

TaxpayerType = Literal["individual", "company", "partnership"]
TAXPAYER_TYPES: tuple[str, ...] = get_args(TaxpayerType)

# -- Curated corpora -------------------------------------------------------

FIRST_NAMES: tuple[str, ...] = tuple(
    "John Jane David Mary Peter Sarah James Alice Michael Grace".split()
)

LAST_NAMES: tuple[str, ...] = tuple(
    "Mwangi Kamau Ochieng Wanjiku Otieno Njeri Kipchoge Mutua Omondi Wambui".split()
)

# Multi-word entries, so these are spelled out.
COMPANY_PREFIXES: tuple[str, ...] = (
    "Acme",
    "Kenya",
    "East Africa",
    "Nairobi",
    "Savannah",
    "Highland",
    "Coastal",
    "Rift Valley",
)

COMPANY_TYPES: tuple[str, ...] = (
    "Corporation",
    "Traders",
    "Solutions",
    "Enterprises",
    "Industries",
    "Coffee Co",
    "Logistics",
    "Services",
)

COMPANY_SUFFIXES: tuple[str, ...] = ("Ltd", "Limited", "Co", "")

PARTNER_NAMES: tuple[str, ...] = tuple("Mwangi Kamau Ochieng Kipchoge Mutua".split())


def _individual(rng: RandomSource) -> str:
    first = draw_choice(rng, FIRST_NAMES)
    last = draw_choice(rng, LAST_NAMES)
    return f"{first} {last}"


def _company(rng: RandomSource) -> str:
    prefix = draw_choice(rng, COMPANY_PREFIXES)
    kind = draw_choice(rng, COMPANY_TYPES)
    suffix = draw_choice(rng, COMPANY_SUFFIXES)
    return f"{prefix} {kind} {suffix}" if suffix else f"{prefix} {kind}"


def _partnership(rng: RandomSource) -> str:
    first = draw_choice(rng, PARTNER_NAMES)
    second = draw_choice(rng, PARTNER_NAMES)
    return f"{first} & {second} Partners"


def generate_taxpayer_name(
    taxpayer_type: TaxpayerType = "company",
    *,
    seed: int | None = None,
    source: RandomSource | None = None,
) -> str:
    """Return a taxpayer name of the requested shape."""

    if taxpayer_type == "individual":
        builder = _individual
    elif taxpayer_type == "company":
        builder = _company
    elif taxpayer_type == "partnership":
        builder = _partnership
    else:
        raise ValueError(f"unsupported taxpayer type: {taxpayer_type}")
    return builder(resolve_source(source, seed))
