"""Randomized, format-valid KRA fixtures for test suites.

The free functions in :mod:`kra_testutils.generators` produce one value per
call; :class:`~kra_testutils.factory.FixtureFactory` binds configuration
defaults and a single randomness source together.  Validators live in
:mod:`kra_testutils.validators`.
"""

from .factory import FixtureFactory
from .generators import (
    format_date,
    generate_amount,
    generate_date,
    generate_email,
    generate_eslip,
    generate_eslips,
    generate_many,
    generate_obligation_id,
    generate_phone_number,
    generate_pin,
    generate_pins,
    generate_tax_period,
    generate_taxpayer_name,
    generate_tcc,
    generate_tccs,
)
from .rng import LCGRandom, PlatformRandom, RandomSource, with_seed
from .utils.errors import ConfigError, FixtureError, UniquenessExhaustedError
from .validators import (
    validate_eslip_format,
    validate_obligation_id_format,
    validate_phone_number_format,
    validate_pin_format,
    validate_tax_period_format,
    validate_tcc_format,
)

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "ConfigError",
    "FixtureError",
    "FixtureFactory",
    "LCGRandom",
    "PlatformRandom",
    "RandomSource",
    "UniquenessExhaustedError",
    "format_date",
    "generate_amount",
    "generate_date",
    "generate_email",
    "generate_eslip",
    "generate_eslips",
    "generate_many",
    "generate_obligation_id",
    "generate_phone_number",
    "generate_pin",
    "generate_pins",
    "generate_tax_period",
    "generate_taxpayer_name",
    "generate_tcc",
    "generate_tccs",
    "validate_eslip_format",
    "validate_obligation_id_format",
    "validate_phone_number_format",
    "validate_pin_format",
    "validate_tax_period_format",
    "validate_tcc_format",
    "with_seed",
]
