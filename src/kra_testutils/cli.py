"""Typer-based command line interface for the fixture generators.

``kra-fixtures generate`` prints one generated value per line and
``kra-fixtures validate`` checks a single value against its format.

Exit codes
----------
0 success
1 value failed validation
4 configuration error
5 uniqueness budget exhausted
"""

from __future__ import annotations

import os
import sys
from collections.abc import Callable
from enum import Enum
from pathlib import Path
from typing import NoReturn, Optional

import typer
import yaml
from pydantic import ValidationError

from . import validators
from .config import ConfigModel, load_config
from .factory import FixtureFactory
from .generators import bulk
from .generators.values import format_date
from .utils.errors import ConfigError, UniquenessExhaustedError
from .utils.logging import configure_logging, get_logger

if not sys.stdout.isatty():  # pragma: no cover - CLI test context
    os.environ.setdefault("NO_COLOR", "1")
    os.environ.setdefault("RICH_DISABLE_NO_COLOR", "1")

app = typer.Typer(
    name="kra-fixtures",
    help="Generate and validate KRA test fixtures. Use 'kra-fixtures generate pin' to start.",
)

logger = get_logger(__name__)


class FixtureKind(str, Enum):
    pin = "pin"
    tcc = "tcc"
    eslip = "eslip"
    obligation = "obligation"
    period = "period"
    phone = "phone"
    email = "email"
    amount = "amount"
    date = "date"
    taxpayer_name = "name"


class FormatKind(str, Enum):
    pin = "pin"
    tcc = "tcc"
    eslip = "eslip"
    obligation = "obligation"
    period = "period"
    phone = "phone"


class TaxpayerKind(str, Enum):
    individual = "individual"
    company = "company"
    partnership = "partnership"


_VALIDATORS: dict[FormatKind, Callable[[str], bool]] = {
    FormatKind.pin: validators.validate_pin_format,
    FormatKind.tcc: validators.validate_tcc_format,
    FormatKind.eslip: validators.validate_eslip_format,
    FormatKind.obligation: validators.validate_obligation_id_format,
    FormatKind.period: validators.validate_tax_period_format,
    FormatKind.phone: validators.validate_phone_number_format,
}


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _safe_exit(code: int, msg: str | None = None) -> NoReturn:
    """Exit the CLI with ``code`` emitting ``msg`` to stderr if provided."""

    if msg:
        typer.echo(msg, err=True)
    raise typer.Exit(code)


def _load(config_path: Path | None) -> ConfigModel:
    try:
        return load_config(config_path)
    except (ValidationError, ConfigError, yaml.YAMLError, OSError) as exc:
        _safe_exit(4, str(exc).splitlines()[0])


def _producer(
    factory: FixtureFactory, kind: FixtureKind, taxpayer_type: TaxpayerKind | None
) -> Callable[..., str]:
    """Return a ``generate_many`` compatible callable bound to ``factory``."""

    decimals = factory.cfg.amount.decimals
    producers: dict[FixtureKind, Callable[[], str]] = {
        FixtureKind.pin: factory.pin,
        FixtureKind.tcc: factory.tcc,
        FixtureKind.eslip: factory.eslip,
        FixtureKind.obligation: factory.obligation_id,
        FixtureKind.period: factory.tax_period,
        FixtureKind.phone: factory.phone_number,
        FixtureKind.email: factory.email,
        FixtureKind.amount: lambda: f"{factory.amount():.{decimals}f}",
        FixtureKind.date: lambda: format_date(factory.date()),
        FixtureKind.taxpayer_name: lambda: factory.taxpayer_name(
            taxpayer_type.value if taxpayer_type is not None else None
        ),
    }
    produce = producers[kind]
    # Every draw goes through the factory's own source.
    return lambda source=None: produce()


@app.callback()
def main() -> None:
    """Entry point for the kra-fixtures command group."""
    pass


@app.command()
def generate(  # noqa: PLR0913
    kind: FixtureKind = typer.Argument(..., help="Kind of fixture to generate"),  # noqa: B008
    count: int = typer.Option(1, "--count", "-n", help="Number of values"),  # noqa: B008
    seed: Optional[int] = typer.Option(  # noqa: B008
        None, "--seed", help="Seed for a reproducible sequence"
    ),
    unique: bool | None = typer.Option(  # noqa: B008
        None,
        "--unique/--allow-duplicates",
        help="Require distinct values (defaults to the configured policy)",
    ),
    taxpayer_type: Optional[TaxpayerKind] = typer.Option(  # noqa: B008
        None, "--taxpayer-type", help="Shape of generated names"
    ),
    config_path: Optional[Path] = typer.Option(  # noqa: B008
        None, "--config", help="YAML config to override defaults"
    ),
    verbose: bool = typer.Option(  # noqa: B008
        False, "--verbose", "-v", help="Emit debug logging to stderr"
    ),
) -> None:
    """Print ``count`` generated values of ``kind``, one per line."""

    configure_logging(verbose)
    cfg = _load(config_path)
    factory = FixtureFactory(cfg, seed=seed)
    uniq = cfg.bulk.unique if unique is None else unique
    logger.debug("generating %d %s values (unique=%s)", count, kind.value, uniq)

    try:
        produced = bulk.generate_many(
            _producer(factory, kind, taxpayer_type),
            count,
            uniq,
            source=factory.source,
            max_attempts=cfg.bulk.max_attempts(count),
        )
    except UniquenessExhaustedError as exc:
        _safe_exit(5, str(exc))

    for value in produced:
        typer.echo(value)


@app.command()
def validate(
    kind: FormatKind = typer.Argument(..., help="Format to check against"),  # noqa: B008
    value: str = typer.Argument(..., help="Value to validate"),  # noqa: B008
) -> None:
    """Exit 0 when ``value`` matches the ``kind`` format, 1 otherwise."""

    if _VALIDATORS[kind](value):
        typer.echo("valid")
        return
    _safe_exit(1, f"invalid {kind.value}: {value}")
