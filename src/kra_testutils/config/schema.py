"""Typed configuration schema and loader for the fixture generators."""

from __future__ import annotations

import os
from collections.abc import Mapping
from importlib import resources as importlib_resources
from pathlib import Path
from typing import Annotated, Any, Literal

import yaml
from pydantic import BaseModel, ConfigDict, Field

from ..utils.errors import ConfigError

NonNegativeInt = Annotated[int, Field(ge=0)]
PositiveInt = Annotated[int, Field(ge=1)]

# ---------------------------------------------------------------------------
# Pydantic models
# ---------------------------------------------------------------------------


class SeedSettings(BaseModel):
    """Where the default seed comes from."""

    env: str
    value: int | None = None

    model_config = ConfigDict(extra="forbid")


class EmailSettings(BaseModel):
    """Email generator defaults."""

    domain: str

    model_config = ConfigDict(extra="forbid")


class AmountSettings(BaseModel):
    """Amount generator defaults."""

    min: float
    max: float
    decimals: NonNegativeInt = 2

    model_config = ConfigDict(extra="forbid")


class DateSettings(BaseModel):
    """Date window defaults, in days relative to now."""

    days_ago: float
    days_future: float

    model_config = ConfigDict(extra="forbid")


class TaxpayerSettings(BaseModel):
    """Taxpayer name defaults."""

    default_type: Literal["individual", "company", "partnership"]

    model_config = ConfigDict(extra="forbid")


class BulkSettings(BaseModel):
    """Bulk generation behaviour."""

    unique: bool
    attempts_per_item: PositiveInt
    min_attempts: PositiveInt

    model_config = ConfigDict(extra="forbid")

    def max_attempts(self, count: int) -> int:
        """Return the draw budget for a unique batch of ``count`` values."""

        return max(count * self.attempts_per_item, self.min_attempts)


class ConfigModel(BaseModel):
    """Top-level configuration model."""

    schema_version: PositiveInt
    seed: SeedSettings
    email: EmailSettings
    amount: AmountSettings
    date: DateSettings
    taxpayer: TaxpayerSettings
    bulk: BulkSettings

    model_config = ConfigDict(extra="forbid")


# ---------------------------------------------------------------------------
# Loader utilities
# ---------------------------------------------------------------------------


def deep_merge_dicts(a: dict[str, Any], b: dict[str, Any]) -> dict[str, Any]:
    """Recursively merge mapping ``b`` onto ``a`` returning a new dict."""

    result: dict[str, Any] = dict(a)
    for key, b_val in b.items():
        if key in result and isinstance(result[key], dict) and isinstance(b_val, dict):
            result[key] = deep_merge_dicts(result[key], b_val)
        else:
            result[key] = b_val
    return result


def load_config(
    path: str | os.PathLike[str] | None = None,
    *,
    env: Mapping[str, str] | None = None,
) -> ConfigModel:
    """Load configuration from defaults and optional user overrides.

    Precedence of sources: package ``defaults.yml`` < user-provided YAML <
    environment variable named by ``seed.env``.
    """

    with (
        importlib_resources.files("kra_testutils.config")
        .joinpath("defaults.yml")
        .open("r", encoding="utf-8") as f
    ):
        defaults = yaml.safe_load(f) or {}

    if path is not None:
        with Path(path).open("r", encoding="utf-8") as f:
            overrides = yaml.safe_load(f) or {}
        merged = deep_merge_dicts(defaults, overrides)
    else:
        merged = defaults

    cfg = ConfigModel.model_validate(merged)

    environ = env if env is not None else os.environ
    raw_seed = environ.get(cfg.seed.env)
    if raw_seed is not None and raw_seed.strip():
        try:
            cfg.seed.value = int(raw_seed.strip())
        except ValueError as exc:
            raise ConfigError(f"{cfg.seed.env} must be an integer, got {raw_seed!r}") from exc

    return cfg


__all__ = [
    "ConfigModel",
    "SeedSettings",
    "EmailSettings",
    "AmountSettings",
    "DateSettings",
    "TaxpayerSettings",
    "BulkSettings",
    "deep_merge_dicts",
    "load_config",
]
