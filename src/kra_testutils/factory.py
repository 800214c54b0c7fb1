"""Config-driven fixture factory.

:class:`FixtureFactory` binds a :class:`~kra_testutils.config.ConfigModel`
to a single :class:`~kra_testutils.rng.RandomSource`.  Every method draws from
that one source, so a factory built from a seed yields the same sequence of
fixtures on every run, while the free functions in
:mod:`kra_testutils.generators` stay available for one-off values.

Defaults such as the email domain, the amount bounds or the date window are
read from the configuration rather than hard coded at call sites.
"""

from __future__ import annotations

from collections.abc import Callable
from datetime import date, datetime

from .config import ConfigModel, load_config
from .generators import bulk, contact, identifiers, names, values
from .generators.names import TaxpayerType
from .rng import RandomSource, with_seed


class FixtureFactory:
    """Produce KRA test fixtures from one shared randomness source."""

    def __init__(
        self,
        cfg: ConfigModel | None = None,
        *,
        seed: int | None = None,
        source: RandomSource | None = None,
    ) -> None:
        """Initialize the factory.

        Parameters
        ----------
        cfg:
            Configuration providing defaults.  Loaded via
            :func:`~kra_testutils.config.load_config` when omitted.
        seed:
            Seed for a reproducible stream.  Falls back to ``cfg.seed.value``.
        source:
            Explicit source; takes precedence over any seed.
        """

        self.cfg: ConfigModel = cfg if cfg is not None else load_config()
        if source is None:
            source = with_seed(seed if seed is not None else self.cfg.seed.value)
        self.source: RandomSource = source

    # -- Identifiers -------------------------------------------------------

    def pin(self) -> str:
        return identifiers.generate_pin(source=self.source)

    def tcc(self) -> str:
        return identifiers.generate_tcc(source=self.source)

    def eslip(self) -> str:
        return identifiers.generate_eslip(source=self.source)

    def obligation_id(self) -> str:
        return identifiers.generate_obligation_id(source=self.source)

    def tax_period(
        self, years_ago: int = 0, month: int | None = None, *, today: date | None = None
    ) -> str:
        return identifiers.generate_tax_period(years_ago, month, source=self.source, today=today)

    # -- Contacts and names ------------------------------------------------

    def phone_number(self) -> str:
        return contact.generate_phone_number(source=self.source)

    def email(self, domain: str | None = None) -> str:
        """Return an email on ``domain`` or the configured default domain."""

        return contact.generate_email(domain or self.cfg.email.domain, source=self.source)

    def taxpayer_name(self, taxpayer_type: TaxpayerType | None = None) -> str:
        kind = taxpayer_type or self.cfg.taxpayer.default_type
        return names.generate_taxpayer_name(kind, source=self.source)

    # -- Values ------------------------------------------------------------

    def amount(
        self,
        min_amount: float | None = None,
        max_amount: float | None = None,
        decimals: int | None = None,
    ) -> float:
        """Return an amount using configured bounds for omitted arguments."""

        settings = self.cfg.amount
        return values.generate_amount(
            settings.min if min_amount is None else min_amount,
            settings.max if max_amount is None else max_amount,
            settings.decimals if decimals is None else decimals,
            source=self.source,
        )

    def date(
        self,
        days_ago: float | None = None,
        days_future: float | None = None,
        *,
        now: datetime | None = None,
    ) -> datetime:
        """Return a datetime inside the configured (or given) window."""

        settings = self.cfg.date
        return values.generate_date(
            settings.days_ago if days_ago is None else days_ago,
            settings.days_future if days_future is None else days_future,
            source=self.source,
            now=now,
        )

    # -- Bulk --------------------------------------------------------------

    def _many(
        self, generator: Callable[..., str], count: int, unique: bool | None
    ) -> list[str]:
        uniq = self.cfg.bulk.unique if unique is None else unique
        return bulk.generate_many(
            generator,
            count,
            uniq,
            source=self.source,
            max_attempts=self.cfg.bulk.max_attempts(count),
        )

    def pins(self, count: int, unique: bool | None = None) -> list[str]:
        return self._many(identifiers.generate_pin, count, unique)

    def tccs(self, count: int, unique: bool | None = None) -> list[str]:
        return self._many(identifiers.generate_tcc, count, unique)

    def eslips(self, count: int, unique: bool | None = None) -> list[str]:
        return self._many(identifiers.generate_eslip, count, unique)


__all__ = ["FixtureFactory"]
