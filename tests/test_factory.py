from __future__ import annotations

from datetime import date, datetime, timedelta

import pytest

from kra_testutils import FixtureFactory
from kra_testutils.config import ConfigModel
from kra_testutils.generators import generate_pin
from kra_testutils.rng import LCGRandom, PlatformRandom
from kra_testutils.utils.errors import UniquenessExhaustedError
from kra_testutils.validators import (
    validate_eslip_format,
    validate_obligation_id_format,
    validate_phone_number_format,
    validate_pin_format,
    validate_tax_period_format,
    validate_tcc_format,
)


def test_seeded_factory_is_reproducible(cfg: ConfigModel) -> None:
    a = FixtureFactory(cfg, seed=42)
    b = FixtureFactory(cfg, seed=42)
    assert [a.pin(), a.tcc(), a.email()] == [b.pin(), b.tcc(), b.email()]


def test_first_draw_matches_free_function(cfg: ConfigModel) -> None:
    assert FixtureFactory(cfg, seed=12345).pin() == generate_pin(seed=12345)


def test_unseeded_factory_uses_platform(cfg: ConfigModel) -> None:
    assert isinstance(FixtureFactory(cfg).source, PlatformRandom)


def test_seed_from_config(cfg: ConfigModel) -> None:
    seeded = cfg.model_copy(update={"seed": cfg.seed.model_copy(update={"value": 12345})})
    factory = FixtureFactory(seeded)
    assert isinstance(factory.source, LCGRandom)
    assert factory.pin() == "P471844135A"


def test_explicit_seed_overrides_config(cfg: ConfigModel) -> None:
    seeded = cfg.model_copy(update={"seed": cfg.seed.model_copy(update={"value": 1})})
    assert FixtureFactory(seeded, seed=12345).pin() == "P471844135A"


def test_explicit_source(cfg: ConfigModel, scripted: type) -> None:
    factory = FixtureFactory(cfg, seed=1, source=scripted([0.0]))
    assert factory.pin() == "P100000000A"


def test_every_value_validates(cfg: ConfigModel) -> None:
    f = FixtureFactory(cfg, seed=7)
    for _ in range(25):
        assert validate_pin_format(f.pin())
        assert validate_tcc_format(f.tcc())
        assert validate_eslip_format(f.eslip())
        assert validate_obligation_id_format(f.obligation_id())
        assert validate_tax_period_format(f.tax_period())
        assert validate_phone_number_format(f.phone_number())


def test_config_defaults_flow_through(cfg: ConfigModel) -> None:
    f = FixtureFactory(cfg, seed=3)
    assert f.email().endswith("@example.com")
    assert f.email("kra.go.ke").endswith("@kra.go.ke")
    amount = f.amount()
    assert cfg.amount.min <= amount <= cfg.amount.max
    assert 10 <= f.amount(10, 20, 0) <= 20
    assert " " in f.taxpayer_name()


def test_custom_config_defaults(cfg: ConfigModel) -> None:
    custom = cfg.model_copy(
        update={
            "email": cfg.email.model_copy(update={"domain": "test.local"}),
            "taxpayer": cfg.taxpayer.model_copy(update={"default_type": "partnership"}),
        }
    )
    f = FixtureFactory(custom, seed=5)
    assert f.email().endswith("@test.local")
    assert f.taxpayer_name().endswith(" Partners")
    assert not f.taxpayer_name("individual").endswith(" Partners")


def test_date_uses_configured_window(cfg: ConfigModel) -> None:
    now = datetime(2024, 6, 1)
    f = FixtureFactory(cfg, seed=11)
    value = f.date(now=now)
    assert now - timedelta(days=cfg.date.days_ago) <= value <= now
    assert f.date(0, 0, now=now) == now


def test_tax_period_month(cfg: ConfigModel) -> None:
    f = FixtureFactory(cfg, seed=1)
    assert f.tax_period(1, 6, today=date(2025, 1, 1)) == "202406"


def test_bulk_methods(cfg: ConfigModel) -> None:
    f = FixtureFactory(cfg, seed=21)
    pins = f.pins(30)
    assert len(set(pins)) == 30
    assert len(f.tccs(10, unique=False)) == 10
    assert len(set(f.eslips(10))) == 10


def test_bulk_uses_configured_budget(cfg: ConfigModel) -> None:
    tight = cfg.model_copy(
        update={
            "bulk": cfg.bulk.model_copy(update={"attempts_per_item": 1, "min_attempts": 1})
        }
    )

    class Constant:
        def next(self) -> float:
            return 0.5

    f = FixtureFactory(tight, source=Constant())
    with pytest.raises(UniquenessExhaustedError):
        f.pins(2)
