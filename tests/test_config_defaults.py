from kra_testutils.config import load_config


def test_default_values() -> None:
    cfg = load_config(env={})
    assert cfg.schema_version == 1
    assert cfg.seed.env == "KRA_TESTUTILS_SEED"
    assert cfg.seed.value is None
    assert cfg.email.domain == "example.com"
    assert (cfg.amount.min, cfg.amount.max, cfg.amount.decimals) == (1000, 1000000, 2)
    assert (cfg.date.days_ago, cfg.date.days_future) == (30, 0)
    assert cfg.taxpayer.default_type == "company"
    assert cfg.bulk.unique is True


def test_attempt_budget() -> None:
    cfg = load_config(env={})
    assert cfg.bulk.max_attempts(1) == 1000
    assert cfg.bulk.max_attempts(500) == 50000
