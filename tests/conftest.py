from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from typing import Any

import pytest

from kra_testutils.config import ConfigModel, load_config
from kra_testutils.utils.logging import ROOT_LOGGER_NAME


class ScriptedSource:
    """Randomness source replaying a fixed list of draws."""

    def __init__(self, values: Iterable[float]) -> None:
        self.values = list(values)
        self.calls = 0

    def next(self) -> float:
        value = self.values[self.calls % len(self.values)]
        self.calls += 1
        return value


@pytest.fixture
def scripted() -> type[ScriptedSource]:
    return ScriptedSource


@pytest.fixture
def cfg(monkeypatch: Any) -> ConfigModel:
    monkeypatch.delenv("KRA_TESTUTILS_SEED", raising=False)
    return load_config(env={})


@pytest.fixture(autouse=True)
def _reset_package_logging() -> Iterator[None]:
    """Drop handlers the CLI attaches so they never outlive a test."""

    yield
    root = logging.getLogger(ROOT_LOGGER_NAME)
    for handler in list(root.handlers):
        if not isinstance(handler, logging.NullHandler):
            root.removeHandler(handler)
    root.setLevel(logging.NOTSET)
