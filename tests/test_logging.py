from __future__ import annotations

import logging

from kra_testutils.utils.logging import ROOT_LOGGER_NAME, configure_logging, get_logger


def test_get_logger_namespacing() -> None:
    assert get_logger("bulk").name == "kra_testutils.bulk"
    assert get_logger("kra_testutils.rng").name == "kra_testutils.rng"
    assert get_logger(ROOT_LOGGER_NAME).name == ROOT_LOGGER_NAME


def test_configure_logging_idempotent() -> None:
    root = logging.getLogger(ROOT_LOGGER_NAME)
    before = len(root.handlers)
    configure_logging(verbose=True)
    after_first = len(root.handlers)
    configure_logging(verbose=False)
    assert len(root.handlers) == after_first
    assert after_first <= before + 1
    assert root.level == logging.WARNING
