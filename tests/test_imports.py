"""Smoke tests for package import and version."""

import kra_testutils


def test_import_package() -> None:
    assert isinstance(kra_testutils, object)


def test_version() -> None:
    assert kra_testutils.__version__ == "0.1.0"


def test_public_api() -> None:
    for name in kra_testutils.__all__:
        assert hasattr(kra_testutils, name), name
