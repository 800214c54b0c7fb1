from __future__ import annotations

from typer.testing import CliRunner

from kra_testutils.cli import app


def test_global_help() -> None:
    runner = CliRunner()
    result = runner.invoke(app, ["--help"])
    assert result.exit_code == 0
    assert "generate" in result.stdout
    assert "validate" in result.stdout


def test_generate_help() -> None:
    runner = CliRunner()
    result = runner.invoke(app, ["generate", "--help"])
    assert "--count" in result.stdout
    assert "--seed" in result.stdout
    assert "--config" in result.stdout
    assert "--unique" in result.stdout
