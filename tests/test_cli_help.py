from __future__ import annotations

from typer.testing import CliRunner

from quickadd.cli import app


def test_global_help() -> None:
    runner = CliRunner()
    result = runner.invoke(app, ["--help"])
    assert result.exit_code == 0
    assert "detect" in result.stdout
    assert "draft" in result.stdout


def test_detect_help() -> None:
    runner = CliRunner()
    result = runner.invoke(app, ["detect", "--help"])
    assert "--in" in result.stdout
    assert "--json" in result.stdout
    assert "--today" in result.stdout
    assert "--config" in result.stdout
    assert "--highlight" in result.stdout
