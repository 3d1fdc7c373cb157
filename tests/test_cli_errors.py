from __future__ import annotations

from pathlib import Path

from typer.testing import CliRunner

from quickadd.cli import app


def test_missing_file(tmp_path: Path) -> None:
    missing = tmp_path / "missing.txt"
    runner = CliRunner()
    result = runner.invoke(app, ["detect", "--in", str(missing)])
    assert result.exit_code == 3
    assert str(missing) in result.stderr


def test_no_input() -> None:
    runner = CliRunner()
    result = runner.invoke(app, ["detect"])
    assert result.exit_code == 2


def test_bad_today() -> None:
    runner = CliRunner()
    result = runner.invoke(app, ["detect", "pay rent today", "--today", "14/03/2024"])
    assert result.exit_code == 2
    assert "--today" in result.stderr


def test_bad_config(tmp_path: Path) -> None:
    bad_cfg = tmp_path / "bad.yml"
    bad_cfg.write_text("unknown: true\n", encoding="utf-8")
    runner = CliRunner()
    result = runner.invoke(app, ["draft", "pay rent", "--config", str(bad_cfg)])
    assert result.exit_code == 4


def test_missing_config(tmp_path: Path) -> None:
    runner = CliRunner()
    result = runner.invoke(
        app, ["detect", "pay rent", "--config", str(tmp_path / "nope.yml")]
    )
    assert result.exit_code == 4
