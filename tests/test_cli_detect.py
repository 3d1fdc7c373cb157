from __future__ import annotations

import json
from pathlib import Path

from typer.testing import CliRunner

from quickadd.cli import app


def test_detect_json() -> None:
    runner = CliRunner()
    result = runner.invoke(
        app, ["detect", "call mom tomorrow at 5pm!!!", "--json", "--today", "2024-03-14"]
    )
    assert result.exit_code == 0
    payload = json.loads(result.stdout)
    assert payload["line"] == 1
    kinds = [d["kind"] for d in payload["detections"]]
    assert kinds == ["DATE", "TIME", "PRIORITY"]
    assert payload["detections"][0]["value"] == "2024-03-15"
    assert payload["detections"][1]["value"] == "17:00"
    assert payload["detections"][2]["value"] == "HIGH"


def test_detect_table_with_highlight() -> None:
    runner = CliRunner()
    result = runner.invoke(
        app, ["detect", "gym today #health", "--today", "2024-03-14", "--highlight"]
    )
    assert result.exit_code == 0
    assert "[today]{date}" in result.stdout
    assert "CATEGORY" in result.stdout
    assert "2024-03-14" in result.stdout


def test_detect_nothing_found() -> None:
    runner = CliRunner()
    result = runner.invoke(app, ["detect", "water plants"])
    assert result.exit_code == 0
    assert "(nothing detected)" in result.stdout


def test_detect_file_lines(tmp_path: Path) -> None:
    in_path = tmp_path / "tasks.txt"
    in_path.write_text("run 5k today\n\nread 30min\n", encoding="utf-8")
    runner = CliRunner()
    result = runner.invoke(
        app, ["detect", "--in", str(in_path), "--json", "--today", "2024-03-14"]
    )
    assert result.exit_code == 0
    lines = [json.loads(line) for line in result.stdout.splitlines()]
    assert [item["line"] for item in lines] == [1, 2]
    assert lines[1]["detections"][0]["kind"] == "DURATION"
    assert lines[1]["detections"][0]["value"] == 30


def test_draft_json() -> None:
    runner = CliRunner()
    result = runner.invoke(
        app, ["draft", "submit report tomorrow at 9am #work!!!", "--json", "--today", "2024-03-14"]
    )
    assert result.exit_code == 0
    data = json.loads(result.stdout)
    assert data["title"] == "submit report tomorrow at 9am #work!!!"
    assert data["priority"] == "HIGH"
    assert data["scheduled_date"] == "2024-03-15"
    assert data["scheduled_time"] == "09:00"
    assert data["categories"] == ["Work"]
    assert data["estimated_minutes"] is None


def test_draft_uses_config_thresholds(tmp_path: Path) -> None:
    cfg = tmp_path / "cfg.yml"
    cfg.write_text("thresholds:\n  duration: 0.5\n", encoding="utf-8")
    runner = CliRunner()
    result = runner.invoke(app, ["draft", "read 2h", "--config", str(cfg)])
    assert result.exit_code == 0
    assert "estimated_minutes: 120" in result.stdout
