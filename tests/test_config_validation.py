from pathlib import Path

import pytest
from pydantic import ValidationError

from quickadd.config import load_config


def test_threshold_out_of_range(tmp_path: Path) -> None:
    cfg_file = tmp_path / "bad.yml"
    cfg_file.write_text("thresholds:\n  date: 1.5\n")
    with pytest.raises(ValidationError):
        load_config(cfg_file, env={})


def test_negative_quiet_period(tmp_path: Path) -> None:
    cfg_file = tmp_path / "bad.yml"
    cfg_file.write_text("debounce:\n  quiet_period_ms: -5\n")
    with pytest.raises(ValidationError):
        load_config(cfg_file, env={})


def test_unknown_key(tmp_path: Path) -> None:
    cfg_file = tmp_path / "bad.yml"
    cfg_file.write_text("thresholds:\n  mood: 0.5\n")
    with pytest.raises(ValidationError):
        load_config(cfg_file, env={})


def test_partial_override_keeps_defaults(tmp_path: Path) -> None:
    cfg_file = tmp_path / "cfg.yml"
    cfg_file.write_text("thresholds:\n  priority: 0.5\n")
    cfg = load_config(cfg_file, env={})
    assert cfg.thresholds.priority == 0.5
    assert cfg.thresholds.date == 0.8
    assert cfg.debounce.quiet_period_ms == 200
