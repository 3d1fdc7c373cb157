from datetime import date
from pathlib import Path
from typing import Any

import pytest
from pydantic import ValidationError

from quickadd.config import load_config


def test_env_today(monkeypatch: Any) -> None:
    monkeypatch.setenv("QUICKADD_TODAY", "2024-03-14")
    cfg = load_config()
    assert cfg.clock.today == date(2024, 3, 14)


def test_explicit_env_mapping_wins_over_process_env(monkeypatch: Any) -> None:
    monkeypatch.setenv("QUICKADD_TODAY", "2024-03-14")
    cfg = load_config(env={})
    assert cfg.clock.today is None


def test_custom_env_name(monkeypatch: Any, tmp_path: Path) -> None:
    cfg_file = tmp_path / "cfg.yml"
    cfg_file.write_text('clock:\n  today_env: "CUSTOM_TODAY"\n')
    monkeypatch.setenv("CUSTOM_TODAY", "2023-12-31")
    cfg = load_config(cfg_file)
    assert cfg.clock.today_env == "CUSTOM_TODAY"
    assert cfg.clock.today == date(2023, 12, 31)


def test_malformed_env_date() -> None:
    with pytest.raises(ValidationError):
        load_config(env={"QUICKADD_TODAY": "next tuesday"})
