"""Typed configuration schema and loader for the quickadd package."""

from __future__ import annotations

import os
from collections.abc import Mapping
from datetime import date
from importlib import resources as importlib_resources
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, confloat, conint

# ---------------------------------------------------------------------------
# Pydantic models
# ---------------------------------------------------------------------------


class ThresholdSettings(BaseModel):
    """Exclusive confidence floors used when applying detections to a draft."""

    date: confloat(ge=0.0, le=1.0) = 0.8
    time: confloat(ge=0.0, le=1.0) = 0.8
    priority: confloat(ge=0.0, le=1.0) = 0.9
    category: confloat(ge=0.0, le=1.0) = 0.9
    duration: confloat(ge=0.0, le=1.0) = 0.9

    model_config = ConfigDict(extra="forbid")


class DebounceSettings(BaseModel):
    """Quiet period applied before re-running detection on new input."""

    quiet_period_ms: conint(ge=0) = 200

    model_config = ConfigDict(extra="forbid")

    @property
    def quiet_period(self) -> float:
        """Return the quiet period in seconds."""

        return self.quiet_period_ms / 1000.0


class ClockSettings(BaseModel):
    """Reference date settings for relative date keywords."""

    today_env: str
    today: date | None = None

    model_config = ConfigDict(extra="forbid")


class ConfigModel(BaseModel):
    """Top-level configuration model."""

    schema_version: conint(ge=1)
    thresholds: ThresholdSettings
    debounce: DebounceSettings
    clock: ClockSettings

    model_config = ConfigDict(extra="forbid")


# ---------------------------------------------------------------------------
# Loader utilities
# ---------------------------------------------------------------------------


def deep_merge_dicts(a: dict[str, Any], b: dict[str, Any]) -> dict[str, Any]:
    """Recursively merge mapping ``b`` onto ``a`` returning a new dict."""

    result: dict[str, Any] = dict(a)
    for key, b_val in b.items():
        if key in result and isinstance(result[key], dict) and isinstance(b_val, dict):
            result[key] = deep_merge_dicts(result[key], b_val)
        else:
            result[key] = b_val
    return result


def load_config(
    path: str | os.PathLike[str] | None = None,
    *,
    env: Mapping[str, str] | None = None,
) -> ConfigModel:
    """Load configuration from defaults and optional user overrides.

    Precedence of sources: package ``defaults.yml`` < user-provided YAML <
    environment variable named by ``clock.today_env``.  The environment value
    must be an ISO date (``YYYY-MM-DD``); anything else raises
    :class:`pydantic.ValidationError`.
    """

    with (
        importlib_resources.files("quickadd.config")
        .joinpath("defaults.yml")
        .open("r", encoding="utf-8") as f
    ):
        defaults = yaml.safe_load(f) or {}

    if path is not None:
        with Path(path).open("r", encoding="utf-8") as f:
            overrides = yaml.safe_load(f) or {}
        merged = deep_merge_dicts(defaults, overrides)
    else:
        merged = defaults

    cfg = ConfigModel.model_validate(merged)

    environ = env if env is not None else os.environ
    today_env = cfg.clock.today_env
    if environ.get(today_env):
        clock = ClockSettings.model_validate(
            {"today_env": today_env, "today": environ[today_env]}
        )
        cfg = cfg.model_copy(update={"clock": clock})

    return cfg


__all__ = [
    "ConfigModel",
    "ThresholdSettings",
    "DebounceSettings",
    "ClockSettings",
    "deep_merge_dicts",
    "load_config",
]
