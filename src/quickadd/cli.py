"""Typer-based command line interface for the task attribute detectors.

``quickadd detect`` prints what the detectors find in a task line (or in
every line of a text file); ``quickadd draft`` shows the task draft that
results from applying those detections with the configured thresholds.

Exit codes
----------
0 success
2 usage error (no input, malformed ``--today``)
3 I/O error (missing or unreadable input file)
4 configuration error
"""

from __future__ import annotations

import json
import os
import sys
from datetime import date
from pathlib import Path
from typing import NoReturn, Optional

import typer
import yaml
from pydantic import ValidationError

from .config import ConfigModel, load_config
from .detect import detect as run_detect
from .detect.base import Detection
from .draft import build_draft
from .highlight import highlight as render_highlight
from .utils.logging import configure_logging, get_logger

if not sys.stdout.isatty():  # pragma: no cover - CLI test context
    os.environ.setdefault("NO_COLOR", "1")
    os.environ.setdefault("RICH_DISABLE_NO_COLOR", "1")

app = typer.Typer(
    name="quickadd",
    help="Detect dates, times, priorities, categories and durations in task text. "
    "Use 'quickadd detect' or 'quickadd draft'.",
)

log = get_logger(__name__)


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _safe_exit(code: int, msg: str | None = None) -> NoReturn:
    """Exit the CLI with ``code`` emitting ``msg`` to stderr if provided."""

    if msg:
        typer.echo(msg, err=True)
    raise typer.Exit(code)


def _load(config_path: Path | None) -> ConfigModel:
    try:
        return load_config(config_path)
    except (ValidationError, yaml.YAMLError, OSError, ValueError) as exc:
        _safe_exit(4, str(exc).splitlines()[0])


def _resolve_today(raw: str | None, cfg: ConfigModel) -> date | None:
    if raw is None:
        return cfg.clock.today
    try:
        return date.fromisoformat(raw)
    except ValueError:
        _safe_exit(2, f"--today expects YYYY-MM-DD, got {raw!r}")


def _read_lines(text: str | None, in_path: Path | None) -> list[str]:
    if in_path is not None:
        try:
            content = in_path.read_text(encoding="utf-8-sig")
        except (OSError, UnicodeDecodeError) as exc:
            _safe_exit(3, f"cannot read {in_path}: {exc}")
        return [line for line in content.splitlines() if line.strip()]
    if text is None:
        _safe_exit(2, "provide TEXT or --in FILE")
    return [text or ""]


def _format_table(detections: list[Detection]) -> list[str]:
    if not detections:
        return ["  (nothing detected)"]
    rows = []
    for det in detections:
        rows.append(
            f"  {det.kind.name:<9} {det.text!r:<14} [{det.start}:{det.end}] "
            f"{str(det.to_dict()['value']):<11} {det.confidence:.2f}"
        )
    return rows


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------


@app.callback()
def main(
    verbose: bool = typer.Option(  # noqa: B008
        False, "--verbose", "-v", help="Emit debug logging to stderr"
    ),
) -> None:
    """Entry point for the quickadd command group."""

    configure_logging(verbose)


@app.command()
def detect(
    text: Optional[str] = typer.Argument(None, help="Task text to analyse"),  # noqa: B008
    in_path: Optional[Path] = typer.Option(  # noqa: B008
        None, "--in", "--input", help="Analyse every non-blank line of a text file"
    ),
    as_json: bool = typer.Option(False, "--json", help="Emit JSON lines"),  # noqa: B008
    today: Optional[str] = typer.Option(  # noqa: B008
        None, "--today", help="Reference date for relative keywords (YYYY-MM-DD)"
    ),
    config_path: Optional[Path] = typer.Option(  # noqa: B008
        None, "--config", help="YAML config to override defaults"
    ),
    show_highlight: bool = typer.Option(  # noqa: B008
        False, "--highlight", help="Also print the text with detections marked"
    ),
) -> None:
    """Print the attributes detected in TEXT or in each line of --in."""

    cfg = _load(config_path)
    ref_date = _resolve_today(today, cfg)
    lines = _read_lines(text, in_path)
    log.debug("analysing %d line(s) with today=%s", len(lines), ref_date)

    for idx, line in enumerate(lines, start=1):
        detections = run_detect(line, today=ref_date)
        if as_json:
            payload: dict[str, object] = {
                "line": idx,
                "text": line,
                "detections": [d.to_dict() for d in detections],
            }
            if show_highlight:
                payload["highlighted"] = render_highlight(line, detections)
            typer.echo(json.dumps(payload, ensure_ascii=False))
            continue
        typer.echo(line if len(lines) == 1 else f"{idx}: {line}")
        if show_highlight:
            typer.echo(f"  => {render_highlight(line, detections)}")
        for row in _format_table(detections):
            typer.echo(row)


@app.command()
def draft(
    text: str = typer.Argument(..., help="Task text to turn into a draft"),  # noqa: B008
    as_json: bool = typer.Option(False, "--json", help="Emit JSON"),  # noqa: B008
    today: Optional[str] = typer.Option(  # noqa: B008
        None, "--today", help="Reference date for relative keywords (YYYY-MM-DD)"
    ),
    config_path: Optional[Path] = typer.Option(  # noqa: B008
        None, "--config", help="YAML config to override defaults"
    ),
) -> None:
    """Print the task draft produced by applying detections to TEXT."""

    cfg = _load(config_path)
    ref_date = _resolve_today(today, cfg)
    result = build_draft(text, today=ref_date, thresholds=cfg.thresholds)
    data = result.to_dict()
    if as_json:
        typer.echo(json.dumps(data, ensure_ascii=False))
        return
    for key, value in data.items():
        if isinstance(value, list):
            value = ", ".join(value) or "-"
        typer.echo(f"{key}: {'-' if value is None else value}")
