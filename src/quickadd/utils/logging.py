"""Logging utilities.

Purpose:
    Centralize logging configuration for the package.

Key responsibilities:
    - Provide helper to obtain loggers under the ``quickadd`` namespace.
    - Allow an optional verbose/debug mode for the command line.

Inputs/Outputs:
    - Inputs: module name and verbosity settings.
    - Outputs: configured `logging.Logger` instances.

Notes/Edge cases:
    - Library code never installs handlers beyond a ``NullHandler``; only the
      CLI calls :func:`configure_logging`.
    - Logging configuration is idempotent.

Dependencies:
    - Python `logging` module.
"""

from __future__ import annotations

import logging
import sys

__all__ = ["ROOT_LOGGER", "get_logger", "configure_logging"]

ROOT_LOGGER = "quickadd"

_FORMAT = "%(levelname)s %(name)s: %(message)s"

logging.getLogger(ROOT_LOGGER).addHandler(logging.NullHandler())


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a logger below the package root.

    ``name`` may be a dotted module name (``quickadd.detect.runner``) or a
    short suffix (``runner``); both resolve under :data:`ROOT_LOGGER`.
    """

    if not name or name == ROOT_LOGGER:
        return logging.getLogger(ROOT_LOGGER)
    if name.startswith(ROOT_LOGGER + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER}.{name}")


def configure_logging(verbose: bool = False) -> logging.Logger:
    """Attach a single stderr handler to the package logger.

    Calling this repeatedly replaces the previous handler instead of stacking
    a new one.
    """

    logger = logging.getLogger(ROOT_LOGGER)
    for handler in list(logger.handlers):
        if getattr(handler, "_quickadd_cli", False):
            logger.removeHandler(handler)
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(_FORMAT))
    handler._quickadd_cli = True  # type: ignore[attr-defined]
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    return logger
