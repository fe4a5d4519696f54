from __future__ import annotations

import logging
import os
from typing import IO, Optional

from pythonjsonlogger import jsonlogger

from dataset_editor.core.exceptions import ConfigError

LOG_FORMAT_ENV = "DATASET_EDITOR_LOG_FORMAT"
LOG_LEVEL_ENV = "DATASET_EDITOR_LOG_LEVEL"
PACKAGE_LOGGER = "dataset_editor"


def _resolve_level(level: int | str | None) -> int:
    if level is None:
        level = os.getenv(LOG_LEVEL_ENV, "INFO")
    if isinstance(level, int):
        return level

    resolved = logging.getLevelName(level.upper())
    if not isinstance(resolved, int):
        raise ConfigError(f"Unknown log level {level!r}")
    return resolved


def configure_logging(
        level: int | str | None = None,
        force_format: Optional[str] = None,
        stream: Optional[IO[str]] = None,
) -> logging.Logger:
    """
    Attach a single handler to the 'dataset_editor' logger.

    Only the package logger is touched, so a host application keeps control
    of the root logger. Records do not propagate past it.

    Modes:
    - JSON (default); fields passed via `extra=` (dataset, description,
      history_index...) become JSON keys
    - plain text for local debugging

    Selection Order:
        1) force_format / level arguments if provided
        2) env vars DATASET_EDITOR_LOG_FORMAT / DATASET_EDITOR_LOG_LEVEL
        3) default = "json" at INFO

    Raises:
        ConfigError: on an unknown format or level name
    """
    if force_format is not None:
        format_mode = force_format.lower()
    else:
        format_mode = os.getenv(LOG_FORMAT_ENV, "json").lower()

    if format_mode == "plain":
        formatter = logging.Formatter(
            "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
        )
    elif format_mode == "json":
        formatter = jsonlogger.JsonFormatter(
            "%(asctime)s %(levelname)s %(name)s %(message)s"
        )
    else:
        raise ConfigError(f"Unknown log format {format_mode!r}; expected 'json' or 'plain'")

    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(_resolve_level(level))
    logger.propagate = False

    handler = logging.StreamHandler(stream)
    handler.setFormatter(formatter)

    # Replace any existing handlers to avoid duplicate logs
    logger.handlers.clear()
    logger.addHandler(handler)
    return logger
