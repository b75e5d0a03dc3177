from __future__ import annotations

import logging
import os
from typing import Optional, Union

from pythonjsonlogger import jsonlogger

# Per-request access lines from the Flask dev server drown out the filter events
NOISY_LOGGERS = ("werkzeug",)


def _resolve_level(level: Union[int, str, None]) -> int:
    if level is None:
        level = os.getenv("HR_BROWSER_LOG_LEVEL", "INFO")
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(str(level).strip().upper())
    if not isinstance(resolved, int):
        raise ValueError(f"Unknown log level '{level}'")
    return resolved


def configure_logging(
        level: Union[int, str, None] = None,
        force_format: Optional[str] = None,
) -> None:
    """
    Configure root logger for the dashboard

    Modes:
    - JSON (default): one object per line, ``extra={...}`` fields become keys
    - plain text (dev mode)

    Selection Order:
        1) force_format argument ("json" or "plain") if provided
        2) env var HR_BROWSER_LOG_FORMAT
        3) default = "json"

    The level follows the same order: argument, then HR_BROWSER_LOG_LEVEL, then INFO.
    """

    if force_format is not None:
        format_mode = force_format.lower()
    else:
        format_mode = os.getenv("HR_BROWSER_LOG_FORMAT", "json").lower()

    logger = logging.getLogger()
    logger.setLevel(_resolve_level(level))

    handler = logging.StreamHandler()

    if format_mode == "plain":
        formatter = logging.Formatter(
            "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
        )
    else:
        formatter = jsonlogger.JsonFormatter(
            "%(asctime)s %(levelname)s %(name)s %(message)s",
            rename_fields={"levelname": "level", "name": "logger"},
        )

    handler.setFormatter(formatter)

    # Replace any existing handlers to avoid duplicate logs
    logger.handlers.clear()
    logger.addHandler(handler)

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
