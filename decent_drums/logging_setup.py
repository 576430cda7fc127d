"""Logging configuration helpers for the drum-kit tool server."""

from __future__ import annotations

import logging
import sys

from decent_drums.config import get_settings


def configure_logging(level_name: str | None = None) -> int:
    """Configure process-wide logging and return the resolved level.

    Logs go to stderr: stdout carries the MCP protocol. The level defaults to
    ``settings.log_level`` (``DECENT_DRUMS_LOG_LEVEL``).
    """
    requested = (level_name or get_settings().log_level).upper()
    level = logging.getLevelName(requested)
    if not isinstance(level, int):
        level = logging.INFO
        invalid_level: str | None = requested
    else:
        invalid_level = None

    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
        force=True,
    )

    if invalid_level is not None:
        logging.getLogger(__name__).warning(
            "Invalid log level '%s'; using %s", invalid_level, logging.getLevelName(level)
        )

    return level
