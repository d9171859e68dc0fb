"""
Logging setup shared by the CLI and the HTTP server.

Records go to stderr in uvicorn's style so `liftsize serve` output reads as
one stream. The liftsize loggers follow the requested level; third-party
loggers stay at WARNING unless the level is stricter.
"""

from __future__ import annotations

import logging
from logging.config import dictConfig
from typing import Any

from liftsize.config import get_settings

LOG_FORMAT = "%(levelprefix)s %(name)s: %(message)s"

# Served by uvicorn, so they keep the requested level too
UVICORN_LOGGERS = ("uvicorn", "uvicorn.error", "uvicorn.access")


def resolve_level(level: str | None = None) -> int:
    """Level name to number; None falls back to LIFTSIZE_LOG_LEVEL."""
    name = level if level is not None else get_settings().log_level
    resolved = logging.getLevelName(name.upper())
    return resolved if isinstance(resolved, int) else logging.INFO


def build_logging_config(level: int, *, use_colors: bool | None = None) -> dict[str, Any]:
    formatter: dict[str, Any] = {
        "()": "uvicorn.logging.DefaultFormatter",
        "fmt": LOG_FORMAT,
    }
    if use_colors is not None:
        formatter["use_colors"] = use_colors

    loggers = {"liftsize": {"level": level}}
    loggers.update({name: {"level": level} for name in UVICORN_LOGGERS})

    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {"liftsize": formatter},
        "handlers": {
            "stderr": {
                "class": "logging.StreamHandler",
                "formatter": "liftsize",
                "stream": "ext://sys.stderr",
            }
        },
        "loggers": loggers,
        "root": {
            "handlers": ["stderr"],
            "level": max(level, logging.WARNING),
        },
    }


def configure_logging(level: str | None = None, *, use_colors: bool | None = None) -> None:
    """Install the stderr handler at `level` (default from settings)."""
    dictConfig(build_logging_config(resolve_level(level), use_colors=use_colors))
