"""Logging configuration for the bundlecat CLI."""

from __future__ import annotations

import logging
import logging.config
from typing import Any, Dict


LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def get_logging_config(level: str = "WARNING") -> Dict[str, Any]:
    """Get logging configuration with every record routed to stderr.

    Standard output carries the decoded bundle, so no handler may write there.
    """
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "default": {
                "format": LOG_FORMAT,
            },
        },
        "handlers": {
            "stderr": {
                "class": "logging.StreamHandler",
                "formatter": "default",
                "stream": "ext://sys.stderr",
            },
        },
        "loggers": {
            "bundlecat": {
                "handlers": ["stderr"],
                "level": level.upper(),
                "propagate": False,
            },
        },
    }


def configure_logging(level: str = "WARNING") -> None:
    logging.config.dictConfig(get_logging_config(level))
