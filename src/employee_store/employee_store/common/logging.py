"""Logging setup shared by the Flask app, scripts and examples.

Usage:
    from ..common.logging import configure_logging

    configure_logging("INFO")
    logger = logging.getLogger(__name__)
"""

from __future__ import annotations

import logging.config


def configure_logging(level: str = "INFO", *, force: bool = True) -> None:
    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": not force,
            "formatters": {
                "console": {
                    "format": "%(asctime)s | %(levelname)s | %(name)s | %(message)s",
                    "datefmt": "%Y-%m-%d %H:%M:%S",
                },
            },
            "handlers": {
                "default": {
                    "class": "logging.StreamHandler",
                    "formatter": "console",
                    "level": level.upper(),
                }
            },
            "root": {
                "handlers": ["default"],
                "level": level.upper(),
            },
        }
    )
