"""Central logging configuration for the menu administration service.

Call :func:`setup_logging` once, before the FastAPI app starts serving. Records
go to stdout either as JSON (default, for log collectors) or in a readable
console format when ``LOG_JSON=false``.
"""

from __future__ import annotations

import logging
import logging.config

_NOISY_LOGGERS = ("uvicorn.access",)


def setup_logging(level: str = "INFO", *, json_logs: bool = True) -> None:
    """Configure the root logger."""

    level = level.upper()
    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "json": {
                    "()": "pythonjsonlogger.json.JsonFormatter",
                    "format": "%(asctime)s %(levelname)s %(name)s %(message)s",
                    "datefmt": "%Y-%m-%d %H:%M:%S",
                },
                "console": {
                    "format": "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
                    "datefmt": "%Y-%m-%d %H:%M:%S",
                },
            },
            "handlers": {
                "console": {
                    "class": "logging.StreamHandler",
                    "formatter": "json" if json_logs else "console",
                    "stream": "ext://sys.stdout",
                },
            },
            "root": {
                "level": level,
                "handlers": ["console"],
            },
        }
    )

    if level != "DEBUG":
        for noisy in _NOISY_LOGGERS:
            logging.getLogger(noisy).setLevel("WARNING")


__all__ = ["setup_logging"]
