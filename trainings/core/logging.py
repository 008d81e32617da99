"""Logging setup: console handler with a text or JSON formatter."""

from __future__ import annotations

import logging
from logging.config import dictConfig

from trainings.core.config import Settings

SERVICE_NAME = "trainings"

_LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warning": logging.WARNING,
    "error": logging.ERROR,
}

# python-json-logger merges `extra=` context into the object on its own.
JSON_FORMATTER = {
    "()": "pythonjsonlogger.json.JsonFormatter",
    "fmt": "%(asctime)s %(levelname)s %(name)s %(message)s",
    "rename_fields": {"asctime": "time", "levelname": "level", "name": "logger"},
    "static_fields": {"service": SERVICE_NAME},
}


def configure_logging(settings: Settings) -> None:
    level = _LEVELS.get(settings.log_level.lower(), logging.INFO)
    formatter = "json" if settings.log_format.lower() == "json" else "text"
    dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "text": {"format": "%(asctime)s %(levelname)s [%(name)s] %(message)s"},
                "json": JSON_FORMATTER,
            },
            "handlers": {
                "console": {
                    "class": "logging.StreamHandler",
                    "formatter": formatter,
                },
            },
            "loggers": {
                SERVICE_NAME: {"handlers": ["console"], "level": level, "propagate": False},
            },
        }
    )
