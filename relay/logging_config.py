"""JSON structured logging configuration."""

import logging
import sys

from pythonjsonlogger.json import JsonFormatter

SERVICE_NAME = "search-relay"
_UVICORN_LOGGERS = ("uvicorn", "uvicorn.access", "uvicorn.error")


def setup_logging(log_level: str = "INFO") -> None:
    """Send every relay and uvicorn log line to stdout as one JSON object.

    Each record carries ``timestamp``, ``level``, ``logger``, ``message`` and
    ``service``, plus whatever was passed through ``extra=``.
    """
    level = getattr(logging, log_level.upper(), logging.INFO)

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(
        JsonFormatter(
            fmt="%(asctime)s %(levelname)s %(name)s %(message)s",
            rename_fields={"asctime": "timestamp", "levelname": "level", "name": "logger"},
            static_fields={"service": SERVICE_NAME},
            datefmt="%Y-%m-%dT%H:%M:%S%z",
        )
    )

    root = logging.getLogger()
    root.setLevel(level)
    root.handlers.clear()
    root.addHandler(handler)

    for name in _UVICORN_LOGGERS:
        uv_logger = logging.getLogger(name)
        uv_logger.handlers.clear()
        uv_logger.addHandler(handler)
        uv_logger.propagate = False
