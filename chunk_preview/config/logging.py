"""Structured logging setup. Read-only config; no business logic."""

import logging
import sys

from chunk_preview.config.settings import get_settings

APP_LOGGER = "chunk_preview"

# Attributes every LogRecord carries; anything else arrived through extra=
_RECORD_ATTRS = frozenset(vars(logging.makeLogRecord({}))) | {"message", "asctime"}


class StructuredFormatter(logging.Formatter):
    """Pipe-separated line with the record's extra= fields appended as key=value pairs."""

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        fields = {k: v for k, v in vars(record).items() if k not in _RECORD_ATTRS}
        if not fields:
            return line
        return line + " | " + " ".join(f"{k}={v}" for k, v in sorted(fields.items()))


def configure_logging() -> None:
    """
    Send logs to stdout. Service loggers follow settings.log_level; everything
    else (server stack, HTTP client) only reports warnings.
    """
    settings = get_settings()
    level = getattr(logging, settings.log_level.upper(), logging.INFO)

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(StructuredFormatter(
        fmt="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
    ))

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(logging.WARNING)

    logging.getLogger(APP_LOGGER).setLevel(level)
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    """Return a logger for the given module name."""
    return logging.getLogger(name)
