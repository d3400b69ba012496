"""Logging setup for bank-analytics.

Two output styles are supported: a pipe-separated text line for people and
one JSON object per line for log shippers. Report runs and table loads pass
context through ``extra=`` (see ``CONTEXT_FIELDS``); the JSON style keeps it
as separate keys so runs can be filtered by report or table.
"""

import json
import logging
import sys
from datetime import datetime, timezone
from typing import IO, Any

TEXT_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Record attributes copied into JSON output when present
CONTEXT_FIELDS = ("report", "params", "rows", "table", "source", "check")

# Libraries that log chatty DEBUG/INFO output of their own
NOISY_LOGGERS = ("confluent_kafka", "psycopg", "faker")


def _resolve_level(level: str) -> int:
    value = logging.getLevelName(level.upper())
    return value if isinstance(value, int) else logging.INFO


def setup_logging(
    level: str = "INFO",
    format_type: str = "standard",
    stream: IO[str] | None = None,
) -> None:
    """Configure logging for bank-analytics.

    Parameters
    ----------
    level : str
        Log level name (DEBUG, INFO, WARNING, ERROR, CRITICAL). Unknown
        names fall back to INFO.
    format_type : str
        "standard" for text lines, "json" for one JSON object per line.
    stream : IO[str] | None
        Where to write; stderr by default, leaving stdout to the console
        sink.
    """
    log_level = _resolve_level(level)

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setLevel(log_level)
    if format_type == "json":
        handler.setFormatter(JsonFormatter())
    else:
        handler.setFormatter(logging.Formatter(fmt=TEXT_FORMAT, datefmt=DATE_FORMAT))

    root_logger = logging.getLogger()
    for existing in root_logger.handlers[:]:
        root_logger.removeHandler(existing)
    root_logger.addHandler(handler)
    root_logger.setLevel(log_level)

    logging.getLogger("bank_analytics").setLevel(log_level)
    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


class JsonFormatter(logging.Formatter):
    """Render a record as a JSON object with its report/table context."""

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for name in CONTEXT_FIELDS:
            if hasattr(record, name):
                payload[name] = getattr(record, name)
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)

        # Decimals and dates in report params render as strings
        return json.dumps(payload, default=str)


def get_logger(name: str) -> logging.Logger:
    """Get a logger with the given name (usually ``__name__``)."""
    return logging.getLogger(name)
