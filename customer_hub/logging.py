"""Logging setup for customer-hub.

Two output styles are supported: a human readable line format and one
JSON object per record. Callers attach context with the standard
``extra`` mapping, e.g.::

    logger.info("Fetching CSV from %s", url, extra={"url": url})

The JSON style copies the keys listed in ``CONTEXT_FIELDS`` into the
emitted object.
"""

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any

# Third-party loggers that are chatty at DEBUG/INFO
NOISY_LOGGERS = ("urllib3", "requests", "faker")

# Record attributes set through ``extra`` by the loader and fetcher
CONTEXT_FIELDS = ("url", "customer_count", "used_fallback")

LINE_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"


def setup_logging(level: str = "INFO", format_type: str = "standard") -> None:
    """Route every log record to stderr in the chosen format.

    Parameters
    ----------
    level : str
        Level name; unknown names fall back to INFO.
    format_type : str
        ``"standard"`` for text lines, ``"json"`` for JSON objects.
    """
    log_level = getattr(logging, level.upper(), logging.INFO)
    formatter: logging.Formatter
    if format_type == "json":
        formatter = JsonFormatter()
    else:
        formatter = logging.Formatter(fmt=LINE_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")

    root = logging.getLogger()
    root.setLevel(log_level)
    for handler in list(root.handlers):
        root.removeHandler(handler)

    # stdout is reserved for snapshots printed by the scripts
    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(log_level)
    handler.setFormatter(formatter)
    root.addHandler(handler)

    logging.getLogger("customer_hub").setLevel(log_level)
    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


class JsonFormatter(logging.Formatter):
    """Render a record as a single JSON object."""

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for field in CONTEXT_FIELDS:
            value = getattr(record, field, None)
            if value is not None:
                payload[field] = value

        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)

        return json.dumps(payload, ensure_ascii=False)


def get_logger(name: str) -> logging.Logger:
    """Return the logger for ``name`` (usually ``__name__``)."""
    return logging.getLogger(name)
