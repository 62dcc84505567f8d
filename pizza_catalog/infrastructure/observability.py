"""Structured Logging — catalog-aware formatters and root logger setup.

Invariants:
    - Every record carries timestamp, level, logger name, and message
    - Catalog fields (pizza_id, operation, error_code) surfaced when a record carries them
    - Timestamps come from the record's creation time, in UTC
    - setup_logging owns at most one root handler; calling it again replaces that handler
"""

import logging
import json
from datetime import datetime, timezone

CATALOG_FIELDS = ("pizza_id", "operation", "error_code")

_HANDLER_NAME = "pizza_catalog"


def _catalog_fields(record: logging.LogRecord) -> dict:
    return {
        key: record.__dict__[key]
        for key in CATALOG_FIELDS
        if record.__dict__.get(key) is not None
    }


class JSONFormatter(logging.Formatter):
    """One JSON object per record."""

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            **_catalog_fields(record),
        }
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False, default=str)


class CatalogTextFormatter(logging.Formatter):
    """Human-readable line with catalog fields appended as key=value pairs."""

    def __init__(self):
        super().__init__("%(asctime)s %(levelname)s %(name)s: %(message)s")

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        fields = _catalog_fields(record)
        if not fields:
            return line
        head, sep, tail = line.partition("\n")
        pairs = " ".join(f"{k}={v}" for k, v in fields.items())
        return f"{head} [{pairs}]{sep}{tail}"


def setup_logging(level: str = "INFO", fmt: str = "json") -> logging.Handler:
    """Install the catalog handler on the root logger."""
    for existing in logging.root.handlers[:]:
        if existing.get_name() == _HANDLER_NAME:
            logging.root.removeHandler(existing)
    handler = logging.StreamHandler()
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(JSONFormatter() if fmt == "json" else CatalogTextFormatter())
    logging.root.addHandler(handler)
    logging.root.setLevel(getattr(logging, level.upper(), logging.INFO))
    return handler
