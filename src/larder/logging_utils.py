"""Logging configuration helpers."""

from __future__ import annotations

import json
import logging
import sys
from datetime import datetime, timezone

PLAIN_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


class JsonFormatter(logging.Formatter):
    """One JSON object per record with the same fields as the plain format."""

    def format(self, record: logging.LogRecord) -> str:
        created = datetime.fromtimestamp(record.created, tz=timezone.utc)
        return json.dumps(
            {
                "timestamp": created.isoformat(),
                "level": record.levelname,
                "logger": record.name,
                "message": record.getMessage(),
            }
        )


def configure_logging(level_name: str, fmt: str) -> None:
    """Configure root logging on stderr with optional JSON output."""

    numeric_level = getattr(logging, level_name.upper(), logging.WARNING)
    format_normalized = (fmt or "plain").lower()

    # stdout carries command output, diagnostics go to stderr
    handler = logging.StreamHandler(sys.stderr)
    if format_normalized == "json":
        formatter: logging.Formatter = JsonFormatter()
    else:
        formatter = logging.Formatter(PLAIN_FORMAT, datefmt="%Y-%m-%dT%H:%M:%S%z")
    handler.setFormatter(formatter)

    root = logging.getLogger()
    root.handlers = []
    root.addHandler(handler)
    root.setLevel(numeric_level)

    logging.captureWarnings(True)
