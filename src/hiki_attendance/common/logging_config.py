"""
Logging setup for the backend.

- Development: human-readable coloured lines on stderr
- Production: one JSON object per line (log aggregator friendly)
- LOG_LEVEL env var overrides the level
- Records are also copied into the console log buffer when one is given
"""

from __future__ import annotations

import json
import logging
import os
import sys
from datetime import datetime, timezone
from typing import Optional

from flask import Flask

from ..console.log_buffer import ConsoleLogBuffer
from ..settings import AppSettings

_REQUEST_FIELDS = ("method", "path", "status", "remote_addr")

_LEVEL_COLORS = {
    "DEBUG": "\033[36m",
    "INFO": "\033[32m",
    "WARNING": "\033[33m",
    "ERROR": "\033[31m",
    "CRITICAL": "\033[35m",
}
_RESET = "\033[0m"


def request_fields(record: logging.LogRecord) -> dict:
    """Request context the gate and controllers pass through ``extra=``."""
    return {k: getattr(record, k) for k in _REQUEST_FIELDS if getattr(record, k, None) is not None}


class JSONFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            **request_fields(record),
        }
        if record.exc_info and record.exc_info[0] is not None:
            entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(entry, ensure_ascii=False)


class ReadableFormatter(logging.Formatter):
    """``12:00:01 INFO     logger: message [GET /api/console/status from 10.0.0.5]``"""

    def format(self, record: logging.LogRecord) -> str:
        ts = datetime.fromtimestamp(record.created).strftime("%H:%M:%S")
        level = f"{_LEVEL_COLORS.get(record.levelname, '')}{record.levelname:<8}{_RESET}"
        line = f"{ts} {level} {record.name}: {record.getMessage()}"

        fields = request_fields(record)
        if "path" in fields:
            where = f"{fields.get('method', '?')} {fields['path']}"
            if "remote_addr" in fields:
                where += f" from {fields['remote_addr']}"
            line += f" [{where}]"
        if record.exc_info and record.exc_info[0] is not None:
            line += "\n" + self.formatException(record.exc_info)
        return line


def configure_logging(app: Flask, settings: AppSettings, log_buffer: Optional[ConsoleLogBuffer] = None) -> None:
    """Install a single stderr handler on the root logger (plus the console buffer)."""
    is_prod = not settings.debug and not settings.testing

    level_name = os.getenv("LOG_LEVEL", "INFO" if is_prod else "DEBUG")
    level = getattr(logging, level_name.upper(), logging.INFO)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(JSONFormatter() if is_prod else ReadableFormatter())
    handler.setLevel(level)

    root = logging.getLogger()
    # Replace rather than append so repeated create_app() calls don't duplicate output
    root.handlers.clear()
    root.addHandler(handler)
    if log_buffer is not None:
        root.addHandler(log_buffer)
    root.setLevel(level)

    for noisy in ("urllib3", "werkzeug"):
        logging.getLogger(noisy).setLevel(logging.WARNING)

    app.logger.setLevel(level)

    if not settings.testing:
        app.logger.info("Logging configured: level=%s format=%s", level_name, "JSON" if is_prod else "readable")
