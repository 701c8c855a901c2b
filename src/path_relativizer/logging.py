"""Logging setup for the path-relativize command."""

import json
import logging
import logging.handlers
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Optional

SIMPLE_FORMAT = "%(levelname)-8s | %(name)s | %(message)s"
DETAILED_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s:%(funcName)s:%(lineno)d | %(message)s"


class StructuredFormatter(logging.Formatter):
    """One JSON object per record, with any ``extra_fields`` merged in."""

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        payload.update(getattr(record, "extra_fields", {}))
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload)


def build_formatter(format: str) -> logging.Formatter:
    """Formatter for a ``LoggingConfig.format`` value; unknown names get simple."""
    if format == "json":
        return StructuredFormatter()
    if format == "detailed":
        return logging.Formatter(DETAILED_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")
    return logging.Formatter(SIMPLE_FORMAT)


def setup_logging(
    level: str = "WARNING",
    format: str = "simple",
    log_file: Optional[Path] = None,
    max_file_size_mb: int = 10,
    backup_count: int = 5,
) -> None:
    """Configure the root logger.

    Console records go to stderr; stdout carries results only. The
    optional log file rotates and is always written as JSON.

    Args:
        level: Log level name, any case
        format: simple, detailed or json
        log_file: Optional log file path
        max_file_size_mb: Rotation size in MB
        backup_count: Number of rotated files to keep
    """
    root = logging.getLogger()
    root.setLevel(level.upper())
    root.handlers.clear()

    console = logging.StreamHandler(sys.stderr)
    console.setFormatter(build_formatter(format))
    root.addHandler(console)

    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        rotating = logging.handlers.RotatingFileHandler(
            log_file,
            maxBytes=max_file_size_mb * 1024 * 1024,
            backupCount=backup_count,
            encoding="utf-8",
        )
        rotating.setFormatter(StructuredFormatter())
        root.addHandler(rotating)


class LogContext(logging.Filter):
    """Attach fixed ``extra_fields`` to every record of one logger.

    Fields passed through ``extra={"extra_fields": ...}`` on a single call
    take precedence over the context's.
    """

    def __init__(self, logger: logging.Logger, **fields: Any) -> None:
        super().__init__()
        self.logger = logger
        self.fields = fields

    def filter(self, record: logging.LogRecord) -> bool:
        record.extra_fields = {**self.fields, **getattr(record, "extra_fields", {})}
        return True

    def __enter__(self) -> "LogContext":
        self.logger.addFilter(self)
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        self.logger.removeFilter(self)
