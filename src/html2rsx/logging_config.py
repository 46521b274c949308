"""Structured logging configuration.

The library itself only creates module loggers. Applications embedding the
converter call ``setup_logging`` once to get either human-readable output or
JSON structured records (python-json-logger), with optional file rotation.
"""

import logging
import logging.handlers
import sys
from pathlib import Path
from typing import Any

from pythonjsonlogger import jsonlogger

from .config import LoggingConfig

PACKAGE_LOGGER = "html2rsx"

_RESERVED_RECORD_KEYS = frozenset(
    {
        "name",
        "msg",
        "args",
        "created",
        "filename",
        "funcName",
        "levelname",
        "levelno",
        "lineno",
        "module",
        "msecs",
        "message",
        "pathname",
        "process",
        "processName",
        "relativeCreated",
        "thread",
        "threadName",
        "exc_info",
        "exc_text",
        "stack_info",
        "taskName",
    }
)


class CustomJsonFormatter(jsonlogger.JsonFormatter):
    """Custom JSON formatter that adds additional context fields."""

    def add_fields(
        self,
        log_record: dict[str, Any],
        record: logging.LogRecord,
        message_dict: dict[str, Any],
    ) -> None:
        """Add custom fields to the log record."""
        super().add_fields(log_record, record, message_dict)

        log_record["logger"] = record.name
        log_record["level"] = record.levelname
        log_record["timestamp"] = self.formatTime(record, self.datefmt)

        if record.exc_info:
            log_record["exception"] = self.formatException(record.exc_info)

        # Context passed through ``extra=``
        for key, value in record.__dict__.items():
            if key not in _RESERVED_RECORD_KEYS:
                log_record[key] = value


def build_formatter(config: LoggingConfig) -> logging.Formatter:
    if config.json_logs:
        return CustomJsonFormatter(
            "%(timestamp)s %(level)s %(logger)s %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    return logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def setup_logging(config: LoggingConfig) -> logging.Logger:
    """Configure the package logger with a console or rotating file handler.

    Args:
        config: Logging configuration settings

    Returns:
        The configured ``html2rsx`` logger
    """
    formatter = build_formatter(config)

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.setLevel(config.log_level)
    package_logger.handlers.clear()

    if config.log_file:
        log_path = Path(config.log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)

        handler: logging.Handler = logging.handlers.RotatingFileHandler(
            filename=str(log_path),
            maxBytes=config.log_rotation_size,
            backupCount=config.log_rotation_count,
            encoding="utf-8",
        )
    else:
        handler = logging.StreamHandler(sys.stderr)

    handler.setLevel(config.log_level)
    handler.setFormatter(formatter)
    package_logger.addHandler(handler)
    package_logger.propagate = False

    package_logger.debug(
        f"Logging configured: level={config.log_level} json={config.json_logs} "
        f"destination={config.log_file or 'stderr'}"
    )
    return package_logger


def log_with_context(logger: logging.Logger, level: int, message: str, **context) -> None:
    """Log a message with additional context fields.

    With JSON logging the context fields become top-level attributes.

    Example:
        log_with_context(
            logger, logging.DEBUG,
            "Conversion finished",
            input_chars=120,
            node_count=7,
            output_chars=98,
        )
    """
    logger.log(level, message, extra=context)
