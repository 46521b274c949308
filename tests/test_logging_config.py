"""Tests for logging configuration."""

import json
import logging
import logging.handlers

import pytest

from html2rsx.config import LoggingConfig
from html2rsx.logging_config import (
    PACKAGE_LOGGER,
    CustomJsonFormatter,
    log_with_context,
    setup_logging,
)


@pytest.fixture
def restore_package_logger():
    """Undo handler changes made by setup_logging."""
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    handlers = list(package_logger.handlers)
    level = package_logger.level
    propagate = package_logger.propagate
    yield package_logger
    for handler in package_logger.handlers:
        if handler not in handlers:
            handler.close()
    package_logger.handlers[:] = handlers
    package_logger.setLevel(level)
    package_logger.propagate = propagate


class TestSetupLogging:
    def test_console_handler(self, restore_package_logger):
        package_logger = setup_logging(LoggingConfig(log_level="INFO"))
        assert package_logger is restore_package_logger
        assert package_logger.level == logging.INFO
        (handler,) = package_logger.handlers
        assert isinstance(handler, logging.StreamHandler)
        assert not isinstance(handler.formatter, CustomJsonFormatter)

    def test_json_file_handler(self, restore_package_logger, tmp_path):
        log_file = tmp_path / "logs" / "html2rsx.log"
        config = LoggingConfig(log_level="DEBUG", json_logs=True, log_file=str(log_file))
        setup_logging(config)

        logger = logging.getLogger("html2rsx.tests")
        log_with_context(logger, logging.INFO, "Converted", input_chars=10, node_count=3)

        lines = log_file.read_text(encoding="utf-8").splitlines()
        record = json.loads(lines[-1])
        assert record["message"] == "Converted"
        assert record["level"] == "INFO"
        assert record["logger"] == "html2rsx.tests"
        assert record["input_chars"] == 10
        assert record["node_count"] == 3

    def test_rotation_settings(self, restore_package_logger, tmp_path):
        config = LoggingConfig(
            log_file=str(tmp_path / "out.log"),
            log_rotation_size=2 * 1024 * 1024,
            log_rotation_count=3,
        )
        (handler,) = setup_logging(config).handlers
        assert isinstance(handler, logging.handlers.RotatingFileHandler)
        assert handler.maxBytes == 2 * 1024 * 1024
        assert handler.backupCount == 3

    def test_setup_is_idempotent(self, restore_package_logger):
        setup_logging(LoggingConfig())
        package_logger = setup_logging(LoggingConfig())
        assert len(package_logger.handlers) == 1


class TestLogWithContext:
    def test_context_becomes_record_attributes(self, caplog):
        logger = logging.getLogger("html2rsx.context")
        with caplog.at_level(logging.INFO, logger="html2rsx"):
            log_with_context(logger, logging.INFO, "hello", request="abc")
        (record,) = caplog.records
        assert record.request == "abc"
