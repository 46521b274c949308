"""Tests for pydantic-settings configuration."""

import os
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from html2rsx.config import (
    EmitterConfig,
    LoggingConfig,
    ParserConfig,
    Settings,
    get_settings,
    reload_settings,
)


class TestDefaults:
    def test_parser_defaults(self):
        config = ParserConfig()
        assert config.backend == "native"
        assert config.trim_input is True

    def test_emitter_defaults(self):
        config = EmitterConfig()
        assert config.indent_width == 2
        assert config.strict is False
        assert config.void_children == "error"
        assert config.normalize_whitespace is True
        assert config.keep_comments is True

    def test_logging_defaults(self):
        config = LoggingConfig()
        assert config.log_level == "WARNING"
        assert config.json_logs is False
        assert config.log_file is None


class TestEnvironment:
    def test_emitter_environment_variables(self):
        env = {
            "RSX_EMITTER_INDENT_WIDTH": "4",
            "RSX_EMITTER_STRICT": "true",
            "RSX_EMITTER_VOID_CHILDREN": "ignore",
        }
        with patch.dict(os.environ, env):
            settings = reload_settings()
        assert settings.emitter.indent_width == 4
        assert settings.emitter.strict is True
        assert settings.emitter.void_children == "ignore"

    def test_parser_environment_variables(self):
        with patch.dict(os.environ, {"RSX_PARSER_BACKEND": "lxml"}):
            assert ParserConfig().backend == "lxml"

    def test_lowercase_log_level(self):
        with patch.dict(os.environ, {"RSX_LOG_LOG_LEVEL": "debug"}):
            assert LoggingConfig().log_level == "DEBUG"


class TestValidation:
    @pytest.mark.parametrize("width", [0, 9, -1])
    def test_indent_width_bounds(self, width):
        with pytest.raises(ValidationError):
            EmitterConfig(indent_width=width)

    def test_unknown_backend(self):
        with pytest.raises(ValidationError):
            ParserConfig(backend="html5lib")

    def test_unknown_void_policy(self):
        with pytest.raises(ValidationError):
            EmitterConfig(void_children="keep")

    def test_log_rotation_size_minimum(self):
        with pytest.raises(ValidationError):
            LoggingConfig(log_rotation_size=10)


class TestValidateSettings:
    def test_default_messages(self, settings):
        messages = settings.validate_settings()
        assert "INFO: Indent width: 2" in messages
        assert "INFO: Strict tags: disabled" in messages
        assert not any(message.startswith("WARNING") for message in messages)

    def test_warnings_for_lenient_choices(self):
        settings = Settings(
            parser=ParserConfig(backend="lxml"),
            emitter=EmitterConfig(void_children="ignore", normalize_whitespace=False),
        )
        messages = settings.validate_settings()
        assert "WARNING: Parser backend 'lxml' never reports malformed tags" in messages
        assert "WARNING: Children of void elements will be dropped silently" in messages
        assert "INFO: Whitespace normalization disabled" in messages


class TestSingleton:
    def test_get_settings_returns_same_instance(self):
        assert get_settings() is get_settings()

    def test_reload_settings_replaces_instance(self):
        first = get_settings()
        second = reload_settings()
        assert first is not second
        assert get_settings() is second
