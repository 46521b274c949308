"""Centralized configuration management using Pydantic Settings.

Every knob of the conversion pipeline is declared here with its default and
valid range. Each section reads its own environment prefix, so a caller can
tune the converter without touching code (e.g. ``RSX_EMITTER_INDENT_WIDTH=4``).
"""

from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class ParserConfig(BaseSettings):
    """HTML parser settings."""

    # "native" is the tolerant tokenizer of this package. The BeautifulSoup
    # backends accept anything and never raise MalformedTagError.
    backend: Literal["native", "lxml", "html.parser"] = Field(
        default="native",
        description="Parser used to build the document tree"
    )
    trim_input: bool = Field(
        default=True,
        description="Strip leading and trailing whitespace from the input before parsing"
    )

    model_config = SettingsConfigDict(env_prefix="RSX_PARSER_")


class EmitterConfig(BaseSettings):
    """RSX emitter settings."""

    indent_width: int = Field(
        default=2,
        ge=1,
        le=8,
        description="Spaces per nesting level"
    )
    strict: bool = Field(
        default=False,
        description="Reject tags outside the known HTML and SVG element sets"
    )
    void_children: Literal["error", "ignore"] = Field(
        default="error",
        description="What to do with children found on a void element"
    )
    normalize_whitespace: bool = Field(
        default=True,
        description="Collapse whitespace runs in text outside preformatted elements"
    )
    keep_comments: bool = Field(
        default=True,
        description="Emit HTML comments as // comments"
    )

    model_config = SettingsConfigDict(env_prefix="RSX_EMITTER_")


class LoggingConfig(BaseSettings):
    """Logging configuration with structured logging support."""

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="WARNING",
        description="Log level for the html2rsx loggers"
    )

    # Structured Logging
    json_logs: bool = Field(
        default=False,
        description="Enable JSON formatted logs"
    )

    log_file: str | None = Field(
        default=None,
        description="Path to log file (None = stderr)"
    )

    # Log Rotation
    log_rotation_size: int = Field(
        default=10 * 1024 * 1024,  # 10MB
        ge=1024 * 1024,  # Min 1MB
        description="Log file size before rotation (bytes)"
    )
    log_rotation_count: int = Field(
        default=5,
        ge=1,
        le=100,
        description="Number of rotated log files to keep"
    )

    model_config = SettingsConfigDict(env_prefix="RSX_LOG_")

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_level(cls, v):
        """Accept lowercase level names from the environment."""
        if isinstance(v, str):
            return v.upper()
        return v


class Settings(BaseSettings):
    """Main settings combining all configuration sections."""

    parser: ParserConfig = Field(default_factory=ParserConfig)
    emitter: EmitterConfig = Field(default_factory=EmitterConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    def validate_settings(self) -> list[str]:
        """Validate settings and return list of warnings/info messages."""
        messages = []

        if self.parser.backend != "native":
            messages.append(
                f"WARNING: Parser backend '{self.parser.backend}' never reports malformed tags"
            )
        if self.emitter.void_children == "ignore":
            messages.append("WARNING: Children of void elements will be dropped silently")
        if not self.emitter.normalize_whitespace:
            messages.append("INFO: Whitespace normalization disabled")

        messages.append(f"INFO: Indent width: {self.emitter.indent_width}")
        messages.append(f"INFO: Strict tags: {'enabled' if self.emitter.strict else 'disabled'}")

        return messages


# Global settings instance
_settings: Settings | None = None


def get_settings() -> Settings:
    """Get the global settings instance (singleton pattern)."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reload_settings() -> Settings:
    """Reload settings from environment (useful for testing)."""
    global _settings
    _settings = Settings()
    return _settings
