"""Centralized configuration for the search server using Pydantic Settings."""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from search_server.search.text import is_valid_word, split_into_words


class Settings(BaseSettings):
    """Strictly typed configuration loaded from ``SEARCH_SERVER_*`` environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="SEARCH_SERVER_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        validate_default=True,
        extra="ignore",
    )

    stop_words: str = Field(default="", description="Space-separated stop words ignored when indexing and querying")

    # Logging
    log_level: str = Field(default="info", description="Logging level")
    log_json: bool = Field(default=True, description="Emit structured JSON logs")

    # Request history and display
    request_history_size: int = Field(default=1440, ge=1, description="Number of recent requests retained")
    page_size: int = Field(default=2, ge=1, description="Results per page when printing search results")

    tracing_enabled: bool = Field(default=False, description="Install an OpenTelemetry tracer provider")

    @field_validator("stop_words")
    @classmethod
    def _check_stop_words(cls, value: str) -> str:
        invalid = [word for word in split_into_words(value) if not is_valid_word(word)]
        if invalid:
            raise ValueError(f"Stop words contain control characters: {invalid!r}")
        return value

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        if value.upper() not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unknown log level: {value}")
        return value.lower()

    def get_stop_words(self) -> list[str]:
        """Get the configured stop words as a list."""
        return split_into_words(self.stop_words)
