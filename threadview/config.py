"""Application configuration."""

from typing import Literal

from pydantic import BaseModel, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class CommentServiceSettings(BaseModel):
    """Comment REST service connection."""

    base_url: str = "http://localhost:8080"

    # None keeps the transport default
    timeout: float | None = None

    @field_validator("base_url")
    @classmethod
    def normalize_base_url(cls, v: str) -> str:
        """Normalize base URL so paths can be appended directly."""
        if not v.startswith(("http://", "https://")):
            raise ValueError("Comment service URL must start with http:// or https://")
        return v.rstrip("/")


class ObservabilitySettings(BaseModel):
    """Observability configuration for Logfire."""

    # Logfire API token (optional - if not set, nothing leaves the machine)
    # Can be set via OBSERVABILITY__LOGFIRE_TOKEN env var
    logfire_token: str | None = None

    # If None, will auto-determine: sends if token is present
    send_to_logfire: bool | None = None

    # Logfire console output interleaves with the rendered tree, so it is opt-in
    console: bool = False


class Settings(BaseSettings):
    """Client settings.

    Set environment variables (or a .env file) to override:

        COMMENT_SERVICE__BASE_URL=http://comments.internal:8080
        COMMENT_SERVICE__TIMEOUT=5
        DEBUG=true
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",  # Allows COMMENT_SERVICE__BASE_URL syntax
        extra="ignore",
    )

    environment: Literal["test", "development", "staging", "production"] = "development"
    debug: bool = False

    comment_service: CommentServiceSettings = CommentServiceSettings()
    observability: ObservabilitySettings = ObservabilitySettings()
