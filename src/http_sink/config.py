"""
Configuration settings for the HTTP Sink Sender.

All settings are loaded from environment variables with sensible defaults.
Use .env file for local development.
"""

from typing import Literal, Optional

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # === Logging ===
    LOG_LEVEL: str = "INFO"
    ENVIRONMENT: str = "development"

    # === Target Endpoint ===
    HTTP_URL: str = "http://localhost:8080"
    HTTP_TIMEOUT: int = Field(default=30, gt=0)  # seconds

    # === Headers ===
    HTTP_AUTHORIZATION_TYPE: Literal["none", "static"] = "none"
    HTTP_HEADERS_AUTHORIZATION: Optional[str] = None
    HTTP_HEADERS_CONTENT_TYPE: Optional[str] = None
    HTTP_HEADERS_ADDITIONAL: list[str] = []  # e.g., ["X-Request-Time:${unix-timestamp}"]

    # === Retry ===
    MAX_RETRIES: int = Field(default=1, ge=0)  # Additional attempts after the first
    RETRY_BACKOFF_MS: int = Field(default=3000, ge=0)  # Fixed, not exponential

    @field_validator("HTTP_HEADERS_ADDITIONAL")
    @classmethod
    def _check_additional_headers(cls, value: list[str]) -> list[str]:
        for entry in value:
            name, sep, _ = entry.partition(":")
            if not sep or not name.strip():
                raise ValueError(
                    f"Additional header '{entry}' must be in the form 'Name:value'"
                )
        return value

    @model_validator(mode="after")
    def _check_authorization(self) -> "Settings":
        if self.HTTP_AUTHORIZATION_TYPE == "static" and not self.HTTP_HEADERS_AUTHORIZATION:
            raise ValueError(
                "HTTP_HEADERS_AUTHORIZATION is required when HTTP_AUTHORIZATION_TYPE is 'static'"
            )
        return self

    @property
    def additional_headers(self) -> list[tuple[str, str]]:
        """HTTP_HEADERS_ADDITIONAL split into (name, value) pairs."""
        pairs = []
        for entry in self.HTTP_HEADERS_ADDITIONAL:
            name, _, value = entry.partition(":")
            pairs.append((name.strip(), value.strip()))
        return pairs
