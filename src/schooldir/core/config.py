"""Configuration management for SchoolDir.

This module uses Pydantic Settings to load and validate configuration from
environment variables and .env files. Configuration is loaded at application
startup and is immutable during runtime.
"""

from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration settings.

    Settings are loaded from environment variables and .env files.
    All configuration values are validated at startup.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="SCHOOLDIR_",
        case_sensitive=False,
        extra="ignore",
    )

    # Application Settings
    app_name: str = "SchoolDir"
    app_version: str = "0.1.0"
    environment: Literal["development", "production", "testing"] = "development"
    debug: bool = False

    # Server Settings
    host: str = "0.0.0.0"
    port: int = 8000
    workers: int = 1

    # School Directory collaborator
    directory_base_url: str = "http://localhost:3000"
    schools_path: str = "/api/schools"
    upload_path: str = "/api/schools/upload"
    upload_field_name: str = "image"
    request_timeout_seconds: float = 10.0
    image_path_prefix: str = "/schoolImages/"

    # Image upload Settings
    max_image_size: int = 5 * 1024 * 1024  # 5MB in bytes
    allowed_image_types: list[str] = Field(
        default=[
            "image/jpeg",
            "image/png",
            "image/gif",
            "image/webp",
            "image/svg+xml",
        ]
    )

    # Add-school flow
    redirect_delay_seconds: float = 2.0

    # Logging Settings
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    log_format: Literal["json", "console"] = "json"

    @field_validator("allowed_image_types", mode="before")
    @classmethod
    def parse_allowed_image_types(cls, v: str | list[str]) -> list[str]:
        """Parse allowed image types from comma-separated string or list."""
        if isinstance(v, str):
            return [mime.strip() for mime in v.split(",") if mime.strip()]
        return v

    @field_validator("directory_base_url")
    @classmethod
    def validate_directory_base_url(cls, v: str) -> str:
        """Require an http(s) URL for the collaborator and drop trailing slashes."""
        if not v.startswith(("http://", "https://")):
            raise ValueError("directory_base_url must start with http:// or https://")
        return v.rstrip("/")

    @field_validator("redirect_delay_seconds")
    @classmethod
    def validate_redirect_delay(cls, v: float) -> float:
        if v < 0:
            raise ValueError("redirect_delay_seconds must not be negative")
        return v

    @property
    def is_development(self) -> bool:
        """Check if running in development environment."""
        return self.environment == "development"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance.

    This function caches the settings instance to avoid reloading
    configuration on every call. Settings are loaded once at startup.

    Returns:
        Settings: Cached application settings instance.
    """
    return Settings()
