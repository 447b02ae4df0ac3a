"""Configuration management for Vrishti.

This module uses Pydantic Settings to load and validate configuration from
environment variables and .env files. Configuration is loaded at application
startup and is immutable during runtime.
"""

from functools import lru_cache
from typing import Literal

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration settings.

    Settings are loaded from environment variables (prefixed with
    ``VRISHTI_``) and .env files. The outbound mail credentials keep their
    historical names ``EMAIL_USER`` and ``EMAIL_PASS``.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="VRISHTI_",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    # Application Settings
    app_name: str = "Vrishti Bandhan"
    app_version: str = "0.1.0"
    environment: Literal["development", "production", "testing"] = "development"
    debug: bool = False

    # Server Settings
    host: str = "0.0.0.0"
    port: int = 5000

    # Database Settings
    database_url: str = "sqlite+aiosqlite:///./vrishti_data/vrishti.db"
    db_pool_size: int = 5
    db_max_overflow: int = 10
    db_pool_timeout: int = 30
    db_echo: bool = False

    # CORS Settings
    cors_origins: list[str] = Field(default=["*"])
    cors_allow_credentials: bool = True
    cors_allow_methods: list[str] = Field(default=["*"])
    cors_allow_headers: list[str] = Field(default=["*"])

    # Logging Settings
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    log_format: Literal["json", "console"] = "json"

    # Mail Settings
    email_user: str | None = Field(
        default=None,
        validation_alias=AliasChoices("EMAIL_USER", "VRISHTI_EMAIL_USER", "email_user"),
        description="Sender mailbox address, also used as the SMTP login",
    )
    email_pass: str | None = Field(
        default=None,
        validation_alias=AliasChoices("EMAIL_PASS", "VRISHTI_EMAIL_PASS", "email_pass"),
        description="Sender mailbox secret (app password)",
    )
    smtp_host: str = "smtp.gmail.com"
    smtp_port: int = 587
    smtp_use_tls: bool = True
    smtp_use_ssl: bool = False
    smtp_timeout: int = 10
    mail_from_name: str = "Vrishti Bandhan"

    # Seconds in-flight notifications may keep running after shutdown starts
    notification_shutdown_timeout: float = 10.0
    # Sends allowed on the mail service at once, across all fan-outs
    notification_concurrency: int = Field(default=10, ge=1)

    @field_validator("cors_origins", mode="before")
    @classmethod
    def parse_cors_origins(cls, v: str | list[str]) -> list[str]:
        """Parse CORS origins from comma-separated string or list."""
        if isinstance(v, str):
            return [origin.strip() for origin in v.split(",")]
        return v

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment == "production"

    @property
    def is_development(self) -> bool:
        """Check if running in development environment."""
        return self.environment == "development"

    @property
    def is_testing(self) -> bool:
        """Check if running in testing environment."""
        return self.environment == "testing"

    @property
    def mail_configured(self) -> bool:
        """Whether both mail credentials are present."""
        return bool(self.email_user and self.email_pass)


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance.

    This function caches the settings instance to avoid reloading
    configuration on every call. Settings are loaded once at startup.

    Returns:
        Settings: Cached application settings instance.
    """
    return Settings()
