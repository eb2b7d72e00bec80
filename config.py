"""
Configuration settings for the quiz answer sheets helpers.

Uses Pydantic Settings for environment variable management with .env file support.
"""
from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="ANSWERSHEETS_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # ========================================
    # Database
    # ========================================
    database_url: str = Field(
        default="sqlite:///answersheets.db",
        description="SQLAlchemy connection string for the user record store",
    )

    # ========================================
    # Site
    # ========================================
    wwwroot: str = Field(
        default="",
        description="Site root prepended to generated links (empty for relative links)",
    )

    # ========================================
    # Localization
    # ========================================
    lang: str = Field(
        default="en",
        description="Language of the string tables used for display text",
    )
    timezone: str = Field(
        default="UTC",
        description="IANA timezone used when formatting attempt timestamps",
    )
    date_format: str = Field(
        default="%A, %d %B %Y, %I:%M %p",
        description="strftime pattern for full dates (e.g. 'Started on')",
    )

    # ========================================
    # User identity
    # ========================================
    fullname_format: str = Field(
        default="{firstname} {lastname}",
        description="Template for a user's display name",
    )
    show_user_identity: str = Field(
        default="email",
        description="Comma-separated extra identity fields shown next to names",
    )

    # ========================================
    # Logging
    # ========================================
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO",
        description="Logging verbosity level",
    )
    log_file: str | None = Field(
        default=None,
        description="Log file path (None for stderr only)",
    )

    def get_identity_fields(self) -> list[str]:
        """Return the configured identity fields in declared order."""
        return [f.strip() for f in self.show_user_identity.split(",") if f.strip()]


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
