"""
Application settings and configuration management.
"""

from __future__ import annotations

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings

from tagwarden import __version__


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Application
    app_name: str = Field(default="tagwarden")
    app_version: str = Field(default=__version__)
    debug: bool = Field(default=False)
    log_level: str = Field(default="INFO")

    # Database
    database_url: str = Field(default="sqlite+aiosqlite:///./tagwarden.db")
    database_dev_url: str = Field(default="sqlite+aiosqlite:///./tagwarden_dev.db")

    # Database Development
    development_mode: bool = Field(default=False)
    db_log_queries: bool = Field(default=False)  # Log all SQL queries

    # Housekeeping
    tag_cleanup_reverify: bool = Field(
        default=False
    )  # Re-scan sources right before deleting unused tags

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level."""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if v.upper() not in valid_levels:
            raise ValueError(f"Invalid log level: {v}")
        return v.upper()

    @property
    def is_sqlite(self) -> bool:
        """Check if database is SQLite."""
        return self.effective_database_url.startswith("sqlite")

    @property
    def effective_database_url(self) -> str:
        """Get the effective database URL based on development mode."""
        return self.database_dev_url if self.development_mode else self.database_url

    def get_sync_database_url(self) -> str:
        """Get synchronous database URL for Alembic migrations."""
        url = self.effective_database_url
        # Convert async drivers to sync
        return (
            url.replace("+asyncpg", "")
            .replace("+aiosqlite", "")
            .replace("+aiomysql", "")
        )

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
    }


def get_settings() -> Settings:
    """Get application settings."""
    return Settings()


# Global settings instance
settings = get_settings()
