"""
Message store settings.

Loads configuration from MESSAGE_DB_ prefixed environment variables using
pydantic-settings.
"""

from functools import lru_cache

from loguru import logger
from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from message_db.config.constants import (
    DEFAULT_MESSAGE_TABLE,
    DEFAULT_SOURCE_MESSAGE_TABLE,
)


ASYNC_DATABASE_SCHEMES = ("sqlite+aiosqlite://", "postgresql+asyncpg://")
LOG_LEVELS = ("TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseSettings):
    """Message store settings loaded from environment variables."""

    # Database
    database_url: str = "sqlite+aiosqlite:///./messages.db"
    database_echo: bool = False

    # Tables
    table_prefix: str = ""
    source_message_table: str = DEFAULT_SOURCE_MESSAGE_TABLE
    message_table: str = DEFAULT_MESSAGE_TABLE

    # Application
    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_prefix="MESSAGE_DB_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("database_url")
    @classmethod
    def validate_database_url(cls, v: str) -> str:
        """Validate that the database URL uses an async driver."""
        if not v.startswith(ASYNC_DATABASE_SCHEMES):
            raise ValueError(
                "MESSAGE_DB_DATABASE_URL must start with one of: "
                + ", ".join(ASYNC_DATABASE_SCHEMES)
            )
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level name."""
        level = v.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"Invalid log level: {v}")
        return level

    @field_validator("table_prefix")
    @classmethod
    def validate_table_prefix(cls, v: str) -> str:
        """Warn about prefixes that need quoting on most engines."""
        if v and not v.replace("_", "").isalnum():
            logger.warning(
                f"MESSAGE_DB_TABLE_PREFIX '{v}' contains characters other than "
                "letters, digits and underscores"
            )
        return v


@lru_cache
def get_settings() -> Settings:
    """
    Load settings on first use.

    Built lazily so that importing the package never validates the
    environment; a bad MESSAGE_DB_DATABASE_URL fails at the first call.
    """
    return Settings()
