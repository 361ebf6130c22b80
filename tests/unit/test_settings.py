"""Unit tests for settings validation and loading."""

import importlib

import pytest
from pydantic import ValidationError

import message_db.config.settings as settings_module
from message_db.config.settings import Settings


class TestSettings:
    """Tests for Settings."""

    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("MESSAGE_DB_DATABASE_URL", raising=False)
        monkeypatch.delenv("MESSAGE_DB_LOG_LEVEL", raising=False)

        settings = Settings(_env_file=None)

        assert settings.database_url == "sqlite+aiosqlite:///./messages.db"
        assert settings.table_prefix == ""
        assert settings.source_message_table == "{{%source_message}}"
        assert settings.message_table == "{{%message}}"
        assert settings.log_level == "INFO"

    def test_reads_prefixed_environment(self, monkeypatch):
        monkeypatch.setenv("MESSAGE_DB_DATABASE_URL", "postgresql+asyncpg://user:secret@db/messages")
        monkeypatch.setenv("MESSAGE_DB_TABLE_PREFIX", "app_")
        monkeypatch.setenv("MESSAGE_DB_SOURCE_MESSAGE_TABLE", "{{%i18n_source}}")
        monkeypatch.setenv("MESSAGE_DB_MESSAGE_TABLE", "{{%i18n_message}}")

        settings = Settings(_env_file=None)

        assert settings.database_url == "postgresql+asyncpg://user:secret@db/messages"
        assert settings.table_prefix == "app_"
        assert settings.source_message_table == "{{%i18n_source}}"
        assert settings.message_table == "{{%i18n_message}}"

    def test_host_application_variables_ignored(self, monkeypatch):
        """Unprefixed DATABASE_URL belongs to the host application."""
        monkeypatch.delenv("MESSAGE_DB_DATABASE_URL", raising=False)
        monkeypatch.setenv("DATABASE_URL", "postgresql://app@db/app")
        monkeypatch.setenv("TABLE_PREFIX", "host_")

        settings = Settings(_env_file=None)

        assert settings.database_url == "sqlite+aiosqlite:///./messages.db"
        assert settings.table_prefix == ""

    @pytest.mark.parametrize(
        "url",
        ["postgresql://user@db/messages", "sqlite:///messages.db", "mysql://db"],
    )
    def test_sync_driver_rejected(self, url):
        with pytest.raises(ValidationError, match="DATABASE_URL must start with"):
            Settings(_env_file=None, database_url=url)

    def test_log_level_normalized(self):
        assert Settings(_env_file=None, log_level="debug").log_level == "DEBUG"

    def test_invalid_log_level(self):
        with pytest.raises(ValidationError, match="Invalid log level"):
            Settings(_env_file=None, log_level="verbose")


class TestSettingsLoading:
    """Settings are validated on first use, not at import."""

    def test_import_with_invalid_environment(self, monkeypatch, fresh_settings):
        monkeypatch.setenv("DATABASE_URL", "postgresql://app@db/app")
        monkeypatch.setenv("MESSAGE_DB_DATABASE_URL", "postgresql://app@db/app")

        importlib.reload(settings_module)

        with pytest.raises(ValidationError):
            fresh_settings()

    def test_get_settings_is_cached(self, fresh_settings):
        assert fresh_settings() is fresh_settings()
