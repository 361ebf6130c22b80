"""Pytest configuration and shared fixtures for all tests."""

import os
import sys
from pathlib import Path

# Minimal environment for settings validation
os.environ.setdefault("MESSAGE_DB_DATABASE_URL", "sqlite+aiosqlite:///./test_messages.db")
os.environ.setdefault("MESSAGE_DB_LOG_LEVEL", "DEBUG")

# Add project root to PYTHONPATH
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

import pytest
import pytest_asyncio
from loguru import logger
from sqlalchemy.pool import NullPool

from message_db.config.settings import get_settings
from message_db.db.connection import Database


POSTGRES_URL = os.environ.get("TEST_POSTGRES_URL")

DATABASE_BACKENDS = [
    pytest.param("sqlite", id="sqlite"),
    pytest.param(
        "postgresql",
        id="postgresql",
        marks=[
            pytest.mark.postgres,
            pytest.mark.skipif(not POSTGRES_URL, reason="TEST_POSTGRES_URL not set"),
        ],
    ),
]


@pytest.fixture(params=["", "tbl_"], ids=["no-prefix", "prefix"])
def table_prefix(request):
    """Table prefix the database handle resolves "{{%name}}" with."""
    return request.param


@pytest_asyncio.fixture(params=DATABASE_BACKENDS)
async def db(request, tmp_path, table_prefix):
    """
    Database handle on a fresh database.

    SQLite uses a temporary file per test. PostgreSQL tests run against
    TEST_POSTGRES_URL and expect an empty schema.
    """
    if request.param == "sqlite":
        url = f"sqlite+aiosqlite:///{tmp_path / 'messages.db'}"
    else:
        url = POSTGRES_URL

    database = Database.from_url(url, table_prefix=table_prefix, poolclass=NullPool)
    yield database
    await database.dispose()


@pytest.fixture
def log_records():
    """Collect loguru messages emitted during a test."""
    records = []
    handler_id = logger.add(lambda message: records.append(message.record), level="DEBUG")
    yield records
    logger.remove(handler_id)


@pytest.fixture
def fresh_settings():
    """Reload settings from the environment before and after the test."""
    get_settings.cache_clear()
    yield get_settings
    get_settings.cache_clear()
