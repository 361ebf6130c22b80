"""
Database message store for translations.

Stores source messages and their per-locale translations in two tables and
reads them back per category and locale.
"""

from message_db.db.connection import Database
from message_db.models.entry import MessageEntry
from message_db.services.message_source import MessageSource
from message_db.services.schema_manager import drop_tables, ensure_tables
from message_db.utils.exceptions import (
    InvalidMessageError,
    MessageDbError,
    SchemaAlreadyExistsError,
)

__version__ = "1.0.0"

__all__ = [
    "Database",
    "InvalidMessageError",
    "MessageDbError",
    "MessageEntry",
    "MessageSource",
    "SchemaAlreadyExistsError",
    "drop_tables",
    "ensure_tables",
]
