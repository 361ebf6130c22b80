"""
Message store models.

Table builders for the two-table schema and the value types passed to the
message writer.
"""

from message_db.models.entry import MessageEntry
from message_db.models.tables import (
    MessageTables,
    build_message_table,
    build_source_message_table,
    build_tables,
)

__all__ = [
    "MessageEntry",
    "MessageTables",
    "build_message_table",
    "build_source_message_table",
    "build_tables",
]
