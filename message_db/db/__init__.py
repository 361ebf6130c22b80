"""
Database access layer.

Exports the connection handle and the normalized schema description types.
"""

from message_db.db.connection import Database
from message_db.db.naming import resolve_table_name
from message_db.db.schema import ColumnSchema, ForeignKeySchema, TableSchema

__all__ = [
    "ColumnSchema",
    "Database",
    "ForeignKeySchema",
    "TableSchema",
    "resolve_table_name",
]
