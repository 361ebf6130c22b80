"""
Source message and message tables.

Tables are built per physical name pair so that callers can keep several
message stores (or prefixed copies) in one database.

Timeline of a lookup:
- source_message holds one row per (category, message_id)
- message holds zero or more translations per source row, one per locale
"""

from typing import NamedTuple

from sqlalchemy import (
    Column,
    ForeignKeyConstraint,
    Index,
    Integer,
    MetaData,
    Table,
    Text,
)

from message_db.config.constants import (
    CATEGORY_INDEX_NAME,
    FOREIGN_KEY_NAME,
    LOCALE_INDEX_NAME,
)
from message_db.models.types import CategoryType, LocaleType


class MessageTables(NamedTuple):
    """Source and message tables bound to one MetaData."""

    metadata: MetaData
    source: Table
    message: Table


def build_source_message_table(metadata: MetaData, name: str) -> Table:
    """
    Build the source message table.

    Args:
        metadata: MetaData to attach the table to
        name: Physical table name

    Returns:
        Table with columns id, category, message_id, comment
    """
    return Table(
        name,
        metadata,
        Column("id", Integer, primary_key=True, autoincrement=True),
        Column("category", CategoryType),
        Column("message_id", Text),
        Column("comment", Text),
        Index(CATEGORY_INDEX_NAME.format(table=name), "category"),
    )


def build_message_table(metadata: MetaData, name: str, source: Table) -> Table:
    """
    Build the translation table referencing ``source``.

    Args:
        metadata: MetaData to attach the table to
        name: Physical table name
        source: Source message table the id column references

    Returns:
        Table with columns id, locale, translation and PK (id, locale)
    """
    return Table(
        name,
        metadata,
        Column("id", Integer, primary_key=True, autoincrement=False, nullable=False),
        Column("locale", LocaleType, primary_key=True, nullable=False),
        Column("translation", Text),
        ForeignKeyConstraint(
            ["id"],
            [source.c.id],
            name=FOREIGN_KEY_NAME.format(source=source.name, message=name),
        ),
        Index(LOCALE_INDEX_NAME.format(table=name), "locale"),
    )


def build_tables(source_name: str, message_name: str) -> MessageTables:
    """Build both tables on a fresh MetaData."""
    metadata = MetaData()
    source = build_source_message_table(metadata, source_name)
    message = build_message_table(metadata, message_name, source)
    return MessageTables(metadata=metadata, source=source, message=message)
