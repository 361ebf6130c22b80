"""
Schema manager.

Creates and drops the source message and message tables.

The existence check and the CREATE statements are not atomic against other
callers: two concurrent ensure_tables() calls for the same names race, and
one of them fails. Callers provision the schema from a single place.
"""

from loguru import logger

from message_db.db.connection import Database
from message_db.db.schema import has_table
from message_db.models.tables import MessageTables, build_tables
from message_db.utils.decorators import log_operation
from message_db.utils.exceptions import SchemaAlreadyExistsError


schema_logger = logger.bind(component="schema_manager")


def _resolve_tables(
    db: Database, source_table: str | None, message_table: str | None
) -> MessageTables:
    """Build tables for the given names or the handle's configured ones."""
    return build_tables(
        db.resolve_table_name(source_table or db.source_message_table),
        db.resolve_table_name(message_table or db.message_table),
    )


@log_operation
async def ensure_tables(
    db: Database,
    source_table: str | None = None,
    message_table: str | None = None,
) -> None:
    """
    Create the source message and message tables.

    Both tables are created in one transaction. On engines with
    transactional DDL (PostgreSQL) a failure on the second table rolls back
    the first one as well; elsewhere the first table remains.

    Args:
        db: Database handle
        source_table: Logical source message table name, db.source_message_table by default
        message_table: Logical message table name, db.message_table by default

    Raises:
        SchemaAlreadyExistsError: If either table already exists
    """
    tables = _resolve_tables(db, source_table, message_table)
    source_name, message_name = tables.source.name, tables.message.name

    async with db.begin() as conn:
        source_exists = await conn.run_sync(has_table, source_name)
        message_exists = await conn.run_sync(has_table, message_name)
        if source_exists or message_exists:
            raise SchemaAlreadyExistsError(source_name, message_name)

        await conn.run_sync(tables.source.create)
        await conn.run_sync(tables.message.create)

    schema_logger.info(f"Created tables '{source_name}' and '{message_name}'")


@log_operation
async def drop_tables(
    db: Database,
    source_table: str | None = None,
    message_table: str | None = None,
) -> None:
    """
    Drop the message table, then the source message table.

    Absent tables are not checked for; the driver error propagates.

    Args:
        db: Database handle
        source_table: Logical source message table name, db.source_message_table by default
        message_table: Logical message table name, db.message_table by default
    """
    tables = _resolve_tables(db, source_table, message_table)

    async with db.begin() as conn:
        # Child first, the foreign key points at the source table
        await conn.run_sync(tables.message.drop)
        await conn.run_sync(tables.source.drop)

    schema_logger.info(
        f"Dropped tables '{tables.message.name}' and '{tables.source.name}'"
    )
