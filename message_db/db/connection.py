"""
Database handle.

Wraps an async SQLAlchemy engine together with the table prefix and the
logical table names of the message store.
"""

from contextlib import AbstractAsyncContextManager

from loguru import logger
from sqlalchemy.ext.asyncio import AsyncConnection, AsyncEngine, create_async_engine

from message_db.config.constants import (
    DEFAULT_MESSAGE_TABLE,
    DEFAULT_SOURCE_MESSAGE_TABLE,
)
from message_db.config.settings import Settings, get_settings
from message_db.db.naming import resolve_table_name
from message_db.db.schema import TableSchema, has_table, reflect_table


class Database:
    """
    Connection collaborator for the message store.

    Connection lifecycle (pooling, acquisition, release) belongs to the
    engine. Every operation opens its own connection scope.

    Example:
        db = Database.from_url("sqlite+aiosqlite:///./messages.db", table_prefix="app_")
        await ensure_tables(db)
    """

    def __init__(
        self,
        engine: AsyncEngine,
        table_prefix: str = "",
        source_message_table: str = DEFAULT_SOURCE_MESSAGE_TABLE,
        message_table: str = DEFAULT_MESSAGE_TABLE,
    ) -> None:
        """
        Initialize database handle.

        Args:
            engine: Async SQLAlchemy engine
            table_prefix: Prefix substituted for "%" in "{{%name}}" table names
            source_message_table: Logical source message table name used
                when an operation is given none
            message_table: Logical message table name used when an
                operation is given none
        """
        self.engine = engine
        self.table_prefix = table_prefix
        self.source_message_table = source_message_table
        self.message_table = message_table
        self.logger = logger.bind(component="database", driver=self.driver_name)

    @classmethod
    def from_url(
        cls,
        url: str,
        table_prefix: str = "",
        echo: bool = False,
        source_message_table: str = DEFAULT_SOURCE_MESSAGE_TABLE,
        message_table: str = DEFAULT_MESSAGE_TABLE,
        **engine_kwargs,
    ) -> "Database":
        """Create a handle with a new engine for ``url``."""
        engine = create_async_engine(url, echo=echo, **engine_kwargs)
        return cls(
            engine,
            table_prefix=table_prefix,
            source_message_table=source_message_table,
            message_table=message_table,
        )

    @classmethod
    def from_settings(cls, settings: Settings | None = None, **engine_kwargs) -> "Database":
        """
        Create a handle from settings.

        Args:
            settings: Settings to use, loaded from the environment when omitted
            **engine_kwargs: Extra create_async_engine() arguments

        Raises:
            pydantic.ValidationError: If the environment holds invalid settings
        """
        settings = settings or get_settings()
        return cls.from_url(
            settings.database_url,
            table_prefix=settings.table_prefix,
            echo=settings.database_echo,
            source_message_table=settings.source_message_table,
            message_table=settings.message_table,
            **engine_kwargs,
        )

    @property
    def driver_name(self) -> str:
        """Dialect name, e.g. "sqlite" or "postgresql"."""
        return self.engine.dialect.name

    def resolve_table_name(self, name: str) -> str:
        """Resolve a logical table name using the configured prefix."""
        return resolve_table_name(name, self.table_prefix)

    def connect(self) -> AbstractAsyncContextManager[AsyncConnection]:
        """Open a connection without an explicit transaction."""
        return self.engine.connect()

    def begin(self) -> AbstractAsyncContextManager[AsyncConnection]:
        """Open a connection in a transaction, committed on success."""
        return self.engine.begin()

    async def table_exists(self, name: str) -> bool:
        """
        Check whether a table exists.

        Args:
            name: Logical or physical table name

        Returns:
            True if the table exists
        """
        physical = self.resolve_table_name(name)
        async with self.connect() as conn:
            return await conn.run_sync(has_table, physical)

    async def get_table_schema(self, name: str) -> TableSchema | None:
        """
        Describe a table.

        Args:
            name: Logical or physical table name

        Returns:
            Normalized table schema or None if the table does not exist
        """
        physical = self.resolve_table_name(name)
        async with self.connect() as conn:
            return await conn.run_sync(reflect_table, physical)

    async def dispose(self) -> None:
        """Dispose of the engine's connection pool."""
        await self.engine.dispose()
        self.logger.debug("Engine disposed")
