"""
Base repository.

Generic row operations over a SQLAlchemy Core table.
"""

from typing import Any

from sqlalchemy import ColumnElement, Row, Table, and_, func, insert, select, true, update
from sqlalchemy.ext.asyncio import AsyncConnection


class BaseRepository:
    """
    Base repository with generic row operations.

    Works on Core tables since table names are resolved at runtime. Every
    method takes the connection to run on, so several calls can share one
    transaction.

    Example:
        class SourceMessageRepository(BaseRepository):
            def __init__(self, table: Table):
                super().__init__(table)
    """

    def __init__(self, table: Table) -> None:
        """
        Initialize repository.

        Args:
            table: Core table the repository operates on
        """
        self.table = table

    def _where(self, **filters: Any) -> ColumnElement[bool]:
        """Build an AND clause of column equality filters."""
        if not filters:
            return true()
        return and_(*(self.table.c[key] == value for key, value in filters.items()))

    async def find_all(self, conn: AsyncConnection, **filters: Any) -> list[Row]:
        """
        Find all rows matching filters.

        Inspection helper for callers and tests; the message source reads
        through the dedicated queries of its subclasses instead.

        Args:
            conn: Connection to run on
            **filters: Column filters

        Returns:
            List of matching rows
        """
        stmt = select(self.table).where(self._where(**filters))
        result = await conn.execute(stmt)
        return list(result.all())

    async def count(self, conn: AsyncConnection, **filters: Any) -> int:
        """
        Count rows matching filters.

        Inspection helper for callers and tests, like find_all().

        Args:
            conn: Connection to run on
            **filters: Column filters

        Returns:
            Count of matching rows
        """
        stmt = select(func.count()).select_from(self.table).where(self._where(**filters))
        result = await conn.execute(stmt)
        return result.scalar() or 0

    async def create(self, conn: AsyncConnection, **data: Any) -> Any:
        """
        Insert a row.

        Args:
            conn: Connection to run on
            **data: Column values

        Returns:
            First primary key value of the inserted row
        """
        result = await conn.execute(insert(self.table).values(**data))
        return result.inserted_primary_key[0]

    async def update(
        self, conn: AsyncConnection, values: dict[str, Any], **filters: Any
    ) -> int:
        """
        Update rows matching filters.

        Args:
            conn: Connection to run on
            values: New column values
            **filters: Column filters

        Returns:
            Number of updated rows
        """
        stmt = update(self.table).where(self._where(**filters)).values(**values)
        result = await conn.execute(stmt)
        return result.rowcount
