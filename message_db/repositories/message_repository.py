"""
Message repositories.

Queries over the source message and message tables.
"""

from sqlalchemy import and_, select
from sqlalchemy.ext.asyncio import AsyncConnection

from message_db.models.tables import MessageTables
from message_db.repositories.base import BaseRepository


class SourceMessageRepository(BaseRepository):
    """Source message rows keyed by (category, message_id)."""

    async def find_ids_by_category(
        self, conn: AsyncConnection, category: str
    ) -> dict[str, int]:
        """
        Map message_id -> id for every source message in a category.

        Args:
            conn: Connection to run on
            category: Message category

        Returns:
            Source row ids keyed by message_id
        """
        stmt = select(self.table.c.message_id, self.table.c.id).where(
            self.table.c.category == category
        )
        result = await conn.execute(stmt)
        return {row.message_id: row.id for row in result}


class MessageRepository(BaseRepository):
    """
    Translation rows joined to their source messages.

    Args:
        tables: Source and message tables of one store
    """

    def __init__(self, tables: MessageTables) -> None:
        super().__init__(tables.message)
        self.source = tables.source

    def _translations_query(self, category: str, locale: str):
        source, message = self.source, self.table
        join = source.outerjoin(
            message,
            and_(message.c.id == source.c.id, message.c.locale == locale),
        )
        return (
            select(source.c.message_id, message.c.translation)
            .select_from(join)
            .where(source.c.category == category)
        )

    async def find_translations(
        self, conn: AsyncConnection, category: str, locale: str
    ) -> dict[str, str | None]:
        """
        Get all translations of a category for a locale.

        Source messages without a translation in ``locale`` are included
        with a None value.

        Args:
            conn: Connection to run on
            category: Message category
            locale: Locale, e.g. "en-US"

        Returns:
            Translations keyed by message_id
        """
        result = await conn.execute(self._translations_query(category, locale))
        return {row.message_id: row.translation for row in result}

    async def find_translation(
        self, conn: AsyncConnection, message_id: str, category: str, locale: str
    ) -> str | None:
        """Get one translation, None when missing or untranslated."""
        stmt = self._translations_query(category, locale).where(
            self.source.c.message_id == message_id
        )
        result = await conn.execute(stmt)
        row = result.first()
        return row.translation if row else None

    async def find_stored_translations(
        self, conn: AsyncConnection, category: str, locale: str
    ) -> dict[int, str | None]:
        """
        Map source id -> translation for stored translations only.

        Args:
            conn: Connection to run on
            category: Message category
            locale: Locale

        Returns:
            Stored translations keyed by source id
        """
        source, message = self.source, self.table
        stmt = (
            select(message.c.id, message.c.translation)
            .select_from(message.join(source, message.c.id == source.c.id))
            .where(source.c.category == category, message.c.locale == locale)
        )
        result = await conn.execute(stmt)
        return {row.id: row.translation for row in result}
