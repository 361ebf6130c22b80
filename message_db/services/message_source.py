"""
Database message source.

Reads translations for the application's translation layer and stores
new source messages and translations.
"""

from collections.abc import Mapping

from loguru import logger

from message_db.db.connection import Database
from message_db.models.entry import MessageEntry
from message_db.models.tables import build_tables
from message_db.repositories.message_repository import (
    MessageRepository,
    SourceMessageRepository,
)
from message_db.utils.decorators import log_operation
from message_db.utils.exceptions import InvalidMessageError


class MessageSource:
    """
    Message reader and writer backed by the two message tables.

    Holds no state between calls besides the table definitions; every
    operation opens its own connection scope.

    Example:
        source = MessageSource(db)
        messages = await source.get_messages("app", "fr-FR")
    """

    def __init__(
        self,
        db: Database,
        source_table: str | None = None,
        message_table: str | None = None,
    ) -> None:
        """
        Initialize message source.

        Args:
            db: Database handle
            source_table: Logical source message table name,
                db.source_message_table by default
            message_table: Logical message table name, db.message_table by default
        """
        self.db = db
        self.tables = build_tables(
            db.resolve_table_name(source_table or db.source_message_table),
            db.resolve_table_name(message_table or db.message_table),
        )
        self.source_messages = SourceMessageRepository(self.tables.source)
        self.messages = MessageRepository(self.tables)
        self.logger = logger.bind(component="message_source")

    async def get_messages(self, category: str, locale: str) -> dict[str, str | None]:
        """
        Get every message of a category for a locale.

        Args:
            category: Message category
            locale: Locale, e.g. "en-US"

        Returns:
            Translations keyed by message_id; untranslated messages map to None
        """
        async with self.db.connect() as conn:
            messages = await self.messages.find_translations(conn, category, locale)

        self.logger.debug(
            f"Loaded {len(messages)} messages for category '{category}', "
            f"locale '{locale}'"
        )
        return messages

    async def get_message(
        self, message_id: str, category: str, locale: str
    ) -> str | None:
        """
        Get the translation of a single message.

        Returns:
            Translation or None if the message is unknown or untranslated
        """
        async with self.db.connect() as conn:
            return await self.messages.find_translation(
                conn, message_id, category, locale
            )

    async def resolve_messages(self, category: str, locale: str) -> dict[str, str]:
        """
        Get display strings of a category, falling back to the source text.

        Returns:
            Translations keyed by message_id, message_id itself when untranslated
        """
        messages = await self.get_messages(category, locale)
        return {
            message_id: message_id if translation is None else translation
            for message_id, translation in messages.items()
        }

    @log_operation
    async def write(
        self, category: str, locale: str, messages: Mapping[str, MessageEntry]
    ) -> None:
        """
        Store translations of a category for a locale.

        Missing source messages are created with the entry comment. Existing
        translations are updated only when the text changed.

        Args:
            category: Message category
            locale: Locale
            messages: Entries keyed by message_id

        Raises:
            InvalidMessageError: If a value is not a MessageEntry
        """
        for message_id, entry in messages.items():
            if not isinstance(entry, MessageEntry):
                raise InvalidMessageError(
                    f"Message '{message_id}' must be a MessageEntry, "
                    f"got {type(entry).__name__}."
                )

        async with self.db.begin() as conn:
            source_ids = await self.source_messages.find_ids_by_category(conn, category)
            translated = await self.messages.find_stored_translations(conn, category, locale)

            created = updated = 0
            for message_id, entry in messages.items():
                source_id = source_ids.get(message_id)
                if source_id is None:
                    source_id = await self.source_messages.create(
                        conn,
                        category=category,
                        message_id=message_id,
                        comment=entry.comment,
                    )
                    source_ids[message_id] = source_id

                if source_id not in translated:
                    await self.messages.create(
                        conn, id=source_id, locale=locale, translation=entry.translation
                    )
                    created += 1
                elif translated[source_id] != entry.translation:
                    await self.messages.update(
                        conn,
                        {"translation": entry.translation},
                        id=source_id,
                        locale=locale,
                    )
                    updated += 1

        self.logger.info(
            f"Stored messages for category '{category}', locale '{locale}': "
            f"{created} created, {updated} updated"
        )
