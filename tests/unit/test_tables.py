"""Unit tests for table definitions."""

from sqlalchemy import Integer, String, Text

from message_db.models.tables import build_tables


class TestBuildTables:
    """Tests for the table builders (no database needed)."""

    def test_source_table_columns(self):
        tables = build_tables("app_source_message", "app_message")
        source = tables.source

        assert source.name == "app_source_message"
        assert [c.name for c in source.columns] == ["id", "category", "message_id", "comment"]
        assert [c.name for c in source.primary_key.columns] == ["id"]
        assert isinstance(source.c.id.type, Integer)
        assert isinstance(source.c.category.type, String)
        assert source.c.category.type.length == 255
        assert isinstance(source.c.message_id.type, Text)
        assert {index.name for index in source.indexes} == {"IDX_app_source_message_category"}

    def test_message_table_columns(self):
        tables = build_tables("app_source_message", "app_message")
        message = tables.message

        assert message.name == "app_message"
        assert [c.name for c in message.columns] == ["id", "locale", "translation"]
        assert [c.name for c in message.primary_key.columns] == ["id", "locale"]
        assert message.c.locale.type.length == 16
        assert message.c.translation.nullable is True
        assert {index.name for index in message.indexes} == {"IDX_app_message_locale"}

    def test_message_foreign_key(self):
        tables = build_tables("source_message", "message")
        (constraint,) = tables.message.foreign_key_constraints

        assert constraint.name == "FK_source_message_message"
        assert constraint.referred_table is tables.source
        assert [c.name for c in constraint.columns] == ["id"]

    def test_tables_share_metadata(self):
        tables = build_tables("source_message", "message")

        assert set(tables.metadata.tables) == {"source_message", "message"}
        assert tables.source.metadata is tables.metadata
