"""Unit tests for table name resolution."""

import pytest

from message_db.db.naming import resolve_table_name


class TestResolveTableName:
    """Tests for logical -> physical table names."""

    def test_prefix_placeholder(self):
        assert resolve_table_name("{{%message}}", "app_") == "app_message"

    def test_prefix_placeholder_without_prefix(self):
        assert resolve_table_name("{{%source_message}}") == "source_message"

    def test_braces_without_placeholder(self):
        """"{{name}}" drops the braces but ignores the prefix."""
        assert resolve_table_name("{{message}}", "app_") == "message"

    def test_plain_name_unchanged(self):
        assert resolve_table_name("message", "app_") == "message"

    @pytest.mark.parametrize(
        "name",
        ["{{%message", "%message}}", "{message}", "{{%a}}_{{%b}}"],
    )
    def test_malformed_placeholders_unchanged(self, name):
        assert resolve_table_name(name, "app_") == name
