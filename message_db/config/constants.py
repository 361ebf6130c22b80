"""
Schema constants.

Default logical table names and column sizes shared by the schema manager
and the message source.
"""

# Logical names resolve through the table prefix: "{{%name}}" -> "<prefix>name"
DEFAULT_SOURCE_MESSAGE_TABLE = "{{%source_message}}"
DEFAULT_MESSAGE_TABLE = "{{%message}}"

CATEGORY_LENGTH = 255
LOCALE_LENGTH = 16

# Constraint and index name templates (filled with physical table names)
FOREIGN_KEY_NAME = "FK_{source}_{message}"
CATEGORY_INDEX_NAME = "IDX_{table}_category"
LOCALE_INDEX_NAME = "IDX_{table}_locale"
