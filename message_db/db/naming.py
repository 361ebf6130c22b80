"""
Table name resolution.

Logical table names may carry a prefix placeholder:
- "{{%name}}" resolves to "<prefix>name"
- "{{name}}" resolves to "name"
- anything else is used unchanged
"""

import re

TABLE_NAME_PATTERN = re.compile(r"^\{\{(%?)([^{}]+)\}\}$")


def resolve_table_name(name: str, prefix: str = "") -> str:
    """
    Resolve a logical table name to its physical name.

    Args:
        name: Logical table name, e.g. "{{%message}}"
        prefix: Configured table prefix

    Returns:
        Physical table name used in SQL and introspection
    """
    match = TABLE_NAME_PATTERN.match(name.strip())
    if match is None:
        return name

    placeholder, bare_name = match.groups()
    return f"{prefix}{bare_name}" if placeholder else bare_name
