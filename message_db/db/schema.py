"""
Normalized table schema description.

Reflected metadata differs between engines: SQLite reports foreign keys
without constraint names and every engine has its own type classes. This
module maps inspector output onto one canonical shape.
"""

from dataclasses import dataclass, field
from typing import Any

from sqlalchemy import Boolean, Integer, String, Text, inspect
from sqlalchemy.engine import Connection
from sqlalchemy.types import TypeEngine


TYPE_BOOLEAN = "boolean"
TYPE_INTEGER = "integer"
TYPE_STRING = "string"
TYPE_TEXT = "text"


@dataclass(frozen=True)
class ColumnSchema:
    """Reflected column."""

    name: str
    type: str
    size: int | None = None
    nullable: bool = True


@dataclass(frozen=True)
class ForeignKeySchema:
    """
    Reflected foreign key.

    Attributes:
        name: Constraint name, None when the engine does not report one
        referred_table: Referenced physical table name
        columns: Local column -> referenced column
    """

    name: str | None
    referred_table: str
    columns: dict[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class TableSchema:
    """Reflected table: ordered columns, primary key and foreign keys."""

    name: str
    columns: list[ColumnSchema]
    primary_key: list[str]
    foreign_keys: list[ForeignKeySchema]

    @property
    def column_names(self) -> list[str]:
        return [column.name for column in self.columns]

    def get_column(self, name: str) -> ColumnSchema | None:
        for column in self.columns:
            if column.name == name:
                return column
        return None


def normalize_type(type_: TypeEngine) -> str:
    """
    Map a reflected SQLAlchemy type onto the abstract type vocabulary.

    Text is checked before String since it subclasses it.
    """
    if isinstance(type_, Boolean):
        return TYPE_BOOLEAN
    if isinstance(type_, Integer):
        return TYPE_INTEGER
    if isinstance(type_, Text):
        return TYPE_TEXT
    if isinstance(type_, String):
        return TYPE_STRING
    return type(type_).__name__.lower()


def _column_from_reflection(data: dict[str, Any]) -> ColumnSchema:
    type_ = data["type"]
    return ColumnSchema(
        name=data["name"],
        type=normalize_type(type_),
        size=getattr(type_, "length", None),
        nullable=bool(data.get("nullable", True)),
    )


def _foreign_key_from_reflection(data: dict[str, Any]) -> ForeignKeySchema:
    return ForeignKeySchema(
        name=data.get("name") or None,
        referred_table=data["referred_table"],
        columns=dict(zip(data["constrained_columns"], data["referred_columns"])),
    )


def reflect_table(sync_conn: Connection, name: str) -> TableSchema | None:
    """
    Reflect a table through the SQLAlchemy inspector.

    Runs on a sync connection, use via ``AsyncConnection.run_sync``.

    Args:
        sync_conn: Sync connection
        name: Physical table name

    Returns:
        TableSchema or None if the table does not exist
    """
    inspector = inspect(sync_conn)
    if not inspector.has_table(name):
        return None

    pk = inspector.get_pk_constraint(name)
    return TableSchema(
        name=name,
        columns=[_column_from_reflection(c) for c in inspector.get_columns(name)],
        primary_key=list(pk.get("constrained_columns") or []),
        foreign_keys=[
            _foreign_key_from_reflection(fk)
            for fk in inspector.get_foreign_keys(name)
        ],
    )


def has_table(sync_conn: Connection, name: str) -> bool:
    """Check table existence on a sync connection."""
    return inspect(sync_conn).has_table(name)
