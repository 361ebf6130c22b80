"""
Exception types.

Errors raised by the message store itself. Database failures are not
wrapped: SQLAlchemy exceptions reach the caller unchanged.
"""


class MessageDbError(Exception):
    """Base class for message store errors."""
    pass


class SchemaAlreadyExistsError(MessageDbError, RuntimeError):
    """
    Raised when the message tables are already present.

    Not retryable without dropping the tables first.
    """

    def __init__(self, source_table: str, message_table: str) -> None:
        self.source_table = source_table
        self.message_table = message_table
        super().__init__(
            f"Table '{source_table}' and '{message_table}' already exists."
        )


class InvalidMessageError(MessageDbError, ValueError):
    """Raised when a message passed to the writer is malformed."""
    pass
