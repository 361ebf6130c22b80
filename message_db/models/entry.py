"""
Message entry passed to the message writer.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class MessageEntry:
    """
    Translation of one source message for one locale.

    Attributes:
        translation: Localized text, None when not translated yet
        comment: Translator note stored on the source message
    """
    translation: str | None
    comment: str | None = None
