"""
Standard column types for the message tables.
"""

from sqlalchemy import String

from message_db.config.constants import CATEGORY_LENGTH, LOCALE_LENGTH

# Message group label, e.g. "app" or "validation"
CategoryType = String(CATEGORY_LENGTH)

# Language/region identifier, e.g. "en-US"
LocaleType = String(LOCALE_LENGTH)
