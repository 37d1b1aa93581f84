"""
Waitlist Domain Enums
"""

from enum import Enum


class StoreBackend(str, Enum):
    """Where waitlist signups are persisted"""

    sql = "sql"
    notion = "notion"
