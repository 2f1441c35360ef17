"""
Database infrastructure components.
"""

from peerhaven.infrastructure.database.connection import Base, DatabaseManager

__all__ = [
    "Base",
    "DatabaseManager",
]
