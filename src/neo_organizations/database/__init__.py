"""Database connection management."""

from .connection import (
    DatabaseManager,
    close_database,
    get_database,
    init_database,
    set_database,
)

__all__ = [
    "DatabaseManager",
    "close_database",
    "get_database",
    "init_database",
    "set_database",
]
