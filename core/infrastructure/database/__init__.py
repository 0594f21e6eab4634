"""Database engine and session management."""

from .config import (
    DatabaseSettings,
    close_database,
    create_engine,
    create_session_factory,
    init_database,
)

__all__ = [
    "DatabaseSettings",
    "close_database",
    "create_engine",
    "create_session_factory",
    "init_database",
]
