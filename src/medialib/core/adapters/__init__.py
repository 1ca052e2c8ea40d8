"""Backend sessions.

- ``SQLiteSession``: embedded files attached to one aiosqlite connection
- ``PostgresSession``: one asyncpg connection, one schema per database
"""

from .postgresql import PostgresSession, normalize_database_url
from .registry import SessionRegistry, create_session, session_registry
from .sqlite import SQLiteSession, default_paths

__all__ = [
    "PostgresSession",
    "SQLiteSession",
    "SessionRegistry",
    "create_session",
    "default_paths",
    "normalize_database_url",
    "session_registry",
]
