"""medialib core -- platform-agnostic schema model and session base.

Architecture::

    Layer 1 -- Errors, Logging, Settings
        errors.py          Structured error hierarchy (MediaLibError, QueryError)
        logging.py         structlog configuration + context helpers
        settings.py        MEDIALIB_* environment settings (pydantic-settings)

    Layer 2 -- Schema Model
        dialect.py         Platform tags + primary-key strategy per platform
        schema.py          Column / Index / TableSchema statement generation
        database.py        Named, ordered collection of tables

    Layer 3 -- Data Access
        protocols.py       Execution + lifecycle contracts
        session.py         ExecutionSession: dump / clear / drop / transactions
        adapters/          SQLiteSession (aiosqlite), PostgresSession (asyncpg)

Tags:
    medialib, schema, ddl, async, sessions
"""

from medialib.core.database import Database
from medialib.core.dialect import Dialect, Platform, get_dialect
from medialib.core.errors import (
    ConfigError,
    DatabaseConnectionError,
    DatabaseError,
    ErrorCategory,
    ErrorContext,
    MediaLibError,
    MissingLastIdError,
    QueryError,
    TransientError,
)
from medialib.core.logging import configure_logging, get_logger
from medialib.core.protocols import ExecutionContract, LifecycleContract
from medialib.core.schema import Column, Index, TableSchema
from medialib.core.session import ExecutionSession
from medialib.core.settings import MediaLibSettings, get_settings

__all__ = [
    # errors
    "ConfigError",
    "DatabaseConnectionError",
    "DatabaseError",
    "ErrorCategory",
    "ErrorContext",
    "MediaLibError",
    "MissingLastIdError",
    "QueryError",
    "TransientError",
    # logging / settings
    "configure_logging",
    "get_logger",
    "MediaLibSettings",
    "get_settings",
    # schema
    "Column",
    "Database",
    "Dialect",
    "Index",
    "Platform",
    "TableSchema",
    "get_dialect",
    # sessions
    "ExecutionContract",
    "ExecutionSession",
    "LifecycleContract",
]
