"""
Structured error types for the media-library schema layer.

Every error raised by a backend carries a category, a retry hint, a
structured context (which database, table and SQL statement were involved)
and the chained driver exception, so that callers can log one dict instead
of parsing driver messages.

Manifesto:
    DDL generation can never fail; everything that can fail happens inside a
    backend. Backends therefore translate driver exceptions (``sqlite3``,
    ``asyncpg``) into this hierarchy so callers never import a driver just to
    catch its errors.

    - **Typed hierarchy:** connection vs. query vs. missing-id failures
    - **Explicit retry semantics:** connection errors are retryable
    - **Rich context:** the failing SQL travels with the error
    - **Error chaining:** the driver exception is kept as ``cause``

Architecture:
    ::

        MediaLibError
        ├── TransientError (retryable)
        │   └── DatabaseConnectionError   init() could not acquire resource
        ├── ConfigError                   bad settings / unknown backend
        └── DatabaseError
            ├── QueryError                statement rejected by backend
            └── MissingLastIdError        insert produced no generated key

Examples:
    >>> err = QueryError("no such table: CLDB.Foo").with_context(sql="SELECT * FROM CLDB.Foo")
    >>> err.context.sql
    'SELECT * FROM CLDB.Foo'
    >>> err.to_dict()["category"]
    'DATABASE'

Tags:
    errors, exceptions, retry, context, medialib
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class ErrorCategory(str, Enum):
    """Error classification used for routing and retry decisions."""

    DATABASE = "DATABASE"       # Connection, query, constraint
    NETWORK = "NETWORK"         # Server unreachable, DNS
    STORAGE = "STORAGE"         # Database file, directory
    CONFIG = "CONFIG"           # Missing or invalid settings
    INTERNAL = "INTERNAL"       # Bugs, unexpected state
    UNKNOWN = "UNKNOWN"


@dataclass
class ErrorContext:
    """
    Structured metadata attached to an error.

    Only non-None fields end up in ``to_dict()``; anything that has no
    dedicated field goes into ``metadata``.
    """

    database: str | None = None
    table: str | None = None
    sql: str | None = None
    backend: str | None = None
    metadata: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {}
        for key in ("database", "table", "sql", "backend"):
            value = getattr(self, key)
            if value is not None:
                result[key] = value
        result.update(self.metadata)
        return result


class MediaLibError(Exception):
    """
    Base exception for all media-library errors.

    Subclasses set ``default_category`` and ``default_retryable``; callers
    may override both per instance.
    """

    default_category: ErrorCategory = ErrorCategory.INTERNAL
    default_retryable: bool = False

    def __init__(
        self,
        message: str,
        *,
        category: ErrorCategory | None = None,
        retryable: bool | None = None,
        context: ErrorContext | None = None,
        cause: Exception | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.category = category or self.default_category
        self.retryable = retryable if retryable is not None else self.default_retryable
        self.context = context or ErrorContext()
        self.cause = cause

        if cause is not None:
            self.__cause__ = cause

    def with_context(self, **kwargs: Any) -> MediaLibError:
        """
        Add context to this error (fluent API).

        Usage:
            raise QueryError("failed", cause=exc).with_context(sql=sql, table="PersonInfo")
        """
        for key, value in kwargs.items():
            if key != "metadata" and hasattr(self.context, key):
                setattr(self.context, key, value)
            else:
                self.context.metadata[key] = value
        return self

    def to_dict(self) -> dict[str, Any]:
        """Convert error to dictionary for logging/serialization."""
        result: dict[str, Any] = {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "category": self.category.value,
            "retryable": self.retryable,
        }
        context_dict = self.context.to_dict()
        if context_dict:
            result["context"] = context_dict
        if self.cause is not None:
            result["cause"] = str(self.cause)
        return result

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.message!r}, category={self.category.value})"


# =============================================================================
# TRANSIENT ERRORS
# =============================================================================


class TransientError(MediaLibError):
    """Temporary failure that may succeed on retry."""

    default_category = ErrorCategory.NETWORK
    default_retryable = True


class DatabaseConnectionError(TransientError):
    """The backend resource (file, server) could not be acquired."""

    default_category = ErrorCategory.DATABASE


# =============================================================================
# CONFIGURATION ERRORS
# =============================================================================


class ConfigError(MediaLibError):
    """Invalid or missing configuration."""

    default_category = ErrorCategory.CONFIG
    default_retryable = False


# =============================================================================
# DATABASE ERRORS
# =============================================================================


class DatabaseError(MediaLibError):
    """Statement or transaction failure reported by a backend."""

    default_category = ErrorCategory.DATABASE
    default_retryable = False


class QueryError(DatabaseError):
    """The backend rejected a SQL statement."""


class MissingLastIdError(DatabaseError):
    """An insert did not report the generated key back."""


# =============================================================================
# UTILITY FUNCTIONS
# =============================================================================


def is_retryable(error: Exception) -> bool:
    """Check if an error is retryable."""
    if isinstance(error, MediaLibError):
        return error.retryable
    return isinstance(error, (ConnectionError, TimeoutError))


def categorize_error(error: Exception) -> ErrorCategory:
    """Get the category of an error."""
    if isinstance(error, MediaLibError):
        return error.category
    if isinstance(error, (ConnectionError, TimeoutError)):
        return ErrorCategory.NETWORK
    if isinstance(error, OSError):
        return ErrorCategory.STORAGE
    return ErrorCategory.UNKNOWN


__all__ = [
    "ErrorCategory",
    "ErrorContext",
    "MediaLibError",
    "TransientError",
    "DatabaseConnectionError",
    "ConfigError",
    "DatabaseError",
    "QueryError",
    "MissingLastIdError",
    "is_retryable",
    "categorize_error",
]
