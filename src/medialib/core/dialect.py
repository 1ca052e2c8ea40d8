"""DDL dialects for the media-library schema.

The media library runs on two platforms that share one logical schema:

- ``cyberlink``: the embedded, SQLite-compatible database files written by
  the desktop application. ``INTEGER PRIMARY KEY`` aliases the rowid and is
  therefore already auto-assigned.
- ``postgres``: a PostgreSQL server, where the surrogate key needs
  ``SERIAL``.

Column types and defaults are identical on both platforms; the dialects
differ only in how a surrogate primary key is rendered. A table's
``get_create_statements()`` is a pure mapping from (dialect, qualification
flags) to statements, and ``get_dialect()`` returns ``None`` for a tag it
does not know so that unknown platforms produce no DDL at all.

Examples:
    >>> get_dialect("postgres").surrogate_key("groupID")
    'groupID SERIAL PRIMARY KEY'
    >>> get_dialect("cyberlink").surrogate_key("groupID")
    'groupID INTEGER PRIMARY KEY'
    >>> get_dialect("oracle") is None
    True

Tags:
    dialect, ddl, sql, portability, medialib
"""

from __future__ import annotations

from enum import Enum
from typing import Protocol, runtime_checkable


class Platform(str, Enum):
    """Known dialect tags."""

    POSTGRES = "postgres"
    CYBERLINK = "cyberlink"


@runtime_checkable
class Dialect(Protocol):
    """DDL dialect contract.

    Every method returns a SQL fragment valid for the target platform.
    """

    @property
    def name(self) -> str:
        """Dialect tag (e.g. ``'postgres'``)."""
        ...

    def surrogate_key(self, column: str) -> str:
        """Column definition for an auto-assigned integer primary key."""
        ...


class CyberlinkDialect:
    """Embedded SQLite dialect: rowid-backed ``INTEGER PRIMARY KEY``."""

    @property
    def name(self) -> str:
        return Platform.CYBERLINK.value

    def surrogate_key(self, column: str) -> str:
        return f"{column} INTEGER PRIMARY KEY"


class PostgresDialect:
    """PostgreSQL dialect: ``SERIAL PRIMARY KEY``."""

    @property
    def name(self) -> str:
        return Platform.POSTGRES.value

    def surrogate_key(self, column: str) -> str:
        return f"{column} SERIAL PRIMARY KEY"


# =========================================================================
# Registry
# =========================================================================

# Dialects are stateless
_DIALECTS: dict[str, Dialect] = {
    Platform.CYBERLINK.value: CyberlinkDialect(),
    Platform.POSTGRES.value: PostgresDialect(),
}


def get_dialect(tag: str | Platform) -> Dialect | None:
    """Look up a dialect by its exact, case-sensitive tag.

    Returns ``None`` for unknown tags, ``"CyberLink"`` included; callers
    treat that as "no DDL for this platform" rather than as an error.
    """
    key = tag.value if isinstance(tag, Platform) else tag
    return _DIALECTS.get(key)


def register_dialect(name: str, dialect: Dialect) -> None:
    """Register an additional dialect under an exact tag."""
    _DIALECTS[name] = dialect


def list_dialects() -> list[str]:
    """Registered dialect tags, sorted."""
    return sorted(_DIALECTS)


__all__ = [
    "Platform",
    "Dialect",
    "CyberlinkDialect",
    "PostgresDialect",
    "get_dialect",
    "register_dialect",
    "list_dialects",
]
