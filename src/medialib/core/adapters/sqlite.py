"""SQLite session (``cyberlink`` platform).

One in-memory main connection with every media-library database file
attached under its database name, so ``CLDB.PersonInfo`` resolves to the
``PersonInfo`` table inside ``CLDB2.db``.
"""

from __future__ import annotations

import sqlite3
from collections.abc import Iterable, Mapping
from datetime import datetime
from pathlib import Path
from typing import TYPE_CHECKING, Any

import aiosqlite

from medialib.core.database import Database
from medialib.core.errors import DatabaseConnectionError, MissingLastIdError, QueryError
from medialib.core.logging import get_logger
from medialib.core.session import ExecutionSession
from medialib.core.utils import date_to_utc_string

if TYPE_CHECKING:
    from medialib.core.settings import MediaLibSettings

logger = get_logger(__name__)

# Relative to the base directory; "extra" lives under the root directory
DEFAULT_FILES: dict[str, str] = {
    "CLDB": "CLDB2.db",
    "moviemedia": "moviemedia2.db",
    "mediaScannerCache": "mediaScannerCache2.db",
    "Playlist": "playlist/Playlist2.db",
}
ROOT_FILES: dict[str, str] = {
    "extra": "extra.db",
}


def default_paths(settings: MediaLibSettings, databases: Iterable[Database]) -> dict[str, str]:
    """Map each database name to its file, creating parent directories."""
    paths: dict[str, str] = {}
    for database in databases:
        if database.name in ROOT_FILES:
            path = settings.resolved_root_dir / ROOT_FILES[database.name]
        else:
            filename = DEFAULT_FILES.get(database.name, f"{database.name}.db")
            path = settings.sqlite_base_dir / filename
        path.parent.mkdir(parents=True, exist_ok=True)
        paths[database.name] = str(path)
    return paths


def _bind(params: tuple[Any, ...]) -> tuple[Any, ...]:
    return tuple(date_to_utc_string(p) if isinstance(p, datetime) else p for p in params)


class SQLiteSession(ExecutionSession):
    """
    aiosqlite-backed session.

    Example:
        session = SQLiteSession(library.databases, {"CLDB": "/data/CLDB2.db", ...})
        await session.init()
        rows = await session.exec_query("SELECT * FROM CLDB.PersonInfo")
        await session.uninit()

    Paths may be ``":memory:"`` for throwaway databases.
    """

    use_table_schema = True
    use_index_schema = True
    use_index_table_schema = False

    def __init__(
        self,
        databases: Iterable[Database],
        paths: Mapping[str, str | Path],
    ):
        super().__init__()
        self._databases = tuple(databases)
        self._paths = {name: str(path) for name, path in paths.items()}
        self._conn: aiosqlite.Connection | None = None

    @property
    def databases(self) -> tuple[Database, ...]:
        return self._databases

    async def init(self) -> SQLiteSession:
        missing = [db.name for db in self._databases if db.name not in self._paths]
        if missing:
            raise DatabaseConnectionError(f"No file configured for database(s): {', '.join(missing)}")

        await self._close()
        try:
            self._conn = await aiosqlite.connect(":memory:", isolation_level=None)
        except (sqlite3.Error, OSError) as e:
            raise DatabaseConnectionError(f"Failed to open SQLite connection: {e}", cause=e) from e
        self._conn.row_factory = aiosqlite.Row

        # Never keep a half-attached connection
        try:
            for database in self._databases:
                await self._attach(database)
                await self.create_tables(database)
        except BaseException:
            await self._close()
            raise

        self.ready = True
        return self

    async def _attach(self, database: Database) -> None:
        path = self._paths[database.name]
        try:
            cursor = await self._connection().execute(f"ATTACH DATABASE ? AS {database.name}", (path,))
            await cursor.close()
        except sqlite3.Error as e:
            raise DatabaseConnectionError(
                f"Failed to attach {path!r} as {database.name}: {e}", cause=e
            ).with_context(database=database.name, backend="sqlite") from e
        logger.debug("database_attached", database=database.name, path=path)

    async def _close(self) -> None:
        if self._conn is not None:
            conn, self._conn = self._conn, None
            await conn.close()
        self.ready = False

    async def uninit(self) -> None:
        await self._close()
        logger.debug("session_closed", backend="sqlite")

    def _connection(self) -> aiosqlite.Connection:
        if self._conn is None:
            raise DatabaseConnectionError("SQLite session is not initialized")
        return self._conn

    async def exec_query(self, sql: str, *params: Any) -> list[dict[str, Any]]:
        conn = self._connection()
        try:
            async with conn.execute(sql, _bind(params)) as cursor:
                rows = await cursor.fetchall()
        except sqlite3.Error as e:
            raise QueryError(str(e), cause=e).with_context(sql=sql, backend="sqlite") from e
        return [dict(row) for row in rows]

    async def exec_ret_id(self, id_column: str, sql: str, *params: Any) -> int:
        conn = self._connection()
        try:
            async with conn.execute(sql, _bind(params)) as cursor:
                last_id = cursor.lastrowid
        except sqlite3.Error as e:
            raise QueryError(str(e), cause=e).with_context(sql=sql, backend="sqlite") from e
        if not last_id:
            raise MissingLastIdError(f"Insert did not report a generated {id_column}").with_context(
                sql=sql, backend="sqlite"
            )
        return last_id

    async def exec_ret_void(self, sql: str, *params: Any) -> None:
        conn = self._connection()
        try:
            cursor = await conn.execute(sql, _bind(params))
            await cursor.close()
        except sqlite3.Error as e:
            raise QueryError(str(e), cause=e).with_context(sql=sql, backend="sqlite") from e

    def get_sql_parameter(self, index: int) -> str:
        return "?"


__all__ = [
    "DEFAULT_FILES",
    "ROOT_FILES",
    "SQLiteSession",
    "default_paths",
]
