"""PostgreSQL session (``postgres`` platform).

Each media-library database becomes a schema in one PostgreSQL database.
asyncpg is imported lazily so the embedded backend works without it.

Reads are normalised to match what the embedded backend returns:
``timestamp`` columns come back as UTC strings
(``YYYY-MM-DD HH:MM:SS.ffffff``) and ``bool`` columns as ``1``/``0``.
"""

from __future__ import annotations

import asyncio
import re
from collections.abc import Iterable
from datetime import datetime
from typing import TYPE_CHECKING, Any

from medialib.core.database import Database
from medialib.core.errors import (
    ConfigError,
    DatabaseConnectionError,
    MissingLastIdError,
    QueryError,
)
from medialib.core.logging import get_logger
from medialib.core.session import ExecutionSession
from medialib.core.utils import date_to_utc_string, parse_timestamp_text

if TYPE_CHECKING:
    from asyncpg import Connection

logger = get_logger(__name__)


def normalize_database_url(url: str) -> str:
    """Normalize a database URL for asyncpg.

    >>> normalize_database_url("postgresql+asyncpg://localhost/db")
    'postgresql://localhost/db'
    >>> normalize_database_url("postgresql://localhost/db?sslmode=require")
    'postgresql://localhost/db'
    """
    if url.startswith("postgresql+asyncpg://"):
        url = url.replace("postgresql+asyncpg://", "postgresql://", 1)

    # asyncpg takes SSL settings through ssl=, not the query string
    if "?sslmode=" in url or "&sslmode=" in url:
        url = re.sub(r"[?&]sslmode=[^&]*", "", url)
        url = url.rstrip("?&")

    return url


# -- Text codecs ----------------------------------------------------------


def _encode_timestamp(value: Any) -> str:
    if isinstance(value, datetime):
        return date_to_utc_string(value)
    return str(value)


def _decode_timestamp(text: str) -> str:
    return parse_timestamp_text(text)


def _encode_bool(value: Any) -> str:
    if isinstance(value, str):
        return value
    return "true" if value else "false"


def _decode_bool(text: str) -> int:
    return 1 if text == "t" else 0


async def install_codecs(conn: Connection) -> None:
    """Register the timestamp and bool text codecs on ``conn``."""
    await conn.set_type_codec(
        "timestamp",
        schema="pg_catalog",
        encoder=_encode_timestamp,
        decoder=_decode_timestamp,
        format="text",
    )
    await conn.set_type_codec(
        "bool",
        schema="pg_catalog",
        encoder=_encode_bool,
        decoder=_decode_bool,
        format="text",
    )


class PostgresSession(ExecutionSession):
    """
    asyncpg-backed session.

    Indexes live in their table's schema, so index names stay bare and the
    ``ON`` clause carries the qualification.
    """

    use_table_schema = True
    use_index_schema = False
    use_index_table_schema = True

    def __init__(
        self,
        databases: Iterable[Database],
        dsn: str,
        *,
        connect_timeout: float = 10.0,
    ):
        super().__init__()
        self._databases = tuple(databases)
        self._dsn = normalize_database_url(dsn)
        self._connect_timeout = connect_timeout
        self._conn: Any = None

    @property
    def databases(self) -> tuple[Database, ...]:
        return self._databases

    async def init(self) -> PostgresSession:
        try:
            import asyncpg
        except ImportError:
            raise ConfigError(
                "asyncpg is required for PostgreSQL. Install with: pip install asyncpg"
            ) from None

        await self._close()
        try:
            self._conn = await asyncpg.connect(self._dsn, timeout=self._connect_timeout)
        except (OSError, asyncio.TimeoutError, asyncpg.PostgresError) as e:
            raise DatabaseConnectionError(
                f"Failed to connect to PostgreSQL: {e}", cause=e
            ).with_context(backend="postgres") from e

        try:
            try:
                await install_codecs(self._conn)
            except asyncpg.PostgresError as e:
                raise DatabaseConnectionError(
                    f"Failed to install type codecs: {e}", cause=e
                ).with_context(backend="postgres") from e

            for database in self._databases:
                await self.exec_ret_void(f"CREATE SCHEMA IF NOT EXISTS {database.name}")
                logger.debug("schema_created", database=database.name)
                await self.create_tables(database)
        except BaseException:
            await self._close()
            raise

        self.ready = True
        return self

    async def _close(self) -> None:
        if self._conn is not None:
            conn, self._conn = self._conn, None
            await conn.close()
        self.ready = False

    async def uninit(self) -> None:
        await self._close()
        logger.debug("session_closed", backend="postgres")

    def _connection(self) -> Any:
        if self._conn is None:
            raise DatabaseConnectionError("PostgreSQL session is not initialized")
        return self._conn

    async def _run(self, method: str, sql: str, params: tuple[Any, ...]) -> Any:
        import asyncpg

        conn = self._connection()
        try:
            return await getattr(conn, method)(sql, *params)
        except asyncpg.PostgresError as e:
            raise QueryError(str(e), cause=e).with_context(sql=sql, backend="postgres") from e

    async def exec_query(self, sql: str, *params: Any) -> list[dict[str, Any]]:
        rows = await self._run("fetch", sql, params)
        return [dict(row) for row in rows]

    async def exec_ret_id(self, id_column: str, sql: str, *params: Any) -> int:
        sql = f"{sql} RETURNING {id_column}"
        row = await self._run("fetchrow", sql, params)
        if row is None:
            raise MissingLastIdError(f"Insert did not return {id_column}").with_context(
                sql=sql, backend="postgres"
            )
        # Unquoted identifiers are folded to lower case by the server
        return int(row[id_column.lower()])

    async def exec_ret_void(self, sql: str, *params: Any) -> None:
        await self._run("execute", sql, params)

    def get_sql_parameter(self, index: int) -> str:
        return f"${index}"


__all__ = [
    "PostgresSession",
    "install_codecs",
    "normalize_database_url",
]
