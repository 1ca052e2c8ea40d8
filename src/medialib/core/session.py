"""
Abstract data-access session.

``ExecutionSession`` is the stateful handle to one live backend
connection. It declares the execution and lifecycle primitives a backend
must implement (see ``medialib.core.protocols``) and builds the shared
administrative helpers on top of them: table dump/clear/drop, schema
creation and transaction control.

Manifesto:
    Backends differ in how they connect, bind parameters and report
    generated keys. They do not differ in what "clear a table" or "begin a
    transaction" means. Keeping those helpers here means a new backend only
    implements six primitives.

    - **Thin pass-through:** transaction helpers issue one literal
      statement each and track no state
    - **Asymmetric failure policy:** ``dump_table`` is diagnostic and never
      raises; every other helper lets backend errors propagate
    - **No runtime guard:** helpers do not check ``ready``; calling them
      before ``init()`` is a caller error handled by the backend

Architecture:
    ::

        Uninitialized ──init()──► Ready ──uninit()──► Uninitialized

        ExecutionSession (ABC)
        ├── init() / uninit()                          abstract, lifecycle
        ├── exec_query / exec_ret_id / exec_ret_void   abstract, execution
        ├── get_sql_parameter                          abstract, binding
        ├── dump_table / clear_table / drop_table      built on execution
        ├── create_tables                              built on execution
        └── begin / commit / rollback_transaction      built on execution

Guardrails:
    ❌ DON'T: issue two operations on one session concurrently
    ✅ DO: await each call before issuing the next

Tags:
    session, data-access, transactions, async, medialib
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import AsyncIterator, Iterable, Mapping
from contextlib import asynccontextmanager
from typing import Any

from medialib.core.database import Database
from medialib.core.logging import get_logger
from medialib.core.schema import TableSchema

logger = get_logger(__name__)


def format_value(value: Any) -> str:
    """Strings are double-quoted; everything else uses its literal form."""
    if isinstance(value, str):
        return f'"{value}"'
    return str(value)


def format_rows(rows: Iterable[Mapping[str, Any]]) -> str:
    """Render rows as ``{ name: value, name: "text" }``, one line per row."""
    lines = []
    for row in rows:
        tokens = ", ".join(f"{name}: {format_value(value)}" for name, value in row.items())
        lines.append(f"{{ {tokens} }}")
    return "\n".join(lines)


class ExecutionSession(ABC):
    """
    Base class for backend sessions.

    Subclasses set the three qualification flags to match how their
    platform resolves names in ``CREATE INDEX``:

    - ``use_table_schema``: qualify ``CREATE TABLE`` / ``DELETE`` targets
    - ``use_index_schema``: qualify index names
    - ``use_index_table_schema``: qualify the table in ``ON (...)``
    """

    use_table_schema: bool = True
    use_index_schema: bool = True
    use_index_table_schema: bool = False

    def __init__(self) -> None:
        self.ready = False

    # -- Lifecycle ---------------------------------------------------------

    @abstractmethod
    async def init(self) -> ExecutionSession:
        """Acquire the backend resource and mark the session ready."""
        ...

    @abstractmethod
    async def uninit(self) -> None:
        """Release the backend resource."""
        ...

    # -- Execution primitives ---------------------------------------------

    @abstractmethod
    async def exec_query(self, sql: str, *params: Any) -> list[dict[str, Any]]:
        ...

    @abstractmethod
    async def exec_ret_id(self, id_column: str, sql: str, *params: Any) -> int:
        ...

    @abstractmethod
    async def exec_ret_void(self, sql: str, *params: Any) -> None:
        ...

    @abstractmethod
    def get_sql_parameter(self, index: int) -> str:
        ...

    def sql_parameters(self, count: int, start: int = 1) -> str:
        """Comma-separated placeholders for ``count`` consecutive bind positions."""
        return ", ".join(self.get_sql_parameter(i) for i in range(start, start + count))

    # -- Administrative helpers -------------------------------------------

    async def create_tables(self, database: Database) -> None:
        """Run every create statement of every table in ``database``, in order."""
        index = 0
        while (table := database.get_table(index)) is not None:
            for sql in table.get_create_statements(
                self.use_table_schema,
                self.use_index_schema,
                self.use_index_table_schema,
            ):
                await self.exec_ret_void(sql)
            index += 1
        logger.debug("tables_created", database=database.name, tables=index)

    async def dump_table(self, table: TableSchema, label: str | None = None) -> None:
        """Log every row of ``table``; failures are logged, never raised."""
        header = label or f"TABLE {table.get_extended_name()}:"
        sql = table.get_dump_statement()

        try:
            rows = await self.exec_query(sql)
        except Exception as e:
            logger.error("table_dump_failed", label=header, error=str(e), sql=sql)
            return

        logger.info("table_dump", label=header, rows=len(rows), text=format_rows(rows))

    async def clear_table(self, table: TableSchema, use_schema: bool = True) -> None:
        """Delete all rows of ``table``."""
        await self.exec_ret_void(table.get_clear_statement(use_schema))

    async def drop_table(self, table: TableSchema, use_schema: bool = True) -> None:
        await self.exec_ret_void(table.get_drop_statement(use_schema))

    # -- Transactions ------------------------------------------------------

    async def begin_transaction(self) -> None:
        await self.exec_ret_void("BEGIN TRANSACTION")

    async def commit_transaction(self) -> None:
        await self.exec_ret_void("COMMIT TRANSACTION")

    async def rollback_transaction(self) -> None:
        await self.exec_ret_void("ROLLBACK TRANSACTION")

    @asynccontextmanager
    async def transaction(self) -> AsyncIterator[ExecutionSession]:
        """Begin; commit on success, roll back and re-raise on any error or cancellation."""
        await self.begin_transaction()
        try:
            yield self
        except BaseException:
            await self.rollback_transaction()
            raise
        await self.commit_transaction()


__all__ = [
    "ExecutionSession",
    "format_rows",
    "format_value",
]
