"""
Backend contracts for medialib.

Two structural protocols define what a concrete database backend must
provide. ``ExecutionSession`` (``medialib.core.session``) is written
against these shapes only; it never imports a driver.

Architecture:
    ::

        ExecutionContract
        ┌────────────────────────────────────────────────────────────┐
        │ exec_query(sql, *params)        → list[dict[str, Any]]     │
        │ exec_ret_id(id, sql, *params)   → int  (generated key)     │
        │ exec_ret_void(sql, *params)     → None                     │
        │ get_sql_parameter(index)        → "?" | "$1" | ...         │
        └────────────────────────────────────────────────────────────┘

        LifecycleContract
        ┌────────────────────────────────────────────────────────────┐
        │ init()    → ready handle                                   │
        │ uninit()  → None                                           │
        └────────────────────────────────────────────────────────────┘

        Implementations:
        ┌────────────────────────────────────────────────────────────┐
        │ SQLiteSession    → aiosqlite, attached database files      │
        │ PostgresSession  → asyncpg, one schema per database        │
        └────────────────────────────────────────────────────────────┘

Guardrails:
    ❌ DON'T: format values into SQL text
    ✅ DO: build placeholders with ``get_sql_parameter()`` and pass params

Tags:
    protocol, backend, async, contract, medialib
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class ExecutionContract(Protocol):
    """Raw SQL execution primitives a backend provides. ASYNC."""

    async def exec_query(self, sql: str, *params: Any) -> list[dict[str, Any]]:
        """Run a query; one mapping (column name → value) per row."""
        ...

    async def exec_ret_id(self, id_column: str, sql: str, *params: Any) -> int:
        """Run an insert and return the generated value of ``id_column``."""
        ...

    async def exec_ret_void(self, sql: str, *params: Any) -> None:
        """Run a statement whose result is not needed."""
        ...

    def get_sql_parameter(self, index: int) -> str:
        """Placeholder token for the 1-based bind position ``index``."""
        ...


@runtime_checkable
class LifecycleContract(Protocol):
    """Acquire/release of the backend resource. ASYNC."""

    async def init(self) -> Any:
        ...

    async def uninit(self) -> None:
        ...


__all__ = [
    "ExecutionContract",
    "LifecycleContract",
]
