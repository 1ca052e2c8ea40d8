"""
Test support utilities for medialib tests.

Helpers that are not fixtures but are shared across test files:
``FakeSession`` records statements instead of talking to a backend, and
``PersonTable`` is a small declarative table used by the schema tests.
"""

from __future__ import annotations

from typing import Any

from medialib.core.schema import Column, Index, TableSchema
from medialib.core.session import ExecutionSession


class FakeSession(ExecutionSession):
    """Records every statement; optionally fails statements matching a prefix."""

    def __init__(self, rows: list[dict[str, Any]] | None = None, fail_on: str | None = None):
        super().__init__()
        self.rows = rows or []
        self.fail_on = fail_on
        self.statements: list[tuple[str, tuple[Any, ...]]] = []

    def _record(self, sql: str, params: tuple[Any, ...]) -> None:
        self.statements.append((sql, params))
        if self.fail_on and sql.startswith(self.fail_on):
            raise RuntimeError(f"backend rejected: {sql}")

    @property
    def sql(self) -> list[str]:
        return [sql for sql, _ in self.statements]

    async def init(self) -> FakeSession:
        self.ready = True
        return self

    async def uninit(self) -> None:
        self.ready = False

    async def exec_query(self, sql: str, *params: Any) -> list[dict[str, Any]]:
        self._record(sql, params)
        return self.rows

    async def exec_ret_id(self, id_column: str, sql: str, *params: Any) -> int:
        self._record(sql, params)
        return 1

    async def exec_ret_void(self, sql: str, *params: Any) -> None:
        self._record(sql, params)

    def get_sql_parameter(self, index: int) -> str:
        return f":{index}"


class PersonTable(TableSchema):
    table_name = "PersonInfo"
    columns = (
        Column("groupID", surrogate_key=True),
        Column("personID", "INTEGER"),
        Column("displayFaceID", "INTEGER"),
        Column("birthday", "DATE"),
    )
    indexes = (Index("PERSONINFO_GROUPID_PERSONID_INDEX", ("groupID", "personID")),)
