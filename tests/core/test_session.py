"""Tests for ``medialib.core.session``: shared session helpers."""

from __future__ import annotations

import asyncio

import pytest
from structlog.testing import capture_logs

from medialib.core.database import Database
from medialib.core.protocols import ExecutionContract, LifecycleContract
from medialib.core.schema import TableSchema
from medialib.core.session import format_rows, format_value

from tests._support import FakeSession, PersonTable


class TestFormatting:
    def test_string_is_quoted(self):
        assert format_value("Alice") == '"Alice"'

    def test_non_string_literal(self):
        assert format_value(3) == "3"
        assert format_value(None) == "None"

    def test_rows(self):
        rows = [{"groupID": 1, "name": "a"}, {"groupID": 2, "name": None}]
        assert format_rows(rows) == '{ groupID: 1, name: "a" }\n{ groupID: 2, name: None }'

    def test_no_rows(self):
        assert format_rows([]) == ""


class TestContracts:
    def test_fake_session_conforms(self, fake_session):
        assert isinstance(fake_session, ExecutionContract)
        assert isinstance(fake_session, LifecycleContract)

    def test_default_flags(self, fake_session):
        assert (
            fake_session.use_table_schema,
            fake_session.use_index_schema,
            fake_session.use_index_table_schema,
        ) == (True, True, False)

    @pytest.mark.asyncio
    async def test_ready_follows_lifecycle(self, fake_session):
        assert fake_session.ready is False
        await fake_session.init()
        assert fake_session.ready is True
        await fake_session.uninit()
        assert fake_session.ready is False

    def test_sql_parameters(self, fake_session):
        assert fake_session.sql_parameters(3) == ":1, :2, :3"
        assert fake_session.sql_parameters(2, start=4) == ":4, :5"
        assert fake_session.sql_parameters(0) == ""


class TestDumpTable:
    @pytest.mark.asyncio
    async def test_logs_rows(self, person_table):
        session = FakeSession(rows=[{"groupID": 1, "personID": 7}])
        with capture_logs() as logs:
            await session.dump_table(person_table)

        assert session.sql == ["SELECT * FROM CLDB.PersonInfo"]
        event = next(e for e in logs if e["event"] == "table_dump")
        assert event["label"] == "TABLE CLDB.PersonInfo:"
        assert event["rows"] == 1
        assert event["text"] == "{ groupID: 1, personID: 7 }"

    @pytest.mark.asyncio
    async def test_custom_label(self, person_table, fake_session):
        with capture_logs() as logs:
            await fake_session.dump_table(person_table, "People")
        assert logs[-1]["label"] == "People"

    @pytest.mark.asyncio
    async def test_swallows_backend_error(self, person_table):
        session = FakeSession(fail_on="SELECT")
        with capture_logs() as logs:
            await session.dump_table(person_table)

        event = next(e for e in logs if e["event"] == "table_dump_failed")
        assert event["log_level"] == "error"
        assert event["sql"] == "SELECT * FROM CLDB.PersonInfo"
        assert "backend rejected" in event["error"]


class TestClearAndDrop:
    @pytest.mark.asyncio
    async def test_clear(self, person_table, fake_session):
        await fake_session.clear_table(person_table)
        await fake_session.clear_table(person_table, use_schema=False)
        assert fake_session.sql == ["DELETE FROM CLDB.PersonInfo", "DELETE FROM PersonInfo"]

    @pytest.mark.asyncio
    async def test_clear_propagates_backend_error(self, person_table):
        session = FakeSession(fail_on="DELETE")
        with pytest.raises(RuntimeError, match="backend rejected"):
            await session.clear_table(person_table)

    @pytest.mark.asyncio
    async def test_drop(self, person_table, fake_session):
        await fake_session.drop_table(person_table)
        assert fake_session.sql == ["DROP TABLE IF EXISTS CLDB.PersonInfo"]

    @pytest.mark.asyncio
    async def test_drop_propagates_backend_error(self, person_table):
        session = FakeSession(fail_on="DROP")
        with pytest.raises(RuntimeError):
            await session.drop_table(person_table)


class TestCreateTables:
    @pytest.mark.asyncio
    async def test_walks_tables_in_order(self, fake_session):
        db = Database("CLDB")
        db._register(PersonTable(db, "cyberlink"))
        db._register(TableSchema(db, "cyberlink", name="Other"))

        await fake_session.create_tables(db)

        assert fake_session.sql[0].startswith("CREATE TABLE IF NOT EXISTS CLDB.PersonInfo")
        assert fake_session.sql[1].startswith("CREATE INDEX IF NOT EXISTS CLDB.PERSONINFO_")
        assert fake_session.sql[2] == "CREATE TABLE IF NOT EXISTS CLDB.Other ()"

    @pytest.mark.asyncio
    async def test_uses_session_flags(self):
        class SchemaSession(FakeSession):
            use_table_schema = True
            use_index_schema = False
            use_index_table_schema = True

        session = SchemaSession()
        db = Database("CLDB")
        db._register(PersonTable(db, "postgres"))

        await session.create_tables(db)

        assert session.sql[1] == (
            "CREATE INDEX IF NOT EXISTS PERSONINFO_GROUPID_PERSONID_INDEX ON CLDB.PersonInfo (groupID, personID)"
        )

    @pytest.mark.asyncio
    async def test_unknown_dialect_runs_nothing(self, fake_session):
        db = Database("CLDB")
        db._register(PersonTable(db, "postgress"))
        await fake_session.create_tables(db)
        assert fake_session.sql == []


class TestTransactions:
    @pytest.mark.asyncio
    async def test_literal_statements(self, fake_session):
        await fake_session.begin_transaction()
        await fake_session.commit_transaction()
        await fake_session.rollback_transaction()
        assert fake_session.sql == ["BEGIN TRANSACTION", "COMMIT TRANSACTION", "ROLLBACK TRANSACTION"]

    @pytest.mark.asyncio
    async def test_no_nesting_bookkeeping(self, fake_session):
        await fake_session.begin_transaction()
        await fake_session.begin_transaction()
        assert fake_session.sql == ["BEGIN TRANSACTION", "BEGIN TRANSACTION"]

    @pytest.mark.asyncio
    async def test_context_commits(self, fake_session):
        async with fake_session.transaction() as session:
            await session.exec_ret_void("INSERT INTO CLDB.OrderInfo (orders) VALUES (:1)", "1,2")

        assert fake_session.sql == [
            "BEGIN TRANSACTION",
            "INSERT INTO CLDB.OrderInfo (orders) VALUES (:1)",
            "COMMIT TRANSACTION",
        ]

    @pytest.mark.asyncio
    async def test_context_rolls_back_and_reraises(self, fake_session):
        with pytest.raises(ValueError, match="boom"):
            async with fake_session.transaction():
                raise ValueError("boom")

        assert fake_session.sql == ["BEGIN TRANSACTION", "ROLLBACK TRANSACTION"]

    @pytest.mark.asyncio
    async def test_begin_failure_propagates(self):
        session = FakeSession(fail_on="BEGIN")
        with pytest.raises(RuntimeError):
            await session.begin_transaction()

    @pytest.mark.asyncio
    async def test_context_rolls_back_on_cancel(self, fake_session):
        entered = asyncio.Event()

        async def work():
            async with fake_session.transaction():
                entered.set()
                await asyncio.sleep(10)

        task = asyncio.create_task(work())
        await entered.wait()
        task.cancel()
        with pytest.raises(asyncio.CancelledError):
            await task

        assert fake_session.sql == ["BEGIN TRANSACTION", "ROLLBACK TRANSACTION"]
