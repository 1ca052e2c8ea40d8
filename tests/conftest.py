"""
Shared pytest fixtures for medialib tests.

This module provides:
- A recording session (``fake_session``) for helper-level tests
- A small ``CLDB`` database with one registered table
- Settings that point the embedded backend at ``tmp_path``
"""

from __future__ import annotations

import pytest

from medialib.core.database import Database
from medialib.core.schema import TableSchema
from medialib.core.settings import MediaLibSettings
from tests._support import FakeSession, PersonTable


@pytest.fixture
def fake_session() -> FakeSession:
    return FakeSession()


@pytest.fixture
def cldb() -> Database:
    return Database("CLDB")


@pytest.fixture
def person_table(cldb: Database) -> TableSchema:
    return cldb._register(PersonTable(cldb, "cyberlink"))


@pytest.fixture
def settings(tmp_path) -> MediaLibSettings:
    return MediaLibSettings(
        sqlite_base_dir=tmp_path / "base",
        sqlite_root_dir=tmp_path / "root",
        _env_file=None,
    )
