"""
Table schema definitions and DDL/DML text generation.

A ``TableSchema`` describes one table of a media-library ``Database``:
its unqualified name, its columns, composite primary key and indexes, and
the dialect tag of the platform it is generated for. From that description
it produces the statements a backend needs to create, clear, dump and drop
the table.

Manifesto:
    The same logical schema is deployed to embedded SQLite files (one
    attached database per ``Database``) and to PostgreSQL (one schema per
    ``Database``). The two platforms disagree on *where* a name may be
    qualified:

    - SQLite wants ``CREATE INDEX CLDB.IDX ON PersonInfo (...)``
      (index name qualified, ``ON`` table bare)
    - PostgreSQL wants ``CREATE INDEX IDX ON CLDB.PersonInfo (...)``
      (index name bare, ``ON`` table qualified)

    Rather than branching per platform, statement generation takes three
    independent qualification flags and lets each backend pick its own
    combination.

    - **Pure:** no I/O, same inputs give the same statements
    - **Declarative:** tables are data (columns + indexes), not code
    - **Permissive:** an unknown dialect yields no create statements

Architecture:
    ::

        Database("CLDB")  ──owns──►  TableSchema("PersonInfo", dialect)
              ▲                              │
              └──────── database ────────────┘   (non-owning back-reference)

        get_extended_name()        → "CLDB.PersonInfo"
        get_create_statements()    → ["CREATE TABLE IF NOT EXISTS ...",
                                      "CREATE INDEX IF NOT EXISTS ..."]
        get_clear_statement()      → "DELETE FROM CLDB.PersonInfo"
        get_dump_statement()       → "SELECT * FROM CLDB.PersonInfo"
        get_drop_statement()       → "DROP TABLE IF EXISTS CLDB.PersonInfo"

Examples:
    >>> from medialib.core.database import Database
    >>> db = Database("CLDB")
    >>> t = TableSchema(db, "postgres", name="PersonInfo",
    ...                 columns=(Column("groupID", surrogate_key=True),
    ...                          Column("personID", "INTEGER")))
    >>> t.get_extended_name()
    'CLDB.PersonInfo'
    >>> t.get_create_statements()[0]
    'CREATE TABLE IF NOT EXISTS CLDB.PersonInfo (groupID SERIAL PRIMARY KEY, personID INTEGER)'

Tags:
    schema, ddl, table, qualification, medialib
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from medialib.core.dialect import Dialect, Platform, get_dialect

if TYPE_CHECKING:
    from medialib.core.database import Database


@dataclass(frozen=True)
class Column:
    """One column definition.

    ``definition`` is the SQL type plus constraints/defaults, e.g.
    ``"INTEGER NOT NULL DEFAULT 0"``. A ``surrogate_key`` column ignores
    ``definition`` and is rendered by the dialect.
    """

    name: str
    definition: str = "INTEGER"
    surrogate_key: bool = False

    def render(self, dialect: Dialect) -> str:
        if self.surrogate_key:
            return dialect.surrogate_key(self.name)
        return f"{self.name} {self.definition}"


@dataclass(frozen=True)
class Index:
    """A secondary index over one or more columns."""

    name: str
    columns: tuple[str, ...]
    unique: bool = False


class TableSchema:
    """
    One table of a media-library database.

    Concrete tables usually subclass and declare ``table_name``,
    ``columns``, ``primary_key`` and ``indexes`` as class attributes; the
    constructor keywords override them, which keeps ad-hoc tables (tests,
    tooling) one call away.
    """

    table_name: str = ""
    columns: tuple[Column, ...] = ()
    primary_key: tuple[str, ...] = ()
    indexes: tuple[Index, ...] = ()

    def __init__(
        self,
        database: Database,
        dialect: str | Platform,
        *,
        name: str | None = None,
        columns: tuple[Column, ...] | None = None,
        primary_key: tuple[str, ...] | None = None,
        indexes: tuple[Index, ...] | None = None,
    ):
        self._database = database
        self._dialect = dialect.value if isinstance(dialect, Platform) else dialect
        self._name = name if name is not None else self.table_name
        if columns is not None:
            self.columns = tuple(columns)
        if primary_key is not None:
            self.primary_key = tuple(primary_key)
        if indexes is not None:
            self.indexes = tuple(indexes)

    @property
    def name(self) -> str:
        """Unqualified table name."""
        return self._name

    @property
    def database(self) -> Database:
        """Owning database (used only for name qualification)."""
        return self._database

    @property
    def dialect(self) -> str:
        return self._dialect

    # -- Naming ------------------------------------------------------------

    def get_extended_name(self, name: str | None = None) -> str:
        """Qualify ``name`` (default: this table's name) with the database name.

        An empty database name means no qualification.
        """
        target = name if name else self._name
        if self._database.name:
            return f"{self._database.name}.{target}"
        return target

    def _ref(self, qualify: bool) -> str:
        return self.get_extended_name() if qualify else self._name

    # -- DDL ---------------------------------------------------------------

    def get_create_statements(
        self,
        qualify_table: bool = True,
        qualify_index_name: bool = True,
        qualify_index_table_ref: bool = False,
    ) -> list[str]:
        """``CREATE TABLE`` followed by one ``CREATE INDEX`` per index.

        Args:
            qualify_table: qualify the table in ``CREATE TABLE``
            qualify_index_name: qualify each index name
            qualify_index_table_ref: qualify the table in each ``ON`` clause

        Returns an empty list when the dialect tag is not recognised.
        """
        dialect = get_dialect(self._dialect)
        if dialect is None:
            return []

        definitions = [column.render(dialect) for column in self.columns]
        if self.primary_key:
            definitions.append(f"PRIMARY KEY({', '.join(self.primary_key)})")

        statements = [
            f"CREATE TABLE IF NOT EXISTS {self._ref(qualify_table)} ({', '.join(definitions)})"
        ]

        on_ref = self._ref(qualify_index_table_ref)
        for index in self.indexes:
            index_name = self.get_extended_name(index.name) if qualify_index_name else index.name
            kind = "UNIQUE INDEX" if index.unique else "INDEX"
            statements.append(
                f"CREATE {kind} IF NOT EXISTS {index_name} ON {on_ref} ({', '.join(index.columns)})"
            )
        return statements

    def get_drop_statement(self, qualify: bool = True) -> str:
        return f"DROP TABLE IF EXISTS {self._ref(qualify)}"

    # -- DML ---------------------------------------------------------------

    def get_clear_statement(self, qualify: bool = True) -> str:
        """Delete every row; the table itself is kept."""
        return f"DELETE FROM {self._ref(qualify)}"

    def get_dump_statement(self, qualify: bool = True) -> str:
        return f"SELECT * FROM {self._ref(qualify)}"

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.get_extended_name()!r}, dialect={self._dialect!r})"


__all__ = [
    "Column",
    "Index",
    "TableSchema",
]
