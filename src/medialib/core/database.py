"""Database container: a named, ordered collection of table schemas.

The database ``name`` doubles as the qualifier in every statement its
tables generate: an attached SQLite database alias or a PostgreSQL schema.
An empty name disables qualification entirely.

Concrete databases are factories. They build each table with one shared
dialect tag and register it in declaration order, and keep a named
attribute per table for direct access::

    class PlaylistDatabase(Database):
        def __init__(self, platform):
            super().__init__("Playlist")
            self.playiteminfo = self._register(PlayItemInfoTable(self, platform))
            self.playlistinfo = self._register(PlayListInfoTable(self, platform))

Declaration order only matters for ``get_table(index)``; backends walk
``get_table(0)``, ``get_table(1)``, ... until ``None`` to create tables.
"""

from __future__ import annotations

from collections.abc import Iterator

from medialib.core.schema import TableSchema


class Database:
    """A named database owning its tables."""

    def __init__(self, name: str = ""):
        self.name = name
        self._tables: list[TableSchema] = []

    def _register(self, table: TableSchema) -> TableSchema:
        """Append ``table`` to the lookup order and return it."""
        if table.database is not self:
            raise ValueError(
                f"Table {table.name!r} belongs to database {table.database.name!r}, not {self.name!r}"
            )
        self._tables.append(table)
        return table

    def get_table(self, index: int) -> TableSchema | None:
        """Positional lookup; ``None`` when ``index`` is out of range."""
        if 0 <= index < len(self._tables):
            return self._tables[index]
        return None

    @property
    def tables(self) -> tuple[TableSchema, ...]:
        return tuple(self._tables)

    def __len__(self) -> int:
        return len(self._tables)

    def __iter__(self) -> Iterator[TableSchema]:
        return iter(tuple(self._tables))

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name={self.name!r}, tables={len(self._tables)})"


__all__ = ["Database"]
