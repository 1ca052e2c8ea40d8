"""Session registry and factory.

Consumers should never hard-code session class names. The registry maps
backend names to factories, and ``create_session()`` builds an
uninitialized session for the configured backend over the databases it
is given. ``medialib.library.create_library_session()`` supplies the
media-library databases.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable

from medialib.core.database import Database
from medialib.core.errors import ConfigError
from medialib.core.session import ExecutionSession
from medialib.core.settings import MediaLibSettings, get_settings

from .postgresql import PostgresSession
from .sqlite import SQLiteSession, default_paths

SessionFactory = Callable[[MediaLibSettings, tuple[Database, ...]], ExecutionSession]


def _sqlite_factory(settings: MediaLibSettings, databases: tuple[Database, ...]) -> ExecutionSession:
    return SQLiteSession(databases, default_paths(settings, databases))


def _postgres_factory(settings: MediaLibSettings, databases: tuple[Database, ...]) -> ExecutionSession:
    return PostgresSession(
        databases,
        settings.database_url,
        connect_timeout=settings.connect_timeout,
    )


class SessionRegistry:
    """
    Registry for session factories.

    Pre-registered backends:
    - ``cyberlink`` / ``sqlite``: :class:`SQLiteSession`
    - ``postgres`` / ``postgresql``: :class:`PostgresSession`
    """

    def __init__(self):
        self._factories: dict[str, SessionFactory] = {}
        self._register_defaults()

    def _register_defaults(self) -> None:
        self._factories["cyberlink"] = _sqlite_factory
        self._factories["sqlite"] = _sqlite_factory  # Alias
        self._factories["postgres"] = _postgres_factory
        self._factories["postgresql"] = _postgres_factory  # Alias

    def register(self, name: str, factory: SessionFactory) -> None:
        """Register a session factory."""
        self._factories[name.lower()] = factory

    def create(
        self, name: str, settings: MediaLibSettings, databases: Iterable[Database]
    ) -> ExecutionSession:
        """Create a session by backend name."""
        name = name.lower()
        if name not in self._factories:
            raise ConfigError(f"Unknown session backend: {name}")
        return self._factories[name](settings, tuple(databases))

    def list_backends(self) -> list[str]:
        return sorted(self._factories.keys())


# Global registry
session_registry = SessionRegistry()


def create_session(
    databases: Iterable[Database],
    settings: MediaLibSettings | None = None,
) -> ExecutionSession:
    """
    Build an uninitialized session for ``settings.backend``.

    Usage:
        session = create_session(library.databases)
        await session.init()
    """
    settings = settings or get_settings()
    return session_registry.create(settings.backend, settings, databases)


__all__ = [
    "SessionFactory",
    "SessionRegistry",
    "create_session",
    "session_registry",
]
