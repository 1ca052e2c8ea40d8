"""Environment-driven settings for medialib.

``MediaLibSettings`` reads ``MEDIALIB_*`` environment variables (and a
``.env`` file) so the same code runs against the embedded SQLite files in
development and a PostgreSQL server in production::

    MEDIALIB_BACKEND=postgres
    MEDIALIB_DATABASE_URL=postgresql://medialib:secret@db:5432/medialib

Fields
──────
backend          : ``cyberlink`` (embedded SQLite files) or ``postgres``
log_level        : structlog log level
log_json         : force JSON (True) / console (False) output, None = auto
sqlite_base_dir  : directory holding CLDB2.db, moviemedia2.db, ...
sqlite_root_dir  : directory holding extra.db (defaults to sqlite_base_dir)
database_url     : PostgreSQL DSN
connect_timeout  : seconds to wait for the PostgreSQL server
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class MediaLibSettings(BaseSettings):
    """Settings shared by every medialib backend."""

    model_config = SettingsConfigDict(
        env_prefix="MEDIALIB_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # ── Backend ──────────────────────────────────────────────────
    backend: Literal["cyberlink", "postgres"] = "cyberlink"

    # ── Observability ────────────────────────────────────────────
    log_level: str = "INFO"
    log_json: bool | None = None

    # ── Embedded SQLite ──────────────────────────────────────────
    sqlite_base_dir: Path = Field(
        default_factory=lambda: Path.home() / ".medialib",
        description="Directory holding the per-database SQLite files",
    )
    sqlite_root_dir: Path | None = Field(
        default=None,
        description="Directory holding extra.db; falls back to sqlite_base_dir",
    )

    # ── PostgreSQL ───────────────────────────────────────────────
    database_url: str = "postgresql://localhost:5432/medialib"
    connect_timeout: float = Field(default=10.0, gt=0)

    @property
    def resolved_root_dir(self) -> Path:
        return self.sqlite_root_dir or self.sqlite_base_dir


@lru_cache(maxsize=1)
def get_settings() -> MediaLibSettings:
    """Return the process-wide settings instance."""
    return MediaLibSettings()


__all__ = [
    "MediaLibSettings",
    "get_settings",
]
