"""Concrete media-library tables and databases."""

from medialib.library.databases import (
    CLDBDatabase,
    ExtraDatabase,
    MediaLibrary,
    MediaScannerCacheDatabase,
    MovieMediaDatabase,
    PlaylistDatabase,
    create_library_session,
)

__all__ = [
    "CLDBDatabase",
    "ExtraDatabase",
    "MediaLibrary",
    "MediaScannerCacheDatabase",
    "MovieMediaDatabase",
    "PlaylistDatabase",
    "create_library_session",
]
