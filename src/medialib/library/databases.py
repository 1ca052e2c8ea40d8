"""The five media-library databases.

Each class builds its tables for one platform tag and registers them in a
fixed order. ``MediaLibrary`` bundles all five for a backend to attach.
"""

from __future__ import annotations

from medialib.core.adapters.registry import create_session
from medialib.core.database import Database
from medialib.core.dialect import Platform
from medialib.core.session import ExecutionSession
from medialib.core.settings import MediaLibSettings, get_settings
from medialib.library.tables import (
    CreationInfoTable,
    FaceInfoTable,
    GroupInfoTable,
    GroupOrderInfoTable,
    MediaInfoTable,
    MovieGroupTypeMovieGroupsTable,
    MovieGroupTypesTable,
    MovieMediaInfoTable,
    MTCacheMovieScanContextTable,
    MTCacheMusicScanContextTable,
    MTCachePhotoScanContextTable,
    MTCacheVideoScanContextTable,
    OrderInfoTable,
    PersonInfoTable,
    PlayItemInfoTable,
    PlayListInfoTable,
    PostscanMovieScanContextTable,
    PostscanMusicScanContextTable,
    PostscanPhotoScanContextTable,
    PostscanVideoScanContextTable,
)


class CLDBDatabase(Database):
    """Photo/video catalogue: media, folders, faces and people."""

    def __init__(self, platform: str | Platform):
        super().__init__("CLDB")
        self.creation_info = self._register(CreationInfoTable(self, platform))
        self.face_info = self._register(FaceInfoTable(self, platform))
        self.group_info = self._register(GroupInfoTable(self, platform))
        self.group_order_info = self._register(GroupOrderInfoTable(self, platform))
        self.media_info = self._register(MediaInfoTable(self, platform))
        self.order_info = self._register(OrderInfoTable(self, platform))
        self.person_info = self._register(PersonInfoTable(self, platform))


class ExtraDatabase(Database):
    def __init__(self, platform: str | Platform):
        super().__init__("extra")
        self.moviegrouptype = self._register(MovieGroupTypesTable(self, platform))
        self.moviegrouptypemoviegroup = self._register(MovieGroupTypeMovieGroupsTable(self, platform))


class MediaScannerCacheDatabase(Database):
    """Scanner bookkeeping: per-kind file caches and post-scan stages."""

    def __init__(self, platform: str | Platform):
        super().__init__("mediaScannerCache")
        self.mtcache_movie = self._register(MTCacheMovieScanContextTable(self, platform))
        self.mtcache_music = self._register(MTCacheMusicScanContextTable(self, platform))
        self.mtcache_photo = self._register(MTCachePhotoScanContextTable(self, platform))
        self.mtcache_video = self._register(MTCacheVideoScanContextTable(self, platform))
        self.postscan_movie = self._register(PostscanMovieScanContextTable(self, platform))
        self.postscan_music = self._register(PostscanMusicScanContextTable(self, platform))
        self.postscan_photo = self._register(PostscanPhotoScanContextTable(self, platform))
        self.postscan_video = self._register(PostscanVideoScanContextTable(self, platform))


class MovieMediaDatabase(Database):
    def __init__(self, platform: str | Platform):
        super().__init__("moviemedia")
        self.media_info = self._register(MovieMediaInfoTable(self, platform))


class PlaylistDatabase(Database):
    def __init__(self, platform: str | Platform):
        super().__init__("Playlist")
        self.playiteminfo = self._register(PlayItemInfoTable(self, platform))
        self.playlistinfo = self._register(PlayListInfoTable(self, platform))


class MediaLibrary:
    """All media-library databases built for one platform."""

    def __init__(self, platform: str | Platform = Platform.CYBERLINK):
        self.platform = platform.value if isinstance(platform, Platform) else platform
        self.cldb = CLDBDatabase(self.platform)
        self.moviemedia = MovieMediaDatabase(self.platform)
        self.media_scanner_cache = MediaScannerCacheDatabase(self.platform)
        self.playlist = PlaylistDatabase(self.platform)
        self.extra = ExtraDatabase(self.platform)

    @property
    def databases(self) -> tuple[Database, ...]:
        """Databases in attach order."""
        return (self.cldb, self.moviemedia, self.media_scanner_cache, self.playlist, self.extra)

    def get_database(self, name: str) -> Database | None:
        for database in self.databases:
            if database.name == name:
                return database
        return None

    def create_session(self, settings: MediaLibSettings | None = None) -> ExecutionSession:
        """Uninitialized session for ``settings.backend`` over these databases."""
        return create_session(self.databases, settings)

    def __repr__(self) -> str:
        return f"MediaLibrary(platform={self.platform!r})"


def create_library_session(settings: MediaLibSettings | None = None) -> ExecutionSession:
    """
    Build the media library for ``settings.backend`` and a session over it.

    Usage:
        session = create_library_session()
        await session.init()
    """
    settings = settings or get_settings()
    return MediaLibrary(settings.backend).create_session(settings)


__all__ = [
    "CLDBDatabase",
    "ExtraDatabase",
    "MediaLibrary",
    "MediaScannerCacheDatabase",
    "MovieMediaDatabase",
    "PlaylistDatabase",
    "create_library_session",
]
