"""Media-library table definitions.

Each class is one table of the media library, declared as data. The
column lists mirror the files written by the desktop application, so
names keep their original camelCase spelling.

Surrogate keys (``surrogate_key=True``) render as ``INTEGER PRIMARY KEY``
on the embedded platform and ``SERIAL PRIMARY KEY`` on PostgreSQL.
"""

from __future__ import annotations

from medialib.core.schema import Column, Index, TableSchema

# =========================================================================
# CLDB
# =========================================================================


class CreationInfoTable(TableSchema):
    table_name = "CreationInfo"
    columns = (
        Column("_id", surrogate_key=True),
        Column("type", "INTEGER NOT NULL"),
        Column("creationName", "TEXT NOT NULL"),
        Column("projectPath", "TEXT NOT NULL"),
        Column("thumbCount", "INTEGER NOT NULL"),
        Column("description", "TEXT DEFAULT ''"),
        Column("modifyDate", "TIMESTAMP NOT NULL"),
    )


class FaceInfoTable(TableSchema):
    table_name = "FaceInfo"
    columns = (
        Column("faceID", surrogate_key=True),
        Column("mediaID", "INTEGER"),
        Column("groupID", "INTEGER"),
    )
    indexes = (Index("FACEINFO_FACEID_GROUPID_MEDIAID_INDEX", ("groupID", "mediaID")),)


class GroupInfoTable(TableSchema):
    table_name = "GroupInfo"
    columns = (
        Column("_id", surrogate_key=True),
        Column("type", "INTEGER NOT NULL"),
        Column("mediaName", "TEXT NOT NULL"),
        Column("addDate", "TIMESTAMP NOT NULL"),
        Column("modifyDate", "TIMESTAMP NOT NULL"),
        Column("mediaDate", "TIMESTAMP NOT NULL"),
        Column("orderType", "TEXT NOT NULL DEFAULT 'manual'"),
        Column("place", "TEXT DEFAULT ''"),
        Column("description", "TEXT DEFAULT ''"),
        Column("visible", "INTEGER DEFAULT 1"),
        Column("custom", "TEXT"),
        Column("coverID", "INTEGER"),
        Column("baseMediaName", "TEXT NOT NULL"),
    )
    indexes = (
        Index("GROUPINFO_TYPE_MEDIANAME_INDEX", ("type", "mediaName")),
        Index("GROUPINFO_VISIBLE_INDEX", ("visible",)),
    )


class GroupOrderInfoTable(TableSchema):
    table_name = "GroupOrderInfo"
    columns = (
        Column("groupType", surrogate_key=True),
        Column("orders", "TEXT"),
    )


class MediaInfoTable(TableSchema):
    table_name = "MediaInfo"
    columns = (
        Column("_id", surrogate_key=True),
        Column("type", "INTEGER NOT NULL"),
        Column("folderGroupID", "INTEGER NOT NULL"),
        Column("mediaName", "TEXT"),
        Column("description", "TEXT"),
        Column("mediaSize", "BIGINT NOT NULL"),
        Column("mediaDate", "TIMESTAMP NOT NULL"),
        Column("addDate", "TIMESTAMP NOT NULL"),
        Column("modifyDate", "TIMESTAMP NOT NULL"),
        Column("playDate", "TIMESTAMP NOT NULL"),
        Column("mediaDuration", "BIGINT DEFAULT NULL"),
        Column("mediaResume", "BIGINT DEFAULT 0"),
        Column("mediaRating", "INTEGER NOT NULL DEFAULT 0"),
        Column("playCount", "INTEGER NOT NULL DEFAULT 0"),
        Column("protected", "BOOLEAN NOT NULL DEFAULT FALSE"),
        Column("resolutionX", "INTEGER"),
        Column("resolutionY", "INTEGER"),
        Column("orientation", "INTEGER"),
        Column("aspectRatioX", "INTEGER"),
        Column("aspectRatioY", "INTEGER"),
        Column("videoMeta", "TEXT"),
        Column("title", "TEXT"),
        Column("artist", "TEXT"),
        Column("genre", "TEXT"),
        Column("albumTitle", "TEXT"),
        Column("albumArtist", "TEXT"),
        Column("composer", "TEXT"),
        Column("year", "INTEGER"),
        Column("trackNumber", "INTEGER"),
        Column("trackCount", "INTEGER"),
        Column("sampleRate", "INTEGER"),
        Column("bitrate", "INTEGER"),
        Column("bUploadFlicker", "BOOLEAN NOT NULL DEFAULT FALSE"),
        Column("bUploadFacebook", "BOOLEAN NOT NULL DEFAULT FALSE"),
        Column("bUploadYouTube", "BOOLEAN NOT NULL DEFAULT FALSE"),
        Column("visible", "INTEGER NOT NULL DEFAULT 1"),
        Column("stereoType", "TEXT"),
        Column("custom", "TEXT"),
        Column("bAlbumArt", "BOOLEAN NOT NULL DEFAULT FALSE"),
        Column("retryTimes", "INTEGER NOT NULL DEFAULT 0"),
        Column("thumbnailResolutionX", "INTEGER"),
        Column("thumbnailResolutionY", "INTEGER"),
    )
    indexes = (
        Index("MEDIAINFO_FOLDERGROUPID_MEDIANAME_INDEX", ("folderGroupID", "mediaName")),
        Index("MEDIAINFO_FOLDERGROUPID_TYPE_VISIBLE_INDEX", ("folderGroupID", "type", "visible")),
        Index("MEDIAINFO_MEDIANAME_INDEX", ("mediaName",)),
    )


class OrderInfoTable(TableSchema):
    table_name = "OrderInfo"
    columns = (
        Column("groupID", surrogate_key=True),
        Column("orders", "TEXT"),
    )


class PersonInfoTable(TableSchema):
    table_name = "PersonInfo"
    columns = (
        Column("groupID", surrogate_key=True),
        Column("personID", "INTEGER"),
        Column("displayFaceID", "INTEGER"),
        Column("birthday", "DATE"),
    )
    indexes = (Index("PERSONINFO_GROUPID_PERSONID_INDEX", ("groupID", "personID")),)


# =========================================================================
# extra
# =========================================================================


class MovieGroupTypesTable(TableSchema):
    table_name = "MovieGroupTypes"
    columns = (
        Column("_id", surrogate_key=True),
        Column("name", "TEXT NOT NULL"),
        Column("description", "TEXT DEFAULT ''"),
    )


class MovieGroupTypeMovieGroupsTable(TableSchema):
    table_name = "MovieGroupTypeMovieGroups"
    columns = (
        Column("mgid", surrogate_key=True),
        Column("gendid", "INTEGER NOT NULL"),
    )


# =========================================================================
# mediaScannerCache
# =========================================================================


class _MTCacheScanContextTable(TableSchema):
    columns = (
        Column("folder", "TEXT"),
        Column("filename", "TEXT"),
        Column("mtime", "REAL"),
        Column("mtype", "INT"),
        Column("filterValue", "INT"),
        Column("isFiltered", "BOOLEAN"),
    )
    primary_key = ("folder", "filename")


class MTCacheMovieScanContextTable(_MTCacheScanContextTable):
    table_name = "MTcache_Movie_Scan_Context"


class MTCacheMusicScanContextTable(_MTCacheScanContextTable):
    table_name = "MTcache_Music_Scan_Context"


class MTCachePhotoScanContextTable(_MTCacheScanContextTable):
    table_name = "MTcache_Photo_Scan_Context"


class MTCacheVideoScanContextTable(_MTCacheScanContextTable):
    table_name = "MTcache_Video_Scan_Context"


class _PostscanScanContextTable(TableSchema):
    columns = (
        Column("folder", "TEXT"),
        Column("filename", "TEXT"),
        Column("mtype", "INT"),
        Column("stage", "INT"),
    )
    primary_key = ("folder", "filename")


class PostscanMovieScanContextTable(_PostscanScanContextTable):
    table_name = "Postscan_Movie_Scan_Context"


class PostscanMusicScanContextTable(_PostscanScanContextTable):
    table_name = "Postscan_Music_Scan_Context"


class PostscanPhotoScanContextTable(_PostscanScanContextTable):
    table_name = "Postscan_Photo_Scan_Context"


class PostscanVideoScanContextTable(_PostscanScanContextTable):
    table_name = "Postscan_Video_Scan_Context"


# =========================================================================
# moviemedia
# =========================================================================


class MovieMediaInfoTable(TableSchema):
    """Movie catalogue; keyed by a text id assigned by the scanner."""

    table_name = "MediaInfo"
    columns = (
        Column("_id", "TEXT PRIMARY KEY"),
        Column("mediaType", "INTEGER NOT NULL"),
        Column("title", "TEXT"),
        Column("description", "TEXT"),
        Column("studio", "TEXT"),
        Column("genre", "TEXT"),
        Column("mediaFullPath", "TEXT"),
        Column("infoFilePath", "TEXT"),
        Column("isMovieFolder", "BOOLEAN DEFAULT FALSE"),
        Column("mediaSize", "BIGINT NOT NULL"),
        Column("length", "BIGINT DEFAULT NULL"),
        Column("mediaDuration", "BIGINT DEFAULT NULL"),
        Column("mediaResume", "BIGINT DEFAULT 0"),
        Column("mediaRating", "INTEGER"),
        Column("playCount", "INTEGER NOT NULL DEFAULT 0"),
        Column("protected", "BOOLEAN DEFAULT FALSE"),
        Column("visible", "INTEGER NOT NULL DEFAULT 1"),
        Column("OnlineInfoVisible", "INTEGER NOT NULL DEFAULT 1"),
        Column("stereoType", "TEXT"),
        Column("orientation", "INTEGER"),
        Column("resolutionX", "INTEGER"),
        Column("resolutionY", "INTEGER"),
        Column("aspectRatioX", "INTEGER"),
        Column("aspectRatioY", "INTEGER"),
        Column("thumbnailResolutionX", "INTEGER"),
        Column("thumbnailResolutionY", "INTEGER"),
        Column("releaseDate", "TIMESTAMP"),
        Column("addDate", "TIMESTAMP NOT NULL"),
        Column("modifyDate", "TIMESTAMP NOT NULL"),
        Column("playDate", "TIMESTAMP NOT NULL"),
    )
    indexes = (Index("MEDIAINFO_TITLE_ID_INDEX", ("title", "_id"), unique=True),)


# =========================================================================
# Playlist
# =========================================================================


class PlayItemInfoTable(TableSchema):
    table_name = "PlayItemInfo"
    columns = (
        Column("_id", surrogate_key=True),
        Column("type", "INTEGER NOT NULL"),
        Column("playlistID", "INTEGER NOT NULL"),
        Column("mediaTitle", "TEXT NOT NULL"),
        Column("mediaID", "TEXT NOT NULL"),
        Column("listOrder", "INTEGER NOT NULL"),
    )


class PlayListInfoTable(TableSchema):
    table_name = "PlayListInfo"
    columns = (
        Column("_id", surrogate_key=True),
        Column("type", "INTEGER NOT NULL"),
        Column("name", "TEXT NOT NULL"),
        Column("addDate", "TIMESTAMP NOT NULL"),
        Column("mediaDate", "TIMESTAMP NOT NULL"),
        Column("modifyDate", "TIMESTAMP NOT NULL"),
        Column("place", "TEXT DEFAULT ''"),
        Column("description", "TEXT DEFAULT ''"),
        Column("visible", "INTEGER DEFAULT 1"),
        Column("custom", "TEXT"),
    )
    indexes = (Index("PLAYLISTINFO_NAME_INDEX", ("type", "name")),)


__all__ = [
    "CreationInfoTable",
    "FaceInfoTable",
    "GroupInfoTable",
    "GroupOrderInfoTable",
    "MediaInfoTable",
    "OrderInfoTable",
    "PersonInfoTable",
    "MovieGroupTypesTable",
    "MovieGroupTypeMovieGroupsTable",
    "MTCacheMovieScanContextTable",
    "MTCacheMusicScanContextTable",
    "MTCachePhotoScanContextTable",
    "MTCacheVideoScanContextTable",
    "PostscanMovieScanContextTable",
    "PostscanMusicScanContextTable",
    "PostscanPhotoScanContextTable",
    "PostscanVideoScanContextTable",
    "MovieMediaInfoTable",
    "PlayItemInfoTable",
    "PlayListInfoTable",
]
