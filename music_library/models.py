"""
Data Models for the Music Library

Canonical collection records (artists, albums, tracks) and the thin
playlist/folder views that reference them.

Incoming payloads use the camelCase keys of the collection API
(``artistName``, ``trackIds`` ...); snake_case field names are accepted too.
"""

from typing import Optional, List

from pydantic import BaseModel, ConfigDict, Field


# ---------------------------------------------------------------------------
# Collection models
# ---------------------------------------------------------------------------

class _LibraryModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


class Track(_LibraryModel):
    """A single track. Owned by its album; every view holds this same object."""

    id: int = Field(..., description="Unique track identifier")
    title: Optional[str] = Field(..., description="Track title")
    artist_name: Optional[str] = Field(None, alias="artistName", description="Track artist")
    number: Optional[int] = Field(None, description="Track number within the album")
    disk: Optional[int] = Field(None, description="Disc number")
    length: Optional[int] = Field(None, ge=0, description="Track length in seconds")
    album_id: Optional[int] = Field(None, alias="albumId", description="Parent album, assigned on load")
    folder_id: Optional[int] = Field(None, alias="folderId", description="Containing folder, assigned on folder load")

    def duration_formatted(self) -> str:
        if not self.length:
            return "0:00"
        minutes = self.length // 60
        seconds = self.length % 60
        return f"{minutes}:{seconds:02d}"


class Album(_LibraryModel):
    """Album with its ordered tracks."""

    id: int = Field(..., description="Unique album identifier")
    name: str = Field(..., description="Album name")
    year: Optional[int] = Field(None, description="Release year")
    disk: Optional[int] = Field(None, description="Disc number for multi-disc releases")
    tracks: List[Track] = Field(default_factory=list)


class Artist(_LibraryModel):
    """Album artist with its ordered albums."""

    id: int = Field(..., description="Unique artist identifier")
    name: str = Field(..., description="Artist name")
    albums: List[Album] = Field(default_factory=list)


# ---------------------------------------------------------------------------
# Playlist / folder views
# ---------------------------------------------------------------------------

class PlaylistEntry(_LibraryModel):
    """One slot of a playlist-like view, wrapping a canonical track."""

    track: Track


class Playlist(_LibraryModel):
    """User playlist: an ordered, mutable list of entries."""

    id: int
    name: str = ""
    tracks: List[PlaylistEntry] = Field(default_factory=list)


class Folder(Playlist):
    """Filesystem folder. Structurally a playlist carrying its path."""

    path: Optional[str] = None


class PlaylistData(_LibraryModel):
    """Playlist as supplied by the caller: track identifiers, not tracks."""

    id: int
    name: str = ""
    track_ids: List[int] = Field(default_factory=list, alias="trackIds")


class FolderData(PlaylistData):
    """Folder as supplied by the caller."""

    path: Optional[str] = None
