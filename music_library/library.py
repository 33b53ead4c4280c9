"""
Music Library Service

Holds the canonical artist -> album -> track collection and everything
derived from it:

  - album-order, alphabetical and folder-order track views
  - the track id -> Track lookup map
  - user playlists and filesystem folders resolved through that map

Every view holds references to the same Track objects the albums own, so an
edit made to a track through one view is visible through all of them.

Usage:
    library = LibraryService()
    library.load(collection)              # list of artist dicts
    library.load_playlists(playlists)
    library.load_folders(folders)         # or None to clear
    library.search_tracks("love", max_results=20)
"""

import random
from typing import Dict, List, Optional, Union

from loguru import logger

from .config import LibraryConfig, apply_collation_locale
from .errors import LibraryNotLoadedError, PlaylistNotFoundError, TrackNotFoundError
from .models import (
    Album,
    Artist,
    Folder,
    FolderData,
    Playlist,
    PlaylistData,
    PlaylistEntry,
    Track,
)
from .playlists import move_entry, playlist_entry, wrap_folder, wrap_playlist
from .search import (
    ALBUM_FIELDS,
    ARTIST_FIELDS,
    FOLDER_FIELDS,
    TRACK_FIELDS,
    distinct,
    limited_union,
)
from .sorting import sort_by_text, sort_collection, sort_entries_alphabetically, sort_tracks_alphabetically

_UNSET = object()


def coerce_id(value) -> Optional[int]:
    """
    Numeric form of a caller-supplied identifier.

    Integral numbers and numeric strings map to int; fractions, non-numeric
    text and None map to None so that lookups simply find nothing.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    if not number.is_integer():
        return None
    return int(number)


class LibraryService:
    """
    Owner of the collection, its derived views, playlists and folders.

    A container that was never loaded is None; one loaded from empty input
    is an empty list. The *_loaded() predicates tell the two apart.

    Creating a service sets the process-wide LC_COLLATE (the configured
    collation_locale, else the environment's locale), which every other
    instance then sorts with too.
    """

    def __init__(self, config: Optional[LibraryConfig] = None):
        self.config = config or LibraryConfig()
        apply_collation_locale(self.config.collation_locale or "")
        self.reset()

    def reset(self) -> None:
        """Drop all state, back to never loaded."""
        self._artists: Optional[List[Artist]] = None
        self._albums: Optional[List[Album]] = None
        self._tracks_index: Dict[int, Track] = {}
        self._tracks_in_album_order: Optional[List[PlaylistEntry]] = None
        self._tracks_in_alpha_order: Optional[List[PlaylistEntry]] = None
        self._tracks_in_folder_order: Optional[List[PlaylistEntry]] = None
        self._playlists: Optional[List[Playlist]] = None
        self._folders: Optional[List[Folder]] = None

    # ------------------------------------------------------------------
    # Loading
    # ------------------------------------------------------------------

    def load(self, collection: List[Union[Artist, dict]]) -> None:
        """
        Replace the collection and rebuild every derived track view.

        Playlists and folders already loaded are pointed at the new Track
        objects by id; entries whose track is gone are dropped.
        """
        artists = [
            a if isinstance(a, Artist) else Artist.model_validate(a)
            for a in (collection or [])
        ]
        self._artists = sort_collection(artists)
        self._albums = [album for artist in self._artists for album in artist.albums]
        self._build_track_containers()
        self._rebind_views()
        logger.info(
            f"Library loaded: {len(self._artists)} artists, "
            f"{len(self._albums)} albums, {len(self._tracks_index)} tracks"
        )

    def _build_track_containers(self) -> None:
        for album in self._albums:
            for track in album.tracks:
                track.album_id = album.id

        tracks = [track for album in self._albums for track in album.tracks]
        self._tracks_in_album_order = [playlist_entry(t) for t in tracks]

        sort_tracks_alphabetically(tracks)
        self._tracks_in_alpha_order = [playlist_entry(t) for t in tracks]

        self._tracks_index = {t.id: t for t in sorted(tracks, key=lambda t: t.id)}

    def load_playlists(self, lists: Optional[List[Union[PlaylistData, dict]]]) -> None:
        """Replace all playlists. None clears them to the never-loaded state."""
        if lists is None:
            self._playlists = None
            return
        self._require_collection()
        self._playlists = [wrap_playlist(p, self._tracks_index) for p in lists]
        logger.info(f"Loaded {len(self._playlists)} playlists")

    def load_folders(self, folder_data: Optional[List[Union[FolderData, dict]]]) -> None:
        """
        Replace all folders and the folder-order view.

        None clears both. Otherwise folders are ordered by name, each folder's
        tracks by artist name then title, and every referenced track gets its
        folder_id.
        """
        if folder_data is None:
            self._folders = None
            self._tracks_in_folder_order = None
            logger.debug("Folders cleared")
            return

        self._require_collection()
        folders = [wrap_folder(f, self._tracks_index) for f in folder_data]
        self._index_folders(folders)
        logger.info(
            f"Loaded {len(folders)} folders with {len(self._tracks_in_folder_order)} tracks"
        )

    def _index_folders(self, folders: List[Folder]) -> None:
        sort_by_text(folders, lambda f: f.name)
        for folder in folders:
            sort_entries_alphabetically(folder.tracks)
            for entry in folder.tracks:
                entry.track.folder_id = folder.id

        self._folders = folders
        self._tracks_in_folder_order = [entry for folder in folders for entry in folder.tracks]

    def _rebind_views(self) -> None:
        for playlist in self._playlists or []:
            playlist.tracks = self._rebind_entries(playlist)
        if self._folders is not None:
            for folder in self._folders:
                folder.tracks = self._rebind_entries(folder)
            self._index_folders(self._folders)

    def _rebind_entries(self, playlist: Playlist) -> List[PlaylistEntry]:
        entries = []
        for entry in playlist.tracks:
            track = self._tracks_index.get(entry.track.id)
            if track is None:
                logger.warning(
                    f"Track {entry.track.id} no longer in collection, dropped from '{playlist.name}'"
                )
                continue
            entry.track = track
            entries.append(entry)
        return entries

    # ------------------------------------------------------------------
    # Playlist mutation
    # ------------------------------------------------------------------

    def add_playlist(self, playlist: Union[PlaylistData, dict]) -> Playlist:
        """Wrap *playlist* and append it to the playlist set."""
        playlists = self._require_playlists()
        wrapped = wrap_playlist(playlist, self._tracks_index)
        playlists.append(wrapped)
        logger.debug(f"Added playlist {wrapped.id} '{wrapped.name}'")
        return wrapped

    def remove_playlist(self, playlist: Playlist) -> None:
        """Remove *playlist* (the same object, not an equal one). No-op if absent."""
        if not self._playlists:
            return
        for i, candidate in enumerate(self._playlists):
            if candidate is playlist:
                del self._playlists[i]
                logger.debug(f"Removed playlist {playlist.id}")
                return

    def add_to_playlist(self, playlist_id, track_id) -> PlaylistEntry:
        """Append a new entry for *track_id* to the end of the playlist."""
        playlist = self._require_playlist(playlist_id)
        track = self.get_track(track_id)
        if track is None:
            raise TrackNotFoundError(track_id)
        entry = playlist_entry(track)
        playlist.tracks.append(entry)
        return entry

    def remove_from_playlist(self, playlist_id, index: int) -> PlaylistEntry:
        """Remove and return the entry at *index*."""
        playlist = self._require_playlist(playlist_id)
        self._check_index(playlist, index)
        return playlist.tracks.pop(index)

    def reorder_playlist(self, playlist_id, src_index: int, dst_index: int) -> None:
        """Move the entry at *src_index* so that it ends up at *dst_index*."""
        playlist = self._require_playlist(playlist_id)
        self._check_index(playlist, src_index)
        self._check_index(playlist, dst_index)
        move_entry(playlist.tracks, src_index, dst_index)

    @staticmethod
    def _check_index(playlist: Playlist, index: int) -> None:
        if not 0 <= index < len(playlist.tracks):
            raise IndexError(
                f"Position {index} out of range for playlist {playlist.id} "
                f"({len(playlist.tracks)} entries)"
            )

    # ------------------------------------------------------------------
    # Lookups
    # ------------------------------------------------------------------

    def get_artist(self, artist_id) -> Optional[Artist]:
        return _find_by_id(self._artists, artist_id)

    def get_all_artists(self) -> Optional[List[Artist]]:
        return self._artists

    def get_album(self, album_id) -> Optional[Album]:
        return _find_by_id(self._albums, album_id)

    def get_all_albums(self) -> Optional[List[Album]]:
        return self._albums

    def get_album_count(self) -> int:
        return len(self._albums) if self._albums else 0

    def get_track(self, track_id) -> Optional[Track]:
        key = coerce_id(track_id)
        return self._tracks_index.get(key) if key is not None else None

    def get_tracks_in_alpha_order(self) -> Optional[List[PlaylistEntry]]:
        return self._tracks_in_alpha_order

    def get_tracks_in_album_order(self) -> Optional[List[PlaylistEntry]]:
        return self._tracks_in_album_order

    def get_tracks_in_folder_order(self) -> Optional[List[PlaylistEntry]]:
        return self._tracks_in_folder_order

    def get_tracks_in_random_order(self, rng: Optional[random.Random] = None) -> Optional[List[PlaylistEntry]]:
        """A freshly shuffled view over all tracks; None before load."""
        if self._tracks_in_album_order is None:
            return None
        tracks = [entry.track for entry in self._tracks_in_album_order]
        (rng or random).shuffle(tracks)
        return [playlist_entry(t) for t in tracks]

    def get_track_count(self) -> int:
        return len(self._tracks_in_alpha_order) if self._tracks_in_alpha_order else 0

    def get_playlist(self, playlist_id) -> Optional[Playlist]:
        return _find_by_id(self._playlists, playlist_id)

    def get_all_playlists(self) -> Optional[List[Playlist]]:
        return self._playlists

    def get_folder(self, folder_id) -> Optional[Folder]:
        return _find_by_id(self._folders, folder_id)

    def get_all_folders(self) -> Optional[List[Folder]]:
        return self._folders

    def find_album_of_track(self, track_id) -> Optional[Album]:
        key = coerce_id(track_id)
        if key is None:
            return None
        for album in self._albums or []:
            if any(t.id == key for t in album.tracks):
                return album
        return None

    def find_artist_of_album(self, album_id) -> Optional[Artist]:
        key = coerce_id(album_id)
        if key is None:
            return None
        for artist in self._artists or []:
            if any(a.id == key for a in artist.albums):
                return artist
        return None

    def find_folder_of_track(self, track_id) -> Optional[Folder]:
        key = coerce_id(track_id)
        if key is None:
            return None
        for folder in self._folders or []:
            if any(entry.track.id == key for entry in folder.tracks):
                return folder
        return None

    def collection_loaded(self) -> bool:
        return self._artists is not None

    def playlists_loaded(self) -> bool:
        return self._playlists is not None

    def folders_loaded(self) -> bool:
        return self._folders is not None

    # ------------------------------------------------------------------
    # Search
    # ------------------------------------------------------------------

    def search_tracks(self, query: str, max_results=_UNSET) -> List[Track]:
        """Tracks whose title or artist name contains *query*, in track id order."""
        self._require_collection()
        return limited_union(
            self._limit(max_results), self._tracks_index.values(), *TRACK_FIELDS, query=query
        )

    def search_albums(self, query: str, max_results=_UNSET) -> List[Album]:
        """Albums whose name or year contains *query*."""
        self._require_collection()
        return limited_union(self._limit(max_results), self._albums, *ALBUM_FIELDS, query=query)

    def search_artists(self, query: str, max_results=_UNSET) -> List[Artist]:
        self._require_collection()
        return limited_union(self._limit(max_results), self._artists, *ARTIST_FIELDS, query=query)

    def search_folders(self, query: str, max_results=_UNSET) -> List[Folder]:
        if self._folders is None:
            raise LibraryNotLoadedError("Folders not loaded")
        return limited_union(self._limit(max_results), self._folders, *FOLDER_FIELDS, query=query)

    def search_tracks_in_playlist(self, playlist_id, query: str, max_results=_UNSET) -> List[Track]:
        """
        Search the distinct tracks of one playlist by title or artist name.

        A track listed several times is considered once. An unknown playlist
        yields no results.
        """
        playlist = self.get_playlist(playlist_id)
        tracks = distinct(entry.track for entry in playlist.tracks) if playlist else []
        return limited_union(self._limit(max_results), tracks, *TRACK_FIELDS, query=query)

    def _limit(self, max_results) -> Optional[int]:
        if max_results is _UNSET:
            return self.config.default_search_limit
        return max_results

    # ------------------------------------------------------------------
    # Preconditions
    # ------------------------------------------------------------------

    def _require_collection(self) -> None:
        if self._artists is None:
            raise LibraryNotLoadedError("Collection not loaded")

    def _require_playlists(self) -> List[Playlist]:
        if self._playlists is None:
            raise LibraryNotLoadedError("Playlists not loaded")
        return self._playlists

    def _require_playlist(self, playlist_id) -> Playlist:
        self._require_playlists()
        playlist = self.get_playlist(playlist_id)
        if playlist is None:
            raise PlaylistNotFoundError(playlist_id)
        return playlist


def _find_by_id(items, item_id):
    key = coerce_id(item_id)
    if key is None or not items:
        return None
    for item in items:
        if item.id == key:
            return item
    return None
