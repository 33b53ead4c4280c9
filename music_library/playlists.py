"""
Playlist and folder views.

Playlists and folders arrive as ordered lists of track identifiers. They are
wrapped into PlaylistEntry sequences that point at the canonical Track
objects from the library's lookup map; track data is never copied.
"""

from typing import Dict, Iterable, List, Union

from loguru import logger

from .models import Folder, FolderData, Playlist, PlaylistData, PlaylistEntry, Track


def playlist_entry(track: Track) -> PlaylistEntry:
    return PlaylistEntry(track=track)


def resolve_entries(track_ids: Iterable[int], tracks_index: Dict[int, Track]) -> List[PlaylistEntry]:
    """Wrap each resolvable track id into a new entry. Unknown ids are skipped."""
    entries = []
    for track_id in track_ids:
        track = tracks_index.get(track_id)
        if track is None:
            logger.warning(f"Track {track_id} not in collection, skipping entry.")
            continue
        entries.append(playlist_entry(track))
    return entries


def wrap_playlist(data: Union[PlaylistData, dict], tracks_index: Dict[int, Track]) -> Playlist:
    if not isinstance(data, PlaylistData):
        data = PlaylistData.model_validate(data)
    return Playlist(
        id=data.id,
        name=data.name,
        tracks=resolve_entries(data.track_ids, tracks_index),
    )


def wrap_folder(data: Union[FolderData, dict], tracks_index: Dict[int, Track]) -> Folder:
    if not isinstance(data, FolderData):
        data = FolderData.model_validate(data)
    return Folder(
        id=data.id,
        name=data.name,
        path=data.path,
        tracks=resolve_entries(data.track_ids, tracks_index),
    )


def move_entry(entries: list, src: int, dst: int) -> None:
    """
    Move the element at *src* to *dst*, shifting the ones in between.

    *dst* is an index into the list after the element has been taken out,
    so moving 0 -> 2 in [a, b, c] gives [b, c, a].
    """
    entries.insert(dst, entries.pop(src))
