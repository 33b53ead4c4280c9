"""
Collection Ordering

Deterministic ordering for the nested artist -> album -> track collection and
for the flat alphabetical views.

Multi-key orderings are built as successive stable sorts: the secondary keys
are applied first and the dominant key last. Ties on the dominant key keep
the order left by the earlier passes, e.g. albums of the same year end up
ordered by disk, and equal disks by name:

    sort by name -> sort by disk -> sort by year
"""

import locale
from typing import Callable, List, Optional, Tuple, TypeVar

from .models import Album, Artist, PlaylistEntry, Track

T = TypeVar("T")


def collation_key(text: Optional[str]) -> str:
    """Locale-aware, case-insensitive sort key. None collates as empty text."""
    return locale.strxfrm((text or "").casefold())


def number_key(value: Optional[int]) -> Tuple[bool, int]:
    """Numeric sort key with missing values after all numbers."""
    return (value is None, value or 0)


def sort_by_text(items: List[T], selector: Callable[[T], Optional[str]]) -> None:
    """Stable in-place sort of *items* by the text *selector* returns."""
    items.sort(key=lambda item: collation_key(selector(item)))


def sort_by_number(items: List[T], selector: Callable[[T], Optional[int]]) -> None:
    """Stable in-place sort of *items* by the number *selector* returns."""
    items.sort(key=lambda item: number_key(selector(item)))


def sort_albums(albums: List[Album]) -> List[Album]:
    """Order albums by year, then disk, then name."""
    sort_by_text(albums, lambda a: a.name)
    sort_by_number(albums, lambda a: a.disk)
    sort_by_number(albums, lambda a: a.year)
    return albums


def sort_tracks(tracks: List[Track]) -> List[Track]:
    """Order album tracks by track number, title breaking ties."""
    sort_by_text(tracks, lambda t: t.title)
    sort_by_number(tracks, lambda t: t.number)
    return tracks


def sort_tracks_alphabetically(tracks: List[Track]) -> List[Track]:
    """Order tracks by artist name, title breaking ties."""
    sort_by_text(tracks, lambda t: t.title)
    sort_by_text(tracks, lambda t: t.artist_name)
    return tracks


def sort_entries_alphabetically(entries: List[PlaylistEntry]) -> List[PlaylistEntry]:
    """Same ordering as sort_tracks_alphabetically, for playlist entries."""
    sort_by_text(entries, lambda e: e.track.title)
    sort_by_text(entries, lambda e: e.track.artist_name)
    return entries


def sort_collection(artists: List[Artist]) -> List[Artist]:
    """
    Order the whole collection in place.

    Artists by name; each artist's albums with sort_albums; each album's
    tracks with sort_tracks. Nothing is added or dropped.
    """
    sort_by_text(artists, lambda a: a.name)
    for artist in artists:
        sort_albums(artist.albums)
        for album in artist.albums:
            sort_tracks(album.tracks)
    return artists
