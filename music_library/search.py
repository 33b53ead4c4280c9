"""
Substring search over library containers.

Each searchable field is described by a selector: a function returning the
field's text for an item, or None when the item has no value for it.
Matching is a case-folded substring test; items whose field is None never
match.
"""

from typing import Callable, Iterable, List, Optional, TypeVar

from .models import Album, Artist, Folder, Track

T = TypeVar("T")

Selector = Callable[[T], Optional[str]]


# ---------------------------------------------------------------------------
# Field selectors
# ---------------------------------------------------------------------------

def track_title(track: Track) -> Optional[str]:
    return track.title


def track_artist_name(track: Track) -> Optional[str]:
    return track.artist_name


def album_name(album: Album) -> Optional[str]:
    return album.name


def album_year(album: Album) -> Optional[str]:
    return str(album.year) if album.year is not None else None


def artist_name(artist: Artist) -> Optional[str]:
    return artist.name


def folder_path(folder: Folder) -> Optional[str]:
    return folder.path


TRACK_FIELDS = (track_title, track_artist_name)
ALBUM_FIELDS = (album_name, album_year)
ARTIST_FIELDS = (artist_name,)
FOLDER_FIELDS = (folder_path,)


# ---------------------------------------------------------------------------
# Matching
# ---------------------------------------------------------------------------

def _matches(item, selector: Selector, folded_query: str) -> bool:
    value = selector(item)
    return value is not None and folded_query in value.casefold()


def search(container: Iterable[T], selector: Selector, query: str) -> List[T]:
    """Items of *container* whose selected field contains *query*."""
    q = query.casefold()
    return [item for item in container if _matches(item, selector, q)]


def limited_union(
    max_results: Optional[int],
    container: Iterable[T],
    *selectors: Selector,
    query: str,
) -> List[T]:
    """
    Union of the per-field matches of *query*, in container order.

    An item matching on several fields appears once. The result is cut to
    the first *max_results* items; None means no cap.
    """
    q = query.casefold()
    results: List[T] = []
    for item in container:
        if max_results is not None and len(results) >= max_results:
            break
        if any(_matches(item, selector, q) for selector in selectors):
            results.append(item)
    return results


def distinct(items: Iterable[T]) -> List[T]:
    """Drop repeated objects (by identity), keeping first occurrences."""
    seen = set()
    unique: List[T] = []
    for item in items:
        if id(item) not in seen:
            seen.add(id(item))
            unique.append(item)
    return unique
