"""In-memory music library: collection indices, playlist views and search."""

from .config import LibraryConfig
from .errors import LibraryError, LibraryNotLoadedError, PlaylistNotFoundError, TrackNotFoundError
from .library import LibraryService

__all__ = [
    "LibraryConfig",
    "LibraryError",
    "LibraryNotLoadedError",
    "LibraryService",
    "PlaylistNotFoundError",
    "TrackNotFoundError",
]
