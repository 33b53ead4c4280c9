"""Exceptions raised by the music library service."""


class LibraryError(Exception):
    """Base class for library service errors."""


class LibraryNotLoadedError(LibraryError, RuntimeError):
    """The collection, playlists or folders needed by a call were never loaded."""


class PlaylistNotFoundError(LibraryError, KeyError):
    """No playlist with the requested identifier."""


class TrackNotFoundError(LibraryError, KeyError):
    """A track identifier did not resolve against the loaded collection."""
