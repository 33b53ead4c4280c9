"""Unit tests for the library data models."""

from music_library.models import Album, Artist, Folder, FolderData, PlaylistData, Track


class TestTrack:
    def test_camel_case_payload(self):
        t = Track.model_validate({"id": "3", "title": "X", "artistName": "A", "albumId": 9})
        assert t.id == 3
        assert t.artist_name == "A"
        assert t.album_id == 9

    def test_snake_case_fields(self):
        t = Track(id=1, title="X", artist_name="A")
        assert t.artist_name == "A"
        assert t.folder_id is None

    def test_duration_formatted(self):
        assert Track(id=1, title="X", length=185).duration_formatted() == "3:05"
        assert Track(id=1, title="X").duration_formatted() == "0:00"


class TestNesting:
    def test_child_instances_are_kept(self):
        track = Track(id=1, title="X")
        album = Album(id=1, name="A", tracks=[track])
        artist = Artist(id=1, name="B", albums=[album])
        assert artist.albums[0] is album
        assert album.tracks[0] is track


class TestInputShapes:
    def test_playlist_data_track_ids(self):
        data = PlaylistData.model_validate({"id": 1, "name": "P", "trackIds": [3, "4"]})
        assert data.track_ids == [3, 4]

    def test_folder_data_path(self):
        data = FolderData.model_validate({"id": 1, "name": "F", "path": "/m", "trackIds": []})
        assert data.path == "/m"

    def test_folder_is_a_playlist(self):
        folder = Folder(id=1, name="F", path="/m")
        assert folder.tracks == []
