"""Tests for music_library.config."""

import locale

import pytest
from music_library.config import LibraryConfig, apply_collation_locale
from music_library.library import LibraryService

ACCENT_LOCALE = "en_US.UTF-8"


@pytest.fixture
def restore_collation():
    saved = locale.setlocale(locale.LC_COLLATE)
    yield
    locale.setlocale(locale.LC_COLLATE, saved)


def require_locale(name):
    try:
        locale.setlocale(locale.LC_COLLATE, name)
    except locale.Error:
        pytest.skip(f"{name} locale not installed")


def test_defaults():
    cfg = LibraryConfig()
    assert cfg.collation_locale is None
    assert cfg.default_search_limit is None


def test_from_env_unset(monkeypatch):
    monkeypatch.delenv("MUSIC_LIBRARY_LOCALE", raising=False)
    monkeypatch.delenv("MUSIC_LIBRARY_SEARCH_LIMIT", raising=False)
    assert LibraryConfig.from_env() == LibraryConfig()


def test_from_env(monkeypatch):
    monkeypatch.setenv("MUSIC_LIBRARY_LOCALE", "C")
    monkeypatch.setenv("MUSIC_LIBRARY_SEARCH_LIMIT", "25")
    cfg = LibraryConfig.from_env()
    assert cfg.collation_locale == "C"
    assert cfg.default_search_limit == 25


def test_unknown_locale_is_ignored():
    before = locale.setlocale(locale.LC_COLLATE)
    assert apply_collation_locale("xx_NOT_A_LOCALE.UTF-8") is False
    assert locale.setlocale(locale.LC_COLLATE) == before


def test_empty_locale_name():
    assert apply_collation_locale(None) is False


def test_service_survives_unknown_locale():
    lib = LibraryService(LibraryConfig(collation_locale="xx_NOT_A_LOCALE.UTF-8"))
    lib.load([{"id": 1, "name": "b"}, {"id": 2, "name": "A"}])
    assert [a.name for a in lib.get_all_artists()] == ["A", "b"]


def test_accented_name_sorts_with_its_letter(restore_collation):
    require_locale(ACCENT_LOCALE)
    lib = LibraryService(LibraryConfig(collation_locale=ACCENT_LOCALE))
    lib.load([
        {"id": 1, "name": "Zed"},
        {"id": 2, "name": "Émile"},
        {"id": 3, "name": "Beta"},
    ])
    assert [a.name for a in lib.get_all_artists()] == ["Beta", "Émile", "Zed"]


def test_environment_locale_adopted_by_default(restore_collation, monkeypatch):
    require_locale(ACCENT_LOCALE)
    locale.setlocale(locale.LC_COLLATE, "C")
    monkeypatch.setenv("LC_ALL", ACCENT_LOCALE)
    lib = LibraryService()
    assert locale.setlocale(locale.LC_COLLATE) != "C"
    lib.load([{"id": 1, "name": "Zed"}, {"id": 2, "name": "Émile"}])
    assert [a.name for a in lib.get_all_artists()] == ["Émile", "Zed"]
