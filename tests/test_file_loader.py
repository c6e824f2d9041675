import os

import pytest

from xpplayer.file_loader import UNKNOWN_ARTIST, parse_song_name, scan_directory


def test_parse_artist_and_title():
    assert parse_song_name("Queen - Bohemian Rhapsody.mp3") == ("Queen", "Bohemian Rhapsody")


def test_parse_title_with_separator_inside():
    assert parse_song_name("A - B - C.mp3") == ("A", "B - C")


def test_parse_without_separator_uses_unknown_artist():
    assert parse_song_name("Lonely.mp3") == (UNKNOWN_ARTIST, "Lonely")


def test_unknown_artist_value():
    artist, title = parse_song_name("Solo.mp3")
    assert artist == "Artista desconocido"
    assert title == "Solo"


def test_parse_hyphen_without_spaces_is_not_separator():
    assert parse_song_name("AC-DC.mp3") == (UNKNOWN_ARTIST, "AC-DC")


def test_scan_finds_only_mp3(tmp_path):
    for name in ("Artist - Title.mp3", "Lonely.mp3", "notes.txt", "Upper.MP3"):
        (tmp_path / name).write_bytes(b"")
    songs = scan_directory(tmp_path)
    assert [(s.artist, s.title) for s in songs] == [
        ("Artist", "Title"),
        (UNKNOWN_ARTIST, "Lonely"),
    ]


def test_scan_sets_path_and_zero_duration(tmp_path):
    (tmp_path / "Band - Song.mp3").write_bytes(b"")
    (song,) = scan_directory(tmp_path)
    assert song.path == os.path.join(str(tmp_path), "Band - Song.mp3")
    assert song.duration == 0


def test_scan_accepts_string_path(tmp_path):
    (tmp_path / "x.mp3").write_bytes(b"")
    assert [s.title for s in scan_directory(str(tmp_path))] == ["x"]


def test_scan_empty_directory(tmp_path):
    assert scan_directory(tmp_path) == []


def test_scan_missing_directory_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        scan_directory(tmp_path / "missing")