"""Finding MP3 files in a directory and turning them into songs."""

from __future__ import annotations

import os
from pathlib import Path

from .song import Song

MP3_SUFFIX = ".mp3"
SEPARATOR = " - "
UNKNOWN_ARTIST = "Artista desconocido"


def parse_song_name(filename: str) -> tuple[str, str]:
    """Split ``"Artist - Title.mp3"`` into ``(artist, title)``.

    Without the separator the artist is :data:`UNKNOWN_ARTIST` and the whole
    name before the extension is the title.
    """
    ext = filename.rfind(MP3_SUFFIX)
    end = ext if ext != -1 else len(filename)
    dash = filename.find(SEPARATOR)
    if dash == -1:
        return UNKNOWN_ARTIST, filename[:end]
    start = dash + len(SEPARATOR)
    return filename[:dash], filename[start:max(end, start)]


def scan_directory(path: str | os.PathLike[str]) -> list[Song]:
    """Return a song for every ``.mp3`` entry directly inside ``path``.

    Entries are returned sorted by name; the duration is not read and is 0.
    Raises :class:`FileNotFoundError` if the directory does not exist.
    """
    songs = []
    with os.scandir(path) as entries:
        for entry in sorted(entries, key=lambda e: e.name):
            if Path(entry.name).suffix != MP3_SUFFIX:
                continue
            artist, title = parse_song_name(entry.name)
            songs.append(Song(title, artist, 0, entry.path))
    return songs