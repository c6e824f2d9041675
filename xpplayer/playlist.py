"""An ordered list of songs with a cursor on the current one."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from .song import Song


class Playlist:
    """Songs in order, with wrap-around navigation between them."""

    def __init__(self, songs: Iterable[Song] | None = None) -> None:
        self._songs: list[Song] = list(songs) if songs is not None else []
        self._index = 0

    def __len__(self) -> int:
        return len(self._songs)

    def __iter__(self) -> Iterator[Song]:
        return iter(self._songs)

    def add(self, song: Song) -> None:
        """Append a song at the end."""
        self._songs.append(song)

    def remove(self, index: int) -> Song | None:
        """Remove the song at ``index``; out-of-range indices are ignored.

        Returns the removed song, or None when nothing was removed.
        """
        if not 0 <= index < len(self._songs):
            return None
        removed = self._songs.pop(index)
        if self._index >= len(self._songs):
            self._index = max(len(self._songs) - 1, 0)
        return removed

    def next(self) -> Song | None:
        """Move to the following song, wrapping to the first one."""
        if not self._songs:
            return None
        self._index = (self._index + 1) % len(self._songs)
        return self._songs[self._index]

    def previous(self) -> Song | None:
        """Move to the preceding song, wrapping to the last one."""
        if not self._songs:
            return None
        self._index = (self._index - 1) % len(self._songs)
        return self._songs[self._index]

    def current(self) -> Song | None:
        """The song under the cursor, or None for an empty playlist."""
        if not self._songs:
            return None
        return self._songs[self._index]

    def songs(self) -> tuple[Song, ...]:
        """All songs, in order."""
        return tuple(self._songs)