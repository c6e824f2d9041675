"""A single track known to the player."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Song:
    """A track: its title, artist, length in seconds and the audio file behind it."""

    title: str
    artist: str
    duration: int
    path: str

    def __str__(self) -> str:
        return f"{self.title} - {self.artist}"