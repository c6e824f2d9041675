"""A small desktop MP3 player: folder scanning, a playlist, pygame playback and a window."""

__version__ = "0.1.0"