"""The player: a playlist, a decoder and the thread that keeps it playing."""

from __future__ import annotations

import logging

from .decoder import AudioDecoder, MP3Decoder
from .playback import PlaybackThread
from .playlist import Playlist
from .song import Song

logger = logging.getLogger(__name__)


class MusicPlayer:
    """Plays the songs of a playlist one at a time."""

    def __init__(self, decoder: AudioDecoder | None = None) -> None:
        self._decoder = decoder if decoder is not None else MP3Decoder()
        self._playback = PlaybackThread(self._decoder)
        self._playlist = Playlist()

    def load_playlist(self, playlist: Playlist) -> None:
        """Use ``playlist`` as the list of songs to play."""
        self._playlist = playlist

    def _load_and_play(self) -> Song | None:
        song = self._playlist.current()
        if song is None:
            logger.info("No hay canción para reproducir.")
            return None
        self._playback.stop()
        self._decoder.load(song.path)
        self._playback.start()
        return song

    def play(self) -> Song | None:
        """Load and play the current song; returns it, or None if there is none."""
        return self._load_and_play()

    def stop(self) -> None:
        """Stop playback."""
        self._playback.stop()
        self._decoder.stop()

    def next(self) -> Song | None:
        """Move to the following song and play it."""
        self._playlist.next()
        return self._load_and_play()

    def previous(self) -> Song | None:
        """Move to the preceding song and play it."""
        self._playlist.previous()
        return self._load_and_play()

    def set_volume(self, volume: float) -> None:
        """Set the volume, from 0.0 to 1.0."""
        self._decoder.set_volume(volume)

    def seek(self, progress: float) -> None:
        """Jump to a fraction of the current song."""
        self._decoder.seek(progress)

    def current_song(self) -> Song | None:
        return self._playlist.current()

    def progress(self) -> float:
        """Fraction of the current song already played."""
        return self._decoder.progress()

    def duration(self) -> float:
        """Length of the current song in seconds."""
        return self._decoder.duration()

    def playlist(self) -> Playlist:
        return self._playlist

    def close(self) -> None:
        """Stop the playback thread and release the decoder."""
        self._playback.stop()
        close = getattr(self._decoder, "close", None)
        if close is not None:
            close()
        else:
            self._decoder.stop()