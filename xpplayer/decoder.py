"""Audio decoders: an abstract interface and an MP3 decoder on pygame's mixer."""

from __future__ import annotations

import abc
import logging
import os

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame  # noqa: E402

logger = logging.getLogger(__name__)


class AudioDecoder(abc.ABC):
    """Interface every decoder used by the player implements."""

    @abc.abstractmethod
    def load(self, path: str | os.PathLike[str]) -> None:
        """Load an audio file."""

    @abc.abstractmethod
    def play(self) -> None:
        """Start or continue playback; must not block."""

    @abc.abstractmethod
    def update(self) -> None:
        """Refresh the playback state."""

    @abc.abstractmethod
    def resume(self) -> None:
        """Resume paused playback."""

    @abc.abstractmethod
    def stop(self) -> None:
        """Stop playback."""

    @abc.abstractmethod
    def set_volume(self, volume: float) -> None:
        """Set the volume, from 0.0 to 1.0."""

    @abc.abstractmethod
    def is_playing(self) -> bool:
        """Whether audio is currently sounding."""

    @abc.abstractmethod
    def seek(self, progress: float) -> None:
        """Jump to a fraction of the track, 0.0 being the start and 1.0 the end."""


class MP3Decoder(AudioDecoder):
    """Plays one file at a time through ``pygame.mixer.music``."""

    def __init__(self) -> None:
        self._path: str | None = None
        self._loaded = False
        self._active = False
        self._offset = 0.0
        self._length = 0.0

    @staticmethod
    def _ensure_mixer() -> None:
        if not pygame.mixer.get_init():
            pygame.mixer.init()

    def _reset(self) -> None:
        self._path = None
        self._loaded = False
        self._active = False
        self._offset = 0.0
        self._length = 0.0

    def load(self, path: str | os.PathLike[str]) -> None:
        """Load ``path``, replacing any file loaded before.

        Raises :class:`OSError` if the file cannot be opened.
        """
        path = os.fspath(path)
        if self._loaded:
            pygame.mixer.music.stop()
            pygame.mixer.music.unload()
        self._reset()
        try:
            self._ensure_mixer()
            pygame.mixer.music.load(path)
        except pygame.error as exc:
            raise OSError(f"cannot load audio file {path!r}: {exc}") from exc
        try:
            self._length = pygame.mixer.Sound(path).get_length()
        except pygame.error:
            self._length = 0.0
        self._path = path
        self._loaded = True

    def play(self) -> None:
        """Start playback unless it is already running."""
        if not self._loaded:
            return
        self.update()
        if pygame.mixer.music.get_busy():
            return
        if self._offset > 0:
            try:
                pygame.mixer.music.play(start=self._offset)
            except pygame.error:
                self._offset = 0.0
                pygame.mixer.music.play()
        else:
            pygame.mixer.music.play()
        self._active = True
        logger.info("Playing %s", self._path)

    def update(self) -> None:
        """Notice a track that has finished and rewind it."""
        if self._loaded and self._active and not pygame.mixer.music.get_busy():
            self._active = False
            self._offset = 0.0

    def resume(self) -> None:
        if self._loaded:
            pygame.mixer.music.unpause()
        logger.info("Resumed")

    def stop(self) -> None:
        if self._loaded:
            pygame.mixer.music.stop()
            self._active = False
            self._offset = 0.0
            logger.info("Stopped %s", self._path)

    def set_volume(self, volume: float) -> None:
        if self._loaded:
            pygame.mixer.music.set_volume(volume)

    def is_playing(self) -> bool:
        return self._loaded and pygame.mixer.music.get_busy()

    def seek(self, progress: float) -> None:
        if not (self._loaded and self._length > 0):
            return
        self._offset = self._length * progress
        if self._active and pygame.mixer.music.get_busy():
            try:
                pygame.mixer.music.play(start=self._offset)
            except pygame.error as exc:
                logger.warning("Cannot seek in %s: %s", self._path, exc)

    def _elapsed(self) -> float:
        if self._active and pygame.mixer.music.get_busy():
            return self._offset + max(pygame.mixer.music.get_pos(), 0) / 1000.0
        return self._offset

    def progress(self) -> float:
        """Fraction of the track already played, 0.0 when nothing is loaded."""
        if self._loaded and self._length > 0:
            return self._elapsed() / self._length
        return 0.0

    def duration(self) -> float:
        """Length of the loaded track in seconds, 0.0 when nothing is loaded."""
        return self._length if self._loaded else 0.0

    def close(self) -> None:
        """Stop playback and release the loaded file."""
        if self._loaded:
            self.stop()
            pygame.mixer.music.unload()
        self._reset()