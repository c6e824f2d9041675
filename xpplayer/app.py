"""Application entry point: loads the songs and opens the interface."""

from __future__ import annotations

import argparse
import logging
import os
import sys

from .file_loader import scan_directory
from .player import MusicPlayer
from .playlist import Playlist
from .ui import MusicPlayerUI

import pygame  # noqa: E402

logger = logging.getLogger(__name__)

DEFAULT_DIRECTORY = "assets"


class Controller:
    """Ties the player to its interface."""

    def __init__(self, player: MusicPlayer | None = None, ui: MusicPlayerUI | None = None) -> None:
        self.player = player if player is not None else MusicPlayer()
        self.ui = ui if ui is not None else MusicPlayerUI()

    def build_playlist(self, directory: str | os.PathLike[str] = DEFAULT_DIRECTORY) -> Playlist:
        """A playlist of every MP3 file in ``directory``."""
        return Playlist(scan_directory(directory))

    def run(self, directory: str | os.PathLike[str] = DEFAULT_DIRECTORY) -> None:
        """Load the songs of ``directory`` and run the interface."""
        self.player.load_playlist(self.build_playlist(directory))
        self.ui.run(self.player)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="xpplayer", description="Play the MP3 files of a directory.")
    parser.add_argument(
        "directory",
        nargs="?",
        default=DEFAULT_DIRECTORY,
        help=f"directory holding the MP3 files (default: {DEFAULT_DIRECTORY})",
    )
    args = parser.parse_args(argv)

    try:
        pygame.mixer.init()
    except pygame.error as exc:
        logger.warning("Cannot open the audio device: %s", exc)

    controller = Controller()
    try:
        controller.run(args.directory)
    except OSError as exc:
        print(f"xpplayer: {exc}", file=sys.stderr)
        return 1
    finally:
        controller.player.close()
        pygame.mixer.quit()
    return 0


if __name__ == "__main__":
    sys.exit(main())