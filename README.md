# xpplayer

A small desktop MP3 player. It scans a folder for `.mp3` files, builds a
playlist from them and opens a pygame window with a bar visualiser, a
clickable progress bar, previous / play / stop / next buttons, a volume
slider and the list of songs with the current one highlighted.

## Installation

```
pip install .
```

Playback and the window use pygame.

## Running

```
xpplayer
```

By default the player loads songs from the `assets` folder in the current
directory. Pass another folder as an argument to use that one instead:

```
xpplayer ~/Music/favourites
```

If the folder does not exist, `xpplayer` prints an error and exits with
status 1. If the audio device cannot be opened, a warning is logged.

## File names

Songs are read from the file name in the form `Artist - Title.mp3`. A file
name with no ` - ` gets the artist `Artista desconocido` and uses the whole
name, without the extension, as the title. Only files directly inside the
folder whose extension is exactly `.mp3` (lower case) are picked up, and
they are listed in order of file name.

## Controls

- `<<`: previous song (wraps to the last one)
- `>`: load the current song and play it from the start
- `[]`: stop
- `>>`: next song (wraps to the first one)
- Click the progress bar to seek, and the volume bar to set the volume.

Close the window to quit.

## Using it as a library

```python
from xpplayer.file_loader import scan_directory
from xpplayer.playlist import Playlist

playlist = Playlist(scan_directory("assets"))
for song in playlist:
    print(song)          # "Title - Artist"

playlist.next()
print(playlist.current())
```

- `xpplayer.song.Song`: a frozen dataclass with `title`, `artist`,
  `duration` and `path`.
- `xpplayer.file_loader`: `parse_song_name(filename)` returns
  `(artist, title)`; `scan_directory(path)` returns a list of `Song`.
- `xpplayer.playlist.Playlist`: `add`, `remove`, `next`, `previous`,
  `current` and `songs`, with wrap-around navigation.
- `xpplayer.decoder`: the abstract `AudioDecoder` and `MP3Decoder`, which
  plays through `pygame.mixer.music`.
- `xpplayer.playback.PlaybackThread`: calls a decoder's `play()` at an
  interval on a background thread; usable as a context manager.
- `xpplayer.player.MusicPlayer`: ties a `Playlist` to a decoder, with
  `play`, `stop`, `next`, `previous`, `seek`, `set_volume`, `progress`,
  `duration` and `close`.
- `xpplayer.ui`: `MusicPlayerUI` and the layout helpers `format_time`,
  `fraction_at`, `visualizer_bars` and `button_rects`.
- `xpplayer.app.Controller`: builds the playlist from a folder and runs
  the window; `main(argv=None)` is the `xpplayer` command.

## Limitations

- Song durations are not read from the files; `Song.duration` is always 0
  for scanned songs. The progress bar uses the length that pygame reports
  for the loaded file.
- There is no pause button and no keyboard control in the window.
- Only MP3 files are scanned for.

## Tests

```
pip install .[test]
pytest
```