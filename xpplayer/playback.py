"""A background thread that keeps a decoder playing."""

from __future__ import annotations

import threading
from types import TracebackType

from .decoder import AudioDecoder


class PlaybackThread:
    """Calls ``decoder.play()`` every ``interval`` seconds until stopped."""

    def __init__(self, decoder: AudioDecoder, interval: float = 0.1) -> None:
        if interval < 0:
            raise ValueError("interval must not be negative")
        self._decoder = decoder
        self._interval = interval
        self._stop_event = threading.Event()
        self._thread: threading.Thread | None = None

    def start(self) -> None:
        """Start the thread; raises RuntimeError if it is already running."""
        if self.is_active():
            raise RuntimeError("playback thread is already running")
        self._stop_event = threading.Event()
        self._thread = threading.Thread(
            target=self._run, args=(self._stop_event,), name="playback", daemon=True
        )
        self._thread.start()

    def _run(self, stop_event: threading.Event) -> None:
        while not stop_event.is_set():
            self._decoder.play()
            stop_event.wait(self._interval)

    def stop(self) -> None:
        """Stop the thread and wait for it to finish."""
        self._stop_event.set()
        thread, self._thread = self._thread, None
        if thread is not None and thread is not threading.current_thread():
            thread.join()

    def is_active(self) -> bool:
        return (
            self._thread is not None
            and self._thread.is_alive()
            and not self._stop_event.is_set()
        )

    def __enter__(self) -> PlaybackThread:
        self.start()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.stop()