"""A metronome that ticks on the General MIDI percussion channel."""

from __future__ import annotations

import threading

from .piano import Synth

PERCUSSION_CHANNEL = 9
DOWNBEAT_NOTE = 76  # E5
BEAT_NOTE = 77  # F5
CLICK_VELOCITY = 100
CLICK_LENGTH_MS = 50


class Metronome:
    """Plays a click on every beat in a background thread and counts beats."""

    def __init__(self, synth: Synth, bpm: int, default_soundfont_id: int = -1):
        self.synth = synth
        self.bpm = bpm
        self.default_soundfont_id = default_soundfont_id
        self._beat = 0
        self._running = False
        self._stopping = threading.Event()
        self._thread: threading.Thread | None = None

    def start(self) -> None:
        """Restart the metronome from beat zero."""
        self.stop()
        self._stopping.clear()
        self._running = True
        self._beat = 0
        self._thread = threading.Thread(target=self._run, name="metronome", daemon=True)
        self._thread.start()

    def stop(self) -> None:
        """Stop ticking and wait for the background thread to finish."""
        self._running = False
        self._stopping.set()
        if self._thread is not None:
            self._thread.join()
            self._thread = None

    def toggle(self) -> None:
        """Start if stopped, stop if running."""
        if self._running:
            self.stop()
        else:
            self.start()

    def set_bpm(self, bpm: int) -> None:
        """Change the tempo; takes effect from the next beat."""
        self.bpm = bpm

    def beat(self) -> int:
        """Return the number of beats completed since the last start."""
        return self._beat

    def is_running(self) -> bool:
        """Return True while the metronome is ticking."""
        return self._running

    def __enter__(self) -> Metronome:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.stop()

    def _run(self) -> None:
        while self._running:
            interval_ms = 60000 // self.bpm
            note = DOWNBEAT_NOTE if self._beat % 4 == 0 else BEAT_NOTE
            self.synth.note_on(PERCUSSION_CHANNEL, note, CLICK_VELOCITY)
            self._stopping.wait(CLICK_LENGTH_MS / 1000)
            self.synth.note_off(PERCUSSION_CHANNEL, note)
            self._stopping.wait(max(0, interval_ms - CLICK_LENGTH_MS) / 1000)
            self._beat += 1