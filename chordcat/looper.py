"""A bar-synchronised MIDI looper with count-in, count-out and overdubbing."""

from __future__ import annotations

import time
from dataclasses import replace
from enum import Enum, auto
from typing import Callable, Protocol

from .midi import MidiEvent
from .piano import Piano

BEATS_PER_BAR = 4
COUNT_IN_BEATS = 4


class BeatCounter(Protocol):
    """The metronome operations the looper relies on."""

    def start(self) -> None: ...

    def beat(self) -> int: ...


class LooperState(Enum):
    """Phases of the looper."""

    IDLE = auto()
    COUNTING_IN = auto()
    RECORDING = auto()
    COUNTING_OUT = auto()
    PLAYING_BACK = auto()
    COUNTING_IN_TO_OVERDUB = auto()
    OVERDUBBING = auto()


_PLAYING_STATES = frozenset(
    {LooperState.PLAYING_BACK, LooperState.COUNTING_IN_TO_OVERDUB, LooperState.OVERDUBBING}
)


class Looper:
    """Records the events a piano handles and plays them back in a loop.

    ``clock`` returns the current time in seconds; event timestamps and the
    loop length are kept in whole milliseconds.
    """

    def __init__(
        self,
        piano: Piano,
        metronome: BeatCounter,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.piano = piano
        self.metronome = metronome
        self.clock = clock
        self.state = LooperState.IDLE
        self.bars = 4
        self.events: list[MidiEvent] = []
        self.overdub_events: list[MidiEvent] = []
        self.loop_length = 0
        self._start_time = clock()
        self._played: set[MidiEvent] = set()
        piano.set_midi_event_callback(self.record_event)

    def _elapsed_ms(self) -> int:
        return int((self.clock() - self._start_time) * 1000)

    def start_recording(self) -> None:
        """Discard the loop, start the metronome and count in."""
        self.events.clear()
        self.metronome.start()
        self.state = LooperState.COUNTING_IN

    def stop_recording(self) -> None:
        """Stop recording at the end of the current bar."""
        if self.state is LooperState.RECORDING:
            self.state = LooperState.COUNTING_OUT

    def record_event(self, event: MidiEvent) -> None:
        """Store ``event`` with its offset into the loop, if recording or overdubbing."""
        if self.state is LooperState.RECORDING:
            self.events.append(replace(event, timestamp=self._elapsed_ms()))
        elif self.state is LooperState.OVERDUBBING:
            self.overdub_events.append(replace(event, timestamp=self._elapsed_ms()))

    def start_playback(self) -> None:
        """Play the loop from its beginning."""
        self.state = LooperState.PLAYING_BACK
        self._start_time = self.clock()

    def stop_playback(self) -> None:
        """Stop playing; the loop is kept."""
        self.state = LooperState.IDLE

    def start_overdub(self) -> None:
        """Begin overdubbing when the loop next starts over."""
        self.state = LooperState.COUNTING_IN_TO_OVERDUB

    def stop_overdub(self) -> None:
        """Return to plain playback."""
        self.state = LooperState.PLAYING_BACK

    def cancel_overdub(self) -> None:
        """Drop what was overdubbed and return to plain playback."""
        self.overdub_events.clear()
        self.state = LooperState.PLAYING_BACK

    def update(self) -> None:
        """Advance the looper; call this regularly."""
        state = self.state
        if state is LooperState.COUNTING_IN:
            if self.metronome.beat() >= COUNT_IN_BEATS:
                self._start_time = self.clock()
                self.state = LooperState.RECORDING
        elif state is LooperState.RECORDING:
            if self.metronome.beat() - COUNT_IN_BEATS == self.bars * BEATS_PER_BAR:
                self.loop_length = self._elapsed_ms()
                self.start_playback()
        elif state is LooperState.COUNTING_OUT:
            if self.metronome.beat() % BEATS_PER_BAR == 0:
                self.state = LooperState.PLAYING_BACK
                self.loop_length = self._elapsed_ms()
        elif state in _PLAYING_STATES:
            self._play()

    def _play(self) -> None:
        current = self._elapsed_ms()
        if current >= self.loop_length:
            self._start_time = self.clock()
            self._played.clear()
            if self.state is LooperState.COUNTING_IN_TO_OVERDUB:
                self.state = LooperState.OVERDUBBING
            elif self.state is LooperState.OVERDUBBING:
                self.state = LooperState.PLAYING_BACK
                self.events.extend(self.overdub_events)
                self.overdub_events.clear()
            current = self._elapsed_ms()
        for event in list(self.events):
            if current >= event.timestamp and event not in self._played:
                self._played.add(event)
                self.piano.midi_event(event)