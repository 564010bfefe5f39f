"""An 88-key piano model that turns key presses and MIDI events into synth calls."""

from __future__ import annotations

from typing import Callable, Protocol

from .midi import MidiEvent, MidiMessageType

LOWEST_NOTE = 21  # A0
KEY_COUNT = 88
DEFAULT_VELOCITY = 100

# Computer-keyboard layout, two rows per octave, starting at C1.
_KEY_LAYOUT = "zsxdcvgbhnjmq2w3er5t6y7ui9o0p"
_KEY_OFFSETS = {name: offset for offset, name in enumerate(_KEY_LAYOUT)}
_LAYOUT_BASE = LOWEST_NOTE + 3  # C1

_OCTAVE_DOWN = "-"
_OCTAVE_UP = "="

_BLACK_KEY_POSITIONS = frozenset({1, 4, 6, 9, 11})


class Synth(Protocol):
    """The synthesizer operations the piano and metronome drive."""

    def note_on(self, chan: int, key: int, velocity: int) -> None: ...

    def note_off(self, chan: int, key: int) -> None: ...

    def cc(self, chan: int, ctrl: int, value: int) -> None: ...

    def program_change(self, chan: int, program: int) -> None: ...

    def pitch_bend(self, chan: int, value: int) -> None: ...


MidiEventCallback = Callable[[MidiEvent], None]


def note_from_key(key_name: str) -> int | None:
    """Return the MIDI note (at octave offset 0) a keyboard key plays, or None."""
    offset = _KEY_OFFSETS.get(key_name.lower())
    if offset is None:
        return None
    return _LAYOUT_BASE + offset


def is_black_key(index: int) -> bool:
    """Return True if piano key ``index`` (0 is A0) is a black key."""
    return index % 12 in _BLACK_KEY_POSITIONS


class Piano:
    """Tracks which of the 88 keys are down and forwards events to a synth."""

    def __init__(self, synth: Synth):
        self.synth = synth
        self.keys = [False] * KEY_COUNT
        self.channel = 0
        self.key_aspect_ratio = 4.0
        self.octave = 1
        self._callback: MidiEventCallback | None = None

    @staticmethod
    def _index(midi_note: int) -> int | None:
        index = midi_note - LOWEST_NOTE
        return index if 0 <= index < KEY_COUNT else None

    def key_on(self, midi_note: int, chan: int, velocity: int) -> None:
        """Sound ``midi_note`` unless it is out of range or already down."""
        index = self._index(midi_note)
        if index is not None and not self.keys[index]:
            self.synth.note_on(chan, midi_note, velocity)
            self.keys[index] = True

    def key_off(self, midi_note: int, chan: int) -> None:
        """Release ``midi_note`` if it is down."""
        index = self._index(midi_note)
        if index is not None and self.keys[index]:
            self.synth.note_off(chan, midi_note)
            self.keys[index] = False

    def key_toggle(self, midi_note: int) -> None:
        """Press ``midi_note`` if it is up, release it if it is down."""
        index = self._index(midi_note)
        if index is None:
            return
        message_type = MidiMessageType.NOTE_OFF if self.keys[index] else MidiMessageType.NOTE_ON
        self.midi_event(MidiEvent(message_type, self.channel, midi_note, DEFAULT_VELOCITY))

    def clear_all_keys(self) -> None:
        """Mark every key as released."""
        self.keys = [False] * KEY_COUNT

    def pressed_notes(self) -> list[int]:
        """Return the indices (0 is A0) of keys that are down, lowest first."""
        return [index for index, down in enumerate(self.keys) if down]

    def midi_event(self, event: MidiEvent) -> None:
        """Apply a MIDI event to the piano and synth, then notify the callback."""
        kind = event.message_type
        if kind is MidiMessageType.NOTE_ON and event.data1 > 0:
            self.key_on(event.data0, event.chan, event.data1)
        elif kind in (MidiMessageType.NOTE_ON, MidiMessageType.NOTE_OFF):
            self.key_off(event.data0, event.chan)
        elif kind is MidiMessageType.CC:
            self.synth.cc(event.chan, event.data0, event.data1)
        elif kind is MidiMessageType.PROGRAM_CHANGE:
            self.synth.program_change(event.chan, event.data0)
        elif kind is MidiMessageType.PITCH_WHEEL:
            self.synth.pitch_bend(event.chan, event.data0)
        if self._callback is not None:
            self._callback(event)

    def set_midi_event_callback(self, callback: MidiEventCallback | None) -> None:
        """Call ``callback`` with every event the piano handles."""
        self._callback = callback

    def key_pressed(self, key_name: str) -> MidiEvent | None:
        """Handle a computer-keyboard key press; return the note event sent, if any."""
        if key_name == _OCTAVE_DOWN and self.octave >= 0:
            self.octave -= 1
        if key_name == _OCTAVE_UP and self.octave <= 6:
            self.octave += 1
        note = note_from_key(key_name)
        if note is None:
            return None
        event = MidiEvent(
            MidiMessageType.NOTE_ON, self.channel, note + self.octave * 12, DEFAULT_VELOCITY
        )
        self.midi_event(event)
        return event

    def key_released(self, key_name: str) -> MidiEvent | None:
        """Handle a computer-keyboard key release; return the note event sent, if any."""
        note = note_from_key(key_name)
        if note is None:
            return None
        event = MidiEvent(MidiMessageType.NOTE_OFF, self.channel, note + self.octave * 12, 0)
        self.midi_event(event)
        return event