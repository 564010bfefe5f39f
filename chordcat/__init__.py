"""Chord naming, MIDI piano state, metronome, looper, grand-staff layout and preferences."""

__version__ = "0.5.0"