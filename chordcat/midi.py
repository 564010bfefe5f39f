"""MIDI channel-voice events."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Sequence


class MidiMessageType(IntEnum):
    """The high nibble of a MIDI status byte."""

    NOTE_OFF = 0x8
    NOTE_ON = 0x9
    AFTER_TOUCH = 0xA
    CC = 0xB
    PROGRAM_CHANGE = 0xC
    CHAN_PRESSURE = 0xD
    PITCH_WHEEL = 0xE
    SYSTEM = 0xF


@dataclass(frozen=True, order=True)
class MidiEvent:
    """A three-byte MIDI message, with a timestamp in milliseconds."""

    message_type: MidiMessageType
    chan: int
    data0: int
    data1: int
    timestamp: int = 0

    @classmethod
    def from_bytes(cls, message: Sequence[int]) -> MidiEvent:
        """Decode a raw three-byte MIDI message."""
        if len(message) < 3:
            raise ValueError(f"MIDI message needs 3 bytes, got {len(message)}")
        status = message[0]
        try:
            message_type = MidiMessageType(status >> 4)
        except ValueError:
            raise ValueError(f"not a MIDI status byte: {status:#04x}") from None
        return cls(message_type, status & 0x0F, message[1], message[2])