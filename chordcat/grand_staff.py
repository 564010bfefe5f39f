"""Layout of a treble and bass grand staff showing the pressed notes."""

from __future__ import annotations

from .keys import Key, is_sharp_key

SHARP = "♯"
FLAT = "♭"
NATURAL = "♮"

_KEY_SHARPS_FLATS = {
    Key.C_MAJOR: 0,
    Key.G_MAJOR: 1,
    Key.D_MAJOR: 2,
    Key.A_MAJOR: 3,
    Key.E_MAJOR: 4,
    Key.B_MAJOR: 5,
    Key.F_SHARP_MAJOR: 6,
    Key.C_SHARP_MAJOR: 7,
    Key.F_MAJOR: -1,
    Key.B_FLAT_MAJOR: -2,
    Key.E_FLAT_MAJOR: -3,
    Key.A_FLAT_MAJOR: -4,
    Key.D_FLAT_MAJOR: -5,
    Key.G_FLAT_MAJOR: -6,
    Key.C_FLAT_MAJOR: -7,
    Key.D_SHARP_MAJOR: 6,
    Key.G_SHARP_MAJOR: 8,
    Key.A_SHARP_MAJOR: 10,
}

# Letter (0 = C ... 6 = B) for each pitch class above C.
_SHARP_LETTERS_BY_PITCH = (0, 0, 1, 1, 2, 3, 3, 4, 4, 5, 5, 6)
_FLAT_LETTERS_BY_PITCH = (0, 1, 1, 2, 2, 3, 4, 4, 5, 5, 6, 6)

# Letters carrying a sharp or flat, in key-signature order.
_SHARP_ORDER = (3, 0, 4, 1, 5, 2, 6)
_FLAT_ORDER = (6, 2, 5, 1, 4, 0, 3)
_LETTER_SEMITONES = (0, 2, 4, 5, 7, 9, 11)

# Vertical positions (in half staff spaces) of key-signature glyphs.
_SHARP_Y = (1.0, 4.0, 0.0, 3.0, 6.0, 2.0, 5.0)
_FLAT_Y = (5.0, 2.0, 6.0, 3.0, 7.0, 4.0, 8.0)

MIDDLE_C = 60
_TREBLE_REFERENCE = 64  # E4, bottom line of the treble staff
_BASS_REFERENCE = 43  # G2, bottom line of the bass staff
_LOWEST_NOTE = 21


def key_signature_count(key: Key) -> int:
    """Number of sharps (positive) or flats (negative) in the signature of ``key``."""
    return _KEY_SHARPS_FLATS[key]


class GrandStaff:
    """Positions of staff lines, key signature and note heads for a given view size."""

    def __init__(self, width: float, height: float):
        self.width = width
        self.height = height
        self.key = Key.C_MAJOR
        self.displayed_notes: list[int] = []
        self._layout()

    def _layout(self) -> None:
        self.staff_left_x = self.width / 10
        self.staff_top_y = self.height / 4
        self.note_radius = self.width / 200
        self.staff_spacing = 2 * self.note_radius
        self.gap_between_staves = 2 * self.staff_spacing

    @property
    def bass_top_y(self) -> float:
        return self.staff_top_y + 5 * self.staff_spacing + self.gap_between_staves

    def set_key(self, key: Key) -> None:
        self.key = key

    def update_notes(self, pressed_notes) -> None:
        """Recompute the layout and show the given piano keys (0 is A0)."""
        self._layout()
        self.displayed_notes = [note + _LOWEST_NOTE for note in pressed_notes]

    def midi_to_letter_octave(self, midi_note: int) -> tuple[int, int]:
        """Return (letter, octave) for ``midi_note``; letter 0 is C."""
        pitch = (midi_note - MIDDLE_C) % 12
        letters = _SHARP_LETTERS_BY_PITCH if is_sharp_key(self.key) else _FLAT_LETTERS_BY_PITCH
        return letters[pitch], midi_note // 12 - 1

    def steps_from_ref(self, midi_note: int, ref: int) -> int:
        """Diatonic steps from ``ref`` up to ``midi_note``."""
        letter, octave = self.midi_to_letter_octave(midi_note)
        ref_letter, ref_octave = self.midi_to_letter_octave(ref)
        return (letter + 7 * octave) - (ref_letter + 7 * ref_octave)

    def note_y_position(self, midi_note: int) -> float:
        """Vertical centre of the note head for ``midi_note``."""
        bass = midi_note < MIDDLE_C
        steps = self.steps_from_ref(midi_note, _BASS_REFERENCE if bass else _TREBLE_REFERENCE)
        offset = steps * (self.staff_spacing / 2)
        if bass:
            return self.bass_top_y + 4 * self.staff_spacing - offset
        return self.staff_top_y + 4 * self.staff_spacing - offset

    def _staff_pitch(self, midi_note: int) -> tuple[int, int]:
        """Return (accidental from the key signature, pitch the staff position implies)."""
        signature = key_signature_count(self.key)
        letter = _SHARP_LETTERS_BY_PITCH[midi_note % 12]
        accidental = 0
        if signature > 0 and letter in _SHARP_ORDER[: min(signature, 7)]:
            accidental = 1
        elif signature < 0 and letter in _FLAT_ORDER[: min(-signature, 7)]:
            accidental = -1
        return accidental, (_LETTER_SEMITONES[letter] + accidental) % 12

    def is_natural(self, midi_note: int) -> bool:
        """True if ``midi_note`` cancels (or matches) the key signature's accidental."""
        accidental, staff_pitch = self._staff_pitch(midi_note)
        diff = ((midi_note - MIDDLE_C) % 12 - staff_pitch) % 12
        return (
            (accidental == 1 and diff == 11)
            or (accidental == -1 and diff == 1)
            or (accidental == 0 and diff == 0)
        )

    def accidental_glyph(self, midi_note: int) -> str:
        """The accidental to draw before ``midi_note``, or an empty string."""
        _, staff_pitch = self._staff_pitch(midi_note)
        if staff_pitch == (midi_note - MIDDLE_C) % 12:
            return ""
        if self.is_natural(midi_note):
            return NATURAL
        return SHARP if is_sharp_key(self.key) else FLAT

    def key_signature_glyphs(self) -> list[tuple[str, float, float]]:
        """Return (glyph, x, y) for each key-signature glyph, treble then bass per step."""
        count = key_signature_count(self.key)
        if count == 0:
            return []
        font_size = int(self.staff_spacing * 1.5)
        treble_base = self.staff_top_y - font_size
        bass_base = self.bass_top_y - font_size
        half_space = 0.5 * self.staff_spacing
        glyphs = []
        if count > 0:
            for i, y in enumerate(_SHARP_Y[: min(count, 7)]):
                x = self.staff_left_x + i * font_size * 0.25
                glyphs.append((SHARP, x, treble_base + y * half_space))
                glyphs.append((SHARP, x, bass_base + (y + 2) * half_space))
        else:
            for i, y in enumerate(_FLAT_Y[: min(-count, 7)]):
                x = self.staff_left_x + i * font_size * 0.25
                glyphs.append((FLAT, x, treble_base + y * half_space))
                glyphs.append((FLAT, x, bass_base + y * half_space))
        return glyphs