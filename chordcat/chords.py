"""Chord and scale tables, note naming and chord recognition."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable

from .keys import Key, is_sharp_key

DEGREES = ("root", "♭2", "2", "♭3", "3", "4", "♭5", "5", "♯5", "6", "♭7", "7")

COMPOUND_TONES = ("octave", "♭9", "9", "♯9", "10", "11", "♯11", "5", "♭13", "13", "♭7", "7")

SHARP_NAMES = ("A", "A♯", "B", "C", "C♯", "D", "D♯", "E", "F", "F♯", "G", "G♯")

FLAT_NAMES = ("A", "B♭", "B", "C", "D♭", "D", "E♭", "E", "F", "G♭", "G", "A♭")


@dataclass(frozen=True)
class ChordTemplate:
    """A named chord shape: intervals above the root and how common it is."""

    name: str
    intervals: frozenset[int]
    commonality: int


def _template(name: str, intervals: Iterable[int], commonality: int) -> ChordTemplate:
    return ChordTemplate(name, frozenset(intervals), commonality)


CHORD_DB: tuple[ChordTemplate, ...] = (
    # Common triads/sevenths
    _template("maj", (4, 7), 10),
    _template("min", (3, 7), 10),
    _template("sus2", (2, 7), 8),
    _template("sus4", (5, 7), 8),
    _template("dim", (3, 6), 5),
    _template("aug", (4, 8), 5),
    _template("7", (4, 7, 10), 9),
    _template("maj7", (4, 7, 11), 9),
    _template("m7", (3, 7, 10), 9),
    _template("9", (4, 7, 10, 2), 7),
    _template("m9", (3, 7, 10, 2), 7),
    _template("11", (4, 7, 10, 2, 5), 6),
    _template("m11", (3, 7, 10, 2, 5), 6),
    _template("13", (4, 7, 10, 2, 5, 9), 5),
    _template("m13", (3, 7, 10, 2, 5, 9), 5),
    # Altered chords and add chords
    _template("add9", (4, 7, 2), 6),
    _template("maj7add13", (4, 7, 11, 9), 5),
    _template("7♯5", (4, 7, 10, 8), 5),
    _template("7b5", (4, 7, 10, 6), 5),
    _template("7♯9", (4, 7, 10, 2, 8), 4),
    _template("sus2♯9", (2, 7, 2), 4),
    _template("sus4♯9", (5, 7, 2), 4),
    _template("m7b5", (3, 7, 10, 6), 4),
    _template("dim7", (3, 6, 9), 4),
    _template("mmaj7", (3, 7, 11), 5),
    _template("maj7♯11", (4, 7, 11, 6), 4),
    _template("mmaj7♯11", (3, 7, 11, 6), 4),
    _template("augMaj7", (4, 8, 11), 4),
    _template("maj6", (4, 7, 9), 6),
    _template("m6", (3, 7, 9), 6),
    _template("6/9", (4, 7, 9, 2), 6),
    _template("dimMaj7", (3, 6, 11), 4),
)

SCALE_DB: tuple[tuple[str, frozenset[int]], ...] = tuple(
    (name, frozenset(intervals))
    for name, intervals in (
        ("Major Scale", (2, 4, 5, 7, 9, 11)),
        ("Dorian Scale", (2, 3, 5, 7, 9, 10)),
        ("Phrygian Scale", (1, 3, 5, 7, 8, 10)),
        ("Lydian Scale", (2, 4, 6, 7, 9, 11)),
        ("Mixolydian Scale", (2, 4, 5, 7, 9, 10)),
        ("Aeolian Scale", (2, 3, 5, 7, 8, 10)),
        ("Locrian Scale", (1, 3, 5, 6, 8, 10)),
        ("Harmonic Minor Scale", (2, 3, 5, 7, 8, 11)),
        ("Locrian Natural 6 Scale", (1, 3, 5, 6, 9, 10)),
        ("Augmented Major Scale", (2, 4, 5, 8, 9, 11)),
        ("Dorian ♯11 Scale", (2, 3, 6, 7, 9, 10)),
        ("Phrygian Dominant Scale", (1, 4, 5, 7, 8, 10)),
        ("Lydian ♯2 Scale", (3, 4, 6, 7, 9, 11)),
        ("Super Locrian ♭♭7 Scale", (1, 3, 4, 6, 8, 9)),
        ("Jazz Minor Scale", (2, 3, 5, 7, 9, 11)),
        ("Dorian ♭2 Scale", (1, 3, 5, 7, 9, 10)),
        ("Lydian Augmented Scale", (2, 4, 6, 8, 9, 11)),
        ("Lydian Dominant Scale", (2, 4, 6, 7, 9, 10)),
        ("Aeolian Dominant Scale", (2, 4, 5, 7, 8, 10)),
        ("Half-diminished Scale", (2, 3, 5, 6, 8, 10)),
        ("Altered Scale", (1, 3, 4, 6, 8, 10)),
    )
)


def key_number_to_note_name(index: int, key: Key) -> str:
    """Name the piano key ``index`` (0 is A) using the spelling of ``key``."""
    names = SHARP_NAMES if is_sharp_key(key) else FLAT_NAMES
    return names[index % 12]


def key_numbers_to_note_names(indices: Iterable[int], key: Key) -> list[str]:
    """Name every piano key in ``indices``."""
    return [key_number_to_note_name(index, key) for index in indices]


@dataclass
class Chord:
    """A recognised chord: a root pitch class, a base name and its deviations."""

    root: int
    base_name: str
    extra_tones: list[int] = field(default_factory=list)
    omitted_tones: list[int] = field(default_factory=list)
    num_accidentals: int = 0

    def to_string(self, key: Key) -> str:
        """Render the chord name, e.g. ``Cmaj7(no5,9)``."""
        name = key_number_to_note_name(self.root, key) + self.base_name
        parts = [f"no{DEGREES[tone % 12]}" for tone in self.omitted_tones]
        parts += [COMPOUND_TONES[tone % 12] for tone in self.extra_tones]
        if parts:
            name += "(" + ",".join(parts) + ")"
        return name


def get_note_distance(root: int, other: int) -> int:
    """Upward distance in semitones from ``root`` to ``other``; equal notes give 12."""
    if root >= other:
        return 12 - (root - other) % 12
    return other - root


def _best_chord(root: int, intervals: frozenset[int]) -> Chord:
    candidates = []
    for template in CHORD_DB:
        omitted = sorted(template.intervals - intervals)
        extra = sorted(intervals - template.intervals)
        candidates.append(
            Chord(
                root=root,
                base_name=template.name,
                extra_tones=extra,
                omitted_tones=omitted,
                num_accidentals=len(extra) + len(omitted),
            )
        )
    return min(candidates, key=lambda chord: chord.num_accidentals)


def name_that_chord(indices: Iterable[int]) -> list[Chord]:
    """Name the chord formed by the given piano keys, once per possible root.

    The result is ordered from the best fit (fewest accidentals) to the worst.
    """
    notes = sorted({index % 12 for index in indices})
    chords = []
    for root in notes:
        intervals = frozenset(get_note_distance(root, other) for other in notes if other != root)
        chords.append(_best_chord(root, intervals))
    return sorted(chords, key=lambda chord: chord.num_accidentals)