"""The General MIDI instrument table, grouped by category."""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache

PROGRAM_COUNT = 128

_TABLE = (
    (
        "Piano",
        (
            "Acoustic Grand Piano",
            "Bright Acoustic Piano",
            "Electric Grand Piano",
            "Honky-tonk Piano",
            "Electric Piano 1",
            "Electric Piano 2",
            "Harpsichord",
            "Clavinet",
        ),
    ),
    (
        "Chromatic Percussion",
        (
            "Celesta",
            "Glockenspiel",
            "Music Box",
            "Vibraphone",
            "Marimba",
            "Xylophone",
            "Tubular Bells",
            "Dulcimer",
        ),
    ),
    (
        "Organ",
        (
            "Drawbar Organ",
            "Percussive Organ",
            "Rock Organ",
            "Church Organ",
            "Reed Organ",
            "Accordion",
            "Harmonica",
            "Bandoneon",
        ),
    ),
    (
        "Guitar",
        (
            "Acoustic Guitar (nylon)",
            "Acoustic Guitar (steel)",
            "Electric Guitar (jazz)",
            "Electric Guitar (clean)",
            "Electric Guitar (muted)",
            "Electric Guitar (overdrive)",
            "Electric Guitar (distortion)",
            "Electric Guitar (harmonics)",
        ),
    ),
    (
        "Bass",
        (
            "Acoustic Bass",
            "Electric Bass (finger)",
            "Electric Bass (picked)",
            "Electric Bass (fretless)",
            "Slap Bass 1",
            "Slap Bass 2",
            "Synth Bass 1",
            "Synth Bass 2",
        ),
    ),
    (
        "Strings",
        (
            "Violin",
            "Viola",
            "Cello",
            "Contrabass",
            "Tremolo Strings",
            "Pizzicato Strings",
            "Orchestral Harp",
            "Timpani",
        ),
    ),
    (
        "Ensemble",
        (
            "String Ensemble 1",
            "String Ensemble 2",
            "Synth Strings 1",
            "Synth Strings 2",
            "Choir Aahs",
            "Voice Oohs",
            "Synth Voice",
            "Orchestra Hit",
        ),
    ),
    (
        "Brass",
        (
            "Trumpet",
            "Trombone",
            "Tuba",
            "Muted Trumpet",
            "French Horn",
            "Brass Section",
            "Synth Brass 1",
            "Synth Brass 2",
        ),
    ),
    (
        "Reed",
        (
            "Soprano Sax",
            "Alto Sax",
            "Tenor Sax",
            "Baritone Sax",
            "Oboe",
            "English Horn",
            "Bassoon",
            "Clarinet",
        ),
    ),
    (
        "Pipe",
        (
            "Piccolo",
            "Flute",
            "Recorder",
            "Pan Flute",
            "Blown Bottle",
            "Shakuhachi",
            "Whistle",
            "Ocarina",
        ),
    ),
    (
        "Synth Lead",
        (
            "Lead 1 (square)",
            "Lead 2 (sawtooth)",
            "Lead 3 (calliope)",
            "Lead 4 (chiff)",
            "Lead 5 (charang)",
            "Lead 6 (voice)",
            "Lead 7 (fifths)",
            "Lead 8 (bass and lead)",
        ),
    ),
    (
        "Synth Pad",
        (
            "Pad 1 (new age)",
            "Pad 2 (warm)",
            "Pad 3 (polysynth)",
            "Pad 4 (choir)",
            "Pad 5 (bowed glass)",
            "Pad 6 (metallic)",
            "Pad 7 (halo)",
            "Pad 8 (sweep)",
        ),
    ),
    (
        "Synth Effects",
        (
            "FX 1 (rain)",
            "FX 2 (soundtrack)",
            "FX 3 (crystal)",
            "FX 4 (atmosphere)",
            "FX 5 (brightness)",
            "FX 6 (goblins)",
            "FX 7 (echoes)",
            "FX 8 (sci-fi)",
        ),
    ),
    (
        "Ethnic",
        (
            "Sitar",
            "Banjo",
            "Shamisen",
            "Koto",
            "Kalimba",
            "Bag pipe",
            "Fiddle",
            "Shanai",
        ),
    ),
    (
        "Percussive",
        (
            "Tinkle Bell",
            "Cowbell",
            "Steel Drums",
            "Woodblock",
            "Taiko Drum",
            "Melodic Tom",
            "Synth Drum",
            "Reverse Cymbal",
        ),
    ),
    (
        "Sound Effects",
        (
            "Guitar Fret Noise",
            "Breath Noise",
            "Seashore",
            "Bird Tweet",
            "Telephone Ring",
            "Helicopter",
            "Applause",
            "Gunshot",
        ),
    ),
)


@dataclass(frozen=True)
class Instrument:
    """A General MIDI program number and its instrument name."""

    code: int
    name: str


@dataclass(frozen=True)
class InstrumentCategory:
    """A named family of General MIDI instruments."""

    name: str
    instruments: tuple[Instrument, ...]


@lru_cache(maxsize=None)
def instrument_categories() -> tuple[InstrumentCategory, ...]:
    """Return the instrument families in program order."""
    categories = []
    code = 0
    for category_name, names in _TABLE:
        instruments = []
        for name in names:
            instruments.append(Instrument(code, name))
            code += 1
        categories.append(InstrumentCategory(category_name, tuple(instruments)))
    return tuple(categories)


def _check_code(code: int) -> None:
    if not 0 <= code < PROGRAM_COUNT:
        raise ValueError(f"General MIDI program must be 0-{PROGRAM_COUNT - 1}, got {code}")


def category_of(code: int) -> InstrumentCategory:
    """Return the family that General MIDI program ``code`` belongs to."""
    _check_code(code)
    for category in instrument_categories():
        if any(instrument.code == code for instrument in category.instruments):
            return category
    raise ValueError(f"no instrument with program {code}")


def instrument_name(code: int) -> str:
    """Return the name of General MIDI program ``code``."""
    for instrument in category_of(code).instruments:
        if instrument.code == code:
            return instrument.name
    raise ValueError(f"no instrument with program {code}")