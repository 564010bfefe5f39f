"""Musical keys and their sharp/flat spelling preference."""

from enum import Enum


class Key(Enum):
    """Major keys, including their enharmonic spellings."""

    C_MAJOR = 0
    G_MAJOR = 1
    D_MAJOR = 2
    A_MAJOR = 3
    E_MAJOR = 4
    B_MAJOR = 5
    F_SHARP_MAJOR = 6  # enharmonic with G♭ major
    C_SHARP_MAJOR = 7  # enharmonic with D♭ major
    F_MAJOR = 8
    B_FLAT_MAJOR = 9  # enharmonic with A♯ major
    E_FLAT_MAJOR = 10  # enharmonic with D♯ major
    A_FLAT_MAJOR = 11  # enharmonic with G♯ major
    D_FLAT_MAJOR = 12  # enharmonic with C♯ major
    G_FLAT_MAJOR = 13  # enharmonic with F♯ major
    C_FLAT_MAJOR = 14  # enharmonic with B major
    D_SHARP_MAJOR = 15  # enharmonic with E♭ major
    G_SHARP_MAJOR = 16  # enharmonic with A♭ major
    A_SHARP_MAJOR = 17  # enharmonic with B♭ major


_FLAT_KEYS = frozenset(
    {
        Key.C_MAJOR,
        Key.F_MAJOR,
        Key.B_FLAT_MAJOR,
        Key.E_FLAT_MAJOR,
        Key.A_FLAT_MAJOR,
        Key.D_FLAT_MAJOR,
        Key.G_FLAT_MAJOR,
        Key.C_FLAT_MAJOR,
    }
)


def is_sharp_key(key: Key) -> bool:
    """Return True if notes in ``key`` are spelled with sharps."""
    return key not in _FLAT_KEYS


def is_flat_key(key: Key) -> bool:
    """Return True if notes in ``key`` are spelled with flats."""
    return not is_sharp_key(key)