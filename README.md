# chordcat

Chord naming and MIDI keyboard logic for an 88-key piano.

chordcat takes a set of pressed piano keys and names the chord they form.
It also provides the other parts of a small chord-practice tool:

- key signatures and note spelling
- MIDI event decoding
- a mapping from PC keyboard keys to piano notes
- a metronome
- a bar-based loop recorder with overdubbing
- grand-staff note placement with accidentals
- user preferences stored as JSON
- soundfont discovery
- the General MIDI instrument table

## Installation

```
pip install chordcat
```

There are no runtime dependencies. To run the test suite, install the
`test` extra and run `pytest`:

```
pip install "chordcat[test]"
pytest
```

## Naming chords

Piano keys are numbered from 0 (A0) to 87 (C8). `name_that_chord` takes
those key numbers and returns one `Chord` for each pitch class present,
using that pitch class as the root. For each root it picks the chord
template that needs the fewest changes. The results are ordered from the
best fit to the worst:

```python
from chordcat.chords import name_that_chord, key_numbers_to_note_names
from chordcat.keys import Key

pressed = [3, 7, 10]  # C, E, G
print(key_numbers_to_note_names(pressed, Key.C_MAJOR))  # ['C', 'E', 'G']
for chord in name_that_chord(pressed):
    print(chord.to_string(Key.C_MAJOR))
```

Note names follow the key. Sharp keys spell notes with ♯ and flat keys
with ♭ (`is_sharp_key`, `is_flat_key`). When a chord does not fit a
template exactly, `Chord.to_string` shows the missing tones as "no…" and
the additional tones as extensions, for example `Cmaj(no5)`.

The chord templates are in `chords.CHORD_DB` and a table of scales is in
`chords.SCALE_DB`. `get_note_distance` gives the upward distance in
semitones between two pitch classes.

## MIDI events and the piano

`chordcat.midi.MidiEvent.from_bytes` decodes a three-byte MIDI message. It
raises `ValueError` if the message is too short or does not start with a
status byte.

`chordcat.piano.Piano` keeps track of which of the 88 keys are down. It
passes note, control change, program change and pitch-bend messages to an
object that follows the `Synth` protocol (`note_on`, `note_off`, `cc`,
`program_change`, `pitch_bend`). A callback set with
`set_midi_event_callback` receives every event the piano handles.

`note_from_key` maps computer-keyboard keys to notes. `Piano.key_pressed`
and `Piano.key_released` turn key presses and releases into note events.
The `-` and `=` keys shift the octave.

## Metronome and looper

`chordcat.metronome.Metronome` counts beats on a background thread. On
channel 9 it plays E5 on the downbeat and F5 on the other beats. It can be
used as a context manager, which stops it on exit.

`chordcat.looper.Looper` records the events its piano handles:

1. It counts in four beats.
2. It records for `bars` bars, or until the end of the current bar after
   `stop_recording`.
3. It plays the recording back in a loop.
4. With `start_overdub`, it begins overdubbing at the start of the next
   loop.

Call `update` regularly to move the looper forward. A custom `clock` can
be passed in.

## Grand staff

`chordcat.grand_staff.GrandStaff` lays out a treble/bass grand staff for a
view of a given width and height. For the current key it gives:

- where each note sits vertically (`note_y_position`)
- the accidental glyph to draw next to a note (`accidental_glyph`: ♯, ♭,
  ♮ or none)
- the position of each key-signature glyph (`key_signature_glyphs`)

## Preferences and soundfonts

`chordcat.preferences.Preferences` reads and writes `settings.json`. By
default the file is kept in the user configuration directory:

- `$XDG_CONFIG_HOME/chordcat`
- otherwise `~/.config/chordcat`
- `%APPDATA%/chordcat` on Windows

You can also pass an explicit path. `Preferences.setup` loads the file. If
the file is missing or is not valid JSON, it writes the file again with
the current settings. `SettingsPathError` is raised when no location can
be determined.

`chordcat.soundfonts.SoundFontManager` lists the `.sf2` files in a system
directory and in the user's data directory (`user_soundfont_dir`), system
files first. It creates the user directory if that directory is missing.
The package ships no soundfont or font files, so pass `system_dir`
pointing at an existing directory of soundfonts.

## General MIDI instruments

`chordcat.instruments` holds the 128 General MIDI programs in their 16
families (`instrument_categories`, `instrument_name`, `category_of`).
Program numbers outside 0–127 raise `ValueError`.

## What the package does not do

chordcat is a library of logic only:

- It has no window, drawing or user interface, and no command to run.
- It produces no sound. You supply your own `Synth` object.
- It does not open MIDI input devices. Raw messages must be fed to it,
  for example through `MidiEvent.from_bytes` and `Piano.midi_event`.