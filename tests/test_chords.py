import pytest

from chordcat.chords import (
    CHORD_DB,
    SCALE_DB,
    Chord,
    get_note_distance,
    key_number_to_note_name,
    key_numbers_to_note_names,
    name_that_chord,
)
from chordcat.keys import Key

# Piano key indices start at A0, so C is 3, E is 7 and G is 10.
C_MAJOR_TRIAD = [3, 7, 10]


def test_note_names_follow_key_spelling():
    assert key_number_to_note_name(0, Key.C_MAJOR) == "A"
    assert key_number_to_note_name(1, Key.C_MAJOR) == "B♭"
    assert key_number_to_note_name(1, Key.G_MAJOR) == "A♯"


def test_note_names_wrap_every_octave():
    for index in range(12):
        assert key_number_to_note_name(index, Key.D_MAJOR) == key_number_to_note_name(
            index + 12 * 5, Key.D_MAJOR
        )


def test_key_numbers_to_note_names_preserves_order():
    names = key_numbers_to_note_names([10, 3], Key.C_MAJOR)
    assert names == [key_number_to_note_name(10, Key.C_MAJOR), key_number_to_note_name(3, Key.C_MAJOR)]


def test_note_distance_upward():
    assert get_note_distance(0, 4) == 4


def test_note_distance_wraps_downward():
    assert get_note_distance(4, 0) == 8


def test_note_distance_same_note_is_octave():
    assert get_note_distance(5, 5) == 12


def test_distance_and_inverse_sum_to_octave():
    for root in range(12):
        for other in range(12):
            if root != other:
                assert get_note_distance(root, other) + get_note_distance(other, root) == 12


def test_empty_input_names_nothing():
    assert name_that_chord([]) == []


def test_major_triad_is_recognised_first():
    chords = name_that_chord(C_MAJOR_TRIAD)
    best = chords[0]
    assert best.root == 3
    assert best.base_name == "maj"
    assert best.num_accidentals == 0
    assert best.to_string(Key.C_MAJOR) == "Cmaj"


def test_one_chord_per_distinct_pitch_class():
    chords = name_that_chord(C_MAJOR_TRIAD + [15, 22])
    assert sorted(chord.root for chord in chords) == [3, 7, 10]


def test_octave_duplicates_do_not_change_result():
    assert name_that_chord(C_MAJOR_TRIAD) == name_that_chord(C_MAJOR_TRIAD + [3 + 24])


def test_chords_sorted_by_accidentals_and_counts_consistent():
    chords = name_that_chord([3, 7, 10, 14, 20])
    counts = [chord.num_accidentals for chord in chords]
    assert counts == sorted(counts)
    for chord in chords:
        assert chord.num_accidentals == len(chord.extra_tones) + len(chord.omitted_tones)


def test_single_note_omits_all_template_tones():
    (chord,) = name_that_chord([0])
    assert chord.to_string(Key.C_MAJOR) == "Amaj(no3,no5)"


def test_to_string_lists_omitted_then_extra():
    chord = Chord(root=3, base_name="maj7", extra_tones=[2], omitted_tones=[7], num_accidentals=2)
    assert chord.to_string(Key.C_MAJOR) == "Cmaj7(no5,9)"


def test_to_string_without_accidentals_has_no_parentheses():
    chord = Chord(root=0, base_name="min")
    assert chord.to_string(Key.C_MAJOR) == "Amin"


@pytest.mark.parametrize("template", CHORD_DB)
def test_every_template_is_recognised_exactly(template):
    root = 3
    indices = [root] + [root + interval for interval in template.intervals]
    chords = name_that_chord(indices)
    match = next(chord for chord in chords if chord.root == root)
    assert match.num_accidentals == 0
    assert CHORD_DB_BY_NAME[match.base_name].intervals == template.intervals


CHORD_DB_BY_NAME = {template.name: template for template in CHORD_DB}


def test_duplicate_intervals_collapse_in_templates():
    intervals = CHORD_DB_BY_NAME["sus2♯9"].intervals
    assert intervals == frozenset({2, 7})
    root = 3
    chords = name_that_chord([root] + [root + interval for interval in intervals])
    match = next(chord for chord in chords if chord.root == root)
    assert match.num_accidentals == 0
    assert CHORD_DB_BY_NAME[match.base_name].intervals == frozenset({2, 7})


def test_scale_db_has_seven_note_scales_with_unique_names():
    names = [name for name, _ in SCALE_DB]
    assert len(names) == len(set(names))
    root = 3
    for _, intervals in SCALE_DB:
        assert len(intervals) == 6
        assert all(1 <= interval <= 11 for interval in intervals)
        chords = name_that_chord([root] + [root + interval for interval in intervals])
        assert len(chords) == 7
        assert sorted(chord.root for chord in chords) == sorted(
            (root + interval) % 12 for interval in [0, *intervals]
        )