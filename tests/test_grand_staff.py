import pytest

from chordcat.grand_staff import GrandStaff, key_signature_count
from chordcat.keys import Key


@pytest.fixture
def staff():
    return GrandStaff(1000, 800)


@pytest.mark.parametrize(
    "key, count",
    [
        (Key.C_MAJOR, 0),
        (Key.G_MAJOR, 1),
        (Key.C_SHARP_MAJOR, 7),
        (Key.F_MAJOR, -1),
        (Key.C_FLAT_MAJOR, -7),
        (Key.A_SHARP_MAJOR, 10),
    ],
)
def test_key_signature_count(key, count):
    assert key_signature_count(key) == count


def test_every_key_has_a_signature():
    assert all(-7 <= key_signature_count(key) <= 10 for key in Key)


def test_layout_follows_size(staff):
    assert staff.staff_left_x == staff.width / 10
    assert staff.staff_top_y == staff.height / 4
    assert staff.staff_spacing == 2 * staff.note_radius
    staff.width = 2000
    staff.update_notes([])
    assert staff.staff_left_x == 200


def test_update_notes_converts_piano_indices_to_midi(staff):
    staff.update_notes([39, 0, 87])
    assert staff.displayed_notes == [60, 21, 108]


def test_middle_c_letter_and_octave(staff):
    assert staff.midi_to_letter_octave(60) == (0, 4)


def test_black_key_spelling_depends_on_key(staff):
    staff.set_key(Key.C_MAJOR)  # spelled with flats
    assert staff.midi_to_letter_octave(61)[0] == 1
    staff.set_key(Key.G_MAJOR)
    assert staff.midi_to_letter_octave(61)[0] == 0


@pytest.mark.parametrize("note", [48, 60, 61, 70])
def test_octave_is_seven_steps(staff, note):
    assert staff.steps_from_ref(note + 12, note) == 7
    assert staff.steps_from_ref(note, note) == 0


def test_reference_notes_sit_on_bottom_lines(staff):
    assert staff.note_y_position(64) == staff.staff_top_y + 4 * staff.staff_spacing
    assert staff.note_y_position(43) == staff.bass_top_y + 4 * staff.staff_spacing


def test_higher_notes_are_drawn_higher(staff):
    assert staff.note_y_position(76) == pytest.approx(
        staff.note_y_position(64) - 7 * staff.staff_spacing / 2
    )
    assert staff.note_y_position(65) < staff.note_y_position(64)


def test_naturals_in_c_major(staff):
    assert staff.is_natural(60)
    assert staff.accidental_glyph(60) == ""
    assert not staff.is_natural(61)
    assert staff.accidental_glyph(61) == "♭"


def test_g_major_accidentals(staff):
    staff.set_key(Key.G_MAJOR)
    assert staff.accidental_glyph(66) == ""
    assert not staff.is_natural(66)
    assert staff.is_natural(65)
    assert staff.accidental_glyph(65) == "♮"
    assert staff.accidental_glyph(61) == "♯"


def test_no_signature_glyphs_in_c_major(staff):
    assert staff.key_signature_glyphs() == []


@pytest.mark.parametrize(
    "key, glyph, steps",
    [
        (Key.G_MAJOR, "♯", 1),
        (Key.C_SHARP_MAJOR, "♯", 7),
        (Key.A_SHARP_MAJOR, "♯", 7),
        (Key.F_MAJOR, "♭", 1),
        (Key.E_FLAT_MAJOR, "♭", 3),
    ],
)
def test_signature_glyphs(staff, key, glyph, steps):
    staff.set_key(key)
    glyphs = staff.key_signature_glyphs()
    assert len(glyphs) == 2 * steps
    assert {g for g, _, _ in glyphs} == {glyph}
    xs = [x for _, x, _ in glyphs[::2]]
    assert xs == sorted(xs)
    assert xs[0] == staff.staff_left_x


def test_bass_sharps_sit_one_space_lower(staff):
    staff.set_key(Key.G_MAJOR)
    (_, tx, ty), (_, bx, by) = staff.key_signature_glyphs()
    assert tx == bx
    assert by - ty == pytest.approx(staff.bass_top_y - staff.staff_top_y + staff.staff_spacing)