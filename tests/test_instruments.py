import pytest

from chordcat.instruments import (
    PROGRAM_COUNT,
    Instrument,
    InstrumentCategory,
    category_of,
    instrument_categories,
    instrument_name,
)


def _all_instruments():
    return [
        instrument
        for category in instrument_categories()
        for instrument in category.instruments
    ]


def test_codes_cover_every_program_in_order():
    codes = [instrument.code for instrument in _all_instruments()]
    assert codes == list(range(PROGRAM_COUNT))


def test_first_and_last_programs():
    assert instrument_name(0) == "Acoustic Grand Piano"
    assert instrument_name(127) == "Gunshot"


def test_named_programs_from_table():
    assert instrument_name(24) == "Acoustic Guitar (nylon)"
    assert instrument_name(40) == "Violin"
    assert instrument_name(104) == "Sitar"


def test_category_of_known_programs():
    assert category_of(0).name == "Piano"
    assert category_of(24).name == "Guitar"
    assert category_of(127).name == "Sound Effects"


def test_category_order_starts_and_ends():
    names = [category.name for category in instrument_categories()]
    assert names[0] == "Piano"
    assert names[-1] == "Sound Effects"
    assert len(names) == len(set(names))


def test_category_of_contains_the_instrument():
    for instrument in _all_instruments():
        category = category_of(instrument.code)
        assert instrument in category.instruments
        assert instrument_name(instrument.code) == instrument.name


def test_categories_are_equal_sized_and_contiguous():
    categories = instrument_categories()
    sizes = {len(category.instruments) for category in categories}
    assert len(sizes) == 1
    for category in categories:
        codes = [instrument.code for instrument in category.instruments]
        assert codes == list(range(codes[0], codes[0] + len(codes)))


def test_names_are_unique():
    names = [instrument.name for instrument in _all_instruments()]
    assert len(names) == len(set(names))


def test_table_is_stable_between_calls():
    first = instrument_categories()
    second = instrument_categories()
    assert first == second
    assert len(first) == 16
    assert first[0].name == "Piano"
    assert second[-1].instruments[-1].name == "Gunshot"


def test_records_are_immutable():
    category = instrument_categories()[0]
    assert isinstance(category, InstrumentCategory)
    with pytest.raises(AttributeError):
        category.name = "Other"
    with pytest.raises(AttributeError):
        category.instruments[0].name = "Other"
    assert category.name == "Piano"
    assert category.instruments[0].name == "Acoustic Grand Piano"
    assert instrument_categories()[0].name == "Piano"


def test_instrument_equality():
    assert Instrument(0, "Acoustic Grand Piano") == instrument_categories()[0].instruments[0]


@pytest.mark.parametrize("code", [-1, PROGRAM_COUNT, 1000])
def test_out_of_range_program_raises(code):
    with pytest.raises(ValueError):
        instrument_name(code)
    with pytest.raises(ValueError):
        category_of(code)