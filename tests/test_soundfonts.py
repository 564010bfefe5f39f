from pathlib import Path

import pytest

from chordcat.soundfonts import SoundFontManager, user_soundfont_dir


def test_user_dir_prefers_xdg_data_home():
    env = {"XDG_DATA_HOME": "/data", "HOME": "/home/user"}
    assert user_soundfont_dir(env, "linux") == Path("/data/chordcat/soundfonts")


def test_user_dir_falls_back_to_home():
    assert user_soundfont_dir({"HOME": "/home/user"}, "linux") == Path(
        "/home/user/.local/share/chordcat/soundfonts"
    )


def test_user_dir_missing():
    assert user_soundfont_dir({}, "linux") is None
    assert user_soundfont_dir({"HOME": "/home/user"}, "win32") is None


def test_user_dir_windows():
    assert user_soundfont_dir({"APPDATA": "/appdata"}, "win32") == Path("/appdata/chordcat/soundfonts")


@pytest.fixture
def system_dir(tmp_path):
    directory = tmp_path / "system"
    directory.mkdir()
    (directory / "default.sf2").write_bytes(b"")
    (directory / "readme.txt").write_text("x")
    return directory


def test_lists_system_then_user_soundfonts(tmp_path, system_dir):
    user_dir = tmp_path / "user" / "soundfonts"
    manager = SoundFontManager(system_dir, user_dir)
    assert user_dir.is_dir()
    (user_dir / "mine.sf2").write_bytes(b"")
    (user_dir / "other.SF3").write_bytes(b"")

    found = manager.available_soundfonts()
    assert found == [
        ("default.sf2", system_dir / "default.sf2"),
        ("mine.sf2", user_dir / "mine.sf2"),
    ]


def test_without_user_dir(system_dir):
    manager = SoundFontManager(system_dir, None)
    assert manager.user_dir is None
    assert [name for name, _ in manager.available_soundfonts()] == ["default.sf2"]


def test_missing_system_dir_raises(tmp_path):
    manager = SoundFontManager(tmp_path / "absent", None)
    with pytest.raises(FileNotFoundError):
        manager.available_soundfonts()