"""User preferences stored as a JSON settings file."""

from __future__ import annotations

import json
import logging
import os
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Mapping

logger = logging.getLogger(__name__)

ASSETS_DIR = str(Path(__file__).resolve().parent / "assets")
SETTINGS_FILE_NAME = "settings.json"

_FONT_FILES = (
    ("Metropolis", "fonts/Metropolis/Metropolis-Regular.otf"),
    ("DejaVu Sans", "fonts/DejaVuSans/ttf/DejaVuSans.ttf"),
    ("FirstTimeWriting!", "fonts/FirstTimeWriting/FirstTimeWriting!.ttf"),
    ("Petaluma", "fonts/Petaluma/otf/PetalumaScript.otf"),
)


class SettingsPathError(RuntimeError):
    """Raised when no location for the settings file can be determined."""


def available_fonts(assets_dir: str = ASSETS_DIR) -> list[tuple[str, str]]:
    """Return the bundled fonts as (name, path) pairs."""
    return [(name, f"{assets_dir}/{relative}") for name, relative in _FONT_FILES]


def _default_font() -> tuple[str, str]:
    return available_fonts()[0]


@dataclass
class FontPreferences:
    name: str = field(default_factory=lambda: _default_font()[0])
    path: str = field(default_factory=lambda: _default_font()[1])


@dataclass
class UIPreferences:
    font: FontPreferences = field(default_factory=FontPreferences)


@dataclass
class PianoPreferences:
    gain: float = 1.0
    pressed_note_colors: list[float] = field(default_factory=lambda: [0.945, 0.275, 0.275, 1.0])


def get_appdata_path(
    environ: Mapping[str, str] | None = None, platform: str | None = None
) -> str | None:
    """Return the configuration directory, or None if it cannot be found."""
    environ = os.environ if environ is None else environ
    platform = sys.platform if platform is None else platform

    if platform.startswith("win"):
        root = environ.get("APPDATA")
        if root is None:
            logger.warning("Can't find configuration directory, env variable $APPDATA was NULL")
            return None
        return f"{root}/chordcat"

    root = environ.get("XDG_CONFIG_HOME")
    if root is not None:
        return f"{root}/chordcat"
    home = environ.get("HOME")
    if home is not None:
        return f"{home}/.config/chordcat"
    logger.warning(
        "Can't find configuration directory, env variable $HOME and $XDG_CONFIG_HOME were NULL"
    )
    return None


def get_settings_file_path(
    environ: Mapping[str, str] | None = None, platform: str | None = None
) -> str | None:
    """Return the path of the settings file, or None if it cannot be found."""
    appdata = get_appdata_path(environ, platform)
    if appdata is None:
        return None
    return f"{appdata}/{SETTINGS_FILE_NAME}"


def create_directory_recursive(path: str | os.PathLike[str]) -> Path:
    """Create ``path`` and its parents; an existing directory is fine."""
    directory = Path(path)
    directory.mkdir(parents=True, exist_ok=True)
    return directory


def _resolve(filepath: str | os.PathLike[str] | None) -> Path:
    if filepath is not None:
        return Path(filepath)
    default = get_settings_file_path()
    if default is None:
        raise SettingsPathError("cannot determine where to keep the settings file")
    return Path(default)


@dataclass
class Preferences:
    """All user preferences."""

    ui: UIPreferences = field(default_factory=UIPreferences)
    piano: PianoPreferences = field(default_factory=PianoPreferences)

    def load(self, filepath: str | os.PathLike[str] | None = None) -> None:
        """Read preferences from ``filepath``.

        Raises FileNotFoundError if the file is missing and
        json.JSONDecodeError if it is not valid JSON.
        """
        path = _resolve(filepath)
        if not path.is_file():
            raise FileNotFoundError("settings file doesn't exist")
        with path.open(encoding="utf-8") as stream:
            data = json.load(stream)

        piano = data["piano"]
        colors = piano["pressed_note_colors"]
        font = data["ui"]["font"]
        gain = float(piano["gain"])
        pressed = [float(colors[channel]) for channel in "rgba"]
        name, font_path = str(font["name"]), str(font["path"])

        self.piano.gain = gain
        self.piano.pressed_note_colors = pressed
        self.ui.font.name = name
        self.ui.font.path = font_path

    def save(self, filepath: str | os.PathLike[str] | None = None) -> Path:
        """Write preferences to ``filepath`` and return the path written."""
        path = _resolve(filepath)
        r, g, b, a = self.piano.pressed_note_colors
        data = {
            "piano": {
                "gain": self.piano.gain,
                "pressed_note_colors": {"r": r, "g": g, "b": b, "a": a},
            },
            "ui": {"font": {"name": self.ui.font.name, "path": self.ui.font.path}},
        }
        with path.open("w", encoding="utf-8") as stream:
            json.dump(data, stream, indent=4, sort_keys=True, ensure_ascii=False)
        return path

    def setup(self, filepath: str | os.PathLike[str] | None = None) -> Path:
        """Load preferences, creating or resetting the settings file when needed."""
        path = _resolve(filepath)
        try:
            self.load(path)
        except FileNotFoundError as error:
            logger.info("%s", error)
            create_directory_recursive(path.parent)
            self.save(path)
        except json.JSONDecodeError:
            # A damaged file is replaced by the current (default) settings.
            self.save(path)
        return path