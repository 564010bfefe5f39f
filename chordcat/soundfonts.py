"""Discovery of SoundFont (.sf2) files."""

from __future__ import annotations

import logging
import os
import sys
from pathlib import Path
from typing import Mapping

from .preferences import ASSETS_DIR

logger = logging.getLogger(__name__)

_AUTO = object()


def user_soundfont_dir(
    environ: Mapping[str, str] | None = None, platform: str | None = None
) -> Path | None:
    """Return the per-user soundfont directory, or None if it cannot be found."""
    environ = os.environ if environ is None else environ
    platform = sys.platform if platform is None else platform

    if platform.startswith("win"):
        root = environ.get("APPDATA")
        if root is None:
            logger.warning("Can't find user data directory, env variable $APPDATA was NULL")
            return None
        return Path(root) / "chordcat" / "soundfonts"

    root = environ.get("XDG_DATA_HOME")
    if root is not None:
        return Path(root) / "chordcat" / "soundfonts"
    home = environ.get("HOME")
    if home is not None:
        return Path(home) / ".local" / "share" / "chordcat" / "soundfonts"
    logger.warning(
        "Can't find user data directory, env variable $HOME and $XDG_DATA_HOME were NULL"
    )
    return None


class SoundFontManager:
    """Lists soundfonts from the bundled directory and the user's directory."""

    def __init__(self, system_dir=None, user_dir=_AUTO):
        self.system_dir = Path(system_dir) if system_dir is not None else Path(ASSETS_DIR) / "soundfonts"
        if user_dir is _AUTO:
            user_dir = user_soundfont_dir()
        self.user_dir = Path(user_dir) if user_dir is not None else None
        if self.user_dir is not None:
            self.user_dir.mkdir(parents=True, exist_ok=True)

    def available_soundfonts(self) -> list[tuple[str, Path]]:
        """Return (file name, path) for every .sf2 file, system ones first."""
        directories = [self.system_dir]
        if self.user_dir is not None:
            directories.append(self.user_dir)
        return [
            (entry.name, entry)
            for directory in directories
            for entry in sorted(directory.iterdir())
            if entry.suffix == ".sf2"
        ]