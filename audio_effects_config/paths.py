"""Default locations of the effects configuration and effect libraries."""

from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import Optional, Tuple

ENV_CONFIG_DIRS = "AUDIO_EFFECTS_CONFIG_DIRS"

#: File name looked up in the default locations.
DEFAULT_NAME = "audio_effects.xml"

DEFAULT_LOCATIONS: Tuple[str, ...] = ("/odm/etc", "/vendor/etc", "/system/etc")

if sys.maxsize > 2**32:
    LD_EFFECT_LIBRARY_PATH: Tuple[str, ...] = (
        "/odm/lib64/soundfx",
        "/vendor/lib64/soundfx",
        "/system/lib64/soundfx",
    )
else:  # pragma: no cover - 32-bit interpreters
    LD_EFFECT_LIBRARY_PATH = (
        "/odm/lib/soundfx",
        "/vendor/lib/soundfx",
        "/system/lib/soundfx",
    )


def get_search_dirs() -> Tuple[Path, ...]:
    """Return the directories probed for ``DEFAULT_NAME``.

    Order of precedence:
    1. ``AUDIO_EFFECTS_CONFIG_DIRS`` (``os.pathsep`` separated) when set.
    2. ``DEFAULT_LOCATIONS``.
    """

    env_value = os.environ.get(ENV_CONFIG_DIRS)
    if env_value:
        entries = [entry for entry in env_value.split(os.pathsep) if entry.strip()]
        return tuple(Path(os.path.expanduser(entry.strip())) for entry in entries)
    return tuple(Path(location) for location in DEFAULT_LOCATIONS)


def find_default_config(name: str = DEFAULT_NAME) -> Optional[Path]:
    """Return the first existing *name* under the search directories."""

    for directory in get_search_dirs():
        candidate = directory / name
        if candidate.is_file():
            return candidate
    return None
