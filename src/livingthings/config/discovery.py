"""Locate ``livingthings.toml``.

The file is found by walking up from the working directory, the way git
finds ``.git/``. ``LIVINGTHINGS_CONFIG`` pins an explicit file instead.
"""

from __future__ import annotations

import os
from pathlib import Path

CONFIG_FILENAME = "livingthings.toml"
CONFIG_ENV_VAR = "LIVINGTHINGS_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """Return the nearest config file at or above *start* (default: cwd).

    When ``LIVINGTHINGS_CONFIG`` is set it wins outright; if it names a
    missing file, no config is used at all.
    """
    pinned = os.environ.get(CONFIG_ENV_VAR)
    if pinned:
        path = Path(pinned)
        return path if path.is_file() else None

    here = (start or Path.cwd()).resolve()
    for directory in (here, *here.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None
