"""Locate the deskplan.toml that applies to the current directory.

``DESKPLAN_CONFIG`` pins a specific file; otherwise the nearest
deskplan.toml in the directory or any ancestor wins.
"""

from __future__ import annotations

import os
from pathlib import Path

CONFIG_FILENAME = "deskplan.toml"
CONFIG_ENV_VAR = "DESKPLAN_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """Return the config file for *start* (default: cwd), or None."""
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
