"""Path helpers."""

from __future__ import annotations

import os
from pathlib import Path


def _home_dir() -> Path:
    try:
        return Path.home()
    except (RuntimeError, KeyError):
        return Path("/")


def expand_tilde(path: str | os.PathLike[str]) -> Path:
    """Replace a leading ``~`` component with the user's home directory."""
    p = Path(path)
    if p.parts and p.parts[0] == "~":
        return _home_dir().joinpath(*p.parts[1:])
    return p