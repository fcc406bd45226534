from __future__ import annotations

import os
from pathlib import Path


def path_exists(path: str) -> bool:
    """Return True if ``path`` can be stat'ed right now.

    Any stat failure (permission denied, unmounted share, broken symlink)
    counts as missing. Relative paths are checked against the working directory.
    """
    try:
        os.stat(path)
    except (OSError, ValueError):
        return False
    return True


def canonicalize(path: str) -> str | None:
    """Resolve symlinks and make ``path`` absolute, or None if it does not exist."""
    try:
        return str(Path(path).resolve(strict=True))
    except (OSError, RuntimeError, ValueError):
        return None


def home_dir() -> str | None:
    home = os.environ.get("HOME")
    return home or None


def matches_kind(path: str, kind: str) -> bool:
    if kind == "directory":
        return os.path.isdir(path)
    if kind == "file":
        return os.path.isfile(path)
    raise ValueError(f"unknown path kind: {kind}")
