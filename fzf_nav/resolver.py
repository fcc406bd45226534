from __future__ import annotations

import os
from collections.abc import Iterable

from .fs_paths import canonicalize, matches_kind


def resolve_path(path: str, home: str | None) -> str | None:
    """Turn a stored history path into an absolute path, or None if unresolvable.

    Existing paths are canonicalized (symlinks resolved). Missing absolute
    paths are kept verbatim; missing relative paths are joined under ``home``.
    """
    resolved = canonicalize(path)
    if resolved is not None:
        return resolved
    if os.path.isabs(path):
        return path
    if not home:
        return None
    return os.path.join(home, path)


def resolve_candidates(paths: Iterable[str], *, home: str | None) -> list[str]:
    """Resolve ``paths`` in order, keeping only the first occurrence of each result."""
    seen: set[str] = set()
    candidates: list[str] = []
    for path in paths:
        resolved = resolve_path(path, home)
        if resolved is None or resolved in seen:
            continue
        seen.add(resolved)
        candidates.append(resolved)
    return candidates


def validate_selection(selection: str, kind: str) -> bool:
    return matches_kind(selection, kind)
