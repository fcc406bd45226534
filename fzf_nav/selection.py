from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Literal

from .fs_paths import home_dir
from .picker import run_picker
from .resolver import resolve_candidates, validate_selection
from .store import HistoryStore

logger = logging.getLogger(__name__)

PathKind = Literal["directory", "file"]
SelectionStatus = Literal[
    "selected", "no_history", "no_candidates", "cancelled", "empty", "stale"
]


@dataclass(frozen=True)
class SelectionOutcome:
    status: SelectionStatus
    path: str | None = None
    candidates: int = 0


def history_paths(store: HistoryStore, kind: PathKind, limit: int) -> list[str]:
    """Recent history paths for ``kind``, most recent first."""
    if kind == "directory":
        rows = store.recent_dirs(limit)
    else:
        rows = store.recent_files(limit)
    return [row.path for row in reversed(rows)]


def select_from_history(
    store: HistoryStore,
    kind: PathKind,
    limit: int,
    *,
    picker_command: Sequence[str],
    home: str | None = None,
) -> SelectionOutcome:
    """Offer recent ``kind`` paths in the picker and validate what comes back.

    ``home`` defaults to ``$HOME``; relative history paths that no longer
    exist are resolved beneath it.
    """
    paths = history_paths(store, kind, limit)
    if not paths:
        return SelectionOutcome("no_history")

    candidates = resolve_candidates(paths, home=home if home is not None else home_dir())
    logger.debug("%d history rows resolved to %d candidates", len(paths), len(candidates))
    if not candidates:
        return SelectionOutcome("no_candidates")

    result = run_picker(candidates, picker_command)
    if result.cancelled:
        return SelectionOutcome("cancelled", candidates=len(candidates))

    selected = result.selection
    if not selected:
        return SelectionOutcome("empty", candidates=len(candidates))
    if not validate_selection(selected, kind):
        return SelectionOutcome("stale", path=selected, candidates=len(candidates))
    return SelectionOutcome("selected", path=selected, candidates=len(candidates))
