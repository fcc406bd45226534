from __future__ import annotations

from ._store import HistoryStore
from .types import (
    DirectoryCount,
    DirectoryVisit,
    FileCount,
    FileStat,
    FileVisit,
    PruneResult,
    SearchResult,
)

__all__ = [
    "DirectoryCount",
    "DirectoryVisit",
    "FileCount",
    "FileStat",
    "FileVisit",
    "HistoryStore",
    "PruneResult",
    "SearchResult",
]
