from __future__ import annotations

import logging
import sqlite3
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from pathlib import Path

from .. import db
from ..errors import StoreError
from ..fs_paths import path_exists
from . import cleanup as store_cleanup
from . import queries as store_queries
from .types import (
    DirectoryCount,
    DirectoryVisit,
    FileStat,
    FileVisit,
    PruneResult,
    SearchResult,
)

logger = logging.getLogger(__name__)


class HistoryStore:
    """Read and maintenance access to the directory/file history database.

    No connection is held between calls: every operation opens its own
    connection and closes it before returning, including on failure.
    """

    def __init__(self, db_path: Path | str | None = None) -> None:
        self.db_path = Path(db_path).expanduser() if db_path else db.default_db_path()

    @contextmanager
    def connection(self, *, create: bool = False) -> Iterator[sqlite3.Connection]:
        logger.debug("opening history database at %s", self.db_path)
        try:
            conn = db.connect(self.db_path, create=create)
        except sqlite3.Error as exc:
            raise StoreError(f"unable to open database: {exc}", self.db_path) from exc
        try:
            yield conn
        except sqlite3.Error as exc:
            raise StoreError(str(exc), self.db_path) from exc
        finally:
            conn.close()

    def initialize(self) -> None:
        with self.connection(create=True) as conn:
            db.initialize_schema(conn)

    def recent_dirs(self, limit: int) -> list[DirectoryVisit]:
        with self.connection() as conn:
            return store_queries.recent_dirs(conn, limit)

    def recent_files(self, limit: int) -> list[FileVisit]:
        with self.connection() as conn:
            return store_queries.recent_files(conn, limit)

    def popular_dirs(self, limit: int) -> list[DirectoryCount]:
        with self.connection() as conn:
            return store_queries.popular_dirs(conn, limit)

    def file_stats(self) -> list[FileStat]:
        with self.connection() as conn:
            return store_queries.file_stats(conn)

    def search(self, query: str) -> SearchResult:
        with self.connection() as conn:
            return store_queries.search_history(conn, query)

    def prune_stale(
        self,
        *,
        dry_run: bool = False,
        exists: Callable[[str], bool] = path_exists,
    ) -> PruneResult:
        with self.connection() as conn:
            return store_cleanup.prune_stale(conn, self.db_path, dry_run=dry_run, exists=exists)
