from __future__ import annotations

import logging
import sqlite3
from collections.abc import Callable
from pathlib import Path

from ..errors import PruneError
from .types import PruneResult

logger = logging.getLogger(__name__)

HISTORY_TABLES = ("directory_history", "file_history")


def _stale_ids(
    conn: sqlite3.Connection, table: str, exists: Callable[[str], bool]
) -> tuple[int, list[int]]:
    rows = conn.execute(f"SELECT id, path FROM {table}").fetchall()
    stale = [int(row["id"]) for row in rows if not exists(row["path"])]
    return len(rows), stale


def _delete_ids(conn: sqlite3.Connection, table: str, ids: list[int]) -> None:
    if not ids:
        return
    conn.executemany(f"DELETE FROM {table} WHERE id = ?", [(row_id,) for row_id in ids])


def _rollback(conn: sqlite3.Connection) -> None:
    if conn.in_transaction:
        conn.execute("ROLLBACK")


def prune_stale(
    conn: sqlite3.Connection,
    db_path: Path,
    *,
    dry_run: bool = False,
    exists: Callable[[str], bool],
) -> PruneResult:
    """Delete history rows whose path no longer exists, all or nothing.

    The enumeration and the deletes for both tables run inside a single
    ``BEGIN IMMEDIATE`` transaction. Any failure rolls the whole sweep back.
    With ``dry_run`` the sweep is rolled back after counting.
    """
    conn.isolation_level = None
    counts: dict[str, tuple[int, int]] = {}
    try:
        conn.execute("BEGIN IMMEDIATE")
    except sqlite3.Error as exc:
        raise PruneError(f"unable to start prune transaction: {exc}", db_path) from exc
    try:
        for table in HISTORY_TABLES:
            checked, stale = _stale_ids(conn, table, exists)
            _delete_ids(conn, table, stale)
            counts[table] = (checked, len(stale))
            logger.debug("%s: %d of %d rows are stale", table, len(stale), checked)
        if dry_run:
            conn.execute("ROLLBACK")
        else:
            conn.execute("COMMIT")
    except sqlite3.Error as exc:
        _rollback(conn)
        raise PruneError(str(exc), db_path) from exc
    except BaseException:
        _rollback(conn)
        raise

    dir_checked, dir_removed = counts["directory_history"]
    file_checked, file_removed = counts["file_history"]
    logger.info(
        "%s %d directory rows and %d file rows",
        "would prune" if dry_run else "pruned",
        dir_removed,
        file_removed,
    )
    return PruneResult(
        directories_checked=dir_checked,
        directories_removed=dir_removed,
        files_checked=file_checked,
        files_removed=file_removed,
        dry_run=dry_run,
    )
