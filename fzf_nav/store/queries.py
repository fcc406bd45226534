from __future__ import annotations

import sqlite3

from .types import DirectoryCount, DirectoryVisit, FileCount, FileStat, FileVisit, SearchResult

LIKE_ESCAPE = "\\"
SQLITE_MAX_INTEGER = 2**63 - 1


def _check_limit(limit: int) -> int:
    if isinstance(limit, bool) or not isinstance(limit, int):
        raise TypeError(f"limit must be an integer, got {type(limit).__name__}")
    if limit < 0:
        raise ValueError(f"limit must be >= 0, got {limit}")
    if limit > SQLITE_MAX_INTEGER:
        raise ValueError(f"limit must be <= {SQLITE_MAX_INTEGER}, got {limit}")
    return limit


def like_pattern(query: str) -> str:
    """Build a LIKE pattern matching ``query`` literally anywhere in a value."""
    escaped = (
        query.replace(LIKE_ESCAPE, LIKE_ESCAPE * 2)
        .replace("%", LIKE_ESCAPE + "%")
        .replace("_", LIKE_ESCAPE + "_")
    )
    return f"%{escaped}%"


def recent_dirs(conn: sqlite3.Connection, limit: int) -> list[DirectoryVisit]:
    """Return the ``limit`` most recent visits, oldest first."""
    rows = conn.execute(
        """
        SELECT path, datetime(timestamp, 'localtime') AS visited
        FROM (
            SELECT id, path, timestamp
            FROM directory_history
            ORDER BY timestamp DESC, id DESC
            LIMIT ?
        )
        ORDER BY timestamp ASC, id ASC
        """,
        (_check_limit(limit),),
    ).fetchall()
    return [DirectoryVisit(path=row["path"], timestamp=row["visited"]) for row in rows]


def recent_files(conn: sqlite3.Connection, limit: int) -> list[FileVisit]:
    rows = conn.execute(
        """
        SELECT path, file_type, action, datetime(timestamp, 'localtime') AS opened
        FROM (
            SELECT id, path, file_type, action, timestamp
            FROM file_history
            ORDER BY timestamp DESC, id DESC
            LIMIT ?
        )
        ORDER BY timestamp ASC, id ASC
        """,
        (_check_limit(limit),),
    ).fetchall()
    return [
        FileVisit(
            path=row["path"],
            file_type=row["file_type"],
            action=row["action"],
            timestamp=row["opened"],
        )
        for row in rows
    ]


def popular_dirs(conn: sqlite3.Connection, limit: int) -> list[DirectoryCount]:
    # Ties keep sqlite's grouping order.
    rows = conn.execute(
        """
        SELECT path, COUNT(*) AS visits,
               datetime(MAX(timestamp), 'localtime') AS last_visited
        FROM directory_history
        GROUP BY path
        ORDER BY visits DESC
        LIMIT ?
        """,
        (_check_limit(limit),),
    ).fetchall()
    return [
        DirectoryCount(path=row["path"], visits=int(row["visits"]), timestamp=row["last_visited"])
        for row in rows
    ]


def file_stats(conn: sqlite3.Connection) -> list[FileStat]:
    rows = conn.execute(
        """
        SELECT file_type, action, COUNT(*) AS opens
        FROM file_history
        GROUP BY file_type, action
        ORDER BY opens DESC
        """
    ).fetchall()
    return [
        FileStat(file_type=row["file_type"], action=row["action"], opens=int(row["opens"]))
        for row in rows
    ]


def search_history(conn: sqlite3.Connection, query: str) -> SearchResult:
    """Substring search over both tables; an empty query matches everything."""
    pattern = like_pattern(query)
    dir_rows = conn.execute(
        """
        SELECT path, COUNT(*) AS visits
        FROM directory_history
        WHERE path LIKE ? ESCAPE '\\'
        GROUP BY path
        ORDER BY visits DESC
        """,
        (pattern,),
    ).fetchall()
    file_rows = conn.execute(
        """
        SELECT path, file_type, action, COUNT(*) AS opens
        FROM file_history
        WHERE path LIKE ? ESCAPE '\\'
        GROUP BY path, file_type, action
        ORDER BY opens DESC
        """,
        (pattern,),
    ).fetchall()
    return SearchResult(
        directories=[
            DirectoryCount(path=row["path"], visits=int(row["visits"])) for row in dir_rows
        ],
        files=[
            FileCount(
                path=row["path"],
                file_type=row["file_type"],
                action=row["action"],
                opens=int(row["opens"]),
            )
            for row in file_rows
        ],
    )
