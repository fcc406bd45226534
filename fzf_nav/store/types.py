from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any


def _drop_absent(data: dict[str, Any]) -> dict[str, Any]:
    return {key: value for key, value in data.items() if value is not None}


@dataclass(frozen=True)
class DirectoryVisit:
    """A single directory visit, as returned by recent-directory queries."""

    path: str
    timestamp: str | None

    def to_dict(self) -> dict[str, Any]:
        return _drop_absent(asdict(self))


@dataclass(frozen=True)
class FileVisit:
    path: str
    file_type: str
    action: str
    timestamp: str | None

    def to_dict(self) -> dict[str, Any]:
        return _drop_absent(asdict(self))


@dataclass(frozen=True)
class DirectoryCount:
    """A directory with its visit count; ``timestamp`` is the latest visit when known."""

    path: str
    visits: int
    timestamp: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return _drop_absent(asdict(self))


@dataclass(frozen=True)
class FileCount:
    path: str
    file_type: str
    action: str
    opens: int

    def to_dict(self) -> dict[str, Any]:
        return _drop_absent(asdict(self))


@dataclass(frozen=True)
class FileStat:
    file_type: str
    action: str
    opens: int

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class SearchResult:
    directories: list[DirectoryCount] = field(default_factory=list)
    files: list[FileCount] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "directories": [item.to_dict() for item in self.directories],
            "files": [item.to_dict() for item in self.files],
        }


@dataclass(frozen=True)
class PruneResult:
    directories_checked: int
    directories_removed: int
    files_checked: int
    files_removed: int
    dry_run: bool = False

    @property
    def removed(self) -> int:
        return self.directories_removed + self.files_removed

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)
