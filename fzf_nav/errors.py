from __future__ import annotations

from pathlib import Path


class StoreError(RuntimeError):
    """The history database could not be opened or a statement failed."""

    def __init__(self, message: str, db_path: Path | str) -> None:
        super().__init__(message)
        self.db_path = Path(db_path)


class PruneError(StoreError):
    """The stale-row sweep failed and was rolled back."""


class PickerError(RuntimeError):
    """The interactive picker could not be started."""
