from __future__ import annotations

import logging
import subprocess
from collections.abc import Sequence
from dataclasses import dataclass

from .errors import PickerError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PickerResult:
    returncode: int
    output: str

    @property
    def cancelled(self) -> bool:
        return self.returncode != 0

    @property
    def selection(self) -> str:
        return self.output.strip()


def run_picker(candidates: Sequence[str], command: Sequence[str]) -> PickerResult:
    """Feed ``candidates`` to the picker, one per line, and wait for it to exit.

    Blocks until the picker process terminates. The picker's stderr is passed
    through so its interface can draw on the terminal.
    """
    if not command:
        raise PickerError("no picker command configured")
    payload = "".join(f"{candidate}\n" for candidate in candidates)
    logger.debug("running picker %s with %d candidates", list(command), len(candidates))
    try:
        result = subprocess.run(
            list(command),
            input=payload,
            stdout=subprocess.PIPE,
            text=True,
            check=False,
        )
    except FileNotFoundError as exc:
        raise PickerError(f"picker not found: {command[0]}") from exc
    except OSError as exc:
        raise PickerError(f"failed to start picker {command[0]}: {exc}") from exc
    logger.debug("picker exited with %d", result.returncode)
    return PickerResult(returncode=result.returncode, output=result.stdout or "")
