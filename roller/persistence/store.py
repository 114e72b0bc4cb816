"""
Reading and writing the roll state file.
"""

import logging
from pathlib import Path

from shared.enums import SaveMode
from roller.engine.rng import RngState
from roller.persistence.models import RollRecord


logger = logging.getLogger(__name__)


class MissingPersistedState(Exception):
    """The state file does not exist. Callers fall back to a fresh seed."""

    def __init__(self, path: Path):
        super().__init__(f"No saved state at {path}")
        self.path = path


class CorruptPersistedState(Exception):
    """The state file exists but its last line cannot be resumed from."""

    def __init__(self, path: Path, line: str):
        super().__init__(
            f"Saved state in {path} is unreadable (last line: {line!r}). "
            f"Remove or fix the file to continue."
        )
        self.path = path
        self.line = line


def load_rng_state(path: str | Path) -> RngState:
    """
    Read the RNG state stored on the last line of a state file.

    Raises:
        MissingPersistedState: if the file does not exist
        CorruptPersistedState: if the last non-blank line is not a full state line
    """
    path = Path(path)
    try:
        with path.open("r", encoding="utf-8") as f:
            last_line = ""
            for line in f:
                if line.strip():
                    last_line = line
    except FileNotFoundError:
        raise MissingPersistedState(path) from None

    record = RollRecord.from_line(last_line)
    if record is None:
        raise CorruptPersistedState(path, last_line.rstrip("\n"))

    logger.info(f"Loaded RNG state from {path} (last roll {record.value})")
    return record.rng_state


class RollStore:
    """
    Writes rolls to the state file according to a SaveMode.

    ROLLS and FULL append after every roll. LAST keeps only the newest
    roll in memory and overwrites the file when close() is called.
    """

    def __init__(self, path: str | Path, mode: SaveMode):
        self.path = Path(path)
        self.mode = mode
        self._pending: RollRecord | None = None

    def _ensure_directory(self) -> None:
        """Create the state file's directory if it doesn't exist."""
        self.path.parent.mkdir(parents=True, exist_ok=True)

    def record(self, value: int, rng_state: RngState) -> None:
        """Persist a roll together with the RNG state right after it."""
        if self.mode == SaveMode.NONE:
            return

        if self.mode == SaveMode.LAST:
            self._pending = RollRecord(value=value, rng_state=rng_state)
        elif self.mode == SaveMode.ROLLS:
            self._append(RollRecord(value=value))
        elif self.mode == SaveMode.FULL:
            self._append(RollRecord(value=value, rng_state=rng_state))

    def close(self) -> None:
        """Flush whole-run state. Safe to call more than once."""
        if self.mode != SaveMode.LAST or self._pending is None:
            return

        self._ensure_directory()
        with self.path.open("w", encoding="utf-8") as f:
            f.write(self._pending.to_line() + "\n")
        logger.info(f"Saved last roll ({self._pending.value}) to {self.path}")
        self._pending = None

    def _append(self, record: RollRecord) -> None:
        self._ensure_directory()
        with self.path.open("a", encoding="utf-8") as f:
            f.write(record.to_line() + "\n")
        logger.debug(f"Appended roll {record.value} to {self.path}")
