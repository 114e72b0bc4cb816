"""
Data models for the state file.

Each line of the file is one RollRecord.
"""

import re
from dataclasses import dataclass

from shared.constants import STATE_LINE_FORMAT, STATE_LINE_PATTERN
from roller.engine.rng import RngState


LINE_RE = re.compile(STATE_LINE_PATTERN)


@dataclass(frozen=True)
class RollRecord:
    """A rolled value and, when saved with it, the RNG state right after the roll."""
    value: int
    rng_state: RngState | None = None

    def to_line(self) -> str:
        """Render as one line of the state file (without newline)."""
        if self.rng_state is None:
            return str(self.value)
        return STATE_LINE_FORMAT.format(
            value=self.value,
            state=self.rng_state.state,
            increment=self.rng_state.increment,
        )

    @classmethod
    def from_line(cls, line: str) -> "RollRecord | None":
        """
        Parse a full state line.

        Returns:
            The record, or None if the line does not carry RNG state
        """
        match = LINE_RE.match(line.strip())
        if not match:
            return None

        value, state, increment = (int(group) for group in match.groups())
        try:
            rng_state = RngState(state=state, increment=increment)
        except ValueError:
            return None
        return cls(value=value, rng_state=rng_state)
