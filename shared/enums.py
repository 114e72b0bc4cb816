"""
Enumerations used throughout the dice roller.
"""
from enum import Enum, auto


class DieKind(str, Enum):
    """Die shapes available in the selector, in display order."""
    D3 = "d3"
    D4 = "d4"
    D6 = "d6"
    D8 = "d8"
    D10 = "d10"
    D12 = "d12"
    D20 = "d20"
    D100 = "d100"

    @property
    def label(self) -> str:
        """Display name shown in the selector."""
        return self.value


class SaveMode(str, Enum):
    """How rolls are written to the state file."""
    NONE = "none"
    LAST = "last"
    ROLLS = "rolls"
    FULL = "full"

    @property
    def is_resumable(self) -> bool:
        """Whether files written in this mode carry RNG internals."""
        return self in (SaveMode.LAST, SaveMode.FULL)


class EventType(Enum):
    """Kinds of events delivered to the main loop."""
    INPUT = auto()
    TICK = auto()


class Action(Enum):
    """What a bound key asks the main loop to do."""
    PREVIOUS = auto()
    NEXT = auto()
    ROLL = auto()
    QUIT = auto()
