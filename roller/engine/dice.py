"""
Die catalog and rolling.
"""
from shared.enums import DieKind

from .rng import RngSource


UPPER_BOUNDS: dict[DieKind, int] = {
    DieKind.D3: 3,
    DieKind.D4: 4,
    DieKind.D6: 6,
    DieKind.D8: 8,
    DieKind.D10: 10,
    DieKind.D12: 12,
    DieKind.D20: 20,
    DieKind.D100: 100,
}


class UnknownDieKind(ValueError):
    """Raised when a label does not name a die in the catalog."""

    def __init__(self, label: str):
        super().__init__(f"Unknown die kind: {label!r}")
        self.label = label


def upper_bound(kind: DieKind) -> int:
    """Highest face of a die. The lowest is always 1."""
    return UPPER_BOUNDS[kind]


def parse_die_kind(label: str) -> DieKind:
    """
    Parse a display name such as "d20" or "D20".

    Raises:
        UnknownDieKind: if the label is not in the catalog
    """
    try:
        return DieKind(label.lower())
    except ValueError:
        raise UnknownDieKind(label) from None


def roll_die(rng: RngSource, label: str) -> int:
    """Roll the die named by label."""
    kind = parse_die_kind(label)
    return rng.roll(1, upper_bound(kind))
