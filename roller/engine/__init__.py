"""
Dice engine package.
"""
from .rng import RngSource, RngState
from .selectable_list import SelectableList
from .dice import UPPER_BOUNDS, UnknownDieKind, upper_bound, parse_die_kind, roll_die
from .state import ApplicationState

__all__ = [
    "RngSource",
    "RngState",
    "SelectableList",
    "UPPER_BOUNDS",
    "UnknownDieKind",
    "upper_bound",
    "parse_die_kind",
    "roll_die",
    "ApplicationState",
]
