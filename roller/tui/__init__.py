"""
Terminal UI for the dice roller.
"""
from .events import Event, InputWorker, CursesInput
from .render import ScreenRenderer, visible_slice, init_colors
from .app import DiceRollerApp, KEY_BINDINGS

__all__ = [
    "Event",
    "InputWorker",
    "CursesInput",
    "ScreenRenderer",
    "visible_slice",
    "init_colors",
    "DiceRollerApp",
    "KEY_BINDINGS",
]
