"""
Application state: the die selector and the roll log.
"""
import logging
from typing import Optional

from shared.enums import DieKind

from .dice import roll_die
from .rng import RngSource
from .selectable_list import SelectableList


logger = logging.getLogger(__name__)


class ApplicationState:
    """State for one run of the roller."""

    def __init__(self):
        self.items: SelectableList[str] = SelectableList.with_items(
            kind.label for kind in DieKind
        )
        self._rolls: list[int] = []

    @property
    def rolls(self) -> tuple[int, ...]:
        """Every roll made this run, oldest first."""
        return tuple(self._rolls)

    def roll_selected(self, rng: RngSource) -> Optional[int]:
        """
        Roll the selected die and append the result to the log.

        Returns:
            The rolled value, or None if nothing is selected
        """
        label = self.items.selected_item
        if label is None:
            return None

        value = roll_die(rng, label)
        self._rolls.append(value)
        logger.debug(f"Rolled {label}: {value}")
        return value
