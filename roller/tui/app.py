"""
Main loop of the dice roller.

Receives events from the input worker one at a time, applies them to the
application state and redraws after each one.
"""

import curses
import logging
import queue
from typing import Optional, Protocol

from shared.enums import Action, EventType
from roller.engine.rng import RngSource
from roller.engine.state import ApplicationState
from roller.persistence.store import RollStore
from roller.tui.events import Event


logger = logging.getLogger(__name__)

# Left/Up and Right/Down are deliberately symmetric.
KEY_BINDINGS: dict[int, Action] = {
    ord("q"): Action.QUIT,
    curses.KEY_LEFT: Action.PREVIOUS,
    curses.KEY_UP: Action.PREVIOUS,
    curses.KEY_RIGHT: Action.NEXT,
    curses.KEY_DOWN: Action.NEXT,
    curses.KEY_ENTER: Action.ROLL,
    ord("\n"): Action.ROLL,
    ord("\r"): Action.ROLL,
    ord(" "): Action.ROLL,
}

HELP_TEXT = "Left/Up Right/Down select | Enter roll | q quit"


class Renderer(Protocol):
    def draw(self, state: ApplicationState, status: str = "") -> None: ...


class DiceRollerApp:
    """
    Consumer side of the event queue.

    Owns the application state and the RNG; nothing else touches them.
    """

    def __init__(
        self,
        state: ApplicationState,
        rng: RngSource,
        store: RollStore,
        renderer: Renderer,
        channel: "queue.Queue[Event]",
        notice: Optional[str] = None,
    ):
        self.state = state
        self.rng = rng
        self._store = store
        self._renderer = renderer
        self._channel = channel
        self._notice = notice

    def status_line(self) -> str:
        parts = [HELP_TEXT, f"{len(self.state.rolls)} rolls"]
        if self._notice:
            parts.append(self._notice)
        return " | ".join(parts)

    def redraw(self) -> None:
        self._renderer.draw(self.state, self.status_line())

    def run(self) -> None:
        """Block on events until the quit key arrives."""
        logger.info("Event loop started")
        try:
            self.redraw()
            while self.handle_event(self._channel.get()):
                self.redraw()
        except Exception as e:
            logger.exception(f"Event loop failed: {e}")
            raise
        finally:
            self._store.close()
        logger.info(f"Event loop stopped after {len(self.state.rolls)} rolls")

    def handle_event(self, event: Event) -> bool:
        """
        Apply one event. Ticks change nothing; they only cause a redraw.

        Returns:
            False once the quit key has been pressed
        """
        if event.type == EventType.TICK:
            return True

        action = KEY_BINDINGS.get(event.key)
        if action == Action.QUIT:
            return False
        elif action == Action.PREVIOUS:
            self.state.items.previous()
        elif action == Action.NEXT:
            self.state.items.next()
        elif action == Action.ROLL:
            self._roll()
        return True

    def _roll(self) -> None:
        value = self.state.roll_selected(self.rng)
        if value is None:
            return
        self._store.record(value, self.rng.export_state())
