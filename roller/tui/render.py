"""
Screen rendering.

Draws the die selector and the roll log side by side. The log only shows
the newest rolls that fit in its panel.
"""

import curses
import threading
from dataclasses import dataclass
from typing import Optional, Sequence, TypeVar

from shared.constants import (
    SCREEN_MARGIN,
    SELECTOR_WIDTH_PERCENT,
    LOG_WIDTH_PERCENT,
    BORDER_ROWS,
    SELECTOR_TITLE,
    LOG_TITLE,
    HIGHLIGHT_SYMBOL,
)
from roller.engine.state import ApplicationState

T = TypeVar("T")

CP_HIGHLIGHT = 1
CP_STATUS = 2


def visible_slice(entries: Sequence[T], available_rows: int, entry_height: int = 1) -> Sequence[T]:
    """
    Newest entries that fit in `available_rows`.

    Older entries are only hidden; the caller's sequence is untouched.
    """
    if not entries:
        return entries

    can_fit = max(0, available_rows) // entry_height
    if can_fit < len(entries):
        return entries[len(entries) - can_fit:]
    return entries


@dataclass
class Rect:
    """A region of the screen."""
    y: int
    x: int
    height: int
    width: int

    @property
    def inner_rows(self) -> int:
        """Rows left for content once the border is drawn."""
        return max(0, self.height - BORDER_ROWS)


def selector_offset(selected: Optional[int], available_rows: int) -> int:
    """First item to draw so that the selected item stays on screen."""
    if selected is None or available_rows <= 0:
        return 0
    return max(0, selected - available_rows + 1)


def split_panels(height: int, width: int) -> tuple[Rect, Rect]:
    """Selector and log panels, left to right, inside the screen margin."""
    inner_height = max(0, height - 2 * SCREEN_MARGIN)
    inner_width = max(0, width - 2 * SCREEN_MARGIN)

    selector_width = inner_width * SELECTOR_WIDTH_PERCENT // 100
    log_width = inner_width * LOG_WIDTH_PERCENT // 100

    selector = Rect(SCREEN_MARGIN, SCREEN_MARGIN, inner_height, selector_width)
    log = Rect(SCREEN_MARGIN, SCREEN_MARGIN + selector_width, inner_height, log_width)
    return selector, log


def _safe_addnstr(win, y: int, x: int, text: str, n: int, attr: int = 0):
    """addnstr that silently ignores curses errors."""
    if n <= 0:
        return
    try:
        win.addnstr(y, x, text, n, attr)
    except curses.error:
        pass


def init_colors() -> None:
    """Set up curses color pairs."""
    curses.start_color()
    curses.use_default_colors()
    curses.init_pair(CP_HIGHLIGHT, curses.COLOR_BLACK, curses.COLOR_GREEN)
    curses.init_pair(CP_STATUS, curses.COLOR_BLACK, curses.COLOR_WHITE)


class ScreenRenderer:
    """Draws a full frame of the application onto a curses screen."""

    def __init__(self, stdscr, screen_lock: threading.Lock):
        self._stdscr = stdscr
        self._lock = screen_lock

    def draw(self, state: ApplicationState, status: str = "") -> None:
        with self._lock:
            self._draw_frame(state, status)

    def _draw_frame(self, state: ApplicationState, status: str) -> None:
        stdscr = self._stdscr
        stdscr.erase()
        height, width = stdscr.getmaxyx()

        selector, log = split_panels(height, width)
        self._draw_box(selector, SELECTOR_TITLE)
        self._draw_selector(selector, state)
        self._draw_box(log, LOG_TITLE)
        self._draw_log(log, state)
        self._draw_status(height, width, status)

        stdscr.refresh()

    def _draw_box(self, rect: Rect, title: str) -> None:
        if rect.height < BORDER_ROWS or rect.width < 2:
            return
        try:
            box = self._stdscr.derwin(rect.height, rect.width, rect.y, rect.x)
            box.box()
        except curses.error:
            return
        _safe_addnstr(box, 0, 1, title, rect.width - 2, curses.A_BOLD)

    def _draw_selector(self, rect: Rect, state: ApplicationState) -> None:
        text_width = rect.width - 2
        selected = state.items.selected
        offset = selector_offset(selected, rect.inner_rows)
        visible = state.items.items[offset:offset + rect.inner_rows]
        for row, label in enumerate(visible):
            y = rect.y + 1 + row
            if offset + row == selected:
                _safe_addnstr(
                    self._stdscr, y, rect.x + 1, f"{HIGHLIGHT_SYMBOL}{label}".ljust(text_width),
                    text_width, curses.color_pair(CP_HIGHLIGHT) | curses.A_BOLD,
                )
            else:
                padding = " " * len(HIGHLIGHT_SYMBOL)
                _safe_addnstr(self._stdscr, y, rect.x + 1, f"{padding}{label}", text_width)

    def _draw_log(self, rect: Rect, state: ApplicationState) -> None:
        text_width = rect.width - 2
        for row, value in enumerate(visible_slice(state.rolls, rect.inner_rows)):
            _safe_addnstr(self._stdscr, rect.y + 1 + row, rect.x + 1, str(value), text_width)

    def _draw_status(self, height: int, width: int, status: str) -> None:
        if height < 1:
            return
        _safe_addnstr(self._stdscr, height - 1, 0, status.ljust(width), width - 1,
                      curses.color_pair(CP_STATUS))
