"""
Input worker.

A background thread polls the keyboard and emits periodic ticks. Both are
delivered to the main loop through one queue, in the order they happen.
"""

import curses
import logging
import queue
import threading
import time
from dataclasses import dataclass
from typing import Callable, Optional

from shared.constants import INPUT_POLL_INTERVAL_MS, TICK_RATE_MS
from shared.enums import EventType


logger = logging.getLogger(__name__)

# Waits up to `timeout` seconds for a key; returns None if none arrived.
PollFunc = Callable[[float], Optional[int]]


@dataclass(frozen=True)
class Event:
    """A key press or a tick."""
    type: EventType
    key: Optional[int] = None

    @classmethod
    def input(cls, key: int) -> "Event":
        return cls(EventType.INPUT, key)

    @classmethod
    def tick(cls) -> "Event":
        return cls(EventType.TICK)


class CursesInput:
    """
    Keyboard polling through curses.

    Every curses call made here holds `screen_lock`, the same lock the
    renderer holds while drawing. getch() itself never blocks; the wait
    between checks happens with the lock released.
    """

    def __init__(
        self,
        screen_lock: threading.Lock,
        window=None,
        interval: float = INPUT_POLL_INTERVAL_MS / 1000,
        clock: Callable[[], float] = time.monotonic,
    ):
        self._lock = screen_lock
        self._interval = interval
        self._clock = clock
        with self._lock:
            self._window = window or curses.newwin(1, 1, 0, 0)
            self._window.keypad(True)
            self._window.timeout(0)
            # A new window starts out touched; refresh it here so getch()
            # on the worker has nothing to repaint.
            self._window.refresh()

    def poll(self, timeout: float) -> Optional[int]:
        deadline = self._clock() + max(0.0, timeout)
        while True:
            with self._lock:
                key = self._window.getch()
            if key != -1:
                return key
            remaining = deadline - self._clock()
            if remaining <= 0:
                return None
            time.sleep(min(self._interval, remaining))


class InputWorker:
    """Producer side of the event queue."""

    def __init__(
        self,
        poll: PollFunc,
        channel: "queue.Queue[Event]",
        tick_rate: float = TICK_RATE_MS / 1000,
        clock: Callable[[], float] = time.monotonic,
    ):
        self._poll = poll
        self._channel = channel
        self._tick_rate = tick_rate
        self._clock = clock
        self._last_tick = clock()
        self._thread: Optional[threading.Thread] = None

    def start(self) -> threading.Thread:
        """
        Start polling on a daemon thread.

        There is no stop signal: the thread is left behind when the main
        loop exits and dies with the process.
        """
        self._thread = threading.Thread(target=self.run, name="input-worker", daemon=True)
        self._thread.start()
        logger.debug(f"Input worker started (tick every {self._tick_rate:.3f}s)")
        return self._thread

    def run(self) -> None:
        while True:
            self.poll_once()

    def poll_once(self) -> None:
        """Wait for a key until the next tick is due, then emit whatever happened."""
        timeout = max(0.0, self._tick_rate - (self._clock() - self._last_tick))

        key = self._poll(timeout)
        if key is not None:
            self._channel.put(Event.input(key))

        if self._clock() - self._last_tick >= self._tick_rate:
            self._channel.put(Event.tick())
            self._last_tick = self._clock()
