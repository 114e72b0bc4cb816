"""
Main entry point for the dice roller.

Usage:
    python -m roller.main --seed abc

Or, once installed:
    dice-roller --seed abc --save-mode full
"""

import argparse
import curses
import logging
import queue
import sys
import threading
from pathlib import Path
from typing import Optional

from shared.enums import SaveMode
from roller.config import settings
from roller.engine import ApplicationState, RngSource
from roller.persistence import (
    RollStore,
    load_rng_state,
    MissingPersistedState,
    CorruptPersistedState,
)
from roller.tui import CursesInput, DiceRollerApp, InputWorker, ScreenRenderer, init_colors


logger = logging.getLogger(__name__)


def setup_logging() -> None:
    """Configure logging to the log file."""
    settings.ensure_directories()
    logging.basicConfig(
        filename=settings.LOG_FILE,
        level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )


def positive_int(value: str) -> int:
    """argparse type for a strictly positive integer."""
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid int value: {value!r}") from None
    if number <= 0:
        raise argparse.ArgumentTypeError(f"must be greater than 0, got {number}")
    return number


def parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Seeded terminal dice roller")
    parser.add_argument("--seed", default=settings.SEED,
                        help="Text to seed the generator with (default: $DICE_SEED)")
    parser.add_argument("--save-mode", type=str.lower, choices=[mode.value for mode in SaveMode],
                        default=settings.SAVE_MODE.value,
                        help=f"How rolls are saved (default: {settings.SAVE_MODE.value})")
    parser.add_argument("--save-file", type=Path, default=settings.SAVE_FILE,
                        help=f"State file to write (default: {settings.SAVE_FILE})")
    parser.add_argument("--load", type=Path, default=None,
                        help="State file to resume from (default: the save file in 'last' and 'full' modes)")
    parser.add_argument("--tick-rate", type=positive_int, default=settings.TICK_RATE_MS,
                        help=f"Redraw interval in milliseconds (default: {settings.TICK_RATE_MS})")
    args = parser.parse_args(argv)
    args.save_mode = SaveMode(args.save_mode)

    if args.load is None and args.save_mode.is_resumable:
        args.load = args.save_file
    return args


def create_rng(seed: str, load_path: Optional[Path]) -> tuple[RngSource, Optional[str]]:
    """
    Build the generator, resuming from a state file when one is given.

    Returns:
        Tuple of (generator, notice to show the user or None)

    Raises:
        CorruptPersistedState: if the state file exists but cannot be resumed from
    """
    if load_path is not None:
        try:
            saved = load_rng_state(load_path)
        except MissingPersistedState as e:
            logger.warning(f"{e}; seeding from {seed!r}")
            return RngSource.seed_from(seed), f"No saved state at {load_path}, seeded fresh"
        return RngSource.restore_state(saved), f"Resumed from {load_path}"

    logger.info(f"Seeding from {seed!r}")
    return RngSource.seed_from(seed), None


def run_tui(stdscr, rng: RngSource, store: RollStore, tick_rate_ms: int, notice: Optional[str]) -> None:
    """Set up the screen, start the input worker and run the main loop."""
    init_colors()
    curses.curs_set(0)
    stdscr.keypad(True)

    state = ApplicationState()
    state.items.next()

    # Held for every curses call on either thread
    screen_lock = threading.Lock()

    channel: "queue.Queue" = queue.Queue()
    worker = InputWorker(CursesInput(screen_lock).poll, channel, tick_rate=tick_rate_ms / 1000)
    worker.start()

    renderer = ScreenRenderer(stdscr, screen_lock)
    app = DiceRollerApp(state, rng, store, renderer, channel, notice=notice)
    app.run()


def main(argv: Optional[list[str]] = None) -> int:
    """Entry point for running the roller."""
    setup_logging()
    args = parse_args(argv)

    try:
        rng, notice = create_rng(args.seed, args.load)
    except CorruptPersistedState as e:
        logger.error(str(e))
        print(f"Error: {e}", file=sys.stderr)
        return 1

    store = RollStore(args.save_file, args.save_mode)
    logger.info(f"Saving with mode '{args.save_mode.value}' to {args.save_file}")

    try:
        curses.wrapper(run_tui, rng, store, args.tick_rate, notice)
    except KeyboardInterrupt:
        store.close()

    return 0


if __name__ == "__main__":
    sys.exit(main())
