"""
Roller configuration loaded from environment variables.
"""
import logging
import os
from pathlib import Path
from dotenv import load_dotenv

from shared.constants import TICK_RATE_MS
from shared.enums import SaveMode

load_dotenv()

logger = logging.getLogger(__name__)


def _save_mode(value: str) -> SaveMode:
    try:
        return SaveMode(value.lower())
    except ValueError:
        logger.warning(f"Unknown save mode {value!r}, saving disabled")
        return SaveMode.NONE


def _tick_rate_ms(value: str) -> int:
    try:
        rate = int(value)
    except ValueError:
        rate = 0
    if rate <= 0:
        logger.warning(f"Invalid tick rate {value!r}, using {TICK_RATE_MS} ms")
        return TICK_RATE_MS
    return rate


class Config:
    """Roller configuration."""

    # Rolling
    SEED: str = os.getenv("DICE_SEED", "")

    # State file
    SAVE_MODE: SaveMode = _save_mode(os.getenv("DICE_SAVE_MODE", "none"))
    SAVE_FILE: Path = Path(os.getenv("DICE_SAVE_FILE", "./data/rolls.txt"))

    # Event loop
    TICK_RATE_MS: int = _tick_rate_ms(os.getenv("DICE_TICK_RATE_MS", str(TICK_RATE_MS)))

    # Logging (to a file, the terminal belongs to the UI)
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
    LOG_FILE: Path = Path(os.getenv("LOG_FILE", "./data/dice_roller.log"))

    @classmethod
    def ensure_directories(cls) -> None:
        """Create necessary directories if they don't exist."""
        cls.LOG_FILE.parent.mkdir(parents=True, exist_ok=True)


settings = Config()
