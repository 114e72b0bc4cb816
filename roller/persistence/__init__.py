"""
Persistence layer for the dice roller.

Stores rolls and RNG state in a plain text file so a session can be resumed.
"""

from roller.persistence.models import RollRecord
from roller.persistence.store import (
    RollStore,
    load_rng_state,
    MissingPersistedState,
    CorruptPersistedState,
)


__all__ = [
    # Models
    "RollRecord",

    # Store
    "RollStore",
    "load_rng_state",
    "MissingPersistedState",
    "CorruptPersistedState",
]
