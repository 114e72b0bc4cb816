"""
Deterministic random number source.

Wraps numpy's PCG64 bit generator so that every roll can be reproduced from
a seed string, and so the generator can be saved and resumed exactly from
its (state, increment) pair.
"""
import hashlib
from dataclasses import dataclass

import numpy as np

from shared.constants import RNG_STATE_BITS


_UINT64_MASK = (1 << 64) - 1
_UINT128_LIMIT = 1 << RNG_STATE_BITS


@dataclass(frozen=True)
class RngState:
    """Internal state of a PCG64 generator."""
    state: int
    increment: int

    def __post_init__(self):
        for name in ("state", "increment"):
            value = getattr(self, name)
            if not isinstance(value, int) or not 0 <= value < _UINT128_LIMIT:
                raise ValueError(f"RNG {name} must be an unsigned 128-bit integer, got {value!r}")
        if self.increment % 2 == 0:
            raise ValueError(f"PCG64 increment must be odd, got {self.increment}")

    def as_tuple(self) -> tuple[int, int]:
        return self.state, self.increment


class RngSource:
    """
    Seedable generator used for every roll.

    Only raw 64-bit outputs are drawn from the bit generator, so the
    (state, increment) pair is the complete state: there is never a
    buffered half-word to lose when saving.
    """

    def __init__(self, bit_generator: np.random.PCG64):
        self._bit_generator = bit_generator

    @classmethod
    def seed_from(cls, text: str) -> "RngSource":
        """
        Create a generator from an arbitrary string.

        The same text always produces the same sequence, on any machine.
        """
        digest = hashlib.sha256(text.encode("utf-8")).digest()
        seed = int.from_bytes(digest, "little")
        return cls(np.random.PCG64(seed))

    @classmethod
    def restore_state(cls, saved: RngState) -> "RngSource":
        """Create a generator that continues exactly from a saved state."""
        bit_generator = np.random.PCG64()
        bit_generator.state = {
            "bit_generator": "PCG64",
            "state": {"state": saved.state, "inc": saved.increment},
            "has_uint32": 0,
            "uinteger": 0,
        }
        return cls(bit_generator)

    def export_state(self) -> RngState:
        """Return the current state without advancing the generator."""
        internal = self._bit_generator.state["state"]
        return RngState(state=int(internal["state"]), increment=int(internal["inc"]))

    def roll(self, lower: int, upper: int) -> int:
        """
        Return an integer uniformly distributed over [lower, upper].

        Uses Lemire's multiply-shift reduction on one 64-bit output. A draw
        is rejected only when it falls in the biased remainder, which for
        die-sized ranges practically never happens.
        """
        if lower > upper:
            raise ValueError(f"Empty range: [{lower}, {upper}]")

        span = upper - lower + 1
        threshold = (1 << 64) % span
        while True:
            product = self._next_raw() * span
            if (product & _UINT64_MASK) >= threshold:
                return lower + (product >> 64)

    def _next_raw(self) -> int:
        return int(self._bit_generator.random_raw())
