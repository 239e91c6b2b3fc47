"""16-bit random streams shared by every simulation component.

``GameRng`` is the only source of randomness in the core. It fronts two
interchangeable strategies: a replayable LFSR and a non-reproducible
Mersenne Twister. Switching takes effect on the next draw; the LFSR keeps
its state while idle and resumes where it stopped.
"""

from __future__ import annotations

from random import Random
from typing import Protocol

from handlords.config.constants import LFSR_DEFAULT_SEED, RNG_MASK
from handlords.config.types import RngKind


class RngStrategy(Protocol):
    """Anything that yields 16-bit values."""

    kind: RngKind

    def next_u16(self) -> int: ...


class Lfsr16:
    """Fibonacci LFSR over 16 bits (polynomial 0xB400).

    Feedback is the XOR of bits 0, 2, 3 and 5 of the previous state, shifted
    in at bit 15. The all-zero state is a fixed point and is rejected.
    """

    kind = RngKind.LFSR

    def __init__(self, seed: int = LFSR_DEFAULT_SEED) -> None:
        seed &= RNG_MASK
        if seed == 0:
            raise ValueError("LFSR seed must be non-zero")
        self._state = seed

    @property
    def state(self) -> int:
        return self._state

    def next_u16(self) -> int:
        s = self._state
        bit = (s ^ (s >> 2) ^ (s >> 3) ^ (s >> 5)) & 1
        self._state = (s >> 1) | (bit << 15)
        return self._state


class SystemRng:
    """Mersenne Twister draws masked to 16 bits."""

    kind = RngKind.SYSTEM

    def __init__(self, seed: int | None = None) -> None:
        self._rng = Random(seed)

    def next_u16(self) -> int:
        return self._rng.getrandbits(16) & RNG_MASK


class GameRng:
    """Single ``next_u16`` entry point with a swappable strategy."""

    def __init__(
        self,
        seed: int = LFSR_DEFAULT_SEED,
        kind: RngKind = RngKind.LFSR,
        system_seed: int | None = None,
    ) -> None:
        self.lfsr = Lfsr16(seed)
        self._system_seed = system_seed
        self._system: SystemRng | None = None
        self._active: RngStrategy = self.lfsr
        self.select(kind)

    @classmethod
    def from_strategy(cls, strategy: RngStrategy) -> GameRng:
        """Wrap an arbitrary strategy, e.g. a scripted stream in tests."""
        rng = cls()
        rng._active = strategy
        return rng

    @property
    def kind(self) -> RngKind:
        return self._active.kind

    @property
    def state(self) -> int:
        """Current LFSR register, reported regardless of the active strategy."""
        return self.lfsr.state

    def select(self, kind: RngKind) -> None:
        if kind == RngKind.LFSR:
            self._active = self.lfsr
        else:
            if self._system is None:
                self._system = SystemRng(self._system_seed)
            self._active = self._system

    def next_u16(self) -> int:
        return self._active.next_u16()
