"""Fixed-timestep accumulator decoupling ticks from the caller's frame rate."""

from __future__ import annotations

import logging

from handlords.domain.state import GameState
from handlords.simulation.engine import step_fixed

logger = logging.getLogger(__name__)


class FixedStepClock:
    """Accumulates wall-clock time and runs every tick that has come due.

    Due ticks always execute as separate ``step_fixed`` calls. The tick
    duration is re-read from ``state.config`` before each tick, so a rate
    change applies from the next tick on. At most ``max_ticks_per_advance``
    ticks run per call; any further backlog stays in the accumulator and
    runs on later calls.
    """

    def __init__(self, max_ticks_per_advance: int = 240) -> None:
        if max_ticks_per_advance < 1:
            raise ValueError("max_ticks_per_advance must be >= 1")
        self.max_ticks_per_advance = max_ticks_per_advance
        self.accumulator = 0.0

    def advance(self, state: GameState, elapsed: float) -> int:
        """Add *elapsed* seconds and return the number of ticks run."""
        self.accumulator += max(0.0, elapsed)
        ticks = 0
        while (
            ticks < self.max_ticks_per_advance
            and self.accumulator >= state.config.tick_duration
        ):
            step_fixed(state)
            self.accumulator -= state.config.tick_duration
            ticks += 1
        if self.accumulator >= state.config.tick_duration:
            logger.debug("deferring %.3fs of simulation backlog", self.accumulator)
        return ticks

    def reset(self) -> None:
        self.accumulator = 0.0
