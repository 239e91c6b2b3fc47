"""Configuration dataclasses for live tuning and headless match runs.

``GameConfig`` and ``AlbertConfig`` are mutable: they are edited while the
simulation runs and clamp out-of-range values instead of failing.
``MatchConfig`` parameterises one offline run and is validated up front.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum

from handlords.config.constants import (
    ALBERT_ROTATION_AVERAGE,
    ALBERT_ROTATION_AVERAGE_RANGE,
    ALBERT_ROTATION_HALF_INTERVAL,
    ALBERT_ROTATION_HALF_INTERVAL_RANGE,
    DEFAULT_LEVEL,
    LFSR_DEFAULT_SEED,
    MAX_MATCH_TICKS,
    PAIRS_PER_TICK,
    PAIRS_PER_TICK_RANGE,
    RNG_MASK,
    TICKS_PER_SECOND,
    TICKS_PER_SECOND_RANGE,
)

__all__ = [
    "AlbertConfig",
    "GameConfig",
    "MatchConfig",
    "MatchResult",
    "RngKind",
    "clamp",
]

logger = logging.getLogger(__name__)


def clamp(value: int, bounds: tuple[int, int], name: str = "value") -> int:
    """Clamp *value* into the inclusive *bounds*, logging any adjustment."""
    low, high = bounds
    clamped = max(low, min(high, int(value)))
    if clamped != value:
        logger.debug("%s=%s clamped to %s (range %s..%s)", name, value, clamped, low, high)
    return clamped


class RngKind(Enum):
    """Random stream strategies selectable at runtime."""

    LFSR = "lfsr"
    SYSTEM = "system"


# ---------------------------------------------------------------------------
# Live tuning
# ---------------------------------------------------------------------------


@dataclass
class GameConfig:
    """Run parameters read at the start of every tick."""

    pairs_per_tick: int = PAIRS_PER_TICK
    ticks_per_second: int = TICKS_PER_SECOND

    def __post_init__(self) -> None:
        self.set_pairs_per_tick(self.pairs_per_tick)
        self.set_ticks_per_second(self.ticks_per_second)

    def set_pairs_per_tick(self, value: int) -> int:
        self.pairs_per_tick = clamp(value, PAIRS_PER_TICK_RANGE, "pairs_per_tick")
        return self.pairs_per_tick

    def set_ticks_per_second(self, value: int) -> int:
        self.ticks_per_second = clamp(value, TICKS_PER_SECOND_RANGE, "ticks_per_second")
        return self.ticks_per_second

    @property
    def tick_duration(self) -> float:
        """Seconds of wall-clock time per simulation tick."""
        return 1.0 / self.ticks_per_second

    def reset(self) -> None:
        self.pairs_per_tick = PAIRS_PER_TICK
        self.ticks_per_second = TICKS_PER_SECOND


@dataclass
class AlbertConfig:
    """Rotation-interval distribution of the Albert controller.

    Edits only influence the next interval draw; an interval already
    scheduled on a player is left alone.
    """

    rotation_average: int = ALBERT_ROTATION_AVERAGE
    rotation_half_interval: int = ALBERT_ROTATION_HALF_INTERVAL

    def __post_init__(self) -> None:
        self.set_rotation_average(self.rotation_average)
        self.set_rotation_half_interval(self.rotation_half_interval)

    def set_rotation_average(self, value: int) -> int:
        self.rotation_average = clamp(value, ALBERT_ROTATION_AVERAGE_RANGE, "rotation_average")
        return self.rotation_average

    def set_rotation_half_interval(self, value: int) -> int:
        self.rotation_half_interval = clamp(
            value, ALBERT_ROTATION_HALF_INTERVAL_RANGE, "rotation_half_interval"
        )
        return self.rotation_half_interval

    def interval_bounds(self) -> tuple[int, int]:
        """Inclusive (min, max) rotation interval in ticks; min is at least 1."""
        low = max(1, self.rotation_average - self.rotation_half_interval)
        high = max(low, self.rotation_average + self.rotation_half_interval)
        return low, high

    def reset(self) -> None:
        self.rotation_average = ALBERT_ROTATION_AVERAGE
        self.rotation_half_interval = ALBERT_ROTATION_HALF_INTERVAL


# ---------------------------------------------------------------------------
# Headless runs
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class MatchConfig:
    """Parameters for one headless match, from game start to outcome or cap."""

    max_ticks: int = 2_000
    seed: int = LFSR_DEFAULT_SEED
    rng_kind: RngKind = RngKind.LFSR
    system_seed: int | None = None
    level: int = DEFAULT_LEVEL
    pairs_per_tick: int = PAIRS_PER_TICK
    ticks_per_second: int = TICKS_PER_SECOND
    rotation_average: int = ALBERT_ROTATION_AVERAGE
    rotation_half_interval: int = ALBERT_ROTATION_HALF_INTERVAL
    human_rotate_every: int = 0
    """Rotate the human piece every N ticks; 0 leaves the human idle."""

    def __post_init__(self) -> None:
        if self.max_ticks < 1:
            raise ValueError("max_ticks must be >= 1")
        if self.max_ticks > MAX_MATCH_TICKS:
            raise ValueError(f"max_ticks must be <= {MAX_MATCH_TICKS}")
        if not 0 < self.seed <= RNG_MASK:
            raise ValueError("seed must be a non-zero 16-bit value")
        if self.level < 1:
            raise ValueError("level must be >= 1")
        if self.human_rotate_every < 0:
            raise ValueError("human_rotate_every must be >= 0")
        for name, bounds in (
            ("pairs_per_tick", PAIRS_PER_TICK_RANGE),
            ("ticks_per_second", TICKS_PER_SECOND_RANGE),
            ("rotation_average", ALBERT_ROTATION_AVERAGE_RANGE),
            ("rotation_half_interval", ALBERT_ROTATION_HALF_INTERVAL_RANGE),
        ):
            value = getattr(self, name)
            if not bounds[0] <= value <= bounds[1]:
                raise ValueError(f"{name} must be in [{bounds[0]}, {bounds[1]}]")

    def game_config(self) -> GameConfig:
        return GameConfig(
            pairs_per_tick=self.pairs_per_tick,
            ticks_per_second=self.ticks_per_second,
        )

    def albert_config(self) -> AlbertConfig:
        return AlbertConfig(
            rotation_average=self.rotation_average,
            rotation_half_interval=self.rotation_half_interval,
        )

    def to_metadata(self) -> dict[str, object]:
        """JSON-ready view used in match payloads and for replays."""
        return {
            "max_ticks": self.max_ticks,
            "seed": self.seed,
            "rng_kind": self.rng_kind.value,
            "system_seed": self.system_seed,
            "level": self.level,
            "pairs_per_tick": self.pairs_per_tick,
            "ticks_per_second": self.ticks_per_second,
            "rotation_average": self.rotation_average,
            "rotation_half_interval": self.rotation_half_interval,
            "human_rotate_every": self.human_rotate_every,
        }

    @classmethod
    def from_metadata(cls, metadata: dict[str, object]) -> MatchConfig:
        """Rebuild a config from ``to_metadata`` output."""
        values = dict(metadata)
        values["rng_kind"] = RngKind(values.get("rng_kind", RngKind.LFSR.value))
        known = set(cls.__dataclass_fields__)
        return cls(**{k: v for k, v in values.items() if k in known})  # type: ignore[arg-type]


@dataclass(frozen=True)
class MatchResult:
    """Top-level result for one headless match."""

    run_id: str
    outcome: str
    ticks: int
    territory: tuple[int, ...] = field(default_factory=tuple)
