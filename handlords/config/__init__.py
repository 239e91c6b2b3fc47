"""Configuration layer: constants and typed config dataclasses."""

from handlords.config.constants import (
    DEFAULT_LEVEL,
    GRID_HEIGHT,
    GRID_WIDTH,
    LFSR_DEFAULT_SEED,
    PAIRS_PER_TICK,
    TICKS_PER_SECOND,
)
from handlords.config.types import (
    AlbertConfig,
    GameConfig,
    MatchConfig,
    MatchResult,
    RngKind,
    clamp,
)

__all__ = [
    "AlbertConfig",
    "DEFAULT_LEVEL",
    "GRID_HEIGHT",
    "GRID_WIDTH",
    "GameConfig",
    "LFSR_DEFAULT_SEED",
    "MatchConfig",
    "MatchResult",
    "PAIRS_PER_TICK",
    "RngKind",
    "TICKS_PER_SECOND",
    "clamp",
]
