"""Aggregate game state threaded through every core operation."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from enum import Enum

from handlords.config.constants import (
    ALBERT_PLAYER_ID,
    COMBAT_HISTORY_TICKS,
    DEFAULT_LEVEL,
    GRID_HEIGHT,
    GRID_WIDTH,
    HUMAN_PLAYER_ID,
    LFSR_DEFAULT_SEED,
)
from handlords.config.types import AlbertConfig, GameConfig, RngKind
from handlords.domain.grid import Grid, Piece
from handlords.domain.levels import load_level
from handlords.domain.rng import GameRng


class Phase(Enum):
    """Game flow states. ``GAME_WON`` is reserved for multi-level progression."""

    READY = "ready"
    PLAYING = "playing"
    LOST = "lost"
    WON = "won"
    GAME_WON = "game_won"


@dataclass
class PlayerState:
    """One participant. ``rot_period`` is ``None`` until a rotation is scheduled."""

    player_id: int
    default_piece: Piece = Piece.ROCK
    controller: str | None = None
    current: Piece = field(init=False)
    last_rot_tick: int = 0
    rot_period: int | None = None
    tick_losses: int = 0

    def __post_init__(self) -> None:
        self.current = self.default_piece

    @property
    def is_human(self) -> bool:
        return self.controller is None

    def reset(self) -> None:
        self.current = self.default_piece
        self.last_rot_tick = 0
        self.rot_period = None
        self.tick_losses = 0


@dataclass
class DuelStats:
    """Pair classification counts for one tick. Observability only."""

    attempts: int = 0
    battles: int = 0
    same_player: int = 0
    wall_empty: int = 0

    @property
    def efficiency(self) -> float:
        """Share of attempts that were battles between different players."""
        return self.battles / self.attempts if self.attempts > 0 else 0.0


def default_players() -> list[PlayerState]:
    """Human on Rock versus Albert on Scissors."""
    return [
        PlayerState(player_id=HUMAN_PLAYER_ID, default_piece=Piece.ROCK),
        PlayerState(player_id=ALBERT_PLAYER_ID, default_piece=Piece.SCISSORS, controller="albert"),
    ]


@dataclass
class GameState:
    """Everything the simulation reads or writes; there is no global state."""

    grid: Grid
    rng: GameRng
    players: list[PlayerState]
    config: GameConfig = field(default_factory=GameConfig)
    albert: AlbertConfig = field(default_factory=AlbertConfig)
    level: int = DEFAULT_LEVEL
    phase: Phase = Phase.READY
    tick: int = 0
    last_stats: DuelStats = field(default_factory=DuelStats)
    battle_history: deque[int] = field(
        default_factory=lambda: deque(maxlen=COMBAT_HISTORY_TICKS)
    )

    @classmethod
    def create(
        cls,
        *,
        width: int = GRID_WIDTH,
        height: int = GRID_HEIGHT,
        seed: int = LFSR_DEFAULT_SEED,
        rng_kind: RngKind = RngKind.LFSR,
        system_seed: int | None = None,
        level: int = DEFAULT_LEVEL,
        config: GameConfig | None = None,
        albert: AlbertConfig | None = None,
        players: list[PlayerState] | None = None,
    ) -> GameState:
        """Build a Ready-phase state with *level* loaded."""
        state = cls(
            grid=Grid(width=width, height=height),
            rng=GameRng(seed=seed, kind=rng_kind, system_seed=system_seed),
            players=players if players is not None else default_players(),
            config=config or GameConfig(),
            albert=albert or AlbertConfig(),
            level=level,
        )
        load_level(state, level)
        return state

    @property
    def human(self) -> PlayerState:
        return self.players[HUMAN_PLAYER_ID]

    def player(self, player_id: int) -> PlayerState | None:
        if 0 <= player_id < len(self.players):
            return self.players[player_id]
        return None

    @property
    def battles_per_second(self) -> int:
        """Battles summed over the most recent ``COMBAT_HISTORY_TICKS`` ticks."""
        return sum(self.battle_history)
