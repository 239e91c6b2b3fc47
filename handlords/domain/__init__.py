"""Domain layer: grid model, random streams, levels, duels and AI."""

from handlords.domain.ai import (
    AI_CONTROLLERS,
    draw_rotation_period,
    repaint_territory,
    rotate_player,
    run_ai_controllers,
    ticks_until_rotation,
    update_albert,
)
from handlords.domain.combat import (
    Direction,
    PairCategory,
    PairOutcome,
    PairTrace,
    classify_pair,
    pick_neighbor,
    resolve_pair,
    resolve_pairs,
)
from handlords.domain.grid import BEATS, EMPTY_CELL, WALL_CELL, Cell, CellKind, Grid, Piece
from handlords.domain.levels import LEVEL_LOADERS, load_level
from handlords.domain.rng import GameRng, Lfsr16, SystemRng
from handlords.domain.state import DuelStats, GameState, Phase, PlayerState, default_players

__all__ = [
    "AI_CONTROLLERS",
    "BEATS",
    "Cell",
    "CellKind",
    "Direction",
    "DuelStats",
    "EMPTY_CELL",
    "GameRng",
    "GameState",
    "Grid",
    "LEVEL_LOADERS",
    "Lfsr16",
    "PairCategory",
    "PairOutcome",
    "PairTrace",
    "Phase",
    "Piece",
    "PlayerState",
    "SystemRng",
    "WALL_CELL",
    "classify_pair",
    "default_players",
    "draw_rotation_period",
    "load_level",
    "pick_neighbor",
    "repaint_territory",
    "resolve_pair",
    "resolve_pairs",
    "rotate_player",
    "run_ai_controllers",
    "ticks_until_rotation",
    "update_albert",
]
