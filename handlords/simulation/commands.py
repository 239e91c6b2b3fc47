"""Commands accepted from the input and tuning surfaces.

Phase-gated commands return ``False`` and leave the state untouched when
their precondition does not hold. Tuning commands accept any phase and
return the clamped value actually stored.
"""

from __future__ import annotations

import logging

from handlords.config.constants import ALBERT_PLAYER_ID
from handlords.domain.ai import rotate_player
from handlords.domain.levels import load_level
from handlords.domain.state import DuelStats, GameState, Phase, PlayerState

logger = logging.getLogger(__name__)


def _reject(command: str, state: GameState) -> bool:
    logger.debug("%s ignored in phase %s", command, state.phase.value)
    return False


def _albert(state: GameState) -> PlayerState | None:
    player = state.player(ALBERT_PLAYER_ID)
    if player is None or player.controller != "albert":
        return None
    return player


# ---------------------------------------------------------------------------
# Game flow
# ---------------------------------------------------------------------------


def start_game(state: GameState) -> bool:
    if state.phase != Phase.READY:
        return _reject("start_game", state)
    state.phase = Phase.PLAYING
    logger.info("level %d started", state.level)
    return True


def rotate_human_piece(state: GameState) -> bool:
    if state.phase != Phase.PLAYING:
        return _reject("rotate_human_piece", state)
    rotate_player(state, state.human)
    return True


def restart_level(state: GameState) -> bool:
    """Back to Ready with tick 0, default pieces, cleared schedules and a fresh level."""
    if state.phase not in (Phase.WON, Phase.LOST):
        return _reject("restart_level", state)
    state.phase = Phase.READY
    state.tick = 0
    for player in state.players:
        player.reset()
    state.last_stats = DuelStats()
    state.battle_history.clear()
    load_level(state, state.level)
    return True


# ---------------------------------------------------------------------------
# Tuning
# ---------------------------------------------------------------------------


def set_pairs_per_tick(state: GameState, value: int) -> int:
    return state.config.set_pairs_per_tick(value)


def set_ticks_per_second(state: GameState, value: int) -> int:
    return state.config.set_ticks_per_second(value)


def reset_game_config(state: GameState) -> None:
    state.config.reset()


def set_albert_rotation_average(state: GameState, value: int) -> int:
    return state.albert.set_rotation_average(value)


def set_albert_rotation_half_interval(state: GameState, value: int) -> int:
    return state.albert.set_rotation_half_interval(value)


# ---------------------------------------------------------------------------
# Debug overrides
# ---------------------------------------------------------------------------


def force_albert_rotation(state: GameState) -> bool:
    """Rotate Albert now; the next AI update schedules a fresh interval."""
    albert = _albert(state)
    if albert is None:
        return False
    rotate_player(state, albert)
    albert.rot_period = None
    return True


def reset_albert_timer(state: GameState) -> bool:
    albert = _albert(state)
    if albert is None:
        return False
    albert.rot_period = None
    return True


def reset_albert_config(state: GameState) -> None:
    state.albert.reset()
    reset_albert_timer(state)
