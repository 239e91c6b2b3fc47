"""Piece-rotation controllers for non-human players.

Albert rotates on a randomised schedule: every interval is drawn uniformly
from ``AlbertConfig.interval_bounds()``, so the switch timing cannot be
learned as a fixed rhythm. The schedule is lazy; a player whose
``rot_period`` is ``None`` draws one on its next update.
"""

from __future__ import annotations

from collections.abc import Callable

from handlords.config.types import AlbertConfig
from handlords.domain.grid import Cell, CellKind, Grid, Piece
from handlords.domain.rng import GameRng
from handlords.domain.state import GameState, PlayerState

AiController = Callable[[GameState, PlayerState], bool]


def draw_rotation_period(rng: GameRng, config: AlbertConfig) -> int:
    """Draw one interval in ``[max(1, avg - half), avg + half]``."""
    low, high = config.interval_bounds()
    return low + rng.next_u16() % (high - low + 1)


def repaint_territory(grid: Grid, owner: int, piece: Piece) -> int:
    """Set *piece* on every symbol owned by *owner*; return the cell count."""
    painted = 0
    for i, cell in enumerate(grid.cells):
        if cell.kind == CellKind.SYMBOL and cell.owner == owner:
            if cell.piece != piece:
                grid.cells[i] = Cell.symbol(owner, piece)
            painted += 1
    return painted


def rotate_player(state: GameState, player: PlayerState) -> None:
    """Advance *player* to the next piece, stamp the tick and repaint its cells."""
    player.current = player.current.next()
    player.last_rot_tick = state.tick
    repaint_territory(state.grid, player.player_id, player.current)


def ticks_until_rotation(state: GameState, player: PlayerState) -> int | None:
    """Remaining ticks before the scheduled rotation, or ``None`` if unscheduled."""
    if player.rot_period is None:
        return None
    return player.rot_period - (state.tick - player.last_rot_tick)


def update_albert(state: GameState, player: PlayerState) -> bool:
    """Run one Albert update; return whether the player rotated."""
    if player.rot_period is None:
        player.rot_period = draw_rotation_period(state.rng, state.albert)

    if state.tick - player.last_rot_tick < player.rot_period:
        return False
    rotate_player(state, player)
    player.rot_period = draw_rotation_period(state.rng, state.albert)
    return True


AI_CONTROLLERS: dict[str, AiController] = {
    "albert": update_albert,
}


def run_ai_controllers(state: GameState) -> list[int]:
    """Update every AI-controlled player; return the ids that rotated."""
    rotated: list[int] = []
    for player in state.players:
        if player.controller is None:
            continue
        controller = AI_CONTROLLERS.get(player.controller)
        if controller is None:
            raise ValueError(f"unknown AI controller: {player.controller}")
        if controller(state, player):
            rotated.append(player.player_id)
    return rotated
