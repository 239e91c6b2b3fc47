"""Level layouts: walls and starting territories."""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING

from handlords.domain.grid import WALL_CELL, Cell

if TYPE_CHECKING:
    from handlords.domain.state import GameState


def _paint_border(state: GameState) -> None:
    grid = state.grid
    for x in range(grid.width):
        grid.put(x, 0, WALL_CELL)
        grid.put(x, grid.height - 1, WALL_CELL)
    for y in range(grid.height):
        grid.put(0, y, WALL_CELL)
        grid.put(grid.width - 1, y, WALL_CELL)


def _load_level_one(state: GameState) -> None:
    """Walled arena split down the middle: left half player 0, right half player 1."""
    grid = state.grid
    _paint_border(state)
    left, right = state.players[0], state.players[1]
    for y in range(1, grid.height - 1):
        for x in range(1, grid.width - 1):
            owner = left if x < grid.width // 2 else right
            grid.put(x, y, Cell.symbol(owner.player_id, owner.current))


LEVEL_LOADERS: dict[int, Callable[[GameState], None]] = {
    1: _load_level_one,
}


def load_level(state: GameState, level_id: int) -> None:
    """Clear the grid and repopulate it for *level_id*."""
    try:
        loader = LEVEL_LOADERS[level_id]
    except KeyError as exc:
        valid = ", ".join(str(k) for k in sorted(LEVEL_LOADERS))
        raise ValueError(f"level must be one of {valid}") from exc
    state.grid.clear()
    state.level = level_id
    loader(state)
