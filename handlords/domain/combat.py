"""Random-pair duel resolution.

Each attempt samples a cell and one of its four cardinal neighbours and
applies the duel rules to the ordered pair:

- a wall on either side, two empties, or two cells of the same owner: inert
- empty next to a symbol: the empty slot becomes a copy of the symbol
- different owners, same piece: coin flip on the low bit of one draw
- different owners, different pieces: Rock > Scissors > Paper > Rock

The loser's slot receives a copy of the winner's cell and the loser's
``tick_losses`` counter increments. Neighbours that fall outside the grid
discard the attempt without counting it in any category.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum

from handlords.domain.grid import Cell, Grid
from handlords.domain.state import DuelStats, GameState


class Direction(IntEnum):
    NORTH = 0
    EAST = 1
    SOUTH = 2
    WEST = 3


_OFFSETS: dict[Direction, tuple[int, int]] = {
    Direction.NORTH: (0, -1),
    Direction.EAST: (1, 0),
    Direction.SOUTH: (0, 1),
    Direction.WEST: (-1, 0),
}


class PairOutcome(Enum):
    """What one attempt did to the grid."""

    OUT_OF_BOUNDS = "out_of_bounds"
    INERT = "inert"
    EXPANSION = "expansion"
    FIRST_WINS = "first_wins"
    SECOND_WINS = "second_wins"


class PairCategory(Enum):
    """Statistics bucket, decided from pre-duel contents."""

    BATTLE = "battle"
    SAME_PLAYER = "same_player"
    WALL_EMPTY = "wall_empty"


@dataclass(frozen=True)
class PairTrace:
    """Record of one attempt, kept when a trace list is passed to ``resolve_pairs``."""

    x: int
    y: int
    nx: int
    ny: int
    category: PairCategory | None
    outcome: PairOutcome


def pick_neighbor(x: int, y: int, r: int) -> tuple[int, int]:
    """Cardinal neighbour of (x, y) selected by the low two bits of *r*."""
    dx, dy = _OFFSETS[Direction(r & 3)]
    return x + dx, y + dy


def classify_pair(a: Cell, b: Cell) -> PairCategory:
    if not (a.is_symbol and b.is_symbol):
        return PairCategory.WALL_EMPTY
    if a.owner == b.owner:
        return PairCategory.SAME_PLAYER
    return PairCategory.BATTLE


def _record_loss(state: GameState, loser: int) -> None:
    player = state.player(loser)
    if player is not None:
        player.tick_losses += 1


def resolve_pair(state: GameState, x: int, y: int, nx: int, ny: int) -> PairOutcome:
    """Apply the duel rules to the cells at (x, y) and (nx, ny)."""
    grid: Grid = state.grid
    if not grid.in_bounds(nx, ny):
        return PairOutcome.OUT_OF_BOUNDS

    a = grid.at(x, y)
    b = grid.at(nx, ny)

    if a.is_wall or b.is_wall:
        return PairOutcome.INERT
    if a.is_empty and b.is_empty:
        return PairOutcome.INERT
    if a.is_empty:
        grid.put(x, y, b)
        return PairOutcome.EXPANSION
    if b.is_empty:
        grid.put(nx, ny, a)
        return PairOutcome.EXPANSION
    if a.owner == b.owner:
        return PairOutcome.INERT

    if a.piece == b.piece:
        first_wins = bool(state.rng.next_u16() & 1)
    else:
        first_wins = a.piece.beats(b.piece)

    if first_wins:
        grid.put(nx, ny, a)
        _record_loss(state, b.owner)
        return PairOutcome.FIRST_WINS
    grid.put(x, y, b)
    _record_loss(state, a.owner)
    return PairOutcome.SECOND_WINS


def resolve_pairs(
    state: GameState, attempts: int, trace: list[PairTrace] | None = None
) -> DuelStats:
    """Run *attempts* random duels and store the tick's statistics on *state*."""
    grid = state.grid
    stats = DuelStats(attempts=attempts)
    for _ in range(attempts):
        x = state.rng.next_u16() % grid.width
        y = state.rng.next_u16() % grid.height
        nx, ny = pick_neighbor(x, y, state.rng.next_u16())

        category: PairCategory | None = None
        if grid.in_bounds(nx, ny):
            category = classify_pair(grid.at(x, y), grid.at(nx, ny))
            if category == PairCategory.BATTLE:
                stats.battles += 1
            elif category == PairCategory.SAME_PLAYER:
                stats.same_player += 1
            else:
                stats.wall_empty += 1

        outcome = resolve_pair(state, x, y, nx, ny)
        if trace is not None:
            trace.append(PairTrace(x, y, nx, ny, category, outcome))

    state.last_stats = stats
    state.battle_history.append(stats.battles)
    return stats
