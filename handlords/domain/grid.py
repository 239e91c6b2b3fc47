"""Fixed-size arena grid and its cell values."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import IntEnum

from handlords.config.constants import GRID_HEIGHT, GRID_WIDTH


class CellKind(IntEnum):
    EMPTY = 0
    WALL = 1
    SYMBOL = 2


class Piece(IntEnum):
    ROCK = 0
    PAPER = 1
    SCISSORS = 2

    def next(self) -> Piece:
        """Cyclic rotation Rock -> Paper -> Scissors -> Rock."""
        return Piece((self + 1) % len(Piece))

    def beats(self, other: Piece) -> bool:
        return BEATS[self] is other

    @property
    def glyph(self) -> str:
        return self.name[0]


# What each piece beats
BEATS: dict[Piece, Piece] = {
    Piece.ROCK: Piece.SCISSORS,
    Piece.SCISSORS: Piece.PAPER,
    Piece.PAPER: Piece.ROCK,
}


@dataclass(frozen=True)
class Cell:
    """One grid slot. ``owner`` and ``piece`` only mean something for symbols.

    Cells are immutable values: copying a winner onto a loser stores the
    winner's value in the loser's slot, so kind, owner and piece always
    travel together.
    """

    kind: CellKind = CellKind.EMPTY
    owner: int = 0
    piece: Piece = Piece.ROCK

    @classmethod
    def symbol(cls, owner: int, piece: Piece) -> Cell:
        return cls(kind=CellKind.SYMBOL, owner=owner, piece=piece)

    @property
    def is_symbol(self) -> bool:
        return self.kind == CellKind.SYMBOL

    @property
    def is_wall(self) -> bool:
        return self.kind == CellKind.WALL

    @property
    def is_empty(self) -> bool:
        return self.kind == CellKind.EMPTY


EMPTY_CELL = Cell()
WALL_CELL = Cell(kind=CellKind.WALL)


@dataclass
class Grid:
    """Row-major ``width * height`` array of cells, linear index ``y * width + x``."""

    width: int = GRID_WIDTH
    height: int = GRID_HEIGHT
    cells: list[Cell] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        if self.width < 1 or self.height < 1:
            raise ValueError("grid dimensions must be >= 1")
        self.cells = [EMPTY_CELL] * (self.width * self.height)

    def index(self, x: int, y: int) -> int:
        return y * self.width + x

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def at(self, x: int, y: int) -> Cell:
        if not self.in_bounds(x, y):
            raise IndexError(f"cell ({x}, {y}) outside {self.width}x{self.height} grid")
        return self.cells[self.index(x, y)]

    def put(self, x: int, y: int, cell: Cell) -> None:
        if not self.in_bounds(x, y):
            raise IndexError(f"cell ({x}, {y}) outside {self.width}x{self.height} grid")
        self.cells[self.index(x, y)] = cell

    def clear(self) -> None:
        self.cells = [EMPTY_CELL] * (self.width * self.height)

    def coords(self) -> Iterator[tuple[int, int]]:
        """Yield every (x, y) in linear-index order."""
        for y in range(self.height):
            for x in range(self.width):
                yield x, y

    def is_border(self, x: int, y: int) -> bool:
        return x in (0, self.width - 1) or y in (0, self.height - 1)
