"""Tests for handlords.domain.grid."""

from __future__ import annotations

import pytest

from handlords.domain.grid import BEATS, EMPTY_CELL, WALL_CELL, Cell, CellKind, Grid, Piece


class TestPiece:
    def test_rotation_cycles(self) -> None:
        assert Piece.ROCK.next() is Piece.PAPER
        assert Piece.PAPER.next() is Piece.SCISSORS
        assert Piece.SCISSORS.next() is Piece.ROCK

    def test_dominance(self) -> None:
        assert Piece.ROCK.beats(Piece.SCISSORS)
        assert Piece.SCISSORS.beats(Piece.PAPER)
        assert Piece.PAPER.beats(Piece.ROCK)

    def test_never_beaten_in_reverse(self) -> None:
        for winner, loser in BEATS.items():
            assert not loser.beats(winner)
            assert not winner.beats(winner)

    def test_glyphs(self) -> None:
        assert [p.glyph for p in Piece] == ["R", "P", "S"]


class TestCell:
    def test_default_is_empty(self) -> None:
        assert EMPTY_CELL.kind == CellKind.EMPTY
        assert EMPTY_CELL.is_empty

    def test_symbol_is_value(self) -> None:
        assert Cell.symbol(1, Piece.PAPER) == Cell(CellKind.SYMBOL, 1, Piece.PAPER)
        assert Cell.symbol(1, Piece.PAPER).is_symbol

    def test_wall(self) -> None:
        assert WALL_CELL.is_wall


class TestGrid:
    def test_default_size_and_fill(self) -> None:
        grid = Grid()
        assert (grid.width, grid.height) == (40, 24)
        assert len(grid.cells) == 40 * 24
        assert all(c == EMPTY_CELL for c in grid.cells)

    def test_linear_index_is_row_major(self) -> None:
        grid = Grid(width=5, height=3)
        assert grid.index(0, 0) == 0
        assert grid.index(4, 0) == 4
        assert grid.index(0, 1) == 5
        assert grid.index(4, 2) == 14

    def test_put_and_at(self) -> None:
        grid = Grid(width=5, height=3)
        cell = Cell.symbol(0, Piece.ROCK)
        grid.put(2, 1, cell)
        assert grid.at(2, 1) == cell
        assert grid.cells[7] == cell

    @pytest.mark.parametrize(("x", "y"), [(-1, 0), (0, -1), (5, 0), (0, 3)])
    def test_out_of_bounds_access_raises(self, x: int, y: int) -> None:
        grid = Grid(width=5, height=3)
        assert not grid.in_bounds(x, y)
        with pytest.raises(IndexError):
            grid.at(x, y)
        with pytest.raises(IndexError):
            grid.put(x, y, WALL_CELL)

    def test_clear(self) -> None:
        grid = Grid(width=3, height=3)
        grid.put(1, 1, WALL_CELL)
        grid.clear()
        assert all(c.is_empty for c in grid.cells)

    def test_coords_follow_linear_order(self) -> None:
        grid = Grid(width=3, height=2)
        coords = list(grid.coords())
        assert coords == [(0, 0), (1, 0), (2, 0), (0, 1), (1, 1), (2, 1)]
        assert [grid.index(x, y) for x, y in coords] == list(range(6))

    def test_border(self) -> None:
        grid = Grid(width=4, height=4)
        assert grid.is_border(0, 2)
        assert grid.is_border(3, 3)
        assert not grid.is_border(1, 2)

    def test_rejects_empty_dimensions(self) -> None:
        with pytest.raises(ValueError):
            Grid(width=0, height=3)
