"""Tests for handlords.domain.ai."""

from __future__ import annotations

import pytest

from handlords.config.types import AlbertConfig, RngKind
from handlords.domain.ai import (
    draw_rotation_period,
    repaint_territory,
    rotate_player,
    run_ai_controllers,
    ticks_until_rotation,
    update_albert,
)
from handlords.domain.grid import CellKind, Piece
from handlords.domain.rng import GameRng
from handlords.domain.state import GameState, PlayerState


def _owned_pieces(state: GameState, owner: int) -> set[Piece]:
    return {c.piece for c in state.grid.cells if c.kind == CellKind.SYMBOL and c.owner == owner}


class TestDrawRotationPeriod:
    @pytest.mark.parametrize(
        ("average", "half"),
        [(58, 43), (10, 100), (200, 5), (10, 5), (100, 100)],
    )
    def test_draws_stay_in_bounds(self, average: int, half: int) -> None:
        config = AlbertConfig(rotation_average=average, rotation_half_interval=half)
        low, high = max(1, average - half), average + half
        rng = GameRng()
        draws = [draw_rotation_period(rng, config) for _ in range(5_000)]
        assert min(draws) >= low
        assert max(draws) <= high

    def test_uses_one_draw(self) -> None:
        rng = GameRng()
        draw_rotation_period(rng, AlbertConfig())
        assert rng.state == 0x5670

    def test_first_draw_from_default_seed(self) -> None:
        # 15 + 0x5670 % 87
        assert draw_rotation_period(GameRng(), AlbertConfig()) == 15 + 0x5670 % 87


class TestRepaint:
    def test_repaints_only_the_owner(self) -> None:
        state = GameState.create()
        painted = repaint_territory(state.grid, 1, Piece.PAPER)
        assert painted == 19 * 22
        assert _owned_pieces(state, 1) == {Piece.PAPER}
        assert _owned_pieces(state, 0) == {Piece.ROCK}

    def test_rotate_player_stamps_tick(self) -> None:
        state = GameState.create()
        state.tick = 12
        human = state.players[0]
        rotate_player(state, human)
        assert human.current == Piece.PAPER
        assert human.last_rot_tick == 12
        assert _owned_pieces(state, 0) == {Piece.PAPER}


class TestUpdateAlbert:
    def test_lazy_schedule_draws_without_rotating(self) -> None:
        state = GameState.create()
        albert = state.players[1]
        assert albert.rot_period is None
        assert update_albert(state, albert) is False
        low, high = state.albert.interval_bounds()
        assert albert.rot_period is not None
        assert low <= albert.rot_period <= high
        assert albert.current == Piece.SCISSORS

    def test_rotates_when_period_elapsed(self) -> None:
        state = GameState.create()
        albert = state.players[1]
        albert.rot_period = 5
        state.tick = 4
        assert update_albert(state, albert) is False
        state.tick = 5
        assert update_albert(state, albert) is True
        assert albert.current == Piece.ROCK
        assert albert.last_rot_tick == 5
        assert _owned_pieces(state, 1) == {Piece.ROCK}
        low, high = state.albert.interval_bounds()
        assert low <= albert.rot_period <= high

    def test_config_change_does_not_touch_scheduled_interval(self) -> None:
        state = GameState.create()
        albert = state.players[1]
        albert.rot_period = 7
        state.albert.set_rotation_average(200)
        state.albert.set_rotation_half_interval(5)
        state.tick = 3
        update_albert(state, albert)
        assert albert.rot_period == 7
        state.tick = 7
        update_albert(state, albert)
        assert 195 <= albert.rot_period <= 205

    def test_ticks_until_rotation(self) -> None:
        state = GameState.create()
        albert = state.players[1]
        assert ticks_until_rotation(state, albert) is None
        albert.rot_period = 30
        albert.last_rot_tick = 10
        state.tick = 25
        assert ticks_until_rotation(state, albert) == 15


class TestRunAiControllers:
    def test_human_is_skipped(self) -> None:
        state = GameState.create()
        state.players[1].rot_period = 1
        state.tick = 1
        assert run_ai_controllers(state) == [1]
        assert state.players[0].current == Piece.ROCK

    def test_unknown_controller_raises(self) -> None:
        state = GameState.create()
        state.players.append(PlayerState(player_id=2, controller="beatrix"))
        with pytest.raises(ValueError, match="beatrix"):
            run_ai_controllers(state)

    def test_rotation_timing_varies_under_system_rng(self) -> None:
        state = GameState.create(rng_kind=RngKind.SYSTEM, system_seed=99)
        periods = set()
        for _ in range(50):
            periods.add(draw_rotation_period(state.rng, state.albert))
        assert len(periods) > 5
