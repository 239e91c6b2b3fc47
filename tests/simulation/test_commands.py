from __future__ import annotations

from handlords.config.constants import (
    ALBERT_ROTATION_AVERAGE,
    ALBERT_ROTATION_HALF_INTERVAL,
    PAIRS_PER_TICK,
    TICKS_PER_SECOND,
)
from handlords.domain.grid import CellKind, Piece
from handlords.domain.state import GameState, Phase
from handlords.simulation.commands import (
    force_albert_rotation,
    reset_albert_config,
    reset_albert_timer,
    reset_game_config,
    restart_level,
    rotate_human_piece,
    set_albert_rotation_average,
    set_albert_rotation_half_interval,
    set_pairs_per_tick,
    set_ticks_per_second,
    start_game,
)
from handlords.simulation.engine import step_fixed


def _pieces_of(state: GameState, owner: int) -> set[Piece]:
    return {
        cell.piece
        for cell in state.grid.cells
        if cell.kind == CellKind.SYMBOL and cell.owner == owner
    }


class TestGameFlow:
    def test_start_only_from_ready(self) -> None:
        state = GameState.create()
        assert start_game(state)
        assert state.phase == Phase.PLAYING
        assert not start_game(state)

    def test_rotate_ignored_outside_playing(self) -> None:
        state = GameState.create()
        assert not rotate_human_piece(state)
        assert state.human.current == Piece.ROCK

    def test_rotate_repaints_human_territory(self) -> None:
        state = GameState.create()
        start_game(state)
        state.tick = 7
        assert rotate_human_piece(state)
        assert state.human.current == Piece.PAPER
        assert state.human.last_rot_tick == 7
        assert _pieces_of(state, 0) == {Piece.PAPER}
        assert _pieces_of(state, 1) == {Piece.SCISSORS}

    def test_rotation_cycles(self) -> None:
        state = GameState.create()
        start_game(state)
        for _ in range(3):
            rotate_human_piece(state)
        assert state.human.current == Piece.ROCK

    def test_restart_ignored_while_playing(self) -> None:
        state = GameState.create()
        start_game(state)
        assert not restart_level(state)
        assert state.phase == Phase.PLAYING

    def test_restart_after_win_reloads_level(self) -> None:
        fresh = GameState.create()
        state = GameState.create()
        start_game(state)
        rotate_human_piece(state)
        for _ in range(3):
            step_fixed(state)
        state.phase = Phase.WON

        assert restart_level(state)
        assert state.phase == Phase.READY
        assert state.tick == 0
        assert state.grid.cells == fresh.grid.cells
        assert state.human.current == Piece.ROCK
        assert state.players[1].rot_period is None
        assert state.last_stats.attempts == 0
        assert len(state.battle_history) == 0

    def test_restart_keeps_rng_stream(self) -> None:
        state = GameState.create()
        start_game(state)
        step_fixed(state)
        rng_state = state.rng.state
        state.phase = Phase.LOST
        restart_level(state)
        assert state.rng.state == rng_state


class TestTuning:
    def test_values_are_clamped(self) -> None:
        state = GameState.create()
        assert set_pairs_per_tick(state, 9_999) == 500
        assert set_ticks_per_second(state, 1) == 5
        assert set_albert_rotation_average(state, 3) == 10
        assert set_albert_rotation_half_interval(state, 1_000) == 100
        assert state.config.pairs_per_tick == 500

    def test_tuning_allowed_in_any_phase(self) -> None:
        state = GameState.create()
        state.phase = Phase.WON
        assert set_pairs_per_tick(state, 100) == 100

    def test_reset_game_config(self) -> None:
        state = GameState.create()
        set_pairs_per_tick(state, 50)
        set_ticks_per_second(state, 30)
        reset_game_config(state)
        assert state.config.pairs_per_tick == PAIRS_PER_TICK
        assert state.config.ticks_per_second == TICKS_PER_SECOND


class TestAlbertOverrides:
    def test_force_rotation_repaints_and_reschedules(self) -> None:
        state = GameState.create()
        start_game(state)
        step_fixed(state)
        assert state.players[1].rot_period is not None
        assert force_albert_rotation(state)
        albert = state.players[1]
        assert albert.current == Piece.ROCK
        assert albert.last_rot_tick == state.tick
        assert albert.rot_period is None
        assert _pieces_of(state, 1) == {Piece.ROCK}

    def test_reset_timer(self) -> None:
        state = GameState.create()
        start_game(state)
        step_fixed(state)
        assert reset_albert_timer(state)
        assert state.players[1].rot_period is None

    def test_reset_albert_config(self) -> None:
        state = GameState.create()
        set_albert_rotation_average(state, 150)
        set_albert_rotation_half_interval(state, 20)
        state.players[1].rot_period = 99
        reset_albert_config(state)
        assert state.albert.rotation_average == ALBERT_ROTATION_AVERAGE
        assert state.albert.rotation_half_interval == ALBERT_ROTATION_HALF_INTERVAL
        assert state.players[1].rot_period is None

    def test_no_albert_player(self) -> None:
        state = GameState.create()
        state.players = state.players[:1]
        assert not force_albert_rotation(state)
        assert not reset_albert_timer(state)
