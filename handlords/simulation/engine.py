"""Phase machine and headless match runner."""

from __future__ import annotations

import json
import logging
from collections.abc import Callable
from pathlib import Path

import pyarrow.parquet as pq

from handlords.config.constants import ALBERT_PLAYER_ID, FLUSH_THRESHOLD, HUMAN_PLAYER_ID
from handlords.config.types import MatchConfig, MatchResult, RngKind
from handlords.domain.ai import run_ai_controllers
from handlords.domain.combat import resolve_pairs
from handlords.domain.grid import CellKind, Grid
from handlords.domain.state import GameState, Phase
from handlords.io.paths import (
    logs_dir,
    match_json_path,
    matches_dir,
    player_log_path,
    tick_log_path,
)
from handlords.io.schemas import (
    MATCH_PAYLOAD_SCHEMA_VERSION,
    PLAYER_LOG_SCHEMA,
    TICK_LOG_SCHEMA,
)
from handlords.simulation.commands import rotate_human_piece, start_game
from handlords.simulation.persistence import empty_columns, flush_columns

logger = logging.getLogger(__name__)


def territory_counts(grid: Grid, n_players: int) -> list[int]:
    """Number of symbol cells owned by each of the first *n_players* players."""
    counts = [0] * n_players
    for cell in grid.cells:
        if cell.kind == CellKind.SYMBOL and cell.owner < n_players:
            counts[cell.owner] += 1
    return counts


def evaluate_outcome(counts: list[int]) -> Phase | None:
    """Lost if the human is wiped out, Won if the opponent is.

    Each verdict needs the other side to still hold territory, so a
    simultaneous wipe-out yields ``None`` and the game keeps playing.
    """
    human = counts[HUMAN_PLAYER_ID]
    opponent = counts[ALBERT_PLAYER_ID]
    if human == 0 and opponent > 0:
        return Phase.LOST
    if opponent == 0 and human > 0:
        return Phase.WON
    return None


def step_fixed(state: GameState) -> Phase:
    """Advance one fixed tick. Only the Playing phase does anything."""
    if state.phase != Phase.PLAYING:
        return state.phase

    state.tick += 1
    for player in state.players:
        player.tick_losses = 0

    resolve_pairs(state, state.config.pairs_per_tick)

    outcome = evaluate_outcome(territory_counts(state.grid, len(state.players)))
    if outcome is not None:
        state.phase = outcome
        logger.info("tick %d: level %d %s", state.tick, state.level, outcome.value)
    else:
        run_ai_controllers(state)
    return state.phase


# ---------------------------------------------------------------------------
# Headless matches
# ---------------------------------------------------------------------------


def _deterministic_run_id(config: MatchConfig) -> str:
    """Build reproducible run ID stable across runs for identical configs."""
    if config.rng_kind == RngKind.SYSTEM:
        seed = "random" if config.system_seed is None else config.system_seed
        return f"level{config.level}_system_s{config.seed:04x}_ss{seed}"
    return f"level{config.level}_lfsr_s{config.seed:04x}"


def play_match(
    config: MatchConfig,
    stop_at_tick: int | None = None,
    on_tick: Callable[[GameState], None] | None = None,
) -> GameState:
    """Play from Ready until Won/Lost, ``max_ticks`` or *stop_at_tick*.

    With ``human_rotate_every > 0`` the human piece is rotated before every
    tick whose counter is a positive multiple of that value.
    """
    state = GameState.create(
        seed=config.seed,
        rng_kind=config.rng_kind,
        system_seed=config.system_seed,
        level=config.level,
        config=config.game_config(),
        albert=config.albert_config(),
    )
    start_game(state)
    limit = config.max_ticks if stop_at_tick is None else min(stop_at_tick, config.max_ticks)
    while state.phase == Phase.PLAYING and state.tick < limit:
        if (
            config.human_rotate_every > 0
            and state.tick > 0
            and state.tick % config.human_rotate_every == 0
        ):
            rotate_human_piece(state)
        step_fixed(state)
        if on_tick is not None:
            on_tick(state)
    return state


def run_matches(configs: list[MatchConfig], out_dir: Path) -> list[MatchResult]:
    """Play each match and persist per-tick logs plus one JSON payload per run."""
    if not configs:
        raise ValueError("configs must not be empty")

    out_dir = Path(out_dir)
    logs_dir(out_dir).mkdir(parents=True, exist_ok=True)
    matches_dir(out_dir).mkdir(parents=True, exist_ok=True)

    tick_writer: pq.ParquetWriter | None = None
    player_writer: pq.ParquetWriter | None = None
    tick_columns = empty_columns(TICK_LOG_SCHEMA)
    player_columns = empty_columns(PLAYER_LOG_SCHEMA)
    results: list[MatchResult] = []

    run_ids = [_deterministic_run_id(config) for config in configs]
    if len(set(run_ids)) != len(run_ids):
        raise ValueError("configs must produce distinct run ids")

    try:
        for config, run_id in zip(configs, run_ids, strict=True):

            def record(state: GameState, run_id: str = run_id) -> None:
                nonlocal tick_writer, player_writer
                stats = state.last_stats
                tick_columns["run_id"].append(run_id)
                tick_columns["tick"].append(state.tick)
                tick_columns["phase"].append(state.phase.value)
                tick_columns["attempts"].append(stats.attempts)
                tick_columns["battles"].append(stats.battles)
                tick_columns["same_player"].append(stats.same_player)
                tick_columns["wall_empty"].append(stats.wall_empty)
                tick_columns["rng_state"].append(state.rng.state)

                counts = territory_counts(state.grid, len(state.players))
                for player in state.players:
                    player_columns["run_id"].append(run_id)
                    player_columns["tick"].append(state.tick)
                    player_columns["player_id"].append(player.player_id)
                    player_columns["piece"].append(player.current.name.lower())
                    player_columns["tick_losses"].append(player.tick_losses)
                    player_columns["territory"].append(counts[player.player_id])
                    player_columns["last_rot_tick"].append(player.last_rot_tick)
                    player_columns["rot_period"].append(player.rot_period)

                if len(player_columns["run_id"]) >= FLUSH_THRESHOLD:
                    tick_writer = flush_columns(
                        tick_columns, tick_log_path(out_dir), tick_writer, TICK_LOG_SCHEMA
                    )
                    player_writer = flush_columns(
                        player_columns, player_log_path(out_dir), player_writer, PLAYER_LOG_SCHEMA
                    )

            state = play_match(config, on_tick=record)
            territory = tuple(territory_counts(state.grid, len(state.players)))
            logger.info(
                "%s finished: %s after %d ticks, territory %s",
                run_id,
                state.phase.value,
                state.tick,
                territory,
            )

            payload = {
                "run_id": run_id,
                "outcome": state.phase.value,
                "ticks": state.tick,
                "territory": list(territory),
                "metadata": {
                    **config.to_metadata(),
                    "grid_width": state.grid.width,
                    "grid_height": state.grid.height,
                    "final_rng_state": state.rng.state,
                    "schema_version": MATCH_PAYLOAD_SCHEMA_VERSION,
                },
            }
            match_json_path(out_dir, run_id).write_text(
                json.dumps(payload, ensure_ascii=False, indent=2)
            )
            results.append(
                MatchResult(
                    run_id=run_id,
                    outcome=state.phase.value,
                    ticks=state.tick,
                    territory=territory,
                )
            )

        tick_writer = flush_columns(
            tick_columns, tick_log_path(out_dir), tick_writer, TICK_LOG_SCHEMA
        )
        player_writer = flush_columns(
            player_columns, player_log_path(out_dir), player_writer, PLAYER_LOG_SCHEMA
        )
    finally:
        if tick_writer is not None:
            tick_writer.close()
        if player_writer is not None:
            player_writer.close()

    return results


def run_match(config: MatchConfig, out_dir: Path) -> MatchResult:
    """Single-run convenience wrapper around ``run_matches``."""
    return run_matches([config], out_dir)[0]
